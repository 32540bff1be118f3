"""Project parameters supplied once per run.

``ProjectParameters`` is a frozen Pydantic model: every generator receives
the same instance and none of them can modify it.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from modscaffold.utils import sanitize_id

DEFAULTS: dict[str, str] = {
    "project_name": "Modular-Multi-Loader-Template",
    "project_version": "1.0.0-BETA.1",
    "project_group": "com.example",
    "project_author": "",
    "project_credits": "",
    "project_description": "",
    "project_license": "MIT",
    "minecraft_version": "1.21.1",
    "pack_format_version": "48",
    "minecraft_version_range": "[1.21, 1.22)",
    "neo_form_version": "1.21-20240613.152323",
    "parchment_minecraft": "1.21.1",
    "parchment_version": "2024.11.17",
    "fabric_version": "0.115.0+1.21.1",
    "fabric_loader_version": "0.16.10",
    "forge_version": "52.0.53",
    "forge_loader_version_range": "[51,)",
    "neoforge_version": "21.1.125",
    "neoforge_loader_version_range": "[1,)",
    "java_version": "21",
    "gradle_version": "v8.12.1",
}


class ProjectParameters(BaseModel):
    """Identity, compatibility versions and metadata of the generated project."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Identity
    project_name: str = Field(default=DEFAULTS["project_name"], min_length=1)
    project_version: str = Field(default=DEFAULTS["project_version"])
    project_group: str = Field(default=DEFAULTS["project_group"], min_length=1)
    project_title: str = Field(default="", description="Defaults to project_name")
    project_id: str = Field(default="", description="Defaults to a sanitized project_name")

    # Metadata
    project_author: str = Field(default=DEFAULTS["project_author"])
    project_credits: str = Field(default=DEFAULTS["project_credits"])
    project_description: str = Field(default=DEFAULTS["project_description"])
    project_license: str = Field(default=DEFAULTS["project_license"])

    # Minecraft compatibility
    minecraft_version: str = Field(default=DEFAULTS["minecraft_version"])
    pack_format_version: str = Field(default=DEFAULTS["pack_format_version"])
    minecraft_version_range: str = Field(default=DEFAULTS["minecraft_version_range"])
    neo_form_version: str = Field(default=DEFAULTS["neo_form_version"])
    parchment_minecraft: str = Field(default=DEFAULTS["parchment_minecraft"])
    parchment_version: str = Field(default=DEFAULTS["parchment_version"])

    # Loaders
    fabric_version: str = Field(default=DEFAULTS["fabric_version"])
    fabric_loader_version: str = Field(default=DEFAULTS["fabric_loader_version"])
    forge_version: str = Field(default=DEFAULTS["forge_version"])
    forge_loader_version_range: str = Field(default=DEFAULTS["forge_loader_version_range"])
    neoforge_version: str = Field(default=DEFAULTS["neoforge_version"])
    neoforge_loader_version_range: str = Field(
        default=DEFAULTS["neoforge_loader_version_range"]
    )

    # Toolchain
    java_version: str = Field(default=DEFAULTS["java_version"])
    gradle_version: str = Field(default=DEFAULTS["gradle_version"])

    @model_validator(mode="before")
    @classmethod
    def _derive_defaults(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            name = data.get("project_name") or DEFAULTS["project_name"]
            if not data.get("project_title"):
                data["project_title"] = name
            if not data.get("project_id"):
                data["project_id"] = sanitize_id(name)
        return data

    # -- Derived values ----------------------------------------------------

    @property
    def package(self) -> str:
        """Root Java package, ``<group>.<id>``."""
        return f"{self.project_group}.{self.project_id}"

    def as_dict(self) -> dict[str, str]:
        """Return a plain ``{name: value}`` mapping."""
        return self.model_dump()

    @classmethod
    def from_file(cls, path: str | Path, **overrides: Any) -> "ProjectParameters":
        """Load parameters from a JSON object file, applying *overrides* on top."""
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError(f"Expected a JSON object in {path}")
        return cls(**{**raw, **overrides})
