"""Scaffolder runtime configuration.

Typed settings for a run: where the archive goes, which platform modules to
generate, and how the network collaborator behaves.  All settings use
Pydantic v2 models so they are validated at construction time and can be
serialised to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from modscaffold.generators.variants import Platform


class FetchConfig(BaseModel):
    """Timeout, retry policy and upstream URLs for static resources."""

    timeout: float = Field(default=30.0, gt=0, description="Per-request timeout in seconds")
    retries: int = Field(default=0, ge=0, description="Extra attempts after a transport error")
    gradle_raw_url: str = Field(default="https://raw.githubusercontent.com/gradle/gradle")
    gradle_releases_url: str = Field(
        default="https://api.github.com/repos/gradle/gradle/releases"
    )
    license_index_url: str = Field(
        default="https://api.github.com/repos/spdx/license-list-data/contents/text"
    )


class Config(BaseModel):
    """Global scaffolder configuration.

    Created once by the CLI (or by tests) and passed to
    :class:`~modscaffold.pipeline.ScaffoldPipeline`.
    """

    output_dir: Path = Field(default=Path("."))
    platforms: list[Platform] = Field(default_factory=lambda: list(Platform))
    interactive: bool = Field(default=True)
    fetch: FetchConfig = Field(default_factory=FetchConfig)

    @field_validator("platforms")
    @classmethod
    def _drop_repeated_platforms(cls, value: list[Platform]) -> list[Platform]:
        return list(dict.fromkeys(value))

    def archive_path(self, project_name: str) -> Path:
        """Destination of the generated archive for *project_name*."""
        return self.output_dir / f"{project_name}.zip"

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            MODSCAFFOLD_OUTPUT_DIR, MODSCAFFOLD_PLATFORMS,
            MODSCAFFOLD_INTERACTIVE, MODSCAFFOLD_FETCH_TIMEOUT,
            MODSCAFFOLD_FETCH_RETRIES.
        """
        fetch_kwargs: dict[str, Any] = {}
        if os.environ.get("MODSCAFFOLD_FETCH_TIMEOUT"):
            fetch_kwargs["timeout"] = float(os.environ["MODSCAFFOLD_FETCH_TIMEOUT"])
        if os.environ.get("MODSCAFFOLD_FETCH_RETRIES"):
            fetch_kwargs["retries"] = int(os.environ["MODSCAFFOLD_FETCH_RETRIES"])

        kwargs: dict[str, Any] = {"fetch": FetchConfig(**fetch_kwargs)}
        if os.environ.get("MODSCAFFOLD_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["MODSCAFFOLD_OUTPUT_DIR"])
        if os.environ.get("MODSCAFFOLD_PLATFORMS"):
            kwargs["platforms"] = [
                p.strip().lower()
                for p in os.environ["MODSCAFFOLD_PLATFORMS"].split(",")
                if p.strip()
            ]
        if os.environ.get("MODSCAFFOLD_INTERACTIVE"):
            kwargs["interactive"] = os.environ["MODSCAFFOLD_INTERACTIVE"].lower() not in (
                "0",
                "false",
                "no",
            )

        return cls(**kwargs)
