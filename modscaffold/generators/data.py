"""Resource manifests: mixin configs, ``pack.mcmeta``, ``mods.toml``, ``fabric.mod.json``.

Each generator builds a plain mapping and hands it to the matching
serializer.  ``${...}`` placeholders are left for Gradle's
``processResources`` expansion to fill at build time.
"""

from __future__ import annotations

from typing import Any

from modscaffold.errors import UnrecognizedVariantError
from modscaffold.formatters import manifest, toml
from modscaffold.parameters import ProjectParameters

from .variants import MixinTarget, Platform, coerce_variant

_COMPATIBILITY_LEVELS: dict[MixinTarget, str] = {
    MixinTarget.COMMON: "JAVA_18",
    MixinTarget.FABRIC: "JAVA_21",
    MixinTarget.FORGE: "JAVA_18",
    MixinTarget.NEOFORGE: "JAVA_21",
}

# Loader-specific placeholders for mods.toml; Fabric uses fabric.mod.json.
_MODS_TOML_VERSIONS: dict[Platform, tuple[str, str]] = {
    Platform.FORGE: ("${forge_loader_version_range}", "[${forge_version},)"),
    Platform.NEOFORGE: ("${neoforge_loader_version_range}", "[${neoforge_version},)"),
}


def mixin_config_name(target: MixinTarget | str, params: ProjectParameters) -> str:
    """File name of the mixin config for *target* (``<id>.mixins.json`` for common)."""
    target = coerce_variant(MixinTarget, target, "Mixin target")
    if target is MixinTarget.COMMON:
        return f"{params.project_id}.mixins.json"
    return f"{params.project_id}.{target.value}.mixins.json"


def mixin_document(target: MixinTarget | str, params: ProjectParameters) -> dict[str, Any]:
    """Build the mixin configuration for one module.

    Raises:
        UnrecognizedVariantError: If *target* is not a :class:`MixinTarget`.
    """
    target = coerce_variant(MixinTarget, target, "Mixin target")
    return {
        "required": True,
        "minVersion": "0.8",
        "package": f"{params.package}.mixins",
        "refmap": "${project_id}.refmap.json",
        "compatibilityLevel": _COMPATIBILITY_LEVELS[target],
        "mixins": [],
        "client": [],
        "server": [],
        "injectors": {"defaultRequire": 1},
    }


def generate_mixin_data(target: MixinTarget | str, params: ProjectParameters) -> str:
    return manifest.serialize(mixin_document(target, params))


def generate_pack_data() -> str:
    """Return ``pack.mcmeta`` for the common module's resources."""
    return manifest.serialize(
        {
            "pack": {
                "description": "${project_name}",
                "pack_format": "${pack_format_number}",
            }
        }
    )


def mods_toml_document(platform: Platform | str) -> dict[str, Any]:
    """Build ``mods.toml`` for Forge or NeoForge.

    Raises:
        UnrecognizedVariantError: For Fabric or any non-platform value;
            Fabric ships ``fabric.mod.json`` instead.
    """
    platform = coerce_variant(Platform, platform, "Platform")
    if platform not in _MODS_TOML_VERSIONS:
        raise _unsupported_mods_toml(platform)
    loader_version, version_range = _MODS_TOML_VERSIONS[platform]
    return {
        "modLoader": "javafml",
        "loaderVersion": loader_version,
        "license": "${project_license}",
        "mods": [
            {
                "modId": "${project_id}",
                "version": "${project_version}",
                "displayName": "${project_name}",
                "logoFile": "${project_id}/icon.png",
                "credits": "${project_credits}",
                "authors": "${project_author}",
                "description": "${project_description}",
            }
        ],
        # Keys are emitted verbatim, so the quoted segment is part of the key.
        'dependencies."${project_id}"': [
            {
                "modId": platform.value,
                "mandatory": True,
                "versionRange": version_range,
                "ordering": "NONE",
                "side": "BOTH",
            },
            {
                "modId": "minecraft",
                "mandatory": True,
                "versionRange": "${minecraft_version_range}",
                "ordering": "NONE",
                "side": "BOTH",
            },
        ],
    }


def generate_mods_toml(platform: Platform | str) -> str:
    return toml.serialize(mods_toml_document(platform))


def mods_toml_name(platform: Platform | str) -> str:
    """``mods.toml`` for Forge, ``neoforge.mods.toml`` for NeoForge."""
    platform = coerce_variant(Platform, platform, "Platform")
    if platform not in _MODS_TOML_VERSIONS:
        raise _unsupported_mods_toml(platform)
    return "mods.toml" if platform is Platform.FORGE else f"{platform.value}.mods.toml"


def _unsupported_mods_toml(platform: Platform) -> UnrecognizedVariantError:
    return UnrecognizedVariantError(
        "mods.toml platform", platform.value, [p.value for p in _MODS_TOML_VERSIONS]
    )


def fabric_mod_document(params: ProjectParameters) -> dict[str, Any]:
    """Build ``fabric.mod.json``."""
    return {
        "schemaVersion": 1,
        "id": "${project_id}",
        "version": "${project_version}",
        "name": "${project_name}",
        "description": "${project_description}",
        "authors": ["${project_author}"],
        "contact": {
            "homepage": "https://fabricmc.net/",
            "sources": "https://github.com/FabricMC/fabric-example-mod",
        },
        "license": "${project_license}",
        "icon": "${project_id}/icon.png",
        "environment": "*",
        "entrypoints": {"main": [f"{params.package}.FabricBootstrap"]},
        "mixins": [
            mixin_config_name(MixinTarget.COMMON, params),
            mixin_config_name(MixinTarget.FABRIC, params),
        ],
        "depends": {
            "fabricloader": ">=${fabric_loader_version}",
            "fabric-api": "*",
            "minecraft": "${minecraft_version}",
            "java": ">=${java_version}",
        },
        "suggests": {"another-mod": "*"},
    }


def generate_mods_json(params: ProjectParameters) -> str:
    return manifest.serialize(fabric_mod_document(params))
