"""Closed sets of variants accepted by the variant-selection generators.

Generators accept either the enum member or its string value.  Anything
else raises :class:`~modscaffold.errors.UnrecognizedVariantError`; there is no
fallback artifact.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from modscaffold.errors import UnrecognizedVariantError


class Platform(str, Enum):
    """Supported mod loaders, one sibling module each."""

    FABRIC = "fabric"
    FORGE = "forge"
    NEOFORGE = "neoforge"


class BuildLocation(str, Enum):
    """Gradle project paths that get their own ``build.gradle``."""

    ROOT = "root"
    PLUGINS = "plugins"
    CORE_API = "core:api"
    CORE_UTILS = "core:utils"
    CORE_APP_COMMON = "core:app:common"
    PLATFORM_FABRIC = "core:app:platform:fabric"
    PLATFORM_FORGE = "core:app:platform:forge"
    PLATFORM_NEOFORGE = "core:app:platform:neoforge"

    @classmethod
    def for_platform(cls, platform: Platform | str) -> "BuildLocation":
        platform = coerce_variant(Platform, platform, "Platform")
        return cls(f"core:app:platform:{platform.value}")


class PluginLocation(str, Enum):
    """Convention plugins under ``plugins/src/main/groovy``."""

    COMMON = "common"
    LIBRARY = "library"
    PLATFORM = "platform"


class MixinTarget(str, Enum):
    """Modules that carry a mixin configuration."""

    COMMON = "common"
    FABRIC = "fabric"
    FORGE = "forge"
    NEOFORGE = "neoforge"


E = TypeVar("E", bound=Enum)


def coerce_variant(enum_cls: type[E], value: object, kind: str) -> E:
    """Return the member of *enum_cls* matching *value* or fail fast."""
    if isinstance(value, enum_cls):
        return value
    for member in enum_cls:
        if value == member.value:
            return member
    raise UnrecognizedVariantError(kind, value, [m.value for m in enum_cls])
