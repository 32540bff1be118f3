"""Gradle build descriptors, property files and wrapper resources.

Most scripts are mostly static Groovy and live as Jinja2 templates under
``modscaffold/templates/gradle``.  ``build.gradle`` and the convention
plugins are variant-selected: the location must be a member of
:class:`BuildLocation` / :class:`PluginLocation`.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from modscaffold.fetch import Fetcher
from modscaffold.parameters import ProjectParameters
from modscaffold.templates import TemplateRenderer, default_renderer
from modscaffold.utils import format_version

from .variants import BuildLocation, Platform, PluginLocation, coerce_variant

GRADLE_RAW_URL = "https://raw.githubusercontent.com/gradle/gradle"

# Shared library versions written to dependencies.gradle and the README.
LIBRARY_VERSIONS: dict[str, str] = {
    "balm": "21.0.29-SNAPSHOT",
    "kuma": "[21.0,21.2)",
    "night_config": "3.8.1",
    "log4j": "2.20.0",
}

LIBRARY_NAMES: dict[str, str] = {
    "balm": "Balm",
    "kuma": "Kuma",
    "night_config": "Night Config",
    "log4j": "Log4j",
}

_BUILD_TEMPLATES: dict[BuildLocation, str] = {
    BuildLocation.ROOT: "gradle/build/root.gradle.j2",
    BuildLocation.PLUGINS: "gradle/build/plugins.gradle.j2",
    BuildLocation.CORE_API: "gradle/build/library.gradle.j2",
    BuildLocation.CORE_UTILS: "gradle/build/library.gradle.j2",
    BuildLocation.CORE_APP_COMMON: "gradle/build/core_app_common.gradle.j2",
    BuildLocation.PLATFORM_FABRIC: "gradle/build/platform_fabric.gradle.j2",
    BuildLocation.PLATFORM_FORGE: "gradle/build/platform_forge.gradle.j2",
    BuildLocation.PLATFORM_NEOFORGE: "gradle/build/platform_neoforge.gradle.j2",
}

_BUILD_HEADERS: dict[BuildLocation, str] = {
    BuildLocation.CORE_API: "Core:Api",
    BuildLocation.CORE_UTILS: "Core:Utils",
}

_PLUGIN_TEMPLATES: dict[PluginLocation, str] = {
    PluginLocation.COMMON: "gradle/plugins/type-common.gradle.j2",
    PluginLocation.LIBRARY: "gradle/plugins/type-library.gradle.j2",
    PluginLocation.PLATFORM: "gradle/plugins/type-platform.gradle.j2",
}

_WRAPPER_PROPERTIES = (
    "distributionBase=GRADLE_USER_HOME",
    "distributionPath=wrapper/dists",
    "distributionUrl=https\\://services.gradle.org/distributions/gradle-{version}-bin.zip",
    "networkTimeout=10000",
    "validateDistributionUrl=true",
    "zipStoreBase=GRADLE_USER_HOME",
    "zipStorePath=wrapper/dists",
)


def _platform_values(platforms: Iterable[Platform | str]) -> list[str]:
    return [coerce_variant(Platform, p, "Platform").value for p in platforms]


# ---------------------------------------------------------------------------
# Variant-selected scripts
# ---------------------------------------------------------------------------


def generate_build_gradle(
    location: BuildLocation | str,
    platforms: Iterable[Platform | str] = tuple(Platform),
    renderer: TemplateRenderer | None = None,
) -> str:
    """Return the ``build.gradle`` for one Gradle project path.

    Raises:
        UnrecognizedVariantError: If *location* is not a :class:`BuildLocation`.
    """
    location = coerce_variant(BuildLocation, location, "Build location")
    context: dict[str, Any] = {
        "header": _BUILD_HEADERS.get(location, ""),
        "platforms": _platform_values(platforms),
    }
    return (renderer or default_renderer()).render(_BUILD_TEMPLATES[location], context)


def generate_plugin_gradle(
    location: PluginLocation | str,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Return one ``type-<location>.gradle`` convention plugin.

    Raises:
        UnrecognizedVariantError: If *location* is not a :class:`PluginLocation`.
    """
    location = coerce_variant(PluginLocation, location, "Plugin location")
    return (renderer or default_renderer()).render(_PLUGIN_TEMPLATES[location], {})


# ---------------------------------------------------------------------------
# Project-wide scripts
# ---------------------------------------------------------------------------


def generate_gradle_properties(
    params: ProjectParameters,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Return ``gradle.properties`` holding every project parameter."""
    return (renderer or default_renderer()).render(
        "gradle/gradle.properties.j2", params.as_dict()
    )


def generate_dependencies_gradle(renderer: TemplateRenderer | None = None) -> str:
    """Return ``dependencies.gradle`` with the shared library coordinates."""
    return (renderer or default_renderer()).render(
        "gradle/dependencies.gradle.j2", {"library_versions": LIBRARY_VERSIONS}
    )


def generate_settings_gradle(
    params: ProjectParameters,
    platforms: Iterable[Platform | str] = tuple(Platform),
    renderer: TemplateRenderer | None = None,
) -> str:
    """Return ``settings.gradle`` including every core and platform module."""
    context = {**params.as_dict(), "platforms": _platform_values(platforms)}
    return (renderer or default_renderer()).render("gradle/settings.gradle.j2", context)


def generate_wrapper_properties(params: ProjectParameters) -> str:
    """Return ``gradle/wrapper/gradle-wrapper.properties``."""
    version = format_version(params.gradle_version)
    return "\n".join(_WRAPPER_PROPERTIES).format(version=version) + "\n"


# ---------------------------------------------------------------------------
# Fetched wrapper resources
# ---------------------------------------------------------------------------


def wrapper_url(params: ProjectParameters, filename: str, base_url: str = GRADLE_RAW_URL) -> str:
    """URL of a wrapper file in the Gradle repository at the selected release tag."""
    return f"{base_url.rstrip('/')}/{params.gradle_version}/{filename}"


async def fetch_wrapper_jar(
    params: ProjectParameters, fetcher: Fetcher, base_url: str = GRADLE_RAW_URL
) -> bytes:
    """Download ``gradle-wrapper.jar`` for the selected Gradle release."""
    return await fetcher.fetch_bytes(
        wrapper_url(params, "gradle/wrapper/gradle-wrapper.jar", base_url)
    )


async def fetch_gradlew(
    params: ProjectParameters, fetcher: Fetcher, base_url: str = GRADLE_RAW_URL
) -> bytes:
    """Download the POSIX ``gradlew`` launcher script."""
    return await fetcher.fetch_bytes(wrapper_url(params, "gradlew", base_url))


async def fetch_gradlew_bat(
    params: ProjectParameters, fetcher: Fetcher, base_url: str = GRADLE_RAW_URL
) -> bytes:
    """Download the Windows ``gradlew.bat`` launcher script."""
    return await fetcher.fetch_bytes(wrapper_url(params, "gradlew.bat", base_url))
