"""Unit tests for the Gradle generators (modscaffold.generators.gradle).

Tests cover:
- build.gradle per location, including rejection of unknown locations
- Convention plugins
- gradle.properties, dependencies.gradle, settings.gradle
- Wrapper properties and wrapper downloads
"""

from __future__ import annotations

import pytest

from modscaffold.errors import FetchError, UnrecognizedVariantError
from modscaffold.generators import gradle
from modscaffold.generators.variants import BuildLocation, Platform, PluginLocation
from modscaffold.parameters import ProjectParameters

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# build.gradle
# ---------------------------------------------------------------------------


class TestBuildGradle:
    @pytest.mark.parametrize("location", list(BuildLocation))
    def test_every_location_renders(self, location):
        out = gradle.generate_build_gradle(location)
        assert out.strip()
        assert out.endswith("\n")

    def test_root_lists_platforms(self):
        out = gradle.generate_build_gradle("root")
        assert "(name in ['fabric', 'forge', 'neoforge'])" in out

    def test_root_with_subset_of_platforms(self):
        out = gradle.generate_build_gradle(BuildLocation.ROOT, [Platform.FABRIC])
        assert "(name in ['fabric'])" in out

    def test_library_headers(self):
        assert gradle.generate_build_gradle("core:api").startswith("// #:Core:Api Build.gradle")
        assert gradle.generate_build_gradle("core:utils").startswith("// #:Core:Utils Build.gradle")

    def test_platform_scripts_differ(self):
        fabric = gradle.generate_build_gradle(BuildLocation.PLATFORM_FABRIC)
        forge = gradle.generate_build_gradle(BuildLocation.PLATFORM_FORGE)
        assert "fabric-loom" in fabric
        assert "net.minecraftforge.gradle" in forge

    def test_unknown_location_raises(self):
        with pytest.raises(UnrecognizedVariantError):
            gradle.generate_build_gradle("core:app:platform:quilt")

    def test_unknown_platform_raises(self):
        with pytest.raises(UnrecognizedVariantError):
            gradle.generate_build_gradle(BuildLocation.ROOT, ["quilt"])


class TestPluginGradle:
    @pytest.mark.parametrize("location", list(PluginLocation))
    def test_every_plugin_renders(self, location):
        assert gradle.generate_plugin_gradle(location).strip()

    def test_platform_plugin_applies_common(self):
        assert "id 'type-common'" in gradle.generate_plugin_gradle("platform")

    def test_unknown_plugin_raises(self):
        with pytest.raises(UnrecognizedVariantError):
            gradle.generate_plugin_gradle("shared")


# ---------------------------------------------------------------------------
# Project-wide scripts
# ---------------------------------------------------------------------------


class TestProjectScripts:
    def test_gradle_properties(self, params):
        out = gradle.generate_gradle_properties(params)
        assert "project_name       = Demo" in out
        assert "project_id          = demo" in out
        assert "project_group       = com.example" in out
        assert "project_author      = Jane Doe" in out
        assert f"java_version = {params.java_version}" in out

    def test_dependencies_gradle_versions(self):
        out = gradle.generate_dependencies_gradle()
        assert "balm: '21.0.29-SNAPSHOT'," in out
        assert "log4j: '2.20.0'\n" in out
        assert "night_config: '3.8.1'," in out

    def test_settings_includes_modules(self, params):
        out = gradle.generate_settings_gradle(params)
        assert 'rootProject.name = "Demo"' in out
        assert 'include(":core:api")' in out
        assert 'include(":core:app:common")' in out
        for platform in ("fabric", "forge", "neoforge"):
            assert f'include(":core:app:platform:{platform}")' in out

    def test_settings_with_selected_platforms(self, params):
        out = gradle.generate_settings_gradle(params, ["neoforge"])
        assert 'include(":core:app:platform:neoforge")' in out
        assert 'include(":core:app:platform:fabric")' not in out


# ---------------------------------------------------------------------------
# Wrapper
# ---------------------------------------------------------------------------


class TestWrapper:
    def test_wrapper_properties_patch_release(self, params):
        out = gradle.generate_wrapper_properties(params)
        assert (
            "distributionUrl=https\\://services.gradle.org/distributions/gradle-8.12.1-bin.zip"
            in out
        )
        assert out.endswith("zipStorePath=wrapper/dists\n")

    def test_wrapper_properties_drops_zero_patch(self):
        out = gradle.generate_wrapper_properties(ProjectParameters(gradle_version="v8.12.0"))
        assert "gradle-8.12-bin.zip" in out

    def test_wrapper_url_pins_release_tag(self, params):
        url = gradle.wrapper_url(params, "gradlew", "https://raw.example/gradle/")
        assert url == f"https://raw.example/gradle/{params.gradle_version}/gradlew"

    async def test_fetch_wrapper_files(self, params, fake_fetcher):
        jar = await gradle.fetch_wrapper_jar(params, fake_fetcher)
        script = await gradle.fetch_gradlew(params, fake_fetcher)
        bat = await gradle.fetch_gradlew_bat(params, fake_fetcher)
        assert jar.startswith(b"PK")
        assert script.startswith(b"#!/bin/sh")
        assert bat.startswith(b"@rem")
        assert all(params.gradle_version in url for url in fake_fetcher.calls)

    async def test_fetch_failure_propagates(self, params, fake_fetcher):
        fake_fetcher.responses.clear()
        with pytest.raises(FetchError) as exc_info:
            await gradle.fetch_wrapper_jar(params, fake_fetcher)
        assert exc_info.value.status == 404
