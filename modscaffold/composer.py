"""Tree composer: turns project parameters into the full project forest.

The layout is::

    build.gradle, gradle.properties, dependencies.gradle, settings.gradle,
    LICENSE, README.md, gradlew, gradlew.bat
    gradle/wrapper/...
    plugins/...
    core/api, core/utils, core/app/common, core/app/platform/<platform>

Independent subtrees (the root files that need the network, ``gradle``,
``plugins`` and each module under ``core``) are resolved concurrently with
``asyncio.gather`` and merged back in a fixed order once all of them have
finished.  If any of them fails, ``compose`` raises and no tree is
returned.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from modscaffold.fetch import Fetcher, ReferenceCache
from modscaffold.generators import data, gradle, sources
from modscaffold.generators.license import generate_license
from modscaffold.generators.readme import generate_readme
from modscaffold.generators.variants import (
    BuildLocation,
    MixinTarget,
    Platform,
    PluginLocation,
    coerce_variant,
)
from modscaffold.parameters import ProjectParameters
from modscaffold.templates import TemplateRenderer, default_renderer
from modscaffold.tree import Content, FileNode, FolderNode, TreeNode, ensure_unique, nest
from modscaffold.utils import group_path

logger = logging.getLogger(__name__)

# (relative path, content); ``None`` content declares an empty folder.
Entry = tuple[str, Content | None]


class ProjectComposer:
    """Build the in-memory tree for one project.

    Args:
        params: Parameters shared read-only by every generator.
        fetcher: Network collaborator for the wrapper files and license text.
        cache: Reference-data cache; one is created around *fetcher* if omitted.
        renderer: Jinja2 renderer for the Gradle and README templates.
        platforms: Platform modules to generate, in output order.
        gradle_raw_url: Base URL of the Gradle repository's raw content.
    """

    def __init__(
        self,
        params: ProjectParameters,
        fetcher: Fetcher,
        *,
        cache: ReferenceCache | None = None,
        renderer: TemplateRenderer | None = None,
        platforms: Iterable[Platform | str] = tuple(Platform),
        gradle_raw_url: str = gradle.GRADLE_RAW_URL,
    ) -> None:
        self.params = params
        self.fetcher = fetcher
        self.cache = cache or ReferenceCache(fetcher)
        self.renderer = renderer or default_renderer()
        # Repeated platforms collapse to their first occurrence.
        self.platforms = list(
            dict.fromkeys(coerce_variant(Platform, p, "Platform") for p in platforms)
        )
        self.gradle_raw_url = gradle_raw_url

    # -- Derived paths -----------------------------------------------------

    @property
    def java_root(self) -> str:
        """``src/main/java/<group path>/<id>`` inside a module."""
        return f"src/main/java/{group_path(self.params.project_group)}/{self.params.project_id}"

    @property
    def test_root(self) -> str:
        return f"src/test/java/{group_path(self.params.project_group)}/{self.params.project_id}/"

    # -- Public API --------------------------------------------------------

    async def compose(self) -> list[TreeNode]:
        """Return the complete, ordered project forest.

        Raises:
            ScaffoldError: Any generator or fetch failure; nothing partial is
                returned.
        """
        p = self.params
        logger.debug(
            "Composing '%s' with platforms: %s",
            p.project_name,
            ", ".join(pl.value for pl in self.platforms),
        )

        license_text, gradlew, gradlew_bat, gradle_dir, plugins_dir, core_dir = (
            await asyncio.gather(
                generate_license(p, self.fetcher, self.cache),
                gradle.fetch_gradlew(p, self.fetcher, self.gradle_raw_url),
                gradle.fetch_gradlew_bat(p, self.fetcher, self.gradle_raw_url),
                self.gradle_module(),
                self.plugins_module(),
                self.core_modules(),
            )
        )

        forest: list[TreeNode] = [
            FileNode(
                "build.gradle",
                gradle.generate_build_gradle(BuildLocation.ROOT, self.platforms, self.renderer),
            ),
            FileNode("gradle.properties", gradle.generate_gradle_properties(p, self.renderer)),
            FileNode("dependencies.gradle", gradle.generate_dependencies_gradle(self.renderer)),
            FileNode(
                "settings.gradle",
                gradle.generate_settings_gradle(p, self.platforms, self.renderer),
            ),
            FileNode("LICENSE", license_text),
            FileNode("README.md", generate_readme(p, self.platforms, self.renderer)),
            FileNode("gradlew", gradlew, executable=True),
            FileNode("gradlew.bat", gradlew_bat),
            gradle_dir,
            plugins_dir,
            core_dir,
        ]
        ensure_unique(forest)
        logger.debug("Composed %d top-level nodes", len(forest))
        return forest

    # -- Top-level folders -------------------------------------------------

    async def gradle_module(self) -> FolderNode:
        """``gradle/wrapper`` with the downloaded jar and its properties."""
        jar = await gradle.fetch_wrapper_jar(self.params, self.fetcher, self.gradle_raw_url)
        return FolderNode(
            "gradle",
            nest(
                [
                    ("wrapper/gradle-wrapper.jar", jar),
                    (
                        "wrapper/gradle-wrapper.properties",
                        gradle.generate_wrapper_properties(self.params),
                    ),
                ]
            ),
        )

    async def plugins_module(self) -> FolderNode:
        entries: list[Entry] = [("build.gradle", self._build(BuildLocation.PLUGINS))]
        for location in PluginLocation:
            entries.append(
                (
                    f"src/main/groovy/type-{location.value}.gradle",
                    gradle.generate_plugin_gradle(location, self.renderer),
                )
            )
        return FolderNode("plugins", nest(entries))

    async def core_modules(self) -> FolderNode:
        """``core`` holding ``api``, ``utils`` and ``app``, built concurrently."""
        api, utils, app = await asyncio.gather(
            self.api_module(), self.utils_module(), self.app_modules()
        )
        return FolderNode("core", nest([*api, *utils, *app]))

    # -- Core modules --------------------------------------------------------

    async def api_module(self) -> list[Entry]:
        p = self.params
        java = f"api/{self.java_root}"
        return [
            ("api/build.gradle", self._build(BuildLocation.CORE_API)),
            ("api/src/main/resources/", None),
            (f"api/{self.test_root}", None),
            (f"{java}/Api.java", sources.render(sources.api_class(p))),
            (
                f"{java}/platform/services/IPlatformHelper.java",
                sources.render(sources.platform_helper_interface(p)),
            ),
        ]

    async def utils_module(self) -> list[Entry]:
        p = self.params
        return [
            ("utils/build.gradle", self._build(BuildLocation.CORE_UTILS)),
            ("utils/src/main/resources/", None),
            (f"utils/{self.test_root}", None),
            (f"utils/{self.java_root}/Utils.java", sources.render(sources.utils_class(p))),
        ]

    async def app_modules(self) -> list[Entry]:
        """``app/common`` plus one ``app/platform/<name>`` per selected platform."""
        results = await asyncio.gather(
            self.common_module(),
            *(self.platform_module(platform) for platform in self.platforms),
        )
        logger.debug("Resolved %d app modules", len(results))
        return [entry for module in results for entry in module]

    async def common_module(self) -> list[Entry]:
        p = self.params
        base = "app/common"
        java = f"{base}/{self.java_root}"
        resources = f"{base}/src/main/resources"
        return [
            (f"{base}/build.gradle", self._build(BuildLocation.CORE_APP_COMMON)),
            (f"{resources}/", None),
            (f"{java}/mixins/", None),
            (
                f"{resources}/{data.mixin_config_name(MixinTarget.COMMON, p)}",
                data.generate_mixin_data(MixinTarget.COMMON, p),
            ),
            (f"{resources}/pack.mcmeta", data.generate_pack_data()),
            (f"{base}/{self.test_root}", None),
            (f"{java}/Common.java", sources.render(sources.common_class(p))),
            (f"{java}/Constants.java", sources.render(sources.constants_class(p))),
        ]

    async def platform_module(self, platform: Platform | str) -> list[Entry]:
        """Entries of one loader-specific module.

        Raises:
            UnrecognizedVariantError: If *platform* is not a :class:`Platform`.
        """
        platform = coerce_variant(Platform, platform, "Platform")
        p = self.params
        base = f"app/platform/{platform.value}"
        java = f"{base}/{self.java_root}"
        resources = f"{base}/src/main/resources"
        helper = f"{sources.helper_package(p)}.IPlatformHelper"
        impl = sources.platform_class(platform, p)

        entries: list[Entry] = [
            (f"{base}/build.gradle", self._build(BuildLocation.for_platform(platform))),
            (f"{base}/src/test/java/", None),
            (f"{base}/runs/client/resources/", None),
            (f"{base}/runs/data/", None),
            (f"{base}/runs/server/", None),
            (f"{resources}/META-INF/", None),
            (f"{java}/mixins/", None),
            (
                f"{resources}/{data.mixin_config_name(platform.value, p)}",
                data.generate_mixin_data(platform.value, p),
            ),
            (f"{resources}/META-INF/services/{helper}", f"{impl.package}.{impl.name}\n"),
            (f"{java}/platform/{impl.name}.java", sources.render(impl)),
        ]

        if platform is Platform.FABRIC:
            entries.append((f"{resources}/fabric.mod.json", data.generate_mods_json(p)))
        else:
            entries.append(
                (
                    f"{resources}/META-INF/{data.mods_toml_name(platform)}",
                    data.generate_mods_toml(platform),
                )
            )

        bootstrap = sources.bootstrap_class(platform, p)
        entries.append((f"{java}/{bootstrap.name}.java", sources.render(bootstrap)))
        return entries

    # -- Helpers -------------------------------------------------------------

    def _build(self, location: BuildLocation) -> str:
        return gradle.generate_build_gradle(location, self.platforms, self.renderer)
