"""Java source stubs for the core and platform modules."""

from __future__ import annotations

from modscaffold.formatters import java
from modscaffold.formatters.java import ClassSpec, FieldSpec, MethodSpec
from modscaffold.parameters import ProjectParameters
from modscaffold.utils import title_case

from .variants import Platform, coerce_variant

_INIT_BODY = ["// Initialization code", "Common.initialize();"]

_BOOTSTRAP_CLASSES: dict[Platform, str] = {
    Platform.FABRIC: "FabricBootstrap",
    Platform.FORGE: "ForgeBootstrap",
    Platform.NEOFORGE: "NeoForgeBootstrap",
}


def helper_package(params: ProjectParameters) -> str:
    return f"{params.package}.platform.services"


def platform_class_name(platform: Platform | str) -> str:
    """``FabricPlatform``, ``ForgePlatform``, ``NeoforgePlatform``."""
    platform = coerce_variant(Platform, platform, "Platform")
    return f"{title_case(platform.value)}Platform"


def bootstrap_class_name(platform: Platform | str) -> str:
    platform = coerce_variant(Platform, platform, "Platform")
    return _BOOTSTRAP_CLASSES[platform]


# ---------------------------------------------------------------------------
# Core module classes
# ---------------------------------------------------------------------------


def api_class(params: ProjectParameters) -> ClassSpec:
    return ClassSpec(name="Api", package=params.package)


def platform_helper_interface(params: ProjectParameters) -> ClassSpec:
    return ClassSpec(
        name="IPlatformHelper", package=helper_package(params), kind="interface"
    )


def utils_class(params: ProjectParameters) -> ClassSpec:
    return ClassSpec(name="Utils", package=params.package)


def common_class(params: ProjectParameters) -> ClassSpec:
    return ClassSpec(
        name="Common",
        package=params.package,
        methods=[
            MethodSpec(
                name="initialize",
                access_modifier="public static",
                body_lines=["// Add any needed initialization code here."],
            )
        ],
    )


def constants_class(params: ProjectParameters) -> ClassSpec:
    return ClassSpec(
        name="Constants",
        package=params.package,
        fields=[
            FieldSpec(
                access_modifier="public",
                static_final=True,
                type="String",
                name="PROJECT_ID",
                initial_value=f'"{params.project_id}"',
            )
        ],
    )


# ---------------------------------------------------------------------------
# Platform module classes
# ---------------------------------------------------------------------------


def platform_class(platform: Platform | str, params: ProjectParameters) -> ClassSpec:
    """The ``IPlatformHelper`` implementation registered for *platform*."""
    return ClassSpec(
        name=platform_class_name(platform),
        package=f"{params.package}.platform",
        interfaces=["IPlatformHelper"],
        imports=[f"{helper_package(params)}.IPlatformHelper"],
    )


def bootstrap_class(platform: Platform | str, params: ProjectParameters) -> ClassSpec:
    """The loader entry point for *platform*.

    Raises:
        UnrecognizedVariantError: If *platform* is not a :class:`Platform`.
    """
    platform = coerce_variant(Platform, platform, "Platform")
    name = _BOOTSTRAP_CLASSES[platform]

    if platform is Platform.FABRIC:
        return ClassSpec(
            name=name,
            package=params.package,
            interfaces=["ModInitializer"],
            imports=["net.fabricmc.api.ModInitializer"],
            methods=[
                MethodSpec(
                    name="onInitialize",
                    access_modifier="public",
                    annotations=["Override"],
                    body_lines=_INIT_BODY,
                )
            ],
        )

    if platform is Platform.FORGE:
        imports = [
            "net.minecraftforge.fml.common.Mod",
            "net.minecraftforge.fml.javafmlmod.FMLJavaModLoadingContext",
        ]
        parameter = "FMLJavaModLoadingContext context"
    else:
        imports = ["net.neoforged.bus.api.IEventBus", "net.neoforged.fml.common.Mod"]
        parameter = "IEventBus modBus"

    return ClassSpec(
        name=name,
        package=params.package,
        imports=imports,
        annotations=["Mod(Constants.PROJECT_ID)"],
        methods=[
            MethodSpec(
                name=name,
                access_modifier="public",
                return_type=None,
                parameters=[parameter],
                body_lines=_INIT_BODY,
            )
        ],
    )


def render(spec: ClassSpec) -> str:
    return java.serialize(spec)
