"""Content generators: one function per generated artifact.

Generators are pure functions of :class:`~modscaffold.parameters.ProjectParameters`
(plus a variant selector where relevant).  The only exceptions download
static resources through an injected fetcher: the Gradle wrapper files in
:mod:`.gradle` and the license text in :mod:`.license`.
"""

from modscaffold.generators.variants import (
    BuildLocation,
    MixinTarget,
    Platform,
    PluginLocation,
    coerce_variant,
)

__all__ = [
    "BuildLocation",
    "MixinTarget",
    "Platform",
    "PluginLocation",
    "coerce_variant",
]
