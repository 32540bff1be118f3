"""README.md for the generated project."""

from __future__ import annotations

from collections.abc import Iterable

from modscaffold.parameters import ProjectParameters
from modscaffold.templates import TemplateRenderer, default_renderer

from .gradle import LIBRARY_NAMES, LIBRARY_VERSIONS
from .variants import Platform, coerce_variant


def generate_readme(
    params: ProjectParameters,
    platforms: Iterable[Platform | str] = tuple(Platform),
    renderer: TemplateRenderer | None = None,
) -> str:
    context = {
        **params.as_dict(),
        "platforms": [coerce_variant(Platform, p, "Platform").value for p in platforms],
        "library_table": [
            (LIBRARY_NAMES[key], version) for key, version in LIBRARY_VERSIONS.items()
        ],
    }
    return (renderer or default_renderer()).render("README.md.j2", context)
