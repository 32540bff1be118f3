"""Scaffold pipeline orchestrator.

Sequences the three steps of a run:

1. COLLECT  -- resolve :class:`ProjectParameters` from a JSON file, ``--set``
   overrides and, in interactive mode, the prompt flow.
2. COMPOSE  -- build the project forest with :class:`ProjectComposer`.
3. ARCHIVE  -- materialize the forest into ``<output>/<project_name>.zip``.

This module is the only place that catches :class:`ScaffoldError`; the
composer and generators let every failure propagate so that no partial
archive is ever written.

Usage::

    python -m modscaffold
    python -m modscaffold --yes --set project_name=Demo --platforms fabric,neoforge
    python -m modscaffold --params project.json -o ./dist
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import time
from pathlib import Path

from pydantic import ValidationError
from rich.logging import RichHandler

from modscaffold.archive import write_archive
from modscaffold.composer import ProjectComposer
from modscaffold.config import Config
from modscaffold.errors import ScaffoldError
from modscaffold.fetch import Fetcher, FetchClient, ReferenceCache
from modscaffold.generators.variants import Platform, coerce_variant
from modscaffold.parameters import ProjectParameters
from modscaffold.prompts import ParameterCollector
from modscaffold.tree import file_paths
from modscaffold.utils import (
    console,
    create_progress,
    format_duration,
    format_size,
    print_error,
    print_success,
    print_summary_table,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pipeline Orchestrator
# ---------------------------------------------------------------------------


class ScaffoldPipeline:
    """Drives one scaffolding run.

    Attributes:
        config: Runtime configuration (output directory, platforms, fetch policy).
        fetcher: Network collaborator shared by the prompts and the composer.
        cache: Reference data memoised for the whole run.
    """

    def __init__(
        self,
        config: Config,
        fetcher: Fetcher | None = None,
        cache: ReferenceCache | None = None,
    ) -> None:
        self.config = config
        self.fetcher = fetcher or FetchClient(
            timeout=config.fetch.timeout,
            retries=config.fetch.retries,
        )
        self.cache = cache or ReferenceCache(
            self.fetcher,
            license_index_url=config.fetch.license_index_url,
            gradle_releases_url=config.fetch.gradle_releases_url,
        )

    async def resolve_parameters(
        self,
        params_file: str | Path | None = None,
        overrides: dict[str, str] | None = None,
    ) -> ProjectParameters:
        """Load parameters from *params_file* and *overrides*, then prompt if interactive."""
        overrides = overrides or {}
        if params_file is not None:
            params = ProjectParameters.from_file(params_file, **overrides)
        else:
            params = ProjectParameters(**overrides)

        if not self.config.interactive:
            return params
        return await ParameterCollector(self.cache, defaults=params).collect()

    async def run(self, params: ProjectParameters) -> Path:
        """Compose the project for *params* and write its archive.

        Returns:
            Path of the written archive.

        Raises:
            ScaffoldError: If composition or any fetch fails; nothing is written.
        """
        start = time.monotonic()
        composer = ProjectComposer(
            params,
            self.fetcher,
            cache=self.cache,
            platforms=self.config.platforms,
            gradle_raw_url=self.config.fetch.gradle_raw_url,
        )
        target = self.config.archive_path(params.project_name)

        with create_progress() as progress:
            task = progress.add_task("Composing project tree...", total=None)
            forest = await composer.compose()
            progress.update(task, description="Writing archive...")
            path = await write_archive(forest, params.project_name, target)

        elapsed = time.monotonic() - start
        print_summary_table(
            {
                "Project": params.project_title,
                "Package": params.package,
                "Platforms": ", ".join(p.value for p in self.config.platforms),
                "Gradle": params.gradle_version,
                "Files": str(len(file_paths(forest))),
                "Archive": f"{path} ({format_size(path.stat().st_size)})",
                "Duration": format_duration(elapsed),
            },
            title="Scaffold Summary",
        )
        print_success(f"Project successfully created: {path}")
        return path


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def _parse_overrides(pairs: list[str], parser: argparse.ArgumentParser) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            parser.error(f"--set expects KEY=VALUE, got '{pair}'")
        overrides[key.strip()] = value
    return overrides


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=verbose)],
    )
    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


async def _main_async(config: Config, params_file: str | None, overrides: dict[str, str]) -> Path:
    pipeline = ScaffoldPipeline(config)
    params = await pipeline.resolve_parameters(params_file, overrides)
    return await pipeline.run(params)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``modscaffold`` and ``python -m modscaffold``."""
    parser = argparse.ArgumentParser(
        prog="modscaffold",
        description="Scaffold a multi-loader Minecraft mod project as a zip archive",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  modscaffold\n"
            "  modscaffold --yes --set project_name=Demo --set project_author=Me\n"
            "  modscaffold --params project.json --platforms fabric,neoforge -o ./dist\n"
        ),
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory for the generated archive (default: $MODSCAFFOLD_OUTPUT_DIR or .)",
    )
    parser.add_argument(
        "--params", "-p",
        default=None,
        help="JSON file with project parameters",
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override one project parameter (repeatable)",
    )
    parser.add_argument(
        "--platforms",
        default=None,
        help="Comma-separated platforms to generate (default: fabric,forge,neoforge)",
    )
    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Skip the prompts and use the given or default parameters",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    overrides = _parse_overrides(args.overrides, parser)

    try:
        config = Config.from_env()
        updates: dict[str, object] = {}
        if args.output:
            updates["output_dir"] = Path(args.output)
        if args.platforms:
            updates["platforms"] = [
                coerce_variant(Platform, p.strip().lower(), "Platform")
                for p in args.platforms.split(",")
                if p.strip()
            ]
        if args.yes:
            updates["interactive"] = False
        config = Config.model_validate({**config.model_dump(), **updates})

        asyncio.run(_main_async(config, args.params, overrides))
    except ScaffoldError as exc:
        logger.debug("Scaffold failed", exc_info=True)
        print_error(f"Error: {exc}")
        sys.exit(1)
    except (ValidationError, ValueError, OSError) as exc:
        print_error(f"Invalid input: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
