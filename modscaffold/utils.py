"""Shared helpers for the scaffolder.

Provides Rich-based console output, name/path derivation helpers used by the
generators, Gradle version formatting, and an async file writer.
"""

from __future__ import annotations

import asyncio
import re
from pathlib import Path

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Name / path helpers
# ---------------------------------------------------------------------------


def sanitize_id(name: str) -> str:
    """Derive a project id from a free-text project name.

    Lowercases the input and replaces every character outside ``[a-z0-9]``
    with an underscore.

    Examples::

        sanitize_id("Modular-Multi-Loader-Template") -> "modular_multi_loader_template"
        sanitize_id("My Mod 2") -> "my_mod_2"
    """
    return re.sub(r"[^a-z0-9]", "_", name.lower())


def title_case(value: str) -> str:
    """Upper-case the first character, leave the rest untouched."""
    return value[:1].upper() + value[1:]


def group_path(group: str) -> str:
    """Turn a dotted group (``com.example``) into a directory path (``com/example``)."""
    return group.replace(".", "/")


# ---------------------------------------------------------------------------
# Version helpers
# ---------------------------------------------------------------------------

_VERSION_RE = re.compile(r"^v?(\d+)\.(\d+)\.(\d+)(?:-([A-Za-z0-9]+))?$")


def format_version(version: str) -> str:
    """Normalise a Gradle release tag for the distribution URL.

    Drops the leading ``v`` and a zero patch component.  Strings that do not
    look like ``[v]X.Y.Z[-tag]`` are returned unchanged.

    Examples::

        format_version("v8.12.0") -> "8.12"
        format_version("v8.12.1") -> "8.12.1"
        format_version("v8.13.0-RC1") -> "8.13-RC1"
    """
    match = _VERSION_RE.match(version)
    if not match:
        return version
    major, minor, patch, tag = match.groups()
    base = f"{major}.{minor}" if patch == "0" else f"{major}.{minor}.{patch}"
    return f"{base}-{tag}" if tag else base


def format_duration(seconds: float) -> str:
    """Format a duration in seconds as ``3.7s`` or ``1m 5s``."""
    if seconds < 0:
        return "0.0s"
    minutes = int(seconds // 60)
    if minutes:
        return f"{minutes}m {int(seconds % 60)}s"
    return f"{seconds:.1f}s"


def format_size(num_bytes: int) -> str:
    """Human-readable byte count (``512 B``, ``12.3 KB``, ``1.5 MB``)."""
    if num_bytes < 1024:
        return f"{num_bytes} B"
    if num_bytes < 1024 * 1024:
        return f"{num_bytes / 1024:.1f} KB"
    return f"{num_bytes / (1024 * 1024):.1f} MB"


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


async def save_bytes(data: bytes, path: str | Path) -> Path:
    """Write *data* to *path* in a worker thread, creating parent directories."""
    file_path = Path(path)

    def _write() -> None:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_bytes(data)

    await asyncio.to_thread(_write)
    return file_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def create_progress() -> Progress:
    """Create a Rich spinner for the compose and archive steps.

    Returns:
        A ``Progress`` instance suitable for use as a context manager.
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console,
    )
