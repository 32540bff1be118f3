"""Archive materializer: writes a composed forest into a zip archive.

Every entry lives under a single ``<root_name>/`` directory.  Folders are
written as directory entries (so empty folders survive) and files keep the
folder nesting of the tree.  Entries use a fixed timestamp and fixed
permissions, which makes the output byte-identical for identical forests.

Unlike the composer, the materializer is lenient: a node that is neither a
file nor a folder is logged and skipped.
"""

from __future__ import annotations

import asyncio
import io
import logging
import zipfile
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from modscaffold.errors import MalformedNodeError
from modscaffold.tree import FileNode, FolderNode
from modscaffold.utils import save_bytes

logger = logging.getLogger(__name__)

_EPOCH = (1980, 1, 1, 0, 0, 0)
_DIR_MODE = 0o40755
_FILE_MODE = 0o100644
_EXEC_MODE = 0o100755


def materialize(forest: Iterable[Any], root_name: str) -> bytes:
    """Return the zip archive for *forest* as bytes.

    Nodes may be :class:`FileNode` / :class:`FolderNode` instances or plain
    mappings with ``path`` and either ``content`` or ``children``.  With an
    empty forest the archive holds only the ``<root_name>/`` directory.
    """
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        root = f"{root_name.strip('/')}/"
        _write_dir(zf, root)
        _write_nodes(zf, forest, root)
    return buffer.getvalue()


async def write_archive(forest: Iterable[Any], root_name: str, path: str | Path) -> Path:
    """Materialize *forest* and write the archive to *path*."""
    data = await asyncio.to_thread(materialize, list(forest), root_name)
    target = await save_bytes(data, path)
    logger.info("Wrote %d bytes to %s", len(data), target)
    return target


# ---------------------------------------------------------------------------
# Tree walk
# ---------------------------------------------------------------------------


def _write_nodes(zf: zipfile.ZipFile, nodes: Iterable[Any], prefix: str) -> None:
    for node in nodes:
        kind, path, payload = _classify(node)
        if kind is None:
            error = MalformedNodeError(f"Skipping invalid entry under '{prefix}': {node!r}")
            logger.warning("%s", error)
            continue
        name = f"{prefix}{path.strip('/')}"
        if kind == "folder":
            _write_dir(zf, f"{name}/")
            _write_nodes(zf, payload, f"{name}/")
        else:
            executable = bool(getattr(node, "executable", False)) or (
                isinstance(node, Mapping) and bool(node.get("executable"))
            )
            _write_file(zf, name, payload, executable)


def _classify(node: Any) -> tuple[str | None, str, Any]:
    """Return ``(kind, path, payload)``; kind is ``None`` for malformed nodes."""
    if isinstance(node, (FileNode, FolderNode)):
        path = node.path
        children = getattr(node, "children", None)
        content = getattr(node, "content", None)
    elif isinstance(node, Mapping):
        path = node.get("path")
        children = node.get("children")
        content = node.get("content")
    else:
        return None, "", None

    if not isinstance(path, str) or not path.strip("/"):
        return None, "", None
    if isinstance(children, (list, tuple)):
        return "folder", path, children
    if isinstance(content, (str, bytes)):
        return "file", path, content
    return None, "", None


def _write_dir(zf: zipfile.ZipFile, name: str) -> None:
    info = zipfile.ZipInfo(name, date_time=_EPOCH)
    info.external_attr = (_DIR_MODE << 16) | 0x10
    zf.writestr(info, b"")


def _write_file(zf: zipfile.ZipFile, name: str, content: str | bytes, executable: bool) -> None:
    info = zipfile.ZipInfo(name, date_time=_EPOCH)
    info.compress_type = zipfile.ZIP_DEFLATED
    info.external_attr = (_EXEC_MODE if executable else _FILE_MODE) << 16
    data = content.encode("utf-8") if isinstance(content, str) else content
    zf.writestr(info, data)
