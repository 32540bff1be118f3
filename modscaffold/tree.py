"""In-memory project tree.

A tree is a forest (ordered list) of two node types:

* :class:`FileNode` -- a leaf with text or binary content
* :class:`FolderNode` -- an ordered collection of child nodes

Sibling paths must be unique; :class:`FolderNode` refuses duplicates with a
:class:`~modscaffold.errors.DuplicatePathError` when it is built.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Union

from modscaffold.errors import DuplicatePathError, FormatError

Content = Union[str, bytes]


@dataclass(frozen=True)
class FileNode:
    """A generated file.  ``path`` may contain ``/`` when placed at a root."""

    path: str
    content: Content
    executable: bool = False


@dataclass(frozen=True)
class FolderNode:
    """A directory and its children, in insertion order."""

    path: str
    children: tuple["TreeNode", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable but store an immutable tuple.
        object.__setattr__(self, "children", tuple(self.children))
        ensure_unique(self.children, parent=self.path)


TreeNode = Union[FileNode, FolderNode]


def ensure_unique(nodes: Iterable[TreeNode], parent: str = "") -> None:
    """Raise :class:`DuplicatePathError` if two nodes share a path."""
    seen: set[str] = set()
    for node in nodes:
        if node.path in seen:
            raise DuplicatePathError(node.path, parent)
        seen.add(node.path)


def nest(entries: Iterable[tuple[str, Content | None]]) -> list[TreeNode]:
    """Build nested nodes from ``(relative_path, content)`` pairs.

    Path segments become folders, so ``("src/main/A.java", text)`` yields a
    ``src`` folder containing ``main`` containing ``A.java``.  A path ending
    in ``/`` (or with ``None`` content) declares a folder, which stays empty
    unless later entries place files inside it.  Insertion order is kept at
    every level.

    Raises:
        DuplicatePathError: If the same file path appears twice or a file
            and a folder claim the same path.
        FormatError: If a path is empty, absolute or contains ``..``.
    """
    root: dict[str, object] = {}
    for raw_path, content in entries:
        is_folder = content is None or raw_path.endswith("/")
        segments = _split(raw_path)
        level = root
        for depth, segment in enumerate(segments):
            last = depth == len(segments) - 1
            existing = level.get(segment)
            if last and not is_folder:
                if existing is not None:
                    raise DuplicatePathError("/".join(segments))
                level[segment] = FileNode(segment, content)
                continue
            if existing is None:
                existing = level[segment] = {}
            elif not isinstance(existing, dict):
                raise DuplicatePathError("/".join(segments[: depth + 1]))
            level = existing
    return _freeze(root)


def _split(path: str) -> list[str]:
    if not path or path.startswith("/"):
        raise FormatError(f"Tree paths must be relative and non-empty: '{path}'")
    segments = path.rstrip("/").split("/")
    if any(seg in ("", ".", "..") for seg in segments):
        raise FormatError(f"Invalid segment in tree path '{path}'")
    return segments


def _freeze(level: dict[str, object]) -> list[TreeNode]:
    nodes: list[TreeNode] = []
    for name, value in level.items():
        if isinstance(value, dict):
            nodes.append(FolderNode(name, tuple(_freeze(value))))
        else:
            nodes.append(value)  # type: ignore[arg-type]
    return nodes


def walk(forest: Iterable[TreeNode], prefix: str = "") -> Iterator[tuple[str, TreeNode]]:
    """Yield ``(full_path, node)`` depth-first, parents before children."""
    for node in forest:
        full_path = f"{prefix}{node.path.rstrip('/')}"
        yield full_path, node
        if isinstance(node, FolderNode):
            yield from walk(node.children, prefix=f"{full_path}/")


def file_paths(forest: Iterable[TreeNode]) -> list[str]:
    """Return the full path of every file in the forest, in walk order."""
    return [path for path, node in walk(forest) if isinstance(node, FileNode)]
