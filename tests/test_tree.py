"""Unit tests for the in-memory tree (modscaffold.tree).

Tests cover:
- FileNode / FolderNode construction and duplicate detection
- nest() folder building, empty folders and path validation
- walk() and file_paths()
"""

from __future__ import annotations

import pytest

from modscaffold.errors import DuplicatePathError, FormatError
from modscaffold.tree import FileNode, FolderNode, ensure_unique, file_paths, nest, walk

pytestmark = pytest.mark.unit


def _node(forest, path):
    return dict(walk(forest)).get(path)


class TestNodes:
    def test_folder_children_become_tuple(self):
        folder = FolderNode("src", [FileNode("a.txt", "a")])
        assert isinstance(folder.children, tuple)

    def test_duplicate_children_raise(self):
        with pytest.raises(DuplicatePathError) as exc_info:
            FolderNode("src", [FileNode("a.txt", "1"), FileNode("a.txt", "2")])
        assert exc_info.value.path == "a.txt"
        assert exc_info.value.parent == "src"

    def test_duplicate_path_error_is_format_error(self):
        with pytest.raises(FormatError):
            ensure_unique([FileNode("x", ""), FolderNode("x")])

    def test_file_defaults(self):
        node = FileNode("gradlew", b"#!/bin/sh")
        assert node.executable is False


class TestNest:
    def test_builds_nested_folders(self):
        forest = nest([("src/main/A.java", "a"), ("src/main/B.java", "b"), ("build.gradle", "g")])
        assert [n.path for n in forest] == ["src", "build.gradle"]
        src = forest[0]
        assert isinstance(src, FolderNode)
        main = src.children[0]
        assert main.path == "main"
        assert [c.path for c in main.children] == ["A.java", "B.java"]

    def test_trailing_slash_declares_empty_folder(self):
        forest = nest([("runs/data/", None), ("runs/server/", "")])
        runs = forest[0]
        assert [c.path for c in runs.children] == ["data", "server"]
        assert all(isinstance(c, FolderNode) and not c.children for c in runs.children)

    def test_declared_folder_can_receive_files(self):
        forest = nest([("META-INF/", None), ("META-INF/mods.toml", "x")])
        assert file_paths(forest) == ["META-INF/mods.toml"]

    def test_keeps_insertion_order(self):
        forest = nest([("b.txt", "b"), ("a/x.txt", "x"), ("c.txt", "c")])
        assert [n.path for n in forest] == ["b.txt", "a", "c.txt"]

    def test_duplicate_file_raises(self):
        with pytest.raises(DuplicatePathError):
            nest([("a/b.txt", "1"), ("a/b.txt", "2")])

    def test_file_and_folder_collision_raises(self):
        with pytest.raises(DuplicatePathError):
            nest([("a", "file"), ("a/b.txt", "x")])
        with pytest.raises(DuplicatePathError):
            nest([("a/b.txt", "x"), ("a", "file")])

    @pytest.mark.parametrize("path", ["", "/abs/path", "a/../b", "a//b", "./a"])
    def test_invalid_paths_raise(self, path):
        with pytest.raises(FormatError):
            nest([(path, "x")])

    def test_binary_content(self):
        forest = nest([("wrapper/gradle-wrapper.jar", b"PK")])
        assert _node(forest, "wrapper/gradle-wrapper.jar").content == b"PK"


class TestWalk:
    def test_walk_is_depth_first(self):
        forest = [
            FolderNode("a", [FileNode("x", ""), FolderNode("b", [FileNode("y", "")])]),
            FileNode("z", ""),
        ]
        assert [p for p, _ in walk(forest)] == ["a", "a/x", "a/b", "a/b/y", "z"]

    def test_walk_with_prefix(self):
        assert [p for p, _ in walk([FileNode("f", "")], prefix="root/")] == ["root/f"]

    def test_file_paths_skip_folders(self):
        forest = [FolderNode("a", [FolderNode("empty"), FileNode("f", "")])]
        assert file_paths(forest) == ["a/f"]

    def test_walk_paths_address_nested_nodes(self):
        forest = nest([("a/b/c.txt", "c")])
        assert isinstance(_node(forest, "a/b"), FolderNode)
        assert _node(forest, "a/b/c.txt").content == "c"
        assert _node(forest, "a/missing") is None
