"""Tests for template tree enumeration (turbine.scaffolder.walker)."""

from __future__ import annotations

from pathlib import Path, PurePosixPath

import pytest

from turbine.scaffolder.errors import TemplateRootNotFound
from turbine.scaffolder.walker import walk


pytestmark = pytest.mark.unit


class TestWalk:
    def test_yields_only_files(self, template_tree: Path):
        relatives = [relative for _, relative in walk(template_tree)]
        assert relatives == [
            PurePosixPath("class.h"),
            PurePosixPath("nested/vars.txt"),
            PurePosixPath("readme.txt"),
        ]

    def test_sources_are_absolute_and_match(self, template_tree: Path):
        for source, relative in walk(template_tree):
            assert source.is_absolute()
            assert source == (template_tree / relative).resolve()

    def test_empty_directories_skipped(self, template_tree: Path):
        (template_tree / "empty" / "deeper").mkdir(parents=True)
        assert len(list(walk(template_tree))) == 3

    def test_hidden_files_included(self, template_tree: Path):
        (template_tree / ".gitignore").write_text("build/\n", encoding="utf-8")
        relatives = [str(relative) for _, relative in walk(template_tree)]
        assert ".gitignore" in relatives

    def test_stable_order(self, template_tree: Path):
        assert list(walk(template_tree)) == list(walk(template_tree))

    def test_single_pass(self, template_tree: Path):
        entries = walk(template_tree)
        assert len(list(entries)) == 3
        assert list(entries) == []

    def test_missing_root(self, tmp_path: Path):
        with pytest.raises(TemplateRootNotFound) as exc_info:
            next(walk(tmp_path / "nope"))
        assert exc_info.value.root == tmp_path / "nope"

    def test_root_is_a_file(self, tmp_path: Path):
        file_root = tmp_path / "file.txt"
        file_root.write_text("x", encoding="utf-8")
        with pytest.raises(TemplateRootNotFound):
            list(walk(file_root))
