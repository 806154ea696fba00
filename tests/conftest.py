"""Shared pytest fixtures for the Turbine test suite.

Provides reusable fixtures for:
- A wide Rich console so captured status lines are not wrapped
- A temporary project root and a matching ``Config``
- A small three-file template tree
- KDXr CMake source lists with LF and CRLF line endings
"""

from __future__ import annotations

from pathlib import Path

import pytest

from turbine.config import Config
from turbine.utils import console


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def wide_console():
    """Keep captured Rich output on one line per status so assertions can match it."""
    width = console.width
    console.width = 200
    yield console
    console.width = width


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Empty destination project tree."""
    root = tmp_path / "project"
    root.mkdir()
    yield root


@pytest.fixture
def config(project_root: Path) -> Config:
    """Config rooted at ``project_root`` with a fixed copyright year."""
    return Config(project_root=project_root, year=2024)


@pytest.fixture
def template_tree(tmp_path: Path) -> Path:
    """Template tree with two files at the root and one nested a level deep."""
    root = tmp_path / "tree"
    (root / "nested").mkdir(parents=True)
    (root / "readme.txt").write_text("Example {{ name }}\n", encoding="utf-8")
    (root / "class.h").write_text("class {{ class_name }};\n", encoding="utf-8")
    (root / "nested" / "vars.txt").write_text(
        "{{ variable_name }} {{ file_name }}\n", encoding="utf-8"
    )
    yield root


# ---------------------------------------------------------------------------
# KDXr source lists
# ---------------------------------------------------------------------------

CMAKELISTS_LINES = [
    "set(HEADERS",
    "    action.h",
    "    session.h",
    ")",
    "",
    "set(SOURCES",
    "    action.cpp",
    "    session.cpp",
    ")",
    "",
    "add_library(KDXr ${SOURCES} ${HEADERS})",
]


def make_cmakelists(newline: str = "\n") -> bytes:
    return newline.join(CMAKELISTS_LINES).encode("utf-8") + newline.encode("utf-8")


@pytest.fixture
def kdxr_cmakelists(config: Config) -> Path:
    """``src/KDXr/CMakeLists.txt`` with LF line endings."""
    path = config.kdxr_build_list_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(make_cmakelists("\n"))
    yield path


@pytest.fixture
def kdxr_cmakelists_crlf(config: Config) -> Path:
    """``src/KDXr/CMakeLists.txt`` with CRLF line endings, as checked out on Windows."""
    path = config.kdxr_build_list_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(make_cmakelists("\r\n"))
    yield path


@pytest.fixture
def cmakelists_bytes():
    """Factory for source list contents: ``cmakelists_bytes("\\r\\n")``."""
    return make_cmakelists
