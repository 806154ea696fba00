"""End-to-end scaffolding tests.

These run the real CLI against a throwaway checkout layout (``examples/``
and ``src/KDXr/``) with the bundled templates, then check the generated tree
the way a developer would after running the command by hand.
"""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from pathlib import Path
from unittest.mock import patch

import pytest

from turbine.cli import main
from turbine.utils import console


ANDROID_NS = "{http://schemas.android.com/apk/res/android}"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _turbine(*argv: str) -> int:
    """Run the CLI quietly with a clean environment."""
    with patch.dict(os.environ, {}, clear=True):
        with console.capture():
            return main(list(argv))


@pytest.fixture
def checkout(project_root: Path, kdxr_cmakelists_crlf: Path) -> Path:
    """A project root with one example and a CRLF KDXr source list."""
    (project_root / "examples" / "hello_triangle").mkdir(parents=True)
    (project_root / "examples" / "hello_triangle" / "hello_triangle.cpp").write_text(
        "int main() { return 0; }\n", encoding="utf-8"
    )
    yield project_root


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


@pytest.mark.integration
class TestScaffoldEndToEnd:
    def test_android_example(self, checkout: Path):
        code = _turbine("--root", str(checkout), "--year", "2024",
                        "android-example", "hello_triangle", "Hello Triangle")
        assert code == 0

        android = checkout / "examples" / "hello_triangle" / "android"
        manifest = ET.parse(android / "app" / "src" / "main" / "AndroidManifest.xml").getroot()
        lib_name = manifest.find(".//meta-data").get(f"{ANDROID_NS}value")
        assert lib_name == "hello_triangle"

        strings = ET.parse(android / "app" / "src" / "main" / "res" / "values" / "strings.xml").getroot()
        assert strings.find("string[@name='app_name']").text == "Hello Triangle"

        assert (android / "gradle" / "wrapper" / "gradle-wrapper.properties").is_file()
        assert (checkout / "examples" / "hello_triangle" / "hello_triangle.cpp").is_file()

    def test_manifest_only_leaves_project_files_alone(self, checkout: Path):
        assert _turbine("--root", str(checkout), "android-example", "hello_triangle", "Hello") == 0
        gradle = checkout / "examples" / "hello_triangle" / "android" / "app" / "build.gradle.kts"
        gradle.write_text("// edited by hand\n", encoding="utf-8")

        assert _turbine("--root", str(checkout), "android-manifest", "hello_triangle", "Renamed") == 0

        assert gradle.read_text(encoding="utf-8") == "// edited by hand\n"
        strings = ET.parse(
            checkout / "examples" / "hello_triangle" / "android" / "app" / "src" / "main"
            / "res" / "values" / "strings.xml"
        ).getroot()
        assert strings.find("string").text == "Renamed"

    def test_kdxr_resource(self, checkout: Path, kdxr_cmakelists_crlf: Path):
        code = _turbine("--root", str(checkout), "--year", "2024", "kdxr-resource", "ReferenceSpace")
        assert code == 0

        kdxr = checkout / "src" / "KDXr"
        generated = sorted(
            p.relative_to(kdxr).as_posix() for p in kdxr.rglob("*") if p.is_file()
        )
        assert generated == [
            "CMakeLists.txt",
            "api/api_reference_space.h",
            "openxr/openxr_reference_space.cpp",
            "openxr/openxr_reference_space.h",
            "reference_space.cpp",
            "reference_space.h",
        ]

        lines = kdxr_cmakelists_crlf.read_bytes().split(b"\r\n")
        headers = lines.index(b"set(HEADERS")
        sources = lines.index(b"set(SOURCES")
        assert lines[headers + 1:headers + 4] == [
            b"    reference_space.h",
            b"    api/api_reference_space.h",
            b"    openxr/openxr_reference_space.h",
        ]
        assert lines[sources + 1:sources + 3] == [
            b"    reference_space.cpp",
            b"    openxr/openxr_reference_space.cpp",
        ]

    def test_failed_run_writes_nothing(self, checkout: Path, tmp_path: Path):
        before = sorted(p for p in checkout.rglob("*"))
        code = _turbine("--root", str(checkout), "--templates", str(tmp_path / "missing"),
                        "kdxr-resource", "reference_space")
        assert code == 1
        assert sorted(p for p in checkout.rglob("*")) == before
