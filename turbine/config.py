"""Turbine configuration.

Typed settings for the generators.  All settings use Pydantic v2 models so
they can be validated at construction time and serialised to/from JSON or
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


_BUNDLED_TEMPLATES = Path(__file__).parent / "scaffolder" / "templates"


class AndroidConfig(BaseModel):
    """Where Android example projects live and how they are identified."""

    examples_dir: str = Field(default="examples", description="Examples root, relative to the project root")
    application_id_prefix: str = Field(
        default="com.kdab",
        pattern=r"^[A-Za-z][A-Za-z0-9_]*(\.[A-Za-z][A-Za-z0-9_]*)*$",
        description="Java package prefix used for the namespace and applicationId",
    )


class KDXrConfig(BaseModel):
    """Location of the KDXr sources and the anchors of its CMake source list."""

    source_dir: str = Field(default="src/KDXr", description="KDXr sources, relative to the project root")
    build_list: str = Field(default="CMakeLists.txt", description="Source list, relative to source_dir")
    header_anchor: str = Field(default="set(HEADERS", min_length=1)
    source_anchor: str = Field(default="set(SOURCES", min_length=1)
    indent: str = Field(default="    ", description="Prefix of every line added to the source list")


class Config(BaseModel):
    """Global Turbine configuration.

    Instances are typically created once by the CLI entry point and then
    passed to whichever generator runs.
    """

    project_root: Path = Field(default=Path("."))
    template_dir: Path | None = Field(
        default=None, description="Template directory override; bundled templates when unset"
    )
    year: int | None = Field(
        default=None, ge=1970, description="Copyright year; the current year when unset"
    )
    android: AndroidConfig = Field(default_factory=AndroidConfig)
    kdxr: KDXrConfig = Field(default_factory=KDXrConfig)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def templates_path(self) -> Path:
        """Template directory in effect: the override, else the bundled templates."""
        return self.template_dir or _BUNDLED_TEMPLATES

    @property
    def examples_path(self) -> Path:
        """Root directory holding one folder per example."""
        return self.project_root / self.android.examples_dir

    @property
    def kdxr_path(self) -> Path:
        """Directory of the KDXr frontend sources."""
        return self.project_root / self.kdxr.source_dir

    @property
    def kdxr_build_list_path(self) -> Path:
        """The CMake file listing KDXr headers and sources."""
        return self.kdxr_path / self.kdxr.build_list

    def android_path(self, name: str) -> Path:
        """Android project directory for example *name*."""
        return self.examples_path / name / "android"

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            TURBINE_PROJECT_ROOT, TURBINE_TEMPLATE_DIR, TURBINE_YEAR,
            TURBINE_APPLICATION_ID_PREFIX, TURBINE_KDXR_DIR.
        """
        android_kwargs: dict[str, Any] = {}
        if os.environ.get("TURBINE_APPLICATION_ID_PREFIX"):
            android_kwargs["application_id_prefix"] = os.environ["TURBINE_APPLICATION_ID_PREFIX"]

        kdxr_kwargs: dict[str, Any] = {}
        if os.environ.get("TURBINE_KDXR_DIR"):
            kdxr_kwargs["source_dir"] = os.environ["TURBINE_KDXR_DIR"]

        template_dir = os.environ.get("TURBINE_TEMPLATE_DIR")
        year = os.environ.get("TURBINE_YEAR")

        return cls(
            project_root=Path(os.environ.get("TURBINE_PROJECT_ROOT", ".")),
            template_dir=Path(template_dir) if template_dir else None,
            year=int(year) if year else None,
            android=AndroidConfig(**android_kwargs),
            kdxr=KDXrConfig(**kdxr_kwargs),
        )
