"""Scaffolding orchestrators.

One generator class per command:

* ``android-manifest`` -- the manifest and string resources of an example.
* ``android-example``  -- a complete Android project skeleton for an example.
* ``kdxr-resource``    -- KDXr frontend, API and OpenXR backend classes, plus
  their registration in the KDXr CMake source list.

Each ``run`` validates its arguments, derives names, renders every template
before writing anything, emits the files and returns a ``ScaffoldReport``.
Fatal problems propagate as ``ScaffoldError`` subclasses.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path, PurePosixPath
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from turbine.config import Config
from turbine.utils import display_path

from .emitter import emit
from .errors import AnchorNotFound, InvalidIdentifier, ReadError
from .injector import AnchorEdit
from .naming import DerivedNames, derive
from .report import Level, ScaffoldReport
from .templates import RenderContext, TemplateRenderer
from .walker import walk


# ---------------------------------------------------------------------------
# Template descriptors
# ---------------------------------------------------------------------------


class TemplateDescriptor(BaseModel):
    """A template and where its output goes.

    ``destination_path_template`` is a ``str.format`` pattern over the
    ``DerivedNames`` fields, relative to the generator's output directory.
    """

    model_config = ConfigDict(frozen=True)

    source_path: str
    destination_path_template: str

    def destination(self, names: DerivedNames) -> PurePosixPath:
        return PurePosixPath(self.destination_path_template.format(**names.model_dump()))


def _descriptors(*pairs: tuple[str, str]) -> tuple[TemplateDescriptor, ...]:
    return tuple(
        TemplateDescriptor(source_path=source, destination_path_template=dest)
        for source, dest in pairs
    )


ANDROID_MANIFEST_TEMPLATES = _descriptors(
    ("android_example/app/src/main/AndroidManifest.xml.j2", "app/src/main/AndroidManifest.xml"),
    ("android_example/app/src/main/res/values/strings.xml.j2", "app/src/main/res/values/strings.xml"),
)

ANDROID_EXAMPLE_TEMPLATES = _descriptors(
    ("android_example/CMakeLists.txt.j2", "CMakeLists.txt"),
    ("android_example/settings.gradle.kts.j2", "settings.gradle.kts"),
    ("android_example/app/build.gradle.kts.j2", "app/build.gradle.kts"),
) + ANDROID_MANIFEST_TEMPLATES

ANDROID_EXAMPLE_TREE = "android_example/files"

KDXR_FRONTEND_TEMPLATES = _descriptors(
    ("kdxr_resource/frontend/class.h.j2", "{file_name}.h"),
    ("kdxr_resource/frontend/class.cpp.j2", "{file_name}.cpp"),
)

KDXR_BACKEND_TEMPLATES = _descriptors(
    ("kdxr_resource/backend/api_class.h.j2", "api/api_{file_name}.h"),
    ("kdxr_resource/backend/class.h.j2", "openxr/openxr_{file_name}.h"),
    ("kdxr_resource/backend/class.cpp.j2", "openxr/openxr_{file_name}.cpp"),
)


# ---------------------------------------------------------------------------
# Base generator
# ---------------------------------------------------------------------------


class Generator(ABC):
    """Shared plumbing for the concrete generators."""

    command: ClassVar[str] = ""
    description: ClassVar[str] = ""
    # (argument name, help text, required)
    arguments: ClassVar[tuple[tuple[str, str, bool], ...]] = ()

    def __init__(
        self, config: Config | None = None, renderer: TemplateRenderer | None = None
    ) -> None:
        self.config = config or Config()
        self.renderer = renderer or TemplateRenderer(self.config.templates_path)

    # -- Public API --------------------------------------------------------

    @abstractmethod
    def run(self, *args: str) -> ScaffoldReport:
        """Scaffold everything for one invocation and report what was done."""

    @abstractmethod
    def templates(self) -> list[str]:
        """Template names this generator renders, relative to the template directory."""

    # -- Helpers -----------------------------------------------------------

    def _build_context(self, names: DerivedNames, **extra: str | None) -> RenderContext:
        """Build the render context once per run; the year is read here and nowhere else."""
        year = self.config.year or datetime.now().year
        return RenderContext.from_names(names, year=str(year), **extra)

    def _render_descriptors(
        self,
        descriptors: Iterable[TemplateDescriptor],
        names: DerivedNames,
        context: RenderContext,
        output_dir: Path,
    ) -> list[tuple[Path, str]]:
        return [
            (output_dir / descriptor.destination(names), self.renderer.render(descriptor.source_path, context))
            for descriptor in descriptors
        ]

    def _emit_all(self, rendered: Iterable[tuple[Path, str]], report: ScaffoldReport) -> None:
        for path, content in rendered:
            result = emit(path, content)
            report.emitted(path, result, self._display(path))

    def _display(self, path: Path) -> str:
        return display_path(path, self.config.project_root)


def render_tree(
    renderer: TemplateRenderer,
    template_root: Path,
    output_dir: Path,
    context: RenderContext,
) -> list[tuple[Path, str]]:
    """Render every file under *template_root* for mirroring into *output_dir*.

    Returns ``(destination, content)`` pairs in walk order.  A trailing
    ``.j2`` suffix is dropped from the destination name; every other relative
    path is kept as is.
    """
    rendered: list[tuple[Path, str]] = []
    for source, relative in walk(template_root):
        if relative.suffix == ".j2":
            relative = relative.with_suffix("")
        rendered.append((output_dir / relative, renderer.render_path(source, context)))
    return rendered


def _require(identifier: str | None) -> str:
    if identifier is None or not identifier.strip():
        raise InvalidIdentifier(identifier or "")
    return identifier.strip()


# ---------------------------------------------------------------------------
# Android
# ---------------------------------------------------------------------------


class AndroidManifestGenerator(Generator):
    """Writes only ``AndroidManifest.xml`` and the ``strings.xml`` it references."""

    command = "android-manifest"
    description = "Generates the Android manifest for an existing example"
    arguments = (
        ("name", "Example directory name under examples/", True),
        ("friendly_name", "Human-readable application label (defaults to NAME)", False),
    )

    def run(self, name: str, friendly_name: str | None = None) -> ScaffoldReport:
        names = derive(name)
        label = _require(friendly_name) if friendly_name is not None else names.name
        context = self._android_context(names, label)
        android_dir = self.config.android_path(names.name)

        report = ScaffoldReport(generator=self.command)
        rendered = self._render_descriptors(ANDROID_MANIFEST_TEMPLATES, names, context, android_dir)
        self._emit_all(rendered, report)

        report.add("success", f"Created Android manifest for example {label}")
        return report

    def templates(self) -> list[str]:
        return [d.source_path for d in ANDROID_MANIFEST_TEMPLATES]

    def _android_context(self, names: DerivedNames, friendly_name: str) -> RenderContext:
        prefix = self.config.android.application_id_prefix
        return self._build_context(
            names,
            friendly_name=friendly_name,
            application_id=f"{prefix}.{names.file_name}",
        )


class AndroidExampleGenerator(AndroidManifestGenerator):
    """Generates the skeleton of an Android project for an existing example.

    The static tree under ``android_example/files/`` is mirrored into
    ``examples/<name>/android/`` (each file rendered, ``.j2`` suffixes
    dropped), then the per-example build files and manifest are rendered on
    top of it.
    """

    command = "android-example"
    description = "Generates the skeleton of an Android project for an existing example"
    arguments = (
        ("name", "Example directory name under examples/", True),
        ("friendly_name", "Human-readable application label", True),
    )

    def run(self, name: str, friendly_name: str) -> ScaffoldReport:
        names = derive(name)
        label = _require(friendly_name)
        context = self._android_context(names, label)
        android_dir = self.config.android_path(names.name)

        report = ScaffoldReport(generator=self.command)
        tree_root = self.renderer.template_dir / ANDROID_EXAMPLE_TREE
        rendered = render_tree(self.renderer, tree_root, android_dir, context)
        rendered += self._render_descriptors(ANDROID_EXAMPLE_TEMPLATES, names, context, android_dir)
        self._emit_all(rendered, report)

        report.add("success", f"Created Android project for example {label}")
        report.add(
            "info",
            f"Please open the {self._display(android_dir)} folder in Android Studio",
            level=Level.INFO,
        )
        return report

    def templates(self) -> list[str]:
        tree = [
            f"{ANDROID_EXAMPLE_TREE}/{relative}"
            for _, relative in walk(self.renderer.template_dir / ANDROID_EXAMPLE_TREE)
        ]
        return tree + [d.source_path for d in ANDROID_EXAMPLE_TEMPLATES]


# ---------------------------------------------------------------------------
# KDXr
# ---------------------------------------------------------------------------


class KDXrResourceGenerator(Generator):
    """Creates a new KDXr resource including frontend and backend classes."""

    command = "kdxr-resource"
    description = "Creates a new KDXr resource including frontend and backend classes"
    arguments = (("name", "Resource name, e.g. reference_space or ReferenceSpace", True),)

    def run(self, name: str) -> ScaffoldReport:
        names = derive(name)
        context = self._build_context(names)
        kdxr_dir = self.config.kdxr_path

        report = ScaffoldReport(generator=self.command)
        frontend = self._render_descriptors(KDXR_FRONTEND_TEMPLATES, names, context, kdxr_dir)
        backend = self._render_descriptors(KDXR_BACKEND_TEMPLATES, names, context, kdxr_dir)
        self._emit_all(frontend + backend, report)

        self._add_to_build_list(names, report)

        report.add("success", f"Created KDXr resource classes for {names.name}")
        report.add("info", "Please run cmake to configure", level=Level.INFO)
        return report

    def templates(self) -> list[str]:
        return [d.source_path for d in KDXR_FRONTEND_TEMPLATES + KDXR_BACKEND_TEMPLATES]

    def build_list_edits(self, names: DerivedNames) -> list[tuple[str, AnchorEdit]]:
        """Return the ``(label, edit)`` pairs that register *names* in the build list."""
        kdxr = self.config.kdxr
        target = self.config.kdxr_build_list_path
        stem = names.file_name
        headers = (f"{stem}.h", f"api/api_{stem}.h", f"openxr/openxr_{stem}.h")
        sources = (f"{stem}.cpp", f"openxr/openxr_{stem}.cpp")
        return [
            ("headers", AnchorEdit(
                target_file=target,
                anchor_literal=kdxr.header_anchor,
                inserted_lines=tuple(kdxr.indent + line for line in headers),
            )),
            ("sources", AnchorEdit(
                target_file=target,
                anchor_literal=kdxr.source_anchor,
                inserted_lines=tuple(kdxr.indent + line for line in sources),
            )),
        ]

    def _add_to_build_list(self, names: DerivedNames, report: ScaffoldReport) -> None:
        """Apply each build-list edit independently.

        An unreadable list or a missing anchor only skips the affected edit.
        """
        for label, edit in self.build_list_edits(names):
            display = self._display(edit.target_file)
            try:
                result = edit.apply()
            except (AnchorNotFound, ReadError) as exc:
                report.warn(f"Did not add {label} to {display}: {exc}", path=edit.target_file)
                continue
            report.injected(edit.target_file, result, display, label)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

GENERATORS: dict[str, type[Generator]] = {
    cls.command: cls
    for cls in (AndroidExampleGenerator, AndroidManifestGenerator, KDXrResourceGenerator)
}


def get_generator(command: str) -> type[Generator]:
    """Look up a generator class by its command name."""
    try:
        return GENERATORS[command]
    except KeyError:
        raise ValueError(
            f"Unknown generator {command!r}; expected one of {', '.join(sorted(GENERATORS))}"
        ) from None
