"""Jinja2 template rendering for scaffolding.

Provides the ``TemplateRenderer`` class which loads Jinja2 templates from the
``turbine/scaffolder/templates/`` directory (or any other directory) and
renders them against a ``RenderContext``.  The context is a closed set of
placeholders: a template that references anything outside that set, or a
placeholder this invocation left unbound, is rejected before any output is
produced.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateSyntaxError,
    UndefinedError,
    meta,
)
from jinja2 import TemplateNotFound as JinjaTemplateNotFound
from pydantic import BaseModel, ConfigDict

from .errors import InvalidTemplate, TemplateNotFound, UnboundPlaceholder
from .naming import DerivedNames


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# Render context
# ---------------------------------------------------------------------------


class RenderContext(BaseModel):
    """Values available to templates.

    The field names are the complete set of recognised placeholders.  Fields
    left as ``None`` are unbound for this invocation.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str | None = None
    class_name: str | None = None
    variable_name: str | None = None
    file_name: str | None = None
    friendly_name: str | None = None
    year: str | None = None
    application_id: str | None = None

    @classmethod
    def from_names(cls, names: DerivedNames, **extra: str | None) -> "RenderContext":
        """Build a context from derived names plus invocation-specific values."""
        return cls(**names.model_dump(), **extra)

    def bindings(self) -> dict[str, str]:
        """Return the bound placeholders as a plain mapping."""
        return {key: value for key, value in self.model_dump().items() if value is not None}


PLACEHOLDERS: frozenset[str] = frozenset(RenderContext.model_fields)


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for scaffolding.

    Templates are looked up by name relative to *template_dir* (``render``),
    by absolute path (``render_path``), or given inline (``render_string``).
    None of these write anything to disk.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
        # No builtins such as range or namespace; only RenderContext fields resolve.
        self.env.globals.clear()

    # -- Rendering ---------------------------------------------------------

    def render(self, template_path: str, context: RenderContext) -> str:
        """Render a template stored under the template directory.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"kdxr_resource/frontend/class.h.j2"``).
            context: Placeholder values.

        Returns:
            The rendered template content.

        Raises:
            TemplateNotFound: If no such template exists.
            UnboundPlaceholder: If the template references a placeholder that
                is unknown or unbound in *context*.
        """
        try:
            source, _, _ = self.env.loader.get_source(self.env, template_path)
        except JinjaTemplateNotFound as exc:
            raise TemplateNotFound(self.template_dir / template_path) from exc
        return self._render_source(source, context, template_path)

    def render_path(self, path: str | Path, context: RenderContext) -> str:
        """Render the template file at *path*, which may live anywhere."""
        path = Path(path)
        try:
            source = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise TemplateNotFound(path) from exc
        return self._render_source(source, context, str(path))

    def render_string(self, template_string: str, context: RenderContext) -> str:
        """Render an inline template string."""
        return self._render_source(template_string, context, None)

    # -- Utility -----------------------------------------------------------

    def placeholders(self, source: str) -> set[str]:
        """Return the placeholder names referenced by template *source*."""
        return meta.find_undeclared_variables(self.env.parse(source))

    # -- Internal ----------------------------------------------------------

    def _render_source(
        self, source: str, context: RenderContext, name: str | None
    ) -> str:
        bindings = context.bindings()
        try:
            referenced = self.placeholders(source)
        except TemplateSyntaxError as exc:
            raise InvalidTemplate(name or "<string>", str(exc.message)) from exc

        for key in sorted(referenced):
            if key not in PLACEHOLDERS or key not in bindings:
                raise UnboundPlaceholder(key, name)

        try:
            return self.env.from_string(source).render(**bindings)
        except UndefinedError as exc:
            raise UnboundPlaceholder(str(exc.message), name) from exc
