"""Turbine scaffolder -- generates Android example projects and KDXr resources.

Templates bundled under ``turbine/scaffolder/templates/`` are rendered with a
``RenderContext`` built from the names derived from one identifier, and
written into the project tree.

Quick usage::

    from pathlib import Path

    from turbine.config import Config
    from turbine.scaffolder import KDXrResourceGenerator

    report = KDXrResourceGenerator(Config(project_root=Path("."))).run("reference_space")
    report.print_summary()
"""

from turbine.scaffolder.emitter import EmitResult, emit
from turbine.scaffolder.errors import (
    AnchorNotFound,
    InvalidIdentifier,
    InvalidTemplate,
    ReadError,
    ScaffoldError,
    TemplateNotFound,
    TemplateRootNotFound,
    UnboundPlaceholder,
    WriteError,
)
from turbine.scaffolder.generator import (
    GENERATORS,
    AndroidExampleGenerator,
    AndroidManifestGenerator,
    Generator,
    KDXrResourceGenerator,
    TemplateDescriptor,
    get_generator,
    render_tree,
)
from turbine.scaffolder.injector import AnchorEdit, InjectResult, inject_after
from turbine.scaffolder.naming import DerivedNames, derive
from turbine.scaffolder.report import ScaffoldReport
from turbine.scaffolder.templates import PLACEHOLDERS, RenderContext, TemplateRenderer
from turbine.scaffolder.walker import walk

__all__ = [
    "GENERATORS",
    "PLACEHOLDERS",
    "AnchorEdit",
    "AnchorNotFound",
    "AndroidExampleGenerator",
    "AndroidManifestGenerator",
    "DerivedNames",
    "EmitResult",
    "Generator",
    "InjectResult",
    "InvalidIdentifier",
    "InvalidTemplate",
    "KDXrResourceGenerator",
    "ReadError",
    "RenderContext",
    "ScaffoldError",
    "ScaffoldReport",
    "TemplateDescriptor",
    "TemplateNotFound",
    "TemplateRenderer",
    "TemplateRootNotFound",
    "UnboundPlaceholder",
    "WriteError",
    "derive",
    "emit",
    "get_generator",
    "inject_after",
    "render_tree",
    "walk",
]
