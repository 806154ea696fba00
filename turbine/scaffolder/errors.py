"""Exceptions raised while scaffolding.

Every error carries the piece of context needed to diagnose it without a
verbose re-run: the offending identifier, template, placeholder, path or
anchor.  ``AnchorNotFound`` and ``ReadError`` are downgraded to warnings by the
orchestrator when editing the build list; the rest abort the run.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class InvalidIdentifier(ScaffoldError):
    """Raised when a user-supplied identifier is empty or has no word characters."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Invalid identifier: {identifier!r}")


class TemplateRootNotFound(ScaffoldError):
    """Raised when a template tree root is missing or is not a directory."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)
        super().__init__(f"Template root not found: {self.root}")


class TemplateNotFound(ScaffoldError):
    """Raised when a single template source cannot be loaded."""

    def __init__(self, template: str | Path) -> None:
        self.template = str(template)
        super().__init__(f"Template not found: {self.template}")


class UnboundPlaceholder(ScaffoldError):
    """Raised when a template references a placeholder with no bound value."""

    def __init__(self, key: str, template: str | None = None) -> None:
        self.key = key
        self.template = template
        where = f" in template {template}" if template else ""
        super().__init__(f"Unbound placeholder {key!r}{where}")


class WriteError(ScaffoldError):
    """Raised when a destination file cannot be written.

    The underlying ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Could not write {self.path}{detail}")


class AnchorNotFound(ScaffoldError):
    """Raised when an injection anchor is missing from an existing file."""

    def __init__(self, target: str | Path, anchor: str) -> None:
        self.target = Path(target)
        self.anchor = anchor
        super().__init__(f"Anchor {anchor!r} not found in {self.target}")


class InvalidTemplate(ScaffoldError):
    """Raised when a template source cannot be parsed."""

    def __init__(self, template: str | Path, reason: str) -> None:
        self.template = str(template)
        self.reason = reason
        super().__init__(f"Invalid template {self.template}: {reason}")


class ReadError(ScaffoldError):
    """Raised when an existing file to be edited cannot be read.

    The underlying ``OSError`` or ``UnicodeDecodeError`` is chained as
    ``__cause__``.
    """

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Could not read {self.path}{detail}")
