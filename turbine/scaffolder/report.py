"""Status report collected during a scaffold run.

Each generator appends one entry per operation it attempts, in order.  The
CLI prints the report at the end of the run with warnings listed last.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field
from rich.markup import escape

from turbine.utils import console, say_status

from .emitter import EmitResult
from .injector import InjectResult


class Level(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"


LEVEL_COLORS: dict[Level, str] = {
    Level.SUCCESS: "green",
    Level.INFO: "blue",
    Level.WARNING: "yellow",
}


class ReportEntry(BaseModel):
    """One line of the status report."""

    status: str
    message: str
    level: Level = Level.SUCCESS
    path: Path | None = None


class ScaffoldReport(BaseModel):
    """Ordered record of everything a generator did."""

    generator: str
    entries: list[ReportEntry] = Field(default_factory=list)

    # -- Recording ---------------------------------------------------------

    def add(
        self,
        status: str,
        message: str,
        level: Level = Level.SUCCESS,
        path: Path | None = None,
    ) -> ReportEntry:
        entry = ReportEntry(status=status, message=message, level=level, path=path)
        self.entries.append(entry)
        return entry

    def emitted(self, path: Path, result: EmitResult, display: str) -> ReportEntry:
        """Record a file written by the emitter."""
        status = "create" if result is EmitResult.CREATED else "force"
        return self.add(status, display, path=path)

    def injected(
        self, path: Path, result: InjectResult, display: str, what: str
    ) -> ReportEntry:
        """Record the outcome of an anchor injection."""
        if result is InjectResult.INSERTED:
            return self.add("insert", f"{display} ({what})", path=path)
        return self.add(
            "unchanged",
            f"{display} does not exist; {what} not added",
            level=Level.INFO,
            path=path,
        )

    def warn(self, message: str, path: Path | None = None) -> ReportEntry:
        return self.add("warning", message, level=Level.WARNING, path=path)

    # -- Queries -----------------------------------------------------------

    @property
    def warnings(self) -> list[ReportEntry]:
        return [e for e in self.entries if e.level is Level.WARNING]

    @property
    def written(self) -> list[Path]:
        """Paths created or overwritten, in the order they were written."""
        return [
            e.path for e in self.entries
            if e.status in ("create", "force") and e.path is not None
        ]

    @property
    def ok(self) -> bool:
        return not self.warnings

    # -- Display -----------------------------------------------------------

    def print_summary(self) -> None:
        """Print every entry, then repeat warnings under a heading."""
        for entry in self.entries:
            say_status(entry.status, entry.message, LEVEL_COLORS[entry.level])

        if self.warnings:
            console.print("\n[yellow bold]Warnings:[/yellow bold]")
            for entry in self.warnings:
                console.print(f"  [yellow]- {escape(entry.message)}[/yellow]")
