"""Shared console helpers for Turbine.

All user-facing output goes through the module-level Rich ``console`` so that
tests can capture or silence it in one place.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

# Width of the right-aligned status column, as in Thor's ``say_status``.
STATUS_WIDTH = 12


# ---------------------------------------------------------------------------
# Status lines
# ---------------------------------------------------------------------------


def say_status(status: str, message: str, color: str = "green") -> None:
    """Print a right-aligned, coloured status word followed by *message*.

    Examples::

        say_status("create", "src/KDXr/foo.h")
        say_status("info", "Please run cmake to configure", "blue")
    """
    console.print(
        f"[bold {color}]{escape(status.rjust(STATUS_WIDTH))}[/bold {color}]  {escape(message)}"
    )


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


def print_summary_table(
    rows: list[tuple[str, ...]],
    columns: tuple[str, ...] = ("Item", "Value"),
    title: str = "Summary",
) -> None:
    """Print a simple table.

    Args:
        rows: One tuple of cell values per row.
        columns: Column headers; the first column is dimmed.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for index, column in enumerate(columns):
        table.add_column(column, style="dim" if index == 0 else None, no_wrap=index == 0)

    for row in rows:
        table.add_row(*(escape(str(cell)) for cell in row))

    console.print(table)
    console.print()


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------


def display_path(path: str | Path, root: str | Path) -> str:
    """Return *path* relative to *root* in POSIX form when possible.

    Examples::

        display_path("/work/src/KDXr/foo.h", "/work") -> "src/KDXr/foo.h"
        display_path("/elsewhere/foo.h", "/work")     -> "/elsewhere/foo.h"
    """
    path = Path(path)
    try:
        return path.resolve().relative_to(Path(root).resolve()).as_posix()
    except ValueError:
        return path.as_posix()
