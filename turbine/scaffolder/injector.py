"""Inserting lines into existing text files after a literal anchor line.

Used to register generated sources in a CMake source list.  Injection is not
idempotent: each call inserts another copy of the lines, so callers must not
apply the same edit twice.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict

from .emitter import emit
from .errors import AnchorNotFound, ReadError


_TERMINATORS = ("\r\n", "\n", "\r")
_LINE = re.compile(r"[^\r\n]*(?:\r\n|\n|\r)|[^\r\n]+\Z")


class InjectResult(str, Enum):
    """Outcome of an ``inject_after`` call that did not raise."""

    INSERTED = "inserted"
    SKIPPED_MISSING_TARGET = "skipped_missing_target"


class AnchorEdit(BaseModel):
    """A pending insertion of *inserted_lines* after *anchor_literal*."""

    model_config = ConfigDict(frozen=True)

    target_file: Path
    anchor_literal: str
    inserted_lines: tuple[str, ...]
    insertion_policy: Literal["after_first"] = "after_first"

    def apply(self) -> InjectResult:
        return inject_after(self.target_file, self.anchor_literal, self.inserted_lines)


def inject_after(
    target_file: str | Path,
    anchor: str,
    lines: Sequence[str],
) -> InjectResult:
    """Insert *lines* right after the first line containing *anchor*.

    The anchor is matched against each line including its terminator, so
    ``"set(HEADERS\\r\\n"`` only matches a CRLF line while ``"set(HEADERS"``
    matches either style.  Inserted lines take the anchor line's terminator.
    Everything else in the file is kept byte-for-byte.

    Args:
        target_file: File to edit.
        anchor: Literal text identifying the anchor line.
        lines: Lines to insert, in order, without terminators.

    Returns:
        ``INSERTED`` on success, ``SKIPPED_MISSING_TARGET`` if *target_file*
        does not exist (nothing is created).

    Raises:
        AnchorNotFound: The file exists but no line contains *anchor*.  The
            file is left unchanged.
        ReadError: The file exists but cannot be read as UTF-8 text.
        WriteError: The edited file could not be written back.
    """
    path = Path(target_file)
    if not path.is_file():
        return InjectResult.SKIPPED_MISSING_TARGET

    # newline="" keeps \r\n and \r intact.
    try:
        with path.open(encoding="utf-8", newline="") as handle:
            original = handle.read()
    except OSError as exc:
        raise ReadError(path, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise ReadError(path, f"not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc

    existing = _LINE.findall(original)
    index = next((i for i, line in enumerate(existing) if anchor in line), None)
    if index is None:
        raise AnchorNotFound(path, anchor)

    if not lines:
        return InjectResult.INSERTED

    anchor_line = existing[index]
    terminator = _terminator_of(anchor_line)
    inserted = [line + terminator for line in lines]
    if not terminator:
        # Unterminated last line: borrow the file's style and keep the
        # missing trailing newline at the new end of file.
        terminator = next(
            (_terminator_of(line) for line in existing if _terminator_of(line)), "\n"
        )
        existing[index] = anchor_line + terminator
        inserted = [line + terminator for line in lines[:-1]] + [lines[-1]]

    updated = existing[: index + 1] + inserted + existing[index + 1 :]
    emit(path, "".join(updated))
    return InjectResult.INSERTED


def _terminator_of(line: str) -> str:
    for terminator in _TERMINATORS:
        if line.endswith(terminator):
            return terminator
    return ""
