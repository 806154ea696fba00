"""Writing rendered content to the destination tree."""

from __future__ import annotations

import os
import tempfile
from enum import Enum
from pathlib import Path

from .errors import WriteError


class EmitResult(str, Enum):
    """Whether ``emit`` created a new file or replaced an existing one."""

    CREATED = "created"
    OVERWRITTEN = "overwritten"


def emit(destination_path: str | Path, content: str) -> EmitResult:
    """Write *content* to *destination_path*, creating parent directories.

    Existing files are overwritten unconditionally.  The content is written to
    a temporary file beside the destination and renamed into place, so the
    destination either holds the complete content or is untouched.  Text is
    written as UTF-8 with no newline translation.

    Raises:
        WriteError: On any permission or I/O failure.  The ``OSError`` is
            chained as ``__cause__``.
    """
    path = Path(destination_path)
    existed = path.exists()

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        _atomic_write(path, content.encode("utf-8"))
    except OSError as exc:
        raise WriteError(path, exc.strerror or str(exc)) from exc

    return EmitResult.OVERWRITTEN if existed else EmitResult.CREATED


def _atomic_write(path: Path, data: bytes) -> None:
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        if path.exists():
            # Replacement keeps the existing file mode.
            os.chmod(tmp_name, path.stat().st_mode & 0o7777)
        else:
            os.chmod(tmp_name, 0o666 & ~_current_umask())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask
