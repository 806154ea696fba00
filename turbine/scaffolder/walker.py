"""Template tree enumeration."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path, PurePosixPath

from .errors import TemplateRootNotFound


def walk(template_root: str | Path) -> Iterator[tuple[Path, PurePosixPath]]:
    """Yield ``(source_path, relative_path)`` for every file under *template_root*.

    Directories are never yielded.  Files come out in lexicographic order of
    their relative path components so that output is reproducible.  The generator
    is single-pass; call ``walk`` again for a fresh enumeration.

    Raises:
        TemplateRootNotFound: If *template_root* is missing or not a
            directory.  Raised on the first ``next()``.
    """
    root = Path(template_root)
    if not root.is_dir():
        raise TemplateRootNotFound(root)

    entries = sorted(
        (PurePosixPath(path.relative_to(root).as_posix()), path.resolve())
        for path in root.rglob("*")
        if not path.is_dir()
    )
    for relative, source in entries:
        yield source, relative
