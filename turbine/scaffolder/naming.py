"""Identifier case conversion.

Turns the single name a user passes on the command line into the class,
variable and file names the templates and destination paths are built from.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

from .errors import InvalidIdentifier


# Word boundaries: separators, lower->Upper, and the end of an acronym
# (``XRSpace`` -> ``XR`` + ``Space``).
_SEPARATORS = re.compile(r"[\s_\-]+")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_WORD_CHAR = re.compile(r"[A-Za-z0-9]")
_INVALID_CHAR = re.compile(r"[^A-Za-z0-9_\-\s]")


class DerivedNames(BaseModel):
    """Case-converted forms of one identifier."""

    model_config = ConfigDict(frozen=True)

    name: str
    class_name: str
    variable_name: str
    file_name: str


def tokenize(identifier: str) -> list[str]:
    """Split *identifier* into lowercase words.

    Examples::

        tokenize("my_thing")  -> ["my", "thing"]
        tokenize("MyThing")   -> ["my", "thing"]
        tokenize("XRSpace")   -> ["xr", "space"]
    """
    spaced = _ACRONYM_BOUNDARY.sub(r"\1 \2", identifier)
    spaced = _CAMEL_BOUNDARY.sub(r"\1 \2", spaced)
    return [word.lower() for word in _SEPARATORS.split(spaced) if word]


def derive(identifier: str) -> DerivedNames:
    """Derive class, variable and file names from *identifier*.

    Raises:
        InvalidIdentifier: If the identifier is empty, whitespace-only,
            contains no letters or digits, or contains anything other than
            ASCII letters, digits, underscores, hyphens and whitespace.
    """
    if not identifier or not identifier.strip():
        raise InvalidIdentifier(identifier)

    if not _WORD_CHAR.search(identifier) or _INVALID_CHAR.search(identifier):
        raise InvalidIdentifier(identifier)

    words = tokenize(identifier.strip())

    class_name = "".join(word.capitalize() for word in words)
    return DerivedNames(
        name=identifier.strip(),
        class_name=class_name,
        variable_name=words[0] + "".join(word.capitalize() for word in words[1:]),
        file_name="_".join(words),
    )
