from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CodePoint:
    """A decoded character and the number of source bytes it occupied."""

    char: str
    width: int


@dataclass(frozen=True, slots=True)
class Run:
    """A qualifying run of printable characters and its reported byte offset."""

    text: str
    offset: int
