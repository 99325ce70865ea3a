from __future__ import annotations

import unicodedata
from typing import Callable

from .config import ScanConfig

# Code points carrying the Unicode White_Space property.
WHITE_SPACE = frozenset(
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def is_letter(char: str) -> bool:
    return unicodedata.category(char).startswith("L")


def is_number(char: str) -> bool:
    return unicodedata.category(char).startswith("N")


def is_space(char: str) -> bool:
    return char in WHITE_SPACE


def is_punctuation(char: str) -> bool:
    return unicodedata.category(char).startswith("P")


def is_printable(char: str, config: ScanConfig) -> bool:
    """Return True when any enabled category accepts the character."""
    if config.letters and is_letter(char):
        return True
    if config.numbers and is_number(char):
        return True
    if config.space and is_space(char):
        return True
    if config.punctuation and is_punctuation(char):
        return True
    return False


def build_predicate(config: ScanConfig) -> Callable[[str], bool]:
    """Bind the enabled category tests of config into a single predicate."""
    checks: list[Callable[[str], bool]] = []
    if config.letters:
        checks.append(is_letter)
    if config.numbers:
        checks.append(is_number)
    if config.space:
        checks.append(is_space)
    if config.punctuation:
        checks.append(is_punctuation)

    def predicate(char: str) -> bool:
        return any(check(char) for check in checks)

    return predicate
