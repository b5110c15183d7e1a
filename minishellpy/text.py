"""Character and string predicates used by the tokenizer."""

from __future__ import annotations

SPECIAL_CHARS = frozenset("|&><")
SPACE_CHARS = frozenset(" \t\n\v\f\r")


def is_same_str(s1: str | None, s2: str | None) -> bool:
    """Return True when both strings are present and exactly equal."""
    if s1 is None or s2 is None:
        return False
    return s1 == s2


def is_special_char(c: str) -> bool:
    """Return True for characters with a special meaning: ``|``, ``&``, ``>``, ``<``."""
    return c in SPECIAL_CHARS


def is_space(c: str) -> bool:
    """Return True for a space or any of the control characters 9 to 13."""
    return c in SPACE_CHARS