"""Recognition of the shell's built-in commands."""

from __future__ import annotations

from .tokens import Token

BUILTIN_NAMES = frozenset({"echo", "cd", "pwd", "export", "unset", "env", "exit"})


def is_builtin(token: Token) -> bool:
    """Return True when the token's value names a built-in command."""
    return token.value in BUILTIN_NAMES