"""Token types and token predicates."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .text import is_same_str


class TokenType(enum.Enum):
    """Kind of a token: a word, a redirection/pipe, or a chain operator."""

    WORD = enum.auto()
    REDIRECT = enum.auto()
    CHAIN = enum.auto()


class ChainOperator(enum.Enum):
    """Operator joining two pipelines."""

    AND = enum.auto()
    OR = enum.auto()
    UNDEFINED = enum.auto()


@dataclass(frozen=True)
class Token:
    """One unit of a split prompt."""

    type: TokenType
    value: str


def is_pipe(token: Token) -> bool:
    """Return True when the token is a single pipe ``|``."""
    return token.type is TokenType.REDIRECT and is_same_str(token.value, "|")


def is_chain(token: Token) -> bool:
    """Return True when the token is a chain operator such as ``&&`` or ``||``."""
    return token.type is TokenType.CHAIN