"""Splitting a prompt line into tokens."""

from __future__ import annotations

from .text import is_space, is_special_char
from .tokens import Token, TokenType

QUOTES = frozenset("'\"")


class InvalidQuoteError(ValueError):
    """Raised when a prompt contains a quote that is never closed."""

    def __init__(self, prompt: str) -> None:
        super().__init__("invalid quote")
        self.prompt = prompt


def has_invalid_quote(prompt: str) -> bool:
    """Return True when a single or double quote in the prompt is left unclosed."""
    pos = 0
    while pos < len(prompt):
        char = prompt[pos]
        if char in QUOTES:
            closing = prompt.find(char, pos + 1)
            if closing == -1:
                return True
            pos = closing
        pos += 1
    return False


def next_quote_index(prompt: str, quote: str) -> int:
    """Return the index of the first ``quote`` in the prompt, or its length if absent."""
    index = prompt.find(quote)
    return len(prompt) if index == -1 else index


def next_index(prompt: str) -> int:
    """Return the index where the current plain word ends."""
    return next(
        (pos for pos, char in enumerate(prompt) if is_space(char) or is_special_char(char)),
        len(prompt),
    )


def _special_token(prompt: str, pos: int) -> Token:
    char = prompt[pos]
    following = prompt[pos + 1] if pos + 1 < len(prompt) else ""
    value = char * 2 if following == char else char
    if char == "&" or value == "||":
        token_type = TokenType.CHAIN
    else:
        token_type = TokenType.REDIRECT
    return Token(token_type, value)


def tokenize(prompt: str) -> list[Token]:
    """Split a prompt into word, redirection and chain tokens."""
    tokens: list[Token] = []
    pos = 0
    while pos < len(prompt):
        char = prompt[pos]
        if is_space(char):
            pos += 1
        elif char in QUOTES:
            rest = prompt[pos + 1:]
            length = next_quote_index(rest, char)
            tokens.append(Token(TokenType.WORD, rest[:length]))
            pos += length + 2
        elif is_special_char(char):
            token = _special_token(prompt, pos)
            tokens.append(token)
            pos += len(token.value)
        else:
            rest = prompt[pos:]
            length = next_index(rest)
            tokens.append(Token(TokenType.WORD, rest[:length]))
            pos += length
    return tokens


def parse(prompt: str) -> list[Token]:
    """Check the prompt's quoting and split it into tokens."""
    if has_invalid_quote(prompt):
        raise InvalidQuoteError(prompt)
    return tokenize(prompt)