"""Commands and pipelines built from tokens."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .text import is_same_str
from .tokens import ChainOperator, Token, TokenType


@dataclass
class Command:
    """A single command with its arguments and redirections."""

    args: list[str] = field(default_factory=list)
    is_redirect: bool = False
    input_file: str | None = None
    output_file: str | None = None
    append_output: bool = False
    heredoc: str | None = None
    delimiter: str | None = None

    def _apply_redirect(self, operator: Token, target: Token | None) -> None:
        self.is_redirect = True
        if target is None or target.type is not TokenType.WORD:
            return
        if is_same_str(operator.value, ">"):
            self.output_file = target.value
        elif is_same_str(operator.value, "<"):
            self.input_file = target.value
        elif is_same_str(operator.value, ">>"):
            self.output_file = target.value
            self.append_output = True
        elif is_same_str(operator.value, "<<"):
            self.heredoc = ""
            self.delimiter = target.value


@dataclass
class Pipeline:
    """Commands joined by pipes, with the operator that chains it to the next."""

    commands: list[Command] = field(default_factory=list)
    operator: ChainOperator = ChainOperator.UNDEFINED


def create_command(tokens: Sequence[Token], start: int, end: int) -> Command:
    """Build a command from ``tokens[start]`` through ``tokens[end]`` inclusive.

    A redirection token consumes the token after it as its target.
    """
    if start < 0 or end >= len(tokens):
        raise IndexError(f"token range {start}..{end} out of bounds")
    command = Command()
    indices = iter(range(start, end + 1))
    for idx in indices:
        token = tokens[idx]
        if token.type is TokenType.REDIRECT:
            target = tokens[idx + 1] if idx + 1 < len(tokens) else None
            command._apply_redirect(token, target)
            next(indices, None)
        else:
            command.args.append(token.value)
    return command