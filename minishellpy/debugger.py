"""Human-readable, colourised dumps of the shell's data structures."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from .command import Command, Pipeline
from .constants import BLACK, BOLD, GREEN, RESET, YELLOW
from .tokens import ChainOperator, Token

_NULL = f"{BOLD}null{RESET}"
_NULL_LINE = f"{BOLD}null\n{RESET}"

_ESCAPES = {
    "\a": "a",
    "\b": "b",
    "\t": "t",
    "\n": "n",
    "\v": "v",
    "\f": "f",
    "\r": "r",
    "\x1b": "e",
}

_CHAIN_LABELS = {
    ChainOperator.AND: f"{YELLOW}AND{RESET}(&&)",
    ChainOperator.OR: f"{YELLOW}OR{RESET}(||)",
}


def format_bool(b: bool) -> str:
    """Render a truth value as a highlighted ``true`` or ``false``."""
    return f"{YELLOW}{'true' if b else 'false'}{RESET}"


def format_str(s: str | None) -> str:
    """Render a string in quotes, spelling out control characters as escapes."""
    if s is None:
        return _NULL
    body = "".join(
        f"{YELLOW}\\{_ESCAPES[char]}{GREEN}" if char in _ESCAPES else char
        for char in s
    )
    return f"{GREEN}'{body}'{RESET}"


def format_str_arr(str_arr: Iterable[str] | None) -> str:
    """Render a list of strings, closed by the null that ends it."""
    if str_arr is None:
        return _NULL_LINE
    items = "".join(f"{format_str(s)}, " for s in str_arr)
    return f"[ {items}{_NULL} ]"


def format_token(token: Token | None) -> str:
    """Render one token with its type and raw value."""
    if token is None:
        return _NULL_LINE
    return (
        f"{{ type: {YELLOW}{token.type.name}{RESET}, "
        f"value: {GREEN}'{token.value}'{RESET} }}"
    )


def format_tokens(tokens: Iterable[Token] | None) -> str:
    """Render a list of tokens, one per line."""
    if tokens is None:
        return _NULL_LINE
    items = "".join(f"  {format_token(token)},\n" for token in tokens)
    return f"[\n{items}  {_NULL}\n]\n"


def _command_fields(command: Command) -> list[tuple[str, str]]:
    return [
        ("args         ", format_str_arr(command.args)),
        ("is redirect  ", format_bool(command.is_redirect)),
        ("input file   ", format_str(command.input_file)),
        ("output file  ", format_str(command.output_file)),
        ("append output", format_bool(command.append_output)),
        ("heredoc      ", format_str(command.heredoc)),
        ("delimiter    ", format_str(command.delimiter)),
    ]


def format_command(command: Command | None) -> str:
    """Render every field of a command."""
    if command is None:
        return f"{_NULL}\n"
    fields = ",\n".join(
        f"  {label}: {value}" for label, value in _command_fields(command)
    )
    return f"{{\n{fields}\n}}\n"


def _format_nested_command(command: Command | None) -> str:
    if command is None:
        return f"    {_NULL}"
    fields = ",\n".join(
        f"      {label}: {value}" for label, value in _command_fields(command)
    )
    return f"    {{\n{fields}\n    }}"


def _format_commands(commands: Sequence[Command] | None) -> str:
    head = "  commands: "
    if commands is None:
        return f"{head}{_NULL}{format_str(',' + chr(10))}"
    items = "".join(f"{_format_nested_command(cmd)},\n" for cmd in commands)
    return f"{head}[\n{items}{_format_nested_command(None)}\n  ],\n"


def _format_chain(operator: ChainOperator) -> str:
    label = _CHAIN_LABELS.get(operator, f"{BLACK}undefined{RESET}")
    return f"  operator: {label}"


def format_pipeline(pipeline: Pipeline) -> str:
    """Render a pipeline's commands and its chain operator."""
    return f"{{\n{_format_commands(pipeline.commands)}{_format_chain(pipeline.operator)}\n}}\n"


def _emit(text: str, file: TextIO | None) -> None:
    (file if file is not None else sys.stdout).write(text)


def print_bool(b: bool, file: TextIO | None = None) -> None:
    """Write :func:`format_bool` output to ``file`` (stdout by default)."""
    _emit(format_bool(b), file)


def print_str(s: str | None, file: TextIO | None = None) -> None:
    """Write :func:`format_str` output to ``file`` (stdout by default)."""
    _emit(format_str(s), file)


def print_str_arr(str_arr: Iterable[str] | None, file: TextIO | None = None) -> None:
    """Write :func:`format_str_arr` output to ``file`` (stdout by default)."""
    _emit(format_str_arr(str_arr), file)


def print_token(token: Token | None, file: TextIO | None = None) -> None:
    """Write :func:`format_token` output to ``file`` (stdout by default)."""
    _emit(format_token(token), file)


def print_tokens(tokens: Iterable[Token] | None, file: TextIO | None = None) -> None:
    """Write :func:`format_tokens` output to ``file`` (stdout by default)."""
    _emit(format_tokens(tokens), file)


def print_command(command: Command | None, file: TextIO | None = None) -> None:
    """Write :func:`format_command` output to ``file`` (stdout by default)."""
    _emit(format_command(command), file)


def print_pipeline(pipeline: Pipeline, file: TextIO | None = None) -> None:
    """Write :func:`format_pipeline` output to ``file`` (stdout by default)."""
    _emit(format_pipeline(pipeline), file)