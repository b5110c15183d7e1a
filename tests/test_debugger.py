import io
import re

import pytest

from minishellpy.command import Command, Pipeline, create_command
from minishellpy.constants import BLACK, BOLD, GREEN, RESET, YELLOW
from minishellpy.debugger import (
    format_bool,
    format_command,
    format_pipeline,
    format_str,
    format_str_arr,
    format_token,
    format_tokens,
    print_bool,
    print_command,
    print_pipeline,
    print_str,
    print_str_arr,
    print_token,
    print_tokens,
)
from minishellpy.parser import tokenize
from minishellpy.tokens import ChainOperator, Token, TokenType

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def plain(text):
    return _ANSI.sub("", text)


def test_format_bool_values():
    assert format_bool(True) == YELLOW + "true" + RESET
    assert format_bool(False) == YELLOW + "false" + RESET


def test_format_str_none():
    assert format_str(None) == BOLD + "null" + RESET


@pytest.mark.parametrize("text", ["test", "lorem ipsum", "it's a test", ""])
def test_format_str_plain_text_is_quoted(text):
    result = format_str(text)
    assert result.startswith(GREEN + "'")
    assert result.endswith("'" + RESET)
    assert plain(result) == f"'{text}'"


@pytest.mark.parametrize(
    "char, letter",
    [("\a", "a"), ("\b", "b"), ("\t", "t"), ("\n", "n"),
     ("\v", "v"), ("\f", "f"), ("\r", "r"), ("\x1b", "e")],
)
def test_format_str_escapes_control_chars(char, letter):
    result = format_str(f"x{char}y")
    assert plain(result) == f"'x\\{letter}y'"
    assert YELLOW + "\\" + letter + GREEN in result


def test_format_str_arr_none():
    assert format_str_arr(None) == BOLD + "null\n" + RESET


def test_format_str_arr_lists_items_then_null():
    items = ["lorem", "ipsum", "dollar"]
    result = plain(format_str_arr(items))
    assert result == "[ " + "".join(f"'{s}', " for s in items) + "null ]"


def test_format_str_arr_empty():
    assert plain(format_str_arr([])) == "[ null ]"


def test_format_token_word():
    result = plain(format_token(Token(TokenType.WORD, "echo")))
    assert result == "{ type: WORD, value: 'echo' }"


@pytest.mark.parametrize("token_type", list(TokenType))
def test_format_token_type_names(token_type):
    result = format_token(Token(token_type, "x"))
    assert YELLOW + token_type.name + RESET in result


def test_format_token_none():
    assert format_token(None) == BOLD + "null\n" + RESET


def test_format_tokens_one_line_per_token():
    tokens = tokenize("echo hello || wc")
    result = plain(format_tokens(tokens))
    lines = result.splitlines()
    assert lines[0] == "["
    assert lines[-1] == "]"
    assert lines[-2] == "  null"
    assert len(lines) == len(tokens) + 3
    assert all(line.startswith("  { type: ") for line in lines[1:-2])


def test_format_tokens_none():
    assert format_tokens(None) == BOLD + "null\n" + RESET


def test_format_command_none():
    assert format_command(None) == BOLD + "null" + RESET + "\n"


def test_format_command_with_redirect():
    command = create_command(tokenize("ls > log.txt"), 0, 2)
    result = plain(format_command(command))
    assert result.startswith("{\n  args         : [ 'ls', null ],\n")
    assert "  is redirect  : true,\n" in result
    assert "  output file  : 'log.txt',\n" in result
    assert "  input file   : null,\n" in result
    assert result.endswith("  delimiter    : null\n}\n")


def test_format_command_heredoc_shows_empty_string():
    command = create_command(tokenize("cat << EOF"), 0, 2)
    result = plain(format_command(command))
    assert "  heredoc      : '',\n" in result
    assert "  delimiter    : 'EOF'\n" in result


def test_format_pipeline_and():
    commands = [
        create_command(tokenize("echo hello world"), 0, 2),
        create_command(tokenize("ls -la > log.txt"), 0, 3),
    ]
    result = plain(format_pipeline(Pipeline(commands, ChainOperator.AND)))
    assert result.startswith("{\n  commands: [\n    {\n")
    assert result.endswith("    null\n  ],\n  operator: AND(&&)\n}\n")
    assert result.count("    {\n") == len(commands)
    assert "      output file  : 'log.txt'" in result


def test_format_pipeline_or_and_undefined():
    or_result = format_pipeline(Pipeline([], ChainOperator.OR))
    assert YELLOW + "OR" + RESET + "(||)" in or_result
    undefined = format_pipeline(Pipeline([Command()], ChainOperator.UNDEFINED))
    assert BLACK + "undefined" + RESET in undefined


def test_format_pipeline_without_commands_list():
    pipeline = Pipeline(commands=None, operator=ChainOperator.AND)
    result = format_pipeline(pipeline)
    assert result.startswith("{\n  commands: " + BOLD + "null" + RESET)
    assert format_str(",\n") in result


def test_print_functions_match_format_functions():
    command = create_command(tokenize("sort < input.txt"), 0, 2)
    tokens = tokenize("echo hi")
    pipeline = Pipeline([command], ChainOperator.OR)
    cases = [
        (print_bool, format_bool, True),
        (print_str, format_str, "a\tb"),
        (print_str_arr, format_str_arr, ["a", "b"]),
        (print_token, format_token, tokens[0]),
        (print_tokens, format_tokens, tokens),
        (print_command, format_command, command),
        (print_pipeline, format_pipeline, pipeline),
    ]
    for printer, formatter, value in cases:
        out = io.StringIO()
        printer(value, out)
        assert out.getvalue() == formatter(value)


def test_print_defaults_to_stdout(capsys):
    print_bool(False)
    assert capsys.readouterr().out == format_bool(False)