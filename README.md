# minishellpy

A small shell prompt and the building blocks of a shell: a quote-aware
tokenizer, a command builder, and a debugger that renders the resulting
structures as coloured text.

## Running the prompt

```
minishellpy
```

The prompt is `minishell$ `. Every line that is not empty is added to the
line-editing history when the `readline` module is available. End the session
with end-of-file (Ctrl-D), which exits with status 0; Ctrl-C exits with
status 130.

## What it does not do

The prompt loop only reads lines and records them in the history. It does not
tokenize, run or otherwise act on them: there is no command execution, no
pipes or redirections carried out, and the built-in commands are recognised
by name only, not implemented. Nothing turns a token list into `Pipeline`
objects; pipelines are built by hand.

## Using the library

Split a line into tokens. Quotes group words together, and `|`, `&`, `>` and
`<` are operators:

```python
from minishellpy.parser import parse

tokens = parse("grep -i 'some pattern' < in.txt > out.txt")
```

`parse` raises `InvalidQuoteError` (a `ValueError`) when a quote is left open.
`tokenize` does the same split without checking the quotes first.
`has_invalid_quote`, `next_quote_index` and `next_index` are the helpers the
tokenizer uses.

Each `Token` has a `type` and a `value`. The `TokenType` is `WORD` for words,
`REDIRECT` for `|`, `>`, `<`, `>>` and `<<`, and `CHAIN` for `&&` and `||`
(a single `&` is also a `CHAIN`). The helpers `is_pipe` and `is_chain` in
`minishellpy.tokens` classify a token.

Build a command from a range of tokens, with both ends included:

```python
from minishellpy.command import create_command

command = create_command(tokens, 0, len(tokens) - 1)
command.args         # ['grep', '-i', 'some pattern']
command.input_file   # 'in.txt'
command.output_file  # 'out.txt'
```

A redirection token takes the token after it as its target. `>>` sets
`append_output`, and `<<` sets `heredoc` to an empty string and records the
`delimiter`. `create_command` raises `IndexError` when the range falls outside
the token list. A `Pipeline` holds a list of `Command` objects and a
`ChainOperator` (`AND`, `OR` or `UNDEFINED`).

`minishellpy.builtins.is_builtin` tells whether a token names one of the
built-in commands: `echo`, `cd`, `pwd`, `export`, `unset`, `env` or `exit`.

`minishellpy.text` has the character predicates `is_space` and
`is_special_char`, and `is_same_str`, which compares two strings and treats a
missing one as unequal.

## Error reporters

`minishellpy.errors` holds fatal reporters that write a message prefixed with
`minishell: ` to stderr and exit: `command_not_found` (status 127),
`unable_to_execute` (status 126), `system_error` and
`memory_allocation_failed` (status 1). Exit statuses and terminal styles live
in `minishellpy.constants`.

## Inspecting structures

`minishellpy.debugger` renders values as coloured text. The `format_*`
functions (`format_bool`, `format_str`, `format_str_arr`, `format_token`,
`format_tokens`, `format_command`, `format_pipeline`) return a string; the
matching `print_*` functions write it to a stream, stdout by default:

```python
from minishellpy.debugger import print_tokens

print_tokens(tokens)
```

Control characters in strings are shown escaped, for example `\n` and `\t`,
and missing values are shown as `null`.