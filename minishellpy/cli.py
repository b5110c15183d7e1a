"""Interactive prompt loop of the shell."""

from __future__ import annotations

import argparse
import signal
import sys
from collections.abc import Sequence

from .constants import EXIT_SIGNAL_BASE, EXIT_SUCCESS, SHELL_NAME

try:
    import readline as _readline
except ImportError:  # readline is missing on some platforms
    _readline = None

PROMPT = f"{SHELL_NAME}$ "


def _remember(line: str) -> None:
    if _readline is not None:
        _readline.add_history(line)


def main(argv: Sequence[str] | None = None) -> int:
    """Read prompt lines until end of input, keeping non-empty ones in history."""
    parser = argparse.ArgumentParser(prog=SHELL_NAME)
    parser.parse_args(argv)
    status = EXIT_SUCCESS
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            return status
        except KeyboardInterrupt:
            sys.stdout.write("\n")
            return EXIT_SIGNAL_BASE + signal.SIGINT
        if line:
            _remember(line)


if __name__ == "__main__":
    sys.exit(main())