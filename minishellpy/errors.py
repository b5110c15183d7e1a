"""Fatal error reporters: each writes a message to stderr and exits."""

from __future__ import annotations

import errno
import os
import sys
from typing import NoReturn

from .constants import (
    EXIT_COMMAND_NOT_FOUND,
    EXIT_FAILURE,
    EXIT_UNABLE_TO_EXECUTE,
    SHELL_NAME,
)


def command_not_found(command: str) -> NoReturn:
    """Report an unknown command and exit with status 127."""
    sys.stderr.write(f"{SHELL_NAME}: Command not found: {command}\n")
    sys.exit(EXIT_COMMAND_NOT_FOUND)


def unable_to_execute(file_path: str) -> NoReturn:
    """Report a permission failure for a file and exit with status 126."""
    sys.stderr.write(f"{SHELL_NAME}: {os.strerror(errno.EACCES)}: {file_path}\n")
    sys.exit(EXIT_UNABLE_TO_EXECUTE)


def system_error(error: OSError) -> NoReturn:
    """Report a system error in the manner of perror and exit with status 1."""
    reason = error.strerror or str(error)
    sys.stderr.write(f"{SHELL_NAME}: {reason}\n")
    sys.exit(EXIT_FAILURE)


def memory_allocation_failed() -> NoReturn:
    """Report an out-of-memory condition and exit with status 1."""
    system_error(OSError(errno.ENOMEM, os.strerror(errno.ENOMEM)))