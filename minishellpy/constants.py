"""Shell-wide constants: the shell name, exit statuses and terminal styles."""

SHELL_NAME = "minishell"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_UNABLE_TO_EXECUTE = 126
EXIT_COMMAND_NOT_FOUND = 127
EXIT_SIGNAL_BASE = 128

RED = "\033[31m"
YELLOW = "\033[33m"
WHITE = "\033[37m"
CYAN = "\033[36m"
GREEN = "\033[32m"
MAGENTA = "\033[35m"
BLACK = "\033[30m"
RESET = "\033[0m"
BOLD = "\033[1m"