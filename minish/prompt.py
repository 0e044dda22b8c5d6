"""The interactive prompt: ``user@directory> `` coloured by the last status."""

from __future__ import annotations

import os
from typing import Optional

from minish.env import ShellState

# Colour codes wrapped in \001 ... \002 so line editors skip them when
# measuring the prompt width.
RESET = "\001\033[0m\002"
BLACK = "\001\033[0;30m\002"
RED = "\001\033[0;31m\002"
GREEN = "\001\033[0;32m\002"
YELLOW = "\001\033[0;33m\002"
BLUE = "\001\033[0;34m\002"
MAGENTA = "\001\033[0;35m\002"
CYAN = "\001\033[0;36m\002"
WHITE = "\001\033[0;37m\002"

_FALLBACK_NAME = "minishell"


def current_dir_name(path: str) -> str:
    """Return the last component of *path*; the root stays ``/``."""
    if path == "/":
        return "/"
    slash = path.rfind("/")
    if slash < 0:
        return path
    return path[slash + 1 :]


def format_prompt(user: Optional[str], directory: Optional[str], color: str) -> str:
    """Build ``user@directory> `` in colour, or ``minishell> `` if either is missing."""
    if user is None or directory is None:
        head = _FALLBACK_NAME
    else:
        head = f"{user}@{directory}"
    return f"{BLUE}{head}{color}> {RESET}"


def _working_dir_name() -> Optional[str]:
    try:
        return current_dir_name(os.getcwd())
    except OSError:
        return None


def get_prompt(state: ShellState) -> str:
    """Return the prompt for the next line: green after success, red otherwise."""
    color = GREEN if state.last_exit_status == 0 else RED
    user = os.environ.get("USER")
    return format_prompt(user, _working_dir_name(), color)