"""Shell environment storage and the state shared by the whole shell."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Union

_DEFAULT_SHELL_NAME = "minishell"


def _is_ascii_alpha(c: str) -> bool:
    return ("a" <= c <= "z") or ("A" <= c <= "Z")


def _is_ascii_alnum(c: str) -> bool:
    return _is_ascii_alpha(c) or ("0" <= c <= "9")


def is_valid_identifier(text: Optional[str]) -> bool:
    """Return True if *text* is a shell variable name: [A-Za-z_][A-Za-z0-9_]*."""
    if not text:
        return False
    first, rest = text[0], text[1:]
    if not (_is_ascii_alpha(first) or first == "_"):
        return False
    return all(_is_ascii_alnum(c) or c == "_" for c in rest)


def extract_var_name(arg: str) -> str:
    """Return the variable name part of an export argument.

    ``NAME=value`` gives ``NAME``, ``NAME+=value`` gives ``NAME`` and an
    argument without ``=`` is returned whole.
    """
    eq = arg.find("=")
    if eq < 0:
        return arg
    if eq > 0 and arg[eq - 1] == "+":
        return arg[: eq - 1]
    return arg[:eq]


class Environment:
    """An ordered list of ``NAME=value`` entries, as the shell keeps them."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: list[str] = list(entries)

    def find(self, name: str) -> Optional[int]:
        """Return the index of the entry defining *name*, or None."""
        prefix = name + "="
        for index, entry in enumerate(self._entries):
            if entry.startswith(prefix):
                return index
        return None

    def get(self, name: str) -> Optional[str]:
        """Return the value of *name*, or None if it is not set."""
        index = self.find(name)
        if index is None:
            return None
        return self._entries[index][len(name) + 1 :]

    def add(self, entry: str) -> None:
        """Append a new ``NAME=value`` entry at the end."""
        self._entries.append(entry)

    def replace(self, index: int, entry: str) -> None:
        """Replace the entry at *index*."""
        self._entries[index] = entry

    def remove_at(self, index: int) -> None:
        """Remove the entry at *index*, keeping the order of the others."""
        del self._entries[index]

    def paths(self) -> Optional[list[str]]:
        """Return the non-empty directories of PATH, or None if PATH is unset."""
        value = self.get("PATH")
        if value is None:
            return None
        return [part for part in value.split(":") if part]

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Environment({self._entries!r})"


@dataclass
class ShellState:
    """Everything the running shell keeps between commands."""

    env: Environment = field(default_factory=Environment)
    shell_name: str = _DEFAULT_SHELL_NAME
    pid: int = field(default_factory=os.getpid)
    last_exit_status: int = 0
    paths: Optional[list[str]] = None
    tree: Any = None
    stdin_fd: Optional[int] = None
    stdout_fd: Optional[int] = None
    stderr_fd: Optional[int] = None

    def close(self) -> None:
        """Close the saved standard descriptors."""
        for attr in ("stdin_fd", "stdout_fd", "stderr_fd"):
            fd = getattr(self, attr)
            if fd is not None:
                try:
                    os.close(fd)
                except OSError:
                    pass
                setattr(self, attr, None)

    def __enter__(self) -> "ShellState":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def create_state(
    argv: Optional[Iterable[str]],
    envp: Union[Mapping[str, str], Iterable[str], None],
) -> ShellState:
    """Build the shell state from the program arguments and environment.

    The environment is copied, PATH is split, and the standard descriptors
    are duplicated so that redirections can be undone. Raises OSError if a
    descriptor cannot be duplicated.
    """
    if envp is None:
        entries: list[str] = []
    elif isinstance(envp, Mapping):
        entries = [f"{key}={value}" for key, value in envp.items()]
    else:
        entries = list(envp)
    env = Environment(entries)

    args = list(argv) if argv is not None else []
    shell_name = args[0] if args and args[0] else _DEFAULT_SHELL_NAME

    state = ShellState(
        env=env,
        shell_name=shell_name,
        pid=os.getpid(),
        paths=env.paths(),
    )
    try:
        state.stdin_fd = os.dup(0)
        state.stdout_fd = os.dup(1)
        state.stderr_fd = os.dup(2)
    except OSError:
        state.close()
        raise
    return state