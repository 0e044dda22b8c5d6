"""Built-in commands that only print or end the shell: echo, env, exit, pwd."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from typing import TextIO

from minish.env import ShellState

_LLONG_MAX = 2**63 - 1
_LLONG_MIN_ABS = 2**63
_SPACES = " \t\n\v\f\r"


class ShellExit(Exception):
    """Raised when the shell has been asked to terminate with *code*."""

    def __init__(self, code: int) -> None:
        super().__init__(f"exit {code}")
        self.code = code


def _stdin_is_tty() -> bool:
    try:
        return sys.stdin is not None and sys.stdin.isatty()
    except (AttributeError, ValueError, OSError):
        return False


def _leave(err: TextIO, code: int) -> ShellExit:
    """Announce the exit on an interactive terminal and build the exception."""
    if _stdin_is_tty():
        err.write("exit\n")
    return ShellExit(code)


def parse_long(text: str) -> int:
    """Parse a signed 64-bit integer the way ``exit`` accepts it.

    Leading and trailing whitespace and one optional sign are allowed; at
    least one ASCII digit is required. Raises ValueError on anything else,
    including values outside the signed 64-bit range.
    """
    i = 0
    n = len(text)
    while i < n and text[i] in _SPACES:
        i += 1
    sign = 1
    if i < n and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    start = i
    while i < n and "0" <= text[i] <= "9":
        i += 1
    if i == start:
        raise ValueError(f"not a number: {text!r}")
    magnitude = int(text[start:i])
    limit = _LLONG_MAX if sign == 1 else _LLONG_MIN_ABS
    if magnitude > limit:
        raise ValueError(f"number out of range: {text!r}")
    while i < n and text[i] in _SPACES:
        i += 1
    if i != n:
        raise ValueError(f"trailing characters: {text!r}")
    return sign * magnitude


def is_n_flag(arg: str) -> bool:
    """Return True for ``-n``, ``-nn``, ... (the echo no-newline option)."""
    return len(arg) > 1 and arg[0] == "-" and all(c == "n" for c in arg[1:])


def _expand_tilde(state: ShellState, arg: str) -> str:
    if arg == "~" or arg.startswith("~/"):
        home = state.env.get("HOME")
        if home is not None:
            return home + arg[1:]
    return arg


def run_echo(state: ShellState, args: Sequence[str], out: TextIO) -> int:
    """Print the arguments separated by spaces; ``-n`` drops the newline."""
    if len(args) < 2:
        out.write("\n")
        return 0
    rest = list(args[1:])
    newline = True
    while rest and is_n_flag(rest[0]):
        newline = False
        rest.pop(0)
    out.write(" ".join(_expand_tilde(state, arg) for arg in rest))
    if newline:
        out.write("\n")
    return 0


def run_env(state: ShellState, args: Sequence[str], out: TextIO, err: TextIO) -> int:
    """Print every environment entry that holds a value."""
    if len(args) > 1:
        err.write("env: too many arguments\n")
        return 1
    for entry in state.env:
        if "=" in entry:
            out.write(entry + "\n")
    return 0


def _exit_with_arg(state: ShellState, arg: str, err: TextIO) -> ShellExit:
    try:
        value = parse_long(arg)
    except ValueError:
        err.write(f"minishell: exit: {arg}: numeric argument required\n")
        return _leave(err, 2)
    return _leave(err, value & 0xFF)


def run_exit(state: ShellState, args: Sequence[str], err: TextIO) -> int:
    """End the shell by raising ShellExit.

    Returns 1 without exiting when given too many arguments.
    """
    argc = len(args)
    if argc == 1:
        raise _leave(err, state.last_exit_status)
    if argc == 2 and args[1] == "--":
        raise _leave(err, state.last_exit_status)
    if argc == 2:
        raise _exit_with_arg(state, args[1], err)
    if args[1] == "--":
        raise _exit_with_arg(state, args[2], err)
    err.write("minishell: exit: too many arguments\n")
    return 1


def run_pwd(state: ShellState, args: Sequence[str], out: TextIO, err: TextIO) -> int:
    """Print the current directory, falling back to PWD if it was removed."""
    if len(args) > 1 and args[1].startswith("-"):
        err.write(f"minishell: pwd: {args[1]}: invalid option\n")
        return 2
    try:
        cwd = os.getcwd()
    except FileNotFoundError as exc:
        pwd = state.env.get("PWD")
        if pwd is not None:
            out.write(pwd + "\n")
            return 0
        err.write(f"minishell: pwd: {exc.strerror}\n")
        return 1
    except OSError as exc:
        err.write(f"minishell: pwd: {exc.strerror}\n")
        return 1
    out.write(cwd + "\n")
    return 0