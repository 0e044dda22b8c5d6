"""The ``export`` and ``unset`` built-ins."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from minish.env import ShellState, extract_var_name, is_valid_identifier

_ESCAPED = '"$\\'


def _invalid_identifier(err: TextIO, command: str, arg: str) -> None:
    err.write(f"minishell: {command}: `{arg}': not a valid identifier\n")


def format_declare(entry: str) -> str:
    """Render one environment entry as a ``declare -x`` line, without newline.

    The value is double quoted, with ``"``, ``$`` and ``\\`` escaped.
    """
    name, sep, value = entry.partition("=")
    if not sep:
        return f"declare -x {entry}"
    escaped = "".join("\\" + c if c in _ESCAPED else c for c in value)
    return f'declare -x {name}="{escaped}"'


def print_exported(state: ShellState, out: TextIO) -> int:
    """Print every environment entry, sorted, in ``declare -x`` form."""
    for entry in sorted(state.env):
        out.write(format_declare(entry) + "\n")
    return 0


def add_or_update(state: ShellState, arg: str) -> int:
    """Apply one ``NAME`` or ``NAME=value`` export argument to the environment.

    An existing variable is replaced only when a value is given; a new
    variable without a value is stored as ``NAME=``.
    """
    name = extract_var_name(arg)
    index = state.env.find(name)
    if index is not None:
        if "=" in arg:
            state.env.replace(index, arg)
    elif "=" in arg:
        state.env.add(arg)
    else:
        state.env.add(name + "=")
    return 0


def run_export(
    state: ShellState, args: Sequence[str], out: TextIO, err: TextIO
) -> int:
    """Export each argument, or list the environment when there is none.

    Returns 1 if any argument is not a valid identifier, 0 otherwise.
    """
    if len(args) < 2:
        return print_exported(state, out)
    status = 0
    for arg in args[1:]:
        name = extract_var_name(arg)
        if not name or not is_valid_identifier(name):
            _invalid_identifier(err, "export", arg)
            status = 1
        elif add_or_update(state, arg) != 0:
            status = 1
    return status


def run_unset(state: ShellState, args: Sequence[str], err: TextIO) -> int:
    """Remove each named variable; refresh the PATH cache if PATH went away.

    Returns 1 if any argument is not a valid identifier, 0 otherwise.
    """
    status = 0
    path_unset = False
    for arg in args[1:]:
        if not is_valid_identifier(arg):
            _invalid_identifier(err, "unset", arg)
            status = 1
            continue
        index = state.env.find(arg)
        if index is not None:
            if arg == "PATH":
                path_unset = True
            state.env.remove_at(index)
    if path_unset:
        state.paths = state.env.paths()
    return status