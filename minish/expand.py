"""Expansion of ``$`` constructs: ``$VAR``, ``${VAR}``, ``$?``, ``$0``, ``$$``."""

from __future__ import annotations

from typing import Optional

from minish.env import ShellState


def _is_ascii_alpha(c: str) -> bool:
    return ("a" <= c <= "z") or ("A" <= c <= "Z")


def is_var_char(c: str, first: bool) -> bool:
    """Return True if *c* may appear in a variable name.

    A first character must be a letter or ``_``; later ones may be digits too.
    """
    if len(c) != 1:
        return False
    if _is_ascii_alpha(c) or c == "_":
        return True
    return not first and "0" <= c <= "9"


def find_next_dollar(text: str, start: int) -> Optional[int]:
    """Return the index of the next ``$`` at or after *start*, or None."""
    if start < 0 or start >= len(text):
        return None
    index = text.find("$", start)
    return None if index < 0 else index


def expansion_info(text: str, dollar_pos: int) -> tuple[str, int]:
    """Describe the ``$`` construct starting at *dollar_pos*.

    Returns ``(info, length)`` where *info* names what to expand (``"?"``,
    ``"0"``, ``"$$"``, a variable name, or ``"$"`` for a literal dollar) and
    *length* is how many characters of *text* the construct covers.
    """
    i = dollar_pos + 1
    if (
        dollar_pos < 0
        or dollar_pos >= len(text)
        or text[dollar_pos] != "$"
        or i >= len(text)
    ):
        return "$", 1
    c = text[i]
    if c == "?":
        return "?", 2
    if c == "0":
        return "0", 2
    if c == "$":
        return "$$", 2
    if c == "{":
        close = text.find("}", i + 1)
        if close < 0:
            return "$", 1
        return text[i + 1 : close], close + 1 - dollar_pos
    if is_var_char(c, first=True):
        end = i
        while end < len(text) and is_var_char(text[end], first=False):
            end += 1
        return text[i:end], end - dollar_pos
    return "$", 1


def expansion_value(state: ShellState, info: Optional[str]) -> str:
    """Return the text that the construct described by *info* expands to."""
    if info is None:
        return ""
    if info == "?":
        return str(state.last_exit_status)
    if info == "0":
        name = state.shell_name
        return name[2:] if name.startswith("./") else name
    if info == "$$":
        return str(state.pid)
    if info == "$":
        return "$"
    value = state.env.get(info)
    return "" if value is None else value


def expand_dollar(state: ShellState, text: str) -> tuple[str, int]:
    """Expand the ``$`` construct at the start of *text*.

    Returns the expanded value and the length of the construct consumed.
    """
    info, length = expansion_info(text, 0)
    return expansion_value(state, info), length