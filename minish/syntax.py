"""Checks run on a raw input line before it is tokenized."""

from __future__ import annotations

from typing import Optional

_QUOTES = "'\""


class ShellSyntaxError(Exception):
    """An input line the shell refuses to run; the shell's status becomes 2."""

    status = 2

    def __init__(self, message: str) -> None:
        super().__init__(f"minishell: {message}")
        self.message = message


def _is_blank(c: str) -> bool:
    return c == " " or "\a" <= c <= "\r"


def strip_blanks(line: str) -> Optional[str]:
    """Strip surrounding blanks; return None if nothing else is left."""
    start = skip_blanks(line, 0)
    if start == len(line):
        return None
    end = len(line)
    while _is_blank(line[end - 1]):
        end -= 1
    return line[start:end]


def skip_blanks(text: str, i: int) -> int:
    """Return the first index at or after *i* that is not a blank."""
    while i < len(text) and _is_blank(text[i]):
        i += 1
    return i


def skip_quoted(text: str, i: int) -> int:
    """If a quote starts at *i*, return the index just past its closing quote."""
    if i >= len(text) or text[i] not in _QUOTES:
        return i
    quote = text[i]
    close = text.find(quote, i + 1)
    return len(text) if close < 0 else close + 1


def _quote_states(text: str):
    """Yield (index, char, open quote or '') with the quote state updated first."""
    quote = ""
    for i, c in enumerate(text):
        if c in _QUOTES:
            if not quote:
                quote = c
            elif quote == c:
                quote = ""
        yield i, c, quote


def has_unclosed_quotes(text: str) -> bool:
    """Return True if a quote is opened and never closed."""
    quote = ""
    for _, _, quote in _quote_states(text):
        pass
    return bool(quote)


def has_unsupported(text: str) -> bool:
    """Return True for ``\\``, ``;``, ``&`` or ``||`` outside quotes."""
    for i, c, quote in _quote_states(text):
        if quote:
            continue
        if c in "\\;&":
            return True
        if c == "|" and text[i + 1 : i + 2] == "|":
            return True
    return False


def bad_pipe_placement(text: str) -> bool:
    """Return True for a leading, trailing or doubled pipe."""
    if not text:
        return False
    if text[0] == "|" or text[-1] == "|":
        return True
    pipes = 0
    i = 0
    while i < len(text):
        i = skip_blanks(text, i)
        if i >= len(text):
            break
        if text[i] in _QUOTES:
            i = skip_quoted(text, i)
            continue
        pipes = pipes + 1 if text[i] == "|" else 0
        if pipes == 2:
            return True
        i += 1
    return False


def _operator_end(text: str, i: int) -> int:
    if text[i + 1 : i + 2] == text[i]:
        i += 1
    return i + 1


def bad_redirection_placement(text: str) -> bool:
    """Return True for a trailing redirection or two redirections in a row."""
    if not text:
        return False
    if text[-1] in "<>":
        return True
    i = 0
    while i < len(text):
        i = skip_blanks(text, i)
        if i >= len(text):
            break
        if text[i] in _QUOTES:
            i = skip_quoted(text, i)
            continue
        if text[i] in "<>":
            i = skip_blanks(text, _operator_end(text, i))
            if i < len(text) and text[i] in "<>":
                return True
        i += 1
    return False


def redirection_before_pipe(text: str) -> bool:
    """Return True if a redirection is followed directly by a pipe."""
    i = 0
    while i < len(text):
        i = skip_blanks(text, i)
        if i >= len(text):
            break
        if text[i] in _QUOTES:
            i = skip_quoted(text, i)
        elif text[i] in "<>":
            i = skip_blanks(text, _operator_end(text, i))
            if i < len(text) and text[i] == "|":
                return True
        else:
            i += 1
    return False


def check_syntax(line: str) -> Optional[str]:
    """Validate an input line.

    Returns the line without surrounding blanks, or None if it holds only
    blanks. Raises ShellSyntaxError if the line must not be run.
    """
    text = strip_blanks(line)
    if text is None:
        return None
    if has_unclosed_quotes(text):
        raise ShellSyntaxError("unclosed quotes")
    if has_unsupported(line):
        raise ShellSyntaxError("characters not required by the subject")
    if (
        bad_pipe_placement(text)
        or bad_redirection_placement(text)
        or redirection_before_pipe(text)
    ):
        raise ShellSyntaxError("syntax error near unexpected token")
    return text