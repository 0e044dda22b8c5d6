import pytest

from minish.syntax import (
    ShellSyntaxError,
    bad_pipe_placement,
    bad_redirection_placement,
    check_syntax,
    has_unclosed_quotes,
    has_unsupported,
    redirection_before_pipe,
    skip_blanks,
    skip_quoted,
    strip_blanks,
)


def test_strip_blanks_removes_surrounding_whitespace():
    core = "ls -l"
    assert strip_blanks("  \t" + core + " \t\n") == core


def test_strip_blanks_all_blank_gives_none():
    assert strip_blanks(" \t\v ") is None
    assert strip_blanks("") is None


def test_skip_blanks_stops_at_text():
    text = "   \tword"
    assert skip_blanks(text, 0) == text.index("w")
    assert skip_blanks(text, text.index("w")) == text.index("w")


def test_skip_blanks_runs_to_end():
    text = "ab   "
    assert skip_blanks(text, 2) == len(text)


def test_skip_quoted_passes_closing_quote():
    text = "'a b' rest"
    assert skip_quoted(text, 0) == text.index(" rest")


def test_skip_quoted_double_quotes():
    text = 'x"a\'b"y'
    assert skip_quoted(text, 1) == text.index("y")


def test_skip_quoted_unclosed_runs_to_end():
    text = '"abc'
    assert skip_quoted(text, 0) == len(text)


def test_skip_quoted_not_on_quote_is_unchanged():
    assert skip_quoted("abc", 1) == 1


@pytest.mark.parametrize("text", ["'abc", '"abc', "'a\"b", "\"a'b\" '"])
def test_unclosed_quotes(text):
    assert has_unclosed_quotes(text)


@pytest.mark.parametrize("text", ["abc", "'a'", "\"a'b\"", "'a\"b'"])
def test_closed_quotes(text):
    assert not has_unclosed_quotes(text)


@pytest.mark.parametrize("text", ["a;b", "a\\b", "a & b", "a || b", "a&&b"])
def test_unsupported_characters(text):
    assert has_unsupported(text)


@pytest.mark.parametrize("text", ["a | b", "'a;b'", '"a&b"', "'a||b'", "echo hi"])
def test_supported_characters(text):
    assert not has_unsupported(text)


@pytest.mark.parametrize("text", ["| ls", "ls |", "ls | | wc", "ls || wc"])
def test_bad_pipes(text):
    assert bad_pipe_placement(text)


@pytest.mark.parametrize("text", ["ls | wc", "echo '||' | wc", "a|b|c"])
def test_good_pipes(text):
    assert not bad_pipe_placement(text)


@pytest.mark.parametrize("text", ["ls >", "cat <", "ls > > f", "cat <<< f", "ls <> f"])
def test_bad_redirections(text):
    assert bad_redirection_placement(text)


@pytest.mark.parametrize("text", ["ls > f", "cat << eof", "ls >> f < g", "echo '>' x"])
def test_good_redirections(text):
    assert not bad_redirection_placement(text)


@pytest.mark.parametrize("text", ["ls > | wc", "cat < |x", "ls >>| wc"])
def test_redirection_before_pipe(text):
    assert redirection_before_pipe(text)


@pytest.mark.parametrize("text", ["ls > f | wc", "echo '>|' x", "ls | wc"])
def test_no_redirection_before_pipe(text):
    assert not redirection_before_pipe(text)


def test_check_syntax_returns_stripped_line():
    core = "echo hi | wc -l"
    assert check_syntax("  " + core + "  ") == core


def test_check_syntax_blank_line_is_none():
    assert check_syntax("   ") is None


def test_check_syntax_unclosed_quotes():
    with pytest.raises(ShellSyntaxError) as info:
        check_syntax("echo 'abc")
    assert info.value.message == "unclosed quotes"
    assert info.value.status == 2


def test_check_syntax_unsupported():
    with pytest.raises(ShellSyntaxError) as info:
        check_syntax("ls; ls")
    assert info.value.message == "characters not required by the subject"


@pytest.mark.parametrize("line", ["| ls", "ls > > f", "ls > | wc", "ls >"])
def test_check_syntax_bad_tokens(line):
    with pytest.raises(ShellSyntaxError) as info:
        check_syntax(line)
    assert info.value.message == "syntax error near unexpected token"
    assert str(info.value).startswith("minishell: ")


def test_check_syntax_quoted_operators_allowed():
    line = "echo '| ; &' \"> <\""
    assert check_syntax(line) == line