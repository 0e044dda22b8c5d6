# minish

`minish` is a Python library that provides the building blocks of a
small POSIX-style shell:

- the shell state and its ordered environment (`minish.env`);
- checks that decide whether an input line may be run (`minish.syntax`);
- expansion of `$VAR`, `${VAR}`, `$?`, `$0` and `$$` (`minish.expand`);
- the builtins `echo`, `env`, `exit` and `pwd` (`minish.builtins`);
- the builtins `export` and `unset` (`minish.exports`);
- the coloured interactive prompt (`minish.prompt`).

It needs only the Python standard library and runs on Python 3.10 or
later.

## Shell state and environment

`create_state(argv, envp)` builds a `ShellState`. The first argument
gives the shell name; `"minishell"` is used when it is missing or empty.
`envp` may be a list of `NAME=value` strings or a mapping. The function
copies the environment and splits `PATH` into `state.paths`. It also
duplicates descriptors 0, 1 and 2, raising `OSError` if that fails.
`ShellState.close()` closes those duplicates, and the state can be used
as a context manager to do this automatically.

```python
from minish.env import create_state, extract_var_name, is_valid_identifier

with create_state(["minish"], ["HOME=/home/user", "PATH=/usr/bin:/bin"]) as state:
    print(state.env.get("HOME"))    # /home/user
    print(state.paths)              # ['/usr/bin', '/bin']

print(is_valid_identifier("_X1"))   # True
print(is_valid_identifier("1X"))    # False
print(extract_var_name("A+=1"))     # A
```

`Environment` keeps its `NAME=value` entries in order. It provides these
methods:

- `find(name)` returns the entry's index or `None`.
- `get(name)` returns the entry's value or `None`.
- `add(entry)` appends an entry.
- `replace(index, entry)` replaces the entry at an index.
- `remove_at(index)` removes the entry at an index.
- `paths()` returns the non-empty `PATH` directories, or `None` if
  `PATH` is unset.

You can also iterate over an `Environment` and call `len()` on it.

## Checking a line

`check_syntax(line)` returns the line with surrounding blanks removed,
or `None` if the line holds only blanks. It raises `ShellSyntaxError` in
these cases:

- a quote is left unclosed;
- `\`, `;`, `&` or `||` appears outside quotes;
- a pipe is leading, trailing or doubled;
- a redirection is trailing or is followed directly by another
  redirection or by a pipe.

The exception carries `message` and `status` (always 2).

```python
from minish.syntax import ShellSyntaxError, check_syntax

print(check_syntax("  ls -l | wc  "))   # 'ls -l | wc'
try:
    check_syntax("ls | | wc")
except ShellSyntaxError as exc:
    print(exc, exc.status)   # minishell: syntax error near unexpected token 2
```

The individual checks are also available as separate functions:
`has_unclosed_quotes`, `has_unsupported`, `bad_pipe_placement`,
`bad_redirection_placement` and `redirection_before_pipe`. So are the
helpers `strip_blanks`, `skip_blanks` and `skip_quoted`.

## Expansion

`expand_dollar(state, text)` expands the `$` construct at the start of
`text`. It returns the value together with the number of characters
consumed. An unset variable expands to the empty string. A `$` that
starts no construct, or a `${` with no closing brace, stays a literal
`$`.

- `$?` expands to `state.last_exit_status`.
- `$0` expands to the shell name, with any leading `./` removed.
- `$$` expands to `state.pid`.

```python
from minish.expand import expand_dollar, expansion_info

print(expand_dollar(state, "$HOME/bin"))   # ('/home/user', 5)
print(expansion_info("${X}y", 0))          # ('X', 4)
```

The same module also provides `expansion_value(state, info)`,
`find_next_dollar(text, start)` and `is_var_char(c, first)`.

## Builtins

Each builtin takes the state and the argument list (`args[0]` is the
command name). It writes to the text streams you pass in and returns the
exit status.

```python
import io
from minish.builtins import ShellExit, run_echo, run_exit
from minish.exports import format_declare, run_export, run_unset

out, err = io.StringIO(), io.StringIO()
run_echo(state, ["echo", "-n", "hello", "~/bin"], out)
print(out.getvalue())                      # hello /home/user/bin

run_export(state, ["export", "GREETING=hi", "EMPTY"], out, err)
print(state.env.get("GREETING"), repr(state.env.get("EMPTY")))   # hi ''
print(run_export(state, ["export", "1BAD=x"], out, err))          # 1
print(format_declare('A=x"y'))             # declare -x A="x\"y"

run_unset(state, ["unset", "GREETING"], err)

try:
    run_exit(state, ["exit", "300"], err)
except ShellExit as exc:
    print(exc.code)                        # 44
```

The builtins behave as follows:

- **`run_echo`** expands a leading `~` from `HOME`. It accepts
  `-n`, `-nn`, … to leave out the trailing newline (`is_n_flag` tests
  for this option).
- **`run_env`** prints the entries that hold a value. It rejects any
  argument.
- **`run_pwd`** prints the working directory. If that directory has
  been removed, it falls back to `PWD`. An option argument gives
  status 2.
- **`run_exit`** raises `ShellExit` with this code:
  - the last status when given no argument or only `--`;
  - the argument modulo 256 when the argument is numeric;
  - 2 when the argument is not numeric.

  With too many arguments it returns 1 instead. On an interactive
  terminal it writes `exit` to `err` first. Numbers are parsed by
  `parse_long`, which accepts signed 64-bit values only.
- **`run_export`**, when given no arguments, prints the sorted
  environment in `declare -x` form (see `print_exported`).
  `add_or_update(state, arg)` applies a single argument.
- **`run_unset`** removes variables and refreshes `state.paths` when
  `PATH` is removed.

## Prompt

`get_prompt(state)` returns a coloured `user@directory> ` prompt. The
user comes from `USER` in the process environment and the directory is
the last component of the working directory. The `>` is green after a
status of 0 and red otherwise. If the user or the directory is
unavailable, the prompt becomes `minishell> `. `format_prompt` and
`current_dir_name` expose the pieces. The colour constants (`RED`,
`GREEN`, `BLUE`, `RESET`, …) are wrapped in `\001`…`\002` so that line
editors ignore them when they measure the prompt.

## What this package does not do

`minish` is a set of components, not a runnable shell. It has none of
the following:

- no command to start;
- no read–evaluate loop;
- no tokenizer that splits a line into words and operators;
- no `cd` builtin;
- no lookup or launching of external programs;
- no pipes, redirections or here-documents.

Code that uses the library has to provide these parts itself.