# minishell

A small interactive shell. It reads lines at a `minishell$ ` prompt, splits
each line on spaces and runs the builtin named by the first word.

## Installation

```
pip install .
```

## Usage

Start the shell:

```
minishell
```

Supported builtins:

- `echo [-n] words...` prints its arguments separated by single spaces. A
  leading `-n` suppresses the trailing newline.
- `pwd` prints the current working directory. If it cannot be found, an
  error is written to standard error and the exit status is set to 1.
- `exit [status]` prints `exit` and leaves the shell with the given status
  (default 0). The status is parsed leniently: leading whitespace is
  skipped, one optional sign is accepted, parsing stops at the first
  non-digit, text without digits counts as 0, and the value wraps like a
  32-bit signed integer. The process exit code is that status modulo 256.

Any other first word prints `external commands are not supported`. Empty
lines are ignored. End of input (Ctrl+D) leaves the shell with status 0;
Ctrl+C abandons the current line and shows a fresh prompt; Ctrl+\ is
ignored where the platform has that signal. Line editing and history are
available when Python's `readline` module is.

## What it does not do

The shell only runs the three builtins above. It does not start external
programs, and it has no pipes, redirections, heredocs, `&&`/`||`, quoting,
or variable expansion. Words are split on plain spaces only. There are no
`cd`, `env`, `export` or `unset` builtins; the `Builtin` enumeration in
`minishell.models` lists them, but `is_builtin` never returns them.

## Library use

The pieces are importable on their own:

```python
import io
from minishell.models import Shell
from minishell.repl import run

out, err = io.StringIO(), io.StringIO()
shell = Shell()
status = run(shell, ["echo hello world", "echo -n again"], out, err)
print(out.getvalue())   # "hello world\nagain"
print(status)           # 0
```

- `minishell.repl` has `handle_line(shell, line, out, err)` for a single
  line, `run(shell, lines, out, err)` for an iterable of lines (it returns
  the exit status), and `main(argv)`, the console entry point.
- `minishell.executor` offers `is_builtin(name)`, which returns a `Builtin`
  member (`Builtin.NOT_BUILTIN` is falsy), and
  `execute_builtin(cmd, shell, out, err)`, which returns whether `cmd` was a
  builtin.
- `minishell.builtins` holds `echo`, `pwd` and `exit_shell`; the last one
  raises `ShellExit`, whose `status` attribute carries the exit status.
- `minishell.models` holds the data types: `Shell`, `Command`, `Token`,
  `TokenType`, `Redirection`, `RedirType`, `EnvVar` and `Builtin`.
- `minishell.text` provides string helpers (`atoi`, `itoa`, `split_words`,
  `index_of`, `last_index_of`, `compare`, `ncompare`, `find_bounded`,
  `join`, `trim`, `substring`, `map_indexed`), and `minishell.chars`
  provides ASCII character tests and case conversion (`is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_blank`, `to_upper`,
  `to_lower`).

## Tests

```
pip install .[test]
pytest
```