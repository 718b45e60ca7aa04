"""The interactive read-eval loop of the shell."""

from __future__ import annotations

import argparse
import signal
import sys
from typing import IO, Iterable, Iterator

from .builtins import ShellExit
from .executor import execute_builtin, is_builtin
from .models import Command, Shell
from .text import split_words

PROMPT = "minishell$ "
EXTERNAL_MESSAGE = "external commands are not supported"


def handle_line(
    shell: Shell,
    line: str,
    out: IO[str] | None = None,
    err: IO[str] | None = None,
) -> None:
    """Split one input line on spaces and run it.

    Raises :class:`ShellExit` when the line runs ``exit``.
    """
    out = out if out is not None else sys.stdout
    shell.line = line
    args = split_words(line, " ")
    if not args:
        return
    cmd = Command(args=args, builtin=is_builtin(args[0]))
    if cmd.builtin:
        execute_builtin(cmd, shell, out, err)
    else:
        out.write(EXTERNAL_MESSAGE + "\n")


def run(
    shell: Shell,
    lines: Iterable[str],
    out: IO[str] | None = None,
    err: IO[str] | None = None,
) -> int:
    """Run every line in turn; return the exit status.

    Ending the input gives 0; the ``exit`` built-in gives its own status.
    """
    for line in lines:
        try:
            handle_line(shell, line, out, err)
        except ShellExit as stop:
            return stop.status
    return 0


def _prompt_lines() -> Iterator[str]:
    """Read lines from the terminal until end of input; Ctrl-C starts a fresh prompt."""
    try:
        import readline  # noqa: F401  (enables line editing and history for input())
    except ImportError:
        pass
    while True:
        try:
            yield input(PROMPT)
        except KeyboardInterrupt:
            sys.stdout.write("\n")
            sys.stdout.flush()
        except EOFError:
            return


def main(argv: list[str] | None = None) -> int:
    """Start an interactive session and return its exit status."""
    parser = argparse.ArgumentParser(prog="minishell", description="A small interactive shell.")
    parser.parse_args(argv)

    previous_quit = None
    if hasattr(signal, "SIGQUIT"):
        previous_quit = signal.signal(signal.SIGQUIT, signal.SIG_IGN)
    try:
        status = run(Shell(), _prompt_lines())
    finally:
        if previous_quit is not None:
            signal.signal(signal.SIGQUIT, previous_quit)
    return status % 256


if __name__ == "__main__":
    raise SystemExit(main())