"""Built-in commands run inside the shell process: echo, pwd and exit."""

from __future__ import annotations

import os
import sys
from typing import IO

from .models import Command, Shell
from .text import atoi


class ShellExit(Exception):
    """Raised by the ``exit`` built-in to end the session with ``status``."""

    def __init__(self, status: int) -> None:
        super().__init__(f"shell exit with status {status}")
        self.status = status


def echo(cmd: Command, shell: Shell, out: IO[str] | None = None) -> None:
    """Print the arguments separated by spaces; a leading ``-n`` drops the newline."""
    out = out if out is not None else sys.stdout
    args = cmd.args
    words = args[1:]
    newline = True
    if words and words[0] == "-n":
        words = words[1:]
        newline = False
    out.write(" ".join(words))
    if newline:
        out.write("\n")
    shell.exit_status = 0


def pwd(
    cmd: Command,
    shell: Shell,
    out: IO[str] | None = None,
    err: IO[str] | None = None,
) -> None:
    """Print the current working directory."""
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    try:
        cwd = os.getcwd()
    except OSError as exc:
        err.write(f"pwd: {exc.strerror or exc}\n")
        shell.exit_status = 1
        return
    out.write(cwd + "\n")
    shell.exit_status = 0


def exit_shell(cmd: Command, shell: Shell, out: IO[str] | None = None) -> None:
    """Announce ``exit`` and end the session with the status given as first argument."""
    out = out if out is not None else sys.stdout
    out.write("exit\n")
    status = atoi(cmd.args[1]) if len(cmd.args) > 1 else 0
    shell.exit_status = status
    shell.exit = True
    raise ShellExit(status)