"""Recognition and dispatch of built-in commands."""

from __future__ import annotations

from typing import IO

from .builtins import echo, exit_shell, pwd
from .models import Builtin, Command, Shell

_BUILTINS = {
    "echo": Builtin.ECHO,
    "pwd": Builtin.PWD,
    "exit": Builtin.EXIT,
}


def is_builtin(name: str | None) -> Builtin:
    """The built-in named ``name``, or ``Builtin.NOT_BUILTIN`` (which is falsy)."""
    if name is None:
        return Builtin.NOT_BUILTIN
    return _BUILTINS.get(name, Builtin.NOT_BUILTIN)


def execute_builtin(
    cmd: Command | None,
    shell: Shell,
    out: IO[str] | None = None,
    err: IO[str] | None = None,
) -> bool:
    """Run ``cmd`` if it is a built-in; return whether it was one."""
    if cmd is None or not cmd.args:
        return False
    kind = is_builtin(cmd.args[0])
    if kind is Builtin.ECHO:
        echo(cmd, shell, out)
    elif kind is Builtin.PWD:
        pwd(cmd, shell, out, err)
    elif kind is Builtin.EXIT:
        exit_shell(cmd, shell, out)
    else:
        return False
    return True