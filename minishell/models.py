"""Core data types shared across the shell: tokens, commands, redirections and shell state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import IO


class TokenType(Enum):
    """Kind of a lexical token."""

    WORD = auto()
    PIPE = auto()
    IN = auto()
    OUT = auto()
    APPEND = auto()
    HEREDOC = auto()
    AND = auto()
    OR = auto()
    EOF = auto()


@dataclass
class Token:
    """A single token: its kind, its text and whether it was quoted."""

    type: TokenType
    text: str = ""
    quoted: bool = False


class Builtin(IntEnum):
    """Built-in commands; ``NOT_BUILTIN`` is falsy."""

    NOT_BUILTIN = 0
    CD = 1
    ECHO = 2
    ENV = 3
    EXIT = 4
    EXPORT = 5
    PWD = 6
    UNSET = 7


class RedirType(Enum):
    """Kind of a redirection."""

    IN = auto()
    OUT = auto()
    APPEND = auto()
    HEREDOC = auto()


@dataclass
class Redirection:
    """A redirection: its kind, the file name or heredoc delimiter, and its descriptor."""

    type: RedirType
    target: str
    fd: int = -1


@dataclass
class Command:
    """One simple command of a pipeline."""

    args: list[str] = field(default_factory=list)
    path: str | None = None
    redirections: list[Redirection] = field(default_factory=list)
    in_fd: int = 0
    out_fd: int = 1
    pid: int | None = None
    builtin: Builtin = Builtin.NOT_BUILTIN


@dataclass
class EnvVar:
    """An environment variable; ``exported`` marks it visible to child processes."""

    name: str
    value: str | None = None
    exported: bool = True


@dataclass
class Shell:
    """State of a running shell session."""

    env: list[EnvVar] = field(default_factory=list)
    tokens: list[Token] = field(default_factory=list)
    commands: list[Command] = field(default_factory=list)
    line: str | None = None
    envp: list[str] | None = None
    exit_status: int = 0
    exit: bool = False
    in_heredoc: bool = False
    cwd: str | None = None
    stdin: IO[str] | None = None
    stdout: IO[str] | None = None