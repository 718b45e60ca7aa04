import io
import os

import pytest

from minishell.builtins import ShellExit
from minishell.models import Shell
from minishell.repl import EXTERNAL_MESSAGE, handle_line, main, run


def test_handle_line_collapses_spaces():
    out = io.StringIO()
    handle_line(Shell(), "  echo   a  b ", out, io.StringIO())
    assert out.getvalue() == "a b\n"


def test_handle_line_blank_line_does_nothing():
    out = io.StringIO()
    shell = Shell(exit_status=6)
    handle_line(shell, "     ", out, io.StringIO())
    assert out.getvalue() == ""
    assert shell.exit_status == 6


def test_handle_line_external_command():
    out = io.StringIO()
    handle_line(Shell(), "ls -l", out, io.StringIO())
    assert out.getvalue() == EXTERNAL_MESSAGE + "\n"


def test_handle_line_records_input():
    shell = Shell()
    handle_line(shell, "echo hi", io.StringIO(), io.StringIO())
    assert shell.line == "echo hi"


def test_handle_line_exit_raises():
    with pytest.raises(ShellExit) as info:
        handle_line(Shell(), "exit 12", io.StringIO(), io.StringIO())
    assert info.value.status == 12


def test_run_stops_at_exit():
    out = io.StringIO()
    status = run(Shell(), ["echo hi", "exit 7", "echo never"], out, io.StringIO())
    assert status == 7
    assert out.getvalue() == "hi\nexit\n"


def test_run_end_of_input_gives_zero():
    out = io.StringIO()
    shell = Shell()
    status = run(shell, ["echo one", "echo two"], out, io.StringIO())
    assert status == 0
    assert out.getvalue() == "one\ntwo\n"


def test_run_pwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    run(Shell(), ["pwd"], out, io.StringIO())
    assert out.getvalue() == os.getcwd() + "\n"


def test_main_reads_standard_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("echo hello\nexit 3\necho later\n"))
    status = main([])
    captured = capsys.readouterr()
    assert status == 3
    assert "hello\n" in captured.out
    assert "later" not in captured.out


def test_main_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("echo -n x\n"))
    assert main([]) == 0
    assert "x" in capsys.readouterr().out


def test_main_wraps_negative_status(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("exit -1\n"))
    assert main([]) == 255
    capsys.readouterr()