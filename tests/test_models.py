from minishell.models import (
    Builtin,
    Command,
    EnvVar,
    Redirection,
    RedirType,
    Shell,
    Token,
    TokenType,
)


def test_not_builtin_is_falsy_and_others_truthy():
    assert not Command().builtin
    others = [Command(builtin=b) for b in Builtin if b is not Builtin.NOT_BUILTIN]
    assert others
    assert all(cmd.builtin for cmd in others)


def test_builtin_members_are_distinct():
    commands = [Command(args=[b.name.lower()], builtin=b) for b in Builtin]
    values = {int(cmd.builtin) for cmd in commands}
    assert len(values) == len(commands)


def test_token_type_has_all_kinds():
    tokens = [Token(t, t.name) for t in TokenType]
    names = {tok.type.name for tok in tokens}
    assert names == {"WORD", "PIPE", "IN", "OUT", "APPEND", "HEREDOC", "AND", "OR", "EOF"}
    assert all(tok.text == tok.type.name for tok in tokens)


def test_redir_type_kinds():
    redirs = [Redirection(r, "file.txt") for r in RedirType]
    assert {redir.type.name for redir in redirs} == {"IN", "OUT", "APPEND", "HEREDOC"}
    assert all(redir.target == "file.txt" for redir in redirs)


def test_token_defaults():
    tok = Token(TokenType.WORD, "echo")
    assert tok.text == "echo"
    assert tok.quoted is False
    assert tok.type is TokenType.WORD


def test_command_defaults_and_independent_lists():
    first = Command()
    second = Command()
    first.args.append("ls")
    assert second.args == []
    assert first.builtin is Builtin.NOT_BUILTIN
    assert first.redirections == []
    assert first.path is None


def test_command_holds_redirections():
    redir = Redirection(RedirType.APPEND, "out.txt")
    cmd = Command(args=["echo", "hi"], redirections=[redir])
    assert cmd.redirections[0].target == "out.txt"
    assert cmd.redirections[0].type is RedirType.APPEND


def test_env_var_fields():
    var = EnvVar("HOME", "/home/user", exported=False)
    assert var.name == "HOME"
    assert var.value == "/home/user"
    assert var.exported is False


def test_shell_initial_state():
    shell = Shell()
    assert shell.exit_status == 0
    assert shell.exit is False
    assert shell.env == []
    assert shell.tokens == []
    assert shell.commands == []
    assert shell.line is None
    assert shell.cwd is None


def test_shells_do_not_share_state():
    a = Shell()
    b = Shell()
    a.tokens.append(Token(TokenType.PIPE, "|"))
    a.exit_status = 2
    assert b.tokens == []
    assert b.exit_status == 0