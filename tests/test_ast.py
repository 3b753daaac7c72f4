import pytest

from shellkit.ast import (
    Assignment,
    AstNode,
    Command,
    NodeType,
    ParseStatus,
    Redirection,
    Token,
    TokenType,
    error_message,
)


def _tree():
    left = AstNode(NodeType.SIMPLE_CMD, Command(arguments=["ls"]))
    right = AstNode(NodeType.SIMPLE_CMD, Command(arguments=["wc"]))
    pipe = AstNode(NodeType.PIPE, left=left, right=right)
    left.root = pipe
    right.root = pipe
    inner = AstNode(NodeType.PARENTHESES, left=pipe)
    pipe.root = inner
    return inner, pipe, left, right


def test_search_root_from_leaf_reaches_top():
    top, pipe, left, right = _tree()
    assert left.search_root() is top
    assert right.search_root() is top
    assert pipe.search_root() is top


def test_search_root_of_parentless_node_is_itself():
    node = AstNode(NodeType.ASSIGNMENT, [Assignment("a", "b")])
    assert node.search_root() is node


def test_repr_does_not_follow_parent_links():
    _, _, left, _ = _tree()
    text = repr(left)
    assert "SIMPLE_CMD" in text
    assert "PARENTHESES" not in text


def test_equality_ignores_parent():
    _, _, left, _ = _tree()
    detached = AstNode(NodeType.SIMPLE_CMD, Command(arguments=["ls"]))
    assert left == detached


def test_command_defaults_and_n_args():
    cmd = Command()
    assert cmd.arguments == [] and cmd.assignments == [] and cmd.redirs == []
    assert cmd.n_args == 0
    cmd.arguments.extend(["echo", "hi"])
    assert cmd.n_args == len(cmd.arguments)


def test_commands_do_not_share_lists():
    first, second = Command(), Command()
    first.arguments.append("x")
    assert second.arguments == []


def test_token_and_redirection_fields():
    token = Token(TokenType.REDIR_OUT, ">", fd=1)
    redir = Redirection(token.type, token.fd, "out.txt")
    assert redir.type is TokenType.REDIR_OUT
    assert redir.fd == token.fd
    assert redir.file == "out.txt"
    assert redir.fd_here_doc is None


def test_assignment_defaults_to_not_exported():
    assignment = Assignment("NAME", "value")
    assert assignment.export_env is False


def test_ok_status_has_no_message():
    assert error_message(ParseStatus.OK) is None


@pytest.mark.parametrize(
    "status, message",
    [
        (ParseStatus.ERR_ALLOC, "Error allocating memory"),
        (ParseStatus.MISSING_FILE, "minishell: syntax error near unexpected token redirection"),
        (ParseStatus.INCOMPLETE_PIPE, "minishell: syntax error near unxpected token '|'"),
        (ParseStatus.INCOMPLETE_AND, "minishell: syntax error near unexpected token '&&'"),
        (ParseStatus.INCOMPLETE_OR, "minishell: syntax error near unxpected token '||'"),
        (
            ParseStatus.MISSING_PARENTHESES,
            "minishell: syntax error near unxpected token near '()'",
        ),
    ],
)
def test_error_messages(status, message):
    assert error_message(status) == message


def test_every_error_status_has_a_message():
    for status in ParseStatus:
        if status is ParseStatus.OK:
            continue
        assert error_message(status)