"""Tokens and syntax-tree types shared by the parser and the interpreter."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Union

SHELL_NAME = "minishell"


class TokenType(Enum):
    """Kinds of token produced by the lexer."""

    WORD = auto()
    PIPE = auto()
    AND_IF = auto()
    OR_IF = auto()
    L_PAREN = auto()
    R_PAREN = auto()
    REDIR_IN = auto()
    REDIR_OUT = auto()
    APPEND = auto()
    HERE_DOC = auto()


@dataclass
class Token:
    """One lexer token; ``fd`` is the descriptor a redirection applies to."""

    type: TokenType
    value: str = ""
    fd: Optional[int] = None


class NodeType(Enum):
    """Kinds of syntax-tree node."""

    SIMPLE_CMD = auto()
    PIPE = auto()
    AND = auto()
    OR = auto()
    PARENTHESES = auto()
    ASSIGNMENT = auto()


class ParseStatus(Enum):
    """Outcome of parsing a token list."""

    OK = auto()
    ERR_ALLOC = auto()
    MISSING_PARENTHESES = auto()
    MISSING_FILE = auto()
    INCOMPLETE_PIPE = auto()
    INCOMPLETE_AND = auto()
    INCOMPLETE_OR = auto()


@dataclass
class Assignment:
    """A ``NAME=value`` word; ``export_env`` marks it as exported to a command."""

    name: str
    value: str
    export_env: bool = False


@dataclass
class Redirection:
    """A redirection operator with its target file."""

    type: TokenType
    fd: Optional[int] = None
    file: Optional[str] = None
    fd_here_doc: Optional[int] = None


@dataclass
class Command:
    """A simple command: leading assignments, arguments and redirections."""

    assignments: List[Assignment] = field(default_factory=list)
    arguments: List[str] = field(default_factory=list)
    redirs: List[Redirection] = field(default_factory=list)

    @property
    def n_args(self) -> int:
        return len(self.arguments)


NodeData = Union[Command, List[Assignment], None]


@dataclass
class AstNode:
    """A syntax-tree node; ``root`` points at the parent node."""

    type: NodeType
    data: NodeData = None
    left: Optional[AstNode] = None
    right: Optional[AstNode] = None
    root: Optional[AstNode] = field(default=None, repr=False, compare=False)

    def search_root(self) -> AstNode:
        """Return the topmost ancestor of this node (itself if it has no parent)."""
        node = self
        while node.root is not None:
            node = node.root
        return node


_MESSAGES = {
    ParseStatus.ERR_ALLOC: "Error allocating memory",
    ParseStatus.MISSING_FILE: f"{SHELL_NAME}: syntax error near unexpected token redirection",
    ParseStatus.INCOMPLETE_PIPE: f"{SHELL_NAME}: syntax error near unxpected token '|'",
    ParseStatus.INCOMPLETE_AND: f"{SHELL_NAME}: syntax error near unexpected token '&&'",
    ParseStatus.INCOMPLETE_OR: f"{SHELL_NAME}: syntax error near unxpected token '||'",
    ParseStatus.MISSING_PARENTHESES: f"{SHELL_NAME}: syntax error near unxpected token near '()'",
}


def error_message(status: ParseStatus) -> Optional[str]:
    """Return the diagnostic printed for a parse status, or None for OK."""
    return _MESSAGES.get(status)