"""Recursive-descent parser turning lexer tokens into a syntax tree."""

from __future__ import annotations

from typing import List, Optional, Sequence

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
from shellkit.chars import is_alnum, is_alpha

_REDIRECTIONS = frozenset(
    {TokenType.REDIR_IN, TokenType.REDIR_OUT, TokenType.APPEND, TokenType.HERE_DOC}
)


class ParseError(Exception):
    """Raised when a token list does not form a valid command line."""

    def __init__(self, status: ParseStatus) -> None:
        self.status = status
        super().__init__(error_message(status) or status.name)


def _name_end(text: str) -> Optional[int]:
    """Index where a valid variable name stops, or None if it is not valid.

    The name ends at the first ``=`` or at the end of the text.
    """
    if not text or not (is_alpha(text[0]) or text[0] == "_"):
        return None
    for index, char in enumerate(text[1:], start=1):
        if char == "=":
            return index
        if not (is_alnum(char) or char == "_"):
            return None
    return len(text)


def is_valid_name(text: str) -> bool:
    """True when text starts with a valid name, up to an ``=`` or its end."""
    return _name_end(text) is not None


def is_assignment(text: str) -> bool:
    """True for words of the form ``NAME=value``."""
    end = _name_end(text)
    return end is not None and end < len(text)


def is_redirection(token_type: TokenType) -> bool:
    """True for the redirection operators ``<``, ``>``, ``>>`` and ``<<``."""
    return token_type in _REDIRECTIONS


def count_args(tokens: Sequence[Token], index: int) -> int:
    """Count the argument words of the simple command starting at index.

    Leading assignments are not arguments; a redirection and the token after
    it are skipped. Counting stops at the first other operator.
    """
    count = 0
    while index < len(tokens):
        token = tokens[index]
        if token.type is TokenType.WORD:
            if count > 0 or not is_assignment(token.value):
                count += 1
            index += 1
        elif is_redirection(token.type):
            index += 2 if index + 1 < len(tokens) else 1
        else:
            break
    return count


class Parser:
    """Parses a token list; ``status`` records the first error encountered."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens: List[Token] = list(tokens)
        self.status = ParseStatus.OK
        self.here_doc = False
        self.index = 0

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.OK

    def _current(self) -> Optional[Token]:
        return self._peek(0)

    def _peek(self, offset: int) -> Optional[Token]:
        position = self.index + offset
        return self.tokens[position] if position < len(self.tokens) else None

    def _current_is(self, *types: TokenType) -> bool:
        token = self._current()
        return token is not None and token.type in types

    def _make_node(self, node_type: NodeType) -> AstNode:
        if node_type not in (NodeType.SIMPLE_CMD, NodeType.ASSIGNMENT):
            self.index += 1
        return AstNode(node_type)

    def _take_assignment(self, export: bool) -> Assignment:
        name, _, value = self.tokens[self.index].value.partition("=")
        self.index += 1
        return Assignment(name=name, value=value, export_env=export)

    def _take_redirection(self) -> Redirection:
        operator = self.tokens[self.index]
        if operator.type is TokenType.HERE_DOC:
            self.here_doc = True
        self.index += 1
        redirection = Redirection(type=operator.type, fd=operator.fd)
        target = self._current()
        if target is not None and target.type is TokenType.WORD:
            redirection.file = target.value
            self.index += 1
        else:
            self.status = ParseStatus.MISSING_FILE
        return redirection

    def parse_compound(self) -> Optional[AstNode]:
        """Parse pipelines joined by ``&&`` and ``||``, left to right."""
        if not self.ok or self._current() is None:
            return None
        root = self.parse_pipeline()
        while self.ok and self._current_is(TokenType.AND_IF, TokenType.OR_IF):
            left = root
            if self._current_is(TokenType.AND_IF):
                root = self._make_node(NodeType.AND)
            else:
                root = self._make_node(NodeType.OR)
            root.left = left
            root.right = self.parse_pipeline()
            if (root.left is None or root.right is None) and self.ok:
                self.status = (
                    ParseStatus.INCOMPLETE_AND
                    if root.type is NodeType.AND
                    else ParseStatus.INCOMPLETE_OR
                )
            for child in (root.left, root.right):
                if child is not None:
                    child.root = root
        return root

    def parse_pipeline(self) -> Optional[AstNode]:
        """Parse commands joined by ``|``, left to right."""
        if not self.ok or self._current() is None:
            return None
        root = self.parse_command()
        while self.ok and self._current_is(TokenType.PIPE):
            left = root
            root = self._make_node(NodeType.PIPE)
            root.left = left
            root.right = self.parse_command()
            if (root.left is None or root.right is None) and self.ok:
                self.status = ParseStatus.INCOMPLETE_PIPE
            for child in (root.left, root.right):
                if child is not None:
                    child.root = root
        return root

    def parse_command(self) -> Optional[AstNode]:
        """Parse a parenthesised group or a simple command."""
        token = self._current()
        if not self.ok or token is None:
            return None
        if token.type is not TokenType.L_PAREN:
            return self.parse_simple_command()
        following = self._peek(1)
        if following is None or following.type is TokenType.R_PAREN:
            self.status = ParseStatus.MISSING_PARENTHESES
            return None
        node = self._make_node(NodeType.PARENTHESES)
        node.left = self.parse_compound()
        closing = self._current()
        if closing is not None and closing.type is TokenType.R_PAREN:
            self.index += 1
        elif closing is None and self.ok:
            self.status = ParseStatus.MISSING_PARENTHESES
        if node.left is not None:
            node.left.root = node
        elif self.ok:
            self.status = ParseStatus.MISSING_PARENTHESES
        return node

    def parse_simple_command(self) -> Optional[AstNode]:
        """Parse assignments, arguments and redirections of one command."""
        token = self._current()
        if not self.ok or token is None:
            return None
        if count_args(self.tokens, self.index) != 0 or is_redirection(token.type):
            node = self._make_node(NodeType.SIMPLE_CMD)
            node.data = self._fill_command()
            return node
        if token.type is TokenType.WORD:
            return self._just_assignments()
        return None

    def _fill_command(self) -> Command:
        command = Command()
        while self.ok and (token := self._current()) is not None:
            word = token.type is TokenType.WORD
            if word and (command.arguments or not is_assignment(token.value)):
                command.arguments.append(token.value)
                self.index += 1
            elif word:
                command.assignments.append(self._take_assignment(export=True))
            elif is_redirection(token.type):
                command.redirs.append(self._take_redirection())
            else:
                break
        return command

    def _just_assignments(self) -> AstNode:
        assignments: List[Assignment] = []
        while self.ok and (token := self._current()) is not None:
            if token.type is not TokenType.WORD or not is_assignment(token.value):
                break
            assignments.append(self._take_assignment(export=False))
        node = self._make_node(NodeType.ASSIGNMENT)
        node.data = assignments
        return node


def parse(tokens: Sequence[Token]) -> Optional[AstNode]:
    """Parse tokens into a syntax tree; None for an empty token list.

    Raises ParseError carrying the failing status on a syntax error.
    """
    parser = Parser(tokens)
    root = parser.parse_compound()
    if not parser.ok:
        raise ParseError(parser.status)
    return root