"""
sexpc Parser

Recursive-descent parser from the token list to the source AST.

Grammar:
    program    := expression*
    expression := NUMBER | STRING | "(" NAME expression* ")"
"""

from typing import Optional, Sequence

from ast_nodes import CallExpression, Node, NumberLiteral, Program, StringLiteral
from errors import NestingTooDeep, UnexpectedEndOfInput, UnexpectedToken
from sexp_lexer import Token, TokenKind


class Parser:
    """Builds a Program from tokens using a single shared cursor"""

    def __init__(self, tokens: Sequence[Token]):
        self.tokens = tokens
        self.current = 0

    def parse(self) -> Program:
        program = Program()
        while self.current < len(self.tokens):
            program.body.append(self.walk())
        return program

    def _peek(self) -> Optional[Token]:
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        return None

    def _advance(self) -> Token:
        token = self._peek()
        if token is None:
            raise UnexpectedEndOfInput()
        self.current += 1
        return token

    def walk(self) -> Node:
        """Parse one expression starting at the cursor.

        Each nested call costs exactly one walk() frame.
        """
        index = self.current
        token = self._advance()

        if token.kind == TokenKind.NUMBER:
            return NumberLiteral(token.text)

        if token.kind == TokenKind.STRING:
            return StringLiteral(token.text)

        if token.kind != TokenKind.PAREN or token.text != "(":
            raise UnexpectedToken(token, index)

        index = self.current
        name = self._advance()
        if name.kind != TokenKind.NAME:
            raise UnexpectedToken(name, index)

        node = CallExpression(name.text)

        while True:
            token = self._peek()
            if token is None:
                raise UnexpectedEndOfInput()
            if token.kind == TokenKind.PAREN and token.text == ")":
                break
            node.params.append(self.walk())

        # Skip the closing paren
        self.current += 1
        return node


def parse(tokens: Sequence[Token]) -> Program:
    """
    Parse a token list into a source Program.

    Raises:
        UnexpectedToken: when a token cannot start or continue an expression
        UnexpectedEndOfInput: when tokens run out inside a call
        NestingTooDeep: when calls nest deeper than the interpreter stack allows
    """
    parser = Parser(tokens)
    try:
        return parser.parse()
    except RecursionError:
        token = parser._peek()
        raise NestingTooDeep(token.position if token else None) from None
