"""
sexpc Lexer

Turns raw source text into a flat list of tokens in one left-to-right pass.

Token kinds:
- PAREN:  "(" or ")"
- NUMBER: a run of ASCII digits (integers only)
- STRING: the text between a pair of double quotes
- NAME:   a run of ASCII letters
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import List
import string

from errors import UnexpectedCharacter, UnterminatedString


DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)


class TokenKind(Enum):
    PAREN = auto()
    NUMBER = auto()
    STRING = auto()
    NAME = auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    position: int  # offset of the first source character

    def __repr__(self):
        return f"{self.kind.name}({self.text!r}@{self.position})"


def tokenize(source: str) -> List[Token]:
    """
    Split source text into tokens.

    Raises:
        UnexpectedCharacter: on any character that cannot start a token
        UnterminatedString: when input ends inside a string literal
    """
    tokens = []
    current = 0
    length = len(source)

    while current < length:
        char = source[current]

        if char == "(" or char == ")":
            tokens.append(Token(TokenKind.PAREN, char, current))
            current += 1
            continue

        if char.isspace():
            current += 1
            continue

        if char in DIGITS:
            start = current
            while current < length and source[current] in DIGITS:
                current += 1
            tokens.append(Token(TokenKind.NUMBER, source[start:current], start))
            continue

        if char == '"':
            start = current
            end = source.find('"', start + 1)
            if end == -1:
                raise UnterminatedString(start)
            tokens.append(Token(TokenKind.STRING, source[start + 1:end], start))
            # Skip past the closing quote
            current = end + 1
            continue

        if char in LETTERS:
            start = current
            while current < length and source[current] in LETTERS:
                current += 1
            tokens.append(Token(TokenKind.NAME, source[start:current], start))
            continue

        raise UnexpectedCharacter(char, current)

    return tokens
