"""
sexpc Compiler Errors

Every stage of the pipeline reports failures with a subclass of CompileError.
Errors carry the stage that raised them, a human readable reason and, when
known, the source character offset where the problem starts.
"""

from typing import Optional


class CompileError(Exception):
    """Base exception for all compilation errors"""

    stage = "compile"

    def __init__(self, reason: str, position: Optional[int] = None):
        self.reason = reason
        self.position = position
        super().__init__(str(self))

    def __str__(self):
        if self.position is None:
            return f"{self.stage} error: {self.reason}"
        return f"{self.stage} error at position {self.position}: {self.reason}"


# ============================================================================
# Lexing
# ============================================================================

class LexError(CompileError):
    """Error turning source text into tokens"""

    stage = "lex"


class UnexpectedCharacter(LexError):
    """A character that cannot start any token"""

    def __init__(self, char: str, position: int):
        self.char = char
        super().__init__(f"unexpected character {char!r}", position)


class UnterminatedString(LexError):
    """End of input reached before the closing double quote"""

    def __init__(self, position: int):
        super().__init__("unterminated string literal", position)


# ============================================================================
# Parsing
# ============================================================================

class ParseError(CompileError):
    """Error building the source AST from tokens"""

    stage = "parse"


class UnexpectedToken(ParseError):
    """A token that cannot start or continue an expression here"""

    def __init__(self, token, index: int):
        self.token = token
        self.index = index
        super().__init__(
            f"unexpected {token.kind.name.lower()} token {token.text!r}",
            token.position,
        )


class UnexpectedEndOfInput(ParseError):
    """Tokens ran out in the middle of a call expression"""

    def __init__(self):
        super().__init__("unexpected end of input (missing ')'?)")


class NestingTooDeep(ParseError):
    """Calls nested deeper than the parser can descend"""

    def __init__(self, position: Optional[int] = None):
        super().__init__("calls nested too deeply", position)


# ============================================================================
# Tree walking
# ============================================================================

class TraversalError(CompileError):
    """Traversal reached a node it cannot handle in its position"""

    stage = "traverse"

    def __init__(self, node_type: str, reason: Optional[str] = None):
        self.node_type = node_type
        super().__init__(reason or f"unknown node type {node_type!r}")


class CodegenError(CompileError):
    """Code generation reached a node whose type it does not know"""

    stage = "codegen"

    def __init__(self, node_type: str):
        self.node_type = node_type
        super().__init__(f"unknown node type {node_type!r}")
