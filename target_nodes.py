"""
sexpc Target AST Node Definitions

AST for the C-like call-expression language produced by the transformer.
Calls are split into a callee Identifier plus an argument list, and calls
that stand alone at the top level are wrapped in an ExpressionStatement.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List

from ast_nodes import node_to_dict


@dataclass
class TargetNode:
    """Base class for target AST nodes"""
    type: ClassVar[str] = "TargetNode"

    def to_dict(self) -> Dict[str, Any]:
        return node_to_dict(self)


@dataclass
class Program(TargetNode):
    type: ClassVar[str] = "Program"
    body: List[TargetNode] = field(default_factory=list)


# ============================================================================
# Statements
# ============================================================================

@dataclass
class ExpressionStatement(TargetNode):
    """Top-level expression terminated with ';'"""
    type: ClassVar[str] = "ExpressionStatement"
    expression: TargetNode


# ============================================================================
# Expressions
# ============================================================================

@dataclass
class Identifier(TargetNode):
    type: ClassVar[str] = "Identifier"
    name: str


@dataclass
class CallExpression(TargetNode):
    type: ClassVar[str] = "CallExpression"
    callee: Identifier
    arguments: List[TargetNode] = field(default_factory=list)


@dataclass
class NumberLiteral(TargetNode):
    type: ClassVar[str] = "NumberLiteral"
    value: str


@dataclass
class StringLiteral(TargetNode):
    type: ClassVar[str] = "StringLiteral"
    value: str
