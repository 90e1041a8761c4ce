"""
sexpc Source AST Node Definitions

AST for the S-expression source language: a program is a list of
expressions, and an expression is a call, a number or a string.

Each node class carries its tag in the class attribute `type`. Traversal and
serialization only ever look at that tag and the node's fields.
"""

from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Dict, List


def node_to_dict(node) -> Dict[str, Any]:
    """Convert a node (source or target) into nested JSON-ready dicts."""
    result = {"type": node.type}
    for f in fields(node):
        result[f.name] = _value_to_json(getattr(node, f.name))
    return result


def _value_to_json(value):
    if isinstance(value, list):
        return [_value_to_json(item) for item in value]
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


# ============================================================================
# Base
# ============================================================================

@dataclass
class Node:
    """Base class for source AST nodes"""
    type: ClassVar[str] = "Node"

    def to_dict(self) -> Dict[str, Any]:
        return node_to_dict(self)


# ============================================================================
# Program
# ============================================================================

@dataclass
class Program(Node):
    type: ClassVar[str] = "Program"
    body: List[Node] = field(default_factory=list)


# ============================================================================
# Expression Nodes
# ============================================================================

@dataclass
class CallExpression(Node):
    """(name param...)"""
    type: ClassVar[str] = "CallExpression"
    name: str
    params: List[Node] = field(default_factory=list)


@dataclass
class NumberLiteral(Node):
    type: ClassVar[str] = "NumberLiteral"
    value: str  # digits exactly as written


@dataclass
class StringLiteral(Node):
    type: ClassVar[str] = "StringLiteral"
    value: str  # contents without the quotes
