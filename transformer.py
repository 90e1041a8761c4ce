"""
sexpc Transformer

Builds the target AST from the source AST in a single traversal.

While walking, each source node that owns children is mapped to an
"insertion point": the target list its children's translations are appended
to. The Program maps to the new program's body and each call maps to its
new CallExpression's arguments. The map is keyed by node identity so the
trees themselves never carry bookkeeping fields.
"""

from typing import Dict, List

import ast_nodes
import target_nodes
from errors import TraversalError
from traverser import NodeVisitor, traverse


class Transformer:
    """Converts one source Program into a target Program"""

    def __init__(self, terminate_literals: bool = False):
        # When set, top-level literals become statements too ("42;")
        self.terminate_literals = terminate_literals
        self.insertion_points: Dict[int, List[target_nodes.TargetNode]] = {}

    def transform(self, program: ast_nodes.Program) -> target_nodes.Program:
        root_type = getattr(program, "type", type(program).__name__)
        if root_type != "Program":
            raise TraversalError(root_type, f"root node must be a Program, not {root_type!r}")

        new_program = target_nodes.Program()
        self.insertion_points[id(program)] = new_program.body

        traverse(program, {
            "NumberLiteral": NodeVisitor(enter=self.enter_number),
            "StringLiteral": NodeVisitor(enter=self.enter_string),
            "CallExpression": NodeVisitor(enter=self.enter_call, exit=self.exit_node),
            "Program": NodeVisitor(enter=self.enter_program, exit=self.exit_node),
        })

        return new_program

    # ========================================================================
    # Visitor hooks
    # ========================================================================

    def enter_program(self, node: ast_nodes.Program, parent):
        if parent is not None:
            raise TraversalError(node.type, "a Program can only appear as the root node")

    def enter_number(self, node: ast_nodes.NumberLiteral, parent):
        self._append_expression(target_nodes.NumberLiteral(node.value), parent)

    def enter_string(self, node: ast_nodes.StringLiteral, parent):
        self._append_expression(target_nodes.StringLiteral(node.value), parent)

    def enter_call(self, node: ast_nodes.CallExpression, parent):
        expression = target_nodes.CallExpression(
            callee=target_nodes.Identifier(node.name),
            arguments=[],
        )
        self.insertion_points[id(node)] = expression.arguments

        if parent.type != "CallExpression":
            expression = target_nodes.ExpressionStatement(expression)
        self.insertion_points[id(parent)].append(expression)

    def exit_node(self, node, parent):
        del self.insertion_points[id(node)]

    def _append_expression(self, expression: target_nodes.TargetNode, parent):
        if self.terminate_literals and parent.type != "CallExpression":
            expression = target_nodes.ExpressionStatement(expression)
        self.insertion_points[id(parent)].append(expression)


def transform(program: ast_nodes.Program, terminate_literals: bool = False) -> target_nodes.Program:
    """Transform a source Program into a target Program."""
    return Transformer(terminate_literals=terminate_literals).transform(program)
