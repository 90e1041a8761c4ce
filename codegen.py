"""
sexpc Code Generator

Renders a target AST into call-expression source text.

Rendering rules:
- Program: statements joined by newlines
- ExpressionStatement: expression followed by ';'
- CallExpression: callee(arg, arg, ...)
- Identifier, NumberLiteral: emitted verbatim
- StringLiteral: wrapped in double quotes (embedded quotes are not escaped)

Nodes are rendered bottom-up from an explicit work stack, so deeply nested
calls do not consume interpreter stack frames.
"""

from typing import List

from errors import CodegenError
from target_nodes import (
    CallExpression, ExpressionStatement, Identifier, NumberLiteral,
    Program, StringLiteral, TargetNode,
)


class CodeGenerator:
    """Generates source text from target AST nodes"""

    def generate(self, node: TargetNode) -> str:
        """Generate code for a node and everything below it"""
        rendered: List[str] = []
        stack = [(node, False)]

        while stack:
            current, children_done = stack.pop()
            children = self._children(current)

            if children and not children_done:
                stack.append((current, True))
                # Reversed so the first child is rendered first
                stack.extend((child, False) for child in reversed(children))
                continue

            split = len(rendered) - len(children)
            parts = rendered[split:]
            del rendered[split:]
            rendered.append(self._render(current, parts))

        return rendered[0]

    def _children(self, node) -> List[TargetNode]:
        """Child nodes in rendering order, dispatching on node type"""
        if isinstance(node, Program):
            return node.body

        elif isinstance(node, ExpressionStatement):
            return [node.expression]

        elif isinstance(node, CallExpression):
            return [node.callee] + node.arguments

        elif isinstance(node, (Identifier, NumberLiteral, StringLiteral)):
            return []

        node_type = getattr(node, "type", type(node).__name__)
        raise CodegenError(node_type)

    def _render(self, node: TargetNode, parts: List[str]) -> str:
        """Render one node given its children's rendered text"""
        if isinstance(node, Program):
            return "\n".join(parts)

        elif isinstance(node, ExpressionStatement):
            return parts[0] + ";"

        elif isinstance(node, CallExpression):
            return f"{parts[0]}({', '.join(parts[1:])})"

        elif isinstance(node, Identifier):
            return node.name

        elif isinstance(node, NumberLiteral):
            return node.value

        return f'"{node.value}"'


def generate(node: TargetNode) -> str:
    """
    Render a target AST node as source text.

    Raises:
        CodegenError: on a node that is not one of the target node types
    """
    return CodeGenerator().generate(node)
