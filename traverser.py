"""
sexpc Traverser

Generic depth-first walker over source ASTs. A visitor maps a node tag to a
NodeVisitor whose optional enter/exit callbacks receive (node, parent).
enter runs before a node's children are visited and exit runs after.

Only the node's `type` tag and the child field named in CHILD_FIELDS are
consulted, so any tree with the same shape can be walked. The walk keeps
its own stack, so tree depth is not limited by the interpreter stack.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Union

from errors import TraversalError


Callback = Callable[[Any, Optional[Any]], None]


@dataclass
class NodeVisitor:
    """Callbacks for one node type"""
    enter: Optional[Callback] = None
    exit: Optional[Callback] = None


Visitor = Mapping[str, Union[NodeVisitor, Dict[str, Callback]]]


# Node tag -> name of the field holding its children (None for leaves)
CHILD_FIELDS: Dict[str, Optional[str]] = {
    "Program": "body",
    "CallExpression": "params",
    "NumberLiteral": None,
    "StringLiteral": None,
}

_DONE = object()


def _lookup(visitor: Visitor, node_type: str, hook: str) -> Optional[Callback]:
    methods = visitor.get(node_type)
    if methods is None:
        return None
    if isinstance(methods, NodeVisitor):
        return getattr(methods, hook)
    return methods.get(hook)


def _enter_node(node, parent, visitor: Visitor):
    """Run the enter hook and return the stack frame for the node."""
    node_type = getattr(node, "type", type(node).__name__)
    if node_type not in CHILD_FIELDS:
        raise TraversalError(node_type)

    enter = _lookup(visitor, node_type, "enter")
    if enter:
        enter(node, parent)

    child_field = CHILD_FIELDS[node_type]
    children = getattr(node, child_field) if child_field is not None else ()
    return node_type, node, parent, iter(children)


def traverse(root, visitor: Visitor):
    """
    Walk `root` depth-first, left to right, calling visitor hooks.

    Raises:
        TraversalError: on a node whose tag is not a known source node type
    """
    stack = [_enter_node(root, None, visitor)]

    while stack:
        node_type, node, parent, children = stack[-1]
        child = next(children, _DONE)

        if child is not _DONE:
            stack.append(_enter_node(child, node, visitor))
            continue

        stack.pop()
        exit_ = _lookup(visitor, node_type, "exit")
        if exit_:
            exit_(node, parent)
