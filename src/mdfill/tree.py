"""mdfill.tree
===========

Immutable preorder tree rewriting and the autolink test.
"""
from __future__ import annotations

import copy
import dataclasses
from typing import Any, Callable, List, Mapping, Optional, TypeVar

from .nodes import get_children, loc_end, loc_start, node_type

__all__ = ["map_ast", "is_autolink", "Handler"]

T = TypeVar("T")

# handler(node, index_in_parent, ancestors_nearest_first) -> replacement
Handler = Callable[[Any, Optional[int], List[Any]], Any]


def _shallow_copy(node: T) -> T:
    if isinstance(node, Mapping):
        return dict(node)  # type: ignore[return-value]
    if dataclasses.is_dataclass(node) and not isinstance(node, type):
        return dataclasses.replace(node)
    return copy.copy(node)


def _set_children(node: Any, children: List[Any]) -> None:
    if isinstance(node, dict):
        node["children"] = children
    else:
        node.children = children


def map_ast(ast: T, handler: Handler) -> T:
    """Return a rewritten copy of *ast*.

    *handler* sees every node before its children, receiving the node from
    the input tree, its index among its siblings (*None* for the root) and
    the already-rewritten ancestors, nearest first.  Its return value is
    shallow-copied and its children are then mapped in turn.  The input tree
    is never mutated.
    """

    def preorder(node: Any, index: Optional[int], parent_stack: List[Any]) -> Any:
        new_node = _shallow_copy(handler(node, index, parent_stack))
        children = get_children(new_node)
        if children is not None:
            stack = [new_node, *parent_stack]
            _set_children(
                new_node,
                [preorder(child, i, stack) for i, child in enumerate(children)],
            )
        return new_node

    return preorder(ast, None, [])


def is_autolink(node: Any) -> bool:
    """True if *node* is a link whose only child spans exactly the same source.

    That is how a bare URL looks once parsed: there is no separate label
    syntax, so the text child covers the whole link.
    """
    if node is None or node_type(node) != "link":
        return False
    children = get_children(node)
    if children is None or len(children) != 1:
        return False
    (child,) = children
    start, end = loc_start(node), loc_end(node)
    if start is None or end is None:
        return False
    return start == loc_start(child) and end == loc_end(child)
