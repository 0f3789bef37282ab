"""mdfill.nodes
============

mdast-shaped document nodes.

:class:`Node` is what :mod:`mdfill.parser` produces, but the tree helpers in
:mod:`mdfill.tree` only rely on the :class:`HasChildren` capability, so plain
``dict`` trees (``{"type": ..., "children": [...], "position": {...}}``) work
too.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Protocol, Sequence

__all__ = [
    "Point",
    "Position",
    "Node",
    "HasChildren",
    "INLINE_NODE_TYPES",
    "INLINE_NODE_WRAPPER_TYPES",
    "node_type",
    "get_children",
    "loc_start",
    "loc_end",
]

INLINE_NODE_TYPES = frozenset(
    {
        "liquidNode",
        "inlineCode",
        "emphasis",
        "esComment",
        "strong",
        "delete",
        "wikiLink",
        "link",
        "linkReference",
        "image",
        "imageReference",
        "footnote",
        "footnoteReference",
        "sentence",
        "whitespace",
        "word",
        "break",
        "inlineMath",
    }
)

INLINE_NODE_WRAPPER_TYPES = INLINE_NODE_TYPES | {"tableCell", "paragraph", "heading"}


class HasChildren(Protocol):
    """Anything with an optional, replaceable ordered ``children`` sequence."""

    children: Optional[Sequence[Any]]


@dataclass(frozen=True)
class Point:
    line: int
    column: int
    offset: int


@dataclass(frozen=True)
class Position:
    start: Point
    end: Point


@dataclass
class Node:
    """A single mdast node.

    Leaves keep ``children`` as *None*; parents always carry a list, possibly
    empty.  Type-specific attributes default to *None* so that equality stays
    structural.
    """

    type: str
    children: Optional[List["Node"]] = None
    position: Optional[Position] = None
    value: Optional[str] = None

    # list / heading / code / link attributes
    ordered: Optional[bool] = None
    start: Optional[int] = None
    depth: Optional[int] = None
    lang: Optional[str] = None
    url: Optional[str] = None
    title: Optional[str] = None

    data: Dict[str, Any] = field(default_factory=dict)

    def walk(self) -> Iterator["Node"]:
        """Yield this node and all descendants in preorder."""
        yield self
        for child in self.children or ():
            yield from child.walk()


# ---------------------------------------------------------------------------
# Shape-agnostic accessors (Node, any object, or dict)
# ---------------------------------------------------------------------------

def _field(node: Any, name: str) -> Any:
    if isinstance(node, Mapping):
        return node.get(name)
    return getattr(node, name, None)


def node_type(node: Any) -> Optional[str]:
    return _field(node, "type")


def get_children(node: Any) -> Optional[Sequence[Any]]:
    return _field(node, "children")


def _offset(node: Any, edge: str) -> Optional[int]:
    position = _field(node, "position")
    if position is None:
        return None
    return _field(_field(position, edge), "offset")


def loc_start(node: Any) -> Optional[int]:
    """Start offset of *node* in the original text, or *None* if unknown."""
    return _offset(node, "start")


def loc_end(node: Any) -> Optional[int]:
    """End offset (exclusive) of *node* in the original text, or *None*."""
    return _offset(node, "end")
