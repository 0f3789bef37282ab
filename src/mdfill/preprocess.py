"""mdfill.preprocess
=================

Tree normalisation run before printing.  Each step is a :func:`map_ast`
pass, so the parsed tree itself is left untouched.

1. :func:`merge_continuous_texts` joins sibling ``text`` nodes (markdown-it
   emits one per soft line break).
2. :func:`split_text_into_sentences` replaces every ``text`` node by a
   ``sentence`` whose children are the ``word`` / ``whitespace`` nodes
   produced by :func:`~mdfill.segment.split_text`.
"""
from __future__ import annotations

import dataclasses
import logging
from typing import List, Optional

from .config import MdfillConfig
from .nodes import Node, Position
from .segment import split_text
from .tokens import TextToken, Whitespace
from .tree import map_ast

__all__ = [
    "merge_continuous_texts",
    "split_text_into_sentences",
    "token_to_node",
    "preprocess",
]

logger = logging.getLogger(__name__)


def _merge_two(previous: Node, node: Node) -> Node:
    position = None
    if previous.position is not None and node.position is not None:
        position = Position(previous.position.start, node.position.end)
    return Node("text", value=(previous.value or "") + (node.value or ""), position=position)


def merge_continuous_texts(ast: Node) -> Node:
    def handler(node: Node, index, parent_stack) -> Node:
        if not node.children:
            return node
        merged: List[Node] = []
        for child in node.children:
            if merged and merged[-1].type == "text" and child.type == "text":
                merged[-1] = _merge_two(merged[-1], child)
            else:
                merged.append(child)
        if len(merged) == len(node.children):
            return node
        return dataclasses.replace(node, children=merged)

    return map_ast(ast, handler)


def token_to_node(token: TextToken) -> Node:
    """Wrap a segmenter token in a ``word`` or ``whitespace`` node."""
    if isinstance(token, Whitespace):
        return Node("whitespace", value=token.value)
    return Node(
        "word",
        value=token.value,
        data={
            "kind": token.kind,
            "has_leading_punctuation": token.has_leading_punctuation,
            "has_trailing_punctuation": token.has_trailing_punctuation,
        },
    )


def split_text_into_sentences(ast: Node, config: Optional[MdfillConfig] = None) -> Node:
    def handler(node: Node, index, parent_stack) -> Node:
        if node.type != "text":
            return node

        value = node.value or ""
        parent = parent_stack[0] if parent_stack else None
        if parent is not None and parent.type == "paragraph":
            # leading/trailing whitespace of a paragraph is not content
            if index == 0:
                value = value.lstrip()
            if index == len(parent.children) - 1:
                value = value.rstrip()

        return Node(
            "sentence",
            children=[token_to_node(token) for token in split_text(value, config)],
            position=node.position,
        )

    return map_ast(ast, handler)


def preprocess(ast: Node, config: Optional[MdfillConfig] = None) -> Node:
    config = config or MdfillConfig()
    if config.merge_texts:
        ast = merge_continuous_texts(ast)
        logger.debug("preprocess: merged continuous texts")
    if config.split_sentences:
        ast = split_text_into_sentences(ast, config)
        logger.debug("preprocess: split texts into sentences")
    return ast
