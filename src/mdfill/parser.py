"""mdfill.parser
=============

Build an mdast-shaped :class:`~mdfill.nodes.Node` tree from markdown using
**markdown-it-py**.

markdown-it records source locations only as line ranges on block tokens
(``token.map``).  Those are turned into character offsets here, which is all
:mod:`mdfill.lists` needs to read list markers back out of the original
text.  List items start at their marker, not at the beginning of the line, so
items nested inside block quotes still slice cleanly.

Inline nodes carry no position, with one exception: links produced by the
*linkify* rule (bare URLs) are located in the source of their enclosing block
and, together with their single text child, receive the span of the URL.
"""
from __future__ import annotations

import bisect
import logging
from typing import List, Optional

import regex
from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from .config import MdfillConfig
from .nodes import Node, Point, Position

__all__ = ["parse_markdown", "create_parser"]

logger = logging.getLogger(__name__)

# markdown-it normalises all three to "\n" before numbering lines
LINE_BREAK_RE = regex.compile(r"\r\n?|\n")

# markdown-it node type -> mdast type, for nodes needing no extra attributes
_SIMPLE_TYPES = {
    "paragraph": "paragraph",
    "blockquote": "blockquote",
    "list_item": "listItem",
    "hr": "thematicBreak",
    "em": "emphasis",
    "strong": "strong",
    "s": "delete",
    "hardbreak": "break",
    "table": "table",
    "tr": "tableRow",
    "th": "tableCell",
    "td": "tableCell",
}

# containers whose children are spliced into the parent
_TRANSPARENT_TYPES = {"inline", "thead", "tbody"}


def create_parser(config: Optional[MdfillConfig] = None) -> MarkdownIt:
    """Return a configured :class:`MarkdownIt` instance."""
    config = config or MdfillConfig()
    md = MarkdownIt(config.markdown_preset, {"linkify": config.linkify})
    if config.linkify:
        md.enable("linkify")
    return md


class _TreeBuilder:
    """Convert one :class:`SyntaxTreeNode` tree, tracking source offsets."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.line_starts = [0] + [m.end() for m in LINE_BREAK_RE.finditer(text)]
        # linkify lookups scan forward from here inside the current block
        self.block_span: Optional[tuple] = None
        self.cursor = 0

    # -- offsets ---------------------------------------------------------

    def _line_offset(self, line: int) -> int:
        if line >= len(self.line_starts):
            return len(self.text)
        return self.line_starts[line]

    def point(self, offset: int) -> Point:
        line = bisect.bisect_right(self.line_starts, offset) - 1
        return Point(line=line + 1, column=offset - self.line_starts[line] + 1, offset=offset)

    def span(self, start: int, end: int) -> Position:
        return Position(self.point(start), self.point(end))

    def block_position(self, node: SyntaxTreeNode) -> Optional[Position]:
        if node.map is None:
            return None
        first_line, end_line = node.map
        start = self._line_offset(first_line)
        end = self._line_offset(end_line)
        while end > start and self.text[end - 1] in "\r\n":
            end -= 1

        line_text = LINE_BREAK_RE.split(self.text[start:end], 1)[0]
        if node.type == "list_item":
            marker = (node.info or "") + node.markup
            column = line_text.find(marker)
        else:
            column = len(line_text) - len(line_text.lstrip(" \t"))
        start += max(column, 0)
        return self.span(start, max(start, end))

    def locate_inline(self, literal: str) -> Optional[Position]:
        """Find *literal* at or after the cursor in the current block.

        On success the cursor moves past it.  The cursor never overshoots:
        each literal is searched for from the end of the previous one.
        """
        if self.block_span is None or not literal:
            return None
        block_start, block_end = self.block_span
        found = self.text.find(literal, max(self.cursor, block_start), block_end)
        if found < 0:
            return None
        self.cursor = found + len(literal)
        return self.span(found, self.cursor)

    # -- conversion ------------------------------------------------------

    def convert_children(self, node: SyntaxTreeNode) -> List[Node]:
        children: List[Node] = []
        for child in node.children:
            children.extend(self.convert(child))
        return children

    def convert(self, node: SyntaxTreeNode) -> List[Node]:
        kind = node.type
        if kind in _TRANSPARENT_TYPES:
            return self.convert_children(node)

        if kind == "root":
            return [Node("root", self.convert_children(node), self.span(0, len(self.text)))]

        position = self.block_position(node)
        if position is not None:
            self.block_span = (position.start.offset, position.end.offset)
            self.cursor = position.start.offset

        if kind == "text":
            self.locate_inline(node.content)
            return [Node("text", value=node.content)]
        if kind == "softbreak":
            return [Node("text", value="\n")]
        if kind == "code_inline":
            self.locate_inline(node.content)
            return [Node("inlineCode", value=node.content)]
        if kind == "html_inline":
            self.locate_inline(node.content)
            return [Node("html", value=node.content)]
        if kind == "html_block":
            return [Node("html", value=node.content, position=position)]
        if kind in ("fence", "code_block"):
            lang = (node.info.strip() or None) if kind == "fence" else None
            return [Node("code", value=node.content, lang=lang, position=position)]
        if kind == "heading":
            depth = int(node.tag[1:])
            return [Node("heading", self.convert_children(node), position, depth=depth)]
        if kind == "bullet_list":
            return [Node("list", self.convert_children(node), position, ordered=False)]
        if kind == "ordered_list":
            start = int(node.attrs.get("start", 1))
            return [Node("list", self.convert_children(node), position, ordered=True, start=start)]
        if kind == "link":
            return [self.convert_link(node)]
        if kind == "image":
            return [
                Node(
                    "image",
                    url=str(node.attrs.get("src", "")),
                    title=node.attrs.get("title"),
                    data={"alt": node.content},
                )
            ]

        mdast_type = _SIMPLE_TYPES.get(kind, kind)
        children = self.convert_children(node) if node.nester_tokens else None
        return [Node(mdast_type, children, position)]

    def convert_link(self, node: SyntaxTreeNode) -> Node:
        label_start = self.cursor
        children = self.convert_children(node)
        link = Node(
            "link",
            children,
            url=str(node.attrs.get("href", "")),
            title=node.attrs.get("title"),
        )
        if node.markup == "linkify" and len(children) == 1 and children[0].type == "text":
            # bare URL: the label is the source text itself
            self.cursor = label_start
            position = self.locate_inline(children[0].value or "")
            if position is not None:
                link.position = position
                children[0].position = position
        return link


def parse_markdown(text: str, config: Optional[MdfillConfig] = None) -> Node:
    """Parse *text* into an mdast-shaped :class:`Node` tree rooted at ``root``."""
    md = create_parser(config)
    tree = SyntaxTreeNode(md.parse(text))
    (root,) = _TreeBuilder(text).convert(tree)
    logger.debug("parse_markdown: %d chars -> %d nodes", len(text), sum(1 for _ in root.walk()))
    return root
