"""mdfill.lists
============

Decide whether an ordered list's source numbering should be kept verbatim.

Some authors write every item after the first as ``1.`` (or start at ``0.``
and continue with ``1.``) so that inserting or removing an item does not
touch the lines around it in a diff.  Renumbering such a list when printing
would defeat the point, so the printer asks
:func:`has_git_diff_friendly_ordered_list` first.
"""
from __future__ import annotations

import logging
from collections import namedtuple
from typing import Any

import regex

from .errors import ListItemFormatError
from .nodes import get_children, loc_end, loc_start

__all__ = [
    "ListItemInfo",
    "get_ordered_list_item_info",
    "has_git_diff_friendly_ordered_list",
]

logger = logging.getLogger(__name__)

ListItemInfo = namedtuple("ListItemInfo", ["number_text", "marker", "leading_spaces"])

ORDERED_ITEM_RE = regex.compile(r"^\s*([0-9]+)(\.|\))(\s*)")


def get_ordered_list_item_info(item: Any, original_text: str) -> ListItemInfo:
    """Read number, marker and following whitespace from *item*'s source."""
    start, end = loc_start(item), loc_end(item)
    if start is None or end is None:
        raise ListItemFormatError("ordered list item has no source position")

    source = original_text[start:end]
    match = ORDERED_ITEM_RE.match(source)
    if match is None:
        raise ListItemFormatError(
            f"not an ordered list item at offsets {start}-{end}: {source[:20]!r}"
        )
    return ListItemInfo(*match.groups())


def _item_number(item: Any, original_text: str) -> int:
    return int(get_ordered_list_item_info(item, original_text).number_text)


def _is_ordered(node: Any) -> bool:
    if isinstance(node, dict):
        return bool(node.get("ordered"))
    return bool(getattr(node, "ordered", False))


def has_git_diff_friendly_ordered_list(node: Any, original_text: str) -> bool:
    """Return *True* when the list is numbered ``k,1,1,...`` or ``0,1,1,...``.

    Anything else (including ``1,2,3``) returns *False*, meaning the printer
    is free to renumber the items incrementally.
    """
    if not _is_ordered(node):
        return False

    items = get_children(node) or []
    if len(items) < 2:
        return False

    first_number = _item_number(items[0], original_text)
    second_number = _item_number(items[1], original_text)

    if first_number == 0 and len(items) > 2:
        third_number = _item_number(items[2], original_text)
        result = second_number == 1 and third_number == 1
    else:
        result = second_number == 1

    logger.debug(
        "ordered list of %d items starting %d,%d: diff-friendly=%s",
        len(items), first_number, second_number, result,
    )
    return result
