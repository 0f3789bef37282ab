"""mdfill: text segmentation and tree helpers for a markdown pretty-printer."""

from .config import MdfillConfig, load_config
from .core import analyze_markdown
from .errors import InvariantViolation, ListItemFormatError, MdfillError
from .lists import get_ordered_list_item_info, has_git_diff_friendly_ordered_list
from .nodes import INLINE_NODE_TYPES, INLINE_NODE_WRAPPER_TYPES, Node
from .parser import parse_markdown
from .report import DocumentReport
from .segment import check_no_adjacent_whitespace, split_text
from .tokens import Whitespace, Word, WordKind
from .tree import is_autolink, map_ast

__all__ = [
    "MdfillConfig",
    "load_config",
    "analyze_markdown",
    "DocumentReport",
    "MdfillError",
    "ListItemFormatError",
    "InvariantViolation",
    "split_text",
    "check_no_adjacent_whitespace",
    "Whitespace",
    "Word",
    "WordKind",
    "get_ordered_list_item_info",
    "has_git_diff_friendly_ordered_list",
    "map_ast",
    "is_autolink",
    "Node",
    "parse_markdown",
    "INLINE_NODE_TYPES",
    "INLINE_NODE_WRAPPER_TYPES",
]
