"""mdfill.core
===========

High-level orchestration: the entry-point is :func:`analyze_markdown`, which
parses raw markdown, runs the preprocessing passes and walks the result the
way a printer would, applying the list heuristic and autolink test on the
nodes they are meant for.  It returns the preprocessed tree plus a
:class:`~mdfill.report.DocumentReport` with the counts collected on the way.
"""
from __future__ import annotations

import logging
import time
from typing import Optional, Tuple

from .config import MdfillConfig
from .errors import MdfillError
from .lists import has_git_diff_friendly_ordered_list
from .nodes import Node
from .parser import parse_markdown
from .preprocess import preprocess
from .report import DocumentReport
from .tree import is_autolink

__all__ = ["analyze_markdown"]

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _count_node(node: Node, original_text: str, report: DocumentReport) -> None:
    if node.type == "sentence":
        report.sentences += 1
    elif node.type == "word":
        report.words += 1
        kind = node.data.get("kind")
        if kind is not None:
            report.words_by_kind[kind.value] += 1
    elif node.type == "whitespace":
        report.whitespace += 1
        if node.value == "":
            report.breakpoints += 1
    elif node.type == "list" and node.ordered:
        report.ordered_lists += 1
        if has_git_diff_friendly_ordered_list(node, original_text):
            report.diff_friendly_ordered_lists += 1
    elif node.type == "link" and is_autolink(node):
        report.autolinks += 1


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze_markdown(
    raw_markdown_text: str,
    config: Optional[MdfillConfig] = None,
    report: Optional[DocumentReport] = None,
) -> Tuple[Node, DocumentReport]:
    """Parse, preprocess and inspect *raw_markdown_text*.

    Errors raised by the helpers are contract violations.  They are recorded
    on the report and then re-raised, so pass your own *report* to inspect it
    afterwards.
    """
    config = config or MdfillConfig()
    if report is None:
        report = DocumentReport()
    report.input_char_length = len(raw_markdown_text)
    start_ts = time.perf_counter()

    try:
        ast = preprocess(parse_markdown(raw_markdown_text, config), config)
        for node in ast.walk():
            _count_node(node, raw_markdown_text, report)
        report.final_status_message = "Success."
    except MdfillError as exc:
        report.errors.append(f"{type(exc).__name__}: {exc}")
        report.final_status_message = "Contract violation during analysis."
        logger.error("analyze_markdown failed (run %s): %s", report.run_id, exc)
        raise
    finally:
        report.elapsed_ms = (time.perf_counter() - start_ts) * 1000

    logger.debug(
        "analyze_markdown run %s: %d sentences, %d words, %d breakpoints",
        report.run_id, report.sentences, report.words, report.breakpoints,
    )
    return ast, report
