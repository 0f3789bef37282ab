"""mdfill.report
=============

Data-objects produced by :func:`mdfill.core.analyze_markdown`.

Currently only :class:`DocumentReport` is defined.  It captures what the text
segmenter and the list / link helpers found in a single markdown document.
"""
from __future__ import annotations

import datetime
import uuid
from dataclasses import dataclass, field
from typing import Dict, List

from .tokens import WordKind


def _new_run_id() -> str:
    now = datetime.datetime.now(datetime.timezone.utc)
    return f"{now.strftime('%Y%m%d-%H%M%S-%f')}-{uuid.uuid4().hex[:8]}"


@dataclass
class DocumentReport:
    """Summary of one analysed markdown document."""

    # ---------------------------------------------------------------------
    # Meta / accounting
    # ---------------------------------------------------------------------
    run_id: str = field(default_factory=_new_run_id)
    elapsed_ms: float = 0.0
    input_char_length: int = 0

    # ---------------------------------------------------------------------
    # Segmenter output
    # ---------------------------------------------------------------------
    sentences: int = 0
    words: int = 0
    whitespace: int = 0
    breakpoints: int = 0  # zero-width whitespace only
    words_by_kind: Dict[str, int] = field(
        default_factory=lambda: {kind.value: 0 for kind in WordKind}
    )

    # ---------------------------------------------------------------------
    # Lists / links
    # ---------------------------------------------------------------------
    ordered_lists: int = 0
    diff_friendly_ordered_lists: int = 0
    autolinks: int = 0

    # ---------------------------------------------------------------------
    # Outcome / error reporting
    # ---------------------------------------------------------------------
    errors: List[str] = field(default_factory=list)
    final_status_message: str = "Processing not yet complete."


__all__ = ["DocumentReport"]
