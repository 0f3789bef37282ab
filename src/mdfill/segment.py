"""mdfill.segment
==============

Split a run of literal text into alternating whitespace and word tokens for a
line-filling printer.

Whitespace in the source (tab, newline, space) becomes a single
:class:`~mdfill.tokens.Whitespace` token per run.  Between two words that sit
directly next to each other in the source, e.g. ``hello世界``, a zero-width
:data:`~mdfill.tokens.BREAKPOINT` is inserted so that the printer may break
the line there without rendering a space.

The segmenter is a left fold: :func:`_iter_units` yields the raw units and
:func:`split_text` threads the last emitted token through
:func:`needs_breakpoint` to decide whether a breakpoint goes in front of the
next word.
"""
from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence

import regex

from .config import MdfillConfig, default_check_invariants
from .constants import CJK_PATTERN, is_korean_character, is_punctuation_character
from .errors import InvariantViolation
from .tokens import BREAKPOINT, NEWLINE, SPACE, TextToken, Whitespace, Word, WordKind

__all__ = [
    "split_text",
    "needs_breakpoint",
    "classify_cjk_character",
    "check_no_adjacent_whitespace",
]

logger = logging.getLogger(__name__)

WHITESPACE_SPLIT_RE = regex.compile(r"([\t\n ]+)")
CJK_SPLIT_RE = regex.compile(f"({CJK_PATTERN})", regex.V1)

IDEOGRAPHIC_SPACE = "　"

# Kind pair that is never separated by a breakpoint.
_NO_BREAK_PAIR = frozenset({WordKind.NON_CJK, WordKind.CJK_PUNCTUATION})


# ---------------------------------------------------------------------------
# Unit construction
# ---------------------------------------------------------------------------

def _non_cjk_word(text: str) -> Word:
    return Word(
        text,
        WordKind.NON_CJK,
        is_punctuation_character(text[0]),
        is_punctuation_character(text[-1]),
    )


def classify_cjk_character(char: str) -> Word:
    """Return the :class:`Word` for a single CJK character *char*."""
    if is_punctuation_character(char):
        return Word(char, WordKind.CJK_PUNCTUATION, True, True)
    if is_korean_character(char):
        return Word(char, WordKind.K_LETTER, False, False)
    return Word(char, WordKind.CJ_LETTER, False, False)


def _split_keep_separators(pattern: regex.Pattern, text: str) -> Iterator[tuple]:
    """Yield ``(is_separator, chunk)`` for *text* split on *pattern*.

    Empty chunks produced at either edge of the string are dropped.
    """
    chunks = pattern.split(text)
    last = len(chunks) - 1
    for index, chunk in enumerate(chunks):
        if (index == 0 or index == last) and chunk == "":
            continue
        yield index % 2 == 1, chunk


def _iter_units(text: str) -> Iterator[TextToken]:
    for is_whitespace, chunk in _split_keep_separators(WHITESPACE_SPLIT_RE, text):
        if is_whitespace:
            yield NEWLINE if "\n" in chunk else SPACE
            continue

        for is_cjk, inner in _split_keep_separators(CJK_SPLIT_RE, chunk):
            if is_cjk:
                yield classify_cjk_character(inner)
            elif inner:
                # two adjacent CJK characters leave an empty run between them
                yield _non_cjk_word(inner)


# ---------------------------------------------------------------------------
# Fold step
# ---------------------------------------------------------------------------

def needs_breakpoint(previous: Optional[TextToken], current: TextToken) -> bool:
    """Return *True* if a zero-width breakpoint belongs between the two tokens.

    Only two adjacent words get one, and never when the pair is a non-CJK
    word next to CJK punctuation, or when either word holds an ideographic
    space.
    """
    if not isinstance(previous, Word) or not isinstance(current, Word):
        return False
    if {previous.kind, current.kind} == _NO_BREAK_PAIR:
        return False
    return not any(IDEOGRAPHIC_SPACE in word.value for word in (previous, current))


def check_no_adjacent_whitespace(tokens: Sequence[TextToken]) -> None:
    """Raise :class:`InvariantViolation` if two whitespace tokens touch."""
    for index in range(1, len(tokens)):
        if isinstance(tokens[index - 1], Whitespace) and isinstance(tokens[index], Whitespace):
            raise InvariantViolation(
                "split_text should not create consecutive whitespace nodes "
                f"(positions {index - 1} and {index}: "
                f"{tokens[index - 1].value!r}, {tokens[index].value!r})"
            )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def split_text(text: str, config: Optional[MdfillConfig] = None) -> List[TextToken]:
    """Split *text* into whitespace and word tokens.

    Parameters
    ----------
    text:
        Literal text taken from a single text node.  Any string is accepted,
        including the empty one.
    config:
        Optional :class:`~mdfill.config.MdfillConfig`.  Only
        ``check_invariants`` is consulted; without a config the ``MDFILL_ENV``
        environment variable decides.

    Returns
    -------
    List[TextToken]
        Tokens in source order, with :data:`~mdfill.tokens.BREAKPOINT`
        inserted between adjacent words of different render classes.
    """
    tokens: List[TextToken] = []
    previous: Optional[TextToken] = None
    for unit in _iter_units(text):
        if needs_breakpoint(previous, unit):
            tokens.append(BREAKPOINT)
        tokens.append(unit)
        previous = unit

    check = config.check_invariants if config is not None else default_check_invariants()
    if check:
        check_no_adjacent_whitespace(tokens)

    logger.debug("split_text: %d chars -> %d tokens", len(text), len(tokens))
    return tokens
