from __future__ import annotations

import enum
from collections import namedtuple
from typing import Union

__all__ = [
    "WordKind",
    "Whitespace",
    "Word",
    "TextToken",
    "SPACE",
    "NEWLINE",
    "BREAKPOINT",
]


class WordKind(enum.Enum):
    NON_CJK = "non-cjk"
    CJ_LETTER = "cj-letter"
    # Korean separates words with spaces, Chinese & Japanese do not.
    K_LETTER = "k-letter"
    CJK_PUNCTUATION = "cjk-punctuation"


# value is " ", "\n" or "" (a zero-width breakpoint)
Whitespace = namedtuple("Whitespace", ["value"])

# A single CJK character or a maximal run of non-CJK characters
Word = namedtuple(
    "Word",
    ["value", "kind", "has_leading_punctuation", "has_trailing_punctuation"],
)

TextToken = Union[Whitespace, Word]

SPACE = Whitespace(" ")
NEWLINE = Whitespace("\n")
BREAKPOINT = Whitespace("")
