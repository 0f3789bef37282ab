"""mdfill.constants
================

Character classifier tables used by the text segmenter.

Patterns are compiled with the third-party **regex** module, which (unlike
:mod:`re`) understands Unicode ``\\p{...}`` properties such as
``Script_Extensions`` and ``General_Category`` and supports set intersection
in ``V1`` mode.

* A *CJK character* is either a code point inside one of the CJK punctuation
  and symbol blocks below, or a letter-like code point whose script
  extensions include Han, Katakana, Hiragana, Hangul or Bopomofo.  It may be
  followed by a single variation selector, which stays attached to it.
* A *Korean character* has ``Script_Extensions=Hangul``.
* A *punctuation character* belongs to one of the Unicode punctuation
  categories (``Pc Pd Pe Pf Pi Po Ps``) or is an ASCII punctuation mark;
  the latter adds symbols such as ``$``, ``+`` and ``~``.
"""
from __future__ import annotations

import string
from typing import List, Tuple

import regex

__all__ = [
    "CJK_PATTERN",
    "K_PATTERN",
    "PUNCTUATION_PATTERN",
    "CJK_REGEX",
    "K_REGEX",
    "PUNCTUATION_REGEX",
    "is_cjk_character",
    "is_korean_character",
    "is_punctuation_character",
]

# ---------------------------------------------------------------------------
# Range data
# ---------------------------------------------------------------------------

# Blocks whose every code point counts as CJK, punctuation and symbols
# included.  U+3000 IDEOGRAPHIC SPACE lives in the first one.
CJK_PUNCTUATION_BLOCKS: List[Tuple[int, int]] = [
    (0x2FF0, 0x2FFF),  # Ideographic Description Characters
    (0x3000, 0x303F),  # CJK Symbols and Punctuation
    (0x30FB, 0x30FB),  # Katakana Middle Dot
    (0xFE10, 0xFE1F),  # Vertical Forms
    (0xFE30, 0xFE4F),  # CJK Compatibility Forms
    (0xFE50, 0xFE6F),  # Small Form Variants
    (0xFF00, 0xFFEF),  # Halfwidth and Fullwidth Forms
]

CJK_SCRIPTS = ["Han", "Katakana", "Hiragana", "Hangul", "Bopomofo"]

# General categories a scripted code point must carry to count as CJK:
# Other_Letter, Letter_Number, Other_Symbol, Modifier_Letter,
# Modifier_Symbol, Nonspacing_Mark.
CJK_GENERAL_CATEGORIES = ["Lo", "Nl", "So", "Lm", "Sk", "Mn"]

VARIATION_SELECTOR_BLOCKS: List[Tuple[int, int]] = [
    (0xFE00, 0xFE0F),    # Variation Selectors
    (0xE0100, 0xE01EF),  # Variation Selectors Supplement
]

PUNCTUATION_GENERAL_CATEGORIES = ["Pc", "Pd", "Pe", "Pf", "Pi", "Po", "Ps"]

# ---------------------------------------------------------------------------
# Pattern construction
# ---------------------------------------------------------------------------


def _ranges(ranges: List[Tuple[int, int]]) -> str:
    return "".join(f"\\U{lo:08x}-\\U{hi:08x}" for lo, hi in ranges)


def _properties(name: str, values: List[str]) -> str:
    return "".join(f"\\p{{{name}={value}}}" for value in values)


_CJK_LETTER_SET = (
    f"[[{_properties('Script_Extensions', CJK_SCRIPTS)}]"
    f"&&[{_properties('General_Category', CJK_GENERAL_CATEGORIES)}]]"
)
_CJK_CHARSET = f"[{_ranges(CJK_PUNCTUATION_BLOCKS)}{_CJK_LETTER_SET}]"
_VARIATION_SELECTORS = f"[{_ranges(VARIATION_SELECTOR_BLOCKS)}]"

CJK_PATTERN = f"(?:{_CJK_CHARSET})(?:{_VARIATION_SELECTORS})?"
K_PATTERN = "\\p{Script_Extensions=Hangul}"
PUNCTUATION_PATTERN = (
    f"[{_properties('General_Category', PUNCTUATION_GENERAL_CATEGORIES)}"
    f"{regex.escape(string.punctuation, special_only=False)}]"
)

CJK_REGEX = regex.compile(CJK_PATTERN, regex.V1)
K_REGEX = regex.compile(K_PATTERN, regex.V1)
PUNCTUATION_REGEX = regex.compile(PUNCTUATION_PATTERN, regex.V1)

# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def is_cjk_character(char: str) -> bool:
    """True if *char* is exactly one CJK character (variation selector allowed)."""
    return bool(char) and CJK_REGEX.fullmatch(char) is not None


def is_korean_character(char: str) -> bool:
    return bool(char) and K_REGEX.search(char) is not None


def is_punctuation_character(char: str) -> bool:
    return bool(char) and PUNCTUATION_REGEX.search(char) is not None
