"""Unit tests for mdfill.segment.

Covers:
- split_text: whitespace handling, CJK classification, breakpoint insertion
- needs_breakpoint as a standalone fold step
- check_no_adjacent_whitespace and when split_text runs it
- properties over a fixed corpus and over seeded random mixes
"""

import random
import re

import pytest

import mdfill.segment as segment
from mdfill.config import MdfillConfig
from mdfill.errors import InvariantViolation
from mdfill.segment import (
    check_no_adjacent_whitespace,
    classify_cjk_character,
    needs_breakpoint,
    split_text,
)
from mdfill.tokens import BREAKPOINT, NEWLINE, SPACE, Whitespace, Word, WordKind

NON_CJK = WordKind.NON_CJK
CJ = WordKind.CJ_LETTER
K = WordKind.K_LETTER
PUNCT = WordKind.CJK_PUNCTUATION


def _cj(char):
    return Word(char, CJ, False, False)


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #

CORPUS = [
    "",
    " ",
    "\n",
    "\t \n ",
    "hello",
    "hello world",
    "  leading and trailing  ",
    "line one\nline two\n\nline three",
    "hello世界",
    "世界hello",
    "foo。",
    "。foo",
    "中文。English, 日本語のテキスト",
    "한국어 텍스트와 English",
    "中　文",
    "mixed中文and한국어text!",
    "(括号)「引用」",
    "tab\tseparated\tvalues",
    "ＦＵＬＬ width ！",
    "a 中 b 한 c 。 d",
]


def _assert_no_adjacent_whitespace(tokens):
    for prev, cur in zip(tokens, tokens[1:]):
        assert not (isinstance(prev, Whitespace) and isinstance(cur, Whitespace)), tokens


# --------------------------------------------------------------------------- #
# Basic segmentation
# --------------------------------------------------------------------------- #

@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        (" ", [SPACE]),
        ("   ", [SPACE]),
        ("\t", [SPACE]),
        (" \n\t", [NEWLINE]),
        ("\n\n", [NEWLINE]),
    ],
)
def test_whitespace_only(text, expected):
    assert split_text(text) == expected


def test_latin_words_and_whitespace():
    assert split_text("Hello, world!\nbye") == [
        Word("Hello,", NON_CJK, False, True),
        SPACE,
        Word("world!", NON_CJK, False, True),
        NEWLINE,
        Word("bye", NON_CJK, False, False),
    ]


def test_leading_and_trailing_whitespace_kept_once():
    assert split_text("  a  ") == [SPACE, Word("a", NON_CJK, False, False), SPACE]


def test_non_cjk_punctuation_flags():
    (word,) = split_text("(note)")
    assert word.has_leading_punctuation is True
    assert word.has_trailing_punctuation is True

    (word,) = split_text("$100")
    assert word.has_leading_punctuation is True
    assert word.has_trailing_punctuation is False


# --------------------------------------------------------------------------- #
# CJK handling
# --------------------------------------------------------------------------- #

def test_latin_followed_by_cjk_gets_breakpoints():
    assert split_text("hello世界") == [
        Word("hello", NON_CJK, False, False),
        BREAKPOINT,
        _cj("世"),
        BREAKPOINT,
        _cj("界"),
    ]


def test_cjk_followed_by_latin():
    assert split_text("世hello") == [
        _cj("世"),
        BREAKPOINT,
        Word("hello", NON_CJK, False, False),
    ]


@pytest.mark.parametrize("text", ["foo。", "。foo", "foo、bar"])
def test_no_breakpoint_between_latin_and_cjk_punctuation(text):
    tokens = split_text(text)
    assert BREAKPOINT not in tokens
    assert all(isinstance(t, Word) for t in tokens)


def test_cjk_punctuation_classification():
    assert split_text("foo。") == [
        Word("foo", NON_CJK, False, False),
        Word("。", PUNCT, True, True),
    ]


def test_cj_letter_next_to_cjk_punctuation_is_breakable():
    assert split_text("中。") == [_cj("中"), BREAKPOINT, Word("。", PUNCT, True, True)]


@pytest.mark.parametrize(
    "char, kind",
    [
        ("한", K),
        ("中", CJ),
        ("あ", CJ),
        ("カ", CJ),
    ],
)
def test_korean_versus_chinese_japanese(char, kind):
    tokens = split_text(f"a {char} b")
    assert tokens[2] == Word(char, kind, False, False)


def test_korean_words_keep_breakpoints_between_syllables():
    assert split_text("한국") == [
        Word("한", K, False, False),
        BREAKPOINT,
        Word("국", K, False, False),
    ]


def test_ideographic_space_suppresses_breakpoints():
    tokens = split_text("中　文")
    assert [t.value for t in tokens] == ["中", "　", "文"]
    assert BREAKPOINT not in tokens


def test_variation_selector_stays_with_its_character():
    text = "葛\U000E0100"
    assert split_text(text) == [_cj(text)]


def test_classify_cjk_character():
    assert classify_cjk_character("」") == Word("」", PUNCT, True, True)
    assert classify_cjk_character("가") == Word("가", K, False, False)
    assert classify_cjk_character("字") == _cj("字")


# --------------------------------------------------------------------------- #
# needs_breakpoint
# --------------------------------------------------------------------------- #

@pytest.mark.parametrize(
    "previous, current, expected",
    [
        (None, _cj("中"), False),
        (SPACE, _cj("中"), False),
        (_cj("中"), SPACE, False),
        (Word("a", NON_CJK, False, False), _cj("中"), True),
        (Word("a", NON_CJK, False, False), Word("。", PUNCT, True, True), False),
        (Word("。", PUNCT, True, True), Word("a", NON_CJK, False, False), False),
        (Word("。", PUNCT, True, True), Word("、", PUNCT, True, True), True),
        (_cj("中"), Word("한", K, False, False), True),
        (_cj("　"), _cj("中"), False),
    ],
)
def test_needs_breakpoint(previous, current, expected):
    assert needs_breakpoint(previous, current) is expected


# --------------------------------------------------------------------------- #
# Invariant checking
# --------------------------------------------------------------------------- #

def test_check_no_adjacent_whitespace_raises():
    with pytest.raises(InvariantViolation) as excinfo:
        check_no_adjacent_whitespace([Word("a", NON_CJK, False, False), SPACE, BREAKPOINT])
    assert isinstance(excinfo.value, AssertionError)
    assert "consecutive whitespace" in str(excinfo.value)


def test_check_no_adjacent_whitespace_accepts_valid_sequence():
    check_no_adjacent_whitespace(split_text("a b\nc"))
    check_no_adjacent_whitespace([])


@pytest.mark.parametrize("enabled, expected_calls", [(True, 1), (False, 0)])
def test_split_text_runs_check_when_configured(monkeypatch, enabled, expected_calls):
    calls = []
    monkeypatch.setattr(segment, "check_no_adjacent_whitespace", calls.append)
    split_text("a b", MdfillConfig(check_invariants=enabled))
    assert len(calls) == expected_calls


def test_split_text_skips_check_in_production(monkeypatch):
    calls = []
    monkeypatch.setenv("MDFILL_ENV", "production")
    monkeypatch.setattr(segment, "check_no_adjacent_whitespace", calls.append)
    split_text("a b")
    assert calls == []


# --------------------------------------------------------------------------- #
# Properties over the corpus
# --------------------------------------------------------------------------- #

@pytest.mark.parametrize("text", CORPUS)
def test_never_adjacent_whitespace(text):
    _assert_no_adjacent_whitespace(split_text(text))


@pytest.mark.parametrize("text", CORPUS)
def test_non_whitespace_content_preserved(text):
    joined = "".join(token.value for token in split_text(text))
    assert re.sub(r"[\t\n ]", "", joined) == re.sub(r"[\t\n ]", "", text)


@pytest.mark.parametrize("text", CORPUS)
def test_cjk_words_are_single_characters(text):
    for token in split_text(text):
        if isinstance(token, Word) and token.kind is not NON_CJK:
            assert len(token.value) == 1


@pytest.mark.parametrize("text", CORPUS)
def test_punctuation_flags_follow_kind(text):
    for token in split_text(text):
        if not isinstance(token, Word):
            continue
        if token.kind is PUNCT:
            assert token.has_leading_punctuation and token.has_trailing_punctuation
        elif token.kind in (CJ, K):
            assert not token.has_leading_punctuation
            assert not token.has_trailing_punctuation


# --------------------------------------------------------------------------- #
# Properties over generated input
# --------------------------------------------------------------------------- #

ALPHABET = "a 。中한\t\n　!"


def _generated_texts(count=300, seed=20261018):
    rng = random.Random(seed)
    return [
        "".join(rng.choice(ALPHABET) for _ in range(rng.randint(0, 24)))
        for _ in range(count)
    ]


def test_properties_hold_for_generated_mixes():
    for text in _generated_texts():
        tokens = split_text(text, MdfillConfig(check_invariants=True))

        _assert_no_adjacent_whitespace(tokens)

        joined = "".join(token.value for token in tokens)
        assert re.sub(r"[\t\n ]", "", joined) == re.sub(r"[\t\n ]", "", text), text

        for token in tokens:
            if isinstance(token, Word) and token.kind is not NON_CJK:
                assert len(token.value) == 1, text
