# topmark:header:start
#
#   project      : DocForge
#   file         : test_text_layout.py
#   file_relpath : tests/layout/test_text_layout.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `docforge.layout.text`: sanitizing and greedy wrapping."""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from docforge.layout.text import (
    append_wrapped,
    is_text_line,
    layout_paragraphs,
    sanitize,
    wrap,
)
from tests.strategies_docforge import any_text


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, ""),
        ("", ""),
        ("   ", ""),
        ("Members:\t12\nActive", "Members: 12 Active"),
        ("  a    b  ", "a b"),
        ("Café Kasarani", "Cafe Kasarani"),
        ("Price: 5 000", "Price: 5 000"),
        ("会员 list", "list"),
        (42, "42"),
    ],
)
def test_sanitize_examples(raw: object, expected: str) -> None:
    assert sanitize(raw) == expected


def test_wrap_packs_words_greedily() -> None:
    assert wrap("the quick brown fox", 10) == ["the quick", "brown fox"]


def test_wrap_exact_fit_stays_on_one_line() -> None:
    assert wrap("abcde fghij", 11) == ["abcde fghij"]


def test_wrap_hard_splits_long_words_with_hyphen() -> None:
    assert wrap("abcdefghij", 4) == ["abc-", "def-", "ghij"]


def test_wrap_long_word_after_short_word() -> None:
    assert wrap("xy abcdefgh z", 5) == ["xy", "abcd-", "efgh", "z"]


def test_wrap_empty_input_yields_one_blank_line() -> None:
    assert wrap("", 10) == [""]
    assert wrap("\n\t ", 10) == [""]


def test_wrap_rejects_width_below_two() -> None:
    with pytest.raises(ValueError):
        wrap("text", 1)


def test_append_wrapped_and_layout_paragraphs() -> None:
    lines: list[str] = ["Heading"]
    append_wrapped(lines, "one two three", 7)
    assert lines == ["Heading", "one two", "three"]

    assert layout_paragraphs(["Members: 12", "", "Projects: 3"], 92) == [
        "Members: 12",
        "",
        "Projects: 3",
    ]


def test_is_text_line() -> None:
    assert is_text_line("Projects: 3 (2 active)")
    assert not is_text_line("Café")
    assert not is_text_line("tab\there")
    assert not is_text_line("abcdef", max_width=5)


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=200)
@given(text=any_text, width=st.integers(min_value=2, max_value=120))
def test_wrap_output_is_valid_text_lines(text: str, width: int) -> None:
    lines = wrap(text, width)
    assert lines
    assert all(is_text_line(line, width) for line in lines)


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=200)
@given(text=any_text, width=st.integers(min_value=2, max_value=120))
def test_wrap_is_idempotent(text: str, width: int) -> None:
    once = wrap(sanitize(text), width)
    twice = [again for line in once for again in wrap(line, width)]
    assert twice == once


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=200)
@given(text=any_text)
def test_sanitize_is_idempotent(text: str) -> None:
    clean = sanitize(text)
    assert sanitize(clean) == clean
    assert is_text_line(clean)
