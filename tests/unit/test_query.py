"""Unit tests for free-text query patterns."""

from __future__ import annotations

import pytest

from webtext.query import build_query_pattern, query_atoms


@pytest.mark.parametrize(
    ("query", "text"),
    [
        ("hello", "hello"),
        ("hello", "say hello to me"),
        ("hello world", "hello world"),
        ("hello world", "the world says hello"),
        ("hello/world", "the world says hello"),
        ("HELLO", "say Hello"),
        ("AT&T", "call AT&T now"),
        ("hello world", "hello\nworld"),
    ],
)
def test_exhaustive_pattern_matches_all_words_in_any_order(query: str, text: str) -> None:
    """Exhaustive patterns should match texts containing every word."""

    assert build_query_pattern(query).search(text)


@pytest.mark.parametrize(
    ("query", "text"),
    [
        ("hello", "say aloha to me"),
        ("hello world", "say hello to me"),
        ("hello", ""),
        ("hell", "hello"),
    ],
)
def test_exhaustive_pattern_rejects_missing_words(query: str, text: str) -> None:
    """Exhaustive patterns should not match when a whole word is missing."""

    assert not build_query_pattern(query).search(text)


def test_non_exhaustive_pattern_matches_any_word() -> None:
    """Non-exhaustive patterns should match texts containing at least one word."""

    assert build_query_pattern("hello world", False).search("say hello to me")
    assert build_query_pattern("hello aloha say", False).search("say hello to me")
    assert not build_query_pattern("hello world", False).search("say aloha to me")


def test_pattern_is_reusable() -> None:
    """A compiled pattern should be usable against many candidates."""

    pattern = build_query_pattern("red car")
    candidates = ["a red car", "a blue car", "car: red", "redcar"]

    assert [bool(pattern.search(candidate)) for candidate in candidates] == [
        True,
        False,
        True,
        False,
    ]


def test_query_atoms_split_on_non_word_characters() -> None:
    """Atoms should keep letters, digits, and `&` only."""

    assert query_atoms(" hello, world/AT&T_42 ") == ["hello", "world", "AT&T", "42"]
    assert query_atoms(None) == []


def test_standalone_ampersand_is_matched_as_a_word() -> None:
    """A lone `&` in the query should match a lone `&` in the text."""

    pattern = build_query_pattern("rock & roll")

    assert pattern.search("rock & roll")
    assert pattern.search("roll, then rock & repeat")
    assert not pattern.search("rock and roll")
    assert not pattern.search("rock&roll")
