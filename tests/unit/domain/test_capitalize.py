"""Unit tests for `wordcap.domain.capitalize`.

Covers the per-word rule (`capitalize_first`) and the list transformation
(`capitalize_words`): ordering, blank-token filtering, and how absent, empty
and whitespace-only items are treated.
"""

import logging

import pytest

from wordcap.adapters.notifier import InMemorySkipNotifier
from wordcap.domain.capitalize import capitalize_first, capitalize_words

# pylint: disable=redefined-outer-name


@pytest.fixture
def notifier():
    """Return a fresh in-memory skip notifier."""
    return InMemorySkipNotifier()


# ---------------------------------------------------------------------------
# capitalize_first
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("hello", "Hello"),
        ("hellO", "Hello"),
        ("WORLD", "World"),
        ("k", "K"),
        ("Already", "Already"),
        ("1st", "1st"),
        ("", ""),
    ],
)
def test_capitalize_first(word: str, expected: str) -> None:
    """First character is uppercased and the rest lowercased."""
    assert capitalize_first(word) == expected


# ---------------------------------------------------------------------------
# capitalize_words: concrete scenarios
# ---------------------------------------------------------------------------


def test_demo_list(notifier, demo_items):
    """Mixed list: words are capitalized, None and "" are skipped."""
    assert capitalize_words(demo_items, notifier) == ["Hello", "World", "From", "Kotlin"]
    assert notifier.count == 3
    assert notifier.positions == [1, 3, 5]


def test_empty_input(notifier):
    """No items yields no words and no notifications."""
    assert capitalize_words([], notifier) == []
    assert notifier.count == 0


def test_spaces_only_item_is_not_skipped(notifier):
    """A whitespace-only item yields nothing but is not reported as skipped."""
    assert capitalize_words(["   "], notifier) == []
    assert notifier.count == 0


def test_consecutive_spaces_do_not_make_empty_words(notifier):
    """Runs of spaces between words are ignored."""
    assert capitalize_words(["a  b"], notifier) == ["A", "B"]
    assert capitalize_words(["  lead and trail  "], notifier) == [
        "Lead",
        "And",
        "Trail",
    ]


def test_single_none(notifier):
    """A lone None is skipped once."""
    assert capitalize_words([None], notifier) == []
    assert notifier.positions == [0]


def test_empty_string_is_skipped_like_none(notifier):
    """The empty string is handled exactly like an absent item."""
    assert capitalize_words(["", None], notifier) == []
    assert notifier.positions == [0, 1]


def test_only_space_is_a_separator(notifier):
    """Tabs stay inside a token; a tab-only token is blank and dropped."""
    assert capitalize_words(["fOo\tbAr", "\t"], notifier) == ["Foo\tbar"]
    assert notifier.count == 0


def test_skips_do_not_stop_processing(notifier):
    """Items after a skipped one are still processed."""
    assert capitalize_words([None, "", "last wOrd"], notifier) == ["Last", "Word"]


def test_accepts_any_iterable(notifier):
    """Generators are consumed once, in order."""
    items = (item for item in ["one two", None, "three"])
    assert capitalize_words(items, notifier) == ["One", "Two", "Three"]
    assert notifier.positions == [1]


def test_without_notifier_logs_skips(caplog):
    """With no notifier, each skip is logged at INFO on the domain logger."""
    with caplog.at_level(logging.INFO, logger="wordcap.domain.capitalize"):
        words = capitalize_words(["x", None, ""])
    assert words == ["X"]
    skipped = [r for r in caplog.records if r.getMessage().startswith("Skipped")]
    assert len(skipped) == 2
    assert all(r.levelno == logging.INFO for r in skipped)
