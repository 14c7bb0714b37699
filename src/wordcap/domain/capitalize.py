"""Word capitalization rules.

`capitalize_words` turns a sequence of optional strings into a flat list of
words. Each present, non-empty item is lowercased and split on single spaces;
blank tokens are dropped and every remaining token gets an uppercase first
character. Absent (``None``) and empty items contribute nothing and are
reported to a skip notifier, once each, in input order.

An item made only of spaces is not skipped: it is split like any other item
and simply yields no words, so it produces no skip notification.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from wordcap.interfaces.notifier import SkipNotifier

logger = logging.getLogger(__name__)

SEPARATOR = " "  # pragma: no mutate


def capitalize_first(word: str) -> str:
    """Lowercase ``word`` and uppercase its first character.

    Args:
        word: The token to normalize.

    Returns:
        The normalized token; ``""`` stays ``""``.
    """
    lowered = word.lower()
    return lowered[:1].upper() + lowered[1:]


def _split_words(item: str) -> list[str]:
    """Lowercase ``item`` and split it into non-blank tokens.

    Args:
        item: A present, non-empty input item.

    Returns:
        list[str]: Tokens separated by single spaces. Tokens that are empty or
        made only of whitespace are dropped.
    """
    return [token for token in item.lower().split(SEPARATOR) if token.strip()]


def capitalize_words(
    items: Iterable[str | None], notifier: SkipNotifier | None = None
) -> list[str]:
    """Capitalize every word across ``items``, preserving order.

    Args:
        items: Input items; ``None`` marks an absent item.
        notifier: Receives one call per skipped item. When omitted, skips are
            logged at INFO on this module's logger.

    Returns:
        The words of all processed items, in item order then token order.
    """
    words: list[str] = []
    skips = 0
    for position, item in enumerate(items):
        if not item:  # None or ""
            skips += 1
            if notifier is None:
                logger.info("Skipped item %d (%r)", position, item)
            else:
                notifier.skipped(position, item)
            continue
        words.extend(capitalize_first(token) for token in _split_words(item))
    logger.debug("Capitalized %d word(s), skipped %d item(s)", len(words), skips)
    return words
