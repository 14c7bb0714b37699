"""Rendering of capitalized words for the terminal.

Pure formatting only; the commands decide where the text is written.
"""

import json
from collections.abc import Sequence
from enum import Enum


class OutputFormat(str, Enum):
    """Supported renderings of a word list."""

    LIST = "list"
    LINES = "lines"
    JSON = "json"


def format_words(words: Sequence[str]) -> str:
    """Return ``words`` as ``[A, B, C]`` (``[]`` when empty)."""
    return "[" + ", ".join(words) + "]"


def render_words(words: Sequence[str], output_format: OutputFormat) -> str:
    """Render ``words`` in the requested format.

    Args:
        words: Capitalized words, in order.
        output_format: One of OutputFormat.

    Returns:
        str: Text without a trailing newline. ``lines`` yields ``""`` for no
        words.
    """
    if output_format is OutputFormat.LINES:
        return "\n".join(words)
    if output_format is OutputFormat.JSON:
        return json.dumps(list(words))
    return format_words(words)
