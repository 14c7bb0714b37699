"""WORDCAP word commands.

- ``wordcap demo`` capitalizes the built-in demonstration list and prints
  ``[Hello, World, From, Kotlin]``.
- ``wordcap capitalize ITEMS...`` capitalizes items given as arguments and/or
  read line by line from stdin.

Behavior
- Words go to **stdout**; ``Skipped`` notices go to **stderr** so the result
  can be piped.
- An argument equal to the null marker (``null`` by default) stands for an
  absent item.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from wordcap import config
from wordcap.adapters.notifier import LoggingSkipNotifier, StreamSkipNotifier
from wordcap.domain.capitalize import capitalize_words

from .helpers import OutputFormat, format_words, render_words

if TYPE_CHECKING:
    from collections.abc import Iterable

    from wordcap.interfaces.notifier import SkipNotifier

logger = logging.getLogger(__name__)


STDIN_ENCODING = "utf-8"  # pragma: no mutate

INVALID_STDIN_MSG = "stdin is not valid UTF-8 (byte {position}: {reason})."


def _resolve_null_marker(items: Iterable[str], null_marker: str) -> list[str | None]:
    """Replace arguments equal to the null marker with ``None``.

    Args:
        items: Raw item strings from the command line or stdin.
        null_marker: The value that stands for an absent item.

    Returns:
        list[str | None]: The items, with markers turned into ``None``.
    """
    return [None if item == null_marker else item for item in items]


def _split_stdin_lines(text: str) -> list[str]:
    """Split decoded stdin into items, one per ``\\n``-terminated line.

    Only ``\\n`` ends a line (a ``\\r`` before it is dropped); other line
    boundaries such as form feeds stay inside the item. A final newline does
    not start an extra empty item.

    Args:
        text: The decoded contents of stdin.

    Returns:
        list[str]: One item per line; empty lines become empty items.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _read_stdin_items() -> list[str]:
    """Read items from stdin, one per line.

    Returns:
        list[str]: Items in input order.

    Raises:
        click.UsageError: If stdin is not valid UTF-8.
    """
    data = click.get_binary_stream("stdin").read()
    try:
        text = data.decode(STDIN_ENCODING)
    except UnicodeDecodeError as e:
        raise click.UsageError(
            INVALID_STDIN_MSG.format(position=e.start, reason=e.reason)
        ) from e
    return _split_stdin_lines(text)


@click.command()
def demo() -> None:
    """Capitalize the demonstration list and print the result."""
    logger.debug("Running demo on %d items", len(config.DEMO_ITEMS))
    words = capitalize_words(config.DEMO_ITEMS, StreamSkipNotifier())
    click.echo(format_words(words))


@click.command()
@click.argument("items", nargs=-1)
@click.option(
    "--null-marker",
    default=config.DEFAULT_NULL_MARKER,
    envvar=f"{config.ENV_PREFIX}_NULL_MARKER",
    show_default=True,
    show_envvar=True,
    help="Argument value that stands for an absent item.",
)
@click.option(
    "--stdin",
    "read_stdin",
    is_flag=True,
    default=False,
    help="Also read items from standard input, one per line (after ITEMS).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.LIST.value,
    show_default=True,
    help="How to print the words: bracketed list, one per line, or a JSON array.",
)
@click.option(
    "--quiet-skips",
    is_flag=True,
    default=False,
    help="Log skipped items instead of printing 'Skipped' to stderr.",
)
def capitalize(
    items: tuple[str, ...],
    null_marker: str,
    read_stdin: bool,
    output_format: str,
    quiet_skips: bool,
) -> None:
    """Capitalize every word in ITEMS.

    Each item is lowercased and split on spaces; each word then starts with
    an uppercase letter. Empty items and the null marker are skipped.
    """
    raw_items = list(items)
    if read_stdin:
        raw_items.extend(_read_stdin_items())

    notifier: SkipNotifier = (
        LoggingSkipNotifier() if quiet_skips else StreamSkipNotifier()
    )
    words = capitalize_words(_resolve_null_marker(raw_items, null_marker), notifier)
    if text := render_words(words, OutputFormat(output_format.lower())):
        click.echo(text)
