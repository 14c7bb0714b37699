"""Skip notifier adapters.

Concrete SkipNotifier implementations:

- StreamSkipNotifier: prints the skip notice to a text stream (stderr by
  default, so stdout stays machine-readable) and logs the details at DEBUG.
- LoggingSkipNotifier: sends the skip notice to a logger only.
- InMemorySkipNotifier: records skipped positions for later inspection.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from wordcap.config import SKIP_NOTICE
from wordcap.interfaces.notifier import SkipNotifier

if TYPE_CHECKING:
    from typing import TextIO

# pylint: disable=too-few-public-methods

logger = logging.getLogger(__name__)


class StreamSkipNotifier(SkipNotifier):
    """Write one notice line per skipped item to a text stream."""

    def __init__(
        self, stream: TextIO | None = None, notice: str = SKIP_NOTICE
    ) -> None:
        self._stream = stream
        self._notice = notice

    def skipped(self, position: int, item: str | None) -> None:
        """Print the notice line and log the skipped position at DEBUG."""
        logger.debug("Skipping item %d: %r", position, item)
        if self._stream is None:
            # stderr is looked up on every call
            click.echo(self._notice, err=True)
        else:
            click.echo(self._notice, file=self._stream)


class LoggingSkipNotifier(SkipNotifier):
    """Report skipped items on a logger."""

    def __init__(
        self, log: logging.Logger | None = None, level: int = logging.INFO
    ) -> None:
        self._logger = log or logger
        self._level = level

    def skipped(self, position: int, item: str | None) -> None:
        """Log the notice with the position and item at the configured level."""
        self._logger.log(self._level, "%s item %d (%r)", SKIP_NOTICE, position, item)


class InMemorySkipNotifier(SkipNotifier):
    """Keep the positions of skipped items in memory."""

    def __init__(self) -> None:
        self.positions: list[int] = []

    def skipped(self, position: int, item: str | None) -> None:
        """Remember the position of the skipped item."""
        self.positions.append(position)

    @property
    def count(self) -> int:
        """Return the number of skipped items seen so far."""
        return len(self.positions)
