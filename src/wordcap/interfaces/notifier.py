"""Interfaces for reporting skipped input items.

This module defines the SkipNotifier interface. The word capitalizer calls a
notifier once for every input item it skips (an absent item or the empty
string) so callers decide where the notice goes: a terminal stream, a logger,
or an in-memory record for inspection.
"""

import abc

# pylint: disable=too-few-public-methods


class SkipNotifier(abc.ABC):
    """Interface for receiving skip notifications."""

    @abc.abstractmethod
    def skipped(self, position: int, item: str | None) -> None:
        """Report that the item at ``position`` was skipped.

        Args:
            position: Zero-based index of the item in the input sequence.
            item: The skipped value (``None`` or ``""``).

        Implementations must not raise; a failing notifier would abort
        processing of the remaining items.
        """
