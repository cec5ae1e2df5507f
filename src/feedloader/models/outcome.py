"""Load outcome value.

A LoadOutcome is the explicit form of what a loader reports through its
callbacks: either a list of items or an error, never both.

Example:
    >>> from feedloader.models.item import FeedItem
    >>> from feedloader.models.outcome import LoadOutcome
    >>> ok = LoadOutcome.success([FeedItem()])
    >>> ok.is_success, len(ok.items)
    (True, 1)
    >>> failed = LoadOutcome.failure(RuntimeError("offline"))
    >>> failed.is_success
    False
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from feedloader.models.item import FeedItem


@dataclass(frozen=True)
class LoadOutcome:
    """Result of a single load attempt.

    Use the ``success`` / ``failure`` constructors rather than building
    instances directly.

    Attributes:
        items: Loaded items (empty on failure).
        error: Failure signal, or None on success.
    """

    items: tuple[FeedItem, ...] = ()
    error: Exception | None = None

    @classmethod
    def success(cls, items: Iterable[FeedItem]) -> LoadOutcome:
        """Build a successful outcome."""
        return cls(items=tuple(items))

    @classmethod
    def failure(cls, error: Exception) -> LoadOutcome:
        """Build a failed outcome."""
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        """True if the load succeeded."""
        return self.error is None

    def unwrap(self) -> list[FeedItem]:
        """Return the items, or raise the failure error.

        Example:
            >>> from feedloader.models.outcome import LoadOutcome
            >>> LoadOutcome.success([]).unwrap()
            []
            >>> LoadOutcome.failure(KeyError("x")).unwrap()
            Traceback (most recent call last):
            KeyError: 'x'
        """
        if self.error is not None:
            raise self.error
        return list(self.items)
