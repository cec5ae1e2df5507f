"""Fallback composition.

A FallbackLoader tries its primary loader and, only if that fails, hands the
same callbacks to its secondary loader. The primary's error is consumed; the
caller sees the secondary's outcome exactly as it reports it.

Example:
    >>> from feedloader.composition.chain import FallbackLoader
    >>> from feedloader.composition.testing import InjectableLoader, capture
    >>> from feedloader.core.exceptions import LoadError
    >>> from feedloader.models.item import FeedItem
    >>> cached = FeedItem()
    >>> loader = FallbackLoader(
    ...     primary=InjectableLoader(error=LoadError()),
    ...     secondary=InjectableLoader(items=[cached]),
    ... )
    >>> capture(loader).items == (cached,)
    True
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from feedloader.core.exceptions import ConfigurationError
from feedloader.loader.base import BaseFeedLoader, FailureCallback, FeedLoader, SuccessCallback
from feedloader.models.item import FeedItem

logger = logging.getLogger("feedloader.composition")


def ensure_loader(value: object, role: str) -> FeedLoader:
    """Return ``value`` if it satisfies the FeedLoader protocol.

    Raises:
        ConfigurationError: If ``value`` has no ``load`` method.
    """
    if not isinstance(value, FeedLoader):
        msg = f"{role} must implement FeedLoader, got {type(value).__name__}"
        raise ConfigurationError(msg)
    return value


@dataclass(frozen=True)
class FallbackLoader(BaseFeedLoader):
    """Loader that consults ``secondary`` when ``primary`` fails.

    Each ``load()`` makes exactly one primary attempt and at most one
    secondary attempt.

    Args:
        primary: Loader tried first.
        secondary: Loader tried after a primary failure.
    """

    primary: FeedLoader
    secondary: FeedLoader

    def __post_init__(self) -> None:
        ensure_loader(self.primary, "primary")
        ensure_loader(self.secondary, "secondary")

    def load(self, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        """Load from primary, falling back on failure.

        Args:
            on_success: Receives the primary's items, or the secondary's.
            on_failure: Receives the secondary's error. The primary's error
                never reaches it.
        """

        def primary_succeeded(items: list[FeedItem]) -> None:
            on_success(items)

        def primary_failed(error: Exception) -> None:
            logger.debug(
                "Primary loader %r failed (%s); loading from fallback %r",
                type(self.primary).__name__,
                error,
                type(self.secondary).__name__,
            )
            self.secondary.load(on_success, on_failure)

        self.primary.load(primary_succeeded, primary_failed)
