"""Feed loader protocol and base class.

Provides the FeedLoader protocol and the BaseFeedLoader base class, which
gives every concrete loader the fluent ``fallback()`` and ``retry()`` helpers.

A loader reports its outcome through exactly one of two callbacks: the
success callback with a list of items, or the failure callback with an
error. Callbacks may fire synchronously or later, from another thread.

Example:
    >>> from feedloader.loader.base import BaseFeedLoader, FeedLoader
    >>> hasattr(FeedLoader, "load")
    True
    >>> hasattr(BaseFeedLoader, "fallback")
    True
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Protocol, TypeAlias, runtime_checkable

from feedloader.models.item import FeedItem

SuccessCallback: TypeAlias = Callable[[list[FeedItem]], None]
FailureCallback: TypeAlias = Callable[[Exception], None]


@runtime_checkable
class FeedLoader(Protocol):
    """Protocol defining the loader capability.

    Anything with a conforming ``load`` method is a loader; it does not
    need to inherit from BaseFeedLoader.

    Example:
        >>> from feedloader.loader.base import FeedLoader
        >>> class Empty:
        ...     def load(self, on_success, on_failure):
        ...         on_success([])
        >>> isinstance(Empty(), FeedLoader)
        True
    """

    def load(self, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        """Load items, then invoke exactly one of the callbacks.

        Args:
            on_success: Called with the loaded items.
            on_failure: Called with the error if loading failed.
        """
        ...


class BaseFeedLoader(ABC):
    """Base class for feed loaders.

    Subclasses implement ``load()`` and inherit composition helpers:

    - ``fallback(other)`` consults ``other`` when this loader fails
    - ``retry(count)`` attempts this loader up to ``count + 1`` times

    Example:
        >>> from feedloader.composition.testing import InjectableLoader
        >>> from feedloader.core.exceptions import LoadError
        >>> from feedloader.models.item import FeedItem
        >>> network = InjectableLoader(error=LoadError())
        >>> cache = InjectableLoader(items=[FeedItem()])
        >>> loader = network.retry(2).fallback(cache)
        >>> type(loader).__name__
        'FallbackLoader'
    """

    @abstractmethod
    def load(self, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        """Load items, then invoke exactly one of the callbacks."""
        ...

    def fallback(self, loader: FeedLoader) -> FeedLoader:
        """Return a loader that falls back to ``loader`` when this one fails.

        Args:
            loader: Loader consulted only after a failure.

        Returns:
            A FallbackLoader with this loader as primary.
        """
        from feedloader.composition.ops import fallback

        return fallback(self, loader)

    def retry(self, count: int | None = None) -> FeedLoader:
        """Return a loader that attempts this one up to ``count + 1`` times.

        Args:
            count: Number of retries after the first attempt. Defaults to
                the configured ``default_retry_count``.

        Returns:
            The composed loader, or ``self`` when ``count`` is 0.
        """
        from feedloader.composition.ops import retry

        return retry(self, count)
