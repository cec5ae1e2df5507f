"""Loader composition.

Loaders compose by wrapping: ``fallback`` consults a second loader after a
failure and ``retry`` re-attempts the same loader before giving up.

Example:
    >>> from feedloader.composition import fallback, retry
    >>> from feedloader.composition.testing import InjectableLoader, capture
    >>> from feedloader.core.exceptions import LoadError
    >>> from feedloader.models.item import FeedItem
    >>> item = FeedItem()
    >>> network = InjectableLoader(error=LoadError())
    >>> cache = InjectableLoader(items=[item])
    >>> capture(network.retry(3).fallback(cache)).items == (item,)
    True
"""

from __future__ import annotations

from feedloader.composition.chain import FallbackLoader
from feedloader.composition.ops import fallback, retry

__all__ = [
    "FallbackLoader",
    "fallback",
    "retry",
]
