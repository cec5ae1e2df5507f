"""Retry and fallback composition helpers.

``retry(loader, n)`` nests ``n`` FallbackLoaders around the same loader, so
one ``load()`` call attempts ``loader`` up to ``n + 1`` times and stops at the
first success. When every attempt fails, the last error is reported.

There is no delay between attempts. Compose with ``fallback()`` to reach a
different loader once the retries are exhausted.

Example:
    >>> from feedloader.composition.ops import fallback, retry
    >>> from feedloader.composition.testing import InjectableLoader, capture
    >>> from feedloader.core.exceptions import LoadError
    >>> from feedloader.models.item import FeedItem
    >>> network = InjectableLoader(error=LoadError())
    >>> cache = InjectableLoader(items=[FeedItem()])
    >>> outcome = capture(fallback(retry(network, 3), cache))
    >>> outcome.is_success, network.load_count
    (True, 4)
"""

from __future__ import annotations

import logging
from functools import reduce

from feedloader.composition.chain import FallbackLoader, ensure_loader
from feedloader.core.config import get_settings
from feedloader.core.exceptions import ConfigurationError
from feedloader.loader.base import FeedLoader

logger = logging.getLogger("feedloader.composition")


def fallback(primary: FeedLoader, secondary: FeedLoader) -> FeedLoader:
    """Compose ``primary`` with a ``secondary`` loader used on failure.

    Works for any object satisfying the FeedLoader protocol, including
    loaders that do not inherit BaseFeedLoader.

    Raises:
        ConfigurationError: If either operand is not a loader.
    """
    return FallbackLoader(primary=primary, secondary=secondary)


def retry(loader: FeedLoader, count: int | None = None) -> FeedLoader:
    """Attempt ``loader`` up to ``count + 1`` times.

    Each retry nests one more callback frame on the failure path, so the
    count is capped by ``Settings.max_retry_count``.

    Args:
        loader: Loader to re-attempt.
        count: Retries after the first attempt. None uses the configured
            ``default_retry_count``.

    Returns:
        ``loader`` itself when ``count`` is 0, otherwise a chain of
        ``count`` FallbackLoaders, each falling back to ``loader``.

    Raises:
        ConfigurationError: If ``count`` is negative, above the configured
            ``max_retry_count``, or not an int, or ``loader`` is not a loader.

    Example:
        >>> from feedloader.composition.ops import retry
        >>> from feedloader.composition.testing import InjectableLoader
        >>> loader = InjectableLoader()
        >>> retry(loader, 0) is loader
        True
    """
    ensure_loader(loader, "loader")
    if count is None:
        count = get_settings().default_retry_count
    if isinstance(count, bool) or not isinstance(count, int):
        msg = f"retry count must be an int, got {type(count).__name__}"
        raise ConfigurationError(msg)
    if count < 0:
        msg = f"retry count must be >= 0, got {count}"
        raise ConfigurationError(msg)
    limit = get_settings().max_retry_count
    if count > limit:
        msg = f"retry count must be <= {limit}, got {count}"
        raise ConfigurationError(msg)

    logger.debug("Composing %d retries of %r", count, type(loader).__name__)
    return reduce(
        lambda chain, _: FallbackLoader(primary=chain, secondary=loader),
        range(count),
        loader,
    )
