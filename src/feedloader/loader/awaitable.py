"""Awaitable bridge for callback-based loaders.

Lets coroutine code await a loader. Callbacks may fire in the calling frame
or from another thread; both resolve the same future.

Example:
    >>> import asyncio
    >>> from feedloader.composition.testing import InjectableLoader
    >>> from feedloader.loader.awaitable import load_items
    >>> from feedloader.models.item import FeedItem
    >>> loader = InjectableLoader(items=[FeedItem(), FeedItem()])
    >>> len(asyncio.run(load_items(loader)))
    2
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from feedloader.models.outcome import LoadOutcome

if TYPE_CHECKING:
    from feedloader.loader.base import FeedLoader
    from feedloader.models.item import FeedItem

logger = logging.getLogger("feedloader.loader")


async def load_outcome(loader: FeedLoader, timeout: float | None = None) -> LoadOutcome:
    """Run one load and return its outcome.

    Args:
        loader: Loader to invoke.
        timeout: Seconds to wait for a callback (None waits forever).

    Returns:
        LoadOutcome for whichever callback fired first.

    Raises:
        TimeoutError: If no callback fired within ``timeout``. A callback
            arriving after that is dropped.
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future[LoadOutcome] = loop.create_future()

    def _resolve(outcome: LoadOutcome) -> None:
        if not future.done():
            future.set_result(outcome)

    def _dispatch(outcome: LoadOutcome) -> None:
        # A callback may arrive after a timeout, once the loop has closed.
        try:
            loop.call_soon_threadsafe(_resolve, outcome)
        except RuntimeError:
            logger.debug("Dropping late load outcome; event loop is closed")

    def on_success(items: list[FeedItem]) -> None:
        _dispatch(LoadOutcome.success(items))

    def on_failure(error: Exception) -> None:
        _dispatch(LoadOutcome.failure(error))

    loader.load(on_success, on_failure)
    return await asyncio.wait_for(future, timeout)


async def load_items(loader: FeedLoader, timeout: float | None = None) -> list[FeedItem]:
    """Run one load and return its items.

    Raises:
        Exception: The error reported by the loader's failure callback.
        TimeoutError: If no callback fired within ``timeout``.
    """
    outcome = await load_outcome(loader, timeout)
    return outcome.unwrap()
