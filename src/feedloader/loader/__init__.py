"""Loader capability and awaitable bridge."""

from feedloader.loader.awaitable import load_items, load_outcome
from feedloader.loader.base import BaseFeedLoader, FailureCallback, FeedLoader, SuccessCallback

__all__ = [
    "BaseFeedLoader",
    "FailureCallback",
    "FeedLoader",
    "SuccessCallback",
    "load_items",
    "load_outcome",
]
