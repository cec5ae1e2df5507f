"""Value types."""

from feedloader.models.base import FeedLoaderModel
from feedloader.models.item import FeedItem
from feedloader.models.outcome import LoadOutcome

__all__ = [
    "FeedItem",
    "FeedLoaderModel",
    "LoadOutcome",
]
