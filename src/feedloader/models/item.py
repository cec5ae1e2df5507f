"""Feed item - the unit of loaded data.

A FeedItem carries no payload. It only has identity: every new item is
distinct, and an item always equals itself.

Example:
    >>> from feedloader.models.item import FeedItem
    >>> a, b = FeedItem(), FeedItem()
    >>> a == a
    True
    >>> a == b
    False
"""

from __future__ import annotations

import uuid

from pydantic import Field

from feedloader.models.base import FeedLoaderModel


def _new_id() -> str:
    return uuid.uuid4().hex


class FeedItem(FeedLoaderModel):
    """Identity-only feed item.

    Example:
        >>> from feedloader.models.item import FeedItem
        >>> item = FeedItem()
        >>> len(item.id)
        32
        >>> item.model_copy() == item
        True
    """

    id: str = Field(default_factory=_new_id, min_length=1, description="Opaque identity")
