"""Tests for FeedItem."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from feedloader.models.item import FeedItem


class TestFeedItemIdentity:
    """Tests for FeedItem identity semantics."""

    def test_item_equals_itself(self) -> None:
        """An item is equal to itself."""
        item = FeedItem()

        assert item == item

    def test_new_items_are_distinct(self) -> None:
        """Each new item has its own identity."""
        items = [FeedItem() for _ in range(10)]

        assert len({item.id for item in items}) == 10
        assert items[0] != items[1]

    def test_items_are_hashable(self) -> None:
        """Items can be used in sets."""
        item = FeedItem()

        assert {item, item} == {item}


class TestFeedItemImmutability:
    """Tests for FeedItem immutability."""

    def test_frozen(self) -> None:
        """Items cannot be modified."""
        item = FeedItem()

        with pytest.raises(ValidationError):
            item.id = "other"  # type: ignore[misc]

    def test_rejects_unknown_fields(self) -> None:
        """Items carry no payload."""
        with pytest.raises(ValidationError):
            FeedItem(title="nope")  # type: ignore[call-arg]
