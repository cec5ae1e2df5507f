"""Tests for LoadOutcome."""

from __future__ import annotations

import pytest

from feedloader.core.exceptions import LoadError
from feedloader.models.item import FeedItem
from feedloader.models.outcome import LoadOutcome


class TestLoadOutcome:
    """Tests for LoadOutcome construction and inspection."""

    def test_success_keeps_items_in_order(self) -> None:
        """Success outcomes keep item order and count."""
        items = [FeedItem(), FeedItem(), FeedItem()]

        outcome = LoadOutcome.success(items)

        assert outcome.is_success is True
        assert outcome.items == tuple(items)
        assert outcome.error is None

    def test_success_snapshot_is_independent(self) -> None:
        """Mutating the source list does not change the outcome."""
        items = [FeedItem()]
        outcome = LoadOutcome.success(items)

        items.append(FeedItem())

        assert len(outcome.items) == 1

    def test_failure(self) -> None:
        """Failure outcomes carry the error and no items."""
        error = LoadError()

        outcome = LoadOutcome.failure(error)

        assert outcome.is_success is False
        assert outcome.error is error
        assert outcome.items == ()

    def test_unwrap_success(self) -> None:
        """unwrap() returns a list of the items."""
        item = FeedItem()

        assert LoadOutcome.success([item]).unwrap() == [item]

    def test_unwrap_failure_raises(self) -> None:
        """unwrap() raises the failure error."""
        error = LoadError("offline")

        with pytest.raises(LoadError) as exc_info:
            LoadOutcome.failure(error).unwrap()

        assert exc_info.value is error

    def test_frozen(self) -> None:
        """Outcomes are immutable."""
        outcome = LoadOutcome.success([])

        with pytest.raises(AttributeError):
            outcome.error = LoadError()  # type: ignore[misc]
