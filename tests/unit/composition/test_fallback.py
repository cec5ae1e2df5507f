"""Tests for FallbackLoader."""

from __future__ import annotations

import logging

import pytest

from feedloader.composition.chain import FallbackLoader
from feedloader.composition.ops import fallback
from feedloader.composition.testing import DeferredLoader, InjectableLoader, capture
from feedloader.core.exceptions import ConfigurationError, LoadError
from feedloader.models.item import FeedItem


class TestFallbackLaw:
    """Tests for forwarding outcomes through a fallback."""

    def test_primary_fails_secondary_succeeds(self) -> None:
        """Outcome equals the secondary's when the primary fails."""
        item = FeedItem()
        loader = FallbackLoader(
            primary=InjectableLoader(error=LoadError()),
            secondary=InjectableLoader(items=[item]),
        )

        outcome = capture(loader)

        assert outcome.is_success
        assert outcome.items == (item,)

    def test_both_fail_reports_secondary_error(self) -> None:
        """The primary's error is discarded."""
        primary_error = LoadError("network")
        secondary_error = LoadError("cache")
        loader = FallbackLoader(
            primary=InjectableLoader(error=primary_error),
            secondary=InjectableLoader(error=secondary_error),
        )

        outcome = capture(loader)

        assert outcome.error is secondary_error

    def test_secondary_empty_success_is_forwarded(self) -> None:
        loader = FallbackLoader(
            primary=InjectableLoader(error=LoadError()),
            secondary=InjectableLoader(),
        )

        outcome = capture(loader)

        assert outcome.is_success
        assert outcome.items == ()


class TestFallbackShortCircuit:
    """Tests for skipping the secondary after a primary success."""

    def test_secondary_never_invoked(self) -> None:
        item = FeedItem()
        primary = InjectableLoader(items=[item])
        secondary = InjectableLoader(items=[FeedItem()])

        outcome = capture(FallbackLoader(primary=primary, secondary=secondary))

        assert outcome.items == (item,)
        assert primary.load_count == 1
        assert secondary.load_count == 0

    def test_primary_items_forwarded_unchanged(self) -> None:
        items = [FeedItem() for _ in range(5)]

        outcome = capture(fallback(InjectableLoader(items=items), InjectableLoader()))

        assert list(outcome.items) == items

    def test_one_attempt_each_per_call(self) -> None:
        primary = InjectableLoader(error=LoadError())
        secondary = InjectableLoader(error=LoadError())
        loader = FallbackLoader(primary=primary, secondary=secondary)

        capture(loader)
        capture(loader)

        assert primary.load_count == 2
        assert secondary.load_count == 2


class TestFallbackDispatch:
    """Tests for synchronous and deferred callbacks."""

    def test_deferred_primary(self) -> None:
        item = FeedItem()
        loader = FallbackLoader(
            primary=DeferredLoader(InjectableLoader(error=LoadError())),
            secondary=DeferredLoader(InjectableLoader(items=[item])),
        )

        assert capture(loader).items == (item,)

    def test_callback_errors_propagate(self) -> None:
        """Exceptions raised by the caller's callback are not swallowed."""
        loader = FallbackLoader(
            primary=InjectableLoader(items=[FeedItem()]),
            secondary=InjectableLoader(),
        )

        def explode(items: list[FeedItem]) -> None:
            raise RuntimeError("callback failed")

        with pytest.raises(RuntimeError, match="callback failed"):
            loader.load(explode, lambda error: None)


class TestFallbackConstruction:
    """Tests for FallbackLoader construction."""

    def test_rejects_non_loader_primary(self) -> None:
        with pytest.raises(ConfigurationError, match="primary"):
            FallbackLoader(primary="network", secondary=InjectableLoader())  # type: ignore[arg-type]

    def test_rejects_non_loader_secondary(self) -> None:
        with pytest.raises(ConfigurationError, match="secondary"):
            fallback(InjectableLoader(), 42)  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        loader = FallbackLoader(primary=InjectableLoader(), secondary=InjectableLoader())

        with pytest.raises(AttributeError):
            loader.primary = InjectableLoader()  # type: ignore[misc]


class TestFallbackLogging:
    """Tests for fallback log output."""

    def test_logs_consumed_error(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="feedloader.composition")
        loader = FallbackLoader(
            primary=InjectableLoader(error=LoadError("offline")),
            secondary=InjectableLoader(),
        )

        capture(loader)

        assert "loading from fallback" in caplog.text
        assert "offline" in caplog.text
