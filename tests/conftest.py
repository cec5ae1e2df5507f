"""Shared fixtures for feedloader tests."""

from __future__ import annotations

import pytest

from feedloader.composition.testing import FeedLoaderMock, InjectableLoader
from feedloader.core.config import reset_settings
from feedloader.loader.base import FeedLoader


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Re-read settings from the environment for every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def make_sut():
    """Build a loader under test backed by a configurable double.

    Returns a factory yielding ``(sut, double)``: the sut is a plain
    FeedLoader, the double is the InjectableLoader behind it.
    """

    def _make() -> tuple[FeedLoader, InjectableLoader]:
        double = InjectableLoader()
        return FeedLoaderMock(loader=double), double

    return _make
