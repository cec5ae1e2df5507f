"""
feedloader - Composable Feed Loaders.

feedloader models data loading as a single capability: a loader reports a
list of items through a success callback, or an error through a failure
callback. Loaders compose by wrapping.

Key Features:
- Protocol-based design (any object with ``load`` is a loader)
- Fallback composition (consult a second loader after a failure)
- Retry composition (re-attempt the same loader before giving up)
- Test doubles and a bounded-wait expectation for callback-driven tests

Quick Start:
    >>> from feedloader import FeedItem, InjectableLoader, LoadError, capture
    >>> item = FeedItem()
    >>> network = InjectableLoader(error=LoadError())
    >>> cache = InjectableLoader(items=[item])
    >>> outcome = capture(network.retry(3).fallback(cache))
    >>> outcome.items == (item,), network.load_count
    (True, 4)
"""

# Composition
from feedloader.composition.chain import FallbackLoader
from feedloader.composition.ops import fallback, retry

# Test doubles and harness
from feedloader.composition.testing import (
    DeferredLoader,
    ExpectationTimeout,
    FeedLoaderMock,
    InjectableLoader,
    LoadExpectation,
    ScriptedLoader,
    capture,
)

# Core configuration and errors
from feedloader.core.config import Settings, configure_logging, get_settings
from feedloader.core.exceptions import ConfigurationError, FeedLoaderError, LoadError

# Loader capability
from feedloader.loader.awaitable import load_items, load_outcome
from feedloader.loader.base import BaseFeedLoader, FeedLoader
from feedloader.models.item import FeedItem
from feedloader.models.outcome import LoadOutcome

__version__ = "0.1.0"

__all__ = [
    # Models
    "FeedItem",
    "LoadOutcome",
    # Loader capability
    "FeedLoader",
    "BaseFeedLoader",
    "load_items",
    "load_outcome",
    # Composition
    "FallbackLoader",
    "fallback",
    "retry",
    # Testing
    "InjectableLoader",
    "ScriptedLoader",
    "FeedLoaderMock",
    "DeferredLoader",
    "LoadExpectation",
    "ExpectationTimeout",
    "capture",
    # Configuration
    "Settings",
    "get_settings",
    "configure_logging",
    # Errors
    "FeedLoaderError",
    "LoadError",
    "ConfigurationError",
    # Version
    "__version__",
]
