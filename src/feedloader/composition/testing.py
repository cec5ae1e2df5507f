"""Testing utilities for loader composition.

This module provides loader doubles and a bounded-wait expectation so tests
can drive fallback and retry chains deterministically, without network or
storage.

Example:
    >>> from feedloader.composition.testing import InjectableLoader, capture
    >>> from feedloader.core.exceptions import LoadError
    >>> loader = InjectableLoader()
    >>> capture(loader).items
    ()
    >>> loader.error = LoadError()
    >>> capture(loader).is_success
    False
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from dataclasses import dataclass, field

from feedloader.core.config import get_settings
from feedloader.loader.base import BaseFeedLoader, FailureCallback, FeedLoader, SuccessCallback
from feedloader.models.item import FeedItem
from feedloader.models.outcome import LoadOutcome

logger = logging.getLogger("feedloader.testing")


class _CallCounter:
    """Thread-safe load counter shared by the doubles."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._count = 0

    def increment(self) -> int:
        with self._lock:
            self._count += 1
            return self._count

    @property
    def value(self) -> int:
        with self._lock:
            return self._count


@dataclass(eq=False)
class InjectableLoader(BaseFeedLoader):
    """Loader double returning preset items or a preset error.

    A set ``error`` always wins over ``items``. Both may be changed between
    calls; each call reads them at call time.

    Args:
        items: Items reported on success (default: empty).
        error: Error reported instead of items, if set.
        name: Name used in log messages.

    Example:
        >>> from feedloader.composition.testing import InjectableLoader, capture
        >>> from feedloader.models.item import FeedItem
        >>> item = FeedItem()
        >>> loader = InjectableLoader(items=[item])
        >>> capture(loader).items == (item,)
        True
        >>> loader.load_count
        1
    """

    items: list[FeedItem] = field(default_factory=list)
    error: Exception | None = None
    name: str = "injectable"
    _calls: _CallCounter = field(default_factory=_CallCounter, init=False, repr=False)

    def load(self, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        """Report ``error`` if set, otherwise a snapshot of ``items``."""
        attempt = self._calls.increment()
        error = self.error
        if error is not None:
            logger.debug("%s: attempt %d failed with %r", self.name, attempt, error)
            on_failure(error)
            return
        on_success(list(self.items))

    @property
    def load_count(self) -> int:
        """Number of times load() was called."""
        return self._calls.value


@dataclass(eq=False)
class ScriptedLoader(BaseFeedLoader):
    """Loader double replaying a script of outcomes, one per call.

    Once the script runs out, the last outcome repeats. Useful for flaky
    sources that fail a few times before succeeding.

    Args:
        outcomes: Outcomes to report, in call order. Must not be empty.
        name: Name used in log messages.

    Example:
        >>> from feedloader.composition.testing import ScriptedLoader, capture
        >>> from feedloader.core.exceptions import LoadError
        >>> from feedloader.models.outcome import LoadOutcome
        >>> flaky = ScriptedLoader([LoadOutcome.failure(LoadError()), LoadOutcome.success([])])
        >>> capture(flaky).is_success, capture(flaky).is_success
        (False, True)
    """

    outcomes: Sequence[LoadOutcome]
    name: str = "scripted"
    _calls: _CallCounter = field(default_factory=_CallCounter, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.outcomes:
            msg = "outcomes must not be empty"
            raise ValueError(msg)

    def load(self, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        """Report the next scripted outcome."""
        attempt = self._calls.increment()
        outcome = self.outcomes[min(attempt, len(self.outcomes)) - 1]
        if outcome.error is not None:
            logger.debug("%s: attempt %d failed with %r", self.name, attempt, outcome.error)
            on_failure(outcome.error)
            return
        on_success(list(outcome.items))

    @property
    def load_count(self) -> int:
        """Number of times load() was called."""
        return self._calls.value


@dataclass(frozen=True)
class FeedLoaderMock(BaseFeedLoader):
    """Pass-through loader.

    Forwards every call to the wrapped loader with the same callbacks, so
    tests can hold a plain FeedLoader while configuring the double behind it.
    """

    loader: FeedLoader

    def load(self, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        self.loader.load(on_success, on_failure)


@dataclass(frozen=True)
class DeferredLoader(BaseFeedLoader):
    """Loader that runs the wrapped loader on a background thread.

    Callbacks therefore fire after ``load()`` has returned, from another
    thread. Threads are daemons and are never joined, so a callback can
    still be running when the test that started it finishes.
    """

    loader: FeedLoader

    def load(self, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        thread = threading.Thread(
            target=self.loader.load,
            args=(on_success, on_failure),
            name=f"deferred-{type(self.loader).__name__}",
            daemon=True,
        )
        thread.start()


class ExpectationTimeout(AssertionError):
    """An expectation was not fulfilled in time."""


class LoadExpectation:
    """Bounded-wait expectation for callback results.

    ``fulfill()`` may be called from any thread. ``wait()`` blocks until the
    expectation is fulfilled or the timeout passes, and fails if it was
    fulfilled more than once.

    Example:
        >>> from feedloader.composition.testing import LoadExpectation
        >>> exp = LoadExpectation("loads items")
        >>> exp.fulfill()
        >>> exp.wait(timeout=0.1)
        >>> exp.fulfillment_count
        1
    """

    def __init__(self, description: str = "") -> None:
        self.description = description
        self._condition = threading.Condition()
        self._count = 0

    def fulfill(self) -> None:
        """Mark the expectation as fulfilled."""
        with self._condition:
            self._count += 1
            self._condition.notify_all()

    @property
    def fulfillment_count(self) -> int:
        """Number of times fulfill() was called."""
        with self._condition:
            return self._count

    def wait(self, timeout: float | None = None) -> None:
        """Wait for fulfilment.

        Args:
            timeout: Seconds to wait. Defaults to the configured
                ``expectation_timeout``.

        Raises:
            ExpectationTimeout: If not fulfilled within ``timeout``.
            AssertionError: If fulfilled more than once.
        """
        if timeout is None:
            timeout = get_settings().expectation_timeout
        with self._condition:
            fulfilled = self._condition.wait_for(lambda: self._count > 0, timeout)
            if not fulfilled:
                msg = f"expectation {self.description!r} not fulfilled within {timeout}s"
                raise ExpectationTimeout(msg)
            if self._count > 1:
                msg = f"expectation {self.description!r} fulfilled {self._count} times"
                raise AssertionError(msg)


def capture(loader: FeedLoader, timeout: float | None = None) -> LoadOutcome:
    """Run one load and return the outcome once a callback fires.

    Args:
        loader: Loader to invoke.
        timeout: Seconds to wait. Defaults to the configured
            ``expectation_timeout``.

    Raises:
        ExpectationTimeout: If neither callback fired in time.
        AssertionError: If more than one callback fired before the wait
            returned. A later callback from a deferred loader goes unnoticed.
    """
    expectation = LoadExpectation(f"load from {type(loader).__name__}")
    outcomes: list[LoadOutcome] = []

    def on_success(items: list[FeedItem]) -> None:
        outcomes.append(LoadOutcome.success(items))
        expectation.fulfill()

    def on_failure(error: Exception) -> None:
        outcomes.append(LoadOutcome.failure(error))
        expectation.fulfill()

    loader.load(on_success, on_failure)
    expectation.wait(timeout)
    return outcomes[0]
