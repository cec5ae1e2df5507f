"""Custom exceptions.

feedloader treats every load failure as interchangeable for composition, but
still raises from a small hierarchy so callers can catch package errors:

Example:
    >>> from feedloader.core.exceptions import FeedLoaderError, LoadError
    >>> isinstance(LoadError("offline"), FeedLoaderError)
    True
    >>> try:
    ...     raise LoadError("network down", source="network")
    ... except FeedLoaderError as e:
    ...     print(f"Caught: {type(e).__name__} from {e.source}")
    Caught: LoadError from network
"""

from __future__ import annotations


class FeedLoaderError(Exception):
    """Base exception for feedloader.

    Example:
        >>> from feedloader.core.exceptions import FeedLoaderError
        >>> str(FeedLoaderError("something went wrong"))
        'something went wrong'
    """


class LoadError(FeedLoaderError):
    """A load attempt failed.

    This is the generic failure signal. The cause is not interpreted by
    fallback or retry composition.

    Example:
        >>> from feedloader.core.exceptions import LoadError
        >>> err = LoadError()
        >>> str(err)
        'load failed'
        >>> err.source is None
        True
    """

    def __init__(
        self,
        message: str = "load failed",
        source: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.source = source
        self.cause = cause


class ConfigurationError(FeedLoaderError, ValueError):
    """Loader composition arguments are invalid.

    Example:
        >>> from feedloader.core.exceptions import ConfigurationError
        >>> raise ConfigurationError("count must be >= 0")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ConfigurationError: count must be >= 0
    """
