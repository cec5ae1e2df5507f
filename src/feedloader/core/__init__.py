"""Core configuration and errors."""

from feedloader.core.config import Settings, configure_logging, get_settings, reset_settings
from feedloader.core.exceptions import ConfigurationError, FeedLoaderError, LoadError

__all__ = [
    # Settings
    "Settings",
    "configure_logging",
    "get_settings",
    "reset_settings",
    # Errors
    "ConfigurationError",
    "FeedLoaderError",
    "LoadError",
]
