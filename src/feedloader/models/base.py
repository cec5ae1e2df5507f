"""Base model shared by feedloader value types.

Example:
    >>> from feedloader.models.base import FeedLoaderModel
    >>> FeedLoaderModel.model_config["frozen"]
    True
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class FeedLoaderModel(BaseModel):
    """Base model with standard configuration."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="forbid",
    )
