"""Utility modules for Cisadex."""

from cisadex.utils.exceptions import (
    CisadexError,
    ConfigurationError,
    EntityDataError,
)
from cisadex.utils.tags import count_tags, dominant_tag

__all__ = [
    "CisadexError",
    "ConfigurationError",
    "EntityDataError",
    "count_tags",
    "dominant_tag",
]
