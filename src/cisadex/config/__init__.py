"""Configuration module for Cisadex."""

from cisadex.config.settings import CoordinationTuning, Settings, get_settings

__all__ = ["CoordinationTuning", "Settings", "get_settings"]
