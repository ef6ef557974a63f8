"""Configuration for the release ordering engine."""

from releaseorder.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
