"""Core modules for releaseorder - centralized definitions and utilities."""

from releaseorder.core.errors import (
    ManifestParseError,
    ReleaseOrderError,
    format_error_message,
)

__all__ = [
    "ReleaseOrderError",
    "ManifestParseError",
    "format_error_message",
]
