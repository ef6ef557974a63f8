"""
Error types for the release ordering engine.

The engine has exactly one failure mode: a sub-document whose structure
cannot be parsed. Everything else (blank content, private fragments,
unsupported hook declarations) is excluded silently.
"""

from __future__ import annotations

from typing import Any


class ReleaseOrderError(Exception):
    """Base exception for release ordering errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ManifestParseError(ReleaseOrderError):
    """Raised when a sub-document's structural envelope cannot be parsed."""


def format_error_message(error: ReleaseOrderError) -> str:
    """Format an error message for display to users."""
    msg = error.message
    if error.details:
        detail_str = ", ".join(f"{k}={v}" for k, v in error.details.items())
        msg = f"{msg} ({detail_str})"
    return msg
