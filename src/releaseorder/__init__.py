"""releaseorder - classification and ordering of rendered release manifests."""

from releaseorder.core.errors import ManifestParseError, ReleaseOrderError
from releaseorder.logging import configure_logging
from releaseorder.manifests import (
    Hook,
    HookEvent,
    Manifest,
    SortOrder,
    VersionSet,
    sort_manifests,
)

__version__ = "0.1.0"

__all__ = [
    "Hook",
    "HookEvent",
    "Manifest",
    "ManifestParseError",
    "ReleaseOrderError",
    "SortOrder",
    "VersionSet",
    "configure_logging",
    "sort_manifests",
]
