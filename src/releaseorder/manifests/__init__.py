"""Release manifest classification and ordering."""

from releaseorder.manifests.engine import sort_manifests
from releaseorder.manifests.envelope import extract_envelope
from releaseorder.manifests.hooks import classify
from releaseorder.manifests.kinds import (
    INSTALL_ORDER,
    UNINSTALL_ORDER,
    UNKNOWN_KIND,
    kind_order,
    kind_priority,
)
from releaseorder.manifests.models import (
    Classified,
    Discarded,
    Document,
    Envelope,
    Hook,
    HookDeletePolicy,
    HookEvent,
    Manifest,
    SimpleHead,
    SortOrder,
    VersionSet,
)
from releaseorder.manifests.sorter import sort_by_weight_and_kind, sort_key
from releaseorder.manifests.splitter import (
    split_documents,
    split_manifest_keys_in_order,
    split_manifests,
)

__all__ = [
    "INSTALL_ORDER",
    "UNINSTALL_ORDER",
    "UNKNOWN_KIND",
    "Classified",
    "Discarded",
    "Document",
    "Envelope",
    "Hook",
    "HookDeletePolicy",
    "HookEvent",
    "Manifest",
    "SimpleHead",
    "SortOrder",
    "VersionSet",
    "classify",
    "extract_envelope",
    "kind_order",
    "kind_priority",
    "sort_by_weight_and_kind",
    "sort_key",
    "sort_manifests",
    "split_documents",
    "split_manifest_keys_in_order",
    "split_manifests",
]
