"""
Release manifest ordering.

Entry point that turns a rendered release bundle into ordered hooks and
manifests for the applier (install) or deleter (uninstall).
"""

from __future__ import annotations

from typing import AbstractSet, Mapping

from releaseorder.config import Settings, get_settings
from releaseorder.logging import bind_context
from releaseorder.manifests.envelope import extract_envelope
from releaseorder.manifests.hooks import classify
from releaseorder.manifests.models import Hook, Manifest, SortOrder
from releaseorder.manifests.sorter import sort_by_weight_and_kind
from releaseorder.manifests.splitter import split_documents


def sort_manifests(
    files: Mapping[str, str],
    versions: AbstractSet[str],
    order: SortOrder,
    settings: Settings | None = None,
) -> tuple[list[Hook], list[Manifest]]:
    """
    Split, classify and order a rendered release bundle.

    The version set is accepted for the renderer's validation and is not
    enforced here: documents with unrecognized API versions are still
    ordered.

    Args:
        files: Mapping of source key to rendered content
        versions: API versions recognized by the target platform (a VersionSet
            or any set of strings)
        order: Install or uninstall direction
        settings: Annotation keys and private prefix (defaults to env settings)

    Returns:
        Tuple of (hooks, manifests), each in application order

    Raises:
        ManifestParseError: If any sub-document cannot be parsed. No
            partial results are returned.
    """
    settings = settings or get_settings()
    order = SortOrder(order)
    log = bind_context(order=order.value)

    hooks: list[Hook] = []
    manifests: list[Manifest] = []
    discarded = 0

    for document in split_documents(files, settings.private_prefix):
        envelope = extract_envelope(document.content, document.path)

        if envelope.api_version and envelope.api_version not in versions:
            log.debug(
                "unrecognized_api_version",
                path=document.path,
                api_version=envelope.api_version,
            )

        result = classify(document, envelope, settings)
        if isinstance(result, Hook):
            hooks.append(result)
        elif isinstance(result, Manifest):
            manifests.append(result)
        else:
            discarded += 1

    sorted_hooks = sort_by_weight_and_kind(hooks, order)
    sorted_manifests = sort_by_weight_and_kind(manifests, order)

    log.info(
        "manifests_sorted",
        files=len(files),
        hooks=len(sorted_hooks),
        manifests=len(sorted_manifests),
        discarded=discarded,
    )
    return sorted_hooks, sorted_manifests
