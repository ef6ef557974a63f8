"""
Hook classification.

Decides whether a sub-document is a lifecycle hook, an ordinary manifest,
or must be discarded because it declares a hook event nobody understands.
"""

from __future__ import annotations

import re

import structlog

from releaseorder.config import Settings, get_settings
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
)

logger = structlog.get_logger()

_KNOWN_DELETE_POLICIES = frozenset(policy.value for policy in HookDeletePolicy)

# Plain ASCII integers only: no underscores, no non-ASCII digits
_WEIGHT = re.compile(r"[+-]?[0-9]+")


def split_annotation_list(value: str | None) -> list[str]:
    """Split a comma separated annotation value, dropping blank tokens."""
    if not value:
        return []
    return [token.strip() for token in value.split(",") if token.strip()]


def parse_weight(value: str | None, path: str = "") -> int:
    """Parse a weight annotation. Missing or malformed weights are 0."""
    if value is None or not value.strip():
        return 0
    if not _WEIGHT.fullmatch(value.strip()):
        logger.warning("invalid_weight", path=path, value=value)
        return 0
    return int(value.strip())


def classify(
    document: Document, envelope: Envelope, settings: Settings | None = None
) -> Classified:
    """
    Classify one sub-document as a Hook, a Manifest, or Discarded.

    A document without a hook declaration (or with one listing no events)
    is a Manifest weighted by the resource weight annotation. A hook
    declaration naming any unknown event discards the whole document.
    Event order is kept as declared. Delete policies are passed through
    without validation.
    """
    settings = settings or get_settings()
    annotations = envelope.annotations

    tokens = split_annotation_list(annotations.get(settings.hook_annotation))
    if not tokens:
        return Manifest(
            name=document.path,
            content=document.content,
            head=SimpleHead(kind=envelope.kind, api_version=envelope.api_version),
            weight=parse_weight(annotations.get(settings.weight_annotation), document.path),
        )

    events: list[HookEvent] = []
    for token in tokens:
        try:
            events.append(HookEvent(token))
        except ValueError:
            logger.debug(
                "hook_discarded",
                path=document.path,
                name=envelope.name,
                hook_event=token,
            )
            return Discarded(path=document.path, reason=f"unknown hook event: {token}")

    delete_policies = split_annotation_list(
        annotations.get(settings.hook_delete_policy_annotation)
    )
    for policy in delete_policies:
        if policy not in _KNOWN_DELETE_POLICIES:
            logger.debug("unrecognized_delete_policy", path=document.path, policy=policy)

    return Hook(
        name=envelope.name,
        kind=envelope.kind,
        path=document.path,
        manifest=document.content,
        weight=parse_weight(annotations.get(settings.hook_weight_annotation), document.path),
        events=tuple(events),
        delete_policies=tuple(delete_policies),
    )
