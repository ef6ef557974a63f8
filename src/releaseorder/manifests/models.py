"""
Release manifest models.

Data models for the sub-documents of a rendered release bundle and the
two things each one can become: an ordinary Manifest applied with the main
resource set, or a Hook run at named lifecycle points. Documents that are
neither are represented by Discarded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Iterable, Union


class SortOrder(StrEnum):
    """Direction in which a release's resources are ordered."""

    INSTALL = "install"
    UNINSTALL = "uninstall"


class HookEvent(StrEnum):
    """Lifecycle points at which a hook may run."""

    PRE_INSTALL = "pre-install"
    POST_INSTALL = "post-install"
    PRE_DELETE = "pre-delete"
    POST_DELETE = "post-delete"
    PRE_UPGRADE = "pre-upgrade"
    POST_UPGRADE = "post-upgrade"
    PRE_ROLLBACK = "pre-rollback"
    POST_ROLLBACK = "post-rollback"
    TEST = "test"


class HookDeletePolicy(StrEnum):
    """Delete policies understood by the hook executor."""

    BEFORE_HOOK_CREATION = "before-hook-creation"
    HOOK_SUCCEEDED = "hook-succeeded"
    HOOK_FAILED = "hook-failed"


class VersionSet(frozenset):
    """API versions recognized by the target platform."""

    def __new__(cls, versions: Iterable[str] = ()) -> VersionSet:
        return super().__new__(cls, versions)

    def has(self, api_version: str) -> bool:
        """Whether the platform recognizes the given API version."""
        return api_version in self


@dataclass(frozen=True)
class Document:
    """One sub-document of a named source file."""

    path: str  # Source key, shared by every sub-document of the file
    content: str


@dataclass(frozen=True)
class Envelope:
    """The structural fields needed to classify and order a document."""

    kind: str = ""
    api_version: str = ""
    name: str = ""
    annotations: dict[str, str] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class SimpleHead:
    """Kind and API version of a manifest."""

    kind: str
    api_version: str


@dataclass(frozen=True)
class Manifest:
    """An ordinary resource applied as part of the main release."""

    name: str  # Source key of the document
    content: str
    head: SimpleHead
    weight: int = 0

    @property
    def kind(self) -> str:
        return self.head.kind

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "kind": self.head.kind,
            "api_version": self.head.api_version,
            "weight": self.weight,
            "content": self.content,
        }


@dataclass(frozen=True)
class Hook:
    """A resource executed at lifecycle events instead of with the release."""

    name: str  # Name declared in the document's metadata
    kind: str
    path: str  # Source key of the document
    manifest: str
    weight: int = 0
    events: tuple[HookEvent, ...] = ()
    delete_policies: tuple[str, ...] = ()

    def runs_on(self, event: HookEvent) -> bool:
        """Whether this hook is bound to the given lifecycle event."""
        return event in self.events

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "kind": self.kind,
            "path": self.path,
            "weight": self.weight,
            "events": [event.value for event in self.events],
            "delete_policies": list(self.delete_policies),
            "manifest": self.manifest,
        }


@dataclass(frozen=True)
class Discarded:
    """A document excluded from both hooks and manifests."""

    path: str
    reason: str


# Every sub-document classifies to exactly one of these
Classified = Union[Hook, Manifest, Discarded]
