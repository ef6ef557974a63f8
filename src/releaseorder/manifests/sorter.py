"""
Weighted sorting shared by manifests and hooks.

Items are ordered by (weight, kind priority, name). Weight is ascending on
install and descending on uninstall. Kind priority comes from the
direction's own table and is always ascending. Name is always ascending,
so equal weight and kind order the same way in both directions.
"""

from __future__ import annotations

from typing import Iterable, Protocol, TypeVar

from releaseorder.manifests.kinds import kind_priority
from releaseorder.manifests.models import SortOrder


class Sortable(Protocol):
    """Anything with the three fields of the sort key."""

    @property
    def name(self) -> str: ...

    @property
    def kind(self) -> str: ...

    @property
    def weight(self) -> int: ...


T = TypeVar("T", bound=Sortable)


def sort_key(item: Sortable, order: SortOrder) -> tuple[int, int, str]:
    """Compute the three-part sort key of an item for a direction."""
    weight = item.weight if order == SortOrder.INSTALL else -item.weight
    return (weight, kind_priority(item.kind, order), item.name)


def sort_by_weight_and_kind(items: Iterable[T], order: SortOrder) -> list[T]:
    """Return a new list of items in application order (stable)."""
    order = SortOrder(order)
    return sorted(items, key=lambda item: sort_key(item, order))
