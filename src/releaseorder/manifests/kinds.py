"""
Kind-priority tables.

Install order puts the kinds others depend on first (namespaces, policies,
accounts), then storage and configuration, then workloads, and networking
and aggregation last. Uninstall order is the exact reverse. Kinds missing
from the table resolve to UNKNOWN_KIND, which is last in both directions.
"""

from __future__ import annotations

from types import MappingProxyType

from releaseorder.manifests.models import SortOrder

UNKNOWN_KIND = "Unknown"

_INSTALL_KINDS: tuple[str, ...] = (
    "Namespace",
    "NetworkPolicy",
    "ResourceQuota",
    "LimitRange",
    "PodSecurityPolicy",
    "PodDisruptionBudget",
    "ServiceAccount",
    "Secret",
    "SecretList",
    "ConfigMap",
    "StorageClass",
    "PersistentVolume",
    "PersistentVolumeClaim",
    "CustomResourceDefinition",
    "ClusterRole",
    "ClusterRoleList",
    "ClusterRoleBinding",
    "ClusterRoleBindingList",
    "Role",
    "RoleList",
    "RoleBinding",
    "RoleBindingList",
    "Service",
    "DaemonSet",
    "Pod",
    "ReplicationController",
    "ReplicaSet",
    "Deployment",
    "HorizontalPodAutoscaler",
    "StatefulSet",
    "Job",
    "CronJob",
    "IngressClass",
    "Ingress",
    "APIService",
)

INSTALL_ORDER: tuple[str, ...] = (*_INSTALL_KINDS, UNKNOWN_KIND)
UNINSTALL_ORDER: tuple[str, ...] = (*reversed(_INSTALL_KINDS), UNKNOWN_KIND)

_INDEXES = MappingProxyType(
    {
        SortOrder.INSTALL: MappingProxyType({k: i for i, k in enumerate(INSTALL_ORDER)}),
        SortOrder.UNINSTALL: MappingProxyType({k: i for i, k in enumerate(UNINSTALL_ORDER)}),
    }
)


def kind_order(order: SortOrder) -> tuple[str, ...]:
    """Return the kind table for a direction."""
    return INSTALL_ORDER if order == SortOrder.INSTALL else UNINSTALL_ORDER


def kind_priority(kind: str, order: SortOrder) -> int:
    """Index of a kind in the direction's table; unlisted kinds map to UNKNOWN_KIND."""
    indexes = _INDEXES[SortOrder(order)]
    return indexes.get(kind, indexes[UNKNOWN_KIND])
