"""Tests for manifests/kinds.py: kind-priority tables."""

import pytest

from releaseorder.manifests.kinds import (
    INSTALL_ORDER,
    UNINSTALL_ORDER,
    UNKNOWN_KIND,
    kind_order,
    kind_priority,
)
from releaseorder.manifests.models import SortOrder


class TestKindTables:
    def test_unknown_is_last_in_both(self):
        assert INSTALL_ORDER[-1] == UNKNOWN_KIND
        assert UNINSTALL_ORDER[-1] == UNKNOWN_KIND

    def test_same_length(self):
        assert len(INSTALL_ORDER) == len(UNINSTALL_ORDER)

    def test_uninstall_mirrors_install(self):
        n = len(INSTALL_ORDER)
        for i, kind in enumerate(INSTALL_ORDER[:-1]):
            assert UNINSTALL_ORDER.index(kind) == n - 2 - i

    def test_no_duplicates(self):
        assert len(set(INSTALL_ORDER)) == len(INSTALL_ORDER)

    def test_dependencies_before_dependents(self):
        def before(a, b):
            return INSTALL_ORDER.index(a) < INSTALL_ORDER.index(b)

        assert before("Namespace", "Deployment")
        assert before("ClusterRole", "ClusterRoleBinding")
        assert before("Role", "RoleBinding")
        assert before("ConfigMap", "Pod")
        assert before("PersistentVolumeClaim", "StatefulSet")
        assert before("Service", "Ingress")

    def test_kind_order(self):
        assert kind_order(SortOrder.INSTALL) is INSTALL_ORDER
        assert kind_order(SortOrder.UNINSTALL) is UNINSTALL_ORDER


class TestKindPriority:
    @pytest.mark.parametrize("order", list(SortOrder))
    def test_unlisted_kind_maps_to_unknown(self, order):
        last = len(INSTALL_ORDER) - 1
        assert kind_priority("Widget", order) == last
        assert kind_priority("", order) == last
        assert kind_priority(UNKNOWN_KIND, order) == last

    def test_install_and_uninstall(self):
        assert kind_priority("Namespace", SortOrder.INSTALL) == 0
        assert kind_priority("APIService", SortOrder.UNINSTALL) == 0
        assert kind_priority("Namespace", SortOrder.UNINSTALL) == len(INSTALL_ORDER) - 2

    def test_accepts_string_order(self):
        assert kind_priority("Namespace", "install") == 0

    def test_kinds_are_case_sensitive(self):
        assert kind_priority("namespace", SortOrder.INSTALL) == len(INSTALL_ORDER) - 1
