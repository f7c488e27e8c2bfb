"""Tests for same-entity permission merging."""

from __future__ import annotations

import pytest

from treeacl import (
    EntityPermission,
    PermissionInputError,
    get_assigned_permissions_for_node,
    merge_permission_strings,
)


def record(perms: str, entity_id: int = 10, group_id: int = 1) -> EntityPermission:
    return EntityPermission(group_id, entity_id, perms)


class TestMergePermissionStrings:
    """Tests for merge_permission_strings."""

    def test_identical_records_do_not_duplicate(self) -> None:
        merged = merge_permission_strings([record("CRUD"), record("CRUD", group_id=2)])
        assert "".join(merged) == "CRUD"

    def test_idempotent(self) -> None:
        records = [record("CRUD"), record("CRUD", group_id=2)]
        assert merge_permission_strings(records) == merge_permission_strings(records)

    def test_appends_new_codes_only(self) -> None:
        """Base 'CR' kept first, 'U' and 'D' appended, 'R' not repeated."""
        merged = merge_permission_strings([record("CR"), record("RUD", group_id=2)])
        assert merged == ("C", "R", "U", "D")

    def test_base_order_preserved(self) -> None:
        merged = merge_permission_strings([record("DC"), record("CD", group_id=2), record("A", group_id=3)])
        assert "".join(merged) == "DCA"

    def test_single_record(self) -> None:
        assert merge_permission_strings([record("FA")]) == ("F", "A")

    def test_empty_input(self) -> None:
        assert merge_permission_strings([]) == ()

    def test_empty_base(self) -> None:
        assert "".join(merge_permission_strings([record(""), record("FA", group_id=2)])) == "FA"

    def test_duplicate_codes_within_record_collapse(self) -> None:
        assert merge_permission_strings([record("FFA")]) == ("F", "A")

    def test_mixed_entities_rejected(self) -> None:
        with pytest.raises(PermissionInputError) as exc_info:
            merge_permission_strings([record("F", entity_id=10), record("A", entity_id=11)])
        assert exc_info.value.details["entity_ids"] == [10, 11]


class TestGetAssignedPermissionsForNode:
    """Tests for get_assigned_permissions_for_node."""

    def test_filters_by_node(self) -> None:
        records = [
            record("CR", entity_id=10),
            record("X", entity_id=11),
            record("RUD", entity_id=10, group_id=2),
        ]
        assert get_assigned_permissions_for_node(records, 10) == "CRUD"
        assert get_assigned_permissions_for_node(records, 11) == "X"

    def test_missing_node_returns_none(self) -> None:
        assert get_assigned_permissions_for_node([record("F")], 99) is None

    def test_node_with_empty_grant(self) -> None:
        assert get_assigned_permissions_for_node([record("")], 10) == ""
