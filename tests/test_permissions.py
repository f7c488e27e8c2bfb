"""Tests for permission models, codes, paths and access checks."""

from __future__ import annotations

import dataclasses

import pytest

from treeacl import (
    EntityPermission,
    EntityPermissionSet,
    InvalidPathError,
    Permissions,
    UserGroup,
    has_all_permissions,
    has_any_permission,
    has_permission,
    parse_path,
)


class TestPermissions:
    """Tests for Permissions constants."""

    def test_codes_are_single_characters(self) -> None:
        for attr in dir(Permissions):
            if attr.startswith("_") or attr == "ALL":
                continue
            value = getattr(Permissions, attr)
            if callable(value):
                continue  # Skip builders: join()
            assert len(value) == 1, f"{attr}={value!r} is not a single code"
            assert value in Permissions.ALL, f"{attr}={value!r} missing from ALL"

    def test_unique_codes(self) -> None:
        values = [
            getattr(Permissions, attr)
            for attr in dir(Permissions)
            if not attr.startswith("_") and attr != "ALL" and not callable(getattr(Permissions, attr))
        ]
        assert len(values) == len(set(values)), "Duplicate permission codes found"

    def test_join(self) -> None:
        assert Permissions.join(Permissions.BROWSE, Permissions.UPDATE, Permissions.BROWSE) == "FA"


class TestEntityPermission:
    """Tests for the EntityPermission record."""

    def test_string_is_split_into_codes(self) -> None:
        perm = EntityPermission(1, 100, "FCA")
        assert perm.assigned_permissions == ("F", "C", "A")
        assert perm.permission_string == "FCA"
        assert perm.is_default_permissions is False

    def test_any_iterable_is_stored_as_tuple(self) -> None:
        """Strings, lists, sets and generators all become a tuple of codes."""
        for source in ("FA", ["F", "A"], iter("FA"), (c for c in "FA")):
            perm = EntityPermission(1, 100, source)
            assert isinstance(perm.assigned_permissions, tuple)
            assert perm.assigned_permissions == ("F", "A")
        assert set(EntityPermission(1, 100, {"F"}).assigned_permissions) == {"F"}

    def test_duplicates_collapse_in_order(self) -> None:
        assert EntityPermission(1, 100, ["C", "F", "C"]).assigned_permissions == ("C", "F")

    def test_immutable(self) -> None:
        perm = EntityPermission(1, 100, "F")
        with pytest.raises(dataclasses.FrozenInstanceError):
            perm.entity_id = 5  # type: ignore[misc]

    def test_equality(self) -> None:
        assert EntityPermission(1, 100, "FA") == EntityPermission(1, 100, ["F", "A"])
        assert EntityPermission(1, 100, "F") != EntityPermission(1, 100, "F", is_default_permissions=True)

    def test_repr_shows_kind(self) -> None:
        assert "default" in repr(EntityPermission(1, 100, "F", is_default_permissions=True))
        assert "explicit" in repr(EntityPermission(1, 100, "F"))


class TestEntityPermissionSet:
    """Tests for the resolved permission set."""

    def test_empty_sentinel(self) -> None:
        empty = EntityPermissionSet.empty()
        assert empty.entity_id is None
        assert empty.is_empty
        assert empty.get_all_permissions() == frozenset()
        assert empty.assigned_permissions == ()

    def test_union_of_contributions(self) -> None:
        result = EntityPermissionSet(
            100,
            [EntityPermission(1, 100, "FA"), EntityPermission(2, 50, "AD")],
        )
        assert not result.is_empty
        assert result.group_ids == (1, 2)
        assert result.assigned_permissions == ("F", "A", "D")
        assert result.get_all_permissions() == frozenset("FAD")


class TestUserGroup:
    def test_default_permissions_normalized(self) -> None:
        group = UserGroup(1, "editors", default_permissions="FFA")
        assert group.default_permissions == ("F", "A")


class TestParsePath:
    """Tests for stored path parsing."""

    def test_reverses_root_first_path(self) -> None:
        assert parse_path("-1,1,50,100") == (100, 50, 1, -1)

    def test_single_id(self) -> None:
        assert parse_path("100") == (100,)

    def test_blank(self) -> None:
        assert parse_path("") == ()
        assert parse_path(None) == ()
        assert parse_path(" , ") == ()

    def test_whitespace_and_trailing_separator(self) -> None:
        assert parse_path(" -1, 1 ,50,") == (50, 1, -1)

    def test_custom_separator(self) -> None:
        assert parse_path("-1/1/50", separator="/") == (50, 1, -1)

    def test_invalid_segment(self) -> None:
        with pytest.raises(InvalidPathError, match="Invalid id"):
            parse_path("-1,abc,50")

    def test_cycle_rejected(self) -> None:
        with pytest.raises(InvalidPathError, match="occurs twice"):
            parse_path("-1,1,50,1")


class TestAccessHelpers:
    """Tests for access checks over a resolved set."""

    result = EntityPermissionSet(100, [EntityPermission(1, 100, "FA"), EntityPermission(2, 100, "U")])

    def test_has_permission(self) -> None:
        assert has_permission(self.result, Permissions.BROWSE)
        assert has_permission(self.result, Permissions.PUBLISH)
        assert not has_permission(self.result, Permissions.DELETE)

    def test_has_all_permissions(self) -> None:
        assert has_all_permissions(self.result, "FAU")
        assert not has_all_permissions(self.result, [Permissions.BROWSE, Permissions.DELETE])

    def test_has_any_permission(self) -> None:
        assert has_any_permission(self.result, "DU")
        assert not has_any_permission(self.result, "DC")

    def test_empty_set_grants_nothing(self) -> None:
        assert not has_permission(EntityPermissionSet.empty(), Permissions.BROWSE)
