"""Value objects for permission resolution.

All models are frozen dataclasses: records handed to the resolver are
never mutated and every resolution returns fresh instances.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional


def _normalize_codes(codes: str | Iterable[str]) -> tuple[str, ...]:
    """Distinct codes in first-seen order. Strings are split per character."""
    if isinstance(codes, str):
        return tuple(dict.fromkeys(codes))
    return tuple(dict.fromkeys(code for code in codes if code))


@dataclass(frozen=True)
class EntityPermission:
    """Permissions one group holds on one entity.

    ``assigned_permissions`` accepts ``"CRUD"`` or ``["C", "R"]`` and is
    stored as a tuple of distinct codes, keeping first-seen order.
    ``is_default_permissions`` marks the group's baseline grant as opposed
    to an explicit grant on this entity.
    """

    group_id: int
    entity_id: int
    # str | Iterable[str] on input, tuple[str, ...] after __post_init__
    assigned_permissions: str | Iterable[str] = ()
    is_default_permissions: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "assigned_permissions", _normalize_codes(self.assigned_permissions))

    @property
    def permission_string(self) -> str:
        return "".join(self.assigned_permissions)

    def __repr__(self) -> str:
        kind = "default" if self.is_default_permissions else "explicit"
        return (
            f"EntityPermission(group_id={self.group_id!r}, entity_id={self.entity_id!r}, "
            f"assigned_permissions={self.permission_string!r}, {kind})"
        )


@dataclass(frozen=True)
class EntityPermissionSet:
    """Effective permissions for one entity.

    Holds at most one contributing record per group. The empty sentinel
    (``EntityPermissionSet.empty()``) has no entity id and no records.
    """

    entity_id: Optional[int]
    permissions: tuple[EntityPermission, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "permissions", tuple(self.permissions))

    @classmethod
    def empty(cls) -> "EntityPermissionSet":
        return cls(entity_id=None)

    @property
    def is_empty(self) -> bool:
        return self.entity_id is None and not self.permissions

    @property
    def group_ids(self) -> tuple[int, ...]:
        return tuple(p.group_id for p in self.permissions)

    @property
    def assigned_permissions(self) -> tuple[str, ...]:
        """Union of contributed codes, first-seen order across contributions."""
        return _normalize_codes(code for p in self.permissions for code in p.assigned_permissions)

    def get_all_permissions(self) -> frozenset[str]:
        """Union of contributed codes."""
        return frozenset(self.assigned_permissions)


@dataclass(frozen=True)
class UserGroup:
    """A principal group and its baseline grant."""

    group_id: int
    alias: str = ""
    # str | Iterable[str] on input, tuple[str, ...] after __post_init__
    default_permissions: str | Iterable[str] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "default_permissions", _normalize_codes(self.default_permissions))


__all__ = [
    "EntityPermission",
    "EntityPermissionSet",
    "UserGroup",
]
