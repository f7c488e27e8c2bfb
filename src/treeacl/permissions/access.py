"""Access-check helpers over a resolved permission set.

Used by callers after ``resolve_for_path()`` to gate an action on an entity.
"""

from __future__ import annotations

from typing import Iterable

from .models import EntityPermissionSet


def has_permission(permission_set: EntityPermissionSet, permission: str) -> bool:
    """Check if a resolved set grants one action code.

    Example::

        result = resolve_for_path(records, (100, 50, 1))
        has_permission(result, Permissions.PUBLISH)
    """
    return permission in permission_set.get_all_permissions()


def has_all_permissions(permission_set: EntityPermissionSet, permissions: Iterable[str]) -> bool:
    """Check that every code in ``permissions`` is granted. Accepts ``"FA"`` or a list."""
    granted = permission_set.get_all_permissions()
    return all(code in granted for code in permissions)


def has_any_permission(permission_set: EntityPermissionSet, permissions: Iterable[str]) -> bool:
    granted = permission_set.get_all_permissions()
    return any(code in granted for code in permissions)


__all__ = [
    "has_all_permissions",
    "has_any_permission",
    "has_permission",
]
