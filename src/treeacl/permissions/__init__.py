"""Hierarchical permission resolution.

Defines:
- Permissions: single-character action codes
- EntityPermission / EntityPermissionSet: record and result value objects
- group_by_group_and_entity(): group → entity → records table
- resolve_single_group() / resolve_for_path(): inheritance along a path
- merge_permission_strings(): union of records on the same entity
- parse_path(): stored root-first path → deepest-first ids
"""

from .access import has_all_permissions, has_any_permission, has_permission
from .constants import Permissions
from .grouping import GroupTable, group_by_group_and_entity
from .merge import get_assigned_permissions_for_node, merge_permission_strings
from .models import EntityPermission, EntityPermissionSet, UserGroup
from .paths import ensure_unique, parse_path
from .resolver import resolve_for_path, resolve_single_group

__all__ = [
    "EntityPermission",
    "EntityPermissionSet",
    "GroupTable",
    "Permissions",
    "UserGroup",
    "ensure_unique",
    "get_assigned_permissions_for_node",
    "group_by_group_and_entity",
    "has_all_permissions",
    "has_any_permission",
    "has_permission",
    "merge_permission_strings",
    "parse_path",
    "resolve_for_path",
    "resolve_single_group",
]
