"""Merge permission records that target the same entity.

A principal can hold several records for one node, e.g. a direct grant
plus a group grant. The merged result is the most permissive set: the
first record's codes in their original order, followed by any new codes
from later records in the order they are first seen.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..exceptions import PermissionInputError
from .models import EntityPermission


def _append_new(merged: list[str], additional: Iterable[str]) -> None:
    for code in additional:
        if code not in merged:
            merged.append(code)


def merge_permission_strings(records: Sequence[EntityPermission]) -> tuple[str, ...]:
    """Union the codes of records that share one entity id.

    Args:
        records: Records for a single entity, base record first.

    Returns:
        Distinct codes; base order kept, new codes appended.

    Raises:
        PermissionInputError: records target more than one entity.

    Example::

        merge_permission_strings([EntityPermission(1, 10, "CR"), EntityPermission(2, 10, "RUD")])
        # ("C", "R", "U", "D")
    """
    if not records:
        return ()

    entity_ids = {record.entity_id for record in records}
    if len(entity_ids) > 1:
        raise PermissionInputError(
            "Cannot merge permission records for different entities",
            entity_ids=sorted(entity_ids),
        )

    merged = list(records[0].assigned_permissions)
    for record in records[1:]:
        _append_new(merged, record.assigned_permissions)
    return tuple(merged)


def get_assigned_permissions_for_node(
    records: Iterable[EntityPermission],
    node_id: int,
) -> Optional[str]:
    """Merged permission string for ``node_id`` out of a mixed record list.

    Returns:
        The joined codes (``""`` if the node's records grant nothing), or
        None when no record targets the node.
    """
    node_records = [record for record in records if record.entity_id == node_id]
    if not node_records:
        return None
    return "".join(merge_permission_strings(node_records))


__all__ = [
    "get_assigned_permissions_for_node",
    "merge_permission_strings",
]
