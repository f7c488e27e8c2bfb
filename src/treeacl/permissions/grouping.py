"""Group raw permission records into a group → entity → records table."""

from __future__ import annotations

from typing import Iterable

from .models import EntityPermission

GroupTable = dict[int, dict[int, list[EntityPermission]]]


def group_by_group_and_entity(records: Iterable[EntityPermission]) -> GroupTable:
    """Build a two-level lookup from a flat collection of records.

    Groups and entities appear in the order they are first seen; records
    within a bucket keep input order. Nothing is dropped, so duplicate
    records for the same (group, entity) pair all land in the same bucket.

    Example::

        table = group_by_group_and_entity(records)
        table[group_id][entity_id]  # -> [EntityPermission, ...]
    """
    table: GroupTable = {}
    for record in records:
        table.setdefault(record.group_id, {}).setdefault(record.entity_id, []).append(record)
    return table


__all__ = [
    "GroupTable",
    "group_by_group_and_entity",
]
