"""Inherited permission resolution along an entity path.

Provides:
- ``resolve_single_group()``: the record that applies to one group on a path.
- ``resolve_for_path()``: the effective permission set across all groups.

Paths are ordered deepest first: ``path_ids[0]`` is the entity being
checked, the last id is the root. An explicit grant on the closest node
overrides every grant above it; a group with no explicit grant anywhere
on the path falls back to its default record at the entity.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional, Sequence

from ..exceptions import InvalidPathError, MissingDefaultPermissionError
from .grouping import group_by_group_and_entity
from .models import EntityPermission, EntityPermissionSet

logger = logging.getLogger(__name__)


def _first_explicit(records: Sequence[EntityPermission]) -> Optional[EntityPermission]:
    explicit = [record for record in records if not record.is_default_permissions]
    if not explicit:
        return None
    if len(explicit) > 1:
        # Upstream data anomaly; the first record in input order wins.
        logger.warning(
            "Multiple explicit permission records for group %s on entity %s; using the first of %d",
            explicit[0].group_id,
            explicit[0].entity_id,
            len(explicit),
        )
    return explicit[0]


def resolve_single_group(
    entity_records: Mapping[int, Sequence[EntityPermission]],
    path_ids: Sequence[int],
    fallback_to_default: bool = False,
) -> Optional[EntityPermission]:
    """Find the permission record that applies to one group on a path.

    Walks ``path_ids`` deepest to shallowest and returns the first explicit
    record found. Shallower explicit records are never consulted once a
    deeper one matches.

    When the walk finds no explicit record:
    - ``fallback_to_default=False`` → ``None``.
    - ``fallback_to_default=True`` → the first record at the deepest path
      id holding any record for the group (normally the group's default at
      the entity itself).

    Args:
        entity_records: entity id → records for a single group.
        path_ids: Entity ids, deepest first.
        fallback_to_default: Return the group's default when nothing explicit is found.

    Returns:
        The applicable EntityPermission, or None.

    Raises:
        InvalidPathError: ``path_ids`` is empty and fallback was requested.
        MissingDefaultPermissionError: fallback was requested but no path id
            has any record for the group.

    Example::

        # path 100 (leaf) → 50 → 1 (root); explicit grant at 50
        resolve_single_group(
            {100: [default_r], 50: [explicit_rw]},
            (100, 50, 1),
            fallback_to_default=True,
        )  # explicit_rw
    """
    for entity_id in path_ids:
        records = entity_records.get(entity_id)
        if not records:
            continue
        explicit = _first_explicit(records)
        if explicit is not None:
            return explicit

    if not fallback_to_default:
        return None

    if not path_ids:
        raise InvalidPathError("Cannot fall back to default permissions on an empty path")

    for entity_id in path_ids:
        records = entity_records.get(entity_id)
        if records:
            return records[0]

    group_ids = {record.group_id for records in entity_records.values() for record in records}
    raise MissingDefaultPermissionError(
        f"No default permission record on path {tuple(path_ids)!r}",
        group_ids=sorted(group_ids),
        path_ids=tuple(path_ids),
    )


def resolve_for_path(
    group_records: Iterable[EntityPermission],
    path_ids: Sequence[int],
    fallback_to_default: bool = True,
) -> EntityPermissionSet:
    """Resolve the effective permission set of a principal on one entity.

    ``group_records`` holds the records of every group the principal belongs
    to, for the entities on the path. Each group contributes the record
    chosen by :func:`resolve_single_group`; the effective permissions are
    the union of all contributions, so a permission granted by any group
    is held.

    Args:
        group_records: Records for the principal's groups on the path.
        path_ids: Entity ids, deepest first.
        fallback_to_default: Let groups without an explicit grant contribute
            their default record.

    Returns:
        EntityPermissionSet for ``path_ids[0]``, or the empty set when there
        are no records or no path.

    Raises:
        MissingDefaultPermissionError: fallback was requested and a group has
            no record anywhere on the path.

    Example::

        result = resolve_for_path(records, (100, 50, 1))
        result.get_all_permissions()  # frozenset({"R", "W", "C"})
    """
    records = list(group_records)
    if not records or not path_ids:
        return EntityPermissionSet.empty()

    entity_id = path_ids[0]
    by_group = group_by_group_and_entity(records)

    contributions: list[EntityPermission] = []
    for group_id, entity_records in by_group.items():
        resolved = resolve_single_group(entity_records, path_ids, fallback_to_default)
        if resolved is None:
            logger.debug("Group %s has no explicit permissions on entity %s", group_id, entity_id)
            continue
        contributions.append(resolved)

    logger.debug(
        "Resolved %d group contribution(s) for entity %s over path of length %d",
        len(contributions),
        entity_id,
        len(path_ids),
    )
    return EntityPermissionSet(entity_id=entity_id, permissions=tuple(contributions))


__all__ = [
    "resolve_for_path",
    "resolve_single_group",
]
