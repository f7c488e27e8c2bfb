"""In-memory permission store and path provider.

A dict-backed reference implementation of the collaborator interfaces.
Suitable for tests, fixtures and small embedded trees; production
services back the same interfaces with their relational store.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, Sequence

from .exceptions import GroupNotFoundError, InvalidPathError
from .interfaces import BasePathProvider, BasePermissionStore
from .permissions.models import EntityPermission, UserGroup
from .permissions.paths import ensure_unique, parse_path

logger = logging.getLogger(__name__)


class InMemoryPermissionStore(BasePermissionStore, BasePathProvider):
    """Thread-safe in-memory groups, explicit grants and entity paths.

    Example::

        store = InMemoryPermissionStore()
        store.add_group(UserGroup(1, "editors", default_permissions="F"))
        store.set_path(100, "-1,1,50,100")
        store.replace_group_permissions(1, "FA", 50)

        store.get_permissions([1], store.get_path(100))
    """

    def __init__(self, *, path_separator: str = ",") -> None:
        self._lock = threading.RLock()
        self._path_separator = path_separator
        self._groups: dict[int, UserGroup] = {}
        self._explicit: dict[tuple[int, int], tuple[str, ...]] = {}
        self._paths: dict[int, tuple[int, ...]] = {}

    # ── Groups ──────────────────────────────────────────

    def add_group(self, group: UserGroup) -> None:
        with self._lock:
            self._groups[group.group_id] = group

    def get_group(self, group_id: int) -> UserGroup:
        with self._lock:
            try:
                return self._groups[group_id]
            except KeyError:
                raise GroupNotFoundError(f"Group {group_id} not found", group_id=group_id)

    # ── Paths ───────────────────────────────────────────

    def set_path(self, entity_id: int, path: str | Sequence[int]) -> None:
        """Register the ancestor chain of ``entity_id``.

        ``path`` is either a stored root-first string (``"-1,1,50,100"``)
        or a sequence of ids already ordered deepest first.
        """
        if isinstance(path, str):
            ids = parse_path(path, self._path_separator)
        else:
            ids = tuple(path)
            ensure_unique(ids)
        if not ids or ids[0] != entity_id:
            raise InvalidPathError(
                f"Path of entity {entity_id} must start at the entity itself",
                entity_id=entity_id,
                path=ids,
            )
        with self._lock:
            self._paths[entity_id] = ids

    def get_path(self, entity_id: int) -> tuple[int, ...]:
        with self._lock:
            try:
                return self._paths[entity_id]
            except KeyError:
                raise InvalidPathError(f"No path registered for entity {entity_id}", entity_id=entity_id)

    # ── Grants ──────────────────────────────────────────

    def replace_group_permissions(self, group_id: int, permissions: Iterable[str], *entity_ids: int) -> None:
        """Set the same explicit grant for a group on each entity.

        Empty ``permissions`` removes the explicit grants, so the entities
        inherit again. No entity ids is a no-op.
        """
        if not entity_ids:
            return
        codes = tuple(dict.fromkeys("".join(permissions)))
        with self._lock:
            self.get_group(group_id)
            for entity_id in entity_ids:
                if codes:
                    self._explicit[(group_id, entity_id)] = codes
                else:
                    self._explicit.pop((group_id, entity_id), None)
        logger.debug("Replaced permissions of group %s on %d entities", group_id, len(entity_ids))

    def assign_group_permission(self, group_id: int, permission: str, *entity_ids: int) -> None:
        """Add one code to the explicit grant of a group on each entity."""
        if not entity_ids:
            return
        with self._lock:
            self.get_group(group_id)
            for entity_id in entity_ids:
                current = self._explicit.get((group_id, entity_id), ())
                if permission not in current:
                    self._explicit[(group_id, entity_id)] = current + (permission,)
        logger.debug("Assigned %r to group %s on %d entities", permission, group_id, len(entity_ids))

    def get_permissions(
        self,
        group_ids: Iterable[int],
        entity_ids: Iterable[int],
        fallback_to_default: bool = True,
    ) -> list[EntityPermission]:
        group_ids = list(dict.fromkeys(group_ids))
        entity_ids = list(dict.fromkeys(entity_ids))
        records: list[EntityPermission] = []

        with self._lock:
            groups = [self.get_group(group_id) for group_id in group_ids]

            if not entity_ids:
                wanted = set(group_ids)
                return [
                    EntityPermission(group_id, entity_id, codes)
                    for (group_id, entity_id), codes in self._explicit.items()
                    if group_id in wanted
                ]

            for group in groups:
                for entity_id in entity_ids:
                    codes = self._explicit.get((group.group_id, entity_id))
                    if codes is not None:
                        records.append(EntityPermission(group.group_id, entity_id, codes))
                    elif fallback_to_default:
                        records.append(
                            EntityPermission(
                                group.group_id,
                                entity_id,
                                group.default_permissions,
                                is_default_permissions=True,
                            )
                        )
        return records


__all__ = ["InMemoryPermissionStore"]
