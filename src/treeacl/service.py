"""Permission service: collaborators wired to the resolver.

PermissionService fetches records from a BasePermissionStore, orders
paths through a BasePathProvider or a stored path string, and hands both
to the pure resolver functions. It holds no state besides its
collaborators and config; consistency between the fetch and the
resolution is the store's responsibility.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .config import AclConfig
from .exceptions import ConfigurationError, MissingDefaultPermissionError
from .interfaces import BasePathProvider, BasePermissionStore
from .logging import get_acl_logger
from .permissions.merge import get_assigned_permissions_for_node
from .permissions.models import EntityPermission, EntityPermissionSet
from .permissions.paths import parse_path
from .permissions.resolver import resolve_for_path


class PermissionService:
    """Resolves effective permissions of a set of groups on tree entities.

    Args:
        store: Source of permission records.
        path_provider: Source of ancestor chains. Defaults to ``store`` when
            it also implements BasePathProvider.
        config: AclConfig; defaults to ``AclConfig()``.

    Example::

        service = PermissionService(store)
        result = service.get_permissions_for_path([1, 2], "-1,1,50,100")
        has_permission(result, Permissions.UPDATE)
    """

    def __init__(
        self,
        store: BasePermissionStore,
        path_provider: Optional[BasePathProvider] = None,
        config: Optional[AclConfig] = None,
    ) -> None:
        self._store = store
        if path_provider is None and isinstance(store, BasePathProvider):
            path_provider = store
        self._path_provider = path_provider
        self._config = config or AclConfig()
        self._logger = get_acl_logger(self._config.service_name or __name__)

    @property
    def config(self) -> AclConfig:
        return self._config

    def _fallback(self, fallback_to_default: Optional[bool]) -> bool:
        if fallback_to_default is None:
            return self._config.fallback_to_default
        return fallback_to_default

    def get_permissions(
        self,
        group_ids: Iterable[int],
        *entity_ids: int,
        fallback_to_default: Optional[bool] = None,
    ) -> list[EntityPermission]:
        """Raw records for the groups on the entities (all entities if none given)."""
        return list(self._store.get_permissions(group_ids, entity_ids, self._fallback(fallback_to_default)))

    def resolve(
        self,
        group_ids: Iterable[int],
        path_ids: Sequence[int],
        fallback_to_default: Optional[bool] = None,
    ) -> EntityPermissionSet:
        """Fetch records for the path and resolve them. ``path_ids`` is deepest first.

        Raises:
            MissingDefaultPermissionError: fallback is on and the store
                returned no record at all for one of ``group_ids``.
        """
        path_ids = tuple(path_ids)
        if not path_ids:
            return EntityPermissionSet.empty()
        fallback = self._fallback(fallback_to_default)
        group_ids = list(dict.fromkeys(group_ids))
        records = list(self._store.get_permissions(group_ids, path_ids, fallback))
        if fallback:
            returned = {record.group_id for record in records}
            missing = [group_id for group_id in group_ids if group_id not in returned]
            if missing:
                raise MissingDefaultPermissionError(
                    f"Store returned no default permission records for groups {missing!r}",
                    group_ids=missing,
                    path_ids=path_ids,
                )
        result = resolve_for_path(records, path_ids, fallback)
        self._logger.debug(
            "Effective permissions %r from %d group(s)",
            "".join(result.assigned_permissions),
            len(group_ids),
            entity_id=result.entity_id,
        )
        return result

    def get_permissions_for_path(
        self,
        group_ids: Iterable[int],
        path: str,
        fallback_to_default: Optional[bool] = None,
    ) -> EntityPermissionSet:
        """Effective permissions on the entity at the end of a stored root-first path."""
        path_ids = parse_path(path, self._config.path_separator)
        return self.resolve(group_ids, path_ids, fallback_to_default)

    def get_permissions_for_entity(
        self,
        group_ids: Iterable[int],
        entity_id: int,
        fallback_to_default: Optional[bool] = None,
    ) -> EntityPermissionSet:
        """Effective permissions on ``entity_id`` using the configured path provider."""
        if self._path_provider is None:
            raise ConfigurationError("PermissionService has no path provider")
        path_ids = tuple(self._path_provider.get_path(entity_id))
        return self.resolve(group_ids, path_ids, fallback_to_default)

    def get_assigned_permissions_for_node(
        self,
        group_ids: Iterable[int],
        node_id: int,
    ) -> Optional[str]:
        """Merged explicit permission string of the groups on one node, or None."""
        records = self._store.get_permissions(group_ids, (node_id,), fallback_to_default=False)
        return get_assigned_permissions_for_node(records, node_id)


__all__ = ["PermissionService"]
