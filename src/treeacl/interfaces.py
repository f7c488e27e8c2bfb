from abc import ABC, abstractmethod
from typing import Iterable, Sequence

from .permissions.models import EntityPermission


class BasePermissionStore(ABC):
    """Source of raw permission records for the resolver."""

    @abstractmethod
    def get_permissions(
        self,
        group_ids: Iterable[int],
        entity_ids: Iterable[int],
        fallback_to_default: bool = True,
    ) -> Sequence[EntityPermission]:
        """Records for ``group_ids`` on ``entity_ids``.

        With ``fallback_to_default`` set, every requested group must get a
        default record at every requested entity where it has no explicit
        record. No entity ids means every entity.
        """
        raise NotImplementedError


class BasePathProvider(ABC):
    """Source of entity ancestor chains."""

    @abstractmethod
    def get_path(self, entity_id: int) -> Sequence[int]:
        """Ancestor ids of ``entity_id``, the entity itself first, root last."""
        raise NotImplementedError


__all__ = ["BasePathProvider", "BasePermissionStore"]
