"""Entity path parsing.

Tree paths are stored root first as separated ids, e.g. ``"-1,1,50,100"``
where ``-1`` is the virtual root and ``100`` the entity itself. The
resolver wants them deepest first.
"""

from __future__ import annotations

from typing import Iterable

from ..exceptions import InvalidPathError


def parse_path(path: str | None, separator: str = ",") -> tuple[int, ...]:
    """Split a stored path into ids, deepest first.

    Blank segments are skipped, so ``""`` and ``None`` give ``()``.

    Raises:
        InvalidPathError: a segment is not an integer or an id repeats.

    Example::

        parse_path("-1,1,50,100")  # (100, 50, 1, -1)
    """
    if not path:
        return ()

    ids: list[int] = []
    for segment in path.split(separator):
        segment = segment.strip()
        if not segment:
            continue
        try:
            ids.append(int(segment))
        except ValueError:
            raise InvalidPathError(f"Invalid id {segment!r} in path {path!r}", path=path)

    ensure_unique(ids, path=path)
    ids.reverse()
    return tuple(ids)


def ensure_unique(ids: Iterable[int], path: str | None = None) -> None:
    """Raise InvalidPathError if an id occurs twice (a cycle in the tree)."""
    seen: set[int] = set()
    for entity_id in ids:
        if entity_id in seen:
            raise InvalidPathError(f"Entity {entity_id} occurs twice in path", path=path, entity_id=entity_id)
        seen.add(entity_id)


__all__ = [
    "ensure_unique",
    "parse_path",
]
