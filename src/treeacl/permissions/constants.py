"""Action codes for tree entity permissions.

Provides:
- ``Permissions``: single-character action codes as stored on permission records.
"""

from __future__ import annotations


class Permissions:
    """Canonical action codes for content tree entities.

    Each code is one character. A record's assigned permissions are stored
    as a string of codes, e.g. ``"FCA"`` (browse, create, update).

    The resolver never interprets codes; these constants exist so callers
    and tests do not scatter magic letters::

        has_permission(permission_set, Permissions.PUBLISH)
    """

    # ── Read ────────────────────────────────────────────
    BROWSE = "F"

    # ── Write ───────────────────────────────────────────
    CREATE = "C"
    UPDATE = "A"
    DELETE = "D"
    MOVE = "M"
    COPY = "O"
    SORT = "S"
    ROLLBACK = "K"

    # ── Publishing ──────────────────────────────────────
    PUBLISH = "U"
    UNPUBLISH = "Z"
    SEND_TO_PUBLISH = "H"

    # ── Administration ──────────────────────────────────
    RIGHTS = "R"
    PROTECT = "P"
    ASSIGN_DOMAIN = "I"

    ALL = frozenset("FCADMOSKUZHRPI")

    @staticmethod
    def join(*codes: str) -> str:
        """Build a permission string from codes, dropping repeats.

        Example::

            Permissions.join(Permissions.BROWSE, Permissions.UPDATE)  # "FA"
        """
        return "".join(dict.fromkeys("".join(codes)))


__all__ = [
    "Permissions",
]
