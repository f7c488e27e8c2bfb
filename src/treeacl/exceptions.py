"""Exception hierarchy for treeacl.

Every error raised by the package inherits from TreeAclError and carries a
stable ``code`` string so callers can map failures to their own protocol
(HTTP status, gRPC status, audit event) without matching on class names.

Usage:
    from treeacl.exceptions import (
        TreeAclError,
        MissingDefaultPermissionError,
    )

"No permission found" is never an exception: resolvers return ``None`` or
an empty EntityPermissionSet. Exceptions here signal caller-contract
violations that should fail fast at integration time.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar, cast

__all__ = [
    # Base hierarchy
    "TreeAclError",
    "ConfigurationError",
    "PermissionInputError",
    "MissingDefaultPermissionError",
    "InvalidPathError",
    "GroupNotFoundError",
    # Registry
    "ErrorRegistry",
    "error_registry",
    "register_error",
]


# ---- Exception Hierarchy ----------------------------------------------------


class TreeAclError(Exception):
    """Base exception for treeacl.

    Attributes:
        code: Stable error code string for protocol mapping (e.g. "INVALID_PATH").
        message: Human-readable error description.
        details: Additional context as keyword arguments.
    """

    code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred"

    def __init__(self, message: str | None = None, code: str | None = None, **kwargs: Any) -> None:
        self.message = message or self.message
        self.code = code or self.code
        self.details = kwargs
        super().__init__(self.message)


class ConfigurationError(TreeAclError):
    """Invalid or missing configuration."""

    code: str = "CONFIGURATION_ERROR"


class PermissionInputError(TreeAclError):
    """Caller handed the engine input that breaks its contract."""

    code: str = "PERMISSION_INPUT_ERROR"
    message: str = "Permission input violates the resolver contract"


class MissingDefaultPermissionError(PermissionInputError):
    """Fallback was requested but the loader supplied no default record for a group."""

    code: str = "MISSING_DEFAULT_PERMISSION"
    message: str = "No default permission record supplied for group"


class InvalidPathError(PermissionInputError):
    """Entity path is empty, malformed or unknown where one is required."""

    code: str = "INVALID_PATH"
    message: str = "Invalid entity path"


class GroupNotFoundError(TreeAclError):
    """Requested group is not known to the permission store."""

    code: str = "GROUP_NOT_FOUND"
    message: str = "Group not found"


# ---- Error Registry for Protocol Mapping ------------------------------------

_E = TypeVar("_E", bound=type[TreeAclError])


class ErrorRegistry:
    """Registry for mapping internal errors to external protocol codes."""

    def __init__(self) -> None:
        self._errors: dict[str, type[TreeAclError]] = {}

    def register(self, code: str, error_cls: type[TreeAclError]) -> None:
        self._errors[code] = error_cls

    def get(self, code: str) -> type[TreeAclError] | None:
        return self._errors.get(code)

    def all(self) -> dict[str, type[TreeAclError]]:
        return dict(self._errors)


error_registry = ErrorRegistry()


def register_error(code: str) -> Callable[[_E], _E]:
    """Decorator to register a custom error type.

    Usage:
        @register_error("STALE_SNAPSHOT")
        class StaleSnapshotError(TreeAclError):
            code = "STALE_SNAPSHOT"
    """

    def decorator(cls: _E) -> _E:
        error_registry.register(code, cls)
        return cls

    return cast(Callable[[_E], _E], decorator)


# Register base errors
error_registry.register("INTERNAL_ERROR", TreeAclError)
error_registry.register("CONFIGURATION_ERROR", ConfigurationError)
error_registry.register("PERMISSION_INPUT_ERROR", PermissionInputError)
error_registry.register("MISSING_DEFAULT_PERMISSION", MissingDefaultPermissionError)
error_registry.register("INVALID_PATH", InvalidPathError)
error_registry.register("GROUP_NOT_FOUND", GroupNotFoundError)
