from .config import AclConfig, LogLevel, load_acl_config_from_env
from .exceptions import (
    ConfigurationError,
    GroupNotFoundError,
    InvalidPathError,
    MissingDefaultPermissionError,
    PermissionInputError,
    TreeAclError,
)
from .interfaces import BasePathProvider, BasePermissionStore
from .logging import (
    AclFormatter,
    AclLoggerAdapter,
    get_acl_logger,
    safe_preview,
    setup_logging,
)
from .permissions import (
    EntityPermission,
    EntityPermissionSet,
    Permissions,
    UserGroup,
    get_assigned_permissions_for_node,
    group_by_group_and_entity,
    has_all_permissions,
    has_any_permission,
    has_permission,
    merge_permission_strings,
    parse_path,
    resolve_for_path,
    resolve_single_group,
)
from .service import PermissionService
from .store import InMemoryPermissionStore

__all__ = [
    'AclConfig',
    'LogLevel',
    'load_acl_config_from_env',
    'ConfigurationError',
    'GroupNotFoundError',
    'InvalidPathError',
    'MissingDefaultPermissionError',
    'PermissionInputError',
    'TreeAclError',
    'BasePathProvider',
    'BasePermissionStore',
    'AclFormatter',
    'AclLoggerAdapter',
    'get_acl_logger',
    'safe_preview',
    'setup_logging',
    'EntityPermission',
    'EntityPermissionSet',
    'Permissions',
    'UserGroup',
    'get_assigned_permissions_for_node',
    'group_by_group_and_entity',
    'has_all_permissions',
    'has_any_permission',
    'has_permission',
    'merge_permission_strings',
    'parse_path',
    'resolve_for_path',
    'resolve_single_group',
    'PermissionService',
    'InMemoryPermissionStore',
]
