"""Configuration contract for treeacl.

Pydantic-validated settings shared by the resolver wiring, the logging
setup and the reference store. Embedding services extend AclConfig with
their own settings rather than reading the environment directly.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Standard log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class AclConfig(BaseModel):
    """Settings for permission resolution.

    ``fallback_to_default`` is the value PermissionService uses when a call
    does not pass one explicitly. ``path_separator`` splits stored tree
    paths such as ``"-1,1,50,100"``.
    """

    # Logging
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Use JSON log format (default: plain text)",
    )

    # Resolution
    fallback_to_default: bool = Field(
        default=True,
        description="Use a group's default grant when no explicit grant exists on the path",
    )
    path_separator: str = Field(
        default=",",
        description="Separator between ids in a stored entity path",
    )

    # Service identification
    service_name: Optional[str] = Field(
        default=None,
        description="Name of the embedding service, used as logger name",
    )

    @field_validator("path_separator")
    @classmethod
    def validate_path_separator(cls, v: str) -> str:
        """Separator must be a non-empty, non-digit string."""
        if not v:
            raise ValueError("Path separator must not be empty")
        if any(ch.isdigit() or ch == "-" for ch in v):
            raise ValueError("Path separator must not contain digits or '-'")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | LogLevel) -> LogLevel:
        """Convert string to LogLevel enum."""
        if isinstance(v, LogLevel):
            return v
        if isinstance(v, str):
            try:
                return LogLevel[v.upper()]
            except KeyError:
                raise ValueError(f"Invalid log level: {v}. Must be one of {[e.value for e in LogLevel]}")
        raise ValueError(f"Log level must be string or LogLevel enum, got {type(v)}")

    model_config = {
        "use_enum_values": True,
        "extra": "forbid",
    }


def load_acl_config_from_env() -> AclConfig:
    """Load configuration from environment variables.

    Environment variables:
    - LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - LOG_JSON: Use JSON log format (true/false, default: false)
    - ACL_FALLBACK_TO_DEFAULT: Fall back to group defaults (default: true)
    - ACL_PATH_SEPARATOR: Entity path separator (default: ",")
    - SERVICE_NAME: Name of the embedding service

    Returns:
        AclConfig instance with values from environment or defaults.
    """
    import os

    return AclConfig(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_json=os.getenv("LOG_JSON", "false").lower() in ("true", "1", "yes"),
        fallback_to_default=os.getenv("ACL_FALLBACK_TO_DEFAULT", "true").lower() in ("true", "1", "yes", "on"),
        path_separator=os.getenv("ACL_PATH_SEPARATOR", ","),
        service_name=os.getenv("SERVICE_NAME"),
    )


__all__ = [
    "AclConfig",
    "LogLevel",
    "load_acl_config_from_env",
]
