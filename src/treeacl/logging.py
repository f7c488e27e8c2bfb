"""Logging utilities for treeacl.

This module provides:
- Logging configuration from AclConfig
- Safe, length-bounded previews of record collections
- Structured logging with group/entity context fields
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from .config import AclConfig, LogLevel

# Context attributes carried on log records by AclLoggerAdapter
CONTEXT_FIELDS = ("principal_id", "group_id", "entity_id")

_STANDARD_RECORD_KEYS = frozenset(
    {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "message", "pathname", "process", "processName", "relativeCreated",
        "thread", "threadName", "exc_info", "exc_text", "stack_info",
        "taskName",
    }
)


def safe_preview(value: Any, limit: int = 240) -> str:
    """Create a length-bounded, single-line preview of a value for logging.

    Args:
        value: The value to preview (any type)
        limit: Maximum length of the preview (default: 240)

    Returns:
        A truncated string representation
    """
    if value is None:
        return ""

    if isinstance(value, str):
        s = value
    elif isinstance(value, (dict, list, tuple)):
        try:
            s = json.dumps(value, default=str, ensure_ascii=False)
        except (TypeError, ValueError):
            s = str(value)
    else:
        s = str(value)

    s = " ".join(s.split())

    if len(s) > limit:
        return s[: limit - 1] + "…"

    return s


class AclFormatter(logging.Formatter):
    """Formatter emitting JSON or plain text with permission context.

    Context fields (principal_id, group_id, entity_id) are lifted out of
    the record when present; other ``extra`` values are previewed.
    """

    def __init__(self, json_format: bool = True, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.json_format = json_format

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = {
            key: getattr(record, key)
            for key in CONTEXT_FIELDS
            if getattr(record, key, None) is not None
        }
        log_data.update(context)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key in _STANDARD_RECORD_KEYS or key in CONTEXT_FIELDS:
                continue
            log_data[key] = safe_preview(value)

        if self.json_format:
            return json.dumps(log_data, default=str, ensure_ascii=False)

        parts = [
            f"[{log_data['timestamp']}]",
            log_data["level"],
            log_data["logger"],
        ]
        parts.extend(f"{key}={value}" for key, value in context.items())
        parts.append(f": {log_data['message']}")
        return " ".join(parts)


class AclLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that stamps principal/group/entity ids on every record.

    Usage:
        logger = get_acl_logger(__name__, principal_id="editor-7")
        logger.debug("resolved", entity_id=100)
    """

    def __init__(self, logger: logging.Logger, **context: Any):
        super().__init__(logger, {})
        self.context = {key: context.get(key) for key in CONTEXT_FIELDS}

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        for key in CONTEXT_FIELDS:
            value = kwargs.pop(key, self.context.get(key))
            if value is not None:
                extra[key] = value
        kwargs["extra"] = extra
        return msg, kwargs


def setup_logging(
    config: Optional[AclConfig] = None,
    json_format: Optional[bool] = None,
) -> None:
    """Configure root logging from AclConfig.

    Args:
        config: AclConfig instance (if None, loads from environment)
        json_format: Override ``config.log_json`` when given
    """
    if config is None:
        from .config import load_acl_config_from_env
        config = load_acl_config_from_env()

    level_map = {
        LogLevel.DEBUG: logging.DEBUG,
        LogLevel.INFO: logging.INFO,
        LogLevel.WARNING: logging.WARNING,
        LogLevel.ERROR: logging.ERROR,
        LogLevel.CRITICAL: logging.CRITICAL,
    }
    log_level = level_map.get(LogLevel(config.log_level), logging.INFO)
    use_json = config.log_json if json_format is None else json_format

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(AclFormatter(json_format=use_json))
    root_logger.addHandler(console_handler)

    if config.service_name:
        logging.getLogger(config.service_name).setLevel(log_level)


def get_acl_logger(name: str, **context: Any) -> AclLoggerAdapter:
    """Get a logger adapter carrying permission context.

    Args:
        name: Logger name (typically __name__)
        **context: Any of principal_id, group_id, entity_id

    Returns:
        AclLoggerAdapter instance
    """
    return AclLoggerAdapter(logging.getLogger(name), **context)


__all__ = [
    "safe_preview",
    "AclFormatter",
    "AclLoggerAdapter",
    "setup_logging",
    "get_acl_logger",
]
