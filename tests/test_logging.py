"""Tests for treeacl.logging module."""

from __future__ import annotations

import json
import logging

import pytest

from treeacl import (
    AclConfig,
    AclFormatter,
    get_acl_logger,
    safe_preview,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, AclFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="treeacl.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="resolved %s",
        args=("FA",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestSafePreview:
    """Tests for safe_preview function."""

    def test_none_value(self) -> None:
        assert safe_preview(None) == ""

    def test_whitespace_normalized(self) -> None:
        assert safe_preview("a\n\tb  c") == "a b c"

    def test_truncation(self) -> None:
        result = safe_preview("x" * 300, limit=100)
        assert len(result) == 100
        assert result.endswith("…")

    def test_structured_values(self) -> None:
        assert safe_preview([1, 50, 100]) == "[1, 50, 100]"
        assert "group" in safe_preview({"group": 1})


class TestAclFormatter:
    """Tests for AclFormatter."""

    def test_json_output(self) -> None:
        formatter = AclFormatter(json_format=True)
        data = json.loads(formatter.format(make_record(group_id=3, entity_id=100)))
        assert data["message"] == "resolved FA"
        assert data["level"] == "INFO"
        assert data["group_id"] == 3
        assert data["entity_id"] == 100
        assert "principal_id" not in data

    def test_extra_fields_previewed(self) -> None:
        formatter = AclFormatter(json_format=True)
        data = json.loads(formatter.format(make_record(path_ids=(100, 50, 1))))
        assert data["path_ids"] == "[100, 50, 1]"

    def test_plain_output(self) -> None:
        formatter = AclFormatter(json_format=False)
        line = formatter.format(make_record(entity_id=100))
        assert "INFO" in line
        assert "entity_id=100" in line
        assert line.endswith(": resolved FA")


class TestAclLoggerAdapter:
    """Tests for get_acl_logger."""

    def test_context_added_to_records(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_acl_logger("treeacl.test.adapter", principal_id="editor-7")
        with caplog.at_level(logging.INFO, logger="treeacl.test.adapter"):
            logger.info("checked", entity_id=100)
        record = caplog.records[-1]
        assert record.principal_id == "editor-7"
        assert record.entity_id == 100

    def test_call_context_overrides(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_acl_logger("treeacl.test.adapter", group_id=1)
        with caplog.at_level(logging.INFO, logger="treeacl.test.adapter"):
            logger.info("checked", group_id=2)
        assert caplog.records[-1].group_id == 2


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_configures_root(self, restore_root_logger: logging.Logger) -> None:
        setup_logging(AclConfig(log_level="DEBUG", log_json=True))
        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1
        formatter = restore_root_logger.handlers[0].formatter
        assert isinstance(formatter, AclFormatter)
        assert formatter.json_format is True

    def test_json_override(self, restore_root_logger: logging.Logger) -> None:
        setup_logging(AclConfig(log_json=True), json_format=False)
        assert restore_root_logger.handlers[0].formatter.json_format is False

    def test_service_logger_level(self, restore_root_logger: logging.Logger) -> None:
        setup_logging(AclConfig(log_level="WARNING", service_name="content-api"))
        assert logging.getLogger("content-api").level == logging.WARNING
