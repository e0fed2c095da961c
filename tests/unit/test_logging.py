"""Unit tests for Project Memory logging.

This module tests the logging setup, the JSON formatter, and the
operation and error logging helpers.
"""

import json
import logging

import pytest

from project_memory.memory_logging import (
    JsonFormatter,
    log_error_with_context,
    log_operation,
    setup_logging,
)


class TestJsonFormatter:
    """Test cases for JsonFormatter."""

    def test_json_formatter_basic(self):
        """Test basic JSON formatting."""
        formatter = JsonFormatter()
        record = logging.getLogger("test").makeRecord(
            "test", logging.INFO, "prompt_loader.py", 10, "Test message", (), None
        )

        data = json.loads(formatter.format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "test"
        assert data["message"] == "Test message"
        assert "timestamp" in data
        assert "line" in data

    def test_json_formatter_with_extra_fields(self):
        """Test that extra_fields are merged into the JSON entry."""
        formatter = JsonFormatter()
        record = logging.getLogger("test").makeRecord(
            "test", logging.INFO, "operations.py", 10, "Test message", (), None,
            extra={"extra_fields": {"operation": "review", "duration": 0.01}},
        )

        data = json.loads(formatter.format(record))

        assert data["operation"] == "review"
        assert data["duration"] == 0.01

    def test_json_formatter_with_exception(self):
        """Test JSON formatting with exception info."""
        formatter = JsonFormatter()
        try:
            raise ValueError("Test exception")
        except ValueError as e:
            record = logging.getLogger("test").makeRecord(
                "test", logging.ERROR, "main.py", 10, "Failed", (), (type(e), e, e.__traceback__)
            )

        data = json.loads(formatter.format(record))

        assert "ValueError: Test exception" in data["exception"]


class TestLogOperation:
    """Test cases for log_operation context manager."""

    def test_log_operation_success(self, caplog):
        caplog.set_level(logging.INFO, logger="project_memory.operations")

        with log_operation("review", project_root="/project"):
            pass

        messages = [r.getMessage() for r in caplog.records]
        assert messages[0] == "Starting operation: review"
        assert messages[1].startswith("Completed operation: review")
        assert caplog.records[1].extra_fields["status"] == "completed"
        assert caplog.records[1].extra_fields["project_root"] == "/project"

    def test_log_operation_with_exception(self, caplog):
        caplog.set_level(logging.INFO, logger="project_memory.operations")

        with pytest.raises(ValueError):
            with log_operation("review"):
                raise ValueError("Test error")

        failure = caplog.records[-1]
        assert failure.levelno == logging.ERROR
        assert "Test error" in failure.getMessage()
        assert failure.extra_fields["error_type"] == "ValueError"


class TestLogErrorWithContext:
    """Test cases for log_error_with_context."""

    def test_log_error_with_context(self, caplog):
        caplog.set_level(logging.ERROR, logger="project_memory.errors")
        error = OSError("Permission denied")

        log_error_with_context(error, {"operation": "sync", "path": "sync.md"}, attempt=1)

        record = caplog.records[-1]
        assert record.getMessage() == "Error in sync: Permission denied"
        assert record.extra_fields["context"]["path"] == "sync.md"
        assert record.extra_fields["error_type"] == "OSError"
        assert record.extra_fields["attempt"] == 1


class TestSetupLogging:
    """Integration tests for logging configuration."""

    def test_setup_logging_writes_json_file(self, tmp_path):
        log_file = tmp_path / "server.log"

        setup_logging(log_level=logging.DEBUG, log_file=log_file)
        logging.getLogger("project_memory.test").info("Test message")
        for handler in logging.getLogger("project_memory").handlers:
            handler.flush()

        lines = log_file.read_text(encoding="utf-8").strip().split("\n")
        entries = [json.loads(line) for line in lines]
        assert any(entry["message"] == "Test message" for entry in entries)

    def test_setup_logging_replaces_handlers(self):
        setup_logging("INFO")
        setup_logging("WARNING")

        logger = logging.getLogger("project_memory")
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_console_handler_uses_stderr(self):
        import sys

        setup_logging()

        handler = logging.getLogger("project_memory").handlers[0]
        assert handler.stream is sys.stderr
