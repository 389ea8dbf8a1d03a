"""Tests for logging configuration utilities."""

from __future__ import annotations

from collections.abc import Iterator
import json
import logging
from pathlib import Path
import sys

import pytest

from tweenr.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


def _record(level: int = logging.INFO, msg: str = "Test message", exc_info=None) -> logging.LogRecord:
    record = logging.LogRecord(
        name="tweenr.test",
        level=level,
        pathname="/path/to/curve.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    record.funcName = "sample"
    record.module = "curve"
    return record


class TestStructuredJSONFormatter:
    """Test suite for StructuredJSONFormatter."""

    def test_basic_log_format(self) -> None:
        """A record becomes one JSON object."""
        data = json.loads(StructuredJSONFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert "timestamp" in data
        assert data["context"]["logger_name"] == "tweenr.test"
        assert data["context"]["module"] == "curve"
        assert data["context"]["function"] == "sample"
        assert data["context"]["line"] == 42

    def test_extra_fields_in_context(self) -> None:
        """Extra record attributes land in context."""
        record = _record()
        record.clip_id = "walk"
        record.attribute = "position"

        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["context"]["clip_id"] == "walk"
        assert data["context"]["attribute"] == "position"
        assert "threadName" not in data["context"]

    def test_standard_record_attributes_not_in_context(self) -> None:
        """Built-in LogRecord attributes never leak into context."""
        record = _record()
        record.clip_id = "walk"
        record.message = "Test message"

        context = json.loads(StructuredJSONFormatter().format(record))["context"]

        for name in ("msecs", "processName", "relativeCreated", "args", "message"):
            assert name not in context
        assert context["clip_id"] == "walk"

    def test_exception_info(self) -> None:
        """Exception details are captured in context."""
        try:
            raise ValueError("bad keyframe")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(
            StructuredJSONFormatter().format(_record(logging.ERROR, "Load failed", exc_info))
        )

        assert data["level"] == "ERROR"
        assert data["context"]["error_type"] == "ValueError"
        assert data["context"]["error_message"] == "bad keyframe"
        assert "ValueError: bad keyframe" in data["context"]["stack_trace"]

    def test_non_serializable_extra(self) -> None:
        """Unserializable extras fall back to str()."""
        record = _record()
        record.path = Path("curves/fade.xml")
        data = json.loads(StructuredJSONFormatter().format(record))
        assert data["context"]["path"] == str(Path("curves/fade.xml"))


class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_standard_logging(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Text output uses the default format."""
        configure_logging(level="INFO")

        logging.getLogger("tweenr.standard").info("Text message")

        out = capsys.readouterr().out
        assert "Text message" in out
        assert "tweenr.standard" in out
        assert "INFO" in out

    def test_level_case_insensitive(self) -> None:
        """Level names are case-insensitive."""
        configure_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_custom_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A custom format string is applied."""
        configure_logging(level="INFO", format_string="%(levelname)s|%(message)s")
        logging.getLogger("tweenr.custom").warning("Careful")
        assert "WARNING|Careful" in capsys.readouterr().out

    def test_structured_to_file(self, tmp_path: Path) -> None:
        """Structured logging writes JSON lines to a file."""
        log_file = tmp_path / "tweenr.jsonl"
        configure_logging(level="DEBUG", structured=True, filename=str(log_file))

        logger = logging.getLogger("tweenr.file")
        logger.debug("Debug message")
        logger.warning("Warning message")
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = [json.loads(line) for line in log_file.read_text().splitlines() if line]
        assert [line["level"] for line in lines[-2:]] == ["DEBUG", "WARNING"]
        assert all(line["context"]["logger_name"] == "tweenr.file" for line in lines[-2:])

    def test_reconfigure_replaces_handlers(self) -> None:
        """Each call replaces the root handlers."""
        configure_logging(level="INFO")
        configure_logging(level="WARNING", structured=True)

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, StructuredJSONFormatter)
        assert root.level == logging.WARNING


class TestGetLogger:
    """Test suite for get_logger."""

    def test_plain_logger(self) -> None:
        """Without context a plain Logger is returned."""
        logger = get_logger("tweenr.plain")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "tweenr.plain"

    def test_logger_with_context(self) -> None:
        """Context kwargs produce a LoggerAdapter."""
        logger = get_logger("tweenr.ctx", clip_id="walk")
        assert isinstance(logger, logging.LoggerAdapter)
        assert logger.extra == {"clip_id": "walk"}

    def test_context_reaches_records(self, caplog: pytest.LogCaptureFixture) -> None:
        """Adapter context is attached to emitted records."""
        logger = get_logger("tweenr.ctx2", clip_id="jump")
        with caplog.at_level(logging.INFO, logger="tweenr.ctx2"):
            logger.info("Sampled")
        assert caplog.records[-1].clip_id == "jump"
