"""Unit tests for devlog_capture.core.logging."""

from __future__ import annotations

import json
import logging

import pytest

from devlog_capture.core.logging import (
    JSONFormatter,
    SecureFormatter,
    configure_logging,
    mask_secrets,
)


def _record(message: str) -> logging.LogRecord:
    return logging.LogRecord("devlog_capture.test", logging.WARNING, __file__, 1, message, (), None)


@pytest.mark.unit
class TestMasking:
    """Sensitive values never reach the diagnostic stream."""

    def test_api_key(self) -> None:
        assert "abc123" not in mask_secrets("api_key=abc123")

    def test_sk_token(self) -> None:
        assert "sk-" not in mask_secrets("token sk-" + "a" * 30)

    def test_password(self) -> None:
        assert "hunter2" not in mask_secrets('password: "hunter2"')

    def test_bearer(self) -> None:
        assert "eyJhbGc" not in mask_secrets("Authorization: Bearer eyJhbGc.def")

    def test_plain_text_untouched(self) -> None:
        assert mask_secrets("Failed to write tool log") == "Failed to write tool log"


@pytest.mark.unit
class TestFormatters:
    """Test text and JSON formatters."""

    def test_secure_formatter_masks(self) -> None:
        formatter = SecureFormatter(fmt="%(levelname)s - %(message)s")
        output = formatter.format(_record("api_key=abc123"))
        assert output.startswith("WARNING - ")
        assert "abc123" not in output

    def test_json_formatter(self) -> None:
        output = json.loads(JSONFormatter().format(_record("disk full")))
        assert output["level"] == "WARNING"
        assert output["logger"] == "devlog_capture.test"
        assert output["message"] == "disk full"


@pytest.mark.unit
class TestConfigureLogging:
    """Diagnostics go to stderr only."""

    def test_writes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="WARNING")
        logging.getLogger("devlog_capture.test").warning("Failed to write prompt log: x")
        captured = capsys.readouterr()
        assert "Failed to write prompt log" in captured.err
        assert captured.out == ""

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="warning")
        logging.getLogger("devlog_capture.test").info("quiet")
        assert "quiet" not in capsys.readouterr().err

    def test_json_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="INFO", json_format=True)
        logging.getLogger("devlog_capture.test").info("hello")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        assert json.loads(line)["message"] == "hello"

    def test_replaces_handlers(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1
