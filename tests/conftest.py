"""Pytest fixtures for Devlog Capture tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from devlog_capture.config import reset_settings
from devlog_capture.hooks.models import CaptureConfig

LOG_SUBDIR = Path(".claude") / "denoland-dev-logs"

HOOK_VARS = frozenset(
    {
        "TOOL_NAME",
        "TOOL_INPUT",
        "TOOL_OUTPUT",
        "TOOL_USE_ERROR",
        "CLAUDE_SESSION_ID",
        "USER_PROMPT",
        "CLAUDE_PROJECT_DIR",
    }
)


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Drop cached settings, DEVLOG_CAPTURE_* overrides and host hook variables."""
    import os

    for var in list(os.environ):
        if var.startswith("DEVLOG_CAPTURE_") or var in HOOK_VARS:
            monkeypatch.delenv(var)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None, None, None]:
    """Undo ``configure_logging()`` calls made by the code under test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def home_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A fresh home directory exported as ``$HOME``."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("USERPROFILE", raising=False)
    return home


@pytest.fixture
def log_dir(home_dir: Path) -> Path:
    """The log directory under ``home_dir`` (not created)."""
    return home_dir / LOG_SUBDIR


@pytest.fixture
def enabled_log_dir(log_dir: Path) -> Path:
    """The log directory with the ``.enabled`` marker present."""
    log_dir.mkdir(parents=True)
    (log_dir / ".enabled").touch()
    return log_dir


@pytest.fixture
def enabled_config(tmp_path: Path) -> CaptureConfig:
    """An enabled capture configuration that does not touch ``$HOME``."""
    return CaptureConfig(log_dir=tmp_path / "logs", enabled=True)
