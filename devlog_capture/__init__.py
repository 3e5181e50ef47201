"""Devlog Capture - developer-mode JSONL capture of Claude Code hook events."""

__version__ = "0.1.0"

from devlog_capture.config import Settings, get_settings
from devlog_capture.core import (
    ConfigurationError,
    DevlogCaptureError,
    LogWriteError,
)
from devlog_capture.hooks.models import (
    CaptureConfig,
    CaptureResult,
    CaptureStatus,
    EventKind,
    PromptRecord,
    ToolUseRecord,
)

__all__ = [
    # Version info
    "__version__",
    # Configuration
    "Settings",
    "get_settings",
    # Errors
    "DevlogCaptureError",
    "ConfigurationError",
    "LogWriteError",
    # Models
    "CaptureConfig",
    "CaptureResult",
    "CaptureStatus",
    "EventKind",
    "PromptRecord",
    "ToolUseRecord",
]
