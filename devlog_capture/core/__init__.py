"""Core components for Devlog Capture."""

from devlog_capture.core.errors import (
    ConfigurationError,
    DevlogCaptureError,
    LogWriteError,
)
from devlog_capture.core.utils import utc_now, utc_now_iso

__all__ = [
    # Errors
    "DevlogCaptureError",
    "ConfigurationError",
    "LogWriteError",
    # Utilities
    "utc_now",
    "utc_now_iso",
]
