"""Custom exceptions for Devlog Capture."""

from pathlib import Path


def sanitize_path_for_error(path: str | Path) -> str:
    """Extract only the filename from a path for safe error messages.

    Prevents leaking the user's home directory layout into diagnostics.

    Args:
        path: Full path or filename.

    Returns:
        Just the filename portion.
    """
    if isinstance(path, Path):
        return path.name
    return Path(path).name


class DevlogCaptureError(Exception):
    """Base exception for all devlog capture errors."""

    pass


class ConfigurationError(DevlogCaptureError):
    """Raised when settings, transports or event names are invalid."""

    pass


class LogWriteError(DevlogCaptureError):
    """Raised when a record cannot be appended to its log file."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot append to {sanitize_path_for_error(path)}: {reason}")
