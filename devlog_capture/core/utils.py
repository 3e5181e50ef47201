"""Shared utility functions for Devlog Capture."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Get current UTC datetime (timezone-aware).

    Returns:
        A timezone-aware datetime object representing the current time in UTC.
    """
    return datetime.now(timezone.utc)


def utc_now_iso() -> str:
    """Return the current instant as an ISO-8601 string.

    Millisecond precision with a ``Z`` suffix, e.g.
    ``2024-01-15T10:30:00.123Z``.

    Example:
        >>> from devlog_capture.core.utils import utc_now_iso
        >>> utc_now_iso().endswith("Z")
        True
    """
    return utc_now().isoformat(timespec="milliseconds").replace("+00:00", "Z")
