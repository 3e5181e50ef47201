"""Record builders: decoded event fields to log records.

Pure mapping with a default for every field.  A field that is absent,
``null``, empty, or of the wrong type takes its default; the builders never
raise.  Timestamps are always generated here, never taken from input.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from devlog_capture.core.utils import utc_now_iso
from devlog_capture.hooks.models import PromptRecord, ToolUseRecord

UNKNOWN = "unknown"


def _text(value: Any) -> str | None:
    """Return *value* if it is a non-empty string, else ``None``."""
    if isinstance(value, str) and value:
        return value
    return None


def _mapping(value: Any) -> dict[str, Any]:
    if isinstance(value, dict):
        return value
    return {}


def _tool_error(fields: Mapping[str, Any], output: dict[str, Any]) -> tuple[bool, str | None]:
    """Derive ``(success, error)`` from the event and its tool response."""
    error = _text(fields.get("error")) or _text(output.get("error"))
    failed = error is not None or output.get("is_error") is True
    return not failed, error


def build_tool_use_record(
    fields: Mapping[str, Any],
    *,
    now_fn: Callable[[], str] = utc_now_iso,
) -> ToolUseRecord:
    """Build a ``ToolUseRecord`` from decoded PostToolUse fields."""
    output = _mapping(fields.get("tool_response"))
    success, error = _tool_error(fields, output)
    return ToolUseRecord(
        timestamp=now_fn(),
        session_id=_text(fields.get("session_id")) or UNKNOWN,
        tool=_text(fields.get("tool_name")) or UNKNOWN,
        tool_use_id=_text(fields.get("tool_use_id")),
        input=_mapping(fields.get("tool_input")),
        output=output,
        success=success,
        error=error,
    )


def build_prompt_record(
    fields: Mapping[str, Any],
    *,
    now_fn: Callable[[], str] = utc_now_iso,
) -> PromptRecord:
    """Build a ``PromptRecord`` from decoded UserPromptSubmit fields."""
    prompt = fields.get("prompt")
    return PromptRecord(
        timestamp=now_fn(),
        session_id=_text(fields.get("session_id")) or UNKNOWN,
        cwd=_text(fields.get("cwd")),
        prompt=prompt if isinstance(prompt, str) else "",
    )
