"""Capture pipeline orchestration.

Chains the gate, the event source, the record builder and the append-only
writer.  The configuration, the source and the writer are **injected** so
the pipeline is testable without a real home directory or stdin.

Every fallible step degrades instead of raising; the outcome is reported
through ``CaptureResult.status``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from devlog_capture.core.errors import LogWriteError
from devlog_capture.core.utils import utc_now_iso
from devlog_capture.hooks.append_log import append_record
from devlog_capture.hooks.models import (
    CaptureConfig,
    CaptureResult,
    CaptureStatus,
    EventKind,
    EventSource,
    RawEvent,
)
from devlog_capture.hooks.records import build_prompt_record, build_tool_use_record

logger = logging.getLogger(__name__)

_LABELS: dict[EventKind, str] = {
    EventKind.TOOL_USE: "tool",
    EventKind.PROMPT: "prompt",
}


def _acquire(kind: EventKind, source: EventSource) -> RawEvent:
    if kind is EventKind.TOOL_USE:
        return source.read_tool_use()
    return source.read_prompt()


def run_capture(
    kind: EventKind,
    config: CaptureConfig | None,
    source: EventSource,
    *,
    append_fn: Callable[[Path, dict[str, Any]], None] = append_record,
    now_fn: Callable[[], str] = utc_now_iso,
) -> CaptureResult:
    """Capture one event.

    Steps:
        1. Gate: no home directory or no marker file -> skipped
        2. Acquire the raw event from *source*
        3. Build the category's log record
        4. Append it to the category's log file

    Args:
        kind: Event category being captured.
        config: Resolved capture configuration, or ``None`` if no home
            directory could be determined.
        source: Input acquisition strategy.
        append_fn: Line writer, ``(path, payload) -> None``; raises
            ``LogWriteError`` on failure.
        now_fn: Timestamp factory.

    Returns:
        CaptureResult describing what happened.
    """
    result = CaptureResult()

    # Step 1: Gate
    if config is None:
        result.skip_reason = "no_home"
        return result
    if not config.enabled:
        result.skip_reason = "disabled"
        return result

    # Step 2: Acquire
    raw = _acquire(kind, source)
    result.degraded_fields = list(raw.degraded)

    # Step 3: Build
    if kind is EventKind.TOOL_USE:
        record = build_tool_use_record(raw.fields, now_fn=now_fn)
    else:
        record = build_prompt_record(raw.fields, now_fn=now_fn)
    result.record = record

    # Step 4: Append
    log_path = config.log_path(kind)
    result.log_path = str(log_path)
    try:
        append_fn(log_path, record.to_json())
    except LogWriteError as e:
        logger.warning("Failed to write %s log: %s", _LABELS[kind], e)
        result.status = CaptureStatus.FAILED
        result.error = str(e)
        return result

    result.status = CaptureStatus.DEGRADED if raw.degraded else CaptureStatus.CAPTURED
    return result
