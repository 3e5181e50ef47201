"""Domain types for the capture hooks.

Immutable value types for the injected capture configuration, decoded
values, and the two log record shapes, plus the result type reported by
the pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Protocol

# ---------------------------------------------------------------------------
# Event categories
# ---------------------------------------------------------------------------


class EventKind(str, Enum):
    """Captured lifecycle event categories."""

    TOOL_USE = "tool-use"
    PROMPT = "prompt"


# ---------------------------------------------------------------------------
# Status enums
# ---------------------------------------------------------------------------


class DecodeStatus(str, Enum):
    """Outcome of decoding one acquired value."""

    OK = "ok"
    EMPTY = "empty"  # nothing to decode; default used
    FALLBACK = "fallback"  # undecodable; default or raw fallback used


class CaptureStatus(str, Enum):
    """Outcome of one hook invocation."""

    CAPTURED = "captured"
    DEGRADED = "degraded"  # record written, some input replaced by fallbacks
    SKIPPED = "skipped"  # capture gated off
    FAILED = "failed"  # write failed, contained


# ---------------------------------------------------------------------------
# Capture configuration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CaptureConfig:
    """Resolved, injectable capture configuration.

    Built once per invocation by ``gate.resolve_capture_config()``; tests
    construct it directly.
    """

    log_dir: Path
    enabled: bool
    tool_log_name: str = "tool-uses.jsonl"
    prompt_log_name: str = "user-prompts.jsonl"

    def log_path(self, kind: EventKind) -> Path:
        """Return the category-specific log file for *kind*."""
        if kind is EventKind.TOOL_USE:
            return self.log_dir / self.tool_log_name
        return self.log_dir / self.prompt_log_name


# ---------------------------------------------------------------------------
# Decoded input
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Decoded:
    """A decoded value together with how it was obtained."""

    value: dict[str, Any] = field(default_factory=dict)
    status: DecodeStatus = DecodeStatus.EMPTY

    @property
    def degraded(self) -> bool:
        return self.status is DecodeStatus.FALLBACK


@dataclass(frozen=True)
class RawEvent:
    """Event payload as acquired from an event source, before building.

    ``fields`` holds the decoded top-level mapping; ``degraded`` names the
    fields (or ``"payload"`` for the whole stream blob) whose decoding fell
    back to a default.
    """

    fields: dict[str, Any] = field(default_factory=dict)
    degraded: tuple[str, ...] = ()


class EventSource(Protocol):
    """Structural type for input acquisition strategies."""

    name: str

    def read_tool_use(self) -> RawEvent: ...

    def read_prompt(self) -> RawEvent: ...


# ---------------------------------------------------------------------------
# Log records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ToolUseRecord:
    """One captured tool invocation."""

    timestamp: str
    session_id: str = "unknown"
    tool: str = "unknown"
    tool_use_id: str | None = None
    input: dict[str, Any] = field(default_factory=dict)
    output: dict[str, Any] = field(default_factory=dict)
    success: bool = True
    error: str | None = None

    def to_json(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "sessionId": self.session_id,
            "tool": self.tool,
            "toolUseId": self.tool_use_id,
            "input": self.input,
            "output": self.output,
            "success": self.success,
            "error": self.error,
        }


@dataclass(frozen=True)
class PromptRecord:
    """One captured user prompt submission.

    ``prompt_length`` is derived from ``prompt`` and cannot be supplied.
    """

    timestamp: str
    session_id: str = "unknown"
    cwd: str | None = None
    prompt: str = ""

    @property
    def prompt_length(self) -> int:
        return len(self.prompt)

    def to_json(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "sessionId": self.session_id,
            "cwd": self.cwd,
            "prompt": self.prompt,
            "promptLength": self.prompt_length,
        }


# ---------------------------------------------------------------------------
# Pipeline result
# ---------------------------------------------------------------------------


@dataclass
class CaptureResult:
    """Result of one capture pipeline run."""

    status: CaptureStatus = CaptureStatus.SKIPPED
    skip_reason: str = ""
    log_path: str = ""
    record: ToolUseRecord | PromptRecord | None = None
    degraded_fields: list[str] = field(default_factory=list)
    error: str = ""
