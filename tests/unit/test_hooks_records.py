"""Unit tests for devlog_capture.hooks.records and the record types.

Tests cover:
1. build_tool_use_record — full input, defaults, wrong types, success/error
2. build_prompt_record — full input, defaults, derived prompt length
3. to_json — camelCase key layout
4. Timestamps — generated at build time, never taken from input
"""

from __future__ import annotations

import re
from dataclasses import FrozenInstanceError

import pytest

from devlog_capture.hooks.models import PromptRecord, ToolUseRecord
from devlog_capture.hooks.records import build_prompt_record, build_tool_use_record

_FIXED_TS = "2024-01-15T10:30:00.123Z"
_ISO_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


def _fixed_now() -> str:
    return _FIXED_TS


# =============================================================================
# Tool-use records
# =============================================================================


@pytest.mark.unit
class TestBuildToolUseRecord:
    """Test PostToolUse field mapping."""

    def test_full_input(self) -> None:
        fields = {
            "session_id": "s1",
            "tool_name": "Bash",
            "tool_input": {"cmd": "ls"},
            "tool_response": {"code": 0},
            "tool_use_id": "t1",
        }
        record = build_tool_use_record(fields, now_fn=_fixed_now)
        assert record.to_json() == {
            "timestamp": _FIXED_TS,
            "sessionId": "s1",
            "tool": "Bash",
            "toolUseId": "t1",
            "input": {"cmd": "ls"},
            "output": {"code": 0},
            "success": True,
            "error": None,
        }

    def test_empty_input_uses_defaults(self) -> None:
        record = build_tool_use_record({}, now_fn=_fixed_now)
        assert record.session_id == "unknown"
        assert record.tool == "unknown"
        assert record.tool_use_id is None
        assert record.input == {}
        assert record.output == {}
        assert record.success is True
        assert record.error is None

    def test_null_fields_use_defaults(self) -> None:
        fields = {
            "session_id": None,
            "tool_name": None,
            "tool_input": None,
            "tool_response": None,
            "tool_use_id": None,
        }
        record = build_tool_use_record(fields)
        assert record.session_id == "unknown"
        assert record.tool == "unknown"
        assert record.tool_use_id is None
        assert record.input == {}
        assert record.output == {}

    def test_empty_strings_use_defaults(self) -> None:
        record = build_tool_use_record({"session_id": "", "tool_name": "", "tool_use_id": ""})
        assert record.session_id == "unknown"
        assert record.tool == "unknown"
        assert record.tool_use_id is None

    def test_wrong_types_use_defaults(self) -> None:
        fields = {
            "session_id": 42,
            "tool_name": ["Bash"],
            "tool_input": "ls",
            "tool_response": [1, 2],
            "tool_use_id": {"id": 1},
        }
        record = build_tool_use_record(fields)
        assert record.session_id == "unknown"
        assert record.tool == "unknown"
        assert record.tool_use_id is None
        assert record.input == {}
        assert record.output == {}

    def test_error_field_marks_failure(self) -> None:
        record = build_tool_use_record({"tool_name": "Bash", "error": "timeout"})
        assert record.success is False
        assert record.error == "timeout"

    def test_error_in_response(self) -> None:
        record = build_tool_use_record({"tool_response": {"error": "File not found"}})
        assert record.success is False
        assert record.error == "File not found"

    def test_is_error_flag(self) -> None:
        record = build_tool_use_record({"tool_response": {"is_error": True, "content": "x"}})
        assert record.success is False
        assert record.error is None

    def test_non_string_error_ignored(self) -> None:
        record = build_tool_use_record({"tool_response": {"error": {"code": 1}}})
        assert record.success is True
        assert record.error is None


# =============================================================================
# Prompt records
# =============================================================================


@pytest.mark.unit
class TestBuildPromptRecord:
    """Test UserPromptSubmit field mapping."""

    def test_full_input(self) -> None:
        fields = {"session_id": "s2", "prompt": "hello", "cwd": "/work"}
        record = build_prompt_record(fields, now_fn=_fixed_now)
        assert record.to_json() == {
            "timestamp": _FIXED_TS,
            "sessionId": "s2",
            "cwd": "/work",
            "prompt": "hello",
            "promptLength": 5,
        }

    def test_missing_cwd_is_null(self) -> None:
        record = build_prompt_record({"session_id": "s2", "prompt": "hello"})
        assert record.cwd is None
        assert record.to_json()["cwd"] is None

    def test_empty_input_uses_defaults(self) -> None:
        record = build_prompt_record({})
        assert record.session_id == "unknown"
        assert record.cwd is None
        assert record.prompt == ""
        assert record.prompt_length == 0

    def test_wrong_prompt_type(self) -> None:
        record = build_prompt_record({"prompt": 123})
        assert record.prompt == ""
        assert record.prompt_length == 0

    def test_empty_prompt_kept(self) -> None:
        record = build_prompt_record({"prompt": ""})
        assert record.prompt == ""

    def test_prompt_length_counts_characters(self) -> None:
        record = build_prompt_record({"prompt": "héllo wörld"})
        assert record.prompt_length == 11

    def test_supplied_length_ignored(self) -> None:
        record = build_prompt_record({"prompt": "abc", "promptLength": 99})
        assert record.to_json()["promptLength"] == 3


# =============================================================================
# Record types
# =============================================================================


@pytest.mark.unit
class TestRecordTypes:
    """Test immutability and timestamp generation."""

    def test_tool_use_record_is_frozen(self) -> None:
        record = ToolUseRecord(timestamp=_FIXED_TS)
        with pytest.raises(FrozenInstanceError):
            record.tool = "Edit"  # type: ignore[misc]

    def test_prompt_length_not_settable(self) -> None:
        with pytest.raises(TypeError):
            PromptRecord(timestamp=_FIXED_TS, prompt="abc", prompt_length=7)  # type: ignore[call-arg]

    def test_default_timestamp_is_iso(self) -> None:
        record = build_prompt_record({"timestamp": "1999-01-01T00:00:00Z"})
        assert _ISO_RE.match(record.timestamp)
        assert record.timestamp != "1999-01-01T00:00:00Z"

    def test_tool_timestamp_not_from_input(self) -> None:
        record = build_tool_use_record({"timestamp": "yesterday"})
        assert _ISO_RE.match(record.timestamp)
