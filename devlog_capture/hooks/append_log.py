"""Append-only JSONL writer.

Each record becomes one line of JSON.  The file is opened in append mode
and the encoded line goes to the OS in a single unbuffered write, so
concurrent hook processes appending to the same file interleave whole
lines.  No locks, no retries.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from devlog_capture.core.errors import LogWriteError


def serialize_line(payload: dict[str, Any]) -> bytes:
    """Encode *payload* as one UTF-8 JSON line ending in ``\\n``.

    Lone surrogates from decoded input are written as JSON ``\\uXXXX``
    escapes.

    Raises:
        TypeError, ValueError: If *payload* is not JSON-serializable.
    """
    line = json.dumps(payload, ensure_ascii=False, separators=(",", ":")) + "\n"
    return line.encode("utf-8", errors="backslashreplace")


def append_record(log_path: Path, payload: dict[str, Any]) -> None:
    """Append *payload* as one line to *log_path*.

    Creates the file and its parent directory if missing.

    Raises:
        LogWriteError: On any serialization or I/O failure.
    """
    try:
        data = serialize_line(payload)
    except (TypeError, ValueError) as e:
        raise LogWriteError(log_path, f"unserializable record: {e}") from e

    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(log_path, "ab", buffering=0) as f:
            view = memoryview(data)
            while view:
                written = f.write(view)
                view = view[written:]
    except OSError as e:
        raise LogWriteError(log_path, e.strerror or str(e)) from e
