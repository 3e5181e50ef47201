"""Event sources: the two input acquisition strategies.

Both sources produce a ``RawEvent`` keyed by the host's stdin field names
(``session_id``, ``tool_name``, ``tool_input``, ``tool_response``,
``tool_use_id``, ``error``, ``prompt``, ``cwd``) so the record builders do
not know which transport delivered the event.

* ``StdinEventSource`` drains a stream to EOF and decodes it as one JSON
  object.  It blocks until the producer closes the stream.
* ``EnvEventSource`` reads named environment variables.  Each read is
  immediate and the JSON variables are decoded independently.
"""

from __future__ import annotations

import codecs
import logging
import os
import sys
from collections.abc import Mapping
from typing import IO, Any

from devlog_capture.core.errors import ConfigurationError
from devlog_capture.hooks.decoder import decode_blob, decode_field
from devlog_capture.hooks.models import EventSource, RawEvent

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 65_536

# ---------------------------------------------------------------------------
# Variable names (env transport)
# ---------------------------------------------------------------------------

ENV_TOOL_NAME = "TOOL_NAME"
ENV_TOOL_INPUT = "TOOL_INPUT"
ENV_TOOL_OUTPUT = "TOOL_OUTPUT"
ENV_TOOL_USE_ERROR = "TOOL_USE_ERROR"
ENV_SESSION_ID = "CLAUDE_SESSION_ID"
ENV_USER_PROMPT = "USER_PROMPT"
ENV_PROJECT_DIR = "CLAUDE_PROJECT_DIR"


def drain_stream(stream: IO[Any] | None) -> str:
    """Read *stream* to end-of-input and return its text.

    Binary chunks (``stream.buffer`` when present) are decoded as UTF-8
    with replacement characters; text streams are concatenated as-is.
    Chunks are joined in arrival order.
    """
    if stream is None:
        return ""

    reader = getattr(stream, "buffer", stream)
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    chunks: list[str] = []
    while True:
        chunk = reader.read(_CHUNK_SIZE)
        if not chunk:
            break
        if isinstance(chunk, bytes):
            chunks.append(decoder.decode(chunk))
        else:
            chunks.append(chunk)
    chunks.append(decoder.decode(b"", final=True))
    return "".join(chunks)


class StdinEventSource:
    """Acquire the event as a single JSON object from a stream."""

    name = "stdin"

    def __init__(self, stream: IO[Any] | None = None) -> None:
        self._stream = stream

    def _read(self) -> RawEvent:
        stream = self._stream if self._stream is not None else sys.stdin
        try:
            text = drain_stream(stream)
        except (OSError, ValueError) as e:
            logger.debug("Could not read event stream: %s", e)
            return RawEvent({}, ("payload",))

        decoded = decode_blob(text)
        if decoded.degraded:
            logger.debug("Event payload is not a JSON object; using empty input")
            return RawEvent({}, ("payload",))
        return RawEvent(decoded.value)

    def read_tool_use(self) -> RawEvent:
        return self._read()

    def read_prompt(self) -> RawEvent:
        return self._read()


class EnvEventSource:
    """Acquire the event from named environment variables."""

    name = "env"

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def _get(self, var: str) -> str | None:
        value = self.environ.get(var)
        return value if value else None

    def read_tool_use(self) -> RawEvent:
        fields: dict[str, Any] = {
            "session_id": self._get(ENV_SESSION_ID),
            "tool_name": self._get(ENV_TOOL_NAME),
            "error": self._get(ENV_TOOL_USE_ERROR),
        }
        degraded: list[str] = []
        for key, var in (("tool_input", ENV_TOOL_INPUT), ("tool_response", ENV_TOOL_OUTPUT)):
            decoded = decode_field(self.environ.get(var))
            fields[key] = decoded.value
            if decoded.degraded:
                degraded.append(key)
        return RawEvent(fields, tuple(degraded))

    def read_prompt(self) -> RawEvent:
        return RawEvent(
            {
                "session_id": self._get(ENV_SESSION_ID),
                "prompt": self._get(ENV_USER_PROMPT),
                "cwd": self._get(ENV_PROJECT_DIR),
            }
        )


_SOURCES: dict[str, type[StdinEventSource] | type[EnvEventSource]] = {
    "stdin": StdinEventSource,
    "env": EnvEventSource,
}

SUPPORTED_TRANSPORTS: tuple[str, ...] = tuple(_SOURCES.keys())


def make_event_source(transport: str) -> EventSource:
    """Create the event source registered for *transport*.

    Raises:
        ConfigurationError: If the transport is unknown.
    """
    try:
        source_cls = _SOURCES[transport]
    except KeyError:
        raise ConfigurationError(
            f"Unknown transport: {transport!r}. Supported: {', '.join(SUPPORTED_TRANSPORTS)}"
        ) from None
    return source_cls()
