"""Tolerant JSON decoding for acquired event input.

Two policies:

* ``decode_blob``: a whole stdin payload.  Partial JSON is meaningless,
  so anything that is not a JSON object decodes to ``{}``.
* ``decode_field``: one named variable.  Undecodable text is kept as
  ``{"raw": <text>}`` so the rest of the event still survives.

Neither function raises.
"""

from __future__ import annotations

import json
from typing import Any

from devlog_capture.hooks.models import Decoded, DecodeStatus


def _loads_object(text: str) -> dict[str, Any] | None:
    """Parse *text* as a JSON object, or return ``None``."""
    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None
    return data


def decode_blob(text: str) -> Decoded:
    """Decode a complete stdin payload.

    Returns:
        ``EMPTY`` for empty/whitespace input, ``OK`` for a JSON object,
        ``FALLBACK`` (with ``{}``) for anything else.
    """
    if not text or not text.strip():
        return Decoded({}, DecodeStatus.EMPTY)

    data = _loads_object(text)
    if data is None:
        return Decoded({}, DecodeStatus.FALLBACK)
    return Decoded(data, DecodeStatus.OK)


def decode_field(text: str | None) -> Decoded:
    """Decode one named JSON variable.

    Returns:
        ``EMPTY`` for a missing or empty variable, ``OK`` for a JSON
        object, ``FALLBACK`` with ``{"raw": text}`` otherwise.  A
        whitespace-only value is present, so it keeps its raw text.
    """
    if text is None or text == "":
        return Decoded({}, DecodeStatus.EMPTY)

    data = _loads_object(text)
    if data is None:
        return Decoded({"raw": text}, DecodeStatus.FALLBACK)
    return Decoded(data, DecodeStatus.OK)
