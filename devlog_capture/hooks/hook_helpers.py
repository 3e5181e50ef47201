"""Shared stdout helpers for hook entrypoints."""

from __future__ import annotations

import json
import sys

ACKNOWLEDGMENT: dict[str, bool] = {"continue": True, "suppressOutput": True}
"""Standard response: never interrupt the observed event, add no output."""


def write_stdout_response() -> None:
    """Write the standard hook response to stdout and flush.

    Output: ``{"continue": true, "suppressOutput": true}``
    """
    try:
        json.dump(ACKNOWLEDGMENT, sys.stdout)
        sys.stdout.write("\n")
        sys.stdout.flush()
    except (OSError, ValueError, AttributeError):
        pass
