"""Unified dispatcher for the capture hooks.

Routes a hook invocation to the capture pipeline for its event category.
Accepts Claude Code (PascalCase), camelCase and kebab-case event names.

CLI usage::

    echo '{"tool_name":"Bash",...}' | devlog-capture hook tool-use
    TOOL_NAME=Bash TOOL_INPUT='{}' devlog-capture hook tool-use --transport env
    echo '{"prompt":"hello"}' | python -m devlog_capture hook prompt

All exceptions are caught (fail-open).  The acknowledgment is always the
last thing written to stdout, and the exit code is always 0.
"""

from __future__ import annotations

import logging
import sys

from devlog_capture.config import get_settings
from devlog_capture.core.errors import ConfigurationError
from devlog_capture.core.logging import configure_logging
from devlog_capture.hooks.gate import resolve_capture_config
from devlog_capture.hooks.hook_helpers import write_stdout_response
from devlog_capture.hooks.models import CaptureResult, EventKind
from devlog_capture.hooks.pipeline import run_capture
from devlog_capture.hooks.sources import make_event_source

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_EVENT_ALIASES: dict[str, EventKind] = {
    # PascalCase (Claude Code canonical)
    "PostToolUse": EventKind.TOOL_USE,
    "UserPromptSubmit": EventKind.PROMPT,
    # camelCase
    "postToolUse": EventKind.TOOL_USE,
    "userPromptSubmit": EventKind.PROMPT,
    # kebab-case (CLI)
    "tool-use": EventKind.TOOL_USE,
    "post-tool-use": EventKind.TOOL_USE,
    "prompt": EventKind.PROMPT,
    "user-prompt": EventKind.PROMPT,
    "user-prompt-submit": EventKind.PROMPT,
}

USAGE = (
    "Usage: devlog-capture hook <event> [--transport stdin|env]\n"
    "Events: tool-use (PostToolUse), prompt (UserPromptSubmit)"
)


# ---------------------------------------------------------------------------
# Argument helpers
# ---------------------------------------------------------------------------


def normalize_event(raw: str) -> EventKind | None:
    """Normalize an event name to its category.

    Returns ``None`` if the event is not recognized.
    """
    return _EVENT_ALIASES.get(raw)


def _parse_transport_flag(argv: list[str], default: str) -> str:
    """Extract --transport value from argv, falling back to *default*."""
    for i, arg in enumerate(argv):
        if arg == "--transport" and i + 1 < len(argv):
            return argv[i + 1]
        if arg.startswith("--transport="):
            return arg.split("=", 1)[1]
    return default


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------


def dispatch(argv: list[str]) -> CaptureResult | None:
    """Run the capture pipeline for ``argv[0]``.

    Returns:
        The pipeline result, or ``None`` if the event is not recognized.

    Raises:
        ConfigurationError: If the transport is unknown.
    """
    settings = get_settings()
    try:
        configure_logging(level=settings.log_level, json_format=settings.log_json)
    except ValueError:
        configure_logging(json_format=settings.log_json)
        logger.warning("Unknown log level %r; using WARNING", settings.log_level)

    kind = normalize_event(argv[0]) if argv else None
    if kind is None:
        logger.warning("Unknown hook event: %s", argv[0] if argv else "<none>")
        return None

    transport = _parse_transport_flag(argv[1:], settings.transport)
    source = make_event_source(transport)
    config = resolve_capture_config(settings)

    result = run_capture(kind, config, source)
    logger.debug(
        "%s capture %s%s",
        kind.value,
        result.status.value,
        f" ({result.skip_reason})" if result.skip_reason else "",
    )
    return result


def main(argv: list[str] | None = None) -> int:
    """Entrypoint. Fail-open: catches all exceptions, always returns 0."""
    args = sys.argv[1:] if argv is None else argv
    try:
        dispatch(args)
    except ConfigurationError as e:
        logger.warning("Capture skipped: %s", e)
    except Exception:
        logger.exception("Capture hook failed")

    write_stdout_response()
    return 0


if __name__ == "__main__":
    sys.exit(main())
