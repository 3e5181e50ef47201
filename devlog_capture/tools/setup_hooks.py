"""Generate Claude Code hook configuration for the capture handlers.

Produces the ``hooks`` block for ``.claude/settings.json`` that registers
the tool-use handler on ``PostToolUse`` and the prompt handler on
``UserPromptSubmit``.
"""

from __future__ import annotations

from typing import Any

from devlog_capture.hooks.sources import SUPPORTED_TRANSPORTS

_CLI_COMMAND = "devlog-capture"

# Claude Code hook timeouts, in seconds
_TOOL_USE_TIMEOUT = 10
_PROMPT_TIMEOUT = 5


def _command_prefix(python_path: str) -> str:
    """Return the command that launches the CLI."""
    if python_path:
        return f"{python_path} -m devlog_capture"
    return _CLI_COMMAND


def _hook_entry(command: str, timeout: int) -> dict[str, Any]:
    return {"type": "command", "command": command, "timeout": timeout}


def generate_hook_config(
    *,
    transport: str = "stdin",
    python_path: str = "",
) -> dict[str, Any]:
    """Generate the hook configuration.

    Args:
        transport: Event source the handlers should use.
        python_path: Interpreter to run ``-m devlog_capture`` with.  When
            empty, the ``devlog-capture`` console script is used.

    Returns:
        Dict with ``hooks``, ``transport``, ``command`` and
        ``instructions``.

    Raises:
        ValueError: If the transport is unknown.
    """
    if transport not in SUPPORTED_TRANSPORTS:
        raise ValueError(
            f"Unknown transport: {transport!r}. Supported: {', '.join(SUPPORTED_TRANSPORTS)}"
        )

    prefix = _command_prefix(python_path)
    suffix = "" if transport == "stdin" else f" --transport {transport}"

    hooks: dict[str, list[dict[str, Any]]] = {
        "PostToolUse": [
            {
                "matcher": "*",
                "hooks": [
                    _hook_entry(f"{prefix} hook tool-use{suffix}", _TOOL_USE_TIMEOUT),
                ],
            }
        ],
        "UserPromptSubmit": [
            {
                "hooks": [
                    _hook_entry(f"{prefix} hook prompt{suffix}", _PROMPT_TIMEOUT),
                ],
            }
        ],
    }

    return {
        "hooks": hooks,
        "transport": transport,
        "command": prefix,
        "instructions": (
            "Add the 'hooks' config to your .claude/settings.json under the "
            "'hooks' key. Capture stays off until the marker file exists:\n\n"
            "  mkdir -p ~/.claude/denoland-dev-logs\n"
            "  touch ~/.claude/denoland-dev-logs/.enabled"
        ),
    }
