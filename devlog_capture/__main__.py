"""Entry point for the capture hooks and CLI commands."""

from __future__ import annotations

import argparse
import json
import sys
from typing import NoReturn


def run_version() -> None:
    """Print the package version."""
    from devlog_capture import __version__

    print(f"devlog-capture {__version__}")


def run_setup_hooks(args: argparse.Namespace) -> int:
    """Print the hook configuration for Claude Code.

    Args:
        args: Parsed command line arguments.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    from devlog_capture.tools.setup_hooks import generate_hook_config

    try:
        config = generate_hook_config(
            transport=args.transport,
            python_path=args.python_path or "",
        )
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if args.json:
        print(json.dumps({"hooks": config["hooks"]}, indent=2))
        return 0

    print("Devlog Capture - Hook Configuration")
    print(f"Command: {config['command']}")
    print(f"Transport: {config['transport']}")
    print()
    print("Hooks config:")
    print(json.dumps({"hooks": config["hooks"]}, indent=2))
    print()
    print(config["instructions"])
    return 0


def run_status() -> int:
    """Show where captures go and whether developer mode is on.

    Returns:
        Exit code (0 for success, 1 if no home directory is available).
    """
    from devlog_capture.hooks.gate import resolve_capture_config
    from devlog_capture.hooks.models import EventKind

    config = resolve_capture_config()
    if config is None:
        print("Error: cannot determine the home directory (set HOME or DEVLOG_CAPTURE_HOME).")
        return 1

    print("Devlog Capture - Status")
    print(f"Log directory: {config.log_dir}")
    print(f"Developer mode: {'enabled' if config.enabled else 'disabled'}")
    print(f"Tool-use log: {config.log_path(EventKind.TOOL_USE)}")
    print(f"Prompt log: {config.log_path(EventKind.PROMPT)}")
    return 0


def _dispatch_hook(argv_rest: list[str]) -> int:
    """Run a capture hook.  Called when ``sys.argv[1] == "hook"``.

    No arguments or ``--help`` print usage.  Everything else goes to the
    fail-open dispatcher, which always acknowledges and returns 0.
    """
    from devlog_capture.hooks.dispatcher import USAGE
    from devlog_capture.hooks.dispatcher import main as hook_main

    if not argv_rest or argv_rest[0] in ("--help", "-h"):
        print(USAGE)
        return 0
    return hook_main(argv_rest)


def main() -> NoReturn:
    """Main entry point with subcommand support."""
    # Fast-path: bypass argparse entirely for hook dispatch
    if len(sys.argv) >= 2 and sys.argv[1] == "hook":
        try:
            code = _dispatch_hook(sys.argv[2:])
        except Exception:
            # Dispatcher unavailable; still acknowledge
            sys.stdout.write(json.dumps({"continue": True, "suppressOutput": True}) + "\n")
            sys.stdout.flush()
            code = 0
        sys.exit(code)

    parser = argparse.ArgumentParser(
        prog="devlog-capture",
        description="Developer-mode capture of Claude Code tool uses and prompts",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="store_true",
        help="Show version and exit",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands",
    )

    # Hook command (handled by the fast-path above; listed for --help)
    subparsers.add_parser(
        "hook",
        help="Capture one hook event: hook <tool-use|prompt> [--transport stdin|env]",
    )

    # Setup-hooks command
    setup_hooks_parser = subparsers.add_parser(
        "setup-hooks",
        help="Generate the Claude Code hook configuration",
    )
    setup_hooks_parser.add_argument(
        "--transport",
        default="stdin",
        choices=["stdin", "env"],
        help="Event source the hooks should read (default: stdin)",
    )
    setup_hooks_parser.add_argument(
        "--python-path",
        default="",
        help="Run via '<python> -m devlog_capture' instead of the console script",
    )
    setup_hooks_parser.add_argument(
        "--json",
        action="store_true",
        help="Output raw JSON only (for piping)",
    )

    # Status command
    subparsers.add_parser(
        "status",
        help="Show the log directory and whether developer mode is enabled",
    )

    args = parser.parse_args()

    if args.version:
        run_version()
        sys.exit(0)

    if args.command == "setup-hooks":
        sys.exit(run_setup_hooks(args))
    elif args.command == "status":
        sys.exit(run_status())
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
