"""Configuration system for the developer-mode event capture hooks."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Devlog Capture Configuration."""

    # Locations
    home: Path | None = Field(
        default=None,
        description="Home directory override (default: $HOME, then $USERPROFILE)",
    )
    log_subdir: str = Field(
        default=".claude/denoland-dev-logs",
        description="Log directory, relative to the home directory",
    )
    marker_name: str = Field(
        default=".enabled",
        description="Marker file whose presence enables capture",
    )
    tool_log_name: str = Field(
        default="tool-uses.jsonl",
        description="File name of the tool-use log",
    )
    prompt_log_name: str = Field(
        default="user-prompts.jsonl",
        description="File name of the user-prompt log",
    )

    # Input
    transport: Literal["stdin", "env"] = Field(
        default="stdin",
        description="Default event source: JSON on stdin, or named environment variables",
    )

    # Diagnostics
    log_level: str = Field(
        default="WARNING",
        description="Logging level for diagnostics on stderr (DEBUG, INFO, WARNING, ERROR)",
    )
    log_json: bool = Field(
        default=False,
        description="Emit diagnostics as JSON lines",
    )

    model_config = {
        "env_prefix": "DEVLOG_CAPTURE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_ignore_empty": True,
        "extra": "ignore",
    }


# Settings singleton with dependency injection support
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the settings instance (lazy-loaded singleton).

    Returns:
        The Settings instance.

    Example:
        from devlog_capture.config import get_settings
        settings = get_settings()
        print(settings.log_subdir)
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def override_settings(new_settings: Settings) -> None:
    """Override the settings instance (for testing).

    Args:
        new_settings: The new Settings instance to use.
    """
    global _settings
    _settings = new_settings


def reset_settings() -> None:
    """Reset settings to None (forces reload on next get_settings call)."""
    global _settings
    _settings = None

