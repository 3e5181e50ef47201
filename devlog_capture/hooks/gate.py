"""Developer-mode gate: home resolution and marker existence check.

Turns ``Settings`` plus the process environment into an immutable
``CaptureConfig`` so the rest of the pipeline never reads ambient state.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from devlog_capture.config import Settings, get_settings
from devlog_capture.hooks.models import CaptureConfig

logger = logging.getLogger(__name__)

_HOME_VARS: tuple[str, ...] = ("HOME", "USERPROFILE")


def path_exists(path: str | os.PathLike[str]) -> bool:
    """Return whether a filesystem entry exists at *path*.

    Every access error (permission denied, not found, invalid path) reads
    as ``False``.  Never raises.
    """
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def resolve_home(
    settings: Settings | None = None,
    environ: Mapping[str, str] | None = None,
) -> Path | None:
    """Resolve the invoking user's home directory.

    Resolution order:
    1. ``settings.home`` (``$DEVLOG_CAPTURE_HOME``)
    2. ``$HOME``
    3. ``$USERPROFILE``

    Returns:
        The home directory, or ``None`` if it cannot be determined.
    """
    settings = settings or get_settings()
    if settings.home is not None and str(settings.home):
        return Path(settings.home)

    env = os.environ if environ is None else environ
    for var in _HOME_VARS:
        value = env.get(var, "")
        if value:
            return Path(value)
    return None


def resolve_capture_config(
    settings: Settings | None = None,
    environ: Mapping[str, str] | None = None,
) -> CaptureConfig | None:
    """Build the capture configuration for this invocation.

    Returns:
        ``None`` when no home directory can be determined, otherwise a
        ``CaptureConfig`` whose ``enabled`` flag reflects the marker file.
    """
    settings = settings or get_settings()
    home = resolve_home(settings, environ)
    if home is None:
        logger.debug("No home directory; capture disabled")
        return None

    log_dir = home / settings.log_subdir
    enabled = path_exists(log_dir / settings.marker_name)
    logger.debug("Capture %s (log dir %s)", "enabled" if enabled else "disabled", log_dir)

    return CaptureConfig(
        log_dir=log_dir,
        enabled=enabled,
        tool_log_name=settings.tool_log_name,
        prompt_log_name=settings.prompt_log_name,
    )
