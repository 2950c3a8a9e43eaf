"""Log-level configuration for the heapperm command line.

Resolution order (first match wins):
    1. Programmatic override via :func:`set_log_level`.
    2. The ``HEAPPERM_LOG_LEVEL`` environment variable.
    3. ``"WARNING"``.

Valid names are the standard :mod:`logging` level names plus ``"AUTO"``,
which clears the override (case-insensitive).

Examples:
    Show debug output from the shell::

        export HEAPPERM_LOG_LEVEL=debug
"""

from __future__ import annotations

import os

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_VALID_LEVELS = {*_LEVELS, "AUTO"}
_DEFAULT_LEVEL = "WARNING"

# Sentinel indicating "no programmatic override has been set".
_level_override: str | None = None


def get_log_level() -> str:
    """Return the active log level name, e.g. ``"WARNING"``."""
    if _level_override is not None and _level_override != "AUTO":
        return _level_override

    env = os.environ.get("HEAPPERM_LOG_LEVEL", "").strip().upper()
    if env in _LEVELS:
        return env

    return _DEFAULT_LEVEL


def set_log_level(name: str) -> None:
    """Override the log level.

    Args:
        name: A :mod:`logging` level name or ``"auto"``.

    Raises:
        ValueError: If *name* is not a recognised level.
    """
    global _level_override
    normalised = name.strip().upper()
    if normalised not in _VALID_LEVELS:
        raise ValueError(
            f"Unknown log level '{name}'. Choose from: {sorted(_VALID_LEVELS)}"
        )
    _level_override = normalised
