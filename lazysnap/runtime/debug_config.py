"""Logging settings sourced from environment."""

from __future__ import annotations

import os


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with lazysnap-prefixed override."""
    value = os.getenv("LAZYSNAP_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def resolve_log_file_path() -> str | None:
    """Return the JSON fling log path from `LAZYSNAP_LOG_FILE`, if set."""
    value = os.getenv("LAZYSNAP_LOG_FILE", "").strip()
    return value or None
