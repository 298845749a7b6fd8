"""
Shared utility functions for parsing config values

Provides common helpers for:
- String parsing: conf/env value conversion (parse_float, split_csv, strip_or_none)
- Quote handling for KEY="value" conf lines
- User path expansion (~ and environment variables)
"""

from __future__ import annotations

import os
from pathlib import Path


def strip_or_none(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def parse_float(value: str | None, default: float) -> float:
    """Best-effort float parser with fallback."""
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def split_csv(value: str | None) -> list[str]:
    """Split comma-separated strings into trimmed tokens."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def strip_quotes(value: str) -> str:
    """Remove matching single or double quotes from a value."""
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {'"', "'"}:
        return value[1:-1]
    return value


def expand_path(value: str | os.PathLike[str]) -> Path:
    """Expand ``~`` and ``$VARS`` in a user supplied path."""
    return Path(os.path.expandvars(os.path.expanduser(os.fspath(value))))
