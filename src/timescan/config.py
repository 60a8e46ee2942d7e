"""Environment-driven settings for the MCP server layer."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from timescan.core import DEFAULT_FORMAT

LOG_LEVEL_ENV = "TIMESCAN_LOG_LEVEL"
DEFAULT_FORMAT_ENV = "TIMESCAN_DEFAULT_FORMAT"
BASE_DIR_ENV = "TIMESCAN_BASE_DIR"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def log_level() -> int:
    """Return the server log level (default INFO)."""
    name = os.getenv(LOG_LEVEL_ENV, "INFO").strip().upper() or "INFO"
    if name not in _LOG_LEVELS:
        allowed = ", ".join(_LOG_LEVELS)
        raise ValueError(f"{LOG_LEVEL_ENV} must be one of: {allowed} (got {name!r})")
    return getattr(logging, name)


def default_format() -> str:
    """Return the template used when a caller does not pass one."""
    raw = os.getenv(DEFAULT_FORMAT_ENV)
    if raw is None or raw == "":
        return DEFAULT_FORMAT
    if not raw.strip():
        raise ValueError(f"{DEFAULT_FORMAT_ENV} must not be blank")
    return raw


def base_dir() -> Path:
    """Return the resolved base directory for file access."""
    raw = os.getenv(BASE_DIR_ENV, os.getcwd())
    return Path(raw).expanduser().resolve()


def safe_resolve(path: str) -> Path:
    """Resolve a path under the configured base directory."""
    base = base_dir()
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = base / p
    p = p.resolve()
    if base not in p.parents and p != base:
        raise ValueError(f"Path escapes base dir ({BASE_DIR_ENV}={base})")
    return p
