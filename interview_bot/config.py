"""Environment-driven settings for the API server."""

from __future__ import annotations

import os
from pathlib import Path

API_VERSION = "1.0.0"
DEFAULT_PORT = 3001
DEFAULT_MONGODB_TIMEOUT_MS = 5000
REQUEST_LIMIT_BYTES = 100 * 1024  # 100 KB JSON bodies


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


def get_port() -> int:
    """Return the listen port, falling back to the default on bad input."""
    raw = os.getenv("PORT", "")
    try:
        return int(raw) if raw else DEFAULT_PORT
    except ValueError:
        return DEFAULT_PORT


def get_host() -> str:
    return os.getenv("HOST", "0.0.0.0")


def get_data_dir() -> Path:
    """Directory holding the JSON documents."""
    return Path(os.getenv("DATA_DIR", "data")).resolve()


def mongodb_enabled() -> bool:
    return _flag("ENABLE_MONGODB")


def debug_enabled() -> bool:
    return _flag("FLASK_DEBUG")


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_mongodb_uri() -> str:
    return os.getenv("MONGODB_URI", "mongodb://localhost:27017/")


def get_mongodb_database() -> str:
    return os.getenv("MONGODB_DATABASE", "interview_bot")


def get_mongodb_timeout_ms() -> int:
    """Server selection timeout used for the startup ping and every operation."""
    raw = os.getenv("MONGODB_TIMEOUT_MS", "")
    try:
        return int(raw) if raw else DEFAULT_MONGODB_TIMEOUT_MS
    except ValueError:
        return DEFAULT_MONGODB_TIMEOUT_MS
