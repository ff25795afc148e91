"""Time helpers shared by the services."""

from __future__ import annotations

import time
from datetime import datetime, timezone


def now_millis() -> int:
    """Return the current UNIX timestamp in milliseconds."""
    return int(time.time() * 1000)


def now_iso() -> str:
    """Return the current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")
