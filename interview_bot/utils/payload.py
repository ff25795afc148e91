"""Request body helpers."""

from __future__ import annotations

from typing import Any, Dict

from flask import request


def json_body() -> Dict[str, Any]:
    """Return the JSON object body, or an empty dict for missing or malformed input."""
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}
