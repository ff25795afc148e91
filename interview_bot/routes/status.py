"""Health check and aggregate statistics."""

from __future__ import annotations

from flask import Blueprint, jsonify

from interview_bot.config import API_VERSION
from interview_bot.services import stats_service
from interview_bot.storage import current_store
from interview_bot.utils.clock import now_iso

bp = Blueprint("status", __name__, url_prefix="/api")


@bp.get("/health")
def health():
    return jsonify(status="OK", timestamp=now_iso(), version=API_VERSION), 200


@bp.get("/stats")
def get_stats():
    """Totals for jobs, known users and completed interviews."""
    return jsonify(stats_service.compute_stats(current_store())), 200
