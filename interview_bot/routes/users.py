"""/api/user endpoints queried by the chat workflow for a given user."""

from __future__ import annotations

from flask import Blueprint, jsonify

from interview_bot.services import job_service, user_service
from interview_bot.storage import current_store

bp = Blueprint("users", __name__, url_prefix="/api/user")


@bp.get("/<user_id>/job-description")
def get_job_description(user_id: str):
    """Return the description of the currently active job."""
    description = job_service.get_active_job_description(current_store())
    return jsonify(jobDescription=description), 200


@bp.get("/<user_id>/interview-state")
def get_interview_state(user_id: str):
    return jsonify(user_service.get_user_state(current_store(), user_id)), 200


@bp.post("/<user_id>/complete-interview")
def complete_interview(user_id: str):
    """Close the user's interview and bump their completion counter."""
    user_service.complete_interview(current_store(), user_id)
    return jsonify(message="Interview completed successfully"), 200
