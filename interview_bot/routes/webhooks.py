"""/webhook endpoints called by the automation workflow."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from interview_bot.services import user_service
from interview_bot.storage import current_store
from interview_bot.utils.payload import json_body

bp = Blueprint("webhooks", __name__, url_prefix="/webhook")


@bp.post("/start-interview")
def start_interview():
    """Mark an interview as running for the user in the payload."""
    payload = json_body()
    user_service.start_interview(current_store(), payload.get("userId"), payload.get("userName"))
    current_app.logger.info("Interview started for user %s", payload.get("userId"))
    return jsonify(message="Interview started successfully", interviewActive=True), 200


@bp.post("/stop-interview")
def stop_interview():
    payload = json_body()
    user_service.stop_interview(current_store(), payload.get("userId"))
    current_app.logger.info("Interview stopped for user %s", payload.get("userId"))
    return jsonify(message="Interview stopped successfully", interviewActive=False), 200
