"""System prompt endpoints used by the admin panel and the chat workflow."""

from __future__ import annotations

from flask import Blueprint, jsonify

from interview_bot.services import prompt_service
from interview_bot.storage import current_store
from interview_bot.utils.payload import json_body

bp = Blueprint("system_prompt", __name__, url_prefix="/api")


@bp.get("/system-prompt")
def get_system_prompt():
    return jsonify(systemPrompt=prompt_service.get_system_prompt(current_store())), 200


@bp.post("/system-prompt")
def save_system_prompt():
    """Replace the interviewer system prompt."""
    payload = json_body()
    prompt_service.set_system_prompt(current_store(), payload.get("systemPrompt"))
    return jsonify(message="System prompt saved successfully"), 200


@bp.get("/user/<user_id>/system-prompt")
def get_user_system_prompt(user_id: str):
    """Return the prompt the workflow should use for ``user_id``."""
    return jsonify(systemPrompt=prompt_service.get_system_prompt(current_store())), 200
