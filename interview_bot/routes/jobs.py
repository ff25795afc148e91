"""/api/jobs endpoints for managing job postings."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from interview_bot.services import job_service
from interview_bot.storage import current_store
from interview_bot.utils.payload import json_body

bp = Blueprint("jobs", __name__, url_prefix="/api/jobs")


@bp.get("")
def list_jobs():
    return jsonify(job_service.list_jobs(current_store())), 200


@bp.post("")
def create_job():
    """Create an inactive job posting from the title, company and description."""
    payload = json_body()
    job = job_service.create_job(
        current_store(),
        title=payload.get("title"),
        company=payload.get("company"),
        description=payload.get("description"),
    )
    current_app.logger.info("Created job %s (%s)", job["id"], job["title"])
    return jsonify(job), 201


@bp.post("/<job_id>/activate")
def activate_job(job_id: str):
    """Make the job the single active one."""
    job = job_service.activate_job(current_store(), job_id)
    if job is None:
        current_app.logger.warning("Activated unknown job %s; no job is active now", job_id)
    return jsonify(message="Job activated successfully"), 200


@bp.delete("/<job_id>")
def delete_job(job_id: str):
    job_service.delete_job(current_store(), job_id)
    return jsonify(message="Job deleted successfully"), 200
