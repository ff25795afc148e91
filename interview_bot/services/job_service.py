"""Business logic for the job postings collection."""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

from interview_bot.errors import PersistenceError
from interview_bot.storage import JOBS, DocumentStore, load_or_default
from interview_bot.utils.clock import now_iso, now_millis
from interview_bot.utils.validation import require

NO_ACTIVE_JOB_MESSAGE = "Job description not found. Please activate a job in the admin panel."
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_job_id(raw: Any) -> Optional[int]:
    """Read the leading integer of a path segment (`12abc` -> 12); None when there is none."""
    match = _LEADING_INT.match("" if raw is None else str(raw))
    return int(match.group(1)) if match else None


def _job_records(jobs: List[Any]) -> List[Dict[str, Any]]:
    return [job for job in jobs if isinstance(job, dict)]


def _next_job_id(jobs: List[Dict[str, Any]]) -> int:
    # Millisecond ids collide when two jobs are created in the same tick.
    candidate = now_millis()
    existing = [job["id"] for job in _job_records(jobs) if isinstance(job.get("id"), int)]
    if existing and candidate <= max(existing):
        candidate = max(existing) + 1
    return candidate


def list_jobs(store: DocumentStore) -> List[Dict[str, Any]]:
    """Return every stored job, active or not."""
    return load_or_default(store, JOBS)


def create_job(store: DocumentStore, title: Any, company: Any, description: Any) -> Dict[str, Any]:
    """
    Append a new inactive job to the collection.

    Args:
        store: Document store holding the jobs collection
        title: Job title
        company: Hiring company
        description: Full job description handed to the interviewer

    Returns:
        The stored job record

    Raises:
        ValidationError: if any field is missing or empty
        PersistenceError: if the collection could not be written
    """
    require("All fields are required", title, company, description)

    with store.lock(JOBS):
        jobs = load_or_default(store, JOBS)
        job = {
            "id": _next_job_id(jobs),
            "title": title,
            "company": company,
            "description": description,
            "createdAt": now_iso(),
            "isActive": False,
        }
        jobs.append(job)

        if not store.save(JOBS, jobs):
            raise PersistenceError("Failed to save job", JOBS)

    return job


def activate_job(store: DocumentStore, job_id: Any) -> Optional[Dict[str, Any]]:
    """
    Make ``job_id`` the only active job and return it.

    Every job is deactivated first, so an unknown id leaves no job active.
    Returns None in that case.
    """
    target_id = parse_job_id(job_id)

    with store.lock(JOBS):
        jobs = load_or_default(store, JOBS)
        target = None
        for job in _job_records(jobs):
            job["isActive"] = False
            if target is None and target_id is not None and job.get("id") == target_id:
                target = job
        if target is not None:
            target["isActive"] = True

        if not store.save(JOBS, jobs):
            raise PersistenceError("Failed to activate job", JOBS)

    return target


def delete_job(store: DocumentStore, job_id: Any) -> bool:
    """Remove the job with ``job_id``. Returns whether anything was removed."""
    target_id = parse_job_id(job_id)

    with store.lock(JOBS):
        jobs = load_or_default(store, JOBS)
        remaining = [
            job for job in jobs
            if target_id is None or not isinstance(job, dict) or job.get("id") != target_id
        ]

        if not store.save(JOBS, remaining):
            raise PersistenceError("Failed to delete job", JOBS)

    return len(remaining) != len(jobs)


def get_active_job(store: DocumentStore) -> Optional[Dict[str, Any]]:
    return next((job for job in _job_records(list_jobs(store)) if job.get("isActive")), None)


def get_active_job_description(store: DocumentStore) -> str:
    """Description of the active job, or a hint to activate one."""
    job = get_active_job(store)
    if job is None:
        return NO_ACTIVE_JOB_MESSAGE
    return job.get("description", "")
