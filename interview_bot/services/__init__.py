"""Service layer modules for the Interview Bot API."""

from . import job_service, prompt_service, stats_service, user_service

__all__ = [
    "job_service",
    "prompt_service",
    "stats_service",
    "user_service",
]
