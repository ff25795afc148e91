"""Aggregate counters computed from the stored documents."""

from __future__ import annotations

from typing import Dict

from interview_bot.services.user_service import completed_count
from interview_bot.storage import JOBS, USERS, DocumentStore, load_or_default


def compute_stats(store: DocumentStore) -> Dict[str, int]:
    jobs = load_or_default(store, JOBS)
    users = load_or_default(store, USERS)

    return {
        "totalJobs": len(jobs),
        "totalUsers": len(users),
        "totalInterviews": sum(completed_count(record) for record in users.values()),
    }
