"""Per-user interview lifecycle state."""

from __future__ import annotations

from typing import Any, Dict, Optional

from interview_bot.errors import PersistenceError
from interview_bot.storage import USERS, DocumentStore, load_or_default
from interview_bot.utils.clock import now_iso
from interview_bot.utils.validation import require

USER_ID_REQUIRED = "User ID is required"


def completed_count(record: Any) -> int:
    """Completed interviews on a record; unreadable counters count as 0."""
    if not isinstance(record, dict):
        return 0
    value = record.get("completedInterviews")
    if isinstance(value, bool):
        return 0
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def get_user_state(store: DocumentStore, user_id: str) -> Dict[str, Any]:
    """Return the stored record, or an inactive placeholder for unknown users."""
    users = load_or_default(store, USERS)
    return users.get(user_id) or {"interviewActive": False}


def upsert_user(
    users: Dict[str, Dict[str, Any]],
    user_id: str,
    user_name: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Return the record for ``user_id`` in ``users``, creating it when absent.

    A provided ``user_name`` is stored only when the record has none yet.
    """
    record = users.get(user_id)
    if not isinstance(record, dict):
        record = {}
        users[user_id] = record
    if user_name and not record.get("userName"):
        record["userName"] = user_name
    return record


def _update_user(store: DocumentStore, user_id: Any, failure: str, apply, user_name=None) -> Dict[str, Any]:
    require(USER_ID_REQUIRED, user_id)
    user_id = str(user_id)

    with store.lock(USERS):
        users = load_or_default(store, USERS)
        record = upsert_user(users, user_id, user_name)
        apply(record)

        if not store.save(USERS, users):
            raise PersistenceError(failure, USERS)

    return record


def start_interview(store: DocumentStore, user_id: Any, user_name: Optional[str] = None) -> Dict[str, Any]:
    """Mark the user's interview as running and stamp the start time."""

    def apply(record: Dict[str, Any]) -> None:
        record["interviewActive"] = True
        record["interviewStartTime"] = now_iso()

    return _update_user(store, user_id, "Failed to start interview", apply, user_name)


def stop_interview(store: DocumentStore, user_id: Any) -> Dict[str, Any]:
    """Mark the user's interview as stopped and stamp the end time."""

    def apply(record: Dict[str, Any]) -> None:
        record["interviewActive"] = False
        record["interviewEndTime"] = now_iso()

    return _update_user(store, user_id, "Failed to stop interview", apply)


def complete_interview(store: DocumentStore, user_id: Any) -> Dict[str, Any]:
    """Stop the interview and count it as completed."""

    def apply(record: Dict[str, Any]) -> None:
        record["interviewActive"] = False
        record["interviewEndTime"] = now_iso()
        record["completedInterviews"] = completed_count(record) + 1

    return _update_user(store, user_id, "Failed to complete interview", apply)
