"""Storage of the interviewer system prompt."""

from __future__ import annotations

from typing import Any

from interview_bot.errors import PersistenceError
from interview_bot.storage import SYSTEM_PROMPT, DocumentStore
from interview_bot.utils.validation import require


def get_system_prompt(store: DocumentStore) -> str:
    """Return the stored prompt, or an empty string when none is readable."""
    document = store.load(SYSTEM_PROMPT)
    if not isinstance(document, dict):
        return ""
    return document.get("systemPrompt") or ""


def set_system_prompt(store: DocumentStore, prompt: Any) -> str:
    """Overwrite the prompt document with ``prompt``."""
    require("System prompt is required", prompt)

    with store.lock(SYSTEM_PROMPT):
        if not store.save(SYSTEM_PROMPT, {"systemPrompt": prompt}):
            raise PersistenceError("Failed to save system prompt", SYSTEM_PROMPT)

    return prompt
