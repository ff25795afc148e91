"""Required-field checks used by the service layer."""

from __future__ import annotations

from typing import Any

from interview_bot.errors import ValidationError


def is_blank(value: Any) -> bool:
    """True for values that do not count as a provided required field.

    Mirrors JSON truthiness: ``None``, ``""``, ``0`` and ``false`` are missing,
    while a whitespace-only string is a value.
    """
    return not value


def require(message: str, *values: Any) -> None:
    """Raise ValidationError with ``message`` when any value is blank."""
    if any(is_blank(value) for value in values):
        raise ValidationError(message)
