"""Exceptions raised by the service layer and mapped to HTTP responses."""

from __future__ import annotations


class ValidationError(Exception):
    """A required request field is missing or empty (HTTP 400)."""

    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class PersistenceError(Exception):
    """A document could not be written back to the store (HTTP 500)."""

    status_code = 500

    def __init__(self, message: str, document: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.document = document


class StorageInitError(Exception):
    """The document store could not be prepared or seeded at startup."""
