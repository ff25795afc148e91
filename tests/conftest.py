"""Shared pytest fixtures for the document stores and the Flask app."""

from __future__ import annotations

import sys
from pathlib import Path

import mongomock
import pytest

# Ensure the application package is importable during tests.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from interview_bot import database  # noqa: E402
from interview_bot.main import create_app  # noqa: E402
from interview_bot.storage import JsonFileStore, MemoryStore, initialize_documents  # noqa: E402


class FlakyStore(MemoryStore):
    """Memory store whose writes can be switched off to simulate I/O failures."""

    def __init__(self) -> None:
        super().__init__()
        self.fail_writes = False

    def save(self, name, document):
        if self.fail_writes:
            return False
        return super().save(name, document)


@pytest.fixture
def store() -> MemoryStore:
    """A seeded in-memory document store."""
    memory_store = MemoryStore()
    initialize_documents(memory_store)
    return memory_store


@pytest.fixture
def flaky_store() -> FlakyStore:
    flaky = FlakyStore()
    initialize_documents(flaky)
    return flaky


@pytest.fixture
def file_store(tmp_path: Path) -> JsonFileStore:
    """A file-backed store rooted in a per-test temporary directory."""
    return JsonFileStore(tmp_path / "data")


@pytest.fixture
def app(store):
    flask_app = create_app(store=store)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def mongo_db(monkeypatch: pytest.MonkeyPatch):
    """Provide an isolated in-memory MongoDB database."""
    test_db_name = "test_interview_bot"
    monkeypatch.setenv("MONGODB_DATABASE", test_db_name)

    client = mongomock.MongoClient()
    db = client[test_db_name]

    monkeypatch.setattr(database, "get_database", lambda: db)

    yield db

    client.drop_database(test_db_name)
