"""Document stores backing the API state.

Every piece of state lives in one of four named JSON documents. A store only
knows how to load and overwrite whole documents; the services own the
read-modify-write logic and run it inside ``store.lock(name)``.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from flask import current_app
from pymongo.database import Database
from pymongo.errors import PyMongoError

from interview_bot.errors import StorageInitError

_LOGGER = logging.getLogger(__name__)

JOBS = "jobs"
SYSTEM_PROMPT = "system_prompt"
USERS = "users"
STATS = "stats"

DEFAULT_SYSTEM_PROMPT = (
    "You are an experienced AI interviewer. Conduct the interview professionally "
    "and ask relevant questions."
)

DEFAULT_DOCUMENTS: Dict[str, Any] = {
    JOBS: [],
    SYSTEM_PROMPT: {"systemPrompt": DEFAULT_SYSTEM_PROMPT},
    USERS: {},
    STATS: {"totalJobs": 0, "totalUsers": 0, "totalInterviews": 0},
}


def serialize(document: Any) -> str:
    """Stable on-disk representation shared by every backend."""
    return json.dumps(document, indent=2, ensure_ascii=False)


class DocumentStore:
    """Base class for whole-document persistence."""

    def __init__(self) -> None:
        self._locks: Dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    def load(self, name: str) -> Optional[Any]:
        """Return the parsed document, or None when it is missing or unreadable."""
        raise NotImplementedError

    def save(self, name: str, document: Any) -> bool:
        """Overwrite the document; return False when the write fails."""
        raise NotImplementedError

    def exists(self, name: str) -> bool:
        raise NotImplementedError

    def prepare(self) -> None:
        """Make the backing location ready. Raises OSError or PyMongoError."""

    @contextmanager
    def lock(self, name: str) -> Iterator[None]:
        """Serialize read-modify-write sequences on one document in this process."""
        with self._locks_guard:
            doc_lock = self._locks.setdefault(name, threading.RLock())
        with doc_lock:
            yield


class JsonFileStore(DocumentStore):
    """One ``<name>.json`` file per document inside ``data_dir``."""

    def __init__(self, data_dir: os.PathLike | str) -> None:
        super().__init__()
        self.data_dir = Path(data_dir)

    def path_for(self, name: str) -> Path:
        return self.data_dir / f"{name}.json"

    def prepare(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    def load(self, name: str) -> Optional[Any]:
        path = self.path_for(name)
        try:
            with path.open("r", encoding="utf-8") as handle:
                return json.load(handle)
        except (OSError, ValueError) as exc:
            _LOGGER.error("Error reading file %s: %s", path, exc)
            return None

    def save(self, name: str, document: Any) -> bool:
        path = self.path_for(name)
        tmp_name = None
        try:
            payload = serialize(document)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{name}.", suffix=".tmp", dir=self.data_dir)
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, path)
            return True
        except (OSError, TypeError, ValueError) as exc:
            _LOGGER.error("Error writing file %s: %s", path, exc)
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            return False


class MemoryStore(DocumentStore):
    """Dict-backed store; keeps serialized copies so callers never share state."""

    def __init__(self, documents: Optional[Dict[str, Any]] = None) -> None:
        super().__init__()
        self._documents: Dict[str, str] = {}
        for name, document in (documents or {}).items():
            self._documents[name] = serialize(document)

    def exists(self, name: str) -> bool:
        return name in self._documents

    def load(self, name: str) -> Optional[Any]:
        raw = self._documents.get(name)
        if raw is None:
            _LOGGER.error("Document %s not found in memory store", name)
            return None
        return json.loads(raw)

    def save(self, name: str, document: Any) -> bool:
        try:
            self._documents[name] = serialize(document)
        except (TypeError, ValueError) as exc:
            _LOGGER.error("Error serializing document %s: %s", name, exc)
            return False
        return True


class MongoDocumentStore(DocumentStore):
    """Keeps each document as one record in a MongoDB collection.

    Bodies are stored as JSON text because user ids are used as map keys and
    may contain characters MongoDB reserves in field names.
    """

    def __init__(self, database: Database, collection_name: str = "documents") -> None:
        super().__init__()
        self.collection = database[collection_name]

    def exists(self, name: str) -> bool:
        return self.collection.find_one({"_id": name}, {"_id": 1}) is not None

    def load(self, name: str) -> Optional[Any]:
        try:
            record = self.collection.find_one({"_id": name})
        except PyMongoError as exc:
            _LOGGER.error("Error reading document %s from MongoDB: %s", name, exc)
            return None

        if record is None:
            _LOGGER.error("Document %s not found in MongoDB", name)
            return None

        try:
            return json.loads(record["body"])
        except (KeyError, TypeError, ValueError) as exc:
            _LOGGER.error("Error parsing document %s from MongoDB: %s", name, exc)
            return None

    def save(self, name: str, document: Any) -> bool:
        try:
            body = serialize(document)
            self.collection.replace_one({"_id": name}, {"_id": name, "body": body}, upsert=True)
            return True
        except (PyMongoError, TypeError, ValueError) as exc:
            _LOGGER.error("Error writing document %s to MongoDB: %s", name, exc)
            return False


def initialize_documents(store: DocumentStore) -> None:
    """Prepare the store and seed every absent document with its default."""
    try:
        store.prepare()
        for name, default in DEFAULT_DOCUMENTS.items():
            if store.exists(name):
                continue
            if not store.save(name, default):
                raise StorageInitError(f"Could not seed default document '{name}'")
            _LOGGER.info("Seeded default document %s", name)
    except (OSError, PyMongoError) as exc:
        raise StorageInitError(f"Could not initialize document store: {exc}") from exc


def load_or_default(store: DocumentStore, name: str) -> Any:
    """Load a document, substituting a fresh default when it is missing or unreadable."""
    document = store.load(name)
    default = DEFAULT_DOCUMENTS[name]
    if document is None or not isinstance(document, type(default)):
        return json.loads(serialize(default))
    return document


def current_store() -> DocumentStore:
    """Return the store attached to the running Flask app."""
    return current_app.extensions["document_store"]
