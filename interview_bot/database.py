"""MongoDB connection for the optional document backend.

The connection is opened once per process and verified with a ``ping`` so an
unreachable server fails startup instead of the first request.
"""

from __future__ import annotations

import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from interview_bot import config
from interview_bot.errors import StorageInitError

_LOGGER = logging.getLogger(__name__)

_database: Optional[Database] = None


def connect() -> Database:
    """Open a client from the environment settings and confirm the server answers."""
    uri = config.get_mongodb_uri()
    client = MongoClient(uri, serverSelectionTimeoutMS=config.get_mongodb_timeout_ms())
    try:
        client.admin.command("ping")
    except PyMongoError as exc:
        client.close()
        raise StorageInitError(f"MongoDB at {uri} is unreachable: {exc}") from exc

    _LOGGER.info("Connected to MongoDB database %s", config.get_mongodb_database())
    return client[config.get_mongodb_database()]


def get_database() -> Database:
    """Return the documents database, connecting on first use."""
    global _database
    if _database is None:
        _database = connect()
    return _database
