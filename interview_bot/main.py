"""Flask application setup and blueprint wiring."""

from __future__ import annotations

from typing import Optional

from flask import Flask
from flask_cors import CORS

from interview_bot import config
from interview_bot.routes import register_routes
from interview_bot.storage import DocumentStore, JsonFileStore, MongoDocumentStore, initialize_documents


def build_store() -> DocumentStore:
    """Pick the document backend from the environment."""
    if config.mongodb_enabled():
        from interview_bot.database import get_database

        return MongoDocumentStore(get_database())
    return JsonFileStore(config.get_data_dir())


def create_app(store: Optional[DocumentStore] = None) -> Flask:
    """
    Configure and return the Flask application instance.

    The document store is seeded before the app is returned; a store that
    cannot be initialized raises StorageInitError.
    """
    app = Flask(__name__)
    CORS(app)

    app.config["MAX_CONTENT_LENGTH"] = config.REQUEST_LIMIT_BYTES
    app.json.sort_keys = False

    if store is None:
        store = build_store()
    initialize_documents(store)
    app.extensions["document_store"] = store
    app.logger.info("Using %s document store", type(store).__name__)

    register_routes(app)
    return app
