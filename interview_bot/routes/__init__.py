"""Blueprint and error handler registration."""

from __future__ import annotations

from flask import Flask, current_app, jsonify
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from interview_bot.errors import PersistenceError, ValidationError

from .jobs import bp as jobs_bp
from .status import bp as status_bp
from .system_prompt import bp as system_prompt_bp
from .users import bp as users_bp
from .webhooks import bp as webhooks_bp


def register_routes(app: Flask) -> None:
    """Register all application blueprints on the provided Flask app."""
    app.register_blueprint(system_prompt_bp)
    app.register_blueprint(jobs_bp)
    app.register_blueprint(users_bp)
    app.register_blueprint(webhooks_bp)
    app.register_blueprint(status_bp)

    @app.get("/")
    def index():
        return (
            jsonify(
                message="Interview Bot API Server",
                status="Running",
                endpoints={
                    "health": "/api/health",
                    "jobs": "/api/jobs",
                    "systemPrompt": "/api/system-prompt",
                    "stats": "/api/stats",
                },
            ),
            200,
        )

    register_error_handlers(app)


def register_error_handlers(app: Flask) -> None:
    """Render every failure as a JSON ``{"error": ...}`` body."""

    @app.errorhandler(ValidationError)
    def _validation_error(exc: ValidationError):
        return jsonify(error=exc.message), exc.status_code

    @app.errorhandler(PersistenceError)
    def _persistence_error(exc: PersistenceError):
        current_app.logger.error("Persistence failure on %s: %s", exc.document or "document", exc.message)
        return jsonify(error=exc.message), exc.status_code

    # Unknown paths and unsupported methods on known paths are both unmatched routes.
    @app.errorhandler(NotFound)
    @app.errorhandler(MethodNotAllowed)
    def _not_found(exc: HTTPException):
        return jsonify(error="Endpoint not found"), 404

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        return jsonify(error=exc.description), exc.code
