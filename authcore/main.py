"""Flask application entry point."""

import logging
import sqlite3
import sys

from flask import Flask, Response, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException, MethodNotAllowed

from .auth.api import create_auth_blueprint
from .config import Settings, settings
from .db import Database
from .exceptions import AuthCoreError

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def plain_text(message: str, status: int) -> Response:
    """Build a text/plain error response."""
    return Response(message, status=status, mimetype="text/plain")


# Error handlers
def handle_auth_core_error(error: AuthCoreError):
    """Handle authcore exceptions using the status carried by the class."""
    if error.status_code >= 500:
        logger.error(f"{error.__class__.__name__}: {error.message} {error.details}")
    return plain_text(error.message, error.status_code)


def handle_method_not_allowed(error: MethodNotAllowed):
    """Handle requests with a method other than the route accepts."""
    return plain_text("Invalid request method", 405)


def handle_http_exception(error: HTTPException):
    """Handle remaining HTTP errors (e.g. unknown routes) as plain text."""
    return plain_text(error.description or error.name, error.code or 500)


def handle_database_error(error: sqlite3.Error):
    """Handle storage errors that escaped the service layer (e.g. on commit)."""
    logger.error(f"Database error: {error}")
    return plain_text("Database error", 500)


def handle_internal_error(error: Exception):
    """Handle internal server errors."""
    logger.exception(f"Internal error: {error}")
    return plain_text("Internal server error", 500)


def initialize_database(database: Database) -> None:
    """Create the schema if missing and check the database answers."""
    try:
        database.init_db()
        database.ping()
        logger.info(f"Database initialized successfully: {database.database_path}")
    except (sqlite3.Error, OSError) as e:
        logger.error(f"Database initialization failed: {e}")
        raise


def create_app(app_settings: Settings | None = None, database: Database | None = None) -> Flask:
    """
    Create the Flask application.

    Args:
        app_settings: Settings to use (defaults to the environment-loaded settings)
        database: Storage handle to bind the handlers to (defaults to one
            built from app_settings)

    Returns:
        Configured Flask application

    Raises:
        sqlite3.Error, OSError: If the database cannot be initialized
    """
    app_settings = app_settings or settings
    if database is None:
        database = Database(app_settings.database_path, app_settings.bcrypt_work_factor)

    initialize_database(database)

    app = Flask(__name__)

    # CORS configuration
    CORS(app, origins=app_settings.cors_origins)

    app.register_error_handler(AuthCoreError, handle_auth_core_error)
    app.register_error_handler(MethodNotAllowed, handle_method_not_allowed)
    app.register_error_handler(HTTPException, handle_http_exception)
    app.register_error_handler(sqlite3.Error, handle_database_error)
    app.register_error_handler(Exception, handle_internal_error)

    # Health check endpoint
    @app.route("/health")
    def health():
        """Health check endpoint."""
        database.ping()
        return jsonify({"status": "ok"})

    app.register_blueprint(create_auth_blueprint(database))

    return app


def main() -> None:
    """Run the development server; exit if the database is unreachable."""
    database = Database(settings.database_path, settings.bcrypt_work_factor)
    try:
        app = create_app(settings, database)
    except (sqlite3.Error, OSError) as e:
        logger.critical(f"Cannot connect to database: {e}")
        sys.exit(1)

    logger.info(f"authcore running on http://{settings.host}:{settings.port}")
    app.run(host=settings.host, port=settings.port, threaded=True)


if __name__ == "__main__":
    main()
