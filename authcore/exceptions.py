"""Custom exceptions for authcore.

Each exception maps to one HTTP status in main.py's error handlers.
"""


class AuthCoreError(Exception):
    """Base exception for all authcore errors."""

    status_code = 500

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(AuthCoreError):
    """Request body is malformed or missing required fields."""

    status_code = 400


class AuthenticationError(AuthCoreError):
    """Credentials did not match."""

    status_code = 401


class ResourceNotFound(AuthCoreError):
    """Requested account does not exist."""

    status_code = 404


class ConflictError(AuthCoreError):
    """Account already exists."""

    status_code = 409


class DatabaseError(AuthCoreError):
    """Storage read or write failed."""

    status_code = 500


class HashingError(AuthCoreError):
    """Password could not be hashed."""

    status_code = 500
