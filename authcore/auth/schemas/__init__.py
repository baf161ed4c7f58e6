"""Authentication Pydantic schemas for API validation."""

from .auth import (
    AuthRequest,
    Credentials,
    EmailCheck,
    EmailExistsResponse,
    PasswordReset,
    SuccessResponse,
)

__all__ = [
    "AuthRequest",
    "Credentials",
    "EmailCheck",
    "EmailExistsResponse",
    "PasswordReset",
    "SuccessResponse",
]
