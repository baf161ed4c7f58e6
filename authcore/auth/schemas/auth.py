"""Request and response schemas for the auth endpoints.

Request fields are optional at the schema level so that a missing field and
an empty one produce the same "please provide" error in the handler. Values
of the wrong JSON type (e.g. a number for email) fail validation.
"""

from pydantic import BaseModel, ConfigDict, StrictStr, field_validator


class AuthRequest(BaseModel):
    """Base for all request bodies; unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore")

    @field_validator("*")
    @classmethod
    def check_utf8_encodable(cls, value):
        """Reject strings with lone surrogates (valid JSON escapes, invalid UTF-8)."""
        if isinstance(value, str):
            try:
                value.encode("utf-8")
            except UnicodeEncodeError as e:
                raise ValueError("string is not valid UTF-8") from e
        return value


class Credentials(AuthRequest):
    """Body of POST /signup and POST /login."""

    email: StrictStr | None = None
    password: StrictStr | None = None


class EmailCheck(AuthRequest):
    """Body of POST /check-email."""

    email: StrictStr | None = None


class PasswordReset(AuthRequest):
    """Body of POST /reset-password."""

    email: StrictStr | None = None
    new_password: StrictStr | None = None


class SuccessResponse(BaseModel):
    success: bool = True
    message: str


class EmailExistsResponse(BaseModel):
    exists: bool
