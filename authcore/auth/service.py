"""Authentication service: password hashing and account operations.

Functions here work on a database Core and raise authcore exceptions; the
HTTP layer in api.py only translates their results into responses.

sqlite3 errors are converted to DatabaseError at this boundary, except in
verify_credentials, where any lookup failure counts as a failed login.
"""

import logging
import sqlite3

import bcrypt

from ..db import Core
from ..exceptions import ConflictError, DatabaseError, HashingError, ResourceNotFound

logger = logging.getLogger(__name__)

# bcrypt ignores everything past this many bytes of input
BCRYPT_MAX_PASSWORD_BYTES = 72


# ============================================================================
# Password Hashing
# ============================================================================


def hash_password(password: str, work_factor: int = 10) -> str:
    """
    Hash a password with bcrypt and a fresh salt.

    Args:
        password: Plain text password
        work_factor: bcrypt cost (log2 rounds), 4-31

    Returns:
        60-character bcrypt hash string

    Raises:
        HashingError: If the password is longer than bcrypt can consume,
            or bcrypt rejects the input
    """
    try:
        password_bytes = password.encode("utf-8")
    except UnicodeEncodeError as e:
        raise HashingError("Failed to hash password", {"reason": "password is not valid UTF-8"}) from e

    if len(password_bytes) > BCRYPT_MAX_PASSWORD_BYTES:
        raise HashingError(
            "Failed to hash password",
            {"reason": f"password exceeds {BCRYPT_MAX_PASSWORD_BYTES} bytes"}
        )

    try:
        hashed = bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=work_factor))
    except ValueError as e:
        raise HashingError("Failed to hash password", {"reason": str(e)}) from e

    return hashed.decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """
    Check a password against a stored bcrypt hash in constant time.

    Returns False instead of raising when the stored hash is malformed.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False


# ============================================================================
# Account Operations
# ============================================================================


def create_user(core: Core, email: str, password: str, work_factor: int = 10) -> None:
    """
    Register a new account.

    Raises:
        ConflictError: If email is already registered (including a concurrent
            signup that won the insert race)
        HashingError: If the password cannot be hashed
        DatabaseError: If the lookup or insert fails
    """
    try:
        count = core.user.count_by_email(email)
    except sqlite3.Error as e:
        logger.error(f"Existence check failed for signup: {e}")
        raise DatabaseError("Database error") from e

    if count > 0:
        raise ConflictError("Email already registered", {"email": email})

    password_hash = hash_password(password, work_factor)

    try:
        core.user.create(email, password_hash)
        core.commit()
    except sqlite3.IntegrityError as e:
        logger.warning(f"Signup lost insert race for {email}")
        raise ConflictError("Email already registered", {"email": email}) from e
    except sqlite3.Error as e:
        logger.error(f"Failed to save user {email}: {e}")
        raise DatabaseError("Failed to save user") from e


def verify_credentials(core: Core, email: str, password: str) -> bool:
    """
    Verify email and password.

    A missing account, a wrong password, and a failed lookup all return
    False so callers cannot tell them apart.
    """
    try:
        stored_hash = core.user.get_password_hash(email)
    except sqlite3.Error as e:
        logger.error(f"Credential lookup failed: {e}")
        return False

    if stored_hash is None:
        return False

    return verify_password(password, stored_hash)


def email_exists(core: Core, email: str) -> bool:
    """
    Raises:
        DatabaseError: If the lookup fails
    """
    try:
        return core.user.exists(email)
    except sqlite3.Error as e:
        logger.error(f"Email lookup failed: {e}")
        raise DatabaseError("Database error") from e


def reset_password(core: Core, email: str, new_password: str, work_factor: int = 10) -> None:
    """
    Overwrite the password of an existing account.

    No proof of identity is required; anyone who knows the email can reset it.

    Raises:
        ResourceNotFound: If email is not registered
        HashingError: If the new password cannot be hashed
        DatabaseError: If the lookup or update fails
    """
    if not email_exists(core, email):
        raise ResourceNotFound("Email not found", {"email": email})

    password_hash = hash_password(new_password, work_factor)

    try:
        updated = core.user.update_password_hash(email, password_hash)
        core.commit()
    except sqlite3.Error as e:
        logger.error(f"Failed to update password for {email}: {e}")
        raise DatabaseError("Database error") from e

    if not updated:
        raise ResourceNotFound("Email not found", {"email": email})
