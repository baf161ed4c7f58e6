"""Authentication module for authcore.

This module provides credential handling:
- Schema validation for request bodies
- Password hashing and verification (bcrypt)
- Account creation, lookup and password reset

Auth endpoints (top-level routes):
- POST /signup - Register an account
- POST /login - Verify credentials
- POST /check-email - Report whether an account exists
- POST /reset-password - Overwrite an account's password
"""

from . import schemas, service

__all__ = ["schemas", "service"]
