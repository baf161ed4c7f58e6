"""Authentication API endpoints for authcore.

These endpoints handle account credentials and return JSON on success:
- POST /signup - Register an email and password
- POST /login - Check an email and password (no token is issued)
- POST /check-email - Report whether an account exists
- POST /reset-password - Overwrite an account's password

Error responses are plain text, produced by the handlers in main.py from the
exceptions raised here and in the service layer. The one exception is
check-email's 404, which returns JSON.
"""

import logging

from flask import Blueprint, jsonify

from ..api.validation import validate_request
from ..db import Database
from ..exceptions import AuthenticationError, ValidationError
from . import service
from .schemas import Credentials, EmailCheck, EmailExistsResponse, PasswordReset, SuccessResponse

logger = logging.getLogger(__name__)


def create_auth_blueprint(database: Database) -> Blueprint:
    """
    Build the auth blueprint bound to a storage handle.

    Args:
        database: Storage handle shared by every request; each request opens
            its own Core from it

    Returns:
        Blueprint with the four auth routes registered
    """
    auth_bp = Blueprint("auth", __name__)

    @auth_bp.route("/signup", methods=["POST"])
    @validate_request
    def signup(data: Credentials):
        """
        Register a new account.

        Example request:
        ```json
        {"email": "a@x.com", "password": "SecurePass123"}
        ```

        Example response:
        ```json
        {"success": true, "message": "Signup successful"}
        ```
        """
        if not data.email or not data.password:
            raise ValidationError("Please provide both email and password")

        with database.get_core() as core:
            service.create_user(core, data.email, data.password, database.work_factor)

        logger.info(f"User registered: {data.email}")

        return jsonify(SuccessResponse(message="Signup successful").model_dump()), 200

    @auth_bp.route("/login", methods=["POST"])
    @validate_request
    def login(data: Credentials):
        """
        Verify credentials.

        Unknown email and wrong password give the same 401 response.

        Example response:
        ```json
        {"success": true, "message": "Login successful"}
        ```
        """
        if not data.email or not data.password:
            raise ValidationError("Please provide both email and password")

        with database.get_core() as core:
            valid = service.verify_credentials(core, data.email, data.password)

        if not valid:
            logger.warning(f"Failed login attempt for email: {data.email}")
            raise AuthenticationError("Invalid email or password")

        logger.info(f"Successful login: {data.email}")

        return jsonify(SuccessResponse(message="Login successful").model_dump()), 200

    @auth_bp.route("/check-email", methods=["POST"])
    @validate_request
    def check_email(data: EmailCheck):
        """
        Report whether an account exists for email.

        Example responses:
        ```
        200 {"exists": true}
        404 {"exists": false}
        ```
        """
        if not data.email:
            raise ValidationError("Please provide an email")

        with database.get_core() as core:
            exists = service.email_exists(core, data.email)

        status = 200 if exists else 404
        return jsonify(EmailExistsResponse(exists=exists).model_dump()), status

    @auth_bp.route("/reset-password", methods=["POST"])
    @validate_request
    def reset_password(data: PasswordReset):
        """
        Replace the password of an existing account.

        Example request:
        ```json
        {"email": "a@x.com", "new_password": "NewPass456"}
        ```

        Example response:
        ```json
        {"success": true, "message": "Password reset successful"}
        ```
        """
        if not data.email or not data.new_password:
            raise ValidationError("Please provide both email and new password")

        with database.get_core() as core:
            service.reset_password(core, data.email, data.new_password, database.work_factor)

        logger.info(f"Password reset for: {data.email}")

        return jsonify(SuccessResponse(message="Password reset successful").model_dump()), 200

    return auth_bp
