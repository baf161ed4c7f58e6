"""Request body validation for Flask endpoints.

The @validate_request decorator looks for a parameter annotated with a
Pydantic model, decodes the JSON body into it and passes the instance in
as that argument. Path parameters are passed through untouched.
"""

import inspect
from functools import wraps
from typing import get_type_hints

from flask import request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError

INVALID_BODY_MESSAGE = "Invalid request body"


def _find_model_param(f) -> tuple[str, type[BaseModel]] | None:
    hints = get_type_hints(f)
    for name in inspect.signature(f).parameters:
        hint = hints.get(name)
        if inspect.isclass(hint) and issubclass(hint, BaseModel):
            return name, hint
    return None


def validate_request(f):
    """
    Decorator that validates the JSON request body against a Pydantic schema.

    Raises:
        ValidationError: If the body is not valid JSON, is not a JSON object,
            or does not match the schema

    Example:
    ```python
    @bp.post("/login")
    @validate_request
    def login(data: Credentials):
        ...
    ```
    """
    model_param = _find_model_param(f)

    @wraps(f)
    def wrapper(*args, **kwargs):
        if model_param is None:
            return f(*args, **kwargs)

        name, model = model_param
        # force=True: clients do not always send a JSON content type
        payload = request.get_json(force=True, silent=True)
        if not isinstance(payload, dict):
            raise ValidationError(INVALID_BODY_MESSAGE)

        try:
            kwargs[name] = model.model_validate(payload)
        except PydanticValidationError as e:
            raise ValidationError(
                INVALID_BODY_MESSAGE,
                {"errors": e.errors(include_url=False, include_input=False)}
            ) from e

        return f(*args, **kwargs)

    return wrapper
