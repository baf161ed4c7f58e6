"""Tests for the @validate_request decorator."""

import pytest
from flask import Blueprint, Flask, jsonify
from pydantic import BaseModel, StrictStr

from authcore.api.validation import validate_request
from authcore.exceptions import AuthCoreError
from authcore.main import handle_auth_core_error


class MockRequest(BaseModel):
    """Test schema for request body validation."""
    name: StrictStr
    note: StrictStr | None = None


test_validation_bp = Blueprint("validation_test_routes", __name__)


@test_validation_bp.post("/test/body")
@validate_request
def route_body(data: MockRequest):
    return jsonify({"name": data.name, "note": data.note}), 200


@test_validation_bp.post("/test/path/<item_id>")
@validate_request
def route_path_and_body(item_id: str, data: MockRequest):
    return jsonify({"item_id": item_id, "name": data.name}), 200


@test_validation_bp.post("/test/no-body")
@validate_request
def route_no_body():
    return jsonify({"status": "ok"}), 200


@pytest.fixture
def validation_client():
    """Create test client with validation test routes."""
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.register_error_handler(AuthCoreError, handle_auth_core_error)
    app.register_blueprint(test_validation_bp)
    with app.test_client() as client:
        yield client


def test_valid_body_is_passed_as_model(validation_client):
    """Valid body should reach the view as a model instance."""
    response = validation_client.post("/test/body", json={"name": "x"})
    assert response.status_code == 200
    assert response.get_json() == {"name": "x", "note": None}


def test_path_parameter_and_body(validation_client):
    """Path parameters should pass through next to the body."""
    response = validation_client.post("/test/path/42", json={"name": "x"})
    assert response.status_code == 200
    assert response.get_json() == {"item_id": "42", "name": "x"}


def test_route_without_model_skips_body(validation_client):
    """Routes without a model parameter should not parse the body."""
    response = validation_client.post("/test/no-body", data="not json")
    assert response.status_code == 200


def test_schema_mismatch_returns_400(validation_client):
    """Missing required field should return 400."""
    response = validation_client.post("/test/body", json={"note": "missing name"})
    assert response.status_code == 400
    assert response.get_data(as_text=True) == "Invalid request body"


def test_invalid_json_returns_400(validation_client):
    """Unparsable JSON should return 400."""
    response = validation_client.post(
        "/test/body", data="{broken", content_type="application/json"
    )
    assert response.status_code == 400


def test_empty_body_returns_400(validation_client):
    """Empty body should return 400."""
    response = validation_client.post("/test/body")
    assert response.status_code == 400


@pytest.mark.parametrize("payload", ["null", "42", '"text"', "[]"])
def test_non_object_json_returns_400(validation_client, payload):
    """JSON that is not an object should return 400."""
    response = validation_client.post(
        "/test/body", data=payload, content_type="application/json"
    )
    assert response.status_code == 400
