"""
Error envelope and cross-cutting behaviour.

Covers:
- Every error response carries success/message/error/timestamp
- Request validation maps to 400 with field details
- Unknown routes use the HTTP handler
- Unexpected exceptions become a generic 500
- Request id and timing headers on every response
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from test_fixtures import API, client, make_meal_payload, user, auth_headers
from app.exceptions import AppError, NotFoundError, ServiceValidationError, UnauthorizedError
from main import app


def _assert_envelope(body: dict, code: str):
    assert body["success"] is False
    assert body["message"] == body["error"]["message"]
    assert body["error"]["code"] == code
    assert body["timestamp"]


def test_validation_error_envelope(auth_headers):
    payload = make_meal_payload()
    del payload["calories"]

    response = client.post(f"{API}/meals", json=payload, headers=auth_headers)

    assert response.status_code == 400
    body = response.json()
    _assert_envelope(body, "VALIDATION_ERROR")
    assert body["message"] == "calories: Field required"
    assert body["error"]["details"][0]["loc"] == ["body", "calories"]


def test_malformed_json_is_400(auth_headers):
    response = client.post(
        f"{API}/meals",
        content=b"{not json",
        headers={**auth_headers, "Content-Type": "application/json"},
    )
    assert response.status_code == 400


def test_unauthorized_envelope():
    response = client.get(f"{API}/recipes")

    assert response.status_code == 401
    _assert_envelope(response.json(), "TOKEN_MISSING")


def test_not_found_envelope(auth_headers):
    response = client.get(f"{API}/recipes/nope", headers=auth_headers)

    assert response.status_code == 404
    _assert_envelope(response.json(), "NOT_FOUND")


def test_unknown_route_is_404_envelope():
    response = client.get(f"{API}/does-not-exist")

    assert response.status_code == 404
    _assert_envelope(response.json(), "HTTP_404")


def test_unexpected_error_is_generic_500(auth_headers):
    safe_client = TestClient(app, raise_server_exceptions=False)
    with patch(
        "services.recipe_service.RecipeRepository.list_for_user",
        side_effect=RuntimeError("database on fire"),
    ):
        response = safe_client.get(f"{API}/recipes", headers=auth_headers)

    assert response.status_code == 500
    body = response.json()
    _assert_envelope(body, "INTERNAL_SERVER_ERROR")
    assert "fire" not in body["message"]


def test_request_id_and_timing_headers():
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "OK"}
    assert response.headers["X-Request-ID"]
    float(response.headers["X-Process-Time"])


# =============================================================================
# EXCEPTION TAXONOMY
# =============================================================================


@pytest.mark.parametrize(
    "exc_class, status, code",
    [
        (ServiceValidationError, 400, "SERVICE_VALIDATION_ERROR"),
        (UnauthorizedError, 401, "UNAUTHORIZED"),
        (NotFoundError, 404, "NOT_FOUND"),
    ],
)
def test_exception_defaults(exc_class, status, code):
    exc = exc_class()

    assert isinstance(exc, AppError)
    assert exc.http_status == status
    assert exc.code == code
    assert exc.to_dict() == {"code": code, "message": exc_class.default_message}


def test_exception_details_are_copied():
    exc = ServiceValidationError("Bad", details={"field": "x"}, code="BAD_FIELD")

    assert str(exc) == "Bad"
    assert exc.to_dict() == {"code": "BAD_FIELD", "message": "Bad", "details": {"field": "x"}}
