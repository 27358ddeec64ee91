"""
Tests for registration, login, token verification and logout.

Covers:
- Registration returns a token and the public user fields
- Duplicate and malformed registrations are rejected with 400
- Login with wrong credentials is always 401
- Protected routes reject missing, malformed, forged and expired tokens
- Password hashes never appear in responses
"""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.security import HTTPAuthorizationCredentials
from jose import jwt

from test_fixtures import API, client, register_user, unique_email, user, auth_headers
from app.config import settings
from services.auth_service import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from api.dependencies import get_current_user_id
from app.exceptions import UnauthorizedError


# =============================================================================
# REGISTRATION
# =============================================================================


def test_register_returns_token_and_defaults():
    """
    Verifies:
    - 201 with token and user
    - Defaults for calorie goal and diet type
    - camelCase keys and no password field
    """
    email = unique_email("carla")
    response = client.post(f"{API}/auth/register", json={"email": email, "password": "pw123456"})

    assert response.status_code == 201
    body = response.json()
    assert body["token"]
    assert body["user"]["email"] == email
    assert body["user"]["dailyCalorieGoal"] == 2000
    assert body["user"]["dietType"] == "balanced"
    assert "password" not in body["user"]


def test_register_normalizes_email_case():
    response = client.post(
        f"{API}/auth/register", json={"email": "  Mixed.Case@Example.COM ", "password": "pw"}
    )
    assert response.status_code == 201
    assert response.json()["user"]["email"] == "mixed.case@example.com"


def test_register_duplicate_email_rejected(user):
    response = client.post(
        f"{API}/auth/register", json={"email": user["email"], "password": "another"}
    )

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "User already exists"
    assert body["error"]["code"] == "USER_EXISTS"


@pytest.mark.parametrize(
    "payload",
    [
        {"password": "pw123456"},
        {"email": unique_email()},
        {"email": "not-an-email", "password": "pw123456"},
        {"email": unique_email(), "password": ""},
    ],
)
def test_register_missing_or_invalid_fields(payload):
    response = client.post(f"{API}/auth/register", json=payload)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


# =============================================================================
# LOGIN
# =============================================================================


def test_login_success_returns_new_token(user):
    response = client.post(
        f"{API}/auth/login", json={"email": user["email"], "password": user["password"]}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["user"]["id"] == user["user"]["id"]
    assert decode_access_token(body["token"]) == user["user"]["id"]


def test_login_wrong_password_is_always_401(user):
    """Repeated failures do not change the outcome (no lockout)."""
    for _ in range(3):
        response = client.post(
            f"{API}/auth/login", json={"email": user["email"], "password": "wrong"}
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"


def test_login_unknown_email_matches_wrong_password():
    response = client.post(
        f"{API}/auth/login", json={"email": unique_email("ghost"), "password": "whatever"}
    )

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"


def test_login_malformed_email_is_401():
    response = client.post(
        f"{API}/auth/login", json={"email": "not-an-email", "password": "whatever"}
    )

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"


def test_login_missing_password_is_400(user):
    response = client.post(f"{API}/auth/login", json={"email": user["email"]})
    assert response.status_code == 400


# =============================================================================
# TOKEN GATE
# =============================================================================


def test_profile_with_token(user, auth_headers):
    response = client.get(f"{API}/auth/profile", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == user["user"]


def test_profile_without_token():
    response = client.get(f"{API}/auth/profile")

    assert response.status_code == 401
    assert response.json()["message"] == "No token provided"


@pytest.mark.parametrize(
    "header",
    ["Bearer not-a-jwt", "Token abc", "Bearer a.b.c"],
)
def test_profile_with_malformed_token(header):
    response = client.get(f"{API}/auth/profile", headers={"Authorization": header})
    assert response.status_code == 401


def test_token_signed_with_other_secret_rejected(user):
    forged = jwt.encode(
        {
            "sub": user["user"]["id"],
            "exp": datetime.now(timezone.utc) + timedelta(days=1),
        },
        "some-other-secret",
        algorithm="HS256",
    )
    response = client.get(f"{API}/auth/profile", headers={"Authorization": f"Bearer {forged}"})

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token"


def test_expired_token_rejected(user):
    issued = datetime.now(timezone.utc) - timedelta(days=settings.token_ttl_days + 1)
    token = create_access_token(user["user"]["id"], now=issued)

    response = client.get(f"{API}/auth/profile", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["message"] == "Token expired"


def test_token_without_subject_rejected():
    token = jwt.encode(
        {"exp": datetime.now(timezone.utc) + timedelta(days=1)},
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )
    with pytest.raises(UnauthorizedError):
        decode_access_token(token)


def test_gate_resolves_user_id_from_bearer_credentials():
    token = create_access_token("user-123")
    credentials = HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)

    assert get_current_user_id(credentials) == "user-123"
    with pytest.raises(UnauthorizedError, match="No token provided"):
        get_current_user_id(None)


def test_profile_for_vanished_user_is_404():
    token = create_access_token("00000000-0000-0000-0000-000000000000")
    response = client.get(f"{API}/auth/profile", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 404
    assert response.json()["message"] == "User not found"


def test_logout_requires_token_and_returns_message(auth_headers):
    assert client.post(f"{API}/auth/logout").status_code == 401

    response = client.post(f"{API}/auth/logout", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Logged out successfully"}


def test_logout_is_stateless(auth_headers):
    """The token keeps working after logout; the client discards it."""
    client.post(f"{API}/auth/logout", headers=auth_headers)
    assert client.get(f"{API}/auth/profile", headers=auth_headers).status_code == 200


# =============================================================================
# PASSWORD HASHING
# =============================================================================


def test_password_hash_roundtrip_and_salted():
    first = hash_password("correct horse")
    second = hash_password("correct horse")

    assert first != second
    assert first != "correct horse"
    assert verify_password("correct horse", first)
    assert not verify_password("wrong horse", first)


def test_verify_password_with_garbage_hash_is_false():
    assert verify_password("anything", "not-a-hash") is False
