"""
Shared test fixtures and utilities for the NutriTrack test suite.

Holds the TestClient, a direct database session, a mail outbox that replaces
SMTP delivery, and helpers that register users and build request bodies.
"""

import uuid
from typing import Generator, List

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from adapters import mail_adapter
from domain.models import SessionLocal
from main import app

client = TestClient(app)

API = "/api"
DEFAULT_PASSWORD = "s3cret-pass"


# Helper function to generate unique emails
def unique_email(prefix: str = "test") -> str:
    """Generate unique email address using UUID to avoid conflicts"""
    return f"{prefix}-{uuid.uuid4().hex[:8]}@example.com"


def register_user(email: str = None, password: str = DEFAULT_PASSWORD) -> dict:
    """
    Register through the API and return the parsed body plus auth headers.

    Example:
        >>> ana = register_user()
        >>> client.get("/api/auth/profile", headers=ana["headers"])
    """
    email = email or unique_email("ana")
    response = client.post(f"{API}/auth/register", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    body = response.json()
    return {
        "token": body["token"],
        "user": body["user"],
        "email": email,
        "password": password,
        "headers": {"Authorization": f"Bearer {body['token']}"},
    }


def make_meal_payload(**overrides) -> dict:
    """Realistic meal body; 450 kcal oatmeal breakfast by default"""
    payload = {
        "name": "Oatmeal with berries",
        "category": "Breakfast",
        "calories": 450,
        "date": "2024-03-01",
        "time": "08:00",
        "notes": "Added a spoon of honey",
    }
    payload.update(overrides)
    return payload


def make_recipe_payload(**overrides) -> dict:
    payload = {
        "name": "Chickpea curry",
        "ingredients": ["chickpeas", "coconut milk", "curry paste"],
        "instructions": "Simmer everything for 20 minutes.",
        "caloriesPerServing": 520,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def user() -> dict:
    return register_user()


@pytest.fixture
def other_user() -> dict:
    return register_user(unique_email("bruno"))


@pytest.fixture
def auth_headers(user) -> dict:
    return user["headers"]


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """Direct session on the test database for repository and service tests"""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


class Outbox:
    """Captured emails in place of SMTP delivery"""

    def __init__(self):
        self.messages: List[dict] = []
        self.fail = False

    def send(self, to, subject, html, text=None):
        if self.fail:
            raise ConnectionRefusedError("SMTP server unavailable")
        self.messages.append({"to": to, "subject": subject, "html": html})
        return True

    def subjects_for(self, to: str) -> List[str]:
        return [m["subject"] for m in self.messages if m["to"] == to]


@pytest.fixture
def outbox(monkeypatch) -> Outbox:
    box = Outbox()
    monkeypatch.setattr(mail_adapter, "send_mail", box.send)
    return box
