"""Shared column helpers for the ORM models."""

import uuid


def new_id() -> str:
    """Opaque string identifier for new rows."""
    return str(uuid.uuid4())
