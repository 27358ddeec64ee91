"""
Pytest configuration and shared fixtures.

The environment is pinned before any application module is imported so the
settings object sees an in-memory SQLite database, a throwaway upload
directory and no SMTP credentials.
"""

import os
import sys
import tempfile
from pathlib import Path

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"
os.environ["JWT_SECRET"] = "test-secret-not-for-production"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="nutritrack-uploads-")
os.environ["MAX_UPLOAD_MB"] = "1"
os.environ["LOG_LEVEL"] = "WARNING"
for key in ("MAIL_USERNAME", "MAIL_PASSWORD"):
    os.environ.pop(key, None)

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
# Let test modules import the shared helpers by module name
tests_dir = Path(__file__).parent
if str(tests_dir) not in sys.path:
    sys.path.insert(0, str(tests_dir))

import pytest

from domain.models import Base, engine


@pytest.fixture(autouse=True)
def reset_database():
    """Every test starts from empty tables"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
