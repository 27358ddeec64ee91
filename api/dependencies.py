"""
API dependencies for dependency injection
"""

from typing import Annotated, Generator, Optional
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.exceptions import UnauthorizedError
from domain.models import get_db_session
from services.auth_service import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """
    Authentication gate for protected routers.

    Attached at router level so it runs before any handler body; handlers
    that need the id declare it again and FastAPI reuses the cached value.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("No token provided", code="TOKEN_MISSING")
    return decode_access_token(credentials.credentials)


DbSession = Annotated[Session, Depends(get_db)]
CurrentUserId = Annotated[str, Depends(get_current_user_id)]
