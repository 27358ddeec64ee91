"""
Credential and token handling.

Passwords are stored as salted pbkdf2_sha256 hashes (passlib). Bearer tokens
are HS256 JWTs carrying the user id in ``sub`` and expiring after
``settings.token_ttl_days``.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple
import logging

from jose import jwt, JWTError, ExpiredSignatureError
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import NotFoundError, ServiceValidationError, UnauthorizedError
from domain.models import User
from repositories import UserRepository

logger = logging.getLogger("nutritrack.auth")

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return pwd_context.verify(password, password_hash)
    except (ValueError, TypeError):
        # Unrecognised or corrupt hash: treat as a failed match
        logger.warning("password_hash_unreadable")
        return False


def create_access_token(user_id: str, now: Optional[datetime] = None) -> str:
    """Issue a signed token for user_id valid for token_ttl_days."""
    issued = now or datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "iat": issued,
        "exp": issued + timedelta(days=settings.token_ttl_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> str:
    """
    Verify signature and expiry, returning the embedded user id.

    Raises:
        UnauthorizedError: for any malformed, expired or forged token
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except ExpiredSignatureError:
        raise UnauthorizedError("Token expired", code="TOKEN_EXPIRED")
    except JWTError:
        raise UnauthorizedError("Invalid token", code="INVALID_TOKEN")

    user_id = payload.get("sub")
    if not user_id or not isinstance(user_id, str):
        raise UnauthorizedError("Invalid token", code="INVALID_TOKEN")
    return user_id


class AuthService:
    """Business logic for registration, login and the current profile"""

    @staticmethod
    def register(db: Session, email: str, password: str) -> Tuple[User, str]:
        """Create an account and return it with a fresh token."""
        user_repo = UserRepository(db)
        if user_repo.get_by_email(email):
            logger.warning(f"register_duplicate email={email}")
            raise ServiceValidationError("User already exists", code="USER_EXISTS")

        user = user_repo.create_user(email, hash_password(password))
        logger.info(f"user_registered user_id={user.id}")
        return user, create_access_token(user.id)

    @staticmethod
    def login(db: Session, email: str, password: str) -> Tuple[User, str]:
        """
        Check credentials and return the user with a fresh token.

        Unknown email and wrong password produce the same error.
        """
        user = UserRepository(db).get_by_email(email)
        if not user or not verify_password(password, user.password):
            logger.info(f"login_failed email={email}")
            raise UnauthorizedError("Invalid credentials", code="INVALID_CREDENTIALS")

        logger.info(f"login_succeeded user_id={user.id}")
        return user, create_access_token(user.id)

    @staticmethod
    def get_profile(db: Session, user_id: str) -> User:
        user = UserRepository(db).get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user
