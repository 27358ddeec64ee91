"""Registration, login and current-user routes"""

from fastapi import APIRouter, BackgroundTasks, Depends, status

from api.dependencies import CurrentUserId, DbSession, get_current_user_id
from domain.mappers import UserMapper
from domain.schemas import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UserResponse,
)
from services.auth_service import AuthService
from services.notification_service import NotificationService

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, background_tasks: BackgroundTasks, db: DbSession):
    """Create an account, send the welcome email and return a token."""
    user, token = AuthService.register(db, payload.email, payload.password)
    background_tasks.add_task(NotificationService.send_welcome, user.email)
    return UserMapper.to_auth_response(user, token)


@router.post("/login", response_model=AuthResponse)
def login(payload: LoginRequest, db: DbSession):
    user, token = AuthService.login(db, payload.email, payload.password)
    return UserMapper.to_auth_response(user, token)


@router.get("/profile", response_model=UserResponse)
def get_profile(user_id: CurrentUserId, db: DbSession):
    return UserMapper.to_response(AuthService.get_profile(db, user_id))


@router.post(
    "/logout",
    response_model=MessageResponse,
    dependencies=[Depends(get_current_user_id)],
)
def logout():
    """Tokens are stateless; the client discards its copy."""
    return MessageResponse(message="Logged out successfully")
