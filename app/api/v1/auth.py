"""Registration, JWT login and auth dependencies (get_current_user, require_admin)."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import Settings
from app.core.database import MongoStore, get_app_settings, get_store
from app.core.errors import ForbiddenError, UnauthorizedError
from app.repositories.users import UserRepository
from app.schemas.auth import (
    CurrentUser,
    CurrentUserResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
)
from app.services.auth import AuthService, verify_token

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_auth_service(
    store: Annotated[MongoStore, Depends(get_store)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> AuthService:
    users = UserRepository(store.collection(settings.USERS_COLLECTION))
    return AuthService(users, settings)


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> MessageResponse:
    """Create an account. 400 when the email is already registered."""
    auth.register(body.name, body.email, body.role, body.password)
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> LoginResponse:
    """
    Authenticate with email and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <token>
    """
    token = auth.login(body.email, body.password)
    return LoginResponse(token=token, access_token=token)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> CurrentUser:
    """Dependency: require valid Bearer JWT and return the current user. Raises 401 if missing or invalid."""
    if credentials is None:
        raise UnauthorizedError("Not authenticated")
    return verify_token(credentials.credentials, settings)


def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require authenticated user with role 'admin'. Raises 403 for non-admin."""
    if current_user.role != "admin":
        raise ForbiddenError("Admin access required")
    return current_user


def require_writer(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> CurrentUser | None:
    """Dependency for order writes: a valid token unless PROTECT_WRITES is off."""
    if not settings.PROTECT_WRITES:
        return None
    return get_current_user(credentials, settings)


def require_catalog_writer(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> CurrentUser | None:
    """Dependency for product/category writes; admin role when ADMIN_ONLY_CATALOG_WRITES is on."""
    if settings.ADMIN_ONLY_CATALOG_WRITES:
        return require_admin(get_current_user(credentials, settings))
    return require_writer(credentials, settings)


@router.get("/me", response_model=CurrentUserResponse)
def read_me(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUserResponse:
    """Return the identity carried by the bearer token."""
    return CurrentUserResponse(data=current_user)
