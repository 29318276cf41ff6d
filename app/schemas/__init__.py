"""Pydantic request/response schemas."""

from app.schemas.auth import (
    CurrentUser,
    CurrentUserResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
)
from app.schemas.catalog import CategoryCreate, ProductCreate, ProductUpdate
from app.schemas.common import ApiResponse, InsertResult
from app.schemas.health import HealthResponse, RootStatus
from app.schemas.order import OrderCreate, OrderUpdate

__all__ = [
    "ApiResponse",
    "CategoryCreate",
    "CurrentUser",
    "CurrentUserResponse",
    "HealthResponse",
    "InsertResult",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "OrderCreate",
    "OrderUpdate",
    "ProductCreate",
    "ProductUpdate",
    "RegisterRequest",
    "RootStatus",
]
