"""Pydantic request/response schemas."""

from app.schemas.auth import LoginRequest, LoginResponse, UserPublic
from app.schemas.health import HealthResponse
from app.schemas.product import ProductIn, ProductOut
from app.schemas.user import CreatedResponse, CreateUserRequest, MessageResponse

__all__ = [
    "CreateUserRequest",
    "CreatedResponse",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "ProductIn",
    "ProductOut",
    "UserPublic",
]
