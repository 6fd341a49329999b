"""Request/response schemas for login."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: EmailStr = Field(..., description="Registered email address")
    password: str = Field(..., min_length=1, max_length=128, description="Password")


class UserPublic(BaseModel):
    """Account fields safe to return to clients (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: str
    created_at: datetime | None = None


class LoginResponse(BaseModel):
    """Signed access token plus the logged-in account."""

    token: str = Field(..., description="JWT access token; send as 'Authorization: Bearer <token>'")
    user: UserPublic
