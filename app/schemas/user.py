"""Request/response schemas for user registration."""

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.core.security import BCRYPT_MAX_BYTES

PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 72


class CreateUserRequest(BaseModel):
    """Registration payload. The role is never client-controlled."""

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="Unique email address")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
        description="Password (8-72 characters)",
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v.strip()

    @field_validator("password")
    @classmethod
    def validate_password_bytes(cls, v: str) -> str:
        # Multi-byte characters can push a short password past bcrypt's input limit.
        if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"password must be at most {BCRYPT_MAX_BYTES} bytes when UTF-8 encoded")
        return v


class CreatedResponse(BaseModel):
    """Response after a resource is created."""

    message: str
    id: int = Field(..., ge=1, description="Database ID of the created row")


class MessageResponse(BaseModel):
    message: str
