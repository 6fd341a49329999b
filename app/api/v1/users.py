"""User registration endpoint."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import HashingFailure, hash_password
from app.models.user import User
from app.schemas.user import CreatedResponse, CreateUserRequest

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    body: CreateUserRequest,
    db: Annotated[Session, Depends(get_db)],
) -> CreatedResponse:
    """Register a new account with the default role. Email addresses are unique."""
    try:
        password_hash = hash_password(body.password)
    except HashingFailure as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e

    user = User(name=body.name, email=body.email, password_hash=password_hash)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="This email address is already in use.",
        ) from e
    db.refresh(user)

    logger.info("User registered", extra={"user_id": user.id})
    return CreatedResponse(message="User registered successfully.", id=user.id)
