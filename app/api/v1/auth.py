"""JWT login and auth dependencies (get_token_config, require_admin)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import (
    AuthError,
    HashingFailure,
    MissingCredential,
    SigningFailure,
    TokenClaims,
    TokenConfig,
    authorize_admin,
    issue_access_token,
    verify_password,
)
from app.models.user import User
from app.schemas.auth import LoginRequest, LoginResponse, UserPublic

logger = logging.getLogger(__name__)
router = APIRouter()
# Registers the Authorization header as a security scheme in OpenAPI. The raw
# value is passed through so a bare token without the Bearer scheme still works.
authorization_header = APIKeyHeader(name="Authorization", auto_error=False)

INVALID_CREDENTIALS = "User not found or password is incorrect."


def get_token_config(request: Request) -> TokenConfig:
    """Dependency: the signing configuration built once at startup."""
    return request.app.state.token_config


def _to_http_exception(e: AuthError) -> HTTPException:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(e, MissingCredential) else None
    return HTTPException(status_code=e.status_code, detail=e.message, headers=headers)


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    config: Annotated[TokenConfig, Depends(get_token_config)],
) -> LoginResponse:
    """
    Authenticate with email and password; returns a JWT access token and the account.
    Include the token in the Authorization header as: Bearer <token>
    """
    user = db.query(User).filter(User.email == body.email).first()
    if user is None:
        logger.info("Login failed", extra={"reason": "unknown_email"})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS,
        )
    try:
        matched = verify_password(body.password, user.password_hash)
    except HashingFailure as e:
        logger.error("Login failed", extra={"reason": "malformed_hash", "user_id": user.id})
        raise _to_http_exception(e) from e
    if not matched:
        logger.info("Login failed", extra={"reason": "bad_password", "user_id": user.id})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS,
        )

    try:
        token = issue_access_token(user.id, user.role, config)
    except SigningFailure as e:
        logger.error("Token issuance failed", extra={"user_id": user.id, "reason": e.message})
        raise _to_http_exception(e) from e

    logger.info("Login succeeded", extra={"user_id": user.id, "role": user.role})
    return LoginResponse(token=token, user=UserPublic.model_validate(user))


def require_admin(
    config: Annotated[TokenConfig, Depends(get_token_config)],
    authorization: Annotated[str | None, Depends(authorization_header)],
) -> TokenClaims:
    """
    Dependency: require a valid admin token. Raises 401 when no token is
    presented and 403 for a bad, expired, or non-admin token.
    """
    try:
        return authorize_admin(authorization, config)
    except AuthError as e:
        logger.info(
            "Admin gate denied request",
            extra={"reason": type(e).__name__, "status_code": e.status_code},
        )
        raise _to_http_exception(e) from e
