"""Password hashing, JWT issuance, and the admin gate for protected endpoints."""

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt
from pydantic import BaseModel, ConfigDict, SecretStr, ValidationError

from app.core.config import HMAC_ALGORITHMS

if TYPE_CHECKING:
    from app.core.config import Settings

# Bcrypt cost (rounds); 10 matches the cost of hashes already stored by the storefront.
BCRYPT_ROUNDS = 10
# bcrypt only reads this many bytes of input.
BCRYPT_MAX_BYTES = 72

ADMIN_ROLE = "admin"
BEARER_SCHEME = "bearer"


class AuthError(Exception):
    """Base for auth failures; carries the HTTP status and a client-safe message."""

    status_code: int = 500

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class HashingFailure(AuthError):
    """bcrypt could not hash, or the stored hash is malformed."""

    status_code = 500


class SigningFailure(AuthError):
    """Token could not be signed (empty secret or PyJWT error)."""

    status_code = 500


class MissingCredential(AuthError):
    status_code = 401


class UnexpectedAlgorithm(AuthError):
    status_code = 403


class InvalidOrExpiredToken(AuthError):
    status_code = 403


class InsufficientRole(AuthError):
    status_code = 403


class TokenConfig(BaseModel):
    """Signing parameters, built once at startup and injected where tokens are issued or checked."""

    model_config = ConfigDict(frozen=True)

    secret: SecretStr
    algorithm: str = "HS256"
    ttl: timedelta = timedelta(hours=24)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "TokenConfig":
        return cls(
            secret=settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            ttl=timedelta(hours=settings.JWT_EXPIRE_HOURS),
        )

    @property
    def has_secret(self) -> bool:
        return bool(self.secret.get_secret_value())


class TokenClaims(BaseModel):
    """Claims carried by an access token."""

    # Strict: a bool or numeric string must not pass as user_id or exp.
    model_config = ConfigDict(strict=True)

    user_id: int
    role: str
    exp: int

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")
    if len(pw_bytes) > BCRYPT_MAX_BYTES:
        raise HashingFailure(f"Password exceeds {BCRYPT_MAX_BYTES} bytes.")
    try:
        return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")
    except (ValueError, TypeError) as e:
        raise HashingFailure("Failed to hash password.", cause=e) from e


def verify_password(plain_password: str, hashed: str) -> bool:
    """
    Verify a plain password against a stored hash.

    Returns False on mismatch. Raises HashingFailure only when the stored hash
    cannot be parsed.
    """
    pw_bytes = plain_password.encode("utf-8")
    if len(pw_bytes) > BCRYPT_MAX_BYTES:
        # hash_password never accepts such input, so nothing stored can match it.
        return False
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError) as e:
        raise HashingFailure("Stored password hash is malformed.", cause=e) from e


def issue_access_token(
    user_id: int,
    role: str,
    config: TokenConfig,
    now: datetime | None = None,
) -> str:
    """Create a signed JWT with user_id, role, and exp (unix seconds)."""
    if not config.has_secret:
        raise SigningFailure("Token signing secret is not configured.")
    issued_at = now or datetime.now(UTC)
    payload: dict[str, Any] = {
        "user_id": user_id,
        "role": role,
        "exp": int((issued_at + config.ttl).timestamp()),
    }
    try:
        return jwt.encode(
            payload,
            config.secret.get_secret_value(),
            algorithm=config.algorithm,
        )
    except (jwt.PyJWTError, TypeError, ValueError) as e:
        raise SigningFailure("Failed to sign access token.", cause=e) from e


def _strip_bearer(authorization: str | None) -> str:
    value = (authorization or "").strip()
    scheme, _, rest = value.partition(" ")
    if scheme.lower() == BEARER_SCHEME:
        return rest.strip()
    return value


def decode_access_token(
    token: str,
    config: TokenConfig,
    now: datetime | None = None,
) -> TokenClaims:
    """
    Validate algorithm, signature and expiry; return typed claims.

    Raises UnexpectedAlgorithm, InvalidOrExpiredToken, or InsufficientRole
    (claims present but malformed).
    """
    try:
        header = jwt.get_unverified_header(token)
    except jwt.PyJWTError as e:
        raise InvalidOrExpiredToken("Invalid or expired token", cause=e) from e

    algorithm = header.get("alg")
    if algorithm not in HMAC_ALGORITHMS:
        raise UnexpectedAlgorithm(f"Unexpected signing method: {algorithm}")

    if not config.has_secret:
        raise InvalidOrExpiredToken("Invalid or expired token")
    try:
        # Expiry is checked below against the caller's clock.
        payload = jwt.decode(
            token,
            config.secret.get_secret_value(),
            algorithms=[algorithm],
            options={"verify_exp": False, "require": ["exp"]},
        )
    except jwt.PyJWTError as e:
        raise InvalidOrExpiredToken("Invalid or expired token", cause=e) from e

    try:
        claims = TokenClaims.model_validate(payload)
    except ValidationError as e:
        raise InsufficientRole("Malformed token claims", cause=e) from e

    current = now or datetime.now(UTC)
    if claims.exp <= int(current.timestamp()):
        raise InvalidOrExpiredToken("Invalid or expired token")
    return claims


def authorize_admin(
    authorization: str | None,
    config: TokenConfig,
    now: datetime | None = None,
) -> TokenClaims:
    """
    Admin gate: accept an Authorization header value and return the caller's
    claims when the token is valid and carries the admin role.

    Raises MissingCredential before any parsing when no token is presented.
    """
    token = _strip_bearer(authorization)
    if not token:
        raise MissingCredential("Authorization token is missing from the request")

    claims = decode_access_token(token, config, now=now)
    if not claims.is_admin:
        raise InsufficientRole("Admin access required")
    return claims
