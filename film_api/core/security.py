"""Password hashing, credential policy and JWT creation/verification."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from film_api.core.config import settings
from film_api.core.errors import (
    AuthenticationError,
    InvalidTokenError,
    TokenExpiredError,
    ValidationError,
)
from film_api.schemas.auth import CurrentUser

PASSWORD_MIN_LEN = 6
USERNAME_MAX_LEN = 255

ROLE_USER = "user"
ROLE_ADMIN = "admin"
ROLES = (ROLE_USER, ROLE_ADMIN)


def normalize_username(username: str) -> str:
    """Usernames are case-insensitive and ignore surrounding whitespace."""
    return username.strip().lower()


def validate_credentials(username: str | None, password: str | None) -> tuple[str, str]:
    """
    Apply the registration policy: both fields present, password at least
    PASSWORD_MIN_LEN characters. Returns (normalized_username, password).
    """
    if not username or not username.strip() or not password or len(password) < PASSWORD_MIN_LEN:
        raise ValidationError(
            f"username and password (min {PASSWORD_MIN_LEN} characters) are required"
        )
    normalized = normalize_username(username)
    if len(normalized) > USERNAME_MAX_LEN:
        raise ValidationError(f"username must be at most {USERNAME_MAX_LEN} characters")
    return normalized, password


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; anything past it is ignored by the algorithm anyway.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    identity: CurrentUser,
    expires_delta: timedelta | None = None,
    now: datetime | None = None,
) -> str:
    """Create a JWT carrying sub (user id), username, role, iat and exp."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    issued_at = now or datetime.now(UTC)
    payload: dict[str, Any] = {
        "sub": str(identity.id),
        "username": identity.username,
        "role": identity.role,
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str | None) -> CurrentUser:
    """
    Verify signature and expiry and rebuild the session identity from the claims.

    Raises AuthenticationError when no token is given, TokenExpiredError when
    exp has passed, InvalidTokenError for anything else that fails to verify.
    """
    if not token:
        raise AuthenticationError("Token missing")
    secret = settings.JWT_SECRET.get_secret_value()
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenExpiredError("Token expired") from e
    except jwt.PyJWTError as e:
        raise InvalidTokenError("Token invalid") from e

    username = payload.get("username")
    role = payload.get("role")
    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError) as e:
        raise InvalidTokenError("Invalid token payload") from e
    if not username or role not in ROLES:
        raise InvalidTokenError("Invalid token payload")
    return CurrentUser(id=user_id, username=username, role=role)
