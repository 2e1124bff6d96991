"""User registration and credential checks against the users table."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from film_api.core.errors import AuthenticationError, ConflictError, ValidationError
from film_api.core.security import (
    ROLE_USER,
    ROLES,
    create_access_token,
    hash_password,
    normalize_username,
    validate_credentials,
    verify_password,
)
from film_api.models import User
from film_api.schemas.auth import CurrentUser

logger = logging.getLogger(__name__)

# Same message for unknown username and wrong password so accounts cannot be enumerated.
INVALID_CREDENTIALS = "Invalid credentials"


def register_user(
    db: Session,
    username: str | None,
    password: str | None,
    role: str = ROLE_USER,
) -> User:
    """
    Create a user with the given role after applying the credential policy.

    Raises ValidationError for missing/short input and ConflictError when the
    (lowercased) username already exists.
    """
    if role not in ROLES:
        raise ValueError(f"Unknown role {role!r}")
    normalized, plain = validate_credentials(username, password)

    user = User(
        username=normalized,
        password_hash=hash_password(plain),
        role=role,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("Username already taken") from e
    db.refresh(user)
    logger.info("Registered user id=%s role=%s", user.id, user.role)
    return user


def authenticate_user(db: Session, username: str | None, password: str | None) -> User:
    """Return the user whose credentials match, or raise AuthenticationError."""
    if not username or not password:
        raise ValidationError("username and password are required")

    normalized = normalize_username(username)
    user = db.query(User).filter(User.username == normalized).first()
    if user is None or not verify_password(password, user.password_hash):
        logger.warning("Failed login attempt for username=%r", normalized)
        raise AuthenticationError(INVALID_CREDENTIALS)
    return user


def login(db: Session, username: str | None, password: str | None) -> str:
    """Authenticate and issue a signed token embedding id, username and role."""
    user = authenticate_user(db, username, password)
    identity = CurrentUser(id=user.id, username=user.username, role=user.role)
    logger.info("User id=%s logged in", user.id)
    return create_access_token(identity)
