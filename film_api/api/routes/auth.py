"""Registration, login and the auth dependencies (get_current_user, require_role)."""

import logging
from collections.abc import Callable
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from film_api.core.database import get_db
from film_api.core.errors import AuthorizationError, InvalidTokenError
from film_api.core.security import ROLE_ADMIN, ROLE_USER, decode_access_token
from film_api.schemas.auth import (
    CredentialsRequest,
    CurrentUser,
    LoginResponse,
    RegisterResponse,
)
from film_api.services import accounts

logger = logging.getLogger(__name__)

router = APIRouter()
security = HTTPBearer(auto_error=False)


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: CredentialsRequest,
    db: Annotated[Session, Depends(get_db)],
) -> RegisterResponse:
    """Create a regular user. The username is stored lowercased."""
    user = accounts.register_user(db, body.username, body.password, role=ROLE_USER)
    return RegisterResponse.model_validate(user)


@router.post("/register-admin", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register_admin(
    body: CredentialsRequest,
    db: Annotated[Session, Depends(get_db)],
) -> RegisterResponse:
    """Create a user with the admin role."""
    user = accounts.register_user(db, body.username, body.password, role=ROLE_ADMIN)
    return RegisterResponse.model_validate(user)


@router.post("/login", response_model=LoginResponse)
def login(
    body: CredentialsRequest,
    db: Annotated[Session, Depends(get_db)],
) -> LoginResponse:
    """
    Authenticate with username and password; returns a JWT valid for JWT_EXPIRE_MINUTES.
    Include the token in the Authorization header as: Bearer <token>
    """
    token = accounts.login(db, body.username, body.password)
    return LoginResponse(token=token)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> CurrentUser:
    """
    Dependency: require a valid Bearer JWT and return the identity it carries.

    No token gives 401; a token that fails verification (bad signature,
    malformed, expired) gives 403. The users table is not consulted.
    """
    token = credentials.credentials if credentials is not None else None
    try:
        return decode_access_token(token)
    except InvalidTokenError as e:
        logger.warning("Rejected bearer token: %s", e.message)
        raise


def require_role(role: str) -> Callable[[CurrentUser], CurrentUser]:
    """Build a dependency that allows only identities whose role equals ``role``."""

    def dependency(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if current_user.role != role:
            logger.warning(
                "User id=%s with role=%s denied; %s required",
                current_user.id,
                current_user.role,
                role,
            )
            raise AuthorizationError("Insufficient permissions")
        return current_user

    return dependency


require_admin = require_role(ROLE_ADMIN)
