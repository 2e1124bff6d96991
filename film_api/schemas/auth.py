"""Request/response schemas for auth endpoints."""

from typing import Literal

from pydantic import BaseModel, Field

Role = Literal["user", "admin"]


class CredentialsRequest(BaseModel):
    """
    Username and password for registration and login.

    Both are optional at the schema level so that missing fields are reported
    by the credential policy in film_api.core.security with a single message.
    """

    username: str | None = Field(default=None, description="Username (case-insensitive)")
    password: str | None = Field(default=None, description="Password (min 6 characters)")


class RegisterResponse(BaseModel):
    """Created user; the password hash is never returned."""

    id: int
    username: str

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    """JWT returned after successful login. Send it as: Authorization: Bearer <token>"""

    message: str = Field(default="Login successful")
    token: str = Field(..., description="JWT access token")


class CurrentUser(BaseModel):
    """Session identity (id, username, role) rebuilt from a verified token."""

    id: int
    username: str
    role: Role

    model_config = {"from_attributes": True}
