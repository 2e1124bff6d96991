"""Pydantic request/response schemas."""

from film_api.schemas.auth import (
    CredentialsRequest,
    CurrentUser,
    LoginResponse,
    RegisterResponse,
)
from film_api.schemas.directors import DirectorRequest, DirectorResponse
from film_api.schemas.movies import MovieRequest, MovieResponse
from film_api.schemas.status import ErrorResponse, StatusResponse

__all__ = [
    "CredentialsRequest",
    "CurrentUser",
    "DirectorRequest",
    "DirectorResponse",
    "ErrorResponse",
    "LoginResponse",
    "MovieRequest",
    "MovieResponse",
    "RegisterResponse",
    "StatusResponse",
]
