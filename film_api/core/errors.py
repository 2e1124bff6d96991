"""Domain errors raised by services and auth dependencies.

Each error carries the HTTP status it maps to; the handlers registered in
film_api.main turn them into ``{"error": message}`` responses.
"""


class AppError(Exception):
    """Base class for errors that are safe to show to the client."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Missing or malformed input."""

    status_code = 400


class AuthenticationError(AppError):
    """No credentials were presented, or they did not match a user."""

    status_code = 401


class InvalidTokenError(AppError):
    """Bearer token is malformed or its signature does not verify."""

    status_code = 403


class TokenExpiredError(InvalidTokenError):
    """Bearer token verified but its exp claim is in the past."""


class AuthorizationError(AppError):
    """Authenticated identity lacks the required role."""

    status_code = 403


class NotFoundError(AppError):
    status_code = 404


class ConflictError(AppError):
    """Unique constraint violation (e.g. duplicate username)."""

    status_code = 409
