"""
Application error taxonomy.

Every error a handler can raise maps to exactly one HTTP status and a
client-facing message.  ``api.middleware.register_exception_handlers``
renders them as ``{"msg": ...}`` bodies.
"""

from __future__ import annotations

from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Server error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "All fields are required"


class DuplicateEmail(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Email already exists"


class InvalidCredentials(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid email or password"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class MissingToken(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "No token, authorization denied"


class InvalidToken(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid token"


class StoreError(AppError):
    """Persistence failure; details stay in the server log."""


class ConfigurationError(RuntimeError):
    """Raised while building the app when required settings are missing."""
