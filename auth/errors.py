"""
Authentication error taxonomy.

Every error carries the HTTP status and the client-facing ``message``;
``api.middleware`` turns them into ``{"message": ...}`` responses.
"""

from __future__ import annotations

from fastapi import status


class AuthError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Server error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class DuplicateEmail(AuthError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Email already registered"


class UnknownUser(AuthError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "User does not exist"


class InvalidCredential(AuthError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Incorrect password"


class Unauthenticated(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized"


class ServerFault(AuthError):
    pass
