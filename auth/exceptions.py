"""
HTTP errors raised by the auth routes and dependencies.

All of them are rendered as ``{"error": <detail>}`` by the handlers in
``api.middleware``.
"""

from __future__ import annotations

from fastapi import HTTPException, status


class ConflictError(HTTPException):
    def __init__(self, detail: str = "Email already used") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class UnauthorizedError(HTTPException):
    def __init__(self, detail: str = "Unauthorized") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class NotFoundError(HTTPException):
    def __init__(self, detail: str = "User not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
