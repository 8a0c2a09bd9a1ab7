"""
User-facing error messages and the exception -> HTTP mapping.

Store failures never leak their cause to the client: the route logs the
exception and answers with a fixed message for the operation.
"""
from __future__ import annotations

from fastapi import HTTPException

STATUS_BAD_REQUEST = 400
STATUS_UNAUTHORIZED = 401
STATUS_INTERNAL_ERROR = 500

MSG_FETCH_FAILED = "Failed to fetch events"
MSG_CREATE_FAILED = "Failed to create event"
MSG_UPDATE_FAILED = "Failed to update event"
MSG_DELETE_FAILED = "Failed to delete event"
MSG_UPLOAD_FAILED = "Failed to store upload"

MSG_REQUIRED_FIELDS = "Date and Title are required"
MSG_LOGIN_REQUIRED = "Admin login required"


def store_error_to_http(message: str) -> HTTPException:
    return HTTPException(status_code=STATUS_INTERNAL_ERROR, detail=message)


def login_required() -> HTTPException:
    return HTTPException(
        status_code=STATUS_UNAUTHORIZED,
        detail=MSG_LOGIN_REQUIRED,
        headers={"WWW-Authenticate": "Bearer"},
    )


def error_body(detail) -> dict:
    """Flat envelope used by every error response."""
    return {"error": detail if isinstance(detail, str) else str(detail)}
