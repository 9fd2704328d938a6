"""Custom exceptions for the Timeline API.

Every domain failure is an ``HTTPException`` so it can be raised from the CRUD,
service or endpoint layer alike and still reach the client as
``{"success": false, "message": ...}`` through the handlers in ``app.main``.
"""

from typing import Optional

from fastapi import HTTPException, status


class TimelineException(HTTPException):
    """Base exception for timeline operations."""

    default_detail = "Request could not be processed"
    status_code_default = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: Optional[str] = None):
        super().__init__(
            status_code=self.status_code_default,
            detail=detail or self.default_detail,
        )


class ValidationError(TimelineException):
    """Missing/blank required field, bad enum value or unparseable required number."""

    default_detail = "Invalid input"


class UnsupportedMediaError(ValidationError):
    """
    Exception when an uploaded file is not an allowed image.

    Subclass of ``ValidationError``: a disallowed image type is a validation
    failure of the submitted form.
    """

    default_detail = "Only image files can be uploaded (jpeg, jpg, png, gif, webp)"


class ConflictError(TimelineException):
    """Duplicate category name, duplicate (title, date) or category still in use."""

    default_detail = "Conflicting record already exists"


class ResourceLimitError(TimelineException):
    """Exception when an uploaded file exceeds the size limit."""

    default_detail = "Image size must be less than 5MB"


class NotFoundError(TimelineException):
    """Unknown record id."""

    default_detail = "Record not found"
    status_code_default = status.HTTP_404_NOT_FOUND


class InternalError(TimelineException):
    """
    Storage or IO failure that is not the client's fault.

    Status Code: 500 Internal Server Error

    Response Body:
        {
            "success": false,
            "message": "Internal server error"
        }
    """

    default_detail = "Internal server error"
    status_code_default = status.HTTP_500_INTERNAL_SERVER_ERROR


__all__ = [
    "TimelineException",
    "ValidationError",
    "UnsupportedMediaError",
    "ConflictError",
    "ResourceLimitError",
    "NotFoundError",
    "InternalError",
]
