"""Core module exports."""

from .exceptions import (
    ConflictError,
    InternalError,
    NotFoundError,
    ResourceLimitError,
    TimelineException,
    UnsupportedMediaError,
    ValidationError,
)

__all__ = [
    "TimelineException",
    "ValidationError",
    "UnsupportedMediaError",
    "ConflictError",
    "ResourceLimitError",
    "NotFoundError",
    "InternalError",
]
