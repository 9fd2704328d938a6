"""
SQLAlchemy Models for the Timeline API
"""

from ..database import Base
from .category import TimelineCategory
from .post_request import TimelinePostRequest
from .post import TimelinePost

# Export all models
__all__ = [
    "Base",
    "TimelineCategory",
    "TimelinePostRequest",
    "TimelinePost",
]
