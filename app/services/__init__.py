"""Services package for the Timeline API."""

from .category_service import category_service, CategoryService
from .timeline_post_service import timeline_post_service, TimelinePostService
from .post_request_service import post_request_service, PostRequestService

__all__ = [
    "category_service",
    "CategoryService",
    "timeline_post_service",
    "TimelinePostService",
    "post_request_service",
    "PostRequestService",
]
