"""Pydantic schemas for TimelinePost."""

from datetime import datetime
from typing import List, Optional
from pydantic import ConfigDict

from app.schemas.common import CamelModel, MessageResponse


class TimelinePostForm(CamelModel):
    """Create/update form for a timeline post (raw form strings, checked by the service)."""
    title: Optional[str] = None
    date: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    location: Optional[str] = None
    year: Optional[str] = None
    status: Optional[str] = None


class TimelinePostStatusUpdate(CamelModel):
    """Schema for changing only the display status of a post."""
    status: Optional[str] = None


class TimelinePostResponse(CamelModel):
    """Schema for TimelinePost response."""
    id: int
    title: str
    date: str
    description: str
    category: str
    location: str
    year: int
    status: str
    image: Optional[str] = None
    image_url: Optional[str] = None  # Derived from image, never stored
    submitted_by: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    original_request_id: Optional[int] = None
    views: int = 0
    likes: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    
    model_config = ConfigDict(from_attributes=True)


class TimelinePostListResponse(CamelModel):
    """Response for listing posts."""
    success: bool = True
    total: int
    page: int
    total_pages: int
    posts: List[TimelinePostResponse]


class TimelinePostCategoryResponse(CamelModel):
    """Published posts of one category."""
    success: bool = True
    posts: List[TimelinePostResponse]


class TimelinePostDetailResponse(CamelModel):
    success: bool = True
    post: TimelinePostResponse


class TimelinePostCreateResponse(MessageResponse):
    post_id: int
    post: TimelinePostResponse


class TimelinePostUpdateResponse(MessageResponse):
    post: TimelinePostResponse
