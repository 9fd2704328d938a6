"""Pydantic schemas for TimelineCategory."""

from datetime import datetime
from typing import List, Optional
from pydantic import ConfigDict, Field

from app.schemas.common import CamelModel, MessageResponse


class CategoryCreate(CamelModel):
    """Schema for creating a new category. Blank names are rejected by the service."""
    name: Optional[str] = Field(None, max_length=100, description="Category name (unique, trimmed)")
    color: Optional[str] = Field(None, max_length=100, description="Badge CSS classes")


class CategoryUpdate(CategoryCreate):
    """Schema for updating a category. An omitted color keeps the current one."""
    pass


class CategoryResponse(CamelModel):
    """Schema for TimelineCategory response."""
    id: int
    name: str
    color: str
    post_count: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    
    model_config = ConfigDict(from_attributes=True, json_schema_extra={
        "example": {
            "id": 1,
            "name": "History",
            "color": "bg-gray-100 text-gray-800",
            "postCount": 4,
            "createdAt": "2025-02-09T10:00:00Z",
            "updatedAt": "2025-02-10T09:00:00Z",
        }
    })


class CategoryListResponse(CamelModel):
    """Response for listing categories."""
    success: bool = True
    categories: List[CategoryResponse]


class CategoryDetailResponse(MessageResponse):
    category: CategoryResponse
