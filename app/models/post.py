"""TimelinePost model for published and draft timeline entries."""

from enum import Enum
from sqlalchemy import Column, Integer, String, Text, TIMESTAMP, CheckConstraint, Index, UniqueConstraint
from sqlalchemy.sql import func
from ..database import Base


class TimelinePostStatus(str, Enum):
    """Display states of a timeline post."""
    DRAFT = "draft"
    PUBLISHED = "published"
    PENDING = "pending"


class TimelinePost(Base):
    """A timeline entry, created directly or from an approved request."""
    
    __tablename__ = "timeline_posts"
    
    id = Column(Integer, primary_key=True, index=True)
    
    # Content
    title = Column(String(500), nullable=False)
    date = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(100), nullable=False, index=True)  # category name, not id
    location = Column(String(255), nullable=False, default="")
    year = Column(Integer, nullable=False, index=True)
    status = Column(String(20), nullable=False, default=TimelinePostStatus.DRAFT.value, index=True)
    image = Column(String(255), nullable=True)
    
    # Carried over when materialized from an approved request
    submitted_by = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    original_request_id = Column(Integer, nullable=True, index=True)
    
    # Counters
    views = Column(Integer, nullable=False, default=0)
    likes = Column(Integer, nullable=False, default=0)
    
    # Timestamps
    created_at = Column(TIMESTAMP, server_default=func.now(), index=True)
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())
    
    # Constraints & Indexes
    __table_args__ = (
        UniqueConstraint("title", "date", name="uq_timeline_post_title_date"),
        CheckConstraint("status IN ('draft', 'published', 'pending')", name="check_timeline_post_status"),
        # Default ordering (year desc, created_at desc)
        Index("idx_timeline_post_year_created", "year", "created_at"),
        Index("idx_timeline_post_category_status", "category", "status"),
    )
