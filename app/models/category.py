"""TimelineCategory model for grouping timeline posts."""

from sqlalchemy import Column, Integer, String, TIMESTAMP, CheckConstraint
from sqlalchemy.sql import func
from ..database import Base


DEFAULT_CATEGORY_COLOR = "bg-gray-100 text-gray-800"


class TimelineCategory(Base):
    """Named grouping tag for timeline posts."""
    
    __tablename__ = "timeline_categories"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True, index=True)
    color = Column(String(100), nullable=False, default=DEFAULT_CATEGORY_COLOR)  # CSS classes for the badge
    
    # Denormalized, adjusted on post create/update/delete/approve
    post_count = Column(Integer, nullable=False, default=0)
    
    # Timestamps
    created_at = Column(TIMESTAMP, server_default=func.now(), index=True)
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())
    
    __table_args__ = (
        CheckConstraint("post_count >= 0", name="check_category_post_count"),
    )
