"""TimelinePostRequest model for public timeline submissions awaiting review."""

from enum import Enum
from sqlalchemy import Column, Integer, String, Text, TIMESTAMP, CheckConstraint, Index
from sqlalchemy.sql import func
from ..database import Base


class PostRequestStatus(str, Enum):
    """Review states of a post request."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class TimelinePostRequest(Base):
    __tablename__ = "timeline_post_requests"
    
    id = Column(Integer, primary_key=True, index=True)
    
    # Submitted content
    title = Column(String(500), nullable=False)
    date = Column(String(100), nullable=False)  # free text, e.g. "1971-03-26" or "Spring 1952"
    description = Column(Text, nullable=False)
    category = Column(String(100), nullable=False, index=True)  # category name, not id
    location = Column(String(255), nullable=False, default="")
    year = Column(Integer, nullable=False, default=0, index=True)
    image = Column(String(255), nullable=True)  # stored filename
    
    # Submitter
    submitted_by = Column(String(255), nullable=False, default="Unknown")
    email = Column(String(255), nullable=False, default="")
    phone = Column(String(50), nullable=False, default="")
    
    # Review
    status = Column(String(20), nullable=False, default=PostRequestStatus.PENDING.value, index=True)
    reviewed_by = Column(String(255), nullable=True)
    reviewed_at = Column(TIMESTAMP, nullable=True)
    review_notes = Column(Text, nullable=False, default="")
    
    # Timestamps
    created_at = Column(TIMESTAMP, server_default=func.now(), index=True)
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())
    
    __table_args__ = (
        CheckConstraint("status IN ('pending', 'approved', 'rejected')", name="check_post_request_status"),
        Index("idx_post_request_status_created", "status", "created_at"),
    )
