"""Pydantic schemas for `TimelinePostRequest` domain objects."""

from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict

from app.schemas.common import CamelModel, MessageResponse
from app.schemas.post import TimelinePostResponse


class PostRequestSubmit(CamelModel):
	"""Public submission form. Values arrive as raw form strings and are checked by the service."""
	title: Optional[str] = None
	date: Optional[str] = None
	description: Optional[str] = None
	category: Optional[str] = None
	location: Optional[str] = None
	year: Optional[str] = None
	submitted_by: Optional[str] = None
	email: Optional[str] = None
	phone: Optional[str] = None


class PostRequestReview(CamelModel):
	status: Optional[str] = None
	review_notes: Optional[str] = None
	reviewed_by: Optional[str] = None

	model_config = ConfigDict(json_schema_extra={
		"example": {
			"status": "approved",
			"reviewNotes": "Verified with the archive",
			"reviewedBy": "Admin",
		}
	})


class PostRequestResponse(CamelModel):
	id: int
	title: str
	date: str
	description: str
	category: str
	location: str
	year: int
	submitted_by: str
	email: str
	phone: str
	status: str
	image: Optional[str] = None
	image_url: Optional[str] = None
	reviewed_by: Optional[str] = None
	reviewed_at: Optional[datetime] = None
	review_notes: str = ""
	created_at: Optional[datetime] = None
	updated_at: Optional[datetime] = None

	model_config = ConfigDict(from_attributes=True, json_schema_extra={
		"example": {
			"id": 1,
			"title": "Founding",
			"date": "2020-01-01",
			"description": "The organisation was founded.",
			"category": "History",
			"location": "Dhaka",
			"year": 2020,
			"submittedBy": "Rahim",
			"email": "rahim@example.com",
			"phone": "",
			"status": "pending",
			"image": "timeline_3f0c5f0e-0f0e-4a43-8a4e-6a7c2b1d9e11.jpg",
			"imageUrl": "/uploads/timeline/timeline_3f0c5f0e-0f0e-4a43-8a4e-6a7c2b1d9e11.jpg",
			"reviewedBy": None,
			"reviewedAt": None,
			"reviewNotes": "",
			"createdAt": "2025-02-09T10:00:00Z",
			"updatedAt": "2025-02-09T10:00:00Z",
		}
	})


class PostRequestListResponse(CamelModel):
	success: bool = True
	total: int
	page: int
	total_pages: int
	requests: List[PostRequestResponse]


class PostRequestDetailResponse(CamelModel):
	success: bool = True
	request: PostRequestResponse


class PostRequestSubmitResponse(MessageResponse):
	request_id: int
	request: PostRequestResponse


class PostRequestReviewResponse(MessageResponse):
	request: PostRequestResponse
	post: Optional[TimelinePostResponse] = None


class PostRequestStats(CamelModel):
	pending: int
	approved: int
	rejected: int
	total: int


class PostRequestStatsResponse(CamelModel):
	success: bool = True
	stats: PostRequestStats
