"""Post request workflow: public submissions and their review.

Review decisions::

    pending --approve--> approved   (creates a published post)
    pending --reject---> rejected

Approval runs these steps in order:

1. the request's category must still exist
2. no post may already have the request's (title, date)
3. create the published post from the request
4. increment the category's post count (best-effort)
5. mark the request approved

Steps 1-3 can fail the approval, and the request then stays untouched.
Step 4 only produces a warning. A reviewed request cannot be reviewed again,
except that approving an approved request reaches step 2 and fails there,
because the first approval already created the post.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from fastapi import UploadFile
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.crud import crud_post_request
from app.models.post import TimelinePost
from app.models.post_request import PostRequestStatus, TimelinePostRequest
from app.schemas.common import PagedResult
from app.schemas.post_request import PostRequestResponse, PostRequestStats, PostRequestSubmit
from app.services.category_service import category_service
from app.services.image_service import discard_upload, release_image, store_upload
from app.services.side_effects import SideEffectLog
from app.services.timeline_post_service import timeline_post_service
from app.utils.file_handler import get_file_url
from app.utils.validators import clean_text, parse_year, require_text

logger = logging.getLogger(__name__)


REQUEST_NOT_FOUND = "Request not found"
INVALID_DECISION = "A valid status is required"
ALREADY_REVIEWED = "Request has already been reviewed"
DEFAULT_SUBMITTER = "Unknown"
DEFAULT_REVIEWER = "Admin"

REVIEW_DECISIONS = {PostRequestStatus.APPROVED.value, PostRequestStatus.REJECTED.value}


@dataclass
class ReviewOutcome:
    request: TimelinePostRequest
    post: Optional[TimelinePost] = None
    warnings: List[str] = field(default_factory=list)


def to_request_response(request: TimelinePostRequest) -> PostRequestResponse:
    """Serialise a request with its derived image URL."""
    response = PostRequestResponse.model_validate(request, from_attributes=True)
    response.image_url = get_file_url(request.image)
    return response


class PostRequestService:
    """Service for public timeline submissions and their moderation."""

    # ----- Read -----
    def list_requests(
        self,
        db: Session,
        *,
        status: Optional[str] = None,
        year: Optional[int] = None,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> PagedResult[PostRequestResponse]:
        """Filtered page of requests, newest first."""
        page = max(page, 1)
        requests, total = crud_post_request.get_filtered(
            db,
            status=status,
            year=year,
            search=search,
            skip=(page - 1) * limit,
            limit=limit,
        )
        return PagedResult(
            items=[to_request_response(request) for request in requests],
            total=total,
            page=page,
            limit=limit,
        )

    def get_request(self, db: Session, request_id: int) -> TimelinePostRequest:
        request = crud_post_request.get(db, request_id)
        if not request:
            raise NotFoundError(REQUEST_NOT_FOUND)
        return request

    def get_stats(self, db: Session) -> PostRequestStats:
        """Live counts per review state."""
        pending = crud_post_request.count_by_status(db, PostRequestStatus.PENDING.value)
        approved = crud_post_request.count_by_status(db, PostRequestStatus.APPROVED.value)
        rejected = crud_post_request.count_by_status(db, PostRequestStatus.REJECTED.value)
        return PostRequestStats(
            pending=pending,
            approved=approved,
            rejected=rejected,
            total=pending + approved + rejected,
        )

    # ----- Write -----
    def submit_request(
        self,
        db: Session,
        *,
        form: PostRequestSubmit,
        image: Optional[UploadFile] = None,
    ) -> TimelinePostRequest:
        """
        Store a public submission as a pending request.

        Title, date, description and category are required; an unparseable
        year is stored as 0. Nothing is stored when the category is unknown.
        """
        title = require_text(form.title, "Title is required")
        date = require_text(form.date, "Date is required")
        description = require_text(form.description, "Description is required")
        category = require_text(form.category, "Category is required")
        year = parse_year(form.year) or 0

        category_service.require_category(db, category)

        filename = store_upload(image)
        try:
            request = crud_post_request.create(
                db,
                obj_in={
                    "title": title,
                    "date": date,
                    "description": description,
                    "category": category,
                    "location": clean_text(form.location),
                    "year": year,
                    "submitted_by": clean_text(form.submitted_by, DEFAULT_SUBMITTER),
                    "email": clean_text(form.email),
                    "phone": clean_text(form.phone),
                    "status": PostRequestStatus.PENDING.value,
                    "image": filename,
                    "reviewed_by": None,
                    "reviewed_at": None,
                    "review_notes": "",
                },
            )
        except Exception:
            discard_upload(filename)
            raise

        logger.info(f"Post request submitted: id={request.id}, category={category}")
        return request

    def review_request(
        self,
        db: Session,
        *,
        request_id: int,
        decision: Optional[str],
        review_notes: Optional[str] = None,
        reviewed_by: Optional[str] = None,
    ) -> ReviewOutcome:
        """
        Approve or reject a request.

        Raises:
            ValidationError: decision is not approved/rejected, or the category is gone
            NotFoundError: unknown request id
            ConflictError: approving would duplicate an existing (title, date),
                or the request was already reviewed
        """
        if decision not in REVIEW_DECISIONS:
            raise ValidationError(INVALID_DECISION)

        request = self.get_request(db, request_id)
        if request.status != PostRequestStatus.PENDING.value and not (
            request.status == PostRequestStatus.APPROVED.value
            and decision == PostRequestStatus.APPROVED.value
        ):
            raise ConflictError(ALREADY_REVIEWED)

        log = SideEffectLog()
        post = None

        if decision == PostRequestStatus.APPROVED.value:
            post = self._approve(db, request, log)

        request = crud_post_request.mark_reviewed(
            db,
            db_obj=request,
            status=decision,
            reviewed_by=clean_text(reviewed_by, DEFAULT_REVIEWER),
            review_notes=clean_text(review_notes),
        )
        logger.info(f"Post request {request_id} {decision} by {request.reviewed_by}")
        return ReviewOutcome(request=request, post=post, warnings=log.warnings)

    def _approve(self, db: Session, request: TimelinePostRequest, log: SideEffectLog) -> TimelinePost:
        category = request.category

        category_service.require_category(db, category)
        timeline_post_service.ensure_unique_title_date(db, title=request.title, date=request.date)
        post = timeline_post_service.materialize_from_request(db, request)

        log.attempt(
            f"Incrementing post count of category '{category}'",
            lambda: category_service.adjust_post_count(db, name=category, delta=1),
        )
        return post

    def delete_request(self, db: Session, *, request_id: int) -> List[str]:
        """Delete a request, then release its image unless a post still uses it."""
        request = self.get_request(db, request_id)
        image = request.image

        if not crud_post_request.delete(db, id=request_id):
            raise NotFoundError(REQUEST_NOT_FOUND)
        logger.info(f"Post request deleted: id={request_id}")

        log = SideEffectLog()
        release_image(db, image, log)
        return log.warnings


# Singleton instance
post_request_service = PostRequestService()
