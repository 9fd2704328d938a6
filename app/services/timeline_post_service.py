"""Timeline post catalog: published/draft posts and their category count side effects."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from fastapi import UploadFile
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.crud import crud_timeline_post
from app.models.post import TimelinePost, TimelinePostStatus
from app.models.post_request import TimelinePostRequest
from app.schemas.common import PagedResult
from app.schemas.post import TimelinePostForm, TimelinePostResponse
from app.services.category_service import category_service
from app.services.image_service import discard_upload, release_image, store_upload
from app.services.side_effects import SideEffectLog
from app.utils.file_handler import get_file_url
from app.utils.validators import clean_text, parse_year, require_text

logger = logging.getLogger(__name__)


POST_STATUSES = {s.value for s in TimelinePostStatus}

POST_NOT_FOUND = "Post not found"
DUPLICATE_POST = "A post with this title and date already exists"
INVALID_STATUS = "A valid status is required"


@dataclass
class PostMutation:
    """A committed post write plus warnings from its follow-up steps."""

    post: TimelinePost
    warnings: List[str] = field(default_factory=list)


def to_post_response(post: TimelinePost) -> TimelinePostResponse:
    """Serialise a post with its derived image URL."""
    response = TimelinePostResponse.model_validate(post, from_attributes=True)
    response.image_url = get_file_url(post.image)
    return response


def validate_post_fields(form: TimelinePostForm, *, current_status: Optional[str] = None) -> Dict[str, Any]:
    """
    Check a create/update form and return clean column values.

    Title, date, description and category must be non-blank and year must be an
    integer. An omitted status becomes ``current_status`` (update) or draft (create).
    """
    title = require_text(form.title, "Title is required")
    date = require_text(form.date, "Date is required")
    description = require_text(form.description, "Description is required")
    category = require_text(form.category, "Category is required")

    year = parse_year(form.year)
    if year is None:
        raise ValidationError("A valid year is required")

    status = clean_text(form.status, current_status or TimelinePostStatus.DRAFT.value)
    if status not in POST_STATUSES:
        raise ValidationError(INVALID_STATUS)

    return {
        "title": title,
        "date": date,
        "description": description,
        "category": category,
        "location": clean_text(form.location),
        "year": year,
        "status": status,
    }


class TimelinePostService:
    """
    Service for timeline posts.

    Every create/update/delete adjusts the cached ``post_count`` of the
    affected categories afterwards. These adjustments are not part of the
    post write: when one fails the post change stays and the failure is
    returned as a warning.
    """

    # ----- Read -----
    def list_posts(
        self,
        db: Session,
        *,
        category: Optional[str] = None,
        status: Optional[str] = None,
        year: Optional[int] = None,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> PagedResult[TimelinePostResponse]:
        """Filtered page of posts ordered by year desc, then creation desc."""
        page = max(page, 1)
        posts, total = crud_timeline_post.get_filtered(
            db,
            category=category,
            status=status,
            year=year,
            search=search,
            skip=(page - 1) * limit,
            limit=limit,
        )
        return PagedResult(
            items=[to_post_response(post) for post in posts],
            total=total,
            page=page,
            limit=limit,
        )

    def get_post(self, db: Session, post_id: int) -> TimelinePost:
        post = crud_timeline_post.get(db, post_id)
        if not post:
            raise NotFoundError(POST_NOT_FOUND)
        return post

    def list_by_category(self, db: Session, *, category: str, limit: int = 10) -> List[TimelinePostResponse]:
        """Published posts of one category, at most ``limit``."""
        posts = crud_timeline_post.get_published_by_category(db, category=category, limit=limit)
        return [to_post_response(post) for post in posts]

    def ensure_unique_title_date(
        self,
        db: Session,
        *,
        title: str,
        date: str,
        exclude_id: Optional[int] = None,
    ) -> None:
        if crud_timeline_post.get_by_title_and_date(db, title=title, date=date, exclude_id=exclude_id):
            raise ConflictError(DUPLICATE_POST)

    # ----- Write -----
    def create_post(
        self,
        db: Session,
        *,
        form: TimelinePostForm,
        image: Optional[UploadFile] = None,
    ) -> PostMutation:
        """
        Create a post and increment its category's count.

        Raises:
            ValidationError: missing fields, bad year/status or unknown category
            ConflictError: a post with the same (title, date) exists
        """
        fields = validate_post_fields(form)
        category_service.require_category(db, fields["category"])
        self.ensure_unique_title_date(db, title=fields["title"], date=fields["date"])

        filename = store_upload(image)
        try:
            post = crud_timeline_post.create(
                db,
                obj_in={**fields, "image": filename, "views": 0, "likes": 0},
            )
        except IntegrityError:
            discard_upload(filename)
            raise ConflictError(DUPLICATE_POST)
        except Exception:
            discard_upload(filename)
            raise

        logger.info(f"Timeline post created: id={post.id}, category={fields['category']}")

        log = SideEffectLog()
        log.attempt(
            f"Incrementing post count of category '{fields['category']}'",
            lambda: category_service.adjust_post_count(db, name=fields["category"], delta=1),
        )
        return PostMutation(post=post, warnings=log.warnings)

    def update_post(
        self,
        db: Session,
        *,
        post_id: int,
        form: TimelinePostForm,
        image: Optional[UploadFile] = None,
    ) -> PostMutation:
        """
        Replace the editable fields of a post.

        When the category changes the old count is decremented and the new one
        incremented as two separate steps. A replaced image is removed only
        after the post row is updated; without a new upload the image is kept.
        """
        post = self.get_post(db, post_id)
        fields = validate_post_fields(form, current_status=post.status)
        category_service.require_category(db, fields["category"])
        self.ensure_unique_title_date(
            db, title=fields["title"], date=fields["date"], exclude_id=post_id
        )

        old_category = post.category
        old_image = post.image

        new_image = store_upload(image)
        if new_image:
            fields["image"] = new_image

        try:
            post = crud_timeline_post.update(db, db_obj=post, obj_in=fields)
        except IntegrityError:
            discard_upload(new_image)
            raise ConflictError(DUPLICATE_POST)
        except Exception:
            discard_upload(new_image)
            raise

        log = SideEffectLog()
        if old_category != fields["category"]:
            log.attempt(
                f"Decrementing post count of category '{old_category}'",
                lambda: category_service.adjust_post_count(db, name=old_category, delta=-1),
            )
            log.attempt(
                f"Incrementing post count of category '{fields['category']}'",
                lambda: category_service.adjust_post_count(db, name=fields["category"], delta=1),
            )
        if new_image and old_image:
            release_image(db, old_image, log)

        return PostMutation(post=post, warnings=log.warnings)

    def delete_post(self, db: Session, *, post_id: int) -> List[str]:
        """Delete a post, then decrement its category count and release its image."""
        post = self.get_post(db, post_id)
        category = post.category
        image = post.image

        if not crud_timeline_post.delete(db, id=post_id):
            raise NotFoundError(POST_NOT_FOUND)
        logger.info(f"Timeline post deleted: id={post_id}")

        log = SideEffectLog()
        log.attempt(
            f"Decrementing post count of category '{category}'",
            lambda: category_service.adjust_post_count(db, name=category, delta=-1),
        )
        release_image(db, image, log)
        return log.warnings

    def set_status(self, db: Session, *, post_id: int, status: Optional[str]) -> TimelinePost:
        """Change only the display status (draft, published, pending)."""
        if not status or status not in POST_STATUSES:
            raise ValidationError(INVALID_STATUS)
        post = self.get_post(db, post_id)
        return crud_timeline_post.update(db, db_obj=post, obj_in={"status": status})

    def materialize_from_request(self, db: Session, request: TimelinePostRequest) -> TimelinePost:
        """Create the published post for an approved request.

        Raises ConflictError when the storage-level (title, date) constraint
        rejects the insert.
        """
        try:
            post = crud_timeline_post.create(
                db,
                obj_in={
                    "title": request.title,
                    "date": request.date,
                    "description": request.description,
                    "category": request.category,
                    "location": request.location,
                    "year": request.year,
                    "status": TimelinePostStatus.PUBLISHED.value,
                    "image": request.image,
                    "submitted_by": request.submitted_by,
                    "email": request.email,
                    "phone": request.phone,
                    "original_request_id": request.id,
                    "views": 0,
                    "likes": 0,
                },
            )
        except IntegrityError:
            raise ConflictError(DUPLICATE_POST)
        logger.info(f"Timeline post {post.id} created from request {request.id}")
        return post


# Singleton instance
timeline_post_service = TimelinePostService()
