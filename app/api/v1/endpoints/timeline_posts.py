"""Timeline post endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from sqlalchemy.orm import Session

from app.api.deps import Pagination, get_db, get_pagination
from app.schemas.common import MessageResponse
from app.schemas.post import (
    TimelinePostCategoryResponse,
    TimelinePostCreateResponse,
    TimelinePostDetailResponse,
    TimelinePostForm,
    TimelinePostListResponse,
    TimelinePostStatusUpdate,
    TimelinePostUpdateResponse,
)
from app.services.timeline_post_service import timeline_post_service, to_post_response

router = APIRouter(
    prefix="/posts",
    tags=["Timeline Posts"],
)


def _post_form(
    title: Optional[str] = Form(None),
    date: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    year: Optional[str] = Form(None),
    status: Optional[str] = Form(None),
) -> TimelinePostForm:
    """Collect the multipart form fields of a post."""
    return TimelinePostForm(
        title=title,
        date=date,
        description=description,
        category=category,
        location=location,
        year=year,
        status=status,
    )


@router.get(
    "",
    response_model=TimelinePostListResponse,
    status_code=status.HTTP_200_OK,
    summary="List timeline posts",
    description="""
Paginated list of posts ordered by year (newest first), then creation time.

**Filters:** `category`, `status` (draft, published, pending), `year`,
`search` (case-insensitive substring of title, description or location).
""",
)
def list_posts(
    category: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    year: Optional[int] = Query(None),
    search: Optional[str] = Query(None),
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> TimelinePostListResponse:
    result = timeline_post_service.list_posts(
        db,
        category=category,
        status=status_filter,
        year=year,
        search=search,
        page=pagination.page,
        limit=pagination.limit,
    )
    return TimelinePostListResponse(
        total=result.total,
        page=result.page,
        total_pages=result.total_pages,
        posts=result.items,
    )


@router.get(
    "/category/{category}",
    response_model=TimelinePostCategoryResponse,
    status_code=status.HTTP_200_OK,
    summary="Published posts of a category",
)
def list_posts_by_category(
    category: str,
    limit: int = Query(10, ge=1),
    db: Session = Depends(get_db),
) -> TimelinePostCategoryResponse:
    posts = timeline_post_service.list_by_category(db, category=category, limit=limit)
    return TimelinePostCategoryResponse(posts=posts)


@router.get(
    "/{post_id}",
    response_model=TimelinePostDetailResponse,
    status_code=status.HTTP_200_OK,
    summary="Get timeline post",
)
def get_post(post_id: int, db: Session = Depends(get_db)) -> TimelinePostDetailResponse:
    post = timeline_post_service.get_post(db, post_id)
    return TimelinePostDetailResponse(post=to_post_response(post))


@router.post(
    "",
    response_model=TimelinePostCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create timeline post",
    description="""
Create a post (multipart/form-data).

- **title**, **date**, **description**, **category**, **year**: required
- **status**: draft (default), published or pending
- **image**: optional jpeg/jpg/png/gif/webp, max 5MB
""",
)
def create_post(
    form: TimelinePostForm = Depends(_post_form),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
) -> TimelinePostCreateResponse:
    result = timeline_post_service.create_post(db, form=form, image=image)
    return TimelinePostCreateResponse(
        message="Timeline post created successfully",
        warnings=result.warnings,
        post_id=result.post.id,
        post=to_post_response(result.post),
    )


@router.put(
    "/{post_id}",
    response_model=TimelinePostUpdateResponse,
    status_code=status.HTTP_200_OK,
    summary="Update timeline post",
    description="""
Replace the fields of a post (multipart/form-data, same fields as create).

Sending a new **image** replaces the old file; without one the current image is kept.
""",
)
def update_post(
    post_id: int,
    form: TimelinePostForm = Depends(_post_form),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
) -> TimelinePostUpdateResponse:
    result = timeline_post_service.update_post(db, post_id=post_id, form=form, image=image)
    return TimelinePostUpdateResponse(
        message="Post updated successfully",
        warnings=result.warnings,
        post=to_post_response(result.post),
    )


@router.patch(
    "/{post_id}/status",
    response_model=TimelinePostUpdateResponse,
    status_code=status.HTTP_200_OK,
    summary="Change post status",
)
def update_post_status(
    post_id: int,
    status_in: TimelinePostStatusUpdate,
    db: Session = Depends(get_db),
) -> TimelinePostUpdateResponse:
    post = timeline_post_service.set_status(db, post_id=post_id, status=status_in.status)
    return TimelinePostUpdateResponse(
        message="Post status updated successfully",
        post=to_post_response(post),
    )


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete timeline post",
)
def delete_post(post_id: int, db: Session = Depends(get_db)) -> MessageResponse:
    warnings = timeline_post_service.delete_post(db, post_id=post_id)
    return MessageResponse(message="Post deleted successfully", warnings=warnings)
