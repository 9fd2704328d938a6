"""Timeline post request endpoints (public submission and admin review)."""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from sqlalchemy.orm import Session

from app.api.deps import Pagination, get_db, get_pagination
from app.schemas.common import MessageResponse
from app.schemas.post_request import (
    PostRequestDetailResponse,
    PostRequestListResponse,
    PostRequestReview,
    PostRequestReviewResponse,
    PostRequestStatsResponse,
    PostRequestSubmit,
    PostRequestSubmitResponse,
)
from app.services.post_request_service import post_request_service, to_request_response
from app.services.timeline_post_service import to_post_response

router = APIRouter(
    prefix="/post-requests",
    tags=["Timeline Post Requests"],
)


@router.get(
    "",
    response_model=PostRequestListResponse,
    status_code=status.HTTP_200_OK,
    summary="List post requests",
    description="""
Paginated list of post requests, newest first.

**Filters:**
- `status`: pending, approved or rejected
- `year`: exact year
- `search`: case-insensitive substring of title, description or location
""",
)
def list_post_requests(
    status_filter: Optional[str] = Query(None, alias="status"),
    year: Optional[int] = Query(None),
    search: Optional[str] = Query(None),
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> PostRequestListResponse:
    result = post_request_service.list_requests(
        db,
        status=status_filter,
        year=year,
        search=search,
        page=pagination.page,
        limit=pagination.limit,
    )
    return PostRequestListResponse(
        total=result.total,
        page=result.page,
        total_pages=result.total_pages,
        requests=result.items,
    )


@router.get(
    "/stats/count",
    response_model=PostRequestStatsResponse,
    status_code=status.HTTP_200_OK,
    summary="Request counts per status",
)
def get_post_request_stats(db: Session = Depends(get_db)) -> PostRequestStatsResponse:
    return PostRequestStatsResponse(stats=post_request_service.get_stats(db))


@router.get(
    "/{request_id}",
    response_model=PostRequestDetailResponse,
    status_code=status.HTTP_200_OK,
    summary="Get post request",
)
def get_post_request(request_id: int, db: Session = Depends(get_db)) -> PostRequestDetailResponse:
    request = post_request_service.get_request(db, request_id)
    return PostRequestDetailResponse(request=to_request_response(request))


@router.post(
    "",
    response_model=PostRequestSubmitResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit post request",
    description="""
Public submission form (multipart/form-data).

- **title**, **date**, **description**, **category**: required
- **year**: optional, stored as 0 when not a number
- **image**: optional jpeg/jpg/png/gif/webp, max 5MB
""",
)
def submit_post_request(
    title: Optional[str] = Form(None),
    date: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    year: Optional[str] = Form(None),
    submitted_by: Optional[str] = Form(None, alias="submittedBy"),
    email: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
) -> PostRequestSubmitResponse:
    form = PostRequestSubmit(
        title=title,
        date=date,
        description=description,
        category=category,
        location=location,
        year=year,
        submitted_by=submitted_by,
        email=email,
        phone=phone,
    )
    request = post_request_service.submit_request(db, form=form, image=image)
    return PostRequestSubmitResponse(
        message="Timeline post request submitted successfully",
        request_id=request.id,
        request=to_request_response(request),
    )


@router.put(
    "/{request_id}/status",
    response_model=PostRequestReviewResponse,
    status_code=status.HTTP_200_OK,
    summary="Approve or reject post request",
    description="""
Review a post request.

- `approved`: creates a published timeline post from the request and
  increments the category's post count. Fails while a post with the same
  title and date exists; the request then stays unchanged.
- `rejected`: only records the decision.
""",
)
def review_post_request(
    request_id: int,
    review_in: PostRequestReview,
    db: Session = Depends(get_db),
) -> PostRequestReviewResponse:
    outcome = post_request_service.review_request(
        db,
        request_id=request_id,
        decision=review_in.status,
        review_notes=review_in.review_notes,
        reviewed_by=review_in.reviewed_by,
    )
    return PostRequestReviewResponse(
        message=f"Request {outcome.request.status}",
        warnings=outcome.warnings,
        request=to_request_response(outcome.request),
        post=to_post_response(outcome.post) if outcome.post else None,
    )


@router.delete(
    "/{request_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete post request",
)
def delete_post_request(request_id: int, db: Session = Depends(get_db)) -> MessageResponse:
    warnings = post_request_service.delete_request(db, request_id=request_id)
    return MessageResponse(message="Request deleted successfully", warnings=warnings)
