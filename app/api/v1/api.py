"""API v1 router aggregator."""

from fastapi import APIRouter

from app.api.v1.endpoints import categories, post_requests, timeline_posts
from app.schemas.common import ErrorResponse

api_router = APIRouter(
    prefix="/api/v1",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or conflicting record"},
        404: {"model": ErrorResponse, "description": "Record not found"},
    },
)

api_router.include_router(categories.router)
api_router.include_router(post_requests.router)
api_router.include_router(timeline_posts.router)

__all__ = ["api_router"]
