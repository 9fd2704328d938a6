"""Timeline category endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.schemas.category import (
    CategoryCreate,
    CategoryDetailResponse,
    CategoryListResponse,
    CategoryResponse,
    CategoryUpdate,
)
from app.schemas.common import MessageResponse
from app.services.category_service import category_service

router = APIRouter(
    prefix="/categories",
    tags=["Timeline Categories"],
)


@router.get(
    "",
    response_model=CategoryListResponse,
    status_code=status.HTTP_200_OK,
    summary="List categories",
    description="All categories, newest first. Not paginated.",
)
def list_categories(db: Session = Depends(get_db)) -> CategoryListResponse:
    categories = category_service.list_categories(db)
    return CategoryListResponse(
        categories=[CategoryResponse.model_validate(c, from_attributes=True) for c in categories]
    )


@router.post(
    "",
    response_model=CategoryDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
    description="""
Create a new category with a post count of 0.

- **name**: required, trimmed, must be unique (case-sensitive)
- **color**: optional badge CSS classes, defaults to a grey badge
""",
)
def create_category(
    category_in: CategoryCreate,
    db: Session = Depends(get_db),
) -> CategoryDetailResponse:
    category = category_service.create_category(db, name=category_in.name, color=category_in.color)
    return CategoryDetailResponse(
        message="Category created successfully",
        category=CategoryResponse.model_validate(category, from_attributes=True),
    )


@router.put(
    "/{category_id}",
    response_model=CategoryDetailResponse,
    status_code=status.HTTP_200_OK,
    summary="Update category",
    description="""
Rename and/or recolor a category. An omitted color keeps the current one.

Posts and requests reference categories by name and are **not** updated on rename.
""",
)
def update_category(
    category_id: int,
    category_in: CategoryUpdate,
    db: Session = Depends(get_db),
) -> CategoryDetailResponse:
    category = category_service.update_category(
        db,
        category_id=category_id,
        name=category_in.name,
        color=category_in.color,
    )
    return CategoryDetailResponse(
        message="Category updated successfully",
        category=CategoryResponse.model_validate(category, from_attributes=True),
    )


@router.delete(
    "/{category_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete category",
    description="Delete a category. Fails while any post still references it.",
)
def delete_category(category_id: int, db: Session = Depends(get_db)) -> MessageResponse:
    category_service.delete_category(db, category_id=category_id)
    return MessageResponse(message="Category deleted successfully")
