"""Category registry: CRUD over timeline categories and their cached post counts."""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.crud import crud_category, crud_timeline_post
from app.models.category import DEFAULT_CATEGORY_COLOR, TimelineCategory
from app.utils.validators import clean_text, require_text

logger = logging.getLogger(__name__)


NAME_REQUIRED = "Category name is required"
NAME_TAKEN = "A category with this name already exists"
CATEGORY_NOT_FOUND = "Category not found"
CATEGORY_IN_USE = "This category is used by posts and cannot be deleted"


class CategoryService:
    """
    Service for managing timeline categories.

    Categories are referenced by posts and requests through their name, not
    their id. Renaming a category does not update those references.
    """

    def list_categories(self, db: Session) -> List[TimelineCategory]:
        """All categories, newest first."""
        return crud_category.get_all_newest_first(db)

    def get_category(self, db: Session, category_id: int) -> TimelineCategory:
        category = crud_category.get(db, category_id)
        if not category:
            raise NotFoundError(CATEGORY_NOT_FOUND)
        return category

    def create_category(
        self,
        db: Session,
        *,
        name: Optional[str],
        color: Optional[str] = None,
    ) -> TimelineCategory:
        """
        Create a category with a post count of 0.

        Raises:
            ValidationError: name is missing or blank
            ConflictError: another category has the same trimmed name
        """
        name = require_text(name, NAME_REQUIRED)

        if crud_category.get_by_name(db, name):
            raise ConflictError(NAME_TAKEN)

        try:
            category = crud_category.create(
                db,
                obj_in={
                    "name": name,
                    "color": clean_text(color, DEFAULT_CATEGORY_COLOR),
                    "post_count": 0,
                },
            )
        except IntegrityError:
            raise ConflictError(NAME_TAKEN)

        logger.info(f"Category created: id={category.id}, name={category.name}")
        return category

    def update_category(
        self,
        db: Session,
        *,
        category_id: int,
        name: Optional[str],
        color: Optional[str] = None,
    ) -> TimelineCategory:
        """
        Rename and/or recolor a category. An omitted color keeps the current one.

        Existing posts keep referencing the old name.
        """
        name = require_text(name, NAME_REQUIRED)
        category = self.get_category(db, category_id)

        if crud_category.get_by_name_excluding(db, name=name, exclude_id=category_id):
            raise ConflictError(NAME_TAKEN)

        old_name = category.name
        try:
            category = crud_category.update(
                db,
                db_obj=category,
                obj_in={"name": name, "color": clean_text(color, category.color)},
            )
        except IntegrityError:
            raise ConflictError(NAME_TAKEN)

        if old_name != name:
            logger.warning(
                f"Category {category_id} renamed from '{old_name}' to '{name}'; "
                f"posts referencing '{old_name}' are not updated"
            )
        return category

    def delete_category(self, db: Session, *, category_id: int) -> None:
        """
        Delete a category that no post references.

        The check counts live posts by name; the cached ``post_count`` is not used.
        """
        category = self.get_category(db, category_id)

        if crud_timeline_post.count_by_category(db, category.name) > 0:
            raise ConflictError(CATEGORY_IN_USE)

        if not crud_category.delete(db, id=category_id):
            raise NotFoundError(CATEGORY_NOT_FOUND)
        logger.info(f"Category deleted: id={category_id}")

    def require_category(self, db: Session, name: str) -> TimelineCategory:
        """Category referenced by a post or request; ValidationError when it does not exist."""
        category = crud_category.get_by_name(db, name)
        if not category:
            raise ValidationError(CATEGORY_NOT_FOUND)
        return category

    def adjust_post_count(self, db: Session, *, name: str, delta: int) -> None:
        """
        Add ``delta`` to the cached post count of a category.

        Not transactional with the post write that triggered it. Callers run
        it through ``SideEffectLog.attempt`` so a failure is reported, not
        rolled back.
        """
        matched = crud_category.adjust_post_count(db, name=name, delta=delta)
        if not matched:
            raise LookupError(f"no category named '{name}'")
        logger.debug(f"Category '{name}' post count adjusted by {delta}")


# Singleton instance
category_service = CategoryService()
