"""CRUD operations for TimelinePost."""

from typing import List, Optional, Tuple
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase, search_condition
from app.models.post import TimelinePost, TimelinePostStatus
from app.schemas.post import TimelinePostForm


# Default ordering: year desc, then creation desc (id breaks same-second ties)
DEFAULT_ORDER = (
    TimelinePost.year.desc(),
    TimelinePost.created_at.desc(),
    TimelinePost.id.desc(),
)


class CRUDTimelinePost(CRUDBase[TimelinePost, TimelinePostForm, TimelinePostForm]):
    """CRUD operations for TimelinePost."""
    
    def build_conditions(
        self,
        *,
        category: Optional[str] = None,
        status: Optional[str] = None,
        year: Optional[int] = None,
        search: Optional[str] = None,
    ) -> list:
        conditions = []
        if category:
            conditions.append(TimelinePost.category == category)
        if status:
            conditions.append(TimelinePost.status == status)
        if year is not None:
            conditions.append(TimelinePost.year == year)
        if search:
            conditions.append(search_condition(
                [TimelinePost.title, TimelinePost.description, TimelinePost.location],
                search,
            ))
        return conditions
    
    def get_filtered(
        self,
        db: Session,
        *,
        category: Optional[str] = None,
        status: Optional[str] = None,
        year: Optional[int] = None,
        search: Optional[str] = None,
        skip: int = 0,
        limit: int = 10,
    ) -> Tuple[List[TimelinePost], int]:
        """Get a page of posts in default ordering plus the total match count."""
        return self.get_page(
            db,
            conditions=self.build_conditions(
                category=category, status=status, year=year, search=search
            ),
            order_by=DEFAULT_ORDER,
            skip=skip,
            limit=limit,
        )
    
    def get_by_title_and_date(
        self,
        db: Session,
        *,
        title: str,
        date: str,
        exclude_id: Optional[int] = None
    ) -> Optional[TimelinePost]:
        """Get a post with the same (title, date), optionally ignoring one id."""
        stmt = select(TimelinePost).where(
            TimelinePost.title == title,
            TimelinePost.date == date,
        )
        if exclude_id is not None:
            stmt = stmt.where(TimelinePost.id != exclude_id)
        return db.scalars(stmt.limit(1)).first()
    
    def get_published_by_category(
        self,
        db: Session,
        *,
        category: str,
        limit: int = 10
    ) -> List[TimelinePost]:
        """Get published posts of one category in default ordering."""
        stmt = (
            select(TimelinePost)
            .where(
                TimelinePost.category == category,
                TimelinePost.status == TimelinePostStatus.PUBLISHED.value,
            )
            .order_by(*DEFAULT_ORDER)
            .limit(limit)
        )
        return list(db.scalars(stmt).all())
    
    def count_by_category(self, db: Session, category: str) -> int:
        """Live count of posts referencing a category by name."""
        return self.count(db, TimelinePost.category == category)
    
    def count_by_image(self, db: Session, image: str) -> int:
        return self.count(db, TimelinePost.image == image)


# Singleton instance
crud_timeline_post = CRUDTimelinePost(TimelinePost)
