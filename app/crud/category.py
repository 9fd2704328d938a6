"""CRUD operations for TimelineCategory."""

from typing import List, Optional
from sqlalchemy import case, select, update
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.category import TimelineCategory
from app.schemas.category import CategoryCreate, CategoryUpdate


class CRUDCategory(CRUDBase[TimelineCategory, CategoryCreate, CategoryUpdate]):
    """CRUD operations for TimelineCategory."""
    
    def get_all_newest_first(self, db: Session) -> List[TimelineCategory]:
        """Get all categories, newest first."""
        stmt = select(TimelineCategory).order_by(
            TimelineCategory.created_at.desc(),
            TimelineCategory.id.desc(),
        )
        return list(db.scalars(stmt).all())
    
    def get_by_name(self, db: Session, name: str) -> Optional[TimelineCategory]:
        """Get category by exact (case-sensitive) name."""
        return self.get_by_field(db, "name", name)
    
    def get_by_name_excluding(
        self,
        db: Session,
        *,
        name: str,
        exclude_id: int
    ) -> Optional[TimelineCategory]:
        """Get another category that already owns ``name``."""
        stmt = (
            select(TimelineCategory)
            .where(TimelineCategory.name == name, TimelineCategory.id != exclude_id)
            .limit(1)
        )
        return db.scalars(stmt).first()
    
    def adjust_post_count(self, db: Session, *, name: str, delta: int) -> int:
        """Add ``delta`` to the cached post count of the named category, never below 0.
        
        Returns the number of categories matched (0 when the name is unknown).
        """
        new_count = TimelineCategory.post_count + delta
        stmt = (
            update(TimelineCategory)
            .where(TimelineCategory.name == name)
            .values(post_count=case((new_count < 0, 0), else_=new_count))
            .execution_options(synchronize_session=False)
        )
        try:
            result = db.execute(stmt)
            db.commit()
        except Exception:
            db.rollback()
            raise
        return result.rowcount


# Singleton instance
crud_category = CRUDCategory(TimelineCategory)
