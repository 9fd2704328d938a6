"""CRUD operations for `TimelinePostRequest` model."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from app.crud.base import CRUDBase, search_condition
from app.models.post_request import TimelinePostRequest
from app.schemas.post_request import PostRequestSubmit


class CRUDPostRequest(CRUDBase[TimelinePostRequest, PostRequestSubmit, PostRequestSubmit]):
    def build_conditions(
        self,
        *,
        status: Optional[str] = None,
        year: Optional[int] = None,
        search: Optional[str] = None,
    ) -> list:
        conditions = []
        if status:
            conditions.append(TimelinePostRequest.status == status)
        if year is not None:
            conditions.append(TimelinePostRequest.year == year)
        if search:
            conditions.append(search_condition(
                [
                    TimelinePostRequest.title,
                    TimelinePostRequest.description,
                    TimelinePostRequest.location,
                ],
                search,
            ))
        return conditions

    def get_filtered(
        self,
        db: Session,
        *,
        status: Optional[str] = None,
        year: Optional[int] = None,
        search: Optional[str] = None,
        skip: int = 0,
        limit: int = 10,
    ) -> Tuple[List[TimelinePostRequest], int]:
        """Get a page of requests, newest first, plus the total match count."""
        return self.get_page(
            db,
            conditions=self.build_conditions(status=status, year=year, search=search),
            order_by=[TimelinePostRequest.created_at.desc(), TimelinePostRequest.id.desc()],
            skip=skip,
            limit=limit,
        )

    def count_by_status(self, db: Session, status: str) -> int:
        return self.count(db, TimelinePostRequest.status == status)

    def count_by_image(self, db: Session, image: str) -> int:
        return self.count(db, TimelinePostRequest.image == image)

    def mark_reviewed(
        self,
        db: Session,
        *,
        db_obj: TimelinePostRequest,
        status: str,
        reviewed_by: str,
        review_notes: str,
    ) -> TimelinePostRequest:
        """Record the review decision on a request."""
        db_obj.status = status
        db_obj.reviewed_by = reviewed_by
        db_obj.review_notes = review_notes
        db_obj.reviewed_at = datetime.utcnow()
        
        try:
            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)
        except Exception:
            db.rollback()
            raise
        return db_obj


# Singleton instance
crud_post_request = CRUDPostRequest(TimelinePostRequest)
