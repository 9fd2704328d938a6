"""FastAPI dependency functions for database access and pagination."""

from dataclasses import dataclass
from typing import Generator

from fastapi import Query
from sqlalchemy.orm import Session

from app.database import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    Dependency to get database session.
    
    Yields:
        Session: SQLAlchemy database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@dataclass
class Pagination:
    page: int
    limit: int


def get_pagination(
    page: int = Query(1, ge=1, description="Page number, starting at 1"),
    limit: int = Query(10, ge=1, description="Maximum number of items per page"),
) -> Pagination:
    """
    Dependency for offset pagination query parameters.

    A page past the last one is valid and returns an empty list.
    """
    return Pagination(page=page, limit=limit)


__all__ = [
    "get_db",
    "Pagination",
    "get_pagination",
]
