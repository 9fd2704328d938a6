"""CRUD operations package - exports singleton instances for all models."""

from .base import CRUDBase
from .category import crud_category
from .post_request import crud_post_request
from .post import crud_timeline_post


__all__ = [
    # Base
    "CRUDBase",
    # CRUD instances
    "crud_category",
    "crud_post_request",
    "crud_timeline_post",
]
