"""Shared response pieces for the Timeline API."""

import math
from dataclasses import dataclass
from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema serialised with camelCase keys (``imageUrl``, ``totalPages``, ...)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(CamelModel):
    """Plain success envelope with a human-readable message."""
    success: bool = True
    message: str
    warnings: List[str] = []

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "success": True,
            "message": "Post deleted successfully",
            "warnings": [],
        }
    })


class ErrorResponse(CamelModel):
    success: bool = False
    message: str


def calculate_total_pages(total: int, limit: int) -> int:
    """ceil(total / limit); 0 when nothing matches."""
    if limit <= 0:
        return 0
    return math.ceil(total / limit)


@dataclass
class PagedResult(Generic[T]):
    """One page of results plus the numbers needed for offset pagination."""

    items: List[T]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return calculate_total_pages(self.total, self.limit)
