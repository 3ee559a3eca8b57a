from datetime import datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel

from tenderhub.models.base import ensure_utc

UtcDatetime = Annotated[datetime, AfterValidator(ensure_utc)]


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(page=page, limit=limit, total=total, pages=(total + limit - 1) // limit)


class SearchPagination(BaseModel):
    page: int
    limit: int
    has_more: bool


def ok(data: Any) -> dict:
    """Wraps a payload into the success envelope."""
    return {"success": True, "data": data}


def fail(message: str) -> dict:
    return {"success": False, "error": {"message": message}}


def reject_null(value):
    """For partial updates: a field may be omitted but not cleared."""
    if value is None:
        raise ValueError("must not be null")
    return value
