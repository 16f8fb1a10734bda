"""Common response models."""

from __future__ import annotations

import math
from typing import Any, Generic, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

T = TypeVar("T")


class ApiModel(BaseModel):
    """Base for response records; unknown backend fields are kept, not rejected."""

    model_config = ConfigDict(extra="allow")


class ErrorBody(BaseModel):
    """Standard error response from the API."""

    message: str
    errors: dict[str, str] | None = None


class Paginated(BaseModel, Generic[T]):
    """Paginated API response envelope.

    Format: ``{"data": [...], "limit", "current_page", "total_count",
    "total_pages", "has_next", "has_prev"}``. Derived fields missing from the
    payload are computed from ``total_count``, ``limit`` and ``current_page``.
    """

    model_config = ConfigDict(populate_by_name=True)

    data: list[T] = Field(default_factory=list)
    limit: int
    current_page: int = 1
    total_count: int = 0
    total_pages: int = 0
    has_next: bool = False
    has_previous: bool = Field(
        default=False,
        validation_alias=AliasChoices("has_previous", "has_prev"),
    )

    @model_validator(mode="before")
    @classmethod
    def _derive_page_fields(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        values = dict(values)
        limit = values.get("limit")
        total = values.get("total_count")
        page = values.get("current_page", 1)
        if isinstance(limit, int) and limit > 0 and isinstance(total, int):
            values.setdefault("total_pages", math.ceil(total / limit))
        total_pages = values.get("total_pages")
        if isinstance(total_pages, int) and isinstance(page, int):
            values.setdefault("has_next", page < total_pages)
        if isinstance(page, int) and "has_prev" not in values:
            values.setdefault("has_previous", page > 1)
        return values

    @classmethod
    def build(
        cls, data: list[T], page: int, total_count: int, limit: int,
    ) -> Paginated[T]:
        total_pages = math.ceil(total_count / limit) if limit > 0 else 0
        return cls(
            data=data,
            limit=limit,
            current_page=page,
            total_count=total_count,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_previous=page > 1,
        )
