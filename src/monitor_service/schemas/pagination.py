"""Pagination schemas for offset-based pagination."""

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")

# Largest OFFSET a BIGINT bind parameter can carry
MAX_OFFSET = 2**63 - 1


class Page(BaseModel, Generic[T]):
    """Generic paginated response with page/per_page metadata.

    `total_count` is the size of the whole filtered result set, not of `items`.
    """

    page: int = Field(description="1-based page number")
    per_page: int = Field(description="Maximum number of items per page")
    page_count: int = Field(description="Number of pages for total_count items")
    total_count: int = Field(description="Total number of matching items")
    items: list[T]


@dataclass(frozen=True)
class PageRequest:
    """Normalized page/per_page request with derived offset and limit."""

    page: int
    per_page: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        return self.per_page

    def wrap(self, items: list[T], total_count: int) -> Page[T]:
        """Wrap one page of results with paging metadata."""
        return Page(
            page=self.page,
            per_page=self.per_page,
            page_count=page_count(total_count, self.per_page),
            total_count=total_count,
            items=items,
        )


def normalize_page_request(
    page: int | None,
    per_page: int | None,
    default_page_size: int,
    max_page_size: int,
) -> PageRequest:
    """Clamp raw query parameters to a usable page request.

    Pages below 1 become 1; a missing or non-positive per_page falls back to
    `default_page_size`; per_page is capped at `max_page_size`. Pages whose
    offset would overflow MAX_OFFSET are pulled back to the last page that
    still fits, which is always empty.
    """
    if page is None or page < 1:
        page = 1
    if per_page is None or per_page <= 0:
        per_page = default_page_size
    if per_page > max_page_size:
        per_page = max_page_size
    last_page = MAX_OFFSET // per_page + 1
    if page > last_page:
        page = last_page
    return PageRequest(page=page, per_page=per_page)


def page_count(total_count: int, per_page: int) -> int:
    """Number of pages needed to hold `total_count` items."""
    if total_count <= 0:
        return 0
    return math.ceil(total_count / per_page)
