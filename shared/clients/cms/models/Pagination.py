from typing import Generic, TypeVar

from pydantic import BaseModel

from shared.clients.cms.pagination import total_pages as count_pages

T = TypeVar("T")


class PaginatedResult(BaseModel, Generic[T]):
    """
    One page of a collection together with the collection's totals.
    """
    items: list[T] = []
    total: int = 0
    total_pages: int = 0

    @classmethod
    def from_total(cls, items: list[T], total: int, page_size: int) -> "PaginatedResult[T]":
        """Build a result whose total_pages is ceil(total / page_size)."""
        return cls(items=items, total=total, total_pages=count_pages(total, page_size))


class SlugEntry(BaseModel):
    """
    A slug returned by the bulk enumeration queries; modified is set for sitemap listings.
    """
    slug: str
    modified: str | None = None
