"""
Pagination types for list operations.

Caller-supplied page numbers are clamped rather than rejected:

    pagination = Pagination.normalize(page=0, page_size=500)
    # Pagination(page=1, page_size=100)
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
# Maximum allowed page size
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class Pagination:
    """
    Normalized page window over the user collection.

    Attributes:
        page: Current page number (1-indexed)
        page_size: Number of items per page, 1..MAX_PAGE_SIZE
    """

    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("Page must be at least 1")
        if self.page_size < 1:
            raise ValueError("Page size must be at least 1")
        if self.page_size > MAX_PAGE_SIZE:
            raise ValueError(f"Page size cannot exceed {MAX_PAGE_SIZE}")

    @classmethod
    def normalize(cls, page: int | None, page_size: int | None) -> "Pagination":
        """
        Clamp raw page inputs into a valid Pagination.

        page < 1 becomes 1, page_size < 1 becomes DEFAULT_PAGE_SIZE and
        page_size > MAX_PAGE_SIZE becomes MAX_PAGE_SIZE. Missing values
        take the defaults.
        """
        if page is None or page < 1:
            page = DEFAULT_PAGE
        if page_size is None or page_size < 1:
            page_size = DEFAULT_PAGE_SIZE
        page_size = min(page_size, MAX_PAGE_SIZE)
        return cls(page=page, page_size=page_size)

    @property
    def offset(self) -> int:
        """Index of the first item on this page."""
        return (self.page - 1) * self.page_size

    def slice(self, items: Sequence[T]) -> list[T]:
        """Return this page's window of an in-memory sequence.

        Both ends are clamped to the sequence length, so a page past the
        end is empty rather than an error.
        """
        start = min(self.offset, len(items))
        end = min(start + self.page_size, len(items))
        return list(items[start:end])


def total_pages(total: int, page_size: int) -> int:
    """Ceiling of total / page_size using integer arithmetic."""
    pages = total // page_size
    if total % page_size > 0:
        pages += 1
    return pages


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """
    One page of items plus the counts a client needs to page further.

    Attributes:
        items: List of items for the current page
        total: Total number of items across all pages
        pagination: The normalized pagination parameters used
    """

    items: list[T]
    total: int
    pagination: Pagination

    @property
    def page(self) -> int:
        """Current page number."""
        return self.pagination.page

    @property
    def page_size(self) -> int:
        """Number of items per page."""
        return self.pagination.page_size

    @property
    def total_pages(self) -> int:
        """Total number of pages."""
        return total_pages(self.total, self.pagination.page_size)
