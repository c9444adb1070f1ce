"""Application common module."""

from .pagination import PaginatedResult, Pagination

__all__ = [
    "PaginatedResult",
    "Pagination",
]
