"""Shared domain building blocks."""

from .exceptions import DomainError, EntityNotFoundError, ValidationError

__all__ = [
    "DomainError",
    "EntityNotFoundError",
    "ValidationError",
]
