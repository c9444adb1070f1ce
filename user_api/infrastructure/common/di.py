from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from user_api.database import DatabaseSession

T = TypeVar("T")


def inject_service(provider: Provider[T], db_kwarg: str = "db") -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    The request-scoped session is passed to the provider call as a
    context keyword (``db_kwarg``, e.g. ``user_repository__db``) instead of
    overriding ``container.db``, so concurrent requests never share a session.
    """

    def dependency(db: DatabaseSession) -> T:
        return provider(**{db_kwarg: db})

    return dependency
