"""Engine and per-request session management."""

from collections.abc import Generator
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from user_api.config import Settings, get_settings

# create_engine() keyword arguments for each DB_DRIVER
ENGINE_OPTIONS: dict[str, dict[str, Any]] = {
    # One shared connection, usable from FastAPI's worker threads
    "sqlite": {
        "connect_args": {"check_same_thread": False},
        "poolclass": StaticPool,
    },
    "postgres": {
        "pool_size": 10,
        "max_overflow": 20,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    },
}


class Base(DeclarativeBase):
    """Declarative base for ORM models."""


_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def engine_options(settings: Settings) -> dict[str, Any]:
    """
    create_engine() keyword arguments for ``settings``.

    PostgreSQL sessions get a server-side ``statement_timeout`` so a store
    call cannot outlive a request that has already been abandoned.
    """
    options = dict(ENGINE_OPTIONS[settings.DB_DRIVER])
    if settings.DB_DRIVER == "postgres" and settings.DB_STATEMENT_TIMEOUT_MS:
        options["connect_args"] = {
            **options.get("connect_args", {}),
            "options": f"-c statement_timeout={settings.DB_STATEMENT_TIMEOUT_MS}",
        }
    return options


def create_db_engine(settings: Settings) -> Engine:
    """Build an engine for ``settings.DATABASE_URL`` with the driver's pool options."""
    return create_engine(settings.DATABASE_URL, **engine_options(settings))


def initialize_database(settings: Settings) -> None:
    """Create the process-wide engine and session factory."""
    global _engine, _session_factory  # noqa: PLW0603

    _engine = create_db_engine(settings)
    _session_factory = sessionmaker(bind=_engine, autoflush=False, expire_on_commit=False)


def get_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("Database engine is not initialized; call initialize_database()")
    return _engine


def ping_database() -> None:
    """Run ``SELECT 1`` so an unreachable database fails startup."""
    with get_engine().connect() as connection:
        connection.execute(text("SELECT 1"))


def dispose_engine() -> None:
    """Close pooled connections; called on shutdown."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is None:
        return
    _engine.dispose()
    _engine = None
    _session_factory = None


def get_session_factory(
    settings: Annotated[Settings, Depends(get_settings)],
) -> sessionmaker[Session]:
    """Return the session factory, initializing lazily outside the app lifespan."""
    if _session_factory is None:
        initialize_database(settings)
    if _session_factory is None:
        raise RuntimeError("Database session factory could not be created")
    return _session_factory


def get_db(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> Generator[Session, None, None]:
    """Yield one session per request.

    Closing the session rolls back anything the request did not commit.
    """
    with session_factory() as session:
        yield session


DatabaseSession = Annotated[Session, Depends(get_db)]
