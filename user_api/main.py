"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from user_api.config import configure_logging, get_settings
from user_api.database import dispose_engine, initialize_database, ping_database
from user_api.domain.common.exceptions import ValidationError
from user_api.exceptions import UserApiError
from user_api.infrastructure.common.middleware import request_logging_middleware
from user_api.infrastructure.common.routers import health
from user_api.infrastructure.common.schemas import ErrorResponse
from user_api.infrastructure.common.validation import to_validation_error
from user_api.infrastructure.users.routers import users

logger = structlog.get_logger(__name__)


def _error_body(message: str, details: dict[str, str] | None = None) -> dict[str, object]:
    return ErrorResponse(msg=message, details=details or None).model_dump(exclude_none=True)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Connect to the database on startup and release it on shutdown."""
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)
    logger.info(
        "app_startup",
        project=settings.PROJECT_NAME,
        version=settings.VERSION,
        environment=settings.ENVIRONMENT,
    )

    initialize_database(settings)
    # Fail fast when the database is unreachable
    ping_database()
    logger.info("database_connected", driver=settings.DB_DRIVER)

    yield

    dispose_engine()
    logger.info("app_shutdown")


def create_app() -> FastAPI:
    """Build the application with middleware, exception handlers and routers."""
    settings = get_settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="CRUD API for users with server-computed age",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials="*" not in settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_logging_middleware)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        error = to_validation_error(exc.errors())
        return await validation_error_handler(request, error)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        logger.info(
            "request_validation_failed", path=request.url.path, errors=exc.errors or None
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body(exc.message, exc.errors),
        )

    @app.exception_handler(UserApiError)
    async def user_api_error_handler(request: Request, exc: UserApiError) -> JSONResponse:
        logger.error("request_error_handled", path=request.url.path, error=exc.message)
        return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        # Never leak internals to the client
        logger.error("unhandled_exception", path=request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("Internal server error"),
        )

    app.include_router(health.router)
    app.include_router(users.router, prefix=settings.API_V1_PREFIX)

    return app


app = create_app()
