"""Run the API with uvicorn: ``python -m user_api``."""

import uvicorn

from user_api.config import get_settings


def main() -> None:
    """Serve the application on SERVER_HOST:SERVER_PORT."""
    settings = get_settings()
    config = uvicorn.Config(
        "user_api.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        log_level=(settings.LOG_LEVEL or "info").lower(),
        # structlog owns log formatting
        log_config=None,
    )
    uvicorn.Server(config).run()


if __name__ == "__main__":
    main()
