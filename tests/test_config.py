"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from user_api.config import Settings


class TestSettings:
    """Test suite for Settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ("DATABASE_URL", "DB_DRIVER", "ENVIRONMENT", "SERVER_PORT"):
            monkeypatch.delenv(key, raising=False)

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.SERVER_PORT == 3000
        assert settings.DB_DRIVER == "postgres"
        assert settings.ENVIRONMENT == "development"
        assert settings.API_V1_PREFIX == "/api/v1"

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SERVER_PORT", "8080")
        monkeypatch.setenv("DATABASE_URL", "sqlite:///./users.db")
        monkeypatch.setenv("DB_DRIVER", "sqlite")

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.SERVER_PORT == 8080
        assert settings.DATABASE_URL == "sqlite:///./users.db"

    def test_postgres_scheme_is_normalized(self) -> None:
        settings = Settings(
            DATABASE_URL="postgres://u:p@db:5432/users",
            DB_DRIVER="postgres",
            _env_file=None,  # type: ignore[call-arg]
        )
        assert settings.DATABASE_URL == "postgresql://u:p@db:5432/users"

    def test_driver_specific_url_scheme_is_accepted(self) -> None:
        settings = Settings(
            DATABASE_URL="postgresql+psycopg2://u:p@db/users",
            DB_DRIVER="postgres",
            _env_file=None,  # type: ignore[call-arg]
        )
        assert settings.DATABASE_URL.startswith("postgresql+psycopg2://")

    def test_empty_database_url_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(DATABASE_URL="  ", _env_file=None)  # type: ignore[call-arg]

    def test_driver_must_match_url(self) -> None:
        with pytest.raises(ValidationError, match="does not match DB_DRIVER"):
            Settings(
                DATABASE_URL="sqlite:///:memory:",
                DB_DRIVER="postgres",
                _env_file=None,  # type: ignore[call-arg]
            )

    def test_unknown_driver_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(
                DATABASE_URL="mysql://u:p@db/users",
                DB_DRIVER="mysql",  # type: ignore[arg-type]
                _env_file=None,  # type: ignore[call-arg]
            )
