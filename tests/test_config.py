"""
Employee API — Settings Tests
===============================

What:  Tests for environment-driven configuration.
"""

import pytest
from pydantic import ValidationError

from employee_api.config import Settings


class TestDatabaseUrl:

    def test_url_built_from_parts(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.setenv("PASS", "p@ss/word")
        monkeypatch.setenv("DB_HOST", "db.internal")

        url = Settings(_env_file=None).sqlalchemy_url

        assert url.drivername == "postgresql+asyncpg"
        assert url.host == "db.internal"
        assert url.port == 5432
        assert url.username == "postgres"
        assert url.password == "p@ss/word"
        assert url.database == "companydb"

    def test_database_url_overrides_parts(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./other.db")

        url = Settings(_env_file=None).sqlalchemy_url

        assert url.get_backend_name() == "sqlite"
        assert url.database == "./other.db"


class TestValidation:

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_invalid_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_missing_password_reported(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.delenv("PASS", raising=False)
        monkeypatch.delenv("DB_PASSWORD", raising=False)

        with pytest.raises(ValueError, match="PASS is not set"):
            Settings(_env_file=None).validate_required_for_production()

    def test_password_present_passes(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.setenv("PASS", "secret")

        Settings(_env_file=None).validate_required_for_production()

    def test_cors_origins_split(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")

        assert Settings(_env_file=None).cors_origins_list == ["http://a.test", "http://b.test"]
