"""
Tests for environment-driven settings.
"""

from __future__ import annotations

import pytest

from blog_api.config import DatabaseSettings, ServerSettings, Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "DB_HOST",
        "DB_USER",
        "DB_PASSWORD",
        "DB_DATABASE",
        "DB_PORT",
        "DB_URL",
        "DB_DRIVER",
        "PORT",
        "SERVER__PORT",
    ):
        monkeypatch.delenv(name, raising=False)


class TestDatabaseSettings:
    def test_dsn_is_built_from_db_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_HOST", "db.internal")
        monkeypatch.setenv("DB_USER", "blog")
        monkeypatch.setenv("DB_PASSWORD", "s3cret")
        monkeypatch.setenv("DB_DATABASE", "red_social")
        monkeypatch.setenv("DB_PORT", "3307")

        dsn = DatabaseSettings().dsn

        assert dsn.drivername == "mysql+aiomysql"
        assert (dsn.host, dsn.port, dsn.database) == ("db.internal", 3307, "red_social")
        assert (dsn.username, dsn.password) == ("blog", "s3cret")

    def test_url_override_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_HOST", "ignored")
        monkeypatch.setenv("DB_URL", "sqlite+aiosqlite:///./blog.db")

        assert DatabaseSettings().dsn.drivername == "sqlite+aiosqlite"

    def test_invalid_port_is_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_PORT", "not-a-port")

        with pytest.raises(ValueError):
            DatabaseSettings()


class TestServerSettings:
    def test_default_port(self) -> None:
        assert ServerSettings().port == 3000

    def test_port_read_from_port_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8080")

        assert ServerSettings().port == 8080
        assert Settings().server.port == 8080
