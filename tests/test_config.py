"""Settings: database URLs for the app and for migrations."""

from irontrack.core.config import Settings


def test_override_url_drops_async_driver_for_migrations():
    settings = Settings(database_url_override="sqlite+aiosqlite:///./irontrack.db")
    assert settings.async_database_url == "sqlite+aiosqlite:///./irontrack.db"
    assert settings.database_url == "sqlite:///./irontrack.db"


def test_postgres_urls_from_parts():
    settings = Settings(
        database_url_override="",
        database_user="lifter",
        database_password="p@ss",
        database_host="db",
        database_name="irontrack",
        database_ssl_mode="require",
    )
    assert settings.database_url == "postgresql://lifter:p%40ss@db:5432/irontrack?sslmode=require"
    assert settings.async_database_url == "postgresql+asyncpg://lifter:p%40ss@db:5432/irontrack?ssl=require"
