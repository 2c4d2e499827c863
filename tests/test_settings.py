import pytest

from store_catalog.settings import Settings


def test_async_database_url_rewrites_plain_postgres_scheme():
    settings = Settings(database_url="postgresql://u:p@db:5432/catalog")
    assert settings.async_database_url == "postgresql+asyncpg://u:p@db:5432/catalog"


def test_async_database_url_keeps_asyncpg_scheme():
    url = "postgresql+asyncpg://u:p@db:5432/catalog"
    assert Settings(database_url=url).async_database_url == url


@pytest.mark.parametrize(
    "raw, expected",
    [
        ('["https://a.com", "http://localhost:3000"]', ["https://a.com", "http://localhost:3000"]),
        ("https://a.com, http://localhost:3000", ["https://a.com", "http://localhost:3000"]),
        ("", []),
    ],
)
def test_cors_origins_parsing(monkeypatch: pytest.MonkeyPatch, raw: str, expected: list[str]):
    monkeypatch.setenv("CORS_ORIGINS", raw)
    assert Settings().cors_origins == expected


def test_page_size_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("DEFAULT_PAGE_SIZE", raising=False)
    monkeypatch.delenv("MAX_PAGE_SIZE", raising=False)
    settings = Settings()
    assert settings.default_page_size == 10
    assert settings.max_page_size == 100
