import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.platform.config import Settings


@pytest.mark.parametrize(
    "url, expected",
    [
        ("postgresql://u:p@db:5432/app", "postgresql+asyncpg://u:p@db:5432/app"),
        ("postgres://u:p@db:5432/app", "postgresql+asyncpg://u:p@db:5432/app"),
        ("postgresql+asyncpg://u:p@db/app", "postgresql+asyncpg://u:p@db/app"),
        ("sqlite+aiosqlite:///./waitlist.db", "sqlite+aiosqlite:///./waitlist.db"),
    ],
)
def test_database_url_uses_async_driver(url, expected):
    assert Settings(DATABASE_URL=url).DATABASE_URL == expected


def test_dns_check_toggle_from_environment(monkeypatch):
    monkeypatch.setenv("ENABLE_DNS_CHECK", "true")
    monkeypatch.setenv("DNS_TIMEOUT_SECONDS", "1.5")

    settings = Settings()

    assert settings.ENABLE_DNS_CHECK is True
    assert settings.DNS_TIMEOUT_SECONDS == 1.5


def test_api_prefix_is_configurable(settings):
    app = create_app(settings.model_copy(update={"API_V1_PREFIX": "/api"}))
    with TestClient(app) as client:
        assert client.get("/api/health").status_code == 200
        response = client.post("/api/waitlist", json={"email": "user@example.com"})

    assert response.status_code == 201
