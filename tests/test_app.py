from fastapi.testclient import TestClient

from config import Settings
from main import create_app


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == "Hello"


def test_cors_allows_configured_origin(client):
    response = client.options(
        "/doctors",
        headers={"Origin": "http://testserver", "Access-Control-Request-Method": "GET"},
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://testserver"


def test_cors_rejects_other_origin(client):
    response = client.options(
        "/doctors",
        headers={"Origin": "http://evil.example", "Access-Control-Request-Method": "GET"},
    )
    assert "access-control-allow-origin" not in response.headers


def test_lazy_mode_connects_on_first_request(mongo_client):
    settings = Settings(mongodb_uri=None, mongodb_db="lazy_test", lazy_connect=True)
    app = create_app(settings, mongo_client=mongo_client)

    with TestClient(app) as client:
        assert app.state.db.connected is False

        response = client.get("/doctors")

        assert response.status_code == 200
        assert len(response.json()) == 5
        assert app.state.db.connected is True


def test_lazy_mode_without_uri():
    settings = Settings(mongodb_uri=None, mongodb_db="lazy_test", lazy_connect=True)
    app = create_app(settings)

    with TestClient(app) as client:
        response = client.get("/doctors")

    assert response.status_code == 500
    assert response.json() == {"message": "Server error"}


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("MONGODB_URI", "mongodb://db.internal:27017")
    monkeypatch.setenv("MONGODB_DB", "clinic")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://clinic.example, http://localhost:3000")
    monkeypatch.delenv("MONGODB_LAZY_CONNECT", raising=False)

    settings = Settings.from_env()

    assert settings.mongodb_uri == "mongodb://db.internal:27017"
    assert settings.mongodb_db == "clinic"
    assert settings.lazy_connect is False
    assert settings.allowed_origins == ["https://clinic.example", "http://localhost:3000"]


def test_settings_default_uri_only_when_eager(monkeypatch):
    monkeypatch.delenv("MONGODB_URI", raising=False)

    monkeypatch.setenv("MONGODB_LAZY_CONNECT", "false")
    assert Settings.from_env().mongodb_uri == "mongodb://localhost:27017"

    monkeypatch.setenv("MONGODB_LAZY_CONNECT", "true")
    assert Settings.from_env().mongodb_uri is None
