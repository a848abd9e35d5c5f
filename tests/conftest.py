import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from config import Settings
from main import create_app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings():
    return Settings(
        mongodb_uri=None,
        mongodb_db="dentalapp_test",
        allowed_origins=["http://testserver"],
    )


@pytest.fixture
def mongo_client():
    return AsyncMongoMockClient()


@pytest.fixture
def app(settings, mongo_client):
    return create_app(settings, mongo_client=mongo_client)


@pytest.fixture
def client(app):
    with TestClient(app, base_url="http://testserver") as test_client:
        yield test_client


@pytest.fixture
def doctors(client):
    response = client.get("/doctors")
    assert response.status_code == 200
    return {doctor["name"]: doctor for doctor in response.json()}
