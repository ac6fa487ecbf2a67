"""
Pytest fixtures: an application backed by a temporary SQLite database
and a test client bound to it.
"""

from typing import Dict, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from product_pricing_api.app.core.config import Settings
from product_pricing_api.app.core.db import Database
from product_pricing_api.app.main import create_app

TEST_SECRET = "test-secret"


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a fresh database file; minimum bcrypt cost."""
    return Settings(
        database_url=str(tmp_path / "pricing.db"),
        jwt_secret=TEST_SECRET,
        bcrypt_rounds=4,
        log_level="WARNING",
    )


@pytest.fixture
def db(settings: Settings) -> Iterator[Database]:
    database = Database(settings.database_url)
    database.connect()
    yield database
    database.close()


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    # Entering the client runs the lifespan hook, which opens the database.
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_credentials() -> Dict[str, str]:
    return {"username": "admin", "password": "SecurePass123!"}


@pytest.fixture
def auth_headers(client: TestClient, sample_credentials: Dict[str, str]) -> Dict[str, str]:
    assert client.post("/api/register", json=sample_credentials).status_code == 201
    response = client.post("/api/login", json=sample_credentials)
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def sample_product() -> Dict[str, object]:
    return {
        "name": "iPhone 15 Pro",
        "capacity": "256GB",
        "color": "Black Titanium",
        "code": "A2848",
        "battery": "96%",
        "condition": "Used",
        "sellingPrice": 899.0,
        "purchasePrice": 700.0,
        "source": "Trade-in",
    }
