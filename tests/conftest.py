"""
Pytest configuration and fixtures for the API tests
"""
import os

# Settings are read at import time, so configure before importing the app
os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BETTER_AUTH_SECRET"] = "test-secret-key-for-librestock"
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from librestock.core.jwt import create_access_token
from librestock.database import Base, get_db
from librestock.main import app
from librestock.models import registry  # noqa: F401

API = "/api/v1"
TEST_USER_ID = "user-123"


@pytest.fixture(scope="function")
def engine():
    """Fresh in-memory database per test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()
    yield db
    db.close()


@pytest.fixture(scope="function")
def client(db_session):
    """Test client whose requests share the test database session"""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def auth_headers():
    token = create_access_token({"sub": TEST_USER_ID, "sid": "session-1"})
    return {"Authorization": f"Bearer {token}"}


def create_category(client, headers, name="Beverages", parent_id=None):
    payload = {"name": name}
    if parent_id:
        payload["parent_id"] = parent_id
    response = client.post(f"{API}/categories", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def create_product(client, headers, category_id, sku="SKU-001", **overrides):
    payload = {"sku": sku, "name": f"Product {sku}", "category_id": category_id}
    payload.update(overrides)
    response = client.post(f"{API}/products", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def create_location(client, headers, name="Main Warehouse", **overrides):
    payload = {"name": name}
    payload.update(overrides)
    response = client.post(f"{API}/locations", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()
