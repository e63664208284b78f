"""Pytest configuration and fixtures for the API tests."""

import os
import tempfile
from collections.abc import Callable, Generator

# Point the app at a throwaway SQLite file before any app module is imported
_db_dir = tempfile.mkdtemp(prefix="pos-tests-")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_db_dir, "test_pos.db")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from database import Base, SessionLocal, engine  # noqa: E402
from main import app  # noqa: E402


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """
    Test client over a freshly created schema.

    Entering the client runs the app lifespan, which creates the tables and
    seeds the default admin.
    """
    Base.metadata.drop_all(bind=engine)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def db_session(client: TestClient) -> Generator[Session, None, None]:
    """Direct session for asserting on stored rows."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_product(client: TestClient) -> Callable[..., int]:
    """Creates a product through the API and returns its id."""

    def _make(name: str = "Tea", price: int = 100, quantity: int = 10) -> int:
        resp = client.post("/api/products", json={"name": name, "price": price, "quantity": quantity})
        assert resp.status_code == 200, resp.text
        return resp.json()["id"]

    return _make
