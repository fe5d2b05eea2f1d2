"""
Test configuration and fixtures
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from app.db.base import Base
from app.db.get_db import get_db
from app.models.shop import Shop  # noqa: F401 - registers the table
from app.models.product import Product  # noqa: F401 - registers the table

# Create in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database session for each test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override"""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    # Keep the lifespan hook away from the real database
    with patch("main.init_db"):
        app.dependency_overrides[get_db] = override_get_db
        with TestClient(app) as test_client:
            yield test_client
        app.dependency_overrides.clear()


@pytest.fixture
def shop_payload():
    return {"name": "TechStore", "location": "123 Main Street"}


@pytest.fixture
def product_payload():
    """Product body without shop_id; tests add the id of a shop they created."""
    return {
        "name": "Laptop",
        "description": "High-performance laptop",
        "price": 1200,
        "category": "Electronics",
    }
