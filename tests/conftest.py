# tests/conftest.py
import mongomock
import pytest
from fastapi.testclient import TestClient
from pawmart.db import get_db
from pawmart.main import app

@pytest.fixture
def db():
    # fresh in-memory database per test
    return mongomock.MongoClient()["pawmartDB"]

@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def listing():
    return {
        "name": "Beagle Puppy",
        "category": "Pets",
        "price": 0,
        "location": "Dhaka",
        "description": "Curious 10-week-old beagle.",
        "image": "https://example.com/beagle.jpg",
        "email": "owner@pawmart.com",
        "date": "2025-12-01",
    }
