"""
Pytest fixtures for the product API. Every test starts from the three seeded products.
"""

from __future__ import annotations

import asyncio

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.dao.product_dao import product_dao
from app.main import app

API_KEY = settings.api_key


@pytest.fixture(autouse=True)
def reset_store():
    """Restore the shared in-memory store to the seed data around each test."""
    asyncio.run(product_dao.reset())
    yield
    asyncio.run(product_dao.reset())


@pytest.fixture
def anonymous_client():
    """TestClient that sends no API key."""
    return TestClient(app)


@pytest.fixture
def client():
    """TestClient that sends the configured API key on every request."""
    return TestClient(app, headers={settings.api_key_header: API_KEY})


@pytest.fixture
def valid_payload():
    return {
        "name": "Blender",
        "description": "Glass jar blender with 5 speeds",
        "price": 89.99,
        "category": "kitchen",
        "inStock": True,
    }
