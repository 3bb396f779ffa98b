"""
Movie API — Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures (function-scoped, created fresh for each test):
    ├── sample_movie_data: Creation payload used across test files
    ├── app: Fresh FastAPI application (its own empty store)
    └── test_client: HTTPX AsyncClient bound to `app`
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests
os.environ["CORS_ORIGINS"] = "http://testserver"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from movie_api.main import create_app


@pytest.fixture
def sample_movie_data():
    """Creation payload matching MovieCreate."""
    return {
        "title": "Test Movie",
        "year": 2023,
        "genres": ["Action", "test"],
    }


@pytest.fixture
def app():
    """
    A fresh FastAPI application per test.

    create_app() attaches a new MovieService, so state never leaks
    between tests.
    """
    return create_app()


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient configured to talk to the app without running a server.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
