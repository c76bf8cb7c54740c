"""
Pytest configuration and shared fixtures for testing.

Provides reusable test fixtures:
- test_client: FastAPI TestClient for API integration tests
- clear_caches: resets memoized Easter dates and week info between tests
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# ruff: noqa: E402
from vecka.core.holidays import easter_sunday
from vecka.core.weeks import clear_week_cache
from vecka.main import app


@pytest.fixture(autouse=True)
def clear_caches():
    """Start every test with empty lru caches."""
    easter_sunday.cache_clear()
    clear_week_cache()
    yield


@pytest.fixture(scope="function")
def test_client():
    """
    Create FastAPI TestClient.

    Entering the client as a context manager runs the lifespan events.

    Yields:
        TestClient: FastAPI test client for API testing
    """
    with TestClient(app) as client:
        yield client
