"""
pytest configuration and fixtures.

Every test gets its own settings, record store and application, so records
created in one test never leak into another.
"""

from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.src.config import Settings
from api.src.main import create_app
from api.src.repositories.memory_store import RecordStore


@pytest.fixture
def settings() -> Settings:
    """Default test settings, ignoring any local .env file."""
    return Settings(_env_file=None, environment="development", log_format="text")


@pytest.fixture
def store() -> RecordStore:
    """Store holding the sample users and tasks."""
    return RecordStore.seeded()


@pytest.fixture
def app(settings: Settings, store: RecordStore) -> FastAPI:
    """Application serving the test store."""
    return create_app(settings, store)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Test client with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client
