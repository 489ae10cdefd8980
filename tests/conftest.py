"""
Test configuration and fixtures for the waitlist API.

Every test gets its own SQLite file and its own application instance, so no
state leaks between tests. The MX lookup is off unless a test turns it on.
"""

import os
import tempfile
from typing import Generator

from dotenv import load_dotenv

load_dotenv()

# Must be set before anything under app/ is imported
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{tempfile.mktemp(suffix='.db')}"
os.environ["ENVIRONMENT"] = "test"
os.environ["ENABLE_DNS_CHECK"] = "false"
os.environ["DB_CREATE_SCHEMA"] = "true"
os.environ["LOG_DIR"] = ""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.main import create_app
from app.platform.config import Settings
from tests.fakes import FakeMXResolver, InMemoryWaitlistRepository


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'waitlist.db'}",
        ENVIRONMENT="test",
        ENABLE_DNS_CHECK=False,
        DB_CREATE_SCHEMA=True,
        LOG_DIR="",
    )


@pytest.fixture
def test_app(settings) -> FastAPI:
    """Create FastAPI test application."""
    return create_app(settings)


@pytest.fixture(scope="function")
def client(test_app) -> Generator[TestClient, None, None]:
    """
    Test client backed by a real (SQLite) database. Entering the client runs
    the lifespan, which creates the schema.
    """
    with TestClient(test_app) as test_client:
        yield test_client


@pytest.fixture
def memory_repository() -> InMemoryWaitlistRepository:
    return InMemoryWaitlistRepository()


@pytest.fixture
def fake_resolver() -> FakeMXResolver:
    return FakeMXResolver()
