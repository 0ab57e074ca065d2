"""Pytest configuration and fixtures."""

import os
from typing import AsyncGenerator

# Keep the rate limiter out of the way of the API tests
os.environ.setdefault("RATE_LIMIT_REQUESTS", "100000")

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from pathwalker.main import app
from pathwalker.services.session_service import SessionService, get_session_service


@pytest.fixture
def session_service() -> SessionService:
    """A fresh session service per test."""
    return SessionService(max_sessions=10)


@pytest_asyncio.fixture(scope="function")
async def client(session_service) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    app.dependency_overrides[get_session_service] = lambda: session_service

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
