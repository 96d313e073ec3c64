"""API test fixtures — FastAPI app served through httpx without a network.

Invariants:
    - Every test gets its own AsyncClient over ASGITransport
    - dependency_overrides are cleared after each test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from userhub.main import app


@pytest.fixture
async def client():
    """FastAPI test client bound to the application."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
