"""API test infrastructure — async httpx client against the ASGI app."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def app():
    from app.main import create_app

    application = create_app()

    # Reset rate limiter between tests
    from app.core.rate_limit import recommend_limiter
    recommend_limiter.reset()

    yield application


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ---------------------------------------------------------------------------
# Payload helpers
# ---------------------------------------------------------------------------

@pytest.fixture
def scenario_a_payload() -> list[dict]:
    """Scenario A household in wizard JSON form."""
    return [
        {"name": "LED Bulb", "power_watts": 10, "quantity": 10, "day_hours": 5, "night_hours": 0},
        {"name": "Fridge", "power_watts": 150, "quantity": 1, "day_hours": 12, "night_hours": 12},
    ]
