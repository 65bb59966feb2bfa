"""Pytest configuration and shared fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from praiseboard.config import Settings
from praiseboard.server import create_app


# ============================================================================
# Application
# ============================================================================

@pytest.fixture
def settings():
    """Settings with a known secret and credential table."""
    return Settings(
        JWT_SECRET="test-secret-key",
        USERS={"nic": "praisecage!", "travolta": "thedevil666"},
    )


@pytest.fixture
async def app(settings):
    """Application with its lifespan running, so the praise store exists."""
    application = create_app(settings)
    async with application.router.lifespan_context(application):
        yield application


@pytest.fixture
def store(app):
    """The app-owned praise store."""
    return app.state.praise_store


# ============================================================================
# Clients
# ============================================================================

@pytest.fixture
async def client(app):
    """Create an async HTTP client for testing.

    The session cookie is Secure, so the client talks https.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="https://test") as ac:
        yield ac


@pytest.fixture
async def auth_client(client):
    """Client holding a valid session cookie."""
    response = await client.post(
        "/login",
        data={"username": "nic", "password": "praisecage!"},
    )
    assert response.status_code == 302
    return client
