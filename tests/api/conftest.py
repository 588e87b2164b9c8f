"""API test fixtures - FastAPI test client over a fresh album per test.

Invariants:
    - Every test gets its own PhotoAlbum (get_album overridden)
    - Snapshot timestamps are pinned by the shared fixed clock
"""

import pytest
from httpx import ASGITransport, AsyncClient

from photoalbum.api.routes.album import get_album
from photoalbum.main import app


@pytest.fixture
async def client(album):
    """FastAPI test client with the album dependency overridden."""
    app.dependency_overrides[get_album] = lambda: album
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
