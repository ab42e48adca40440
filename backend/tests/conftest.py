import asyncio
import os

os.environ.setdefault("FINNHUB_API_KEY", "test-finnhub-key")
os.environ.setdefault("ALPHA_VANTAGE_API_KEY", "test-alpha-key")

import httpx
import pytest
from fastapi.testclient import TestClient

from tickerfeed.main import app
from tickerfeed.providers.session import get_http_client


@pytest.fixture
def run_with_transport():
    """Run an async service function against a fake provider transport."""

    def _run(handler, func, *args, **kwargs):
        async def _main():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                return await func(client, *args, **kwargs)

        return asyncio.run(_main())

    return _run


@pytest.fixture
def api_client():
    """Build a TestClient whose outbound provider traffic goes to `handler`."""

    def _build(handler, raise_server_exceptions: bool = True) -> TestClient:
        async def _client():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                yield client

        app.dependency_overrides[get_http_client] = _client
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    yield _build
    app.dependency_overrides.clear()
