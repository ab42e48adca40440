from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Any

import httpx

from tickerfeed.config.settings import settings
from tickerfeed.errors import ProviderError


async def get_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """FastAPI dependency yielding an outbound client scoped to one request."""
    timeout = httpx.Timeout(settings.providers.request_timeout_seconds)
    async with httpx.AsyncClient(timeout=timeout) as client:
        yield client


def _redact(message: str, secret: str) -> str:
    if secret:
        return message.replace(secret, "***")
    return message


async def fetch_json(
    client: httpx.AsyncClient,
    symbol: str,
    url: str,
    params: dict[str, str],
    secret: str,
) -> Any:
    try:
        response = await client.get(url, params=params)
    except httpx.HTTPError as exc:
        message = str(exc) or exc.__class__.__name__
        raise ProviderError(symbol, _redact(message, secret)) from exc

    if not response.is_success:
        raise ProviderError(symbol, f"Failed to fetch: {response.status_code}")

    try:
        return response.json()
    except ValueError as exc:
        raise ProviderError(symbol, "Invalid JSON response") from exc
