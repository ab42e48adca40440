from __future__ import annotations

import datetime
from typing import Any

import httpx

from tickerfeed.config.settings import settings
from tickerfeed.errors import ProviderError
from tickerfeed.providers.session import fetch_json

_QUOTE_PATH = "/quote"
_NEWS_PATH = "/company-news"
_QUOTE_FIELDS = ("c", "d", "dp", "h", "l", "o", "pc")


def _build_url(path: str) -> str:
    return f"{settings.providers.finnhub_base_url.rstrip('/')}{path}"


async def fetch_quote(client: httpx.AsyncClient, symbol: str) -> dict[str, Any]:
    api_key = settings.providers.finnhub_api_key
    payload = await fetch_json(
        client,
        symbol,
        _build_url(_QUOTE_PATH),
        {"symbol": symbol, "token": api_key},
        api_key,
    )
    if not isinstance(payload, dict):
        raise ProviderError(symbol, "Unexpected quote response")
    if payload.get("error"):
        raise ProviderError(symbol, str(payload["error"]))
    for field in _QUOTE_FIELDS:
        value = payload.get(field)
        if value is not None and (isinstance(value, bool) or not isinstance(value, (int, float))):
            raise ProviderError(symbol, "Unexpected quote response")
    return payload


async def fetch_company_news(
    client: httpx.AsyncClient,
    symbol: str,
    start_date: datetime.date,
    end_date: datetime.date,
) -> list[Any]:
    api_key = settings.providers.finnhub_api_key
    payload = await fetch_json(
        client,
        symbol,
        _build_url(_NEWS_PATH),
        {
            "symbol": symbol,
            "from": start_date.isoformat(),
            "to": end_date.isoformat(),
            "token": api_key,
        },
        api_key,
    )
    if isinstance(payload, dict) and payload.get("error"):
        raise ProviderError(symbol, str(payload["error"]))
    if not isinstance(payload, list):
        raise ProviderError(symbol, "Unexpected news response")
    return payload
