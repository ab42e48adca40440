from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from tickerfeed.errors import ProviderError
from tickerfeed.providers import finnhub
from tickerfeed.schemas.quotes import Quote
from tickerfeed.validation.validator import require_symbols

logger = logging.getLogger(__name__)

NO_DATA = "No data available"


def is_empty_quote(payload: dict[str, Any]) -> bool:
    # Finnhub answers unknown symbols with an all-zero quote instead of an error.
    return payload.get("c") == 0 and payload.get("h") == 0 and payload.get("l") == 0


def build_quote(symbol: str, payload: dict[str, Any]) -> Quote:
    if is_empty_quote(payload):
        logger.warning("No data available for %s", symbol)
        return Quote(symbol=symbol, error=NO_DATA)
    return Quote(
        symbol=symbol,
        current_price=payload.get("c"),
        change=payload.get("d"),
        change_percent=payload.get("dp"),
        high=payload.get("h"),
        low=payload.get("l"),
        open=payload.get("o"),
        previous_close=payload.get("pc"),
    )


async def fetch_quote(client: httpx.AsyncClient, symbol: str) -> Quote:
    try:
        payload = await finnhub.fetch_quote(client, symbol)
    except ProviderError as exc:
        logger.error("Failed to fetch quote for %s: %s", symbol, exc.message)
        return Quote(symbol=symbol, error=exc.message)
    return build_quote(symbol, payload)


async def fetch_quotes(client: httpx.AsyncClient, symbols: list[str] | None) -> list[Quote]:
    """Fetch one quote per symbol concurrently, preserving input order."""
    symbols = require_symbols(symbols)
    quotes = await asyncio.gather(*(fetch_quote(client, symbol) for symbol in symbols))
    return list(quotes)
