from __future__ import annotations

import logging

import httpx

from tickerfeed.config.settings import settings
from tickerfeed.errors import ProviderError
from tickerfeed.providers.session import fetch_json

logger = logging.getLogger(__name__)

_QUERY_PATH = "/query"
_SERIES_KEY = "Time Series (Daily)"
_CLOSE_KEY = "4. close"
# Alpha Vantage answers 200 with one of these keys when throttled or rejected.
_SENTINEL_KEYS = ("Error Message", "Note", "Information")


def _build_url() -> str:
    return f"{settings.providers.alpha_vantage_base_url.rstrip('/')}{_QUERY_PATH}"


def _parse_closes(symbol: str, series: dict) -> dict[str, float]:
    closes: dict[str, float] = {}
    for date_str, daily in series.items():
        try:
            closes[date_str] = float(daily[_CLOSE_KEY])
        except (KeyError, TypeError, ValueError):
            logger.warning("Skipping malformed daily entry %s for %s", date_str, symbol)
    return closes


async def fetch_daily_closes(client: httpx.AsyncClient, symbol: str) -> dict[str, float]:
    """Fetch the compact daily series and return closing prices keyed by ISO date."""
    api_key = settings.providers.alpha_vantage_api_key
    payload = await fetch_json(
        client,
        symbol,
        _build_url(),
        {
            "function": "TIME_SERIES_DAILY",
            "symbol": symbol,
            "outputsize": "compact",
            "apikey": api_key,
        },
        api_key,
    )
    if not isinstance(payload, dict):
        raise ProviderError(symbol, "Unexpected historical response")

    for key in _SENTINEL_KEYS:
        if payload.get(key):
            raise ProviderError(symbol, str(payload[key]))

    series = payload.get(_SERIES_KEY)
    if not isinstance(series, dict):
        raise ProviderError(symbol, "No historical data available")
    return _parse_closes(symbol, series)
