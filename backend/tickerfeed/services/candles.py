from __future__ import annotations

import asyncio
import datetime
import logging

import httpx

from tickerfeed.config.settings import settings
from tickerfeed.errors import ProviderError
from tickerfeed.providers import alpha_vantage, finnhub
from tickerfeed.schemas.candles import Candle, CandleSeries
from tickerfeed.validation.validator import require_symbols

logger = logging.getLogger(__name__)


def utc_today() -> datetime.date:
    return datetime.datetime.now(datetime.UTC).date()


def build_candles(closes: dict[str, float], window: int) -> list[Candle]:
    """Keep the `window` most recent dates, oldest first."""
    dates = sorted(closes)[-window:] if window > 0 else []
    return [Candle(date=date_str, price=closes[date_str]) for date_str in dates]


def overlay_realtime(candles: list[Candle], price: float, today: str) -> list[Candle]:
    # Plain string match: a provider trading day that differs from the UTC
    # date appends instead of overwriting.
    if candles and candles[-1].date == today:
        candles[-1] = Candle(date=today, price=price)
    else:
        candles.append(Candle(date=today, price=price))
    return candles


def _realtime_price(symbol: str, quote: object) -> float | None:
    if isinstance(quote, ProviderError):
        logger.warning("Skipping realtime overlay for %s: %s", symbol, quote.message)
        return None
    if not isinstance(quote, dict):
        return None
    price = quote.get("c")
    if not isinstance(price, (int, float)) or price == 0:
        return None
    return float(price)


async def fetch_candle_series(
    client: httpx.AsyncClient, symbol: str, today: datetime.date
) -> CandleSeries:
    history, quote = await asyncio.gather(
        alpha_vantage.fetch_daily_closes(client, symbol),
        finnhub.fetch_quote(client, symbol),
        return_exceptions=True,
    )
    for result in (history, quote):
        if isinstance(result, BaseException) and not isinstance(result, ProviderError):
            raise result

    if isinstance(history, ProviderError):
        logger.error("Failed to fetch history for %s: %s", symbol, history.message)
        return CandleSeries(symbol=symbol, candles=[], error=history.message)

    candles = build_candles(history, settings.limits.candle_window)
    price = _realtime_price(symbol, quote)
    if price is not None:
        overlay_realtime(candles, price, today.isoformat())

    logger.info("%s: %d candles", symbol, len(candles))
    return CandleSeries(symbol=symbol, candles=candles)


async def fetch_candles(
    client: httpx.AsyncClient,
    symbols: list[str] | None,
    today: datetime.date | None = None,
) -> list[CandleSeries]:
    symbols = require_symbols(symbols)
    today = today or utc_today()
    series = await asyncio.gather(
        *(fetch_candle_series(client, symbol, today) for symbol in symbols)
    )
    return list(series)
