from __future__ import annotations

import asyncio
import datetime
import logging
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from tickerfeed.config.settings import settings
from tickerfeed.errors import ProviderError
from tickerfeed.providers import finnhub
from tickerfeed.schemas.news import NewsItem
from tickerfeed.services.candles import utc_today
from tickerfeed.validation.validator import require_symbols

logger = logging.getLogger(__name__)


def news_window(today: datetime.date, days: int) -> tuple[datetime.date, datetime.date]:
    """Inclusive calendar window of `days` days ending today."""
    return today - datetime.timedelta(days=days - 1), today


def _parse_items(symbol: str, raw_items: list[Any], limit: int) -> list[NewsItem]:
    items: list[NewsItem] = []
    for raw in raw_items[:limit]:
        if not isinstance(raw, dict):
            logger.warning("Skipping non-object news entry for %s", symbol)
            continue
        try:
            items.append(NewsItem.model_validate({**raw, "symbol": symbol}))
        except PydanticValidationError as exc:
            logger.warning("Skipping malformed news entry for %s: %s", symbol, exc)
    return items


async def fetch_symbol_news(
    client: httpx.AsyncClient,
    symbol: str,
    start_date: datetime.date,
    end_date: datetime.date,
) -> list[NewsItem]:
    try:
        raw_items = await finnhub.fetch_company_news(client, symbol, start_date, end_date)
    except ProviderError as exc:
        logger.error("Failed to fetch news for %s: %s", symbol, exc.message)
        return []
    logger.info("%s: got %d news items", symbol, len(raw_items))
    return _parse_items(symbol, raw_items, settings.limits.news_items_per_symbol)


async def fetch_news(
    client: httpx.AsyncClient,
    symbols: list[str] | None,
    today: datetime.date | None = None,
) -> list[NewsItem]:
    limits = settings.limits
    symbols = require_symbols(symbols)[: limits.news_symbol_limit]
    start_date, end_date = news_window(today or utc_today(), limits.news_window_days)

    per_symbol = await asyncio.gather(
        *(fetch_symbol_news(client, symbol, start_date, end_date) for symbol in symbols)
    )
    merged = [item for items in per_symbol for item in items]
    # sorted() stays stable with reverse=True, so ties keep provider order.
    merged = sorted(merged, key=lambda item: item.datetime, reverse=True)
    return merged[: limits.news_result_limit]
