import logging

import httpx
from fastapi import APIRouter, Depends

from tickerfeed.providers.session import get_http_client
from tickerfeed.schemas.candles import CandlesResponse
from tickerfeed.schemas.news import NewsResponse
from tickerfeed.schemas.portfolio import PortfolioRequest, PortfolioSummary
from tickerfeed.schemas.quotes import PriceRequest, QuotesResponse, SymbolsRequest
from tickerfeed.services.candles import fetch_candles
from tickerfeed.services.news import fetch_news
from tickerfeed.services.portfolio import summarize_portfolio
from tickerfeed.services.quotes import fetch_quotes
from tickerfeed.validation.validator import require_symbols

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


@router.post(
    "/fetch-stock-quotes",
    response_model=QuotesResponse,
    response_model_exclude_none=True,
)
async def fetch_stock_quotes(
    payload: SymbolsRequest, client: httpx.AsyncClient = Depends(get_http_client)
) -> QuotesResponse:
    symbols = require_symbols(payload.symbols)
    logger.info("Fetching prices for symbols: %s", ", ".join(symbols))
    quotes = await fetch_quotes(client, symbols)
    return QuotesResponse(quotes=quotes)


@router.post(
    "/fetch-stock-prices",
    response_model=CandlesResponse | QuotesResponse,
    response_model_exclude_none=True,
)
async def fetch_stock_prices(
    payload: PriceRequest, client: httpx.AsyncClient = Depends(get_http_client)
) -> CandlesResponse | QuotesResponse:
    symbols = require_symbols(payload.symbols)
    if not payload.historical:
        logger.info("Fetching prices for symbols: %s", ", ".join(symbols))
        quotes = await fetch_quotes(client, symbols)
        return QuotesResponse(quotes=quotes)

    logger.info("Fetching historical prices for symbols: %s", ", ".join(symbols))
    series = await fetch_candles(client, symbols)
    return CandlesResponse(candles={entry.symbol: entry.candles for entry in series})


@router.post("/fetch-stock-news", response_model=NewsResponse)
async def fetch_stock_news(
    payload: SymbolsRequest, client: httpx.AsyncClient = Depends(get_http_client)
) -> NewsResponse:
    symbols = require_symbols(payload.symbols)
    logger.info("Fetching news for symbols: %s", ", ".join(symbols))
    news = await fetch_news(client, symbols)
    logger.info("Returning %d total news items", len(news))
    return NewsResponse(news=news)


@router.post("/portfolio/summary", response_model=PortfolioSummary)
def portfolio_summary(payload: PortfolioRequest) -> PortfolioSummary:
    return summarize_portfolio(payload.holdings)
