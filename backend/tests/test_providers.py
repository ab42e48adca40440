import datetime

import httpx
import pytest

from tickerfeed.errors import ProviderError
from tickerfeed.providers import alpha_vantage, finnhub


def json_handler(status: int, payload):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, json=payload)

    return handler


@pytest.mark.parametrize("sentinel", ["Note", "Information", "Error Message"])
def test_alpha_vantage_sentinels_raise(run_with_transport, sentinel) -> None:
    handler = json_handler(200, {sentinel: "throttled"})

    with pytest.raises(ProviderError) as excinfo:
        run_with_transport(handler, alpha_vantage.fetch_daily_closes, "AAPL")

    assert excinfo.value.symbol == "AAPL"
    assert excinfo.value.message == "throttled"


def test_alpha_vantage_without_series_raises(run_with_transport) -> None:
    handler = json_handler(200, {"Meta Data": {}})

    with pytest.raises(ProviderError) as excinfo:
        run_with_transport(handler, alpha_vantage.fetch_daily_closes, "AAPL")

    assert excinfo.value.message == "No historical data available"


def test_alpha_vantage_skips_malformed_days(run_with_transport) -> None:
    payload = {
        "Time Series (Daily)": {
            "2026-10-15": {"4. close": "101.25"},
            "2026-10-14": {"1. open": "99.0"},
            "2026-10-13": {"4. close": "n/a"},
        }
    }

    closes = run_with_transport(
        json_handler(200, payload), alpha_vantage.fetch_daily_closes, "AAPL"
    )

    assert closes == {"2026-10-15": 101.25}


def test_finnhub_quote_status_error(run_with_transport) -> None:
    with pytest.raises(ProviderError) as excinfo:
        run_with_transport(json_handler(403, {}), finnhub.fetch_quote, "AAPL")

    assert excinfo.value.message == "Failed to fetch: 403"


def test_finnhub_quote_invalid_json(run_with_transport) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>oops</html>")

    with pytest.raises(ProviderError) as excinfo:
        run_with_transport(handler, finnhub.fetch_quote, "AAPL")

    assert excinfo.value.message == "Invalid JSON response"


def test_finnhub_news_error_payload(run_with_transport) -> None:
    handler = json_handler(200, {"error": "You don't have access to this resource."})

    with pytest.raises(ProviderError) as excinfo:
        run_with_transport(
            handler,
            finnhub.fetch_company_news,
            "AAPL",
            start_date=datetime.date(2026, 10, 10),
            end_date=datetime.date(2026, 10, 16),
        )

    assert excinfo.value.message == "You don't have access to this resource."
