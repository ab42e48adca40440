from __future__ import annotations


class TickerFeedError(Exception):
    """Base class for errors raised by tickerfeed."""


class ValidationError(TickerFeedError):
    """The request body is unusable; surfaced to the caller as HTTP 400."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ProviderError(TickerFeedError):
    """An upstream market-data call failed for a single symbol."""

    def __init__(self, symbol: str, message: str) -> None:
        super().__init__(f"{symbol}: {message}")
        self.symbol = symbol
        self.message = message
