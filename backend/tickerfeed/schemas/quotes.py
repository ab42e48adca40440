from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from tickerfeed.schemas.base import CamelModel


class SymbolsRequest(BaseModel):
    symbols: Optional[list[str]] = None


class PriceRequest(SymbolsRequest):
    historical: bool = False


class Quote(CamelModel):
    symbol: str
    current_price: Optional[float] = None
    change: Optional[float] = None
    change_percent: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None
    open: Optional[float] = None
    previous_close: Optional[float] = None
    error: Optional[str] = None


class QuotesResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    quotes: list[Quote] = Field(default_factory=list)
