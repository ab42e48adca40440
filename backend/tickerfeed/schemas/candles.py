from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Candle(BaseModel):
    # ISO YYYY-MM-DD, so string order is chronological order.
    date: str
    price: float


class CandleSeries(BaseModel):
    symbol: str
    candles: list[Candle] = Field(default_factory=list)
    error: Optional[str] = None


class CandlesResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    candles: dict[str, list[Candle]] = Field(default_factory=dict)
