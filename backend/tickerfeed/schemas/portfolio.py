from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from tickerfeed.schemas.base import CamelModel


class Holding(CamelModel):
    symbol: str
    name: Optional[str] = None
    quantity: float
    avg_price: float
    current_price: float
    sector: Optional[str] = None


class PortfolioRequest(BaseModel):
    holdings: list[Holding] = Field(default_factory=list)


class HoldingPerformance(CamelModel):
    symbol: str
    value: float
    invested: float
    gain: float
    gain_percent: float


class SectorAllocation(CamelModel):
    name: str
    value: float
    percent: float


class PortfolioSummary(CamelModel):
    total_value: float
    total_invested: float
    total_gain: float
    total_gain_percent: float
    holdings: list[HoldingPerformance] = Field(default_factory=list)
    sectors: list[SectorAllocation] = Field(default_factory=list)
