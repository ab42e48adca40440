from __future__ import annotations

from tickerfeed.schemas.portfolio import (
    Holding,
    HoldingPerformance,
    PortfolioSummary,
    SectorAllocation,
)

DEFAULT_SECTOR = "Other"


def gain_percent(gain: float, invested: float) -> float:
    return gain / invested * 100 if invested > 0 else 0.0


def sector_allocation(holdings: list[Holding]) -> list[SectorAllocation]:
    sector_values: dict[str, float] = {}
    for holding in holdings:
        sector = holding.sector or DEFAULT_SECTOR
        value = holding.quantity * holding.current_price
        sector_values[sector] = sector_values.get(sector, 0.0) + value

    rounded = {name: round(value, 2) for name, value in sector_values.items()}
    total = sum(rounded.values())
    allocations = [
        SectorAllocation(
            name=name,
            value=value,
            percent=value / total * 100 if total else 0.0,
        )
        for name, value in rounded.items()
    ]
    allocations.sort(key=lambda entry: entry.value, reverse=True)
    return allocations


def summarize_portfolio(holdings: list[Holding]) -> PortfolioSummary:
    performances: list[HoldingPerformance] = []
    for holding in holdings:
        value = holding.quantity * holding.current_price
        invested = holding.quantity * holding.avg_price
        gain = value - invested
        performances.append(
            HoldingPerformance(
                symbol=holding.symbol,
                value=value,
                invested=invested,
                gain=gain,
                gain_percent=gain_percent(gain, invested),
            )
        )

    total_value = sum(entry.value for entry in performances)
    total_invested = sum(entry.invested for entry in performances)
    total_gain = total_value - total_invested
    return PortfolioSummary(
        total_value=total_value,
        total_invested=total_invested,
        total_gain=total_gain,
        total_gain_percent=gain_percent(total_gain, total_invested),
        holdings=performances,
        sectors=sector_allocation(holdings),
    )
