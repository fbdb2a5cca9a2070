"""Inflation adjustment, the Bitflation Index, and gold conversion."""

from __future__ import annotations

from .config import BFI_CPI_WEIGHT, BFI_M2_WEIGHT
from .models import (
    AdjustedPricePoint,
    DeflatorChoice,
    GoldPricePoint,
    MultiMetricPoint,
    PricePoint,
    SecondaryMetric,
)


def anchor_average(deflator: dict[str, float], anchor_year: int) -> float | None:
    """Average of every deflator value dated in the anchor year, or None if there are none."""
    prefix = str(anchor_year)
    values = [value for date, value in deflator.items() if date.startswith(prefix)]
    if not values:
        return None
    return sum(values) / len(values)


def adjust_prices(
    prices: list[PricePoint],
    deflator: dict[str, float],
    anchor_year: int,
) -> list[AdjustedPricePoint]:
    """
    Express nominal prices in anchor-year dollars.

    adjusted = nominal * (anchor-year average deflator / deflator on that date)

    Prices are matched to the deflator on the exact same date; dates with no
    (or a zero) deflator value are dropped. If the deflator has no values in
    the anchor year, prices come back unadjusted.
    """
    anchor = anchor_average(deflator, anchor_year)
    if anchor is None:
        return [AdjustedPricePoint(date=p.date, nominal_price=p.price, adjusted_price=p.price) for p in prices]

    result = []
    for p in prices:
        current = deflator.get(p.date)
        if not current:
            continue
        result.append(AdjustedPricePoint(
            date=p.date,
            nominal_price=p.price,
            adjusted_price=p.price * (anchor / current),
        ))
    return result


def compute_bitflation_index(
    daily_cpi: dict[str, float],
    daily_m2: dict[str, float],
    anchor_year: int,
) -> dict[str, float]:
    """
    Blend CPI and M2 into a single synthetic deflator.

    Each input is scaled to ~1.0 over the anchor year, then combined with
    fixed equal weights on the dates both inputs cover. Returns an empty map
    when either input has no anchor-year values.
    """
    cpi_anchor = anchor_average(daily_cpi, anchor_year)
    m2_anchor = anchor_average(daily_m2, anchor_year)
    if cpi_anchor is None or m2_anchor is None:
        return {}

    result = {}
    for date, cpi in daily_cpi.items():
        m2 = daily_m2.get(date)
        if m2 is None:
            continue
        result[date] = BFI_CPI_WEIGHT * (cpi / cpi_anchor) + BFI_M2_WEIGHT * (m2 / m2_anchor)
    return result


def convert_to_gold(prices: list[PricePoint], gold_prices: dict[str, float]) -> list[GoldPricePoint]:
    """Convert USD prices to ounces of gold; dates without a positive gold price are skipped."""
    result = []
    for p in prices:
        gold_price_usd = gold_prices.get(p.date)
        if gold_price_usd is None or gold_price_usd <= 0:
            continue
        result.append(GoldPricePoint(
            date=p.date,
            nominal_price=p.price,
            gold_ounces=p.price / gold_price_usd,
            gold_price_usd=gold_price_usd,
        ))
    return result


def build_multi_metric_series(
    prices: list[PricePoint],
    deflators: dict[DeflatorChoice, dict[str, float]],
    anchor_year: int,
) -> list[MultiMetricPoint]:
    """
    Adjust one price series by several deflators at once.

    Args:
        prices: Nominal price series
        deflators: Ordered mapping of deflator choice -> daily map; the first
                   entry is the primary deflator and drives the date list
        anchor_year: Anchor year shared by every deflator

    Returns:
        List of MultiMetricPoint, one per date in the primary adjusted series
    """
    if not deflators:
        return []

    adjusted = {
        choice: {p.date: p for p in adjust_prices(prices, daily, anchor_year)}
        for choice, daily in deflators.items()
    }
    primary = next(iter(deflators))

    result = []
    for date, point in adjusted[primary].items():
        values = {}
        for choice, by_date in adjusted.items():
            match = by_date.get(date)
            if match is not None:
                values[choice] = match.adjusted_price
        gap = point.nominal_price - values[primary] if primary in values else None
        result.append(MultiMetricPoint(
            date=date,
            nominal_price=point.nominal_price,
            adjusted=values,
            inflation_gap=gap,
        ))
    return result


def compute_secondary_metrics(multi_metric: list[MultiMetricPoint], deflators) -> list[SecondaryMetric]:
    """Latest adjusted price of every non-primary deflator, relative to nominal.

    Empty when only one deflator is selected or the series is empty. A
    deflator with no value on the latest date is left out.
    """
    deflators = [DeflatorChoice(d) for d in deflators]
    if len(deflators) <= 1 or not multi_metric:
        return []

    last = multi_metric[-1]
    if not last.nominal_price:
        return []

    metrics = []
    for choice in deflators[1:]:
        value = last.adjusted.get(choice)
        if value is None:
            continue
        metrics.append(SecondaryMetric(
            deflator=choice,
            adjusted_price=value,
            diff=(value - last.nominal_price) / last.nominal_price,
        ))
    return metrics
