"""Turn monthly or irregular observations into dense daily lookups."""

from __future__ import annotations

import pandas as pd

from .config import LOOKAHEAD_DAYS
from .models import DeflatorPoint, PricePoint
from .stitching import prices_as_deflators


def _to_series(points):
    """Build a date-indexed float series from deflator points, oldest first."""
    values = {}
    for p in points:
        values[pd.Timestamp(p.date)] = p.value
    return pd.Series(values, dtype=float).sort_index()


def _date_str(ts):
    return ts.strftime('%Y-%m-%d')


def interpolate_monthly_to_daily(monthly_points: list[DeflatorPoint]) -> dict[str, float]:
    """
    Linearly interpolate sparse observations to one value per calendar day.

    Each pair of neighbouring observations fills the half-open interval
    [current, next) with a straight line measured in calendar days, so the
    spacing does not have to be one month. After the last observation its
    value is held flat for LOOKAHEAD_DAYS days.

    Args:
        monthly_points: Observations in any order

    Returns:
        Dict of 'YYYY-MM-DD' -> value, ascending by date
    """
    if len(monthly_points) == 0:
        return {}

    series = _to_series(monthly_points)
    days = pd.date_range(
        series.index[0],
        series.index[-1] + pd.Timedelta(days=LOOKAHEAD_DAYS),
        freq='D',
    )
    daily = series.reindex(days).interpolate(method='time', limit_area='inside').ffill()
    return {_date_str(ts): float(value) for ts, value in daily.items()}


def interpolate_prices_to_daily(monthly_prices: list[PricePoint]) -> list[PricePoint]:
    """Interpolate a monthly price series to daily prices."""
    as_deflators = prices_as_deflators(monthly_prices)
    return daily_map_to_prices(interpolate_monthly_to_daily(as_deflators))


def forward_fill_daily(daily_points: list[DeflatorPoint]) -> dict[str, float]:
    """Lookup for an already-daily series, extended flat past its last point.

    Interior gaps (weekends, holidays) stay absent.
    """
    daily = {}
    for p in sorted(daily_points, key=lambda p: p.date):
        daily[p.date] = p.value
    if not daily_points:
        return daily

    last_date = max(daily)
    last_value = daily[last_date]
    start = pd.Timestamp(last_date)
    for offset in range(1, LOOKAHEAD_DAYS + 1):
        daily.setdefault(_date_str(start + pd.Timedelta(days=offset)), last_value)
    return daily


def daily_map_to_prices(daily: dict[str, float]) -> list[PricePoint]:
    """Convert a daily lookup back to a sorted price series."""
    return [PricePoint(date=date, price=value) for date, value in sorted(daily.items())]
