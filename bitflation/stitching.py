"""Merge bundled static series with freshly fetched live series."""

from __future__ import annotations

from .models import DeflatorPoint, PricePoint


def stitch_series(static_points, live_points):
    """Merge two date-keyed series; live points win on overlapping dates.

    Works on any frozen point type with a ``date`` attribute. The result is
    sorted ascending by date with one point per date.
    """
    merged = {}
    for point in static_points:
        merged[point.date] = point
    for point in live_points:
        merged[point.date] = point
    return [merged[date] for date in sorted(merged)]


def stitch_prices(static_prices: list[PricePoint], live_prices: list[PricePoint]) -> list[PricePoint]:
    """Merge static and live price data."""
    return stitch_series(static_prices, live_prices)


def stitch_deflators(static_data: list[DeflatorPoint], live_data: list[DeflatorPoint]) -> list[DeflatorPoint]:
    """Merge static and live deflator data."""
    return stitch_series(static_data, live_data)


def deflators_as_prices(points: list[DeflatorPoint]) -> list[PricePoint]:
    """Reshape index-level observations so they can be stitched with prices."""
    return [PricePoint(date=p.date, price=p.value) for p in points]


def prices_as_deflators(points: list[PricePoint]) -> list[DeflatorPoint]:
    """Reshape price observations into index-level observations."""
    return [DeflatorPoint(date=p.date, value=p.price) for p in points]
