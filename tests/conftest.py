"""
Pytest configuration and shared fixtures for bitflation tests.

Usage:
    @pytest.fixture functions are automatically available to all tests.
    Import helpers from conftest when needed.
"""
import pandas as pd
import pytest

from bitflation.models import DeflatorPoint, PricePoint, StaticSeries


# =============================================================================
# Test Data Helpers
# =============================================================================

def make_prices(values: dict) -> list[PricePoint]:
    """
    Build a price series from a {date: price} dict.

    Usage:
        prices = make_prices({"2020-01-01": 100, "2020-01-02": 101})
    """
    return [PricePoint(date=d, price=float(p)) for d, p in values.items()]


def make_deflators(values: dict) -> list[DeflatorPoint]:
    """Build a deflator series from a {date: value} dict."""
    return [DeflatorPoint(date=d, value=float(v)) for d, v in values.items()]


def daily_dates(start: str, end: str) -> list[str]:
    return [ts.strftime("%Y-%m-%d") for ts in pd.date_range(start, end, freq="D")]


def monthly_dates(start: str, end: str) -> list[str]:
    return [ts.strftime("%Y-%m-%d") for ts in pd.date_range(start, end, freq="MS")]


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def monthly_cpi() -> list[DeflatorPoint]:
    """Two years of monthly CPI rising one point per month."""
    dates = monthly_dates("2015-01-01", "2016-12-01")
    return [DeflatorPoint(date=d, value=237.0 + i) for i, d in enumerate(dates)]


@pytest.fixture
def daily_btc() -> list[PricePoint]:
    """Two years of daily BTC prices rising $1 per day from $300."""
    dates = daily_dates("2015-01-01", "2016-12-31")
    return [PricePoint(date=d, price=300.0 + i) for i, d in enumerate(dates)]


@pytest.fixture
def static_series(daily_btc, monthly_cpi) -> StaticSeries:
    """A complete static bundle covering 2015-2016."""
    months = monthly_dates("2015-01-01", "2016-12-01")
    days = daily_dates("2015-01-01", "2016-12-31")
    return StaticSeries(
        btc=daily_btc,
        cpi=monthly_cpi,
        m2=[DeflatorPoint(date=d, value=12000.0 + 50 * i) for i, d in enumerate(months)],
        gold=[DeflatorPoint(date=d, value=1200.0) for d in months],
        dxy=[DeflatorPoint(date=d, value=100.0 + i * 0.01) for i, d in enumerate(days)],
        sp500=[PricePoint(date=d, price=2000.0 + i) for i, d in enumerate(days)],
        housing=[PricePoint(date=d, price=170.0 + i) for i, d in enumerate(months)],
    )
