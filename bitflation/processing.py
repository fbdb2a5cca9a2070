"""Data transformation and statistics functions for the Bitflation pipeline."""

from __future__ import annotations

import pandas as pd

from .config import CHART_EVENTS, SHOCK_REFERENCE_DATE
from .models import ChartEvent, ComparisonPoint, ShockStats, Timeframe

_TIMEFRAME_YEARS = {
    Timeframe.ONE_YEAR: 1,
    Timeframe.FIVE_YEARS: 5,
}


def normalize_series(series, base_value=100):
    """Normalize a series so it starts at base_value (e.g., 100).

    Returns None when the series is empty or starts at zero.
    """
    if len(series) == 0 or series.iloc[0] == 0:
        return None
    return (series / series.iloc[0]) * base_value


def _adjusted_series(data):
    return pd.Series([p.adjusted_price for p in data], index=[p.date for p in data], dtype=float)


def normalize_to_index(btc_data, asset_series):
    """
    Rebase BTC and comparison assets to 100 at their own first point.

    Args:
        btc_data: Adjusted BTC series; its dates are the output dates
        asset_series: Sequence of (asset key, adjusted series) pairs

    Returns:
        List of ComparisonPoint. An asset with no observation on a date, or
        whose series starts at zero, is left out of that point.
    """
    btc_index = normalize_series(_adjusted_series(btc_data))
    if btc_index is None:
        return []

    asset_maps = []
    for key, data in asset_series:
        indexed = normalize_series(_adjusted_series(data))
        if indexed is None:
            continue
        asset_maps.append((str(getattr(key, 'value', key)), indexed.to_dict()))

    result = []
    for date, btc_value in btc_index.items():
        assets = {}
        for key, values in asset_maps:
            if date in values:
                assets[key] = float(values[date])
        result.append(ComparisonPoint(date=date, btc=float(btc_value), assets=assets))
    return result


def filter_by_timeframe(data, timeframe):
    """
    Keep the points within a trailing window of the series' own last date.

    Args:
        data: Points with a 'date' attribute, ascending by date
        timeframe: Timeframe member or its value ('1Y', '5Y', 'ALL')

    Returns:
        The input unchanged for ALL or empty input, otherwise the points
        dated on or after the cutoff
    """
    timeframe = Timeframe(timeframe)
    if timeframe is Timeframe.ALL or len(data) == 0:
        return data

    last = pd.Timestamp(data[-1].date)
    cutoff = last - pd.DateOffset(years=_TIMEFRAME_YEARS[timeframe])
    # Feb 29 rolls forward to Mar 1 rather than back to Feb 28
    if (last.month, last.day) == (2, 29):
        cutoff += pd.Timedelta(days=1)
    cutoff_str = cutoff.strftime('%Y-%m-%d')
    return [p for p in data if p.date >= cutoff_str]


def get_chart_events():
    """Get the configured chart events."""
    return [ChartEvent(**event) for event in CHART_EVENTS]


def filter_events_to_range(events, data):
    """Keep the events that fall within the first and last date of a series."""
    if len(data) == 0:
        return []
    start = data[0].date
    end = data[-1].date
    return [e for e in events if start <= e.date <= end]


def compute_shock_stats(prices, daily_cpi, daily_m2, daily_gold, bfi=None, reference_date=SHOCK_REFERENCE_DATE):
    """
    Compute headline purchasing-power statistics since a reference date.

    Any statistic whose inputs are missing on either end is None.
    """
    if len(prices) == 0:
        return ShockStats()

    btc_now = prices[-1]
    today = btc_now.date
    btc_ref = next((p for p in prices if p.date >= reference_date), None)

    cpi_ref = daily_cpi.get(reference_date)
    cpi_now = daily_cpi.get(today)
    dollar_loss = 1 - cpi_ref / cpi_now if cpi_ref and cpi_now else None

    btc_nominal_gain = btc_now.price / btc_ref.price if btc_ref and btc_ref.price else None
    btc_real_gain = (
        btc_nominal_gain * (cpi_ref / cpi_now)
        if btc_nominal_gain is not None and cpi_ref and cpi_now
        else None
    )

    m2_ref = daily_m2.get(reference_date)
    m2_now = daily_m2.get(today)
    m2_increase = (m2_now - m2_ref) / m2_ref if m2_ref and m2_now else None

    bfi_loss = None
    if bfi:
        bfi_ref = bfi.get(reference_date)
        bfi_now = bfi.get(today)
        bfi_loss = 1 - bfi_ref / bfi_now if bfi_ref and bfi_now else None

    gold_ref = daily_gold.get(reference_date)
    gold_now = daily_gold.get(today)
    btc_gold_change = (
        (btc_now.price / gold_now) / (btc_ref.price / gold_ref)
        if btc_ref and btc_ref.price and gold_ref and gold_now
        else None
    )

    return ShockStats(
        dollar_loss=dollar_loss,
        btc_nominal_gain=btc_nominal_gain,
        btc_real_gain=btc_real_gain,
        m2_increase=m2_increase,
        bfi_loss=bfi_loss,
        btc_gold_change=btc_gold_change,
    )
