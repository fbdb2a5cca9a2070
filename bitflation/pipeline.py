"""Wire the pipeline stages together for one recomputation.

Apart from load_market_data, which reads the bundles and fetches live
series, every function here is pure: it takes a snapshot of its inputs and
rebuilds everything downstream of them. Callers recompute whenever live data
arrives or the anchor year, timeframe, or metric selection changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .adjustment import (
    adjust_prices,
    build_multi_metric_series,
    compute_bitflation_index,
    compute_secondary_metrics,
    convert_to_gold,
)
from .config import DEFAULT_ANCHOR_YEAR, DEFAULT_DATA_DIR, DEFAULT_TIMEFRAME, LIVE_START_DATE, SHOCK_REFERENCE_DATE
from .interpolation import daily_map_to_prices, forward_fill_daily, interpolate_monthly_to_daily, interpolate_prices_to_daily
from .loaders import fetch_all_live_data, load_static_bundle
from .models import (
    AdjustedPricePoint,
    CalculatorResult,
    ComparisonAsset,
    ComparisonPoint,
    DeflatorChoice,
    GoldPricePoint,
    LiveDataStatus,
    LiveSeries,
    MultiMetricPoint,
    PricePoint,
    SecondaryMetric,
    ShockStats,
    StaticSeries,
    Timeframe,
)
from .processing import compute_shock_stats, filter_by_timeframe, normalize_to_index
from .returns import btc_to_usd, calculate_returns
from .stitching import deflators_as_prices, stitch_deflators, stitch_prices
from .summary import print_data_summary


@dataclass(frozen=True)
class MarketData:
    """Stitched prices and daily lookups shared by every view."""

    prices: list[PricePoint]
    daily_cpi: dict[str, float]
    daily_m2: dict[str, float]
    daily_gold: dict[str, float]
    daily_dxy: dict[str, float]
    sp500_prices: list[PricePoint]
    housing_prices: list[PricePoint]
    gold_prices: list[PricePoint]


@dataclass(frozen=True)
class DeflatedView:
    primary: list[AdjustedPricePoint]
    multi_metric: list[MultiMetricPoint]
    comparison: list[ComparisonPoint] | None = None
    deflators: tuple[DeflatorChoice, ...] = field(default_factory=tuple)
    secondary: list[SecondaryMetric] = field(default_factory=list)


def build_market_data(static: StaticSeries, live: LiveSeries | None = None) -> MarketData:
    """Stitch static and live series and build the daily lookups."""
    live = live or LiveSeries()

    daily_gold = interpolate_monthly_to_daily(static.gold)
    return MarketData(
        prices=stitch_prices(static.btc, live.btc),
        daily_cpi=interpolate_monthly_to_daily(static.cpi),
        daily_m2=interpolate_monthly_to_daily(stitch_deflators(static.m2, live.m2)),
        daily_gold=daily_gold,
        daily_dxy=forward_fill_daily(stitch_deflators(static.dxy, live.dxy)),
        sp500_prices=stitch_prices(static.sp500, deflators_as_prices(live.sp500)),
        housing_prices=interpolate_prices_to_daily(static.housing),
        gold_prices=daily_map_to_prices(daily_gold),
    )


def load_market_data(
    data_dir=DEFAULT_DATA_DIR,
    live=True,
    start_date=LIVE_START_DATE,
    verbose=True,
) -> tuple[MarketData, LiveDataStatus]:
    """
    Load the static bundles, fetch live data on top, and stitch them.

    Args:
        data_dir: Directory holding the static bundle files
        live: Fetch live series; when False only the bundles are used
        start_date: First date requested from the live sources
        verbose: Print progress and a summary of the loaded bundles

    Returns:
        (MarketData, LiveDataStatus). Status is NONE when live fetching is off.
    """
    static = load_static_bundle(data_dir, verbose)
    if verbose:
        print_data_summary(static)

    if not live:
        return build_market_data(static), LiveDataStatus.NONE

    live_series, status = fetch_all_live_data(start_date, verbose)
    return build_market_data(static, live_series), status


def deflator_map(data: MarketData, choice: DeflatorChoice, anchor_year: int) -> dict[str, float]:
    """Daily lookup for a deflator choice. The Bitflation Index depends on the anchor year."""
    choice = DeflatorChoice(choice)
    if choice is DeflatorChoice.CPI:
        return data.daily_cpi
    if choice is DeflatorChoice.M2:
        return data.daily_m2
    if choice is DeflatorChoice.DXY:
        return data.daily_dxy
    return compute_bitflation_index(data.daily_cpi, data.daily_m2, anchor_year)


def _asset_prices(data, asset):
    asset = ComparisonAsset(asset)
    if asset is ComparisonAsset.SP500:
        return data.sp500_prices
    if asset is ComparisonAsset.GOLD:
        return data.gold_prices
    return data.housing_prices


def compute_comparison(
    data: MarketData,
    deflator: dict[str, float],
    anchor_year: int,
    timeframe: Timeframe,
    assets,
) -> list[ComparisonPoint]:
    """Adjust BTC and each asset by the same deflator, trim to the timeframe, and index to 100."""
    btc = filter_by_timeframe(adjust_prices(data.prices, deflator, anchor_year), timeframe)
    asset_series = []
    for asset in assets:
        adjusted = adjust_prices(_asset_prices(data, asset), deflator, anchor_year)
        asset_series.append((ComparisonAsset(asset), filter_by_timeframe(adjusted, timeframe)))
    return normalize_to_index(btc, asset_series)


def compute_deflated_view(
    data: MarketData,
    deflators,
    anchor_year: int = DEFAULT_ANCHOR_YEAR,
    timeframe=DEFAULT_TIMEFRAME,
    compare=(),
) -> DeflatedView:
    """
    Build the chart data for one or more anchor-relative deflators.

    Args:
        data: Output of build_market_data
        deflators: DeflatorChoice values in display order; the first is primary
        anchor_year: Year whose average deflator value is the baseline
        timeframe: Trailing window applied to every series
        compare: ComparisonAsset values to index against BTC (optional)
    """
    choices = tuple(DeflatorChoice(d) for d in deflators)
    if not choices:
        raise ValueError("At least one deflator must be selected")

    maps = {choice: deflator_map(data, choice, anchor_year) for choice in choices}
    primary_map = maps[choices[0]]

    primary = filter_by_timeframe(adjust_prices(data.prices, primary_map, anchor_year), timeframe)
    multi_metric = filter_by_timeframe(build_multi_metric_series(data.prices, maps, anchor_year), timeframe)
    comparison = None
    if compare:
        comparison = compute_comparison(data, primary_map, anchor_year, timeframe, compare)

    return DeflatedView(
        primary=primary,
        multi_metric=multi_metric,
        comparison=comparison,
        deflators=choices,
        secondary=compute_secondary_metrics(multi_metric, choices),
    )


def compute_gold_view(data: MarketData, timeframe=DEFAULT_TIMEFRAME) -> list[GoldPricePoint]:
    """BTC priced in ounces of gold. No anchor year applies."""
    return filter_by_timeframe(convert_to_gold(data.prices, data.daily_gold), timeframe)


def compute_returns(data: MarketData, purchase_date: str, amount: float, in_btc: bool = False) -> CalculatorResult | None:
    """Run the returns calculator; amount is in BTC when in_btc is set, else USD."""
    investment_usd = btc_to_usd(amount, purchase_date, data.prices) if in_btc else amount
    return calculate_returns(
        purchase_date,
        investment_usd,
        data.prices,
        data.daily_cpi,
        data.daily_m2,
        data.daily_gold,
    )


def compute_market_shock_stats(data: MarketData, anchor_year: int, reference_date: str = SHOCK_REFERENCE_DATE) -> ShockStats:
    """Headline purchasing-power statistics, with the Bitflation Index built for anchor_year."""
    bfi = compute_bitflation_index(data.daily_cpi, data.daily_m2, anchor_year)
    return compute_shock_stats(
        data.prices,
        data.daily_cpi,
        data.daily_m2,
        data.daily_gold,
        bfi=bfi,
        reference_date=reference_date,
    )
