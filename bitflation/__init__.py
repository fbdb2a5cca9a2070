"""Bitflation: Bitcoin's price adjusted for inflation.

This package contains the series reconciliation and price-adjustment
pipeline, plus the data loading, caching, and configuration modules that
feed it.
"""

from .config import (
    DEFAULT_ANCHOR_YEAR,
    DEFAULT_CACHE_DIR,
    DEFAULT_DATA_DIR,
    LOOKAHEAD_DAYS,
)
from .models import (
    AdjustedPricePoint,
    CalculatorResult,
    ComparisonAsset,
    ComparisonPoint,
    DeflatorChoice,
    DeflatorPoint,
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
from .stitching import stitch_deflators, stitch_prices, stitch_series
from .interpolation import forward_fill_daily, interpolate_monthly_to_daily, interpolate_prices_to_daily
from .adjustment import (
    adjust_prices,
    build_multi_metric_series,
    compute_bitflation_index,
    compute_secondary_metrics,
    convert_to_gold,
)
from .processing import (
    compute_shock_stats,
    filter_by_timeframe,
    filter_events_to_range,
    normalize_to_index,
)
from .returns import btc_to_usd, calculate_returns
from .loaders import (
    fetch_all_live_data,
    fetch_fred,
    fetch_live_prices,
    load_static_bundle,
    load_static_series,
    prepare_all_series,
    prepare_series,
    save_static_series,
)
from .pipeline import (
    DeflatedView,
    MarketData,
    build_market_data,
    compute_comparison,
    compute_deflated_view,
    compute_gold_view,
    compute_market_shock_stats,
    compute_returns,
    deflator_map,
    load_market_data,
)
from .summary import (
    format_date,
    format_percent,
    format_usd,
    print_data_summary,
    print_returns_summary,
    print_shock_stats,
)

__all__ = [
    'DEFAULT_ANCHOR_YEAR',
    'DEFAULT_CACHE_DIR',
    'DEFAULT_DATA_DIR',
    'LOOKAHEAD_DAYS',
    'AdjustedPricePoint',
    'CalculatorResult',
    'ComparisonAsset',
    'ComparisonPoint',
    'DeflatorChoice',
    'DeflatorPoint',
    'GoldPricePoint',
    'LiveDataStatus',
    'LiveSeries',
    'MultiMetricPoint',
    'PricePoint',
    'SecondaryMetric',
    'ShockStats',
    'StaticSeries',
    'Timeframe',
    'stitch_deflators',
    'stitch_prices',
    'stitch_series',
    'forward_fill_daily',
    'interpolate_monthly_to_daily',
    'interpolate_prices_to_daily',
    'adjust_prices',
    'build_multi_metric_series',
    'compute_bitflation_index',
    'compute_secondary_metrics',
    'convert_to_gold',
    'compute_shock_stats',
    'filter_by_timeframe',
    'filter_events_to_range',
    'normalize_to_index',
    'btc_to_usd',
    'calculate_returns',
    'build_market_data',
    'compute_deflated_view',
    'compute_gold_view',
    'compute_market_shock_stats',
    'compute_returns',
    'deflator_map',
    'load_market_data',
    'DeflatedView',
    'MarketData',
    'compute_comparison',
    'fetch_all_live_data',
    'fetch_fred',
    'fetch_live_prices',
    'load_static_bundle',
    'load_static_series',
    'prepare_all_series',
    'prepare_series',
    'save_static_series',
    'format_date',
    'format_percent',
    'format_usd',
    'print_data_summary',
    'print_returns_summary',
    'print_shock_stats',
]
