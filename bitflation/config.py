"""Configuration loading and constants for the Bitflation pipeline."""

import json
import os


def _load_config_data():
    """Load configuration data from JSON file."""
    config_path = os.path.join(os.path.dirname(__file__), 'config_data.json')
    with open(config_path, 'r') as f:
        return json.load(f)


_CONFIG_DATA = _load_config_data()

# Bundled static series live next to the package; raw downloads are cached locally
DEFAULT_DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')
DEFAULT_CACHE_DIR = "data_cache"

# Days to hold the last known value flat past the end of a series
LOOKAHEAD_DAYS = 90

# Bitflation Index blend: equal parts CPI and M2
BFI_CPI_WEIGHT = 0.5
BFI_M2_WEIGHT = 0.5

# Source definitions for every series the pipeline consumes
# FRED series codes: https://fred.stlouisfed.org/
SERIES = _CONFIG_DATA['series']

# Live fetches only need the trailing period not yet in the static bundles
LIVE_START_DATE = _CONFIG_DATA['live_start_date']
LIVE_BTC_DAYS = _CONFIG_DATA['live_btc_days']
BLOCKCHAIN_TICKER_URL = _CONFIG_DATA['blockchain_ticker_url']

DEFAULT_ANCHOR_YEAR = _CONFIG_DATA['default_anchor_year']
DEFAULT_TIMEFRAME = _CONFIG_DATA['default_timeframe']
SHOCK_REFERENCE_DATE = _CONFIG_DATA['shock_reference_date']

# Market events annotated on charts
CHART_EVENTS = _CONFIG_DATA['chart_events']


def get_series_config(name):
    """Get the source definition for a named series."""
    if name not in SERIES:
        raise ValueError(f"Unknown series: {name}. Available: {list(SERIES.keys())}")
    return SERIES[name]
