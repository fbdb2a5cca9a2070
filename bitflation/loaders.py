"""Data fetching functions for the Bitflation pipeline.

Static bundles are JSON arrays of {"date", "price"|"value"} records built
once by the prepare_* functions. Live fetchers pull the trailing period at
runtime and return an empty list on any failure.
"""

import json
import os
import urllib.request
from datetime import datetime, timedelta, timezone

import pandas as pd
import pandas_datareader.data as web
import yfinance as yf

from .cache import cache_file_name, load_or_download
from .config import (
    BLOCKCHAIN_TICKER_URL,
    DEFAULT_CACHE_DIR,
    DEFAULT_DATA_DIR,
    LIVE_BTC_DAYS,
    LIVE_START_DATE,
    SERIES,
    get_series_config,
)
from .models import DeflatorPoint, LiveDataStatus, LiveSeries, PricePoint, StaticSeries


def _make_point(field, date, value):
    if field == 'price':
        return PricePoint(date=date, price=value)
    return DeflatorPoint(date=date, value=value)


def _series_to_points(series, field='value'):
    """Convert a date-indexed pandas Series to points, dropping missing values."""
    series = pd.to_numeric(series, errors='coerce').dropna().sort_index()
    return [_make_point(field, ts.strftime('%Y-%m-%d'), float(value)) for ts, value in series.items()]


def _flatten_columns(data):
    """yfinance returns (field, ticker) columns for single tickers too."""
    if isinstance(data.columns, pd.MultiIndex):
        data.columns = data.columns.get_level_values(0)
    return data


# =============================================================================
# Static bundles
# =============================================================================

def load_static_series(name, data_dir=DEFAULT_DATA_DIR, verbose=True):
    """Load a bundled series by name ('btc', 'cpi', ...). Returns [] if unavailable."""
    config = get_series_config(name)
    path = os.path.join(data_dir, config['file'])
    field = config['field']

    try:
        with open(path, 'r') as f:
            records = json.load(f)
        return [_make_point(field, r['date'], float(r[field])) for r in records]
    except Exception as e:
        if verbose:
            print(f"  Warning: Could not load static {name} data from {path}: {e}")
        return []


def save_static_series(name, points, data_dir=DEFAULT_DATA_DIR, verbose=True):
    """Write a series to its bundle file, oldest first."""
    config = get_series_config(name)
    path = os.path.join(data_dir, config['file'])
    field = config['field']

    records = [
        {'date': p.date, field: p.price if isinstance(p, PricePoint) else p.value}
        for p in sorted(points, key=lambda p: p.date)
    ]
    os.makedirs(data_dir, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(records, f)

    if verbose:
        print(f"  Wrote {len(records)} {name} entries to {path}")
    return path


def load_static_bundle(data_dir=DEFAULT_DATA_DIR, verbose=True):
    """Load every bundled series."""
    return StaticSeries(**{name: load_static_series(name, data_dir, verbose) for name in SERIES})


# =============================================================================
# Live data
# =============================================================================

def fetch_fred(series_id, start_date, verbose=False):
    """
    Fetch FRED observations from start_date onward.

    Returns:
        List of DeflatorPoint, or [] on any failure
    """
    try:
        data = web.DataReader(series_id, 'fred', start_date)
        if len(data) == 0:
            return []
        series = data[series_id] if series_id in data.columns else data.iloc[:, 0]
        return _series_to_points(series)
    except Exception as e:
        if verbose:
            print(f"  Warning: Could not download {series_id} from FRED: {e}")
        return []


def _fetch_yahoo_btc(days):
    start = (datetime.now(timezone.utc) - timedelta(days=days)).strftime('%Y-%m-%d')
    data = yf.download("BTC-USD", start=start, progress=False)
    if data is None or len(data) == 0:
        return []
    data = _flatten_columns(data)
    return [
        PricePoint(date=p.date, price=round(p.price, 2))
        for p in _series_to_points(data['Close'], field='price')
    ]


def _fetch_blockchain_spot():
    with urllib.request.urlopen(BLOCKCHAIN_TICKER_URL, timeout=10) as response:
        data = json.load(response)
    price = (data.get('USD') or {}).get('last')
    if not price:
        return []
    today = datetime.now(timezone.utc).strftime('%Y-%m-%d')
    return [PricePoint(date=today, price=float(price))]


def fetch_live_prices(days=LIVE_BTC_DAYS, verbose=False):
    """
    Fetch recent daily BTC prices.

    Tries Yahoo Finance for the trailing window first; if that fails or comes
    back empty, falls back to the Blockchain.com ticker for today's spot price
    so the latest point is still fresh.

    Returns:
        List of PricePoint, or [] if both sources fail
    """
    try:
        prices = _fetch_yahoo_btc(days)
        if prices:
            return prices
    except Exception as e:
        if verbose:
            print(f"  Warning: Could not download BTC-USD from Yahoo Finance: {e}")

    try:
        return _fetch_blockchain_spot()
    except Exception as e:
        if verbose:
            print(f"  Warning: Could not load BTC spot price from Blockchain.com: {e}")
        return []


def fetch_all_live_data(start_date=LIVE_START_DATE, verbose=True):
    """
    Fetch every live series.

    Returns:
        (LiveSeries, LiveDataStatus). Status is ALL when BTC, DXY and M2 all
        returned data, PARTIAL when some did, NONE otherwise.
    """
    if verbose:
        print("\nFetching live data...")

    btc = fetch_live_prices(verbose=verbose)
    dxy = fetch_fred(get_series_config('dxy')['code'], start_date, verbose)
    m2 = fetch_fred(get_series_config('m2')['code'], start_date, verbose)
    sp500 = fetch_fred(get_series_config('sp500')['code'], start_date, verbose)

    successes = sum(1 for data in (btc, dxy, m2) if len(data) > 0)
    if successes == 3:
        status = LiveDataStatus.ALL
    elif successes > 0:
        status = LiveDataStatus.PARTIAL
    else:
        status = LiveDataStatus.NONE

    if verbose:
        print(f"  Live data: {len(btc)} BTC, {len(dxy)} DXY, {len(m2)} M2, {len(sp500)} S&P 500 points ({status.value})")

    return LiveSeries(btc=btc, m2=m2, dxy=dxy, sp500=sp500), status


# =============================================================================
# Data preparation
# =============================================================================

def _download_source(config, start_date, end_date, cache_dir, verbose):
    """Download a source's raw history as a date-indexed Series."""
    code = config['code']

    if config['source'] == 'fred':
        def download():
            return web.DataReader(code, 'fred', start_date, end_date)
    elif config['source'] == 'yahoo':
        def download():
            data = yf.download(code, start=start_date, end=end_date, progress=False)
            if data is None or len(data) == 0:
                return pd.DataFrame()
            return _flatten_columns(data)
    else:
        raise ValueError(f"Unknown source: {config['source']}")

    data = load_or_download(
        cache_file_name(config['source'], code, start_date, end_date),
        download,
        config['description'],
        cache_dir,
        verbose,
    )
    if data is None or len(data) == 0:
        return pd.Series(dtype=float)
    column = code if code in data.columns else 'Close'
    return data[column]


def prepare_series(name, end_date=None, cache_dir=DEFAULT_CACHE_DIR, data_dir=DEFAULT_DATA_DIR, verbose=True):
    """
    Download a series' full history and write its static bundle.

    Monthly series are averaged per calendar month and dated on the first of
    the month, matching FRED's monthly convention.

    Returns:
        The bundled points
    """
    config = get_series_config(name)
    end_date = end_date or datetime.now().strftime('%Y-%m-%d')

    if verbose:
        print(f"\nPreparing {name} data ({config['description']})...")

    series = _download_source(config, config['start'], end_date, cache_dir, verbose)
    series = pd.to_numeric(series, errors='coerce').dropna()
    if config['frequency'] == 'monthly' and len(series) > 0:
        series = series.resample('MS').mean().dropna()

    points = _series_to_points(series, config['field'])
    if len(points) == 0:
        raise ValueError(f"No data downloaded for {name} ({config['code']})")

    save_static_series(name, points, data_dir, verbose)
    return points


def prepare_all_series(end_date=None, cache_dir=DEFAULT_CACHE_DIR, data_dir=DEFAULT_DATA_DIR, verbose=True):
    """Prepare every configured series, skipping the ones that fail."""
    prepared = {}
    for name in SERIES:
        try:
            prepared[name] = prepare_series(name, end_date, cache_dir, data_dir, verbose)
        except Exception as e:
            print(f"Warning: Could not prepare {name} data: {e}")
    return prepared
