"""Caching utilities for raw source downloads."""

import os
import pickle

from .config import DEFAULT_CACHE_DIR


def _date_to_cache_str(dt):
    """Convert a date (datetime or 'YYYY-MM-DD' string) to a cache key fragment."""
    if hasattr(dt, 'strftime'):
        return dt.strftime('%Y%m%d')
    return str(dt)[:10].replace('-', '')


def _is_empty_result(data):
    """Check if data is an empty result that shouldn't be cached."""
    if data is None:
        return True
    if hasattr(data, 'empty') and data.empty:
        return True
    if hasattr(data, '__len__') and len(data) == 0:
        return True
    return False


def cache_file_name(source, code, start_date, end_date=None):
    """Build the cache file name for one source download."""
    key = code.replace('^', '').replace('=', '_').replace('-', '_')
    date_range = _date_to_cache_str(start_date)
    if end_date is not None:
        date_range = f"{date_range}_{_date_to_cache_str(end_date)}"
    return f"{source}_{key}_{date_range}.pkl"


def load_or_download(cache_file, download_func, description, cache_dir=DEFAULT_CACHE_DIR, verbose=True):
    """Load from cache if exists, otherwise download and cache.

    Empty downloads are returned but never written, so a failed fetch is
    retried on the next call instead of being served from cache.

    Args:
        cache_file: Name of the cache file
        download_func: Callable that downloads and returns the data
        description: Description for verbose output
        cache_dir: Directory for cache files
        verbose: Print progress messages

    Returns:
        Cached or freshly downloaded data
    """
    os.makedirs(cache_dir, exist_ok=True)
    cache_path = os.path.join(cache_dir, cache_file)
    if os.path.exists(cache_path):
        with open(cache_path, 'rb') as f:
            data = pickle.load(f)
        if not _is_empty_result(data):
            return data
        if verbose:
            print(f"  Cached {description} is empty, re-downloading...")
        os.remove(cache_path)
    elif verbose:
        print(f"  Downloading {description}...")

    data = download_func()
    if not _is_empty_result(data):
        with open(cache_path, 'wb') as f:
            pickle.dump(data, f)
    return data
