import os

import pandas as pd

from bitflation.cache import cache_file_name, load_or_download


def test_cache_file_name():
    assert cache_file_name("fred", "CPIAUCNS", "2010-01-01") == "fred_CPIAUCNS_20100101.pkl"
    assert cache_file_name("yahoo", "BTC-USD", "2013-04-28", "2025-01-31") == "yahoo_BTC_USD_20130428_20250131.pkl"


def test_load_or_download_caches_result(tmp_path):
    calls = []

    def download():
        calls.append(1)
        return pd.Series([1.0, 2.0], index=pd.to_datetime(["2020-01-01", "2020-02-01"]))

    first = load_or_download("m2.pkl", download, "M2", cache_dir=str(tmp_path), verbose=False)
    second = load_or_download("m2.pkl", download, "M2", cache_dir=str(tmp_path), verbose=False)

    assert len(calls) == 1
    pd.testing.assert_series_equal(first, second)


def test_load_or_download_never_caches_empty_results(tmp_path, capsys):
    calls = []

    def download():
        calls.append(1)
        return pd.DataFrame()

    load_or_download("dxy.pkl", download, "DXY", cache_dir=str(tmp_path))
    load_or_download("dxy.pkl", download, "DXY", cache_dir=str(tmp_path))

    assert len(calls) == 2
    assert not os.path.exists(tmp_path / "dxy.pkl")
    assert "Downloading DXY" in capsys.readouterr().out
