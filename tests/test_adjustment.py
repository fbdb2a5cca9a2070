import pytest

from bitflation.adjustment import (
    adjust_prices,
    anchor_average,
    build_multi_metric_series,
    compute_secondary_metrics,
    compute_bitflation_index,
    convert_to_gold,
)
from bitflation.interpolation import interpolate_monthly_to_daily
from bitflation.models import DeflatorChoice, MultiMetricPoint, SecondaryMetric

from conftest import daily_dates, make_prices


def test_anchor_average_uses_only_anchor_year():
    deflator = {"2014-12-31": 1000.0, "2015-01-01": 10.0, "2015-06-01": 20.0, "2016-01-01": 1000.0}

    assert anchor_average(deflator, 2015) == 15.0
    assert anchor_average(deflator, 2019) is None


def test_adjust_prices_scenario():
    prices = make_prices({"2015-06-01": 100, "2020-06-01": 200})
    deflator = {"2015-06-01": 237.0, "2020-06-01": 257.0}

    result = adjust_prices(prices, deflator, 2015)

    assert result[0].adjusted_price == pytest.approx(100)
    assert result[1].nominal_price == 200
    assert result[1].adjusted_price == pytest.approx(200 * 237 / 257)
    assert result[1].adjusted_price == pytest.approx(184.44, abs=0.01)


def test_adjust_prices_constant_anchor_year_is_identity():
    dates = daily_dates("2018-01-01", "2018-12-31")
    deflator = {d: 251.0 for d in dates}
    deflator["2019-01-01"] = 260.0
    prices = make_prices({d: 1000 + i for i, d in enumerate(dates)})

    result = adjust_prices(prices, deflator, 2018)

    assert len(result) == len(prices)
    assert all(p.adjusted_price == p.nominal_price for p in result)


def test_adjust_prices_falls_back_to_nominal_without_anchor_coverage():
    prices = make_prices({"2015-06-01": 100, "2020-06-01": 200, "2021-01-01": 300})
    deflator = {"2015-06-01": 237.0, "2020-06-01": 257.0}

    result = adjust_prices(prices, deflator, 2012)

    assert len(result) == 3
    assert all(p.adjusted_price == p.nominal_price for p in result)


def test_adjust_prices_drops_dates_without_deflator():
    prices = make_prices({"2015-06-01": 100, "2015-06-02": 101, "2015-06-03": 102})
    deflator = {"2015-06-01": 237.0, "2015-06-02": 0.0}

    result = adjust_prices(prices, deflator, 2015)

    assert [p.date for p in result] == ["2015-06-01"]


def test_adjust_prices_empty_inputs():
    assert adjust_prices([], {"2015-01-01": 1.0}, 2015) == []
    assert adjust_prices([], {}, 2015) == []


def test_bitflation_index_is_equal_weight_blend():
    cpi = {"2015-01-01": 100.0, "2015-07-01": 100.0, "2020-01-01": 120.0}
    m2 = {"2015-01-01": 10000.0, "2015-07-01": 10000.0, "2020-01-01": 15000.0}

    bfi = compute_bitflation_index(cpi, m2, 2015)

    assert bfi["2015-01-01"] == pytest.approx(1.0)
    assert bfi["2020-01-01"] == pytest.approx(0.5 * 1.2 + 0.5 * 1.5)


def test_bitflation_index_uses_date_intersection():
    cpi = {"2015-01-01": 100.0, "2015-01-02": 101.0}
    m2 = {"2015-01-01": 50.0, "2015-01-03": 55.0}

    assert set(compute_bitflation_index(cpi, m2, 2015)) == {"2015-01-01"}


def test_bitflation_index_empty_without_anchor_coverage():
    cpi = {"2015-01-01": 100.0}
    m2 = {"2016-01-01": 50.0}

    assert compute_bitflation_index(cpi, m2, 2015) == {}
    assert compute_bitflation_index({}, {}, 2015) == {}


def test_bitflation_index_plugs_into_adjust_prices():
    cpi = interpolate_monthly_to_daily([])
    bfi = compute_bitflation_index(cpi, {"2015-01-01": 1.0}, 2015)
    prices = make_prices({"2015-01-01": 100})

    # Empty deflator map means nothing can be adjusted
    assert adjust_prices(prices, bfi, 2015) == adjust_prices(prices, {}, 2015)


def test_convert_to_gold_constant_prices():
    dates = daily_dates("2021-01-01", "2021-01-10")
    prices = make_prices({d: 40000 for d in dates})
    gold = {d: 1800.0 for d in dates}

    result = convert_to_gold(prices, gold)

    assert len(result) == len(dates)
    assert all(p.gold_ounces == 40000 / 1800 for p in result)
    assert all(p.gold_price_usd == 1800.0 for p in result)


def test_convert_to_gold_skips_missing_and_non_positive_gold():
    prices = make_prices({"2021-01-01": 100, "2021-01-02": 100, "2021-01-03": 100, "2021-01-04": 100})
    gold = {"2021-01-01": 50.0, "2021-01-02": 0.0, "2021-01-03": -1.0}

    result = convert_to_gold(prices, gold)

    assert [p.date for p in result] == ["2021-01-01"]
    assert result[0].gold_ounces == 2.0


def test_multi_metric_series_carries_every_deflator_and_gap():
    prices = make_prices({"2015-01-01": 100, "2020-01-01": 200, "2020-01-02": 210})
    cpi = {"2015-01-01": 100.0, "2020-01-01": 125.0, "2020-01-02": 125.0}
    m2 = {"2015-01-01": 100.0, "2020-01-01": 200.0}

    result = build_multi_metric_series(prices, {DeflatorChoice.CPI: cpi, DeflatorChoice.M2: m2}, 2015)

    assert [p.date for p in result] == ["2015-01-01", "2020-01-01", "2020-01-02"]
    point = result[1]
    assert point.adjusted[DeflatorChoice.CPI] == pytest.approx(160)
    assert point.adjusted[DeflatorChoice.M2] == pytest.approx(100)
    assert point.inflation_gap == pytest.approx(40)
    assert DeflatorChoice.M2 not in result[2].adjusted
    assert result[2].inflation_gap == pytest.approx(210 - 168)


def test_multi_metric_series_no_deflators():
    assert build_multi_metric_series(make_prices({"2015-01-01": 1}), {}, 2015) == []


def test_secondary_metrics_from_latest_point():
    series = [
        MultiMetricPoint("2024-01-01", 100.0, {DeflatorChoice.CPI: 90.0, DeflatorChoice.M2: 80.0}),
        MultiMetricPoint(
            "2024-01-02",
            200.0,
            {DeflatorChoice.CPI: 150.0, DeflatorChoice.M2: 100.0, DeflatorChoice.BFI: 125.0},
        ),
    ]

    metrics = compute_secondary_metrics(series, [DeflatorChoice.CPI, DeflatorChoice.M2, DeflatorChoice.BFI])

    assert metrics == [
        SecondaryMetric(DeflatorChoice.M2, 100.0, -0.5),
        SecondaryMetric(DeflatorChoice.BFI, 125.0, -0.375),
    ]


def test_secondary_metrics_skip_missing_and_single_selection():
    series = [MultiMetricPoint("2024-01-01", 100.0, {DeflatorChoice.CPI: 90.0})]

    assert compute_secondary_metrics(series, ["CPI"]) == []
    assert compute_secondary_metrics([], ["CPI", "M2"]) == []
    assert compute_secondary_metrics(series, ["CPI", "M2"]) == []
