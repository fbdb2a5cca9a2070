"""Point-in-time investment returns under nominal, CPI, M2 and gold lenses."""

from __future__ import annotations

from .models import CalculatorResult, PricePoint


def _first_on_or_after(prices, date):
    return next((p for p in prices if p.date >= date), None)


def _deflator_ratio(deflator, then_date, now_date):
    """Ratio of the deflator then to now, or 1 when either end is missing."""
    then = deflator.get(then_date)
    now = deflator.get(now_date)
    if then and now:
        return then / now
    return 1


def calculate_returns(
    purchase_date: str,
    investment_usd: float,
    prices: list[PricePoint],
    cpi_map: dict[str, float],
    m2_map: dict[str, float],
    gold_map: dict[str, float],
) -> CalculatorResult | None:
    """
    Compute what a BTC purchase is worth at the latest price.

    The purchase is made at the first price on or after purchase_date and
    valued at the last price in the series. CPI and M2 lenses fall back to
    nominal when a deflator value is missing; the gold lens falls back to
    zero ounces.

    Returns:
        CalculatorResult, or None when no purchase price can be resolved.
        A non-positive investment or purchase price also gives None instead
        of a result with infinite or NaN returns.
    """
    if len(prices) == 0 or investment_usd <= 0:
        return None

    entry = _first_on_or_after(prices, purchase_date)
    if entry is None or entry.price <= 0:
        return None

    latest = prices[-1]
    btc_price_then = entry.price
    btc_price_now = latest.price
    btc_amount = investment_usd / btc_price_then

    nominal_value = btc_amount * btc_price_now
    nominal_return = (nominal_value - investment_usd) / investment_usd

    cpi_adjusted_value = nominal_value * _deflator_ratio(cpi_map, entry.date, latest.date)
    cpi_adjusted_return = (cpi_adjusted_value - investment_usd) / investment_usd

    m2_adjusted_value = nominal_value * _deflator_ratio(m2_map, entry.date, latest.date)
    m2_adjusted_return = (m2_adjusted_value - investment_usd) / investment_usd

    gold_then = gold_map.get(entry.date)
    gold_now = gold_map.get(latest.date)
    gold_ounces_then = investment_usd / gold_then if gold_then else 0
    gold_ounces_now = nominal_value / gold_now if gold_now else 0
    if gold_ounces_then > 0:
        gold_return = (gold_ounces_now - gold_ounces_then) / gold_ounces_then
    else:
        gold_return = 0

    return CalculatorResult(
        purchase_date=entry.date,
        valuation_date=latest.date,
        investment_usd=investment_usd,
        btc_amount=btc_amount,
        btc_price_then=btc_price_then,
        btc_price_now=btc_price_now,
        nominal_value=nominal_value,
        nominal_return=nominal_return,
        cpi_adjusted_value=cpi_adjusted_value,
        cpi_adjusted_return=cpi_adjusted_return,
        m2_adjusted_value=m2_adjusted_value,
        m2_adjusted_return=m2_adjusted_return,
        gold_ounces_then=gold_ounces_then,
        gold_ounces_now=gold_ounces_now,
        gold_return=gold_return,
    )


def btc_to_usd(amount_btc: float, purchase_date: str, prices: list[PricePoint]) -> float:
    """USD cost of a BTC amount at the first price on or after purchase_date (0.0 if none)."""
    if amount_btc <= 0:
        return 0.0
    entry = _first_on_or_after(prices, purchase_date)
    return amount_btc * entry.price if entry else 0.0
