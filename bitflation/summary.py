"""Text formatting and console summaries of pipeline output."""

from datetime import datetime


def format_usd(value):
    """Format a dollar amount with no cents, e.g. '$1,234'."""
    sign = '-' if value < 0 else ''
    return f"{sign}${abs(value):,.0f}"


def format_usd_compact(value):
    """Format a dollar amount in compact notation, e.g. '$1.2M'."""
    sign = '-' if value < 0 else ''
    value = abs(value)
    for threshold, suffix in ((1e12, 'T'), (1e9, 'B'), (1e6, 'M'), (1e3, 'K')):
        if value >= threshold:
            return f"{sign}${value / threshold:.1f}".rstrip('0').rstrip('.') + suffix
    return f"{sign}${value:,.0f}"


def format_percent(value):
    """Format a fraction as a signed percentage, e.g. 0.123 -> '+12.3%'."""
    if value == 0:
        return "0.0%"
    return f"{value * 100:+.1f}%"


def format_date(date_str):
    """Format 'YYYY-MM-DD' as e.g. 'Jan 5, 2024'."""
    date = datetime.strptime(date_str, '%Y-%m-%d')
    return f"{date.strftime('%b')} {date.day}, {date.year}"


def format_gold_oz(value):
    """Format an ounce amount with precision scaled to its size."""
    if value >= 100:
        return f"{round(value):,} oz"
    if value >= 10:
        return f"{value:.1f} oz"
    return f"{value:.2f} oz"


def format_multiple(value):
    if value is None:
        return '-'
    return f"{value:.1f}x"


def print_returns_summary(result):
    """Print a CalculatorResult as a four-lens summary."""
    if result is None:
        print("No BTC price data available for that purchase date.")
        return

    print("\n" + "=" * 70)
    print("Real Returns")
    print("=" * 70)
    print(f"  Bought {result.btc_amount:.4f} BTC for {format_usd(result.investment_usd)} on {format_date(result.purchase_date)}")
    print(f"  Price then: {format_usd(result.btc_price_then)}  Price now: {format_usd(result.btc_price_now)} ({format_date(result.valuation_date)})")
    print(f"  {'Nominal':20s}: {format_usd(result.nominal_value):>14s}  ({format_percent(result.nominal_return)})")
    print(f"  {'CPI-adjusted':20s}: {format_usd(result.cpi_adjusted_value):>14s}  ({format_percent(result.cpi_adjusted_return)})")
    print(f"  {'M2-adjusted':20s}: {format_usd(result.m2_adjusted_value):>14s}  ({format_percent(result.m2_adjusted_return)})")
    print(f"  {'In gold':20s}: {format_gold_oz(result.gold_ounces_now):>14s}  ({format_percent(result.gold_return)})")


def print_shock_stats(stats, reference_date):
    """Print headline purchasing-power statistics."""
    def pct(value):
        return '-' if value is None else f"{value * 100:.0f}%"

    print(f"\nSince {format_date(reference_date)}:")
    print(f"  Dollar purchasing power lost (CPI):      {pct(stats.dollar_loss)}")
    print(f"  Purchasing power lost (Bitflation Index): {pct(stats.bfi_loss)}")
    print(f"  M2 money supply increase:                {pct(stats.m2_increase)}")
    print(f"  BTC nominal gain:                        {format_multiple(stats.btc_nominal_gain)}")
    print(f"  BTC real gain (CPI-adjusted):            {format_multiple(stats.btc_real_gain)}")
    print(f"  BTC change in gold terms:                {format_multiple(stats.btc_gold_change)}")


def print_data_summary(static):
    """Print a summary of loaded static series."""
    print("\n" + "=" * 70)
    print("Data Summary")
    print("=" * 70)
    for name, points in vars(static).items():
        if len(points) == 0:
            print(f"\n{name}: no data")
            continue
        print(f"\n{name}")
        print(f"  Period: {points[0].date} to {points[-1].date}")
        print(f"  Data points: {len(points)}")
