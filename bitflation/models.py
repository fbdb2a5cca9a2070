"""Value types passed between pipeline stages.

Dates are zero-padded ISO ``YYYY-MM-DD`` strings throughout, so plain string
comparison orders them chronologically. Daily lookups are ``dict[str, float]``
keyed the same way; a missing key means "no data" and is never zero-filled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Timeframe(str, Enum):
    ONE_YEAR = '1Y'
    FIVE_YEARS = '5Y'
    ALL = 'ALL'


class DeflatorChoice(str, Enum):
    """Anchor-relative deflators. Gold is a unit conversion and lives apart."""

    CPI = 'CPI'
    M2 = 'M2'
    DXY = 'DXY'
    BFI = 'BFI'


class ComparisonAsset(str, Enum):
    SP500 = 'sp500'
    GOLD = 'gold'
    HOUSING = 'housing'


class LiveDataStatus(str, Enum):
    ALL = 'all'
    PARTIAL = 'partial'
    NONE = 'none'


@dataclass(frozen=True)
class PricePoint:
    date: str
    price: float


@dataclass(frozen=True)
class DeflatorPoint:
    date: str
    value: float


@dataclass(frozen=True)
class AdjustedPricePoint:
    date: str
    nominal_price: float
    adjusted_price: float


@dataclass(frozen=True)
class GoldPricePoint:
    date: str
    nominal_price: float
    gold_ounces: float
    gold_price_usd: float


@dataclass(frozen=True)
class MultiMetricPoint:
    """Nominal price with one adjusted value per selected deflator.

    ``inflation_gap`` is nominal minus the primary deflator's adjusted price,
    or None when the primary deflator has no value on this date.
    """

    date: str
    nominal_price: float
    adjusted: dict[DeflatorChoice, float] = field(default_factory=dict)
    inflation_gap: float | None = None


@dataclass(frozen=True)
class SecondaryMetric:
    """A non-primary deflator's adjusted price on the latest date.

    ``diff`` is the adjusted price relative to nominal, e.g. -0.25 when the
    deflator takes a quarter off the nominal price.
    """

    deflator: DeflatorChoice
    adjusted_price: float
    diff: float


@dataclass(frozen=True)
class ComparisonPoint:
    date: str
    btc: float
    assets: dict[str, float] = field(default_factory=dict)

    def get(self, key, default=None):
        if key == 'btc':
            return self.btc
        return self.assets.get(key, default)


@dataclass(frozen=True)
class CalculatorResult:
    purchase_date: str
    valuation_date: str
    investment_usd: float
    btc_amount: float
    btc_price_then: float
    btc_price_now: float
    nominal_value: float
    nominal_return: float
    cpi_adjusted_value: float
    cpi_adjusted_return: float
    m2_adjusted_value: float
    m2_adjusted_return: float
    gold_ounces_then: float
    gold_ounces_now: float
    gold_return: float


@dataclass(frozen=True)
class ShockStats:
    dollar_loss: float | None = None
    btc_nominal_gain: float | None = None
    btc_real_gain: float | None = None
    m2_increase: float | None = None
    bfi_loss: float | None = None
    btc_gold_change: float | None = None


@dataclass(frozen=True)
class ChartEvent:
    date: str
    label: str
    color: str


@dataclass(frozen=True)
class StaticSeries:
    """Bundled history for every source, as shipped with the package."""

    btc: list[PricePoint] = field(default_factory=list)
    cpi: list[DeflatorPoint] = field(default_factory=list)
    m2: list[DeflatorPoint] = field(default_factory=list)
    gold: list[DeflatorPoint] = field(default_factory=list)
    dxy: list[DeflatorPoint] = field(default_factory=list)
    sp500: list[PricePoint] = field(default_factory=list)
    housing: list[PricePoint] = field(default_factory=list)


@dataclass(frozen=True)
class LiveSeries:
    """Trailing observations fetched at runtime. Empty lists mean no live data."""

    btc: list[PricePoint] = field(default_factory=list)
    m2: list[DeflatorPoint] = field(default_factory=list)
    dxy: list[DeflatorPoint] = field(default_factory=list)
    sp500: list[DeflatorPoint] = field(default_factory=list)
