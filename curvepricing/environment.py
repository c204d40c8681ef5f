"""
Immutable pricing environment.

`ImmutablePricingEnvironment` is a snapshot of the market state needed for
pricing at one valuation date:
- discount curves, keyed by currency
- forward curves, keyed by rate index
- FX spot rates, keyed by currency pair
- historic index fixings, keyed by index then fixing date

All queries are pure functions of the snapshot. Updates (`with_*`) return a
new environment and leave the original unchanged, which is what the
bump-and-reprice risk measures rely on.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from types import MappingProxyType
from typing import assert_never

from curvepricing.currency import Currency, CurrencyAmount, CurrencyPair, MultiCurrencyAmount
from curvepricing.daycount import DayCount
from curvepricing.errors import MarketDataNotFoundError
from curvepricing.index import IborIndex, OvernightIndex, RateIndex
from curvepricing.interfaces import Curve
from curvepricing.sensitivity import ZeroRateSensitivity

CurveGroupName = str

# Day count used to convert dates into curve times.
TIME_DAY_COUNT = DayCount.ACT_365F


class ImmutablePricingEnvironment:
    """Market snapshot at a valuation date. Implements the PricingEnvironment protocol."""

    def __init__(
        self,
        valuation_date: date,
        curve_group: CurveGroupName = "Default",
        discount_curves: Mapping[Currency, Curve] | None = None,
        forward_curves: Mapping[RateIndex, Curve] | None = None,
        fx_rates: Mapping[CurrencyPair, float] | None = None,
        fixings: Mapping[RateIndex, Mapping[date, float]] | None = None,
    ) -> None:
        self._valuation_date = valuation_date
        self._curve_group = curve_group
        # Copies so that callers mutating their own dicts cannot change the snapshot.
        self._discount_curves = MappingProxyType(dict(discount_curves or {}))
        self._forward_curves = MappingProxyType(dict(forward_curves or {}))
        self._fx_rates = MappingProxyType(dict(fx_rates or {}))
        self._fixings = MappingProxyType(
            {index: MappingProxyType(dict(series)) for index, series in (fixings or {}).items()}
        )

    @property
    def valuation_date(self) -> date:
        return self._valuation_date

    @property
    def curve_group(self) -> CurveGroupName:
        return self._curve_group

    @property
    def discount_curves(self) -> Mapping[Currency, Curve]:
        return self._discount_curves

    @property
    def forward_curves(self) -> Mapping[RateIndex, Curve]:
        return self._forward_curves

    @property
    def fx_rates(self) -> Mapping[CurrencyPair, float]:
        return self._fx_rates

    # ------------------------------------------------------------------ lookups

    def discount_curve(self, currency: Currency) -> Curve:
        """Return the discount curve for a currency. Raises MarketDataNotFoundError if absent."""
        try:
            return self._discount_curves[currency]
        except KeyError:
            raise MarketDataNotFoundError(
                f"No discount curve for {currency} in curve group '{self._curve_group}'. "
                f"Available: {sorted(str(c) for c in self._discount_curves)}"
            ) from None

    def forward_curve(self, index: RateIndex) -> Curve:
        """Return the forward curve for an index. Raises MarketDataNotFoundError if absent."""
        try:
            return self._forward_curves[index]
        except KeyError:
            raise MarketDataNotFoundError(
                f"No forward curve for index {index} in curve group '{self._curve_group}'. "
                f"Available: {sorted(str(i) for i in self._forward_curves)}"
            ) from None

    def fixing(self, index: RateIndex, fixing_date: date) -> float:
        """Historic fixing of an index. Raises MarketDataNotFoundError if absent."""
        series = self._fixings.get(index, {})
        if fixing_date not in series:
            raise MarketDataNotFoundError(f"No fixing for index {index} on {fixing_date}")
        return series[fixing_date]

    # ------------------------------------------------------------------ queries

    def relative_time(self, on: date) -> float:
        return TIME_DAY_COUNT.year_fraction(self._valuation_date, on)

    def discount_factor(self, currency: Currency, on: date) -> float:
        return self.discount_curve(currency).df(self.relative_time(on))

    def discount_factor_sensitivity(self, currency: Currency, on: date) -> ZeroRateSensitivity:
        # d/dr exp(-r t) = -t * DF
        t = self.relative_time(on)
        df = self.discount_curve(currency).df(t)
        return ZeroRateSensitivity(currency=currency, date=on, sensitivity=-t * df)

    def fx_rate(self, pair: CurrencyPair) -> float:
        if pair.is_identity():
            return 1.0
        if pair in self._fx_rates:
            return self._fx_rates[pair]
        inverse = pair.inverse()
        if inverse in self._fx_rates:
            return 1.0 / self._fx_rates[inverse]
        raise MarketDataNotFoundError(f"No FX rate for {pair} in curve group '{self._curve_group}'")

    def fx_convert(
        self, amount: CurrencyAmount | MultiCurrencyAmount, currency: Currency
    ) -> CurrencyAmount:
        if isinstance(amount, MultiCurrencyAmount):
            return amount.converted_to(currency, self)
        if amount.currency == currency:
            return amount
        return amount.converted_to(currency, self.fx_rate(CurrencyPair(amount.currency, currency)))

    def index_rate(self, index: RateIndex, start_date: date, end_date: date | None = None) -> float:
        if isinstance(index, IborIndex):
            return self._ibor_rate(index, start_date)
        elif isinstance(index, OvernightIndex):
            # No end date: the single overnight fixing on start_date.
            end = end_date or index.maturity_from_fixing(start_date)
            return self._overnight_period_rate(index, start_date, end)
        else:
            assert_never(index)

    def _ibor_rate(self, index: IborIndex, fixing_date: date) -> float:
        # Fixings strictly before the valuation date are known; the rest are forecast.
        if fixing_date < self._valuation_date:
            return self.fixing(index, fixing_date)
        return self._forward_rate(
            index,
            index.effective_from_fixing(fixing_date),
            index.maturity_from_fixing(fixing_date),
            index.day_count,
        )

    def _overnight_period_rate(self, index: OvernightIndex, start_date: date, end_date: date) -> float:
        if end_date <= start_date:
            raise ValueError(f"end_date ({end_date}) must be after start_date ({start_date})")
        return self._forward_rate(index, start_date, end_date, index.day_count)

    def _forward_rate(self, index: RateIndex, start: date, end: date, day_count: DayCount) -> float:
        """Simple forward rate F = (DF(start) / DF(end) - 1) / accrual."""
        curve = self.forward_curve(index)
        df_start = curve.df(self.relative_time(start))
        df_end = curve.df(self.relative_time(end))
        return (df_start / df_end - 1.0) / day_count.year_fraction(start, end)

    # ------------------------------------------------------------------ updates

    def _copy(self, **changes) -> ImmutablePricingEnvironment:
        args = dict(
            valuation_date=self._valuation_date,
            curve_group=self._curve_group,
            discount_curves=self._discount_curves,
            forward_curves=self._forward_curves,
            fx_rates=self._fx_rates,
            fixings=self._fixings,
        )
        args.update(changes)
        return ImmutablePricingEnvironment(**args)

    def with_discount_curve(self, currency: Currency, curve: Curve) -> ImmutablePricingEnvironment:
        """Return a new environment with the discount curve for `currency` replaced/added."""
        return self._copy(discount_curves={**self._discount_curves, currency: curve})

    def with_forward_curve(self, index: RateIndex, curve: Curve) -> ImmutablePricingEnvironment:
        """Return a new environment with the forward curve for `index` replaced/added."""
        return self._copy(forward_curves={**self._forward_curves, index: curve})

    def with_fx_rate(self, pair: CurrencyPair, rate: float) -> ImmutablePricingEnvironment:
        """Return a new environment with the FX rate for `pair` replaced/added."""
        # Drop an inverse quote so the new rate is the one used.
        rates = {p: r for p, r in self._fx_rates.items() if p != pair.inverse()}
        rates[pair] = rate
        return self._copy(fx_rates=rates)

    def __repr__(self) -> str:
        return (
            f"ImmutablePricingEnvironment(valuation_date={self._valuation_date}, "
            f"curve_group={self._curve_group!r})"
        )
