"""Shared fixtures: hand-written environments and observation pricers for isolating pricers."""

from datetime import date

import pytest

from curvepricing.currency import GBP, USD, Currency, CurrencyAmount, CurrencyPair, MultiCurrencyAmount
from curvepricing.curves import ZeroRateCurve
from curvepricing.daycount import DayCount
from curvepricing.environment import ImmutablePricingEnvironment
from curvepricing.index import GBP_LIBOR_3M, GBP_SONIA, USD_LIBOR_3M
from curvepricing.products.observation import IborRateObservation
from curvepricing.sensitivity import IborRateSensitivity, PointSensitivities, ZeroRateSensitivity

VAL_DATE = date(2015, 1, 5)


class StubEnvironment:
    """
    Environment with one discount factor for every currency and date.

    FX rates come from a plain dict and every lookup is recorded in
    `fx_lookups`, so tests can assert whether conversion happened.
    """

    def __init__(self, valuation_date: date = VAL_DATE, df: float = 1.0, fx_rates=None) -> None:
        self._valuation_date = valuation_date
        self.df = df
        self.fx_rates = dict(fx_rates or {})
        self.fx_lookups: list[CurrencyPair] = []

    @property
    def valuation_date(self) -> date:
        return self._valuation_date

    def relative_time(self, on: date) -> float:
        return DayCount.ACT_365F.year_fraction(self._valuation_date, on)

    def discount_factor(self, currency: Currency, on: date) -> float:
        return self.df

    def discount_factor_sensitivity(self, currency: Currency, on: date) -> ZeroRateSensitivity:
        return ZeroRateSensitivity(currency, on, -self.relative_time(on) * self.df)

    def fx_rate(self, pair: CurrencyPair) -> float:
        self.fx_lookups.append(pair)
        if pair.is_identity():
            return 1.0
        if pair in self.fx_rates:
            return self.fx_rates[pair]
        return 1.0 / self.fx_rates[pair.inverse()]

    def index_rate(self, index, start_date: date, end_date: date | None = None) -> float:
        raise AssertionError("index_rate should not be called on the stub environment")

    def fx_convert(self, amount, currency: Currency) -> CurrencyAmount:
        if isinstance(amount, MultiCurrencyAmount):
            return amount.converted_to(currency, self)
        return amount.converted_to(currency, self.fx_rate(CurrencyPair(amount.currency, currency)))


class StubObservationPricer:
    """Returns a fixed forward for any observation and a unit Ibor sensitivity."""

    def __init__(self, forward: float) -> None:
        self.forward = forward

    def rate(self, env, observation, start_date: date, end_date: date) -> float:
        return self.forward

    def rate_sensitivity(self, env, observation, start_date: date, end_date: date) -> PointSensitivities:
        assert isinstance(observation, IborRateObservation)
        return PointSensitivities.of(
            IborRateSensitivity(observation.index, observation.fixing_date, observation.index.currency, 1.0)
        )


@pytest.fixture
def market_env() -> ImmutablePricingEnvironment:
    """GBP and USD discount and forward curves, a GBP/USD spot rate and one historic LIBOR fixing."""
    gbp = ZeroRateCurve(name="GBP-DSC", times=[0.5, 1.0, 2.0, 5.0], zero_rates=[0.010, 0.012, 0.015, 0.020])
    usd = ZeroRateCurve(name="USD-DSC", times=[0.5, 1.0, 2.0, 5.0], zero_rates=[0.004, 0.006, 0.010, 0.017])
    return ImmutablePricingEnvironment(
        valuation_date=VAL_DATE,
        discount_curves={GBP: gbp, USD: usd},
        forward_curves={
            GBP_LIBOR_3M: ZeroRateCurve.flat("GBP-LIBOR-3M", 0.018),
            USD_LIBOR_3M: ZeroRateCurve.flat("USD-LIBOR-3M", 0.009),
            GBP_SONIA: ZeroRateCurve.flat("GBP-SONIA", 0.011),
        },
        fx_rates={CurrencyPair(GBP, USD): 1.55},
        fixings={GBP_LIBOR_3M: {date(2014, 12, 15): 0.0056}},
    )
