"""Tests for rate observation pricers and dispatch."""

import math
from dataclasses import dataclass
from datetime import date

import pytest

from conftest import StubEnvironment
from curvepricing.index import GBP_LIBOR_3M, GBP_SONIA
from curvepricing.pricers.observation_pricer import DispatchingRateObservationPricer, FixedRateObservationPricer
from curvepricing.products.observation import (
    FixedRateObservation,
    IborRateObservation,
    OvernightAveragedRateObservation,
    OvernightCompoundedRateObservation,
)
from curvepricing.sensitivity import IborRateSensitivity, OvernightRateSensitivity

START = date(2015, 2, 2)
END = date(2015, 5, 1)


def test_fixed_rate_needs_no_market() -> None:
    """A fixed observation is resolved without touching the environment."""
    pricer = DispatchingRateObservationPricer()
    obs = FixedRateObservation(0.0125)
    env = StubEnvironment()
    assert pricer.rate(env, obs, START, END) == 0.0125
    assert pricer.rate_sensitivity(env, obs, START, END).size() == 0


def test_ibor_rate_and_unit_sensitivity(market_env) -> None:
    pricer = DispatchingRateObservationPricer()
    obs = IborRateObservation(GBP_LIBOR_3M, START)
    assert pricer.rate(market_env, obs, START, END) == market_env.index_rate(GBP_LIBOR_3M, START)
    sens = pricer.rate_sensitivity(market_env, obs, START, END)
    assert sens.sensitivities == (IborRateSensitivity(GBP_LIBOR_3M, START, GBP_LIBOR_3M.currency, 1.0),)


def test_compounded_overnight_is_period_rate(market_env) -> None:
    pricer = DispatchingRateObservationPricer()
    obs = OvernightCompoundedRateObservation(GBP_SONIA, START, END)
    assert pricer.rate(market_env, obs, START, END) == market_env.index_rate(GBP_SONIA, START, END)
    (record,) = pricer.rate_sensitivity(market_env, obs, START, END)
    assert isinstance(record, OvernightRateSensitivity)
    assert (record.fixing_date, record.end_date, record.sensitivity) == (START, END, 1.0)


def test_averaged_overnight_rate(market_env) -> None:
    """Average of instantaneous forwards = ln(1 + R tau) / tau for the period rate R."""
    pricer = DispatchingRateObservationPricer()
    obs = OvernightAveragedRateObservation(GBP_SONIA, START, END)
    period_rate = market_env.index_rate(GBP_SONIA, START, END)
    tau = (END - START).days / 365.0
    rate = pricer.rate(market_env, obs, START, END)
    assert abs(rate - math.log(1.0 + period_rate * tau) / tau) < 1e-14
    # Flat continuous forward curve: the average equals the curve rate.
    assert abs(rate - 0.011) < 1e-12
    assert rate < period_rate

    (record,) = pricer.rate_sensitivity(market_env, obs, START, END)
    assert abs(record.sensitivity - 1.0 / (1.0 + period_rate * tau)) < 1e-15


def test_observation_dates_validated() -> None:
    with pytest.raises(ValueError):
        OvernightCompoundedRateObservation(GBP_SONIA, END, START)
    with pytest.raises(ValueError):
        OvernightAveragedRateObservation(GBP_SONIA, START, START)


def test_dispatch_uses_injected_pricer() -> None:
    class HalfRatePricer(FixedRateObservationPricer):
        def rate(self, env, observation, start_date, end_date) -> float:
            return observation.rate / 2

    pricer = DispatchingRateObservationPricer(fixed=HalfRatePricer())
    assert pricer.rate(StubEnvironment(), FixedRateObservation(0.02), START, END) == 0.01


def test_unknown_observation_kind_raises() -> None:
    """An object outside the closed observation union is a programming error."""

    @dataclass(frozen=True)
    class StepRateObservation:
        rate: float

    pricer = DispatchingRateObservationPricer()
    with pytest.raises(AssertionError):
        pricer.rate(StubEnvironment(), StepRateObservation(0.01), START, END)
    with pytest.raises(AssertionError):
        pricer.rate_sensitivity(StubEnvironment(), StepRateObservation(0.01), START, END)
