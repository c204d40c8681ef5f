"""
Rate observation pricers: resolve a rate observation to a rate.

`DispatchingRateObservationPricer` is the entry point used by the leg and FRA
pricers. It matches every member of the closed `RateObservation` union and
delegates to the pricer for that kind; there is no fallback branch.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from datetime import date
from typing import assert_never

from curvepricing.interfaces import PricingEnvironment
from curvepricing.products.observation import (
    FixedRateObservation,
    IborRateObservation,
    OvernightAveragedRateObservation,
    OvernightCompoundedRateObservation,
    RateObservation,
)
from curvepricing.sensitivity import (
    IborRateSensitivity,
    OvernightRateSensitivity,
    PointSensitivities,
)


class RateObservationPricer(ABC):
    """Resolves one kind of rate observation for an accrual period."""

    @abstractmethod
    def rate(self, env: PricingEnvironment, observation, start_date: date, end_date: date) -> float:
        """Rate applicable to the accrual period [start_date, end_date]."""
        ...

    @abstractmethod
    def rate_sensitivity(
        self, env: PricingEnvironment, observation, start_date: date, end_date: date
    ) -> PointSensitivities:
        """Derivative of `rate` with respect to the curve points it reads."""
        ...


class FixedRateObservationPricer(RateObservationPricer):
    def rate(self, env, observation: FixedRateObservation, start_date, end_date) -> float:
        return observation.rate

    def rate_sensitivity(self, env, observation: FixedRateObservation, start_date, end_date) -> PointSensitivities:
        return PointSensitivities.empty()


class IborRateObservationPricer(RateObservationPricer):
    """Ibor rate: the historic fixing if fixed before the valuation date, else the forward."""

    def rate(self, env, observation: IborRateObservation, start_date, end_date) -> float:
        return env.index_rate(observation.index, observation.fixing_date)

    def rate_sensitivity(self, env, observation: IborRateObservation, start_date, end_date) -> PointSensitivities:
        if observation.fixing_date < env.valuation_date:
            return PointSensitivities.empty()
        return PointSensitivities.of(
            IborRateSensitivity(
                index=observation.index,
                fixing_date=observation.fixing_date,
                currency=observation.index.currency,
                sensitivity=1.0,
            )
        )


class OvernightCompoundedRateObservationPricer(RateObservationPricer):
    """
    Compounded overnight rate, approximated by the period rate of the forward curve.

    Compounding daily forwards off one curve telescopes to
    (DF(start) / DF(end) - 1) / accrual, so no per-day loop is needed.
    """

    def rate(self, env, observation: OvernightCompoundedRateObservation, start_date, end_date) -> float:
        return env.index_rate(observation.index, observation.start_date, observation.end_date)

    def rate_sensitivity(
        self, env, observation: OvernightCompoundedRateObservation, start_date, end_date
    ) -> PointSensitivities:
        return PointSensitivities.of(
            OvernightRateSensitivity(
                index=observation.index,
                currency=observation.index.currency,
                fixing_date=observation.start_date,
                end_date=observation.end_date,
                sensitivity=1.0,
            )
        )


class OvernightAveragedRateObservationPricer(RateObservationPricer):
    """
    Arithmetic average of overnight rates, approximated from the period rate.

    The average of instantaneous forwards over the period is
    ln(DF(start) / DF(end)) / accrual = ln(1 + R * accrual) / accrual,
    where R is the compounded period rate.
    """

    def rate(self, env, observation: OvernightAveragedRateObservation, start_date, end_date) -> float:
        period_rate = env.index_rate(observation.index, observation.start_date, observation.end_date)
        accrual = self._accrual(observation)
        return math.log1p(period_rate * accrual) / accrual

    def rate_sensitivity(
        self, env, observation: OvernightAveragedRateObservation, start_date, end_date
    ) -> PointSensitivities:
        period_rate = env.index_rate(observation.index, observation.start_date, observation.end_date)
        accrual = self._accrual(observation)
        return PointSensitivities.of(
            OvernightRateSensitivity(
                index=observation.index,
                currency=observation.index.currency,
                fixing_date=observation.start_date,
                end_date=observation.end_date,
                sensitivity=1.0 / (1.0 + period_rate * accrual),
            )
        )

    @staticmethod
    def _accrual(observation: OvernightAveragedRateObservation) -> float:
        return observation.index.day_count.year_fraction(observation.start_date, observation.end_date)


class DispatchingRateObservationPricer:
    """Routes each rate observation to the pricer for its kind."""

    def __init__(
        self,
        fixed: RateObservationPricer | None = None,
        ibor: RateObservationPricer | None = None,
        overnight_compounded: RateObservationPricer | None = None,
        overnight_averaged: RateObservationPricer | None = None,
    ) -> None:
        self._fixed = fixed or FixedRateObservationPricer()
        self._ibor = ibor or IborRateObservationPricer()
        self._overnight_compounded = overnight_compounded or OvernightCompoundedRateObservationPricer()
        self._overnight_averaged = overnight_averaged or OvernightAveragedRateObservationPricer()

    def _pricer_for(self, observation: RateObservation) -> RateObservationPricer:
        if isinstance(observation, FixedRateObservation):
            return self._fixed
        elif isinstance(observation, IborRateObservation):
            return self._ibor
        elif isinstance(observation, OvernightCompoundedRateObservation):
            return self._overnight_compounded
        elif isinstance(observation, OvernightAveragedRateObservation):
            return self._overnight_averaged
        else:
            assert_never(observation)

    def rate(
        self, env: PricingEnvironment, observation: RateObservation, start_date: date, end_date: date
    ) -> float:
        return self._pricer_for(observation).rate(env, observation, start_date, end_date)

    def rate_sensitivity(
        self, env: PricingEnvironment, observation: RateObservation, start_date: date, end_date: date
    ) -> PointSensitivities:
        return self._pricer_for(observation).rate_sensitivity(env, observation, start_date, end_date)
