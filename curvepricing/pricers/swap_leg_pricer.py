"""
Pricer for a single expanded swap leg.

Leg PV  = sum_i forecast_value(period_i) * DF(ccy, payment_date_i) + sum_j amount_j * DF(ccy, date_j)
Leg FV  = the same sums without discount factors.

Periods are summed in the leg's stored order so results are reproducible.
Payments dated before the valuation date have already been made and
contribute zero.
"""

from __future__ import annotations

import logging
from datetime import date

import pandas as pd

from curvepricing.interfaces import PricingEnvironment
from curvepricing.pricers.observation_pricer import DispatchingRateObservationPricer
from curvepricing.products.swap import ExpandedSwapLeg, NotionalExchange, RatePaymentPeriod
from curvepricing.sensitivity import PointSensitivities

logger = logging.getLogger(__name__)

CASHFLOW_COLUMNS = [
    "type",
    "payment_date",
    "currency",
    "notional",
    "start_date",
    "end_date",
    "year_fraction",
    "rate",
    "forecast_value",
    "discount_factor",
    "present_value",
]


def _is_paid(env: PricingEnvironment, payment_date: date) -> bool:
    return payment_date < env.valuation_date


class DiscountingSwapLegPricer:
    """Prices a leg by discounting each payment on the leg currency's discount curve."""

    def __init__(self, observation_pricer: DispatchingRateObservationPricer) -> None:
        self._observation_pricer = observation_pricer

    # ------------------------------------------------------------------ periods

    def period_rate(self, env: PricingEnvironment, period: RatePaymentPeriod) -> float:
        return self._observation_pricer.rate(env, period.rate_observation, period.start_date, period.end_date)

    def forecast_value(self, env: PricingEnvironment, period: RatePaymentPeriod) -> float:
        """Undiscounted amount paid for a period."""
        if _is_paid(env, period.payment_date):
            return 0.0
        rate = self.period_rate(env, period)
        return period.notional * (period.gearing * rate + period.spread) * period.year_fraction

    def _event_value(self, env: PricingEnvironment, event: NotionalExchange) -> float:
        if _is_paid(env, event.payment_date):
            return 0.0
        return event.payment_amount.amount

    # ------------------------------------------------------------------ leg

    def present_value(self, env: PricingEnvironment, leg: ExpandedSwapLeg) -> float:
        """PV of the leg in its own currency."""
        pv = 0.0
        for period in leg.payment_periods:
            if not _is_paid(env, period.payment_date):
                pv += self.forecast_value(env, period) * env.discount_factor(period.currency, period.payment_date)
        for event in leg.payment_events:
            if not _is_paid(env, event.payment_date):
                pv += event.payment_amount.amount * env.discount_factor(event.currency, event.payment_date)
        logger.debug("Leg %s PV %.6f over %d periods", leg.currency, pv, len(leg.payment_periods))
        return pv

    def future_value(self, env: PricingEnvironment, leg: ExpandedSwapLeg) -> float:
        """Undiscounted value of the leg in its own currency."""
        fv = 0.0
        for period in leg.payment_periods:
            fv += self.forecast_value(env, period)
        for event in leg.payment_events:
            fv += self._event_value(env, event)
        return fv

    def present_value_sensitivity(self, env: PricingEnvironment, leg: ExpandedSwapLeg) -> PointSensitivities:
        """
        PV sensitivity: for each payment, DF * dFV/drate * rate sensitivity plus
        FV * dDF/dr on the discount curve.
        """
        result = PointSensitivities.empty()
        for period in leg.payment_periods:
            if _is_paid(env, period.payment_date):
                continue
            df = env.discount_factor(period.currency, period.payment_date)
            fv = self.forecast_value(env, period)
            rate_sens = self._observation_pricer.rate_sensitivity(
                env, period.rate_observation, period.start_date, period.end_date
            )
            dfv_drate = period.notional * period.gearing * period.year_fraction
            result = result.combined_with(rate_sens.multiplied_by(dfv_drate * df))
            result = result.combined_with(
                env.discount_factor_sensitivity(period.currency, period.payment_date).multiplied_by(fv)
            )
        for event in leg.payment_events:
            if _is_paid(env, event.payment_date):
                continue
            result = result.combined_with(
                env.discount_factor_sensitivity(event.currency, event.payment_date).multiplied_by(
                    event.payment_amount.amount
                )
            )
        return result.normalized()

    # ------------------------------------------------------------------ explain

    def cashflows(self, env: PricingEnvironment, leg: ExpandedSwapLeg) -> pd.DataFrame:
        """One row per future payment of the leg, in schedule order."""
        rows = []
        for period in leg.payment_periods:
            if _is_paid(env, period.payment_date):
                continue
            rate = self.period_rate(env, period)
            fv = self.forecast_value(env, period)
            df = env.discount_factor(period.currency, period.payment_date)
            rows.append({
                "type": "RatePaymentPeriod",
                "payment_date": period.payment_date,
                "currency": period.currency.code,
                "notional": period.notional,
                "start_date": period.start_date,
                "end_date": period.end_date,
                "year_fraction": period.year_fraction,
                "rate": rate,
                "forecast_value": fv,
                "discount_factor": df,
                "present_value": fv * df,
            })
        for event in leg.payment_events:
            if _is_paid(env, event.payment_date):
                continue
            df = env.discount_factor(event.currency, event.payment_date)
            amount = event.payment_amount.amount
            rows.append({
                "type": "NotionalExchange",
                "payment_date": event.payment_date,
                "currency": event.currency.code,
                "notional": amount,
                "start_date": None,
                "end_date": None,
                "year_fraction": None,
                "rate": None,
                "forecast_value": amount,
                "discount_factor": df,
                "present_value": amount * df,
            })
        return pd.DataFrame(rows, columns=CASHFLOW_COLUMNS)
