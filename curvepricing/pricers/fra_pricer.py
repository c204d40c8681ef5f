"""Pricer for forward rate agreements."""

from __future__ import annotations

import logging
from typing import assert_never

from curvepricing.currency import CurrencyAmount, MultiCurrencyAmount
from curvepricing.interfaces import PricingEnvironment, Product
from curvepricing.pricers.base import BasePricer
from curvepricing.pricers.observation_pricer import DispatchingRateObservationPricer
from curvepricing.products.fra import ExpandedFra, Fra, FraDiscountingMethod
from curvepricing.sensitivity import PointSensitivities

logger = logging.getLogger(__name__)


class DiscountingFraPricer(BasePricer):
    """
    Prices a FRA from the forward rate of its index.

    PV = FV * DF(currency, payment_date), where FV is the settlement amount
    under the FRA's discounting method. The method is stored on the expanded
    FRA; callers do not pick it.
    """

    def __init__(self, observation_pricer: DispatchingRateObservationPricer) -> None:
        self._observation_pricer = observation_pricer

    def can_price(self, product: Product) -> bool:
        return isinstance(product, (Fra, ExpandedFra))

    def npv(self, product: Product, env: PricingEnvironment) -> MultiCurrencyAmount:
        assert isinstance(product, (Fra, ExpandedFra))
        return MultiCurrencyAmount.of(self.present_value(env, product))

    def npv_sensitivity(self, product: Product, env: PricingEnvironment) -> PointSensitivities:
        assert isinstance(product, (Fra, ExpandedFra))
        return self.present_value_sensitivity(env, product)

    # ------------------------------------------------------------------ values

    def forward_rate(self, env: PricingEnvironment, fra: Fra | ExpandedFra) -> float:
        expanded = fra.expand()
        return self._observation_pricer.rate(env, expanded.floating_rate, expanded.start_date, expanded.end_date)

    def par_rate(self, env: PricingEnvironment, fra: Fra | ExpandedFra) -> float:
        """Fixed rate at which the FRA is worth zero; the forward rate for every method."""
        return self.forward_rate(env, fra)

    def future_value(self, env: PricingEnvironment, fra: Fra | ExpandedFra) -> CurrencyAmount:
        """Settlement amount before discounting to the valuation date."""
        expanded = fra.expand()
        forward = self.forward_rate(env, expanded)
        amount = self._settlement_amount(expanded, forward)
        logger.debug("FRA %s FV %.6f at forward %.8f", expanded.discounting.value, amount, forward)
        return CurrencyAmount(expanded.currency, amount)

    def present_value(self, env: PricingEnvironment, fra: Fra | ExpandedFra) -> CurrencyAmount:
        expanded = fra.expand()
        df = env.discount_factor(expanded.currency, expanded.payment_date)
        return self.future_value(env, expanded).multiplied_by(df)

    def present_value_sensitivity(self, env: PricingEnvironment, fra: Fra | ExpandedFra) -> PointSensitivities:
        expanded = fra.expand()
        forward = self.forward_rate(env, expanded)
        df = env.discount_factor(expanded.currency, expanded.payment_date)
        fv = self._settlement_amount(expanded, forward)
        rate_sens = self._observation_pricer.rate_sensitivity(
            env, expanded.floating_rate, expanded.start_date, expanded.end_date
        )
        derivative = self._settlement_derivative(expanded, forward)
        discount_sens = env.discount_factor_sensitivity(expanded.currency, expanded.payment_date)
        return rate_sens.multiplied_by(derivative * df).combined_with(discount_sens.multiplied_by(fv)).normalized()

    # ------------------------------------------------------------------ formulas

    @staticmethod
    def _settlement_amount(fra: ExpandedFra, forward: float) -> float:
        notional = fra.notional
        fixed_rate = fra.fixed_rate
        yf = fra.year_fraction
        method = fra.discounting
        if method is FraDiscountingMethod.ISDA:
            return notional * (forward - fixed_rate) * yf / (1 + forward * yf)
        elif method is FraDiscountingMethod.AFMA:
            return notional * (1.0 / (1 + fixed_rate * yf) - 1.0 / (1 + forward * yf))
        elif method is FraDiscountingMethod.NONE:
            return notional * (forward - fixed_rate) * yf
        else:
            assert_never(method)

    @staticmethod
    def _settlement_derivative(fra: ExpandedFra, forward: float) -> float:
        """Derivative of the settlement amount with respect to the forward rate."""
        notional = fra.notional
        yf = fra.year_fraction
        method = fra.discounting
        if method is FraDiscountingMethod.ISDA:
            return notional * yf * (1 + fra.fixed_rate * yf) / (1 + forward * yf) ** 2
        elif method is FraDiscountingMethod.AFMA:
            return notional * yf / (1 + forward * yf) ** 2
        elif method is FraDiscountingMethod.NONE:
            return notional * yf
        else:
            assert_never(method)
