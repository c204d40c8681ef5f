"""Pricer for expanded swaps, built on the leg pricer."""

from __future__ import annotations

import logging
from collections.abc import Callable

import pandas as pd

from curvepricing.currency import Currency, CurrencyAmount, CurrencyPair, MultiCurrencyAmount
from curvepricing.interfaces import PricingEnvironment, Product
from curvepricing.pricers.base import BasePricer
from curvepricing.pricers.swap_leg_pricer import DiscountingSwapLegPricer
from curvepricing.products.swap import ExpandedSwap, ExpandedSwapLeg
from curvepricing.sensitivity import PointSensitivities

logger = logging.getLogger(__name__)

LegValueFn = Callable[[PricingEnvironment, ExpandedSwapLeg], float]


class DiscountingSwapPricer(BasePricer):
    """
    Prices a swap by pricing each leg.

    A single-currency swap returns the plain sum of its legs in that currency
    without any FX lookup. A cross-currency swap returns one amount per leg,
    summed by currency, so no target currency has to be picked.
    """

    def __init__(self, leg_pricer: DiscountingSwapLegPricer) -> None:
        self._leg_pricer = leg_pricer

    @property
    def leg_pricer(self) -> DiscountingSwapLegPricer:
        return self._leg_pricer

    def can_price(self, product: Product) -> bool:
        return isinstance(product, ExpandedSwap)

    def npv(self, product: Product, env: PricingEnvironment) -> MultiCurrencyAmount:
        assert isinstance(product, ExpandedSwap)
        return self.present_value(env, product)

    def npv_sensitivity(self, product: Product, env: PricingEnvironment) -> PointSensitivities:
        assert isinstance(product, ExpandedSwap)
        return self.present_value_sensitivity(env, product)

    # ------------------------------------------------------------------ values

    def present_value_in(self, env: PricingEnvironment, swap: ExpandedSwap, currency: Currency) -> CurrencyAmount:
        """PV of every leg converted at spot into `currency` and summed."""
        total = 0.0
        for leg in swap.legs:
            pv = self._leg_pricer.present_value(env, leg)
            if leg.currency != currency:
                pv *= env.fx_rate(CurrencyPair(leg.currency, currency))
            total += pv
        return CurrencyAmount(currency, total)

    def present_value(self, env: PricingEnvironment, swap: ExpandedSwap) -> MultiCurrencyAmount:
        return self._value(env, swap, self._leg_pricer.present_value)

    def future_value(self, env: PricingEnvironment, swap: ExpandedSwap) -> MultiCurrencyAmount:
        return self._value(env, swap, self._leg_pricer.future_value)

    @staticmethod
    def _value(env: PricingEnvironment, swap: ExpandedSwap, value_fn: LegValueFn) -> MultiCurrencyAmount:
        if swap.is_cross_currency():
            logger.debug("Pricing cross-currency swap in %s", [str(c) for c in swap.currencies])
            return MultiCurrencyAmount.total(
                CurrencyAmount(leg.currency, value_fn(env, leg)) for leg in swap.legs
            )
        currency = swap.legs[0].currency
        total = sum(value_fn(env, leg) for leg in swap.legs)
        return MultiCurrencyAmount.single(currency, total)

    def present_value_sensitivity(self, env: PricingEnvironment, swap: ExpandedSwap) -> PointSensitivities:
        return PointSensitivities.merge(
            self._leg_pricer.present_value_sensitivity(env, leg) for leg in swap.legs
        )

    # ------------------------------------------------------------------ explain

    def cashflows(self, env: PricingEnvironment, swap: ExpandedSwap) -> pd.DataFrame:
        """Cashflow table of all legs with a 'leg' column (0-based leg number)."""
        frames = []
        for i, leg in enumerate(swap.legs):
            frame = self._leg_pricer.cashflows(env, leg)
            frame.insert(0, "leg", i)
            frames.append(frame)
        return pd.concat(frames, ignore_index=True)
