"""
Pricing engine: values products given a pricing environment.

Design intent:
- Products are **data only** (no market access, no pricing methods).
- The engine holds a **registry of pricers** and dispatches on can_price().
- `create_default_engine()` is the composition root: it builds the
  observation pricer, leg pricer and product pricers and wires them
  together. There are no module-level default pricer instances.
"""

from __future__ import annotations

import logging

from curvepricing.currency import Currency, CurrencyAmount, MultiCurrencyAmount
from curvepricing.interfaces import PricingEnvironment, Product
from curvepricing.pricers.base import BasePricer
from curvepricing.sensitivity import PointSensitivities

logger = logging.getLogger(__name__)


class PricingEngine:
    """
    Registry-based pricing engine.

    Pricers are registered at construction of the engine and dispatched
    based on can_price() checks. First matching pricer wins.
    """

    def __init__(self) -> None:
        self._pricers: list[BasePricer] = []

    def register(self, pricer: BasePricer) -> None:
        """Register a pricer for dispatch.

        Order matters: first matching pricer wins.
        """
        self._pricers.append(pricer)

    def pricer_for(self, product: Product) -> BasePricer:
        for pricer in self._pricers:
            if pricer.can_price(product):
                return pricer
        raise ValueError(
            f"No pricer registered for {type(product).__name__}. "
            "Register a pricer with engine.register(pricer)."
        )

    def present_value(self, product: Product, env: PricingEnvironment) -> MultiCurrencyAmount:
        """Dispatch to the appropriate pricer."""
        pricer = self.pricer_for(product)
        logger.debug("Pricing %s with %s", type(product).__name__, type(pricer).__name__)
        return pricer.npv(product, env)

    def present_value_in(self, product: Product, env: PricingEnvironment, currency: Currency) -> CurrencyAmount:
        """Present value converted at spot into a reporting currency."""
        return env.fx_convert(self.present_value(product, env), currency)

    def present_value_sensitivity(self, product: Product, env: PricingEnvironment) -> PointSensitivities:
        return self.pricer_for(product).npv_sensitivity(product, env)


def create_default_engine() -> PricingEngine:
    """Factory for an engine with the built-in FRA and swap pricers."""
    from curvepricing.pricers import (
        DiscountingFraPricer,
        DiscountingSwapLegPricer,
        DiscountingSwapPricer,
        DispatchingRateObservationPricer,
    )

    observation_pricer = DispatchingRateObservationPricer()
    leg_pricer = DiscountingSwapLegPricer(observation_pricer)

    engine = PricingEngine()
    engine.register(DiscountingFraPricer(observation_pricer))
    engine.register(DiscountingSwapPricer(leg_pricer))
    return engine
