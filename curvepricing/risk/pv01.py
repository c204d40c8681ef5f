"""Parallel PV01 risk measure (bump-and-reprice)."""

from __future__ import annotations

from dataclasses import dataclass

from curvepricing.currency import Currency
from curvepricing.engine import PricingEngine
from curvepricing.environment import ImmutablePricingEnvironment
from curvepricing.interfaces import Product
from curvepricing.risk.base import BaseRiskMeasure


@dataclass
class PV01Parallel(BaseRiskMeasure):
    """Parallel PV01: change in PV for a parallel shift of the curves of one currency.

    The discount curve of `currency` is always bumped; forward curves of
    indices in that currency are bumped too unless `include_forward_curves`
    is False.
    """

    engine: PricingEngine
    currency: Currency
    reporting_currency: Currency
    bump_bp: float = 1.0
    include_forward_curves: bool = True

    @property
    def name(self) -> str:
        return f"PV01_{self.currency}"

    def compute(self, product: Product, env: ImmutablePricingEnvironment) -> float:
        """PV(bumped) - PV(base) in the reporting currency."""
        bump = self.bump_bp / 10000.0
        bumped_env = env.with_discount_curve(self.currency, env.discount_curve(self.currency).bumped(bump))
        if self.include_forward_curves:
            for index, curve in env.forward_curves.items():
                if index.currency == self.currency:
                    bumped_env = bumped_env.with_forward_curve(index, curve.bumped(bump))
        pv_bumped = self.engine.present_value_in(product, bumped_env, self.reporting_currency)
        pv_base = self.engine.present_value_in(product, env, self.reporting_currency)
        return pv_bumped.amount - pv_base.amount
