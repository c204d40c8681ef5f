"""FX delta risk measure (spot bump, finite difference)."""

from __future__ import annotations

from dataclasses import dataclass

from curvepricing.currency import Currency, CurrencyPair
from curvepricing.engine import PricingEngine
from curvepricing.environment import ImmutablePricingEnvironment
from curvepricing.interfaces import Product
from curvepricing.risk.base import BaseRiskMeasure


@dataclass
class FXDelta(BaseRiskMeasure):
    """FX delta: (PV(bumped) - PV(base)) / (spot_bumped - spot), PVs in the reporting currency."""

    engine: PricingEngine
    pair: CurrencyPair
    reporting_currency: Currency
    bump_pct: float = 0.01

    @property
    def name(self) -> str:
        return f"FXDelta_{self.pair}"

    def compute(self, product: Product, env: ImmutablePricingEnvironment) -> float:
        """Finite-difference delta with relative spot bump."""
        spot = env.fx_rate(self.pair)
        spot_bumped = spot * (1.0 + self.bump_pct)
        bumped_env = env.with_fx_rate(self.pair, spot_bumped)
        pv_base = self.engine.present_value_in(product, env, self.reporting_currency)
        pv_bumped = self.engine.present_value_in(product, bumped_env, self.reporting_currency)
        return (pv_bumped.amount - pv_base.amount) / (spot_bumped - spot)
