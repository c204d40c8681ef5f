"""
Risk measures implemented via "bump and reprice".

PV01Parallel and FXDelta are composable objects; pv01_parallel and fx_delta
are function shortcuts for one-off calls.
"""

from __future__ import annotations

from curvepricing.currency import Currency, CurrencyPair
from curvepricing.engine import PricingEngine
from curvepricing.environment import ImmutablePricingEnvironment
from curvepricing.interfaces import Product
from curvepricing.risk.base import BaseRiskMeasure
from curvepricing.risk.fx_delta import FXDelta
from curvepricing.risk.pv01 import PV01Parallel


def pv01_parallel(
    engine: PricingEngine,
    product: Product,
    env: ImmutablePricingEnvironment,
    currency: Currency,
    reporting_currency: Currency | None = None,
    bump_bp: float = 1.0,
) -> float:
    """
    PV01: change in PV when the curves of `currency` are bumped by bump_bp basis points.
    Reported in `reporting_currency` (defaults to `currency`).
    """
    measure = PV01Parallel(
        engine=engine,
        currency=currency,
        reporting_currency=reporting_currency or currency,
        bump_bp=bump_bp,
    )
    return measure.compute(product, env)


def fx_delta(
    engine: PricingEngine,
    product: Product,
    env: ImmutablePricingEnvironment,
    pair: CurrencyPair,
    reporting_currency: Currency | None = None,
    bump_pct: float = 0.01,
) -> float:
    """
    FX delta: (PV(bumped) - PV(base)) / (spot_bumped - spot).
    Reported in `reporting_currency` (defaults to the pair's counter currency).
    """
    measure = FXDelta(
        engine=engine,
        pair=pair,
        reporting_currency=reporting_currency or pair.counter,
        bump_pct=bump_pct,
    )
    return measure.compute(product, env)


__all__ = [
    "BaseRiskMeasure",
    "PV01Parallel",
    "FXDelta",
    "pv01_parallel",
    "fx_delta",
]
