"""Pricer implementations: rate observations, swap legs, swaps, FRAs."""

from curvepricing.pricers.accrual_on_default import AccrualOnDefaultFormula
from curvepricing.pricers.base import BasePricer
from curvepricing.pricers.fra_pricer import DiscountingFraPricer
from curvepricing.pricers.observation_pricer import (
    DispatchingRateObservationPricer,
    FixedRateObservationPricer,
    IborRateObservationPricer,
    OvernightAveragedRateObservationPricer,
    OvernightCompoundedRateObservationPricer,
    RateObservationPricer,
)
from curvepricing.pricers.swap_leg_pricer import DiscountingSwapLegPricer
from curvepricing.pricers.swap_pricer import DiscountingSwapPricer

__all__ = [
    "AccrualOnDefaultFormula",
    "BasePricer",
    "DiscountingFraPricer",
    "DiscountingSwapLegPricer",
    "DiscountingSwapPricer",
    "DispatchingRateObservationPricer",
    "FixedRateObservationPricer",
    "IborRateObservationPricer",
    "OvernightAveragedRateObservationPricer",
    "OvernightCompoundedRateObservationPricer",
    "RateObservationPricer",
]
