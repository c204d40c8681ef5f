"""Products: rate observations, FRAs and expanded swaps."""

from curvepricing.products.fra import BuySell, ExpandedFra, Fra, FraDiscountingMethod
from curvepricing.products.observation import (
    FixedRateObservation,
    IborRateObservation,
    OvernightAveragedRateObservation,
    OvernightCompoundedRateObservation,
    RateObservation,
)
from curvepricing.products.swap import (
    ExpandedSwap,
    ExpandedSwapLeg,
    NotionalExchange,
    RatePaymentPeriod,
)

__all__ = [
    "BuySell",
    "ExpandedFra",
    "Fra",
    "FraDiscountingMethod",
    "FixedRateObservation",
    "IborRateObservation",
    "OvernightAveragedRateObservation",
    "OvernightCompoundedRateObservation",
    "RateObservation",
    "ExpandedSwap",
    "ExpandedSwapLeg",
    "NotionalExchange",
    "RatePaymentPeriod",
]
