"""Curve-based valuation library: money, environment, products, pricers, sensitivities and risk."""

from curvepricing.currency import (
    Currency,
    CurrencyAmount,
    CurrencyPair,
    MultiCurrencyAmount,
)
from curvepricing.currency_pairs import default_currency_pairs, load_currency_pairs
from curvepricing.curves import ZeroRateCurve
from curvepricing.daycount import DayCount
from curvepricing.engine import PricingEngine, create_default_engine
from curvepricing.environment import ImmutablePricingEnvironment
from curvepricing.errors import CurrencyPairConfigError, MarketDataNotFoundError
from curvepricing.index import IborIndex, OvernightIndex
from curvepricing.interfaces import Curve, PricingEnvironment, Product, RiskMeasure
from curvepricing.pricers import (
    AccrualOnDefaultFormula,
    BasePricer,
    DiscountingFraPricer,
    DiscountingSwapLegPricer,
    DiscountingSwapPricer,
    DispatchingRateObservationPricer,
)
from curvepricing.products import (
    BuySell,
    ExpandedFra,
    ExpandedSwap,
    ExpandedSwapLeg,
    Fra,
    FraDiscountingMethod,
    NotionalExchange,
    RatePaymentPeriod,
)
from curvepricing.risk import FXDelta, PV01Parallel, fx_delta, pv01_parallel
from curvepricing.sensitivity import (
    IborRateSensitivity,
    OvernightRateSensitivity,
    PointSensitivities,
    PointSensitivity,
    ZeroRateSensitivity,
)

__version__ = "0.1.0"

__all__ = [
    "Currency",
    "CurrencyAmount",
    "CurrencyPair",
    "MultiCurrencyAmount",
    "default_currency_pairs",
    "load_currency_pairs",
    "ZeroRateCurve",
    "DayCount",
    "PricingEngine",
    "create_default_engine",
    "ImmutablePricingEnvironment",
    "CurrencyPairConfigError",
    "MarketDataNotFoundError",
    "IborIndex",
    "OvernightIndex",
    "Curve",
    "PricingEnvironment",
    "Product",
    "RiskMeasure",
    "AccrualOnDefaultFormula",
    "BasePricer",
    "DiscountingFraPricer",
    "DiscountingSwapLegPricer",
    "DiscountingSwapPricer",
    "DispatchingRateObservationPricer",
    "BuySell",
    "ExpandedFra",
    "ExpandedSwap",
    "ExpandedSwapLeg",
    "Fra",
    "FraDiscountingMethod",
    "NotionalExchange",
    "RatePaymentPeriod",
    "FXDelta",
    "PV01Parallel",
    "fx_delta",
    "pv01_parallel",
    "IborRateSensitivity",
    "OvernightRateSensitivity",
    "PointSensitivities",
    "PointSensitivity",
    "ZeroRateSensitivity",
]
