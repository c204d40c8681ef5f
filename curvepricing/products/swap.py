"""
Expanded swaps (product data only; pricing via DiscountingSwapPricer).

A swap is one or more legs. Each leg is a flat, already-resolved schedule:
an ordered tuple of rate payment periods plus optional notional exchanges.
Schedule generation happens before this point; these objects are not
mutated after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from curvepricing.currency import Currency, CurrencyAmount
from curvepricing.products.observation import RateObservation


@dataclass(frozen=True)
class RatePaymentPeriod:
    """
    One accrual period paid on `payment_date`.

    Forecast value = notional * (gearing * rate + spread) * year_fraction,
    with the rate resolved from `rate_observation`. The notional is signed.
    """

    payment_date: date
    start_date: date
    end_date: date
    year_fraction: float
    currency: Currency
    notional: float
    rate_observation: RateObservation
    gearing: float = 1.0
    spread: float = 0.0

    def __post_init__(self) -> None:
        if not self.start_date < self.end_date:
            raise ValueError(f"start_date ({self.start_date}) must be before end_date ({self.end_date})")
        if self.year_fraction < 0:
            raise ValueError("year_fraction must be >= 0")


@dataclass(frozen=True)
class NotionalExchange:
    """A payment of a known amount, e.g. the initial and final exchanges of a cross-currency swap."""

    payment_date: date
    payment_amount: CurrencyAmount

    @property
    def currency(self) -> Currency:
        return self.payment_amount.currency


@dataclass(frozen=True)
class ExpandedSwapLeg:
    """A swap leg in a single currency, with periods kept in schedule order."""

    currency: Currency
    payment_periods: tuple[RatePaymentPeriod, ...]
    payment_events: tuple[NotionalExchange, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "payment_periods", tuple(self.payment_periods))
        object.__setattr__(self, "payment_events", tuple(self.payment_events))
        if not self.payment_periods and not self.payment_events:
            raise ValueError("Swap leg must have at least one payment")
        for item in (*self.payment_periods, *self.payment_events):
            if item.currency != self.currency:
                raise ValueError(f"Leg currency is {self.currency} but a payment is in {item.currency}")

    @property
    def start_date(self) -> date:
        dates = [p.start_date for p in self.payment_periods] or [e.payment_date for e in self.payment_events]
        return min(dates)

    @property
    def end_date(self) -> date:
        dates = [p.end_date for p in self.payment_periods] or [e.payment_date for e in self.payment_events]
        return max(dates)

    def expand(self) -> ExpandedSwapLeg:
        return self


@dataclass(frozen=True)
class ExpandedSwap:
    """A swap made of one or more expanded legs."""

    legs: tuple[ExpandedSwapLeg, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "legs", tuple(self.legs))
        if not self.legs:
            raise ValueError("Swap must have at least one leg")

    @property
    def currencies(self) -> tuple[Currency, ...]:
        return tuple(sorted({leg.currency for leg in self.legs}))

    def is_cross_currency(self) -> bool:
        """True if the legs are not all in the same currency."""
        return len({leg.currency for leg in self.legs}) > 1

    def expand(self) -> ExpandedSwap:
        return self
