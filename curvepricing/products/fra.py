"""Forward rate agreement (product data only; pricing via DiscountingFraPricer)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from curvepricing.currency import Currency
from curvepricing.daycount import DayCount
from curvepricing.index import IborIndex
from curvepricing.products.observation import IborRateObservation


class BuySell(Enum):
    """Direction: a FRA buyer pays fixed and receives the floating rate."""

    BUY = 1
    SELL = -1

    def normalize(self, amount: float) -> float:
        """Sign an amount for this direction."""
        return abs(amount) * self.value


class FraDiscountingMethod(Enum):
    """
    How the settlement amount paid at the start of the period is discounted.

    - ISDA: N (F - K) t / (1 + F t)
    - AFMA: N (1 / (1 + K t) - 1 / (1 + F t)), t on ACT/365F
    - NONE: N (F - K) t, no FRA discounting
    """

    NONE = "None"
    ISDA = "ISDA"
    AFMA = "AFMA"


@dataclass(frozen=True)
class ExpandedFra:
    """
    A FRA resolved into the values the pricer needs.

    `notional` is signed (positive when buying). `year_fraction` is fixed at
    expansion time and already follows the discounting method.
    """

    currency: Currency
    notional: float
    fixed_rate: float
    floating_rate: IborRateObservation
    start_date: date
    end_date: date
    payment_date: date
    year_fraction: float
    discounting: FraDiscountingMethod

    def expand(self) -> ExpandedFra:
        return self


@dataclass(frozen=True)
class Fra:
    """
    Forward rate agreement on an Ibor index.

    The currency and day count default to those of the index; the fixing
    date defaults to the start date and the payment date to the start date.
    """

    buy_sell: BuySell
    notional: float
    fixed_rate: float
    index: IborIndex
    start_date: date
    end_date: date
    discounting: FraDiscountingMethod = FraDiscountingMethod.ISDA
    currency: Currency | None = None
    day_count: DayCount | None = None
    fixing_date: date | None = None
    payment_date: date | None = None

    def __post_init__(self) -> None:
        if not self.start_date < self.end_date:
            raise ValueError(f"start_date ({self.start_date}) must be before end_date ({self.end_date})")
        if self.fixing_date is not None and self.fixing_date > self.start_date:
            raise ValueError("fixing_date must not be after start_date")

    def expand(self) -> ExpandedFra:
        """Resolve the FRA into the form consumed by the pricer."""
        if self.discounting is FraDiscountingMethod.AFMA:
            # AFMA settlement is defined on actual days / 365.
            day_count = DayCount.ACT_365F
        else:
            day_count = self.day_count or self.index.day_count
        return ExpandedFra(
            currency=self.currency or self.index.currency,
            notional=self.buy_sell.normalize(self.notional),
            fixed_rate=self.fixed_rate,
            floating_rate=IborRateObservation(self.index, self.fixing_date or self.start_date),
            start_date=self.start_date,
            end_date=self.end_date,
            payment_date=self.payment_date or self.start_date,
            year_fraction=day_count.year_fraction(self.start_date, self.end_date),
            discounting=self.discounting,
        )
