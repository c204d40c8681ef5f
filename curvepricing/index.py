"""
Rate indices.

An index is an opaque key for looking up a forward curve (and historic
fixings) in the pricing environment; its name is also the curve-key string
used to order point sensitivities.

Business-day calendars are not modelled: the effective date of an Ibor index
is its fixing date and the maturity is the effective date plus the tenor.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from dateutil.relativedelta import relativedelta

from curvepricing.currency import AUD, EUR, GBP, USD, Currency
from curvepricing.daycount import DayCount


@dataclass(frozen=True)
class IborIndex:
    """Term rate index such as GBP-LIBOR-3M, fixed once for a tenor."""

    name: str
    currency: Currency
    tenor_months: int
    day_count: DayCount

    def __post_init__(self) -> None:
        if self.tenor_months <= 0:
            raise ValueError("tenor_months must be > 0")

    def effective_from_fixing(self, fixing_date: date) -> date:
        return fixing_date

    def maturity_from_fixing(self, fixing_date: date) -> date:
        return self.effective_from_fixing(fixing_date) + relativedelta(months=self.tenor_months)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class OvernightIndex:
    """Overnight index such as SONIA or SOFR, observed daily and compounded or averaged."""

    name: str
    currency: Currency
    day_count: DayCount

    def maturity_from_fixing(self, fixing_date: date) -> date:
        return fixing_date + relativedelta(days=1)

    def __str__(self) -> str:
        return self.name


RateIndex = IborIndex | OvernightIndex

GBP_LIBOR_3M = IborIndex("GBP-LIBOR-3M", GBP, 3, DayCount.ACT_365F)
USD_LIBOR_3M = IborIndex("USD-LIBOR-3M", USD, 3, DayCount.ACT_360)
EUR_EURIBOR_3M = IborIndex("EUR-EURIBOR-3M", EUR, 3, DayCount.ACT_360)
EUR_EURIBOR_6M = IborIndex("EUR-EURIBOR-6M", EUR, 6, DayCount.ACT_360)
AUD_BBSW_3M = IborIndex("AUD-BBSW-3M", AUD, 3, DayCount.ACT_365F)

GBP_SONIA = OvernightIndex("GBP-SONIA", GBP, DayCount.ACT_365F)
USD_SOFR = OvernightIndex("USD-SOFR", USD, DayCount.ACT_360)
EUR_ESTR = OvernightIndex("EUR-ESTR", EUR, DayCount.ACT_360)
