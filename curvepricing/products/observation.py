"""
Rate observations: how the rate of an accrual period is determined.

The set of observation kinds is closed. `RateObservation` is the union of
every kind, and code that resolves an observation matches all of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from curvepricing.index import IborIndex, OvernightIndex


@dataclass(frozen=True)
class FixedRateObservation:
    """A rate agreed at trade time."""

    rate: float


@dataclass(frozen=True)
class IborRateObservation:
    """Rate of an Ibor index, fixed once on the fixing date."""

    index: IborIndex
    fixing_date: date


@dataclass(frozen=True)
class OvernightCompoundedRateObservation:
    """Overnight index rate compounded daily over [start_date, end_date)."""

    index: OvernightIndex
    start_date: date
    end_date: date

    def __post_init__(self) -> None:
        if not self.start_date < self.end_date:
            raise ValueError("start_date must be before end_date")


@dataclass(frozen=True)
class OvernightAveragedRateObservation:
    """Overnight index rate averaged arithmetically over [start_date, end_date)."""

    index: OvernightIndex
    start_date: date
    end_date: date

    def __post_init__(self) -> None:
        if not self.start_date < self.end_date:
            raise ValueError("start_date must be before end_date")


RateObservation = (
    FixedRateObservation
    | IborRateObservation
    | OvernightCompoundedRateObservation
    | OvernightAveragedRateObservation
)
