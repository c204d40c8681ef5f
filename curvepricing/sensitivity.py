"""
Point sensitivities.

A point sensitivity is the partial derivative of a value with respect to one
point of one curve: a discount curve (keyed by currency) or a forward curve
(keyed by index). Each record carries the curve key, the currency of the
sensitivity, the date(s) looked up, and the value.

Records have a total order that ignores the value (`compare_key`): curve-key
string, currency, fixing date, end date, then kind, so records of different
kinds never merge. `PointSensitivities` uses it to sort and to merge records
with equal keys by summing their values, which is also how results from
independent computations are reduced.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from datetime import date
from typing import Any

from curvepricing.currency import Currency
from curvepricing.index import IborIndex, OvernightIndex


class PointSensitivity(ABC):
    """Base for point sensitivity records."""

    currency: Currency
    sensitivity: float

    @property
    @abstractmethod
    def curve_key(self) -> Any:
        """Key of the curve the sensitivity refers to."""
        ...

    @abstractmethod
    def compare_key(self) -> tuple:
        """Ordering key, excluding the sensitivity value."""
        ...

    def with_sensitivity(self, sensitivity: float) -> PointSensitivity:
        return replace(self, sensitivity=sensitivity)

    def multiplied_by(self, factor: float) -> PointSensitivity:
        return self.with_sensitivity(self.sensitivity * factor)


@dataclass(frozen=True)
class ZeroRateSensitivity(PointSensitivity):
    """Sensitivity to the continuously compounded zero rate of a discount curve at a date."""

    currency: Currency
    date: date
    sensitivity: float

    @property
    def curve_key(self) -> Currency:
        return self.currency

    def compare_key(self) -> tuple:
        return (str(self.currency), self.currency, self.date, self.date, type(self).__name__)


@dataclass(frozen=True)
class IborRateSensitivity(PointSensitivity):
    """Sensitivity to the forward rate of an Ibor index for a fixing date."""

    index: IborIndex
    fixing_date: date
    currency: Currency
    sensitivity: float

    @property
    def curve_key(self) -> IborIndex:
        return self.index

    def compare_key(self) -> tuple:
        return (str(self.index), self.currency, self.fixing_date, self.fixing_date, type(self).__name__)


@dataclass(frozen=True)
class OvernightRateSensitivity(PointSensitivity):
    """
    Sensitivity to the rate of an overnight index over a period.

    Rather than one record per overnight fixing, the period rate is
    approximated from the curve, so the record carries the end date of the
    period. The end date must be after the fixing date.
    """

    index: OvernightIndex
    currency: Currency
    fixing_date: date
    end_date: date
    sensitivity: float

    def __post_init__(self) -> None:
        if not self.fixing_date < self.end_date:
            raise ValueError(
                f"fixing_date ({self.fixing_date}) must be before end_date ({self.end_date})"
            )

    @classmethod
    def of(
        cls,
        index: OvernightIndex,
        fixing_date: date,
        sensitivity: float,
        currency: Currency | None = None,
        end_date: date | None = None,
    ) -> OvernightRateSensitivity:
        """Default the currency to the index currency and the end date to the next day."""
        return cls(
            index=index,
            currency=currency or index.currency,
            fixing_date=fixing_date,
            end_date=end_date or index.maturity_from_fixing(fixing_date),
            sensitivity=sensitivity,
        )

    @property
    def curve_key(self) -> OvernightIndex:
        return self.index

    def compare_key(self) -> tuple:
        return (str(self.index), self.currency, self.fixing_date, self.end_date, type(self).__name__)


@dataclass(frozen=True)
class PointSensitivities:
    """Immutable collection of point sensitivities."""

    sensitivities: tuple[PointSensitivity, ...] = ()

    @classmethod
    def of(cls, *sensitivities: PointSensitivity) -> PointSensitivities:
        return cls(tuple(sensitivities))

    @classmethod
    def empty(cls) -> PointSensitivities:
        return cls(())

    @classmethod
    def merge(cls, results: Iterable[PointSensitivities]) -> PointSensitivities:
        """Reduce independently computed results into one normalized collection."""
        merged: list[PointSensitivity] = []
        for result in results:
            merged.extend(result.sensitivities)
        return cls(tuple(merged)).normalized()

    def size(self) -> int:
        return len(self.sensitivities)

    def combined_with(self, other: PointSensitivities | PointSensitivity) -> PointSensitivities:
        if isinstance(other, PointSensitivity):
            return PointSensitivities(self.sensitivities + (other,))
        return PointSensitivities(self.sensitivities + other.sensitivities)

    def multiplied_by(self, factor: float) -> PointSensitivities:
        return PointSensitivities(tuple(s.multiplied_by(factor) for s in self.sensitivities))

    def normalized(self) -> PointSensitivities:
        """Sort by `compare_key` and sum records sharing a key."""
        result: list[PointSensitivity] = []
        for s in sorted(self.sensitivities, key=lambda p: p.compare_key()):
            if result and result[-1].compare_key() == s.compare_key():
                result[-1] = result[-1].with_sensitivity(result[-1].sensitivity + s.sensitivity)
            else:
                result.append(s)
        return PointSensitivities(tuple(result))

    def equal_with_tolerance(self, other: PointSensitivities, tolerance: float) -> bool:
        mine = self.normalized().sensitivities
        theirs = other.normalized().sensitivities
        if len(mine) != len(theirs):
            return False
        for a, b in zip(mine, theirs):
            if a.compare_key() != b.compare_key():
                return False
            if abs(a.sensitivity - b.sensitivity) > tolerance:
                return False
        return True

    def __add__(self, other: PointSensitivities | PointSensitivity) -> PointSensitivities:
        return self.combined_with(other)

    def __iter__(self) -> Iterator[PointSensitivity]:
        return iter(self.sensitivities)

    def __len__(self) -> int:
        return len(self.sensitivities)
