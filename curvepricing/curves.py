"""
Already-built curves consumed by the pricing environment.

Curves are not calibrated here: callers hand in pillar times and zero rates
produced elsewhere. The conventions are kept simple and explicit:
- Times are **year fractions** from the environment's valuation date
  (ACT/365F, see `PricingEnvironment.relative_time`).
- Rates are **continuously compounded zero rates**.
- Interpolation is **linear in zero rates** with flat extrapolation.

A discount curve gives discount factors; a forward curve for an index gives
pseudo discount factors from which period forward rates are implied.
"""

from __future__ import annotations

import math
from bisect import bisect_right
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from curvepricing.daycount import DayCount


@dataclass(frozen=True)
class ZeroRateCurve:
    """
    Zero rate curve (continuously compounded) with linear interpolation.

    `times` are strictly increasing year fractions and `zero_rates[i]` is the
    zero rate at `times[i]`. Implements the Curve protocol structurally.
    """

    name: str
    times: tuple[float, ...]
    zero_rates: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "times", tuple(float(t) for t in self.times))
        object.__setattr__(self, "zero_rates", tuple(float(r) for r in self.zero_rates))
        if len(self.times) != len(self.zero_rates):
            raise ValueError("times and zero_rates must have the same length")
        if not self.times:
            raise ValueError("curve has no pillars")
        for i in range(1, len(self.times)):
            if self.times[i] <= self.times[i - 1]:
                raise ValueError("times must be strictly increasing")

    @classmethod
    def flat(cls, name: str, rate: float) -> ZeroRateCurve:
        """Curve with the same zero rate at every time."""
        return cls(name=name, times=(1.0,), zero_rates=(rate,))

    @classmethod
    def from_dates(
        cls,
        name: str,
        valuation_date: date,
        dates: Sequence[date],
        zero_rates: Sequence[float],
    ) -> ZeroRateCurve:
        """Build from pillar dates, measuring time from `valuation_date` with ACT/365F."""
        times = [DayCount.ACT_365F.year_fraction(valuation_date, d) for d in dates]
        return cls(name=name, times=tuple(times), zero_rates=tuple(zero_rates))

    def zero_rate(self, t: float) -> float:
        """Zero rate at time t, flat outside the pillars."""
        if t <= self.times[0]:
            return self.zero_rates[0]
        if t >= self.times[-1]:
            return self.zero_rates[-1]
        i = bisect_right(self.times, t)
        t0, t1 = self.times[i - 1], self.times[i]
        r0, r1 = self.zero_rates[i - 1], self.zero_rates[i]
        return r0 + (r1 - r0) * (t - t0) / (t1 - t0)

    def df(self, t: float) -> float:
        """Discount factor DF(t) = exp(-r(t) * t)."""
        return math.exp(-self.zero_rate(t) * t)

    def bumped(self, bump: float) -> ZeroRateCurve:
        """New curve with a parallel additive shift of every zero rate (1bp = 0.0001)."""
        return ZeroRateCurve(
            name=self.name,
            times=self.times,
            zero_rates=tuple(r + bump for r in self.zero_rates),
        )
