"""
Protocol-based interfaces for the extension points of the library.

Using typing.Protocol enables structural subtyping: any class with the
required methods satisfies the protocol without inheriting from it. Tests and
callers can hand in their own environment or curve implementations.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from curvepricing.currency import (
        Currency,
        CurrencyAmount,
        CurrencyPair,
        MultiCurrencyAmount,
    )
    from curvepricing.index import RateIndex
    from curvepricing.sensitivity import ZeroRateSensitivity


@runtime_checkable
class Curve(Protocol):
    """Protocol for curve implementations held by a pricing environment."""

    name: str

    def df(self, t: float) -> float:
        """Return the (pseudo) discount factor to time t (year fraction)."""
        ...

    def bumped(self, bump: float) -> Curve:
        """Return a new curve with a parallel additive rate shift."""
        ...


class FxRateProvider(Protocol):
    """Anything that can quote an FX rate for a currency pair."""

    def fx_rate(self, pair: CurrencyPair) -> float:
        """Units of `pair.counter` per unit of `pair.base`."""
        ...


@runtime_checkable
class PricingEnvironment(Protocol):
    """
    Read-only market snapshot at a valuation date.

    Every query is a pure function of the snapshot. A lookup for an unknown
    currency, index or pair raises MarketDataNotFoundError.
    """

    @property
    def valuation_date(self) -> date:
        ...

    def discount_factor(self, currency: Currency, on: date) -> float:
        """Present value of one unit of `currency` paid on `on`."""
        ...

    def fx_rate(self, pair: CurrencyPair) -> float:
        """Spot rate for the pair."""
        ...

    def index_rate(self, index: RateIndex, start_date: date, end_date: date | None = None) -> float:
        """
        Rate of an index.

        For an Ibor index `start_date` is the fixing date and `end_date` is
        ignored. For an overnight index the rate is the simple rate compounded
        over [start_date, end_date], or the single overnight fixing on
        `start_date` when `end_date` is omitted.
        """
        ...

    def relative_time(self, on: date) -> float:
        """Year fraction from the valuation date used to read curves."""
        ...

    def discount_factor_sensitivity(self, currency: Currency, on: date) -> ZeroRateSensitivity:
        """Derivative of `discount_factor(currency, on)` to the zero rate at `on`."""
        ...

    def fx_convert(
        self, amount: CurrencyAmount | MultiCurrencyAmount, currency: Currency
    ) -> CurrencyAmount:
        """Convert an amount to `currency` at spot."""
        ...


@runtime_checkable
class Product(Protocol):
    """A priceable product that can be flattened into dated cashflows."""

    def expand(self) -> Product:
        """Return the expanded (resolved) form consumed by the pricers."""
        ...


class RiskMeasure(Protocol):
    """Protocol for risk measure implementations (bump-and-reprice or analytic)."""

    @property
    def name(self) -> str:
        """Human-readable name (e.g. 'PV01_USD', 'FXDelta_EUR/USD')."""
        ...

    def compute(self, product: Product, env: PricingEnvironment) -> float:
        """Compute the risk measure value."""
        ...
