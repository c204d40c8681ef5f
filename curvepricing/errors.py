"""Exceptions raised by the valuation library."""

from __future__ import annotations


class MarketDataNotFoundError(KeyError):
    """A curve, FX rate or fixing is missing from the pricing environment.

    Subclasses KeyError so callers that treat the environment like a mapping
    keep working. Lookups are never defaulted or retried.
    """

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class CurrencyPairConfigError(ValueError):
    """The currency-pair configuration table is invalid or incomplete."""
