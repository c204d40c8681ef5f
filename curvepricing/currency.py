"""
Money primitives: currencies, currency pairs and amounts.

These are plain immutable values:
- `Currency` is an ISO-4217 code with the number of minor-unit digits.
- `CurrencyPair` is an ordered (base, counter) pair; market conventions for a
  pair (orientation, rate digits) live in `curvepricing.currency_pairs`.
- `CurrencyAmount` is a single (currency, amount).
- `MultiCurrencyAmount` holds at most one amount per currency; every way of
  building one sums amounts that share a currency.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from curvepricing.interfaces import FxRateProvider

_CODE_PATTERN = re.compile(r"^[A-Z]{3}$")

# ISO-4217 minor units for codes that differ from the default of 2.
_MINOR_UNITS: dict[str, int] = {
    "BHD": 3,
    "CLP": 0,
    "ISK": 0,
    "JPY": 0,
    "KRW": 0,
    "XAG": 0,
    "XAU": 0,
    "XPD": 0,
    "XPT": 0,
}


@dataclass(frozen=True, order=True)
class Currency:
    """ISO-4217 currency. Equality and ordering use the code only."""

    code: str
    minor_unit_digits: int = field(default=2, compare=False)

    def __post_init__(self) -> None:
        if not _CODE_PATTERN.match(self.code):
            raise ValueError(f"Invalid currency code: {self.code!r}")
        if self.minor_unit_digits < 0:
            raise ValueError("minor_unit_digits must be >= 0")

    @classmethod
    def of(cls, code: str | Currency) -> Currency:
        """Return the currency for an ISO code (upper-cased)."""
        if isinstance(code, Currency):
            return code
        code = code.upper()
        return cls(code, _MINOR_UNITS.get(code, 2))

    def round_minor_units(self, amount: float) -> float:
        """Round an amount to this currency's minor units."""
        return round(amount, self.minor_unit_digits)

    def __str__(self) -> str:
        return self.code


USD = Currency.of("USD")
EUR = Currency.of("EUR")
GBP = Currency.of("GBP")
JPY = Currency.of("JPY")
CHF = Currency.of("CHF")
AUD = Currency.of("AUD")
NZD = Currency.of("NZD")
CAD = Currency.of("CAD")
SEK = Currency.of("SEK")
NOK = Currency.of("NOK")
DKK = Currency.of("DKK")


@dataclass(frozen=True)
class CurrencyPair:
    """Ordered pair of currencies; a rate of 1.30 for GBP/USD means 1 GBP = 1.30 USD."""

    base: Currency
    counter: Currency

    @classmethod
    def of(cls, base: Currency | str, counter: Currency | str) -> CurrencyPair:
        return cls(Currency.of(base), Currency.of(counter))

    @classmethod
    def parse(cls, pair: str) -> CurrencyPair:
        """Parse 'EUR/USD' (or 'EURUSD')."""
        text = pair.strip().upper()
        if len(text) == 7 and text[3] == "/":
            return cls.of(text[:3], text[4:])
        if len(text) == 6:
            return cls.of(text[:3], text[3:])
        raise ValueError(f"Invalid currency pair: {pair!r}")

    def inverse(self) -> CurrencyPair:
        return CurrencyPair(self.counter, self.base)

    def is_identity(self) -> bool:
        return self.base == self.counter

    def is_inverse(self, other: CurrencyPair) -> bool:
        return self.base == other.counter and self.counter == other.base

    def contains(self, currency: Currency) -> bool:
        return currency in (self.base, self.counter)

    def __str__(self) -> str:
        return f"{self.base}/{self.counter}"


@dataclass(frozen=True)
class CurrencyAmount:
    """An amount of money in a single currency."""

    currency: Currency
    amount: float

    @classmethod
    def of(cls, currency: Currency | str, amount: float) -> CurrencyAmount:
        return cls(Currency.of(currency), float(amount))

    @classmethod
    def zero(cls, currency: Currency | str) -> CurrencyAmount:
        return cls.of(currency, 0.0)

    def plus(self, other: CurrencyAmount) -> CurrencyAmount:
        if other.currency != self.currency:
            raise ValueError(
                f"Cannot add {other.currency} amount to {self.currency} amount; "
                "use MultiCurrencyAmount"
            )
        return CurrencyAmount(self.currency, self.amount + other.amount)

    def minus(self, other: CurrencyAmount) -> CurrencyAmount:
        return self.plus(other.negated())

    def multiplied_by(self, factor: float) -> CurrencyAmount:
        return CurrencyAmount(self.currency, self.amount * factor)

    def negated(self) -> CurrencyAmount:
        return CurrencyAmount(self.currency, -self.amount)

    def converted_to(self, currency: Currency, fx_rate: float) -> CurrencyAmount:
        """Convert using an explicit rate (units of `currency` per unit of this currency)."""
        if currency == self.currency:
            if fx_rate != 1.0:
                raise ValueError("FX rate must be 1 when converting to the same currency")
            return self
        return CurrencyAmount(currency, self.amount * fx_rate)

    def __add__(self, other: CurrencyAmount) -> CurrencyAmount:
        return self.plus(other)

    def __sub__(self, other: CurrencyAmount) -> CurrencyAmount:
        return self.minus(other)

    def __neg__(self) -> CurrencyAmount:
        return self.negated()

    def __str__(self) -> str:
        return f"{self.currency} {self.amount}"


def _coalesce(amounts: Iterable[CurrencyAmount]) -> tuple[CurrencyAmount, ...]:
    totals: dict[Currency, float] = {}
    for ca in amounts:
        totals[ca.currency] = totals.get(ca.currency, 0.0) + ca.amount
    return tuple(CurrencyAmount(c, totals[c]) for c in sorted(totals))


@dataclass(frozen=True)
class MultiCurrencyAmount:
    """
    Amounts in several currencies, at most one entry per currency.

    Entries are kept sorted by currency so that equality and iteration are
    deterministic.
    """

    amounts: tuple[CurrencyAmount, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "amounts", _coalesce(self.amounts))

    @classmethod
    def of(cls, *amounts: CurrencyAmount) -> MultiCurrencyAmount:
        return cls(tuple(amounts))

    @classmethod
    def single(cls, currency: Currency | str, amount: float) -> MultiCurrencyAmount:
        return cls((CurrencyAmount.of(currency, amount),))

    @classmethod
    def total(cls, amounts: Iterable[CurrencyAmount | MultiCurrencyAmount]) -> MultiCurrencyAmount:
        """Sum any mix of single and multi-currency amounts."""
        flat: list[CurrencyAmount] = []
        for item in amounts:
            if isinstance(item, MultiCurrencyAmount):
                flat.extend(item.amounts)
            else:
                flat.append(item)
        return cls(tuple(flat))

    @classmethod
    def from_mapping(cls, amounts: dict[Currency | str, float]) -> MultiCurrencyAmount:
        return cls(tuple(CurrencyAmount.of(c, a) for c, a in amounts.items()))

    @property
    def currencies(self) -> tuple[Currency, ...]:
        return tuple(ca.currency for ca in self.amounts)

    def size(self) -> int:
        return len(self.amounts)

    def contains(self, currency: Currency) -> bool:
        return any(ca.currency == currency for ca in self.amounts)

    def get_amount(self, currency: Currency) -> CurrencyAmount:
        """Return the amount for a currency. Raises KeyError if absent."""
        for ca in self.amounts:
            if ca.currency == currency:
                return ca
        raise KeyError(f"No amount for currency {currency}")

    def get_amount_or_zero(self, currency: Currency) -> CurrencyAmount:
        if self.contains(currency):
            return self.get_amount(currency)
        return CurrencyAmount.zero(currency)

    def plus(self, other: CurrencyAmount | MultiCurrencyAmount) -> MultiCurrencyAmount:
        return MultiCurrencyAmount.total([self, other])

    def multiplied_by(self, factor: float) -> MultiCurrencyAmount:
        return MultiCurrencyAmount(tuple(ca.multiplied_by(factor) for ca in self.amounts))

    def negated(self) -> MultiCurrencyAmount:
        return self.multiplied_by(-1.0)

    def converted_to(self, currency: Currency, fx: FxRateProvider) -> CurrencyAmount:
        """Sum every entry times its FX rate to `currency`."""
        total = 0.0
        for ca in self.amounts:
            if ca.currency == currency:
                total += ca.amount
            else:
                total += ca.amount * fx.fx_rate(CurrencyPair(ca.currency, currency))
        return CurrencyAmount(currency, total)

    def to_dict(self) -> dict[str, float]:
        return {ca.currency.code: ca.amount for ca in self.amounts}

    def __add__(self, other: CurrencyAmount | MultiCurrencyAmount) -> MultiCurrencyAmount:
        return self.plus(other)

    def __iter__(self):
        return iter(self.amounts)

    def __len__(self) -> int:
        return len(self.amounts)

    def __str__(self) -> str:
        return "[" + ", ".join(str(ca) for ca in self.amounts) + "]"
