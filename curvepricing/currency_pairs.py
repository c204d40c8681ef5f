"""
Currency-pair configuration.

The table is an INI file with one section per pair in market convention order
and a `rateDigits` property:

    [EUR/USD]
    rateDigits = 4

Two sections for the same unordered pair (e.g. `EUR/USD` and `USD/EUR`) are an
error. The bundled table is loaded once and cached for the process lifetime.
"""

from __future__ import annotations

import configparser
import logging
from collections.abc import Mapping
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType

from curvepricing.currency import CurrencyPair
from curvepricing.errors import CurrencyPairConfigError

logger = logging.getLogger(__name__)

RATE_DIGITS_KEY = "rateDigits"
_DEFAULT_RESOURCE = "CurrencyPair.ini"


def load_currency_pairs(text: str, source: str = "<string>") -> dict[CurrencyPair, int]:
    """Parse currency-pair INI text into a mapping of pair -> rate digits."""
    parser = configparser.ConfigParser(strict=True, interpolation=None)
    parser.optionxform = str  # keep 'rateDigits' as written
    try:
        parser.read_string(text, source=source)
    except configparser.Error as exc:
        raise CurrencyPairConfigError(f"Invalid currency pair configuration in {source}: {exc}") from exc

    pairs: dict[CurrencyPair, int] = {}
    for section in parser.sections():
        try:
            pair = CurrencyPair.parse(section)
        except ValueError as exc:
            raise CurrencyPairConfigError(f"Invalid currency pair section [{section}] in {source}") from exc
        if pair.is_identity():
            raise CurrencyPairConfigError(f"Currency pair [{section}] must use two different currencies")
        if pair in pairs or pair.inverse() in pairs:
            raise CurrencyPairConfigError(
                f"Currency pair [{section}] is defined more than once in {source}; "
                "a pair and its inverse denote the same pair"
            )
        raw = parser.get(section, RATE_DIGITS_KEY, fallback=None)
        if raw is None:
            raise CurrencyPairConfigError(f"Currency pair [{section}] is missing '{RATE_DIGITS_KEY}'")
        try:
            digits = int(raw)
        except ValueError as exc:
            raise CurrencyPairConfigError(
                f"Currency pair [{section}] has non-integer '{RATE_DIGITS_KEY}': {raw!r}"
            ) from exc
        if digits < 0:
            raise CurrencyPairConfigError(f"Currency pair [{section}] has negative '{RATE_DIGITS_KEY}'")
        pairs[pair] = digits

    logger.debug("Loaded %d currency pairs from %s", len(pairs), source)
    return pairs


def load_currency_pairs_file(path: str | Path) -> dict[CurrencyPair, int]:
    """Load a currency-pair table from an INI file on disk."""
    path = Path(path)
    return load_currency_pairs(path.read_text(encoding="utf-8"), source=str(path))


@lru_cache(maxsize=1)
def default_currency_pairs() -> Mapping[CurrencyPair, int]:
    """The bundled currency-pair table, loaded once and read-only."""
    resource = resources.files("curvepricing") / "config" / _DEFAULT_RESOURCE
    return MappingProxyType(load_currency_pairs(resource.read_text(encoding="utf-8"), source=_DEFAULT_RESOURCE))


def rate_digits(pair: CurrencyPair, table: Mapping[CurrencyPair, int] | None = None) -> int:
    """Rate digits for a pair in either orientation. Raises CurrencyPairConfigError if unknown."""
    pairs = default_currency_pairs() if table is None else table
    if pair in pairs:
        return pairs[pair]
    if pair.inverse() in pairs:
        return pairs[pair.inverse()]
    raise CurrencyPairConfigError(f"No rate digits configured for currency pair {pair}")


def is_conventional(pair: CurrencyPair, table: Mapping[CurrencyPair, int] | None = None) -> bool:
    """True if this orientation of the pair is the one listed in the table."""
    pairs = default_currency_pairs() if table is None else table
    return pair in pairs


def to_conventional(pair: CurrencyPair, table: Mapping[CurrencyPair, int] | None = None) -> CurrencyPair:
    """Market-convention orientation of a pair; unlisted pairs are returned unchanged."""
    pairs = default_currency_pairs() if table is None else table
    if pair.inverse() in pairs and pair not in pairs:
        return pair.inverse()
    return pair
