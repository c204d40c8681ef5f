"""Formula choices for the accrued premium paid on default in ISDA-style CDS pricing."""

from __future__ import annotations

from enum import Enum


class AccrualOnDefaultFormula(Enum):
    """
    The formula used for the accrued payment on default.

    - ORIGINAL_ISDA: the formula of the ISDA standard model v1.8.1 and below
    - MARKIT_FIX: the correction proposed by Markit (v1.8.2)
    - CORRECT: the mathematically correct formula

    Each member carries `omega`, the constant the accrual-on-default
    integral uses: 1/730 for ORIGINAL_ISDA, 0 otherwise.
    """

    ORIGINAL_ISDA = ("Original-ISDA", 1.0 / 730.0)
    MARKIT_FIX = ("Markit-Fix", 0.0)
    CORRECT = ("Correct", 0.0)

    def __init__(self, display_name: str, omega: float) -> None:
        self.display_name = display_name
        self.omega = omega

    @classmethod
    def of(cls, name: str) -> AccrualOnDefaultFormula:
        """Parse a name such as 'Markit-Fix' or 'markit_fix'. Raises ValueError if unknown."""
        if name is None:
            raise ValueError("name must not be None")
        key = name.strip().replace("-", "_").upper()
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown accrual on default formula: {name!r}") from None

    def __str__(self) -> str:
        return self.display_name
