"""Tests for the accrual-on-default formula enumeration."""

import pytest

from curvepricing.pricers.accrual_on_default import AccrualOnDefaultFormula


def test_markit_fix_round_trip() -> None:
    formula = AccrualOnDefaultFormula.of("Markit-Fix")
    assert formula is AccrualOnDefaultFormula.MARKIT_FIX
    assert str(formula) == "Markit-Fix"
    assert formula.omega == 0.0


def test_omega_per_formula() -> None:
    assert AccrualOnDefaultFormula.ORIGINAL_ISDA.omega == 1.0 / 730.0
    assert AccrualOnDefaultFormula.CORRECT.omega == 0.0


@pytest.mark.parametrize("formula", list(AccrualOnDefaultFormula))
def test_every_display_name_parses(formula: AccrualOnDefaultFormula) -> None:
    assert AccrualOnDefaultFormula.of(str(formula)) is formula
    assert AccrualOnDefaultFormula.of(formula.name.lower()) is formula


def test_unknown_name_raises() -> None:
    with pytest.raises(ValueError, match="Unknown accrual on default formula"):
        AccrualOnDefaultFormula.of("Approximate")
    with pytest.raises(ValueError):
        AccrualOnDefaultFormula.of(None)
