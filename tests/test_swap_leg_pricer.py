"""Tests for the swap leg pricer."""

import math
from datetime import date

from curvepricing.currency import GBP, CurrencyAmount
from curvepricing.curves import ZeroRateCurve
from curvepricing.index import GBP_LIBOR_3M, GBP_SONIA
from curvepricing.pricers.observation_pricer import DispatchingRateObservationPricer
from curvepricing.pricers.swap_leg_pricer import CASHFLOW_COLUMNS, DiscountingSwapLegPricer
from curvepricing.products.observation import (
    FixedRateObservation,
    IborRateObservation,
    OvernightCompoundedRateObservation,
)
from curvepricing.products.swap import ExpandedSwapLeg, NotionalExchange, RatePaymentPeriod
from curvepricing.sensitivity import IborRateSensitivity, OvernightRateSensitivity, ZeroRateSensitivity

NOTIONAL = 10_000_000


def _period(start: date, end: date, observation, **kwargs) -> RatePaymentPeriod:
    return RatePaymentPeriod(
        payment_date=end,
        start_date=start,
        end_date=end,
        year_fraction=(end - start).days / 365.0,
        currency=GBP,
        notional=NOTIONAL,
        rate_observation=observation,
        **kwargs,
    )


def _fixed_leg(rate: float = 0.015) -> ExpandedSwapLeg:
    dates = [date(2015, 1, 15), date(2015, 7, 15), date(2016, 1, 15), date(2016, 7, 15)]
    periods = tuple(_period(s, e, FixedRateObservation(rate)) for s, e in zip(dates, dates[1:]))
    return ExpandedSwapLeg(currency=GBP, payment_periods=periods)


def _pricer() -> DiscountingSwapLegPricer:
    return DiscountingSwapLegPricer(DispatchingRateObservationPricer())


def test_fixed_leg_pv_is_sum_of_discounted_coupons(market_env) -> None:
    leg = _fixed_leg()
    expected = sum(
        NOTIONAL * 0.015 * p.year_fraction * market_env.discount_factor(GBP, p.payment_date)
        for p in leg.payment_periods
    )
    assert abs(_pricer().present_value(market_env, leg) - expected) < 1e-6


def test_gearing_and_spread_in_forecast_value(market_env) -> None:
    period = _period(date(2015, 3, 16), date(2015, 6, 16), IborRateObservation(GBP_LIBOR_3M, date(2015, 3, 16)),
                     gearing=2.0, spread=0.001)
    pricer = _pricer()
    rate = pricer.period_rate(market_env, period)
    expected = NOTIONAL * (2.0 * rate + 0.001) * period.year_fraction
    assert abs(pricer.forecast_value(market_env, period) - expected) < 1e-9


def test_past_payments_are_worth_zero(market_env) -> None:
    """Payments dated before the valuation date contribute nothing."""
    past = _period(date(2014, 6, 15), date(2014, 12, 15), FixedRateObservation(0.02))
    future = _period(date(2014, 12, 15), date(2015, 6, 15), FixedRateObservation(0.02))
    leg = ExpandedSwapLeg(currency=GBP, payment_periods=(past, future))
    pricer = _pricer()
    assert pricer.forecast_value(market_env, past) == 0.0
    only_future = ExpandedSwapLeg(currency=GBP, payment_periods=(future,))
    assert pricer.present_value(market_env, leg) == pricer.present_value(market_env, only_future)
    assert pricer.future_value(market_env, leg) == pricer.future_value(market_env, only_future)


def test_notional_exchange_discounted(market_env) -> None:
    payment = date(2016, 7, 15)
    leg = ExpandedSwapLeg(
        currency=GBP,
        payment_periods=(),
        payment_events=(NotionalExchange(payment, CurrencyAmount(GBP, -NOTIONAL)),),
    )
    pv = _pricer().present_value(market_env, leg)
    assert abs(pv - (-NOTIONAL * market_env.discount_factor(GBP, payment))) < 1e-6
    assert _pricer().future_value(market_env, leg) == -NOTIONAL
    assert leg.start_date == payment and leg.end_date == payment


def test_discount_sensitivity_matches_parallel_bump(market_env) -> None:
    """Summed zero-rate sensitivities equal the derivative under a parallel shift of the discount curve."""
    leg = ExpandedSwapLeg(
        currency=GBP,
        payment_periods=_fixed_leg().payment_periods,
        payment_events=(NotionalExchange(date(2016, 7, 15), CurrencyAmount(GBP, NOTIONAL)),),
    )
    pricer = _pricer()
    sens = pricer.present_value_sensitivity(market_env, leg)
    assert all(isinstance(s, ZeroRateSensitivity) for s in sens)
    total = sum(s.sensitivity for s in sens)

    shift = 1e-6
    curve = market_env.discount_curve(GBP)
    up = pricer.present_value(market_env.with_discount_curve(GBP, curve.bumped(shift)), leg)
    down = pricer.present_value(market_env.with_discount_curve(GBP, curve.bumped(-shift)), leg)
    assert abs(total - (up - down) / (2 * shift)) < 1e-6 * abs(total)


def test_ibor_rate_sensitivity_scaled_by_accrual_and_discount(market_env) -> None:
    fixing = date(2015, 3, 16)
    period = _period(fixing, date(2015, 6, 16), IborRateObservation(GBP_LIBOR_3M, fixing), gearing=1.5)
    leg = ExpandedSwapLeg(currency=GBP, payment_periods=(period,))
    sens = _pricer().present_value_sensitivity(market_env, leg)
    ibor = [s for s in sens if isinstance(s, IborRateSensitivity)]
    assert len(ibor) == 1
    df = market_env.discount_factor(GBP, period.payment_date)
    assert abs(ibor[0].sensitivity - NOTIONAL * 1.5 * period.year_fraction * df) < 1e-6


def test_known_fixing_has_no_rate_sensitivity(market_env) -> None:
    """An Ibor period fixed before the valuation date uses the stored fixing."""
    fixing = date(2014, 12, 15)
    period = _period(fixing, date(2015, 3, 16), IborRateObservation(GBP_LIBOR_3M, fixing))
    leg = ExpandedSwapLeg(currency=GBP, payment_periods=(period,))
    pricer = _pricer()
    assert pricer.period_rate(market_env, period) == 0.0056
    sens = pricer.present_value_sensitivity(market_env, leg)
    assert all(isinstance(s, ZeroRateSensitivity) for s in sens)


def test_overnight_leg_sensitivity_record(market_env) -> None:
    start, end = date(2015, 2, 2), date(2015, 5, 1)
    period = _period(start, end, OvernightCompoundedRateObservation(GBP_SONIA, start, end))
    leg = ExpandedSwapLeg(currency=GBP, payment_periods=(period,))
    sens = _pricer().present_value_sensitivity(market_env, leg)
    overnight = [s for s in sens if isinstance(s, OvernightRateSensitivity)]
    assert len(overnight) == 1
    assert overnight[0].fixing_date == start
    assert overnight[0].end_date == end


def test_cashflows_frame(market_env) -> None:
    leg = _fixed_leg()
    frame = _pricer().cashflows(market_env, leg)
    assert list(frame.columns) == CASHFLOW_COLUMNS
    assert len(frame) == 3
    assert (frame["currency"] == "GBP").all()
    assert math.isclose(frame["present_value"].sum(), _pricer().present_value(market_env, leg), rel_tol=1e-12)
