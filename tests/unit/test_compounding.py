"""
Tests for Compounding — periodic simple-interest growth net of fees

Checked invariants:
1. simple_interest is the identity at zero rate
2. One period without fees matches the closed form amount * (1 + r/100)
3. Fees are subtracted every period and results are never clamped
4. Realized APY is NaN for a zero principal
5. Determinism
"""

import math

import pytest

from src.core.math.compounding import (
    DAYS_PER_YEAR,
    MAX_NR_PERIODS,
    compound_interest,
    period_rate_pct,
    real_apy_pct,
    simple_interest,
)


# =============================================================================
# SIMPLE INTEREST
# =============================================================================


class TestSimpleInterest:
    """Tests for simple_interest"""

    def test_basic_interest(self):
        """10% on 100 → 110."""
        assert simple_interest(100.0, 10.0) == 110.0

    @pytest.mark.parametrize("amount", [0.0, 1.0, 266.0, 1e9, -50.0])
    def test_identity_at_zero_rate(self, amount):
        """Zero rate leaves any amount unchanged."""
        assert simple_interest(amount, 0.0) == amount

    def test_negative_rate(self):
        """Negative rates shrink the amount."""
        assert simple_interest(100.0, -10.0) == 90.0

    def test_rate_is_percent(self):
        """Rate is in percent, not a fraction."""
        assert simple_interest(200.0, 0.5) == 201.0


class TestPeriodRate:
    """Tests for period_rate_pct"""

    def test_one_day_of_365_apr(self):
        assert period_rate_pct(365.0, 1.0) == 1.0

    def test_full_year_is_apr(self):
        assert period_rate_pct(114.94, DAYS_PER_YEAR) == pytest.approx(114.94)


# =============================================================================
# PERIODIC COMPOUNDING
# =============================================================================


class TestCompoundInterest:
    """Tests for compound_interest"""

    @pytest.mark.parametrize(
        "amount,rate",
        [(100.0, 10.0), (266.0, 114.94), (1000.0, 0.0), (50.0, -20.0)],
    )
    def test_single_period_closed_form(self, amount, rate):
        """nr_periods=1, no fee → amount * (1 + rate/100)."""
        assert compound_interest(amount, rate, 1, 0.0) == pytest.approx(
            amount * (1 + rate / 100)
        )

    def test_two_periods_compound(self):
        """Two half-year periods at 10% APR → 100 * 1.05^2."""
        assert compound_interest(100.0, 10.0, 2, 0.0) == pytest.approx(110.25)

    def test_fee_subtracted_each_period(self):
        """100 → 105 - 50 = 55 → 57.75 - 50 = 7.75."""
        assert compound_interest(100.0, 10.0, 2, 50.0) == pytest.approx(7.75)

    def test_negative_result_not_clamped(self):
        """Fees exceeding interest yield a negative amount."""
        result = compound_interest(100.0, 10.0, 2, 60.0)
        assert result == pytest.approx(-12.75)
        assert result < 0

    def test_custom_window_days(self):
        """days shortens the window: 365% APR over one day → 1%."""
        assert compound_interest(100.0, 365.0, 1, 0.0, days=1) == pytest.approx(101.0)

    def test_daily_compounding_beats_yearly_without_fees(self):
        """More periods without fees never lose value."""
        yearly = compound_interest(100.0, 50.0, 1, 0.0)
        monthly = compound_interest(100.0, 50.0, 12, 0.0)
        daily = compound_interest(100.0, 50.0, MAX_NR_PERIODS, 0.0)
        assert yearly < monthly < daily

    def test_invalid_nr_periods(self):
        """nr_periods must be an int >= 1."""
        with pytest.raises(ValueError, match="nr_periods"):
            compound_interest(100.0, 10.0, 0, 0.0)
        with pytest.raises(ValueError, match="nr_periods"):
            compound_interest(100.0, 10.0, 2.5, 0.0)

    def test_deterministic(self):
        """Identical inputs → bit-identical output."""
        a = compound_interest(266.0, 114.94, 17, 2.5)
        b = compound_interest(266.0, 114.94, 17, 2.5)
        assert a == b


# =============================================================================
# REALIZED APY
# =============================================================================


class TestRealApy:
    """Tests for real_apy_pct"""

    def test_gain(self):
        assert real_apy_pct(100.0, 150.0) == pytest.approx(50.0)

    def test_loss(self):
        assert real_apy_pct(200.0, 100.0) == pytest.approx(-50.0)

    def test_zero_principal_is_nan(self):
        """Zero principal → NaN sentinel, never ZeroDivisionError."""
        assert math.isnan(real_apy_pct(0.0, 10.0))
        assert math.isnan(real_apy_pct(0.0, 0.0))

    def test_tiny_principal_divided_as_is(self):
        """Principal below 1e-12 is not clamped to a larger denominator."""
        assert real_apy_pct(1e-13, 1.1e-13) == pytest.approx(10.0)
        assert real_apy_pct(-1e-13, -1.1e-13) == pytest.approx(10.0)

    def test_overflow_is_inf_not_nan(self):
        """A huge gain overflows to Inf; NaN is reserved for zero principal."""
        assert real_apy_pct(1.0, 1e308) == math.inf
