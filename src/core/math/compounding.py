"""
Compounding — Periodic Simple-Interest Growth Net of Fees

Module provides the building blocks for manual compounding estimates:
- One period of simple interest on a principal
- N equal compounding periods over a year with a flat fee per period
- Realized APY of a year-end value versus the principal

CRITICAL INVARIANTS:
1. Rates are APR in percent (114.94 means 114.94%), never fractions
2. Year length is 365 days; a period lasts days / nr_periods days
3. Results are never clamped: fees larger than interest yield negative values
4. Undefined APY (zero principal) is NaN, never an exception

FORMULAS:
    simple_interest(A, p) = A + A * p / 100
    period_rate = yearly_rate / 365 * (days / nr_periods)
    A_{k+1} = simple_interest(A_k, period_rate) - fee
    real_apy = 100 * (final_amount - amount) / amount
"""

import math
from typing import Final

from src.core.math.numerical_safeguards import validate_period_count

# =============================================================================
# CALENDAR PARAMETERS
# =============================================================================

# Days in a year used by every APR conversion
DAYS_PER_YEAR: Final[int] = 365

# Upper bound on compounding periods per year (at most daily compounding)
MAX_NR_PERIODS: Final[int] = 365


# =============================================================================
# SIMPLE INTEREST
# =============================================================================


def simple_interest(amount: float, period_rate_pct: float) -> float:
    """
    Apply one period of simple interest.

    Args:
        amount: Principal (USD)
        period_rate_pct: Interest for the period, in percent

    Returns:
        amount + amount * period_rate_pct / 100

    Examples:
        >>> simple_interest(100.0, 10.0)
        110.0
        >>> simple_interest(100.0, 0.0)
        100.0
    """
    return amount + amount * period_rate_pct / 100


def period_rate_pct(yearly_rate: float, days_per_period: float) -> float:
    """Interest in percent accrued by an APR over days_per_period days."""
    return yearly_rate / DAYS_PER_YEAR * days_per_period


# =============================================================================
# PERIODIC COMPOUNDING
# =============================================================================


def compound_interest(
    amount: float,
    yearly_rate: float,
    nr_periods: int,
    fee_per_period: float,
    days: float = DAYS_PER_YEAR,
) -> float:
    """
    Compound a principal over nr_periods equal periods, paying a fee each time.

    The ``days`` window is split into nr_periods periods; each period applies
    simple interest at the pro-rated APR and then subtracts the fee.

    Args:
        amount: Principal (USD)
        yearly_rate: APR in percent
        nr_periods: Number of compounding periods in the window (>= 1)
        fee_per_period: Flat fee paid at each compounding (USD)
        days: Window length in days (default: one year)

    Returns:
        Final amount after nr_periods periods, possibly negative

    Raises:
        ValueError: If nr_periods is not an int >= 1

    Examples:
        >>> round(compound_interest(100.0, 10.0, 1, 0.0), 9)
        110.0
        >>> round(compound_interest(100.0, 10.0, 1, 50.0), 9)
        60.0
    """
    validate_period_count(nr_periods)

    rate = period_rate_pct(yearly_rate, days / nr_periods)

    for _ in range(nr_periods):
        amount = simple_interest(amount, rate) - fee_per_period

    return amount


# =============================================================================
# REALIZED APY
# =============================================================================


def real_apy_pct(amount: float, final_amount: float) -> float:
    """
    Percentage gain of final_amount over amount.

    Returns NaN only when amount is exactly zero: the ratio has no meaning
    and callers treat NaN as "no meaningful APY". Any non-zero principal,
    however small, is divided as-is.

    Examples:
        >>> real_apy_pct(100.0, 150.0)
        50.0
        >>> math.isnan(real_apy_pct(0.0, 10.0))
        True
    """
    if amount == 0:
        return math.nan

    return 100 * (final_amount - amount) / amount
