"""
Liquidity-Pair Pool + Secondary Pool

The pair position is never compounded: its size stays constant for the
whole year. At every manual compound the pair rewards (minus fees_pair) are
claimed and deposited into a secondary single-asset pool, whose balance
earns its own simple interest each period (minus fees_secondary_pool).

FORMULAS (per period, rates pro-rated to 365 / nr_periods days):
    pair_interest = simple_interest(A, pair_rate) - A - fees_pair
    owned_secondary = simple_interest(owned_secondary, secondary_rate)
                      - fees_secondary_pool + pair_interest
    final = A + owned_secondary
"""

from loguru import logger

from src.core.domain.compounding_result import CompoundingResult
from src.core.math.compounding import DAYS_PER_YEAR, period_rate_pct, simple_interest
from src.core.math.numerical_safeguards import (
    validate_finite,
    validate_non_negative,
    validate_period_count,
)
from src.optimizer.interval_search import find_best_nr_periods


def simulate_pair_pool(
    amount: float,
    nr_periods: int,
    apr_pair: float,
    apr_secondary: float,
    fees_pair: float,
    fees_secondary_pool: float,
) -> float:
    """
    Year-end value of the pair position plus the accumulated secondary balance.

    Args:
        amount: Pair position value (USD), constant over the year
        nr_periods: Manual compounds per year (>= 1)
        apr_pair: Pair pool APR in percent
        apr_secondary: Secondary pool APR in percent
        fees_pair: Claim cost on the pair pool (USD)
        fees_secondary_pool: Deposit cost on the secondary pool (USD)

    Returns:
        amount + accumulated secondary balance

    Examples:
        >>> round(simulate_pair_pool(100.0, 1, 10.0, 20.0, 0.0, 0.0), 9)
        110.0
    """
    validate_period_count(nr_periods)

    days_per_period = DAYS_PER_YEAR / nr_periods
    pair_rate = period_rate_pct(apr_pair, days_per_period)
    secondary_rate = period_rate_pct(apr_secondary, days_per_period)
    owned_secondary = 0.0

    for _ in range(nr_periods):
        pair_interest = simple_interest(amount, pair_rate) - amount - fees_pair
        secondary_grown = simple_interest(owned_secondary, secondary_rate) - fees_secondary_pool
        owned_secondary = secondary_grown + pair_interest

    return amount + owned_secondary


def pair_plus_secondary_best_interval(
    amount: float,
    apr_pair: float,
    apr_secondary: float,
    fees_pair: float,
    fees_secondary_pool: float,
) -> CompoundingResult:
    """
    Best manual compounding interval for a pair pool feeding a secondary pool.

    value_of_first_compound is the pair reward accrued on the principal in
    one period at the winning frequency.

    Raises:
        ValueError: On NaN/Inf inputs or negative amount/fees
    """
    validate_non_negative(amount, "amount")
    validate_finite(apr_pair, "apr_pair")
    validate_finite(apr_secondary, "apr_secondary")
    validate_non_negative(fees_pair, "fees_pair")
    validate_non_negative(fees_secondary_pool, "fees_secondary_pool")

    outcome = find_best_nr_periods(
        lambda nr_periods: simulate_pair_pool(
            amount,
            nr_periods,
            apr_pair,
            apr_secondary,
            fees_pair,
            fees_secondary_pool,
        )
    )

    value_of_first_compound = simple_interest(amount, apr_pair / outcome.best_nr_periods) - amount

    logger.debug(
        "Pair pool search: nr_periods={} final_amount={:.6f} after {} evaluations",
        outcome.best_nr_periods,
        outcome.final_amount,
        outcome.evaluations,
    )

    return CompoundingResult.from_search(
        amount=amount,
        best_nr_periods=outcome.best_nr_periods,
        final_amount=outcome.final_amount,
        value_of_first_compound=value_of_first_compound,
    )
