"""
Single-Asset Pool — reward token compounds into itself

The whole position earns the pool APR; every manual compound claims the
rewards, re-deposits them and pays one flat fee.
"""

from functools import partial

from loguru import logger

from src.core.domain.compounding_result import CompoundingResult
from src.core.math.compounding import compound_interest, simple_interest
from src.core.math.numerical_safeguards import validate_finite, validate_non_negative
from src.optimizer.interval_search import find_best_nr_periods


def single_asset_best_interval(
    amount: float,
    apr: float,
    fee_per_period: float,
) -> CompoundingResult:
    """
    Best manual compounding interval for a single-asset pool.

    Args:
        amount: Position size (USD)
        apr: Pool APR in percent
        fee_per_period: Claim + deposit cost per compound (USD)

    Returns:
        CompoundingResult; value_of_first_compound is the reward accrued in
        one period at the winning frequency

    Raises:
        ValueError: On NaN/Inf inputs or negative amount/fee
    """
    validate_non_negative(amount, "amount")
    validate_finite(apr, "apr")
    validate_non_negative(fee_per_period, "fee_per_period")

    outcome = find_best_nr_periods(
        partial(
            _simulate_single_asset,
            amount,
            apr,
            fee_per_period,
        )
    )

    value_of_first_compound = simple_interest(amount, apr / outcome.best_nr_periods) - amount

    logger.debug(
        "Single-asset search: nr_periods={} final_amount={:.6f} after {} evaluations",
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


def _simulate_single_asset(
    amount: float, apr: float, fee_per_period: float, nr_periods: int
) -> float:
    return compound_interest(amount, apr, nr_periods, fee_per_period)
