"""
Interval Search — Greedy ascent over compounding period counts

Finds the number of compounding periods per year that maximizes the
year-end value returned by a scenario simulator.

ALGORITHM:
    n = 1, best = f(1)
    while n < max_nr_periods:
        candidate = f(n + 1)
        if candidate <= best: stop
        n, best = n + 1, candidate

The simulator is assumed unimodal in n: more frequent compounding captures
more interest but pays the flat fee more often. The search stops at the first
local maximum; it is not a global scan. f(1) is always evaluated, so the
search never returns without a result.
"""

from typing import Callable, NamedTuple

from loguru import logger

from src.core.math.compounding import MAX_NR_PERIODS
from src.core.math.numerical_safeguards import validate_period_count


# Simulator parameterized only by the number of periods per year
PeriodSimulator = Callable[[int], float]


class IntervalSearchOutcome(NamedTuple):
    """Best period count found by the ascent and its simulated value."""

    best_nr_periods: int
    final_amount: float
    evaluations: int  # Number of simulator calls made


def find_best_nr_periods(
    simulate: PeriodSimulator,
    max_nr_periods: int = MAX_NR_PERIODS,
) -> IntervalSearchOutcome:
    """
    Hill-climb from one period per year towards max_nr_periods.

    Args:
        simulate: Callable returning the year-end value for a period count
        max_nr_periods: Inclusive upper bound on the period count (default: 365)

    Returns:
        IntervalSearchOutcome with the first local maximum

    Raises:
        ValueError: If max_nr_periods is not an int >= 1

    Examples:
        >>> find_best_nr_periods(lambda n: -(n - 4) ** 2).best_nr_periods
        4
        >>> find_best_nr_periods(lambda n: float(n), max_nr_periods=10).best_nr_periods
        10
    """
    validate_period_count(max_nr_periods, name="max_nr_periods")

    best_nr_periods = 1
    final_amount = simulate(best_nr_periods)
    evaluations = 1

    while best_nr_periods < max_nr_periods:
        next_amount = simulate(best_nr_periods + 1)
        evaluations += 1
        if next_amount <= final_amount:
            break
        best_nr_periods += 1
        final_amount = next_amount

    if best_nr_periods == max_nr_periods:
        logger.debug(
            "Interval search reached the period cap {} without a local maximum",
            max_nr_periods,
        )

    return IntervalSearchOutcome(
        best_nr_periods=best_nr_periods,
        final_amount=final_amount,
        evaluations=evaluations,
    )
