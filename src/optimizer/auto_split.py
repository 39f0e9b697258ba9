"""
Auto-Split Pool — primary asset compounds, part of the yield is paid in a
secondary reward token

Pool economics (fixed by the protocol):
- Earnings accrue with daily granularity on the staked primary asset
- 70% of the earnings are paid back in the primary asset
- 30% of the earnings are converted through the reference currency into the
  secondary token with a x5 reward multiplier

The secondary token balance is staked in its own single-asset pool at
apr_secondary. Both claims cost a flat fee every manual compound.

FORMULAS:
    earnings = compound_interest(A, apr_primary, 365, 0, days) - A
    primary = earnings * 0.7
    secondary = earnings * 0.3 / price_ref * 5 * price_secondary

The secondary balance is summed with the primary one as USD-equivalent; the
caller is responsible for quoting both in the same unit.
"""

from typing import Final, NamedTuple

from loguru import logger

from src.core.domain.compounding_result import CompoundingResult
from src.core.math.compounding import (
    DAYS_PER_YEAR,
    compound_interest,
    period_rate_pct,
    simple_interest,
)
from src.core.math.numerical_safeguards import (
    validate_finite,
    validate_non_negative,
    validate_period_count,
    validate_positive,
)
from src.optimizer.interval_search import find_best_nr_periods

# =============================================================================
# PROTOCOL PARAMETERS
# =============================================================================

# Share of the earnings paid back in the primary asset
PRIMARY_EARNINGS_SHARE: Final[float] = 0.7

# Share of the earnings converted into the secondary reward token
SECONDARY_EARNINGS_SHARE: Final[float] = 0.3

# Reward multiplier applied when minting the secondary token
SECONDARY_REWARD_MULTIPLIER: Final[float] = 5

# Earnings of the primary asset compound daily inside the pool
DAILY_COMPOUNDS_PER_YEAR: Final[int] = 365


# =============================================================================
# PERIOD EARNINGS
# =============================================================================


class PeriodEarnings(NamedTuple):
    """Earnings of one compounding period, split between both assets."""

    primary: float  # USD paid in the primary asset
    secondary: float  # USD-equivalent paid in the secondary token


def compound_earnings_for_days(
    amount: float,
    apr_primary: float,
    days: float,
    price_ref: float,
    price_secondary: float,
) -> PeriodEarnings:
    """
    Earnings of the primary stake over a number of days, split per protocol.

    Args:
        amount: Staked primary asset (USD)
        apr_primary: Primary pool APR in percent
        days: Length of the period in days
        price_ref: Price of the reference currency (USD)
        price_secondary: Price of the secondary token (USD)

    Returns:
        PeriodEarnings(primary, secondary)

    Examples:
        >>> compound_earnings_for_days(0.0, 100.0, 30.0, 500.0, 400.0)
        PeriodEarnings(primary=0.0, secondary=0.0)
    """
    compounded = compound_interest(amount, apr_primary, DAILY_COMPOUNDS_PER_YEAR, 0, days)
    earnings_only = compounded - amount

    primary = earnings_only * PRIMARY_EARNINGS_SHARE
    secondary = (
        earnings_only
        * SECONDARY_EARNINGS_SHARE
        / price_ref
        * SECONDARY_REWARD_MULTIPLIER
        * price_secondary
    )

    return PeriodEarnings(primary=primary, secondary=secondary)


# =============================================================================
# SIMULATOR
# =============================================================================


def simulate_auto_split(
    amount: float,
    nr_periods: int,
    apr_primary: float,
    apr_secondary: float,
    fees_primary: float,
    fees_secondary: float,
    price_ref: float,
    price_secondary: float,
) -> float:
    """
    Year-end value of the auto-split position compounded nr_periods times.

    Each period the primary stake earns for 365 / nr_periods days; the
    primary share (minus fees_primary) is re-staked, the secondary share is
    added to the secondary balance after that balance earned its own simple
    interest (minus fees_secondary).

    Returns:
        owned_primary + owned_secondary, possibly below the principal
    """
    validate_period_count(nr_periods)

    days_per_period = DAYS_PER_YEAR / nr_periods
    secondary_rate = period_rate_pct(apr_secondary, days_per_period)
    owned_primary = amount
    owned_secondary = 0.0

    for _ in range(nr_periods):
        earnings = compound_earnings_for_days(
            owned_primary, apr_primary, days_per_period, price_ref, price_secondary
        )
        secondary_grown = simple_interest(owned_secondary, secondary_rate)

        owned_primary = owned_primary + earnings.primary - fees_primary
        owned_secondary = secondary_grown + earnings.secondary - fees_secondary

    return owned_primary + owned_secondary


# =============================================================================
# INTERVAL SEARCH
# =============================================================================


def two_asset_best_interval(
    amount: float,
    apr_primary: float,
    apr_secondary: float,
    fees_primary: float,
    fees_secondary: float,
    price_ref: float,
    price_secondary: float,
) -> CompoundingResult:
    """
    Best manual compounding interval for the auto-split pool.

    Args:
        amount: Staked primary asset (USD)
        apr_primary: Primary pool APR in percent
        apr_secondary: Secondary token pool APR in percent
        fees_primary: Claim + deposit cost of the primary asset (USD)
        fees_secondary: Deposit cost of the secondary token (USD)
        price_ref: Price of the reference currency (USD)
        price_secondary: Price of the secondary token (USD)

    Returns:
        CompoundingResult; value_of_first_compound sums both assets'
        earnings over the first period at the winning frequency

    Raises:
        ValueError: On NaN/Inf inputs, negative amount/fees or non-positive prices
    """
    validate_non_negative(amount, "amount")
    validate_finite(apr_primary, "apr_primary")
    validate_finite(apr_secondary, "apr_secondary")
    validate_non_negative(fees_primary, "fees_primary")
    validate_non_negative(fees_secondary, "fees_secondary")
    validate_positive(price_ref, "price_ref", eps=0.0)
    validate_positive(price_secondary, "price_secondary", eps=0.0)

    outcome = find_best_nr_periods(
        lambda nr_periods: simulate_auto_split(
            amount,
            nr_periods,
            apr_primary,
            apr_secondary,
            fees_primary,
            fees_secondary,
            price_ref,
            price_secondary,
        )
    )

    first_period = compound_earnings_for_days(
        amount,
        apr_primary,
        DAYS_PER_YEAR / outcome.best_nr_periods,
        price_ref,
        price_secondary,
    )

    logger.debug(
        "Auto-split search: nr_periods={} final_amount={:.6f} after {} evaluations",
        outcome.best_nr_periods,
        outcome.final_amount,
        outcome.evaluations,
    )

    return CompoundingResult.from_search(
        amount=amount,
        best_nr_periods=outcome.best_nr_periods,
        final_amount=outcome.final_amount,
        value_of_first_compound=first_period.primary + first_period.secondary,
    )
