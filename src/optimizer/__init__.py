"""Optimizer — best manual compounding interval per pool scenario.

Scenarios:
- Single-asset pool: rewards compound into the same asset
- Auto-split pool: primary asset compounds, 30% of the yield is paid in a
  secondary reward token
- Pair pool: constant liquidity-pair position whose rewards feed a
  secondary single-asset pool
"""

from .interval_search import IntervalSearchOutcome, PeriodSimulator, find_best_nr_periods
from .single_asset import single_asset_best_interval
from .auto_split import (
    DAILY_COMPOUNDS_PER_YEAR,
    PRIMARY_EARNINGS_SHARE,
    SECONDARY_EARNINGS_SHARE,
    SECONDARY_REWARD_MULTIPLIER,
    PeriodEarnings,
    compound_earnings_for_days,
    simulate_auto_split,
    two_asset_best_interval,
)
from .pair_pool import pair_plus_secondary_best_interval, simulate_pair_pool

__all__ = [
    "IntervalSearchOutcome",
    "PeriodSimulator",
    "find_best_nr_periods",
    "single_asset_best_interval",
    "DAILY_COMPOUNDS_PER_YEAR",
    "PRIMARY_EARNINGS_SHARE",
    "SECONDARY_EARNINGS_SHARE",
    "SECONDARY_REWARD_MULTIPLIER",
    "PeriodEarnings",
    "compound_earnings_for_days",
    "simulate_auto_split",
    "two_asset_best_interval",
    "pair_plus_secondary_best_interval",
    "simulate_pair_pool",
]
