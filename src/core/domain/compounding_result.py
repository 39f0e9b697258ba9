"""
CompoundingResult — Outcome of a manual compounding interval search

Immutable Pydantic model produced once per scenario and consumed by the
console report. Holds the winning interval and the metrics derived from it.
"""

import math

from pydantic import BaseModel, Field, field_validator

from src.core.math.compounding import DAYS_PER_YEAR, MAX_NR_PERIODS, real_apy_pct
from src.core.math.numerical_safeguards import is_close


# =============================================================================
# COMPOUNDING RESULT MODEL
# =============================================================================


class CompoundingResult(BaseModel):
    """
    Best manual compounding interval for one pool scenario.

    Immutable model (frozen=True). Invariants:
    - frequency_in_days == 365 / best_nr_periods
    - real_apy == 100 * (final_amount - amount) / amount (NaN for amount == 0)
    """

    # Winning interval
    best_nr_periods: int = Field(
        ..., ge=1, le=MAX_NR_PERIODS, description="Compounding periods per year"
    )
    frequency_in_days: float = Field(
        ..., gt=0, description="Days between two manual compounds"
    )

    # Metrics
    value_of_first_compound: float = Field(
        ..., description="Unclaimed rewards (USD) to wait for before the first compound"
    )
    final_amount: float = Field(..., description="Projected year-end value (USD)")
    real_apy: float = Field(
        ..., description="Realized APY in percent (NaN when not meaningful)"
    )

    model_config = {"frozen": True}

    @field_validator("frequency_in_days")
    @classmethod
    def validate_frequency_matches_periods(cls, v: float, info) -> float:
        """Frequency must be the year split into best_nr_periods."""
        if "best_nr_periods" in info.data:
            expected = DAYS_PER_YEAR / info.data["best_nr_periods"]
            if not is_close(v, expected):
                raise ValueError(
                    f"frequency_in_days {v} must equal {DAYS_PER_YEAR}/best_nr_periods = {expected}"
                )
        return v

    @classmethod
    def from_search(
        cls,
        amount: float,
        best_nr_periods: int,
        final_amount: float,
        value_of_first_compound: float,
    ) -> "CompoundingResult":
        """
        Build the result record from a finished interval search.

        Args:
            amount: Initial principal (USD)
            best_nr_periods: Period count selected by the search
            final_amount: Simulated year-end value for best_nr_periods
            value_of_first_compound: Earnings of one period at the winning frequency

        Returns:
            CompoundingResult with derived frequency and APY
        """
        return cls(
            best_nr_periods=best_nr_periods,
            frequency_in_days=DAYS_PER_YEAR / best_nr_periods,
            value_of_first_compound=value_of_first_compound,
            final_amount=final_amount,
            real_apy=real_apy_pct(amount, final_amount),
        )

    @property
    def has_meaningful_apy(self) -> bool:
        """False when real_apy is NaN (zero principal) or overflowed to Inf."""
        return math.isfinite(self.real_apy)
