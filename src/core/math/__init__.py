"""
Core math modules.

Numerical primitives for compounding estimates with stability guarantees.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_CALC,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # NaN/Inf detection
    is_valid_float,
    # Comparisons
    is_close,
    # Validation
    validate_finite,
    validate_non_negative,
    validate_period_count,
    validate_positive,
)

# Compounding
from src.core.math.compounding import (
    DAYS_PER_YEAR,
    MAX_NR_PERIODS,
    compound_interest,
    period_rate_pct,
    real_apy_pct,
    simple_interest,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_CALC",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — NaN/Inf detection
    "is_valid_float",
    # Numerical Safeguards — Comparisons
    "is_close",
    # Numerical Safeguards — Validation
    "validate_finite",
    "validate_non_negative",
    "validate_period_count",
    "validate_positive",
    # Compounding — Constants
    "DAYS_PER_YEAR",
    "MAX_NR_PERIODS",
    # Compounding — Functions
    "compound_interest",
    "period_rate_pct",
    "real_apy_pct",
    "simple_interest",
]
