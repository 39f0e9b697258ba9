"""
Numerical Safeguards — Safe Math Primitives for Yield Calculations

Module guarantees numerical robustness of the compounding calculations:
- NaN/Inf detection
- Float comparisons with tolerance
- Input validation helpers for amounts, fees, prices and rates

CRITICAL INVARIANTS:
1. Invalid inputs fail fast with ValueError naming the parameter
2. Strict positivity thresholds are explicit (eps=0.0 means any value > 0)
3. All operations are deterministic and reproducible
"""

import math
from typing import Final

# =============================================================================
# EPSILON PARAMETERS
# =============================================================================

# Default threshold for strictly positive parameters
EPS_CALC: Final[float] = 1e-12

# Relative tolerance used by is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Absolute tolerance used by is_close
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf DETECTION
# =============================================================================


def is_valid_float(value: float) -> bool:
    """True if value is finite (not NaN, not Inf)."""
    return math.isfinite(value)


# =============================================================================
# FLOAT COMPARISONS
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Compare floats with tolerance (math.isclose with project defaults).

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# VALIDATION
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Validate that value is a finite number.

    Used for rates: zero and negative APRs are legitimate inputs.

    Raises:
        ValueError: If value is NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_positive(value: float, name: str, eps: float = EPS_CALC) -> None:
    """
    Validate that value is strictly positive.

    Args:
        value: Checked value
        name: Parameter name (for the error message)
        eps: Minimal threshold (default: EPS_CALC)

    Raises:
        ValueError: If value <= eps or NaN/Inf
    """
    validate_finite(value, name)

    if value <= eps:
        raise ValueError(f"{name} must be positive (> {eps}), got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Validate that value is non-negative.

    Raises:
        ValueError: If value < 0 or NaN/Inf
    """
    validate_finite(value, name)

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_period_count(nr_periods: int, name: str = "nr_periods") -> None:
    """
    Validate that a period count is an integer >= 1.

    Raises:
        ValueError: If nr_periods is not an int or is < 1
    """
    if isinstance(nr_periods, bool) or not isinstance(nr_periods, int):
        raise ValueError(f"{name} must be an int, got {type(nr_periods).__name__}")

    if nr_periods < 1:
        raise ValueError(f"{name} must be >= 1, got {nr_periods}")
