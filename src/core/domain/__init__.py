"""
Domain models and value objects.

Contains the result record shared by all compounding scenarios.
"""

from src.core.domain.compounding_result import CompoundingResult

__all__ = [
    "CompoundingResult",
]
