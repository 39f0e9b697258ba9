"""
Core domain models and mathematical primitives.

This module contains the foundational building blocks that are independent
of any pool scenario or output format.
"""
