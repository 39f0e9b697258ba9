"""
Test suite for compound-interval

Contains:
- tests/unit/          : Unit tests for math primitives, scenarios and report
"""
