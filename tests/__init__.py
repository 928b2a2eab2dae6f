"""
Test suite for decimal-arr-utils

Contains:
- tests/unit/          : Unit tests for individual modules
"""
