"""
Core primitives for exact-decimal collections.

This module contains the decimal arithmetic adapter, input validation,
and the DecimalCollection domain model.
"""
