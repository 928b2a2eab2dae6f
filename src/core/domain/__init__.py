"""
Domain models.

Contains DecimalCollection and its domain exceptions.
"""

from src.core.domain.decimal_collection import DecimalCollection, EmptyCollectionError

__all__ = [
    "DecimalCollection",
    "EmptyCollectionError",
]
