"""
Core utilities and reference data.
"""

from .rosters import REFERENCE_GROUP, reference_roster, rating_tier

__all__ = [
    "REFERENCE_GROUP",
    "reference_roster",
    "rating_tier",
]
