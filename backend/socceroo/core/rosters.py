"""
Built-in group rosters.
"""

from typing import List

from ..simulator.models import Team


# 1994-95 UEFA Champions League, Group D, in draw order.
# Ratings run 0 (very weak) to 100; professional sides sit between 50 and 100.
REFERENCE_GROUP = [
    ("AFC Ajax", "AJAX", 90),
    ("Redbull Salzburg", "SALZBURG", 69),
    ("AEK Athens", "AEK", 76),
    ("AC Milan", "MILAN", 88),
]


def reference_roster() -> List[Team]:
    """Fresh, zero-stat teams for the reference group."""
    return [Team(name=name, key=key, rating=rating) for name, key, rating in REFERENCE_GROUP]


def rating_tier(rating: int) -> str:
    """
    Strength band used when listing teams.

    85 and up is elite, 70-84 strong, 60-69 average, below 60 weak.
    """
    if rating < 60:
        return "weak"
    if rating < 70:
        return "average"
    if rating < 85:
        return "strong"
    return "elite"
