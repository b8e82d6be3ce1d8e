"""
JSON rendering of match results for the statistics collector.
"""

import json
import logging
from typing import List

from .models import Match


logger = logging.getLogger(__name__)


def match_to_dict(match: Match) -> dict:
    """Collector payload for a single match."""
    return {
        "home": match.home.key,
        "away": match.away.key,
        "homeGoals": match.home_goals,
        "awayGoals": match.away_goals
    }


def results_to_json(matches: List[Match]) -> str:
    """
    Render all match results as a JSON array, in fixture order.

    Returns:
        The JSON string, "[]" when there are no matches, or "" if the
        results could not be encoded
    """
    try:
        return json.dumps([match_to_dict(m) for m in matches], separators=(",", ":"))
    except (TypeError, ValueError) as e:
        logger.error(f"Failed to serialize match results: {e}")
        return ""
