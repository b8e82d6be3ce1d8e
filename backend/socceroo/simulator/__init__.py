"""
Football Group Stage Simulator

Schedules a home-and-away group, simulates every match and ranks the table.
"""

from .models import Team, Match, Group, DuplicateTeamKey, MatchAlreadyPlayed
from .scheduler import create_matches, InvalidRosterSize
from .engine import simulate_score, play_match, simulate_group, prepare_group
from .tiebreakers import aggregate_points, compare_teams, sort_standings
from .serializer import match_to_dict, results_to_json

__all__ = [
    # Models
    "Team",
    "Match",
    "Group",
    "DuplicateTeamKey",
    "MatchAlreadyPlayed",
    # Scheduler
    "create_matches",
    "InvalidRosterSize",
    # Engine
    "simulate_score",
    "play_match",
    "simulate_group",
    "prepare_group",
    # Tiebreakers
    "aggregate_points",
    "compare_teams",
    "sort_standings",
    # Serializer
    "match_to_dict",
    "results_to_json",
]
