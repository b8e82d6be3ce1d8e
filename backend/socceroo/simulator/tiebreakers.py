"""
Standings order and tiebreaker resolution for a group.

Group tiebreaker order:
1. Points
2. Goal difference
3. Goals scored
4. Goals conceded (more conceded ranks higher)
5. Aggregate result between the two tied teams
5b. Team name (alphabetically later name ranks higher), then key

4 and 5b are kept in the order the group table has always used; both rank
the "wrong" way round compared to most competitions.
"""

from functools import cmp_to_key
from typing import List, Tuple

from .models import Team, Match


def aggregate_points(matches: List[Match], key1: str, key2: str) -> Tuple[int, int]:
    """
    Points each team took from the matches played between the two of them.

    3 points for a win, 1 each for a draw. Goals and away goals are not
    considered.

    Returns:
        Tuple of (points for key1, points for key2)
    """
    points1 = 0
    points2 = 0

    for match in matches:
        if not match.involves(key1, key2):
            continue

        if match.home_goals == match.away_goals:
            points1 += 1
            points2 += 1
            continue

        winner_key = match.home.key if match.home_goals > match.away_goals else match.away.key
        if winner_key == key1:
            points1 += 3
        else:
            points2 += 3

    return points1, points2


def winner_by_aggregate_result(matches: List[Match], t1: Team, t2: Team) -> bool:
    """True if t1 ranks above t2 on the head-to-head aggregate result."""
    points1, points2 = aggregate_points(matches, t1.key, t2.key)
    if points1 != points2:
        return points1 > points2
    if t1.name != t2.name:
        return t1.name > t2.name
    # Same display name; keys are unique so the order is still total
    return t1.key > t2.key


def compare_teams(t1: Team, t2: Team, matches: List[Match]) -> int:
    """
    Compare two teams for standings order.

    Returns:
        Negative if t1 ranks above t2, positive if below, 0 only for the
        same team
    """
    if t1.key == t2.key:
        return 0

    criteria = (
        (t1.points(), t2.points()),
        (t1.goal_difference(), t2.goal_difference()),
        (t1.goals_scored, t2.goals_scored),
        (t1.goals_conceded, t2.goals_conceded),
    )
    for value1, value2 in criteria:
        if value1 != value2:
            return -1 if value1 > value2 else 1

    return -1 if winner_by_aggregate_result(matches, t1, t2) else 1


def sort_standings(teams: List[Team], matches: List[Match]) -> List[Team]:
    """Return the teams in standings order, best first."""
    return sorted(teams, key=cmp_to_key(lambda a, b: compare_teams(a, b, matches)))
