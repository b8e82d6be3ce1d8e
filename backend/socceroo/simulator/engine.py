"""
Match and group simulation engine.
"""

import logging
import random
from typing import List, Optional, Tuple

from .models import Team, Match, Group
from .scheduler import create_matches
from .tiebreakers import sort_standings


logger = logging.getLogger(__name__)

ATTACK_ROUNDS = 10
BASE_CHANCE = 40
HOME_ADVANTAGE = 10
BEHIND_PENALTY = 10
ROUND_DECAY = 10


def scoring_chance(
    side: Team,
    other: Team,
    is_home: bool,
    goals_for: int,
    goals_against: int,
    round_index: int,
    handicap: int
) -> int:
    """
    Percentage chance (0-100) for `side` to score on one attack.

    1. Team rating (+/- 1% per rating point difference)
    2. Home advantage (+10%)
    3. Previous results in the group (+/- 1% per 2 points difference)
    4. Score state: -10% when behind, -10% per round already played, and
       divided by the accumulated handicap for missed rounds
    """
    chance = BASE_CHANCE
    if is_home:
        chance += HOME_ADVANTAGE

    chance += side.rating - other.rating
    chance += (side.points() - other.points()) // 2

    if goals_for < goals_against:
        chance -= BEHIND_PENALTY

    chance -= ROUND_DECAY * round_index

    if handicap > 0:
        chance //= handicap

    return max(chance, 0)


def simulate_score(
    home: Team,
    away: Team,
    rng: Optional[random.Random] = None
) -> Tuple[int, int]:
    """
    Simulate the score of a match between two team snapshots.

    Each of the 10 attack rounds gives the home side, then the away side,
    one chance to score. A side that has fewer goals than the round number
    picks up handicap equal to the round number, which sharply cuts its
    chances for the rest of the match.

    Args:
        home: Home team snapshot
        away: Away team snapshot
        rng: Random source, defaults to the module-level generator

    Returns:
        Tuple of (home goals, away goals)
    """
    if rng is None:
        rng = random

    goals = [0, 0]
    handicaps = [0, 0]
    sides = ((home, away), (away, home))

    for i in range(ATTACK_ROUNDS):
        for x, (side, other) in enumerate(sides):
            goals_for = goals[x]
            goals_against = goals[1 - x]

            if goals_for < i:
                handicaps[x] += i

            chance = scoring_chance(
                side, other,
                is_home=(x == 0),
                goals_for=goals_for,
                goals_against=goals_against,
                round_index=i,
                handicap=handicaps[x]
            )

            dice = rng.randrange(100)
            logger.debug("Chance for %s to score: %d%%", side.name, chance)

            if dice <= chance:
                goals[x] += 1
                logger.debug("Goal for %s! %d - %d", side.name, goals[0], goals[1])

    return goals[0], goals[1]


def play_match(match: Match, rng: Optional[random.Random] = None) -> Match:
    """Simulate a match and update both of its team snapshots with the result."""
    home_goals, away_goals = simulate_score(match.home, match.away, rng)
    match.apply_result(home_goals, away_goals)
    logger.debug(
        "%s %d - %d %s", match.home.name, home_goals, away_goals, match.away.name
    )
    return match


def simulate_group(group: Group, rng: Optional[random.Random] = None) -> Group:
    """
    Play every fixture of the group in order and sort the standings.

    Each match starts from the current state of both teams, so results
    feed into the scoring chances of later fixtures.

    Args:
        group: Group with teams added and fixtures created
        rng: Random source, defaults to the module-level generator

    Returns:
        The same group, with all matches played and teams sorted
    """
    for i, match in enumerate(group.matches):
        current_home = group.get_team(match.home.key)
        if current_home is not None:
            match.home = current_home.copy()

        current_away = group.get_team(match.away.key)
        if current_away is not None:
            match.away = current_away.copy()

        play_match(match, rng)

        group.matches[i] = match
        group.update_team(match.home.copy())
        group.update_team(match.away.copy())

    group.teams = sort_standings(group.teams, group.matches)

    if group.teams:
        logger.info(
            "Simulated group of %d teams over %d matches, winner %s",
            len(group.teams), len(group.matches), group.winner().name
        )

    return group


def prepare_group(teams: List[Team], predicted_winner: str = "") -> Group:
    """
    Build a group from a roster and schedule its fixtures.

    Raises:
        DuplicateTeamKey: If two teams share a key
        InvalidRosterSize: If fewer than 2 teams are given
    """
    group = Group(predicted_winner=predicted_winner)
    for team in teams:
        group.add_team(team.copy())
    group.matches = create_matches(group.teams)
    return group
