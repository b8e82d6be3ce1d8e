"""
Fixture scheduling for a double round-robin group.

The first team in the roster is held fixed and meets the others from the
back of the roster forward, alternating home and away each round. For a
4-team group this gives the classic Champions League group pattern:

    (T1, T4) (T2, T3)
    (T3, T1) (T4, T2)
    (T1, T2) (T3, T4)

followed by the same six fixtures with home and away swapped.
"""

from typing import Iterator, List, Optional, Tuple

from .models import Team, Match


class InvalidRosterSize(ValueError):
    """Raised when a group has too few teams to schedule."""
    pass


def _remaining_pairs(centre: int, size: int) -> Iterator[Tuple[int, int]]:
    """
    Pair up roster positions 1..size for the round centred on `centre`.

    Positions a and b meet when a + b == 2 * centre (mod size). `size` is
    always odd, so every pair has exactly one such round and the centre
    position itself is left over for the fixed team.
    """
    for a in range(1, size + 1):
        b = (2 * centre - a) % size or size
        if a < b:
            yield a, b


def create_matches(teams: List[Team]) -> List[Match]:
    """
    Create the full home-and-away fixture list for a group.

    Args:
        teams: Group roster in draw order

    Returns:
        n * (n - 1) matches in playing order. The first n * (n - 1) / 2 are
        the first leg, the rest are the return leg in the same order.

    Raises:
        InvalidRosterSize: If fewer than 2 teams are given
    """
    if len(teams) < 2:
        raise InvalidRosterSize(
            f"A group needs at least 2 teams, got {len(teams)}"
        )

    # Odd rosters get a bye slot; fixtures against it are dropped
    slots: List[Optional[Team]] = list(teams)
    if len(slots) % 2:
        slots.append(None)

    fixed = slots[0]
    size = len(slots) - 1

    matches: List[Match] = []

    for round_index, rounds in enumerate(range(size, 0, -1)):
        fixed_at_home = round_index % 2 == 0

        opponent = slots[rounds]
        if opponent is not None:
            if fixed_at_home:
                matches.append(Match(home=fixed.copy(), away=opponent.copy()))
            else:
                matches.append(Match(home=opponent.copy(), away=fixed.copy()))

        for a, b in _remaining_pairs(rounds, size):
            home, away = slots[a], slots[b]
            if home is None or away is None:
                continue
            if not fixed_at_home:
                home, away = away, home
            matches.append(Match(home=home.copy(), away=away.copy()))

    # Return leg goes in as one block right after the first leg
    first_leg_count = len(matches)
    return_leg = [Match(home=m.away.copy(), away=m.home.copy()) for m in matches]
    matches[first_leg_count:first_leg_count] = return_leg

    return matches
