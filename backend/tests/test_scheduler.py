"""
Tests for double round-robin fixture scheduling.
"""

from collections import Counter

import pytest

from socceroo.simulator.models import Team
from socceroo.simulator.scheduler import create_matches, InvalidRosterSize


def make_roster(n):
    return [Team(name=f"Team {i + 1}", key=f"T{i + 1}", rating=70) for i in range(n)]


def fixtures(matches):
    return [(m.home.key, m.away.key) for m in matches]


class TestFixtureCounts:
    """Every team meets every other team once at home and once away."""

    @pytest.mark.parametrize("n", [2, 3, 4, 5, 6, 7, 8])
    def test_match_count(self, n):
        assert len(create_matches(make_roster(n))) == n * (n - 1)

    @pytest.mark.parametrize("n", [2, 3, 4, 5, 6, 7, 8])
    def test_every_ordered_pair_once(self, n):
        pairs = Counter(fixtures(create_matches(make_roster(n))))
        keys = [f"T{i + 1}" for i in range(n)]
        expected = {(a, b) for a in keys for b in keys if a != b}
        assert set(pairs) == expected
        assert all(count == 1 for count in pairs.values())

    @pytest.mark.parametrize("n", [2, 3, 4, 5, 6, 7, 8])
    def test_return_leg_mirrors_first_leg(self, n):
        """Second half is the first half with home and away swapped, same order."""
        result = fixtures(create_matches(make_roster(n)))
        half = len(result) // 2
        assert result[half:] == [(away, home) for home, away in result[:half]]

    @pytest.mark.parametrize("n", [4, 6, 8])
    def test_each_team_plays_once_per_round(self, n):
        """With an even roster every first-leg round is a full matchday."""
        result = fixtures(create_matches(make_roster(n)))
        per_round = n // 2
        first_leg = result[:len(result) // 2]
        for start in range(0, len(first_leg), per_round):
            round_keys = [k for pair in first_leg[start:start + per_round] for k in pair]
            assert len(set(round_keys)) == n


class TestFourTeamGroup:
    """The 4-team order must match the Champions League group pattern."""

    def test_canonical_order(self, four_teams):
        result = fixtures(create_matches(four_teams))
        assert result == [
            ("T1", "T4"), ("T2", "T3"),
            ("T3", "T1"), ("T4", "T2"),
            ("T1", "T2"), ("T3", "T4"),
            ("T4", "T1"), ("T3", "T2"),
            ("T1", "T3"), ("T2", "T4"),
            ("T2", "T1"), ("T4", "T3"),
        ]

    def test_first_team_alternates_home_and_away(self, four_teams):
        result = fixtures(create_matches(four_teams))
        venues = ["h" if home == "T1" else "a" for home, away in result if "T1" in (home, away)]
        assert venues == ["h", "a", "h", "a", "h", "a"]

    def test_matches_hold_snapshots(self, four_teams):
        """Fixtures carry copies, not the roster's team objects."""
        matches = create_matches(four_teams)
        matches[0].home.wins = 5
        assert four_teams[0].wins == 0

    def test_scheduled_matches_are_unplayed(self, four_teams):
        for match in create_matches(four_teams):
            assert (match.home_goals, match.away_goals) == (0, 0)
            assert match.played is False


class TestGeneralRosters:
    """Scheduling beyond four teams."""

    def test_two_teams(self):
        assert fixtures(create_matches(make_roster(2))) == [("T1", "T2"), ("T2", "T1")]

    def test_three_teams(self):
        assert fixtures(create_matches(make_roster(3))) == [
            ("T2", "T3"), ("T3", "T1"), ("T1", "T2"),
            ("T3", "T2"), ("T1", "T3"), ("T2", "T1"),
        ]

    def test_six_teams_fixed_team_alternates(self):
        result = fixtures(create_matches(make_roster(6)))
        first_leg = result[:15]
        venues = ["h" if home == "T1" else "a" for home, away in first_leg if "T1" in (home, away)]
        assert venues == ["h", "a", "h", "a", "h"]

    @pytest.mark.parametrize("n", [0, 1])
    def test_too_few_teams(self, n):
        with pytest.raises(InvalidRosterSize):
            create_matches(make_roster(n))
