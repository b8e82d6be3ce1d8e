"""
Data models for the group-stage simulator.
"""

from dataclasses import dataclass, field
from typing import List, Optional


class DuplicateTeamKey(ValueError):
    """Raised when a team is added to a group that already holds its key."""
    pass


class MatchAlreadyPlayed(Exception):
    """Raised when a match that already has a result is simulated again."""
    pass


@dataclass
class Team:
    """Represents a football team with a performance rating and group stats."""

    name: str
    key: str
    rating: int
    wins: int = 0
    losses: int = 0
    draws: int = 0
    goals_scored: int = 0
    goals_conceded: int = 0

    def points(self) -> int:
        """3 points for a win, 1 for a draw."""
        return self.wins * 3 + self.draws

    def goal_difference(self) -> int:
        return self.goals_scored - self.goals_conceded

    @property
    def played(self) -> int:
        return self.wins + self.losses + self.draws

    def reset(self) -> None:
        """Clear all statistics, keeping identity and rating."""
        self.wins = 0
        self.losses = 0
        self.draws = 0
        self.goals_scored = 0
        self.goals_conceded = 0

    def copy(self) -> 'Team':
        """Create a snapshot of this team for simulation."""
        return Team(
            name=self.name,
            key=self.key,
            rating=self.rating,
            wins=self.wins,
            losses=self.losses,
            draws=self.draws,
            goals_scored=self.goals_scored,
            goals_conceded=self.goals_conceded
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "key": self.key,
            "rating": self.rating,
            "played": self.played,
            "wins": self.wins,
            "draws": self.draws,
            "losses": self.losses,
            "goals_scored": self.goals_scored,
            "goals_conceded": self.goals_conceded,
            "goal_difference": self.goal_difference(),
            "points": self.points()
        }


@dataclass
class Match:
    """A fixture between two teams. Score is 0-0 until the match is played."""

    home: Team
    away: Team
    home_goals: int = 0
    away_goals: int = 0
    played: bool = False

    def involves(self, key1: str, key2: str) -> bool:
        """True if this match is between exactly the two given team keys."""
        return {self.home.key, self.away.key} == {key1, key2}

    def apply_result(self, home_goals: int, away_goals: int) -> None:
        """
        Record the final score and update both team snapshots.

        Raises:
            MatchAlreadyPlayed: If this match already has a result
        """
        if self.played:
            raise MatchAlreadyPlayed(
                f"{self.home.key} vs {self.away.key} has already been played"
            )

        self.home_goals = home_goals
        self.away_goals = away_goals
        self.played = True

        if home_goals == away_goals:
            self.home.draws += 1
            self.away.draws += 1
        elif home_goals > away_goals:
            self.home.wins += 1
            self.away.losses += 1
        else:
            self.away.wins += 1
            self.home.losses += 1

        self.home.goals_scored += home_goals
        self.home.goals_conceded += away_goals

        self.away.goals_scored += away_goals
        self.away.goals_conceded += home_goals

    def to_dict(self) -> dict:
        return {
            "home": self.home.key,
            "away": self.away.key,
            "home_name": self.home.name,
            "away_name": self.away.name,
            "home_goals": self.home_goals,
            "away_goals": self.away_goals,
            "played": self.played
        }


@dataclass
class Group:
    """A single group of teams playing each other home and away."""

    teams: List[Team] = field(default_factory=list)
    matches: List[Match] = field(default_factory=list)
    predicted_winner: str = ""

    def add_team(self, team: Team) -> None:
        if self.get_team(team.key) is not None:
            raise DuplicateTeamKey(f"Team key {team.key!r} is already in the group")
        self.teams.append(team)

    def get_team(self, key: str) -> Optional[Team]:
        """Look up a team by its unique key."""
        for team in self.teams:
            if team.key == key:
                return team
        return None

    def update_team(self, team: Team) -> None:
        """Replace the stored team with the same key. Unknown keys are ignored."""
        for i, existing in enumerate(self.teams):
            if existing.key == team.key:
                self.teams[i] = team
                break

    def winner(self) -> Team:
        """Group winner. Only meaningful after the group is simulated."""
        return self.teams[0]

    def prediction_correct(self) -> bool:
        return self.predicted_winner == self.winner().key

    def reset(self) -> None:
        """Drop all fixtures and clear team statistics for a new run."""
        self.matches = []
        for team in self.teams:
            team.reset()
