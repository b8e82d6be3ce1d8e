"""
Pydantic schemas for API request/response validation.
"""

from typing import Optional, List
from pydantic import BaseModel, Field


# ============== Roster Schemas ==============

class TeamIn(BaseModel):
    """A team entered into a group."""
    name: str = Field(..., min_length=1, max_length=100)
    key: str = Field(..., min_length=1, max_length=50)
    rating: int = Field(..., ge=0, le=100)


class RosterTeam(BaseModel):
    """A team in a built-in roster."""
    name: str
    key: str
    rating: int
    tier: str


class RosterResponse(BaseModel):
    """Built-in group roster response."""
    name: str
    teams: List[RosterTeam]


# ============== Simulation Schemas ==============

class SimulationRunRequest(BaseModel):
    """Simulate a group request."""
    teams: Optional[List[TeamIn]] = None  # Defaults to the reference group
    predicted_winner: str = Field(default="", max_length=50)
    seed: Optional[int] = None  # Fixed seed for reproducible results
    submit: bool = False  # Send results to the statistics server


class TeamStanding(BaseModel):
    """A row of the group table."""
    position: int
    name: str
    key: str
    rating: int
    played: int
    wins: int
    draws: int
    losses: int
    goals_scored: int
    goals_conceded: int
    goal_difference: int
    points: int


class MatchResult(BaseModel):
    """Result of a single group match."""
    home: str
    away: str
    home_name: str
    away_name: str
    home_goals: int
    away_goals: int
    played: bool


class SimulationResultsResponse(BaseModel):
    """Full group simulation response."""
    standings: List[TeamStanding]
    results: List[MatchResult]
    winner: TeamStanding
    predicted_winner: str
    prediction_correct: Optional[bool] = None  # None when no prediction was made
    results_json: str
    submitted: bool = False

