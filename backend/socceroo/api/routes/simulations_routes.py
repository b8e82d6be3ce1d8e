"""
Simulation API routes.
"""

import random
from fastapi import APIRouter, Depends, HTTPException, status

from ..schemas import (
    SimulationRunRequest,
    SimulationResultsResponse,
    TeamStanding,
    MatchResult
)
from ...collector import ResultsCollector, CollectorError, get_collector
from ...core.rosters import reference_roster
from ...simulator import (
    Team,
    DuplicateTeamKey,
    InvalidRosterSize,
    prepare_group,
    simulate_group,
    results_to_json
)


router = APIRouter(prefix="/simulations", tags=["simulations"])


def get_results_collector() -> ResultsCollector:
    """FastAPI dependency for the statistics collector."""
    return get_collector("http")


def _standing(position: int, team: Team) -> TeamStanding:
    return TeamStanding(position=position, **team.to_dict())


@router.post("/run", response_model=SimulationResultsResponse)
async def run_simulation(
    request: SimulationRunRequest,
    collector: ResultsCollector = Depends(get_results_collector)
) -> SimulationResultsResponse:
    """
    Simulate a full group stage.

    Schedules the home-and-away fixtures, plays every match and returns the
    final table together with all results. Optionally submits the results
    to the statistics server.
    """
    if request.teams is None:
        teams = reference_roster()
    else:
        teams = [Team(name=t.name, key=t.key, rating=t.rating) for t in request.teams]

    try:
        group = prepare_group(teams, predicted_winner=request.predicted_winner)
    except (InvalidRosterSize, DuplicateTeamKey) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    if request.predicted_winner and group.get_team(request.predicted_winner) is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Predicted winner {request.predicted_winner} is not in the group"
        )

    rng = random.Random(request.seed) if request.seed is not None else None
    simulate_group(group, rng)

    results_json = results_to_json(group.matches)

    submitted = False
    if request.submit:
        try:
            submitted = await collector.submit_results(results_json)
        except CollectorError as e:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Error submitting results: {str(e)}"
            )

    standings = [_standing(i + 1, team) for i, team in enumerate(group.teams)]

    prediction_correct = None
    if group.predicted_winner:
        prediction_correct = group.prediction_correct()

    return SimulationResultsResponse(
        standings=standings,
        results=[MatchResult(**m.to_dict()) for m in group.matches],
        winner=standings[0],
        predicted_winner=group.predicted_winner,
        prediction_correct=prediction_correct,
        results_json=results_json,
        submitted=submitted
    )
