"""
Group roster API routes.
"""

from fastapi import APIRouter

from ..schemas import RosterResponse, RosterTeam
from ...core.rosters import reference_roster, rating_tier


router = APIRouter(prefix="/groups", tags=["groups"])


@router.get("/reference", response_model=RosterResponse)
async def get_reference_group() -> RosterResponse:
    """
    Get the built-in reference group (1994-95 Champions League, Group D).
    """
    return RosterResponse(
        name="UEFA Champions League 1994-95 Group D",
        teams=[
            RosterTeam(name=t.name, key=t.key, rating=t.rating, tier=rating_tier(t.rating))
            for t in reference_roster()
        ]
    )
