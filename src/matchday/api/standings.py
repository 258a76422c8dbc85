"""Standings API endpoint."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel, Field

from matchday.api.deps import SettingsDep
from matchday.core.standings import calculate_standings
from matchday.models.fixture import Match
from matchday.models.standings import StandingsOptions
from matchday.models.team import Team

router = APIRouter(prefix="/api", tags=["standings"])


class StandingsRequest(BaseModel):
    teams: list[Team]
    matches: list[Match] = Field(default_factory=list)
    options: StandingsOptions | None = None


@router.post("/standings")
async def get_standings(body: StandingsRequest, settings: SettingsDep) -> dict:
    """Compute the current table from the posted results."""
    options = body.options or settings.default_standings_options()
    standings = calculate_standings(body.teams, body.matches, options)
    return {"data": [row.model_dump(mode="json") for row in standings]}
