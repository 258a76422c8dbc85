"""Fixture generation API endpoints.

Stateless: the caller posts teams and scheduling options and gets the
schedule back.  Persisting it is the caller's job.
"""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, Field, ValidationError

from matchday.api.deps import SettingsDep
from matchday.config import Settings
from matchday.core.fixtures import generate_fixtures, generate_group_fixtures
from matchday.models.fixture import FixtureConfig
from matchday.models.team import Team

router = APIRouter(prefix="/api/fixtures", tags=["fixtures"])


class FixtureRequest(BaseModel):
    """Teams plus scheduling options.

    Omitted options use the server defaults.  An explicit ``"timezone": null``
    asks for naive kickoffs.
    """

    teams: list[Team]
    start_date: date
    kickoff_time: str | None = None
    weekends_only: bool | None = None
    double_leg: bool | None = None
    venue: str | None = None
    end_date: date | None = None
    round_interval_days: int | None = None
    max_matches_per_day: int | None = None
    blackout_dates: list[date] = Field(default_factory=list)
    timezone: str | None = None

    def to_config(self, settings: Settings) -> FixtureConfig:
        overrides = self.model_dump(exclude={"teams", "start_date"}, exclude_unset=True)
        try:
            return settings.default_fixture_config(self.start_date, **overrides)
        except ValidationError as exc:
            raise RequestValidationError(exc.errors()) from exc


@router.post("")
async def create_fixtures(body: FixtureRequest, settings: SettingsDep) -> dict:
    """Generate a round-robin schedule for one set of teams."""
    schedule = generate_fixtures(body.teams, body.to_config(settings))
    return {"data": schedule.model_dump(mode="json")}


@router.post("/groups")
async def create_group_fixtures(body: FixtureRequest, settings: SettingsDep) -> dict:
    """Generate an independent schedule for each group of teams."""
    grouped = generate_group_fixtures(body.teams, body.to_config(settings))
    return {"data": grouped.model_dump(mode="json")}
