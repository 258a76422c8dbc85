"""Fixture models — configuration in, rounds and matches out."""

from __future__ import annotations

from datetime import date, datetime
from enum import StrEnum

from pydantic import BaseModel, Field, model_validator


class MatchStatus(StrEnum):
    SCHEDULED = "SCHEDULED"
    LIVE = "LIVE"
    COMPLETED = "COMPLETED"
    POSTPONED = "POSTPONED"
    CANCELLED = "CANCELLED"


class Match(BaseModel):
    """A single fixture between two teams.

    Scores are only meaningful once ``status`` is ``COMPLETED``.
    """

    id: str
    round_number: int = Field(ge=1)
    leg: int = Field(default=1, ge=1, le=2)
    group: str | None = None
    home_team_id: str
    away_team_id: str
    kickoff: datetime | None = None
    venue: str | None = None
    home_score: int | None = Field(default=None, ge=0)
    away_score: int | None = Field(default=None, ge=0)
    status: MatchStatus = MatchStatus.SCHEDULED

    @model_validator(mode="after")
    def _distinct_teams(self) -> Match:
        if self.home_team_id == self.away_team_id:
            msg = f"match {self.id} has {self.home_team_id} as both home and away team"
            raise ValueError(msg)
        return self

    @property
    def has_result(self) -> bool:
        """True when the match counts towards standings."""
        return (
            self.status == MatchStatus.COMPLETED
            and self.home_score is not None
            and self.away_score is not None
        )


class Round(BaseModel):
    """An ordered position in the schedule.

    A round groups matches played together; it only implies a shared day
    when the kickoff assignment put them on one.
    """

    number: int = Field(ge=1)
    leg: int = Field(default=1, ge=1, le=2)
    name: str
    group: str | None = None
    match_ids: list[str] = Field(default_factory=list)
    bye_team_ids: list[str] = Field(default_factory=list)


class FixtureConfig(BaseModel):
    """Scheduling parameters for one round-robin unit."""

    start_date: date
    kickoff_time: str = "13:00"  # HH:MM, validated by schedule_times
    weekends_only: bool = True
    double_leg: bool = True
    venue: str | None = None

    end_date: date | None = None
    round_interval_days: int = Field(default=7, ge=1, le=60)
    max_matches_per_day: int | None = Field(default=None, ge=1)
    blackout_dates: list[date] = Field(default_factory=list)
    timezone: str | None = None


class FixtureSchedule(BaseModel):
    """Output of generate_fixtures()."""

    rounds: list[Round] = Field(default_factory=list)
    matches: list[Match] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    def matches_in_round(self, number: int) -> list[Match]:
        return [m for m in self.matches if m.round_number == number]


class GroupedSchedule(BaseModel):
    """Output of generate_group_fixtures() — one schedule per group.

    Groups that could not be scheduled appear in ``errors`` instead.
    """

    groups: dict[str, FixtureSchedule] = Field(default_factory=dict)
    errors: dict[str, str] = Field(default_factory=dict)

    @property
    def matches(self) -> list[Match]:
        return [m for schedule in self.groups.values() for m in schedule.matches]
