"""Standings models — derived on demand, never stored."""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, Field, computed_field

FORM_LENGTH = 5


class Tiebreaker(StrEnum):
    POINTS = "POINTS"
    GD = "GD"
    GF = "GF"
    H2H = "H2H"
    GA = "GA"
    AWAY_GF = "AWAY_GF"


DEFAULT_TIEBREAKERS: list[Tiebreaker] = [
    Tiebreaker.POINTS,
    Tiebreaker.GD,
    Tiebreaker.GF,
    Tiebreaker.H2H,
]


class StandingsOptions(BaseModel):
    """Points scheme and tie-break precedence."""

    points_win: int = 3
    points_draw: int = 1
    points_loss: int = 0
    tiebreakers: list[Tiebreaker] = Field(default_factory=lambda: list(DEFAULT_TIEBREAKERS))


class TeamRecord(BaseModel):
    """Played/won/drawn/lost and goals for one venue split."""

    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = 0
    goals_against: int = 0


class StandingRow(BaseModel):
    """One line of the league table."""

    position: int = 0
    team_id: str
    team_name: str
    group: str | None = None
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = 0
    goals_against: int = 0
    points: int = 0
    form: list[Literal["W", "D", "L"]] = Field(default_factory=list)
    home: TeamRecord = Field(default_factory=TeamRecord)
    away: TeamRecord = Field(default_factory=TeamRecord)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against

    @property
    def form_string(self) -> str:
        return "".join(self.form)
