"""Application settings via pydantic-settings. Loads from environment and .env file."""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings

from matchday.core.errors import SchedulingConfigError
from matchday.core.schedule_times import parse_kickoff_time, resolve_timezone
from matchday.models.fixture import FixtureConfig
from matchday.models.standings import StandingsOptions, Tiebreaker


class Settings(BaseSettings):
    """Matchday service configuration.

    All values can be overridden via environment variables or .env file.
    The fixture and points defaults only apply where a request leaves the
    value out.
    """

    # Environment
    matchday_env: str = "development"

    # Fixture defaults
    matchday_kickoff_time: str = "13:00"
    matchday_weekends_only: bool = True
    matchday_double_leg: bool = True
    matchday_round_interval_days: int = 7
    matchday_timezone: str = "Africa/Nairobi"

    # Standings defaults
    matchday_points_win: int = 3
    matchday_points_draw: int = 1
    matchday_points_loss: int = 0
    matchday_tiebreakers: list[Tiebreaker] = [
        Tiebreaker.POINTS,
        Tiebreaker.GD,
        Tiebreaker.GF,
        Tiebreaker.H2H,
    ]

    # Logging
    matchday_log_level: str = "INFO"

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}

    @field_validator("matchday_kickoff_time")
    @classmethod
    def _valid_kickoff(cls, value: str) -> str:
        try:
            parse_kickoff_time(value)
        except SchedulingConfigError as exc:
            raise ValueError(str(exc)) from exc
        return value

    @field_validator("matchday_timezone")
    @classmethod
    def _valid_timezone(cls, value: str) -> str:
        try:
            resolve_timezone(value)
        except SchedulingConfigError as exc:
            raise ValueError(str(exc)) from exc
        return value

    def default_fixture_config(self, start_date: date, **overrides: Any) -> FixtureConfig:
        """Build a FixtureConfig from these defaults, overriding any field."""
        values: dict[str, Any] = {
            "start_date": start_date,
            "kickoff_time": self.matchday_kickoff_time,
            "weekends_only": self.matchday_weekends_only,
            "double_leg": self.matchday_double_leg,
            "round_interval_days": self.matchday_round_interval_days,
            "timezone": self.matchday_timezone,
        }
        values.update(overrides)
        return FixtureConfig(**values)

    def default_standings_options(self) -> StandingsOptions:
        return StandingsOptions(
            points_win=self.matchday_points_win,
            points_draw=self.matchday_points_draw,
            points_loss=self.matchday_points_loss,
            tiebreakers=list(self.matchday_tiebreakers),
        )
