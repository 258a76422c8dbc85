"""Shared test fixtures."""

from datetime import date

import pytest

from matchday.config import Settings
from matchday.models.fixture import FixtureConfig
from matchday.models.team import Team

# Saturday
SEASON_START = date(2026, 3, 7)


def make_teams(n: int, group: str | None = None) -> list[Team]:
    """Build n teams with ids t0..t{n-1}."""
    prefix = f"{group}-" if group else ""
    return [Team(id=f"{prefix}t{i}", name=f"{prefix}Team {i}", group=group) for i in range(n)]


@pytest.fixture
def settings() -> Settings:
    """Test settings with defaults."""
    return Settings(matchday_env="development", matchday_timezone="UTC")


@pytest.fixture
def config() -> FixtureConfig:
    """Weekly Saturday schedule, single leg, naive kickoffs."""
    return FixtureConfig(start_date=SEASON_START, weekends_only=True, double_leg=False)
