"""Tests for application configuration."""

from datetime import date

import pytest
from pydantic import ValidationError

from matchday.config import Settings
from matchday.models.standings import Tiebreaker


class TestDefaults:
    def test_fixture_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("MATCHDAY_TIMEZONE", raising=False)
        settings = Settings(_env_file=None)
        assert settings.matchday_kickoff_time == "13:00"
        assert settings.matchday_weekends_only is True
        assert settings.matchday_double_leg is True
        assert settings.matchday_round_interval_days == 7
        assert settings.matchday_timezone == "Africa/Nairobi"

    def test_standings_defaults(self) -> None:
        options = Settings(_env_file=None).default_standings_options()
        assert (options.points_win, options.points_draw, options.points_loss) == (3, 1, 0)
        assert options.tiebreakers == [
            Tiebreaker.POINTS,
            Tiebreaker.GD,
            Tiebreaker.GF,
            Tiebreaker.H2H,
        ]


class TestValidation:
    def test_bad_kickoff_time(self) -> None:
        with pytest.raises(ValidationError):
            Settings(matchday_kickoff_time="25:00")

    def test_bad_timezone(self) -> None:
        with pytest.raises(ValidationError):
            Settings(matchday_timezone="Mars/Olympus_Mons")

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MATCHDAY_KICKOFF_TIME", "16:00")
        monkeypatch.setenv("MATCHDAY_WEEKENDS_ONLY", "false")
        monkeypatch.setenv("MATCHDAY_POINTS_WIN", "2")
        settings = Settings(_env_file=None)
        assert settings.matchday_kickoff_time == "16:00"
        assert settings.matchday_weekends_only is False
        assert settings.default_standings_options().points_win == 2


class TestDefaultFixtureConfig:
    def test_uses_settings(self, settings: Settings) -> None:
        config = settings.default_fixture_config(date(2026, 3, 7))
        assert config.start_date == date(2026, 3, 7)
        assert config.kickoff_time == "13:00"
        assert config.timezone == "UTC"
        assert config.double_leg is True

    def test_overrides_win(self, settings: Settings) -> None:
        config = settings.default_fixture_config(
            date(2026, 3, 7), double_leg=False, kickoff_time="10:30", venue="Kasarani"
        )
        assert config.double_leg is False
        assert config.kickoff_time == "10:30"
        assert config.venue == "Kasarani"

    def test_invalid_override_rejected(self, settings: Settings) -> None:
        with pytest.raises(ValidationError):
            settings.default_fixture_config(date(2026, 3, 7), round_interval_days=0)
