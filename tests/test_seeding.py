"""Tests for demo tournament generation and tournament YAML files."""

from datetime import date
from pathlib import Path

from matchday.core.fixtures import generate_fixtures, generate_group_fixtures
from matchday.core.seeding import (
    Tournament,
    generate_demo_tournament,
    load_tournament_yaml,
    save_tournament_yaml,
)
from matchday.models.standings import Tiebreaker


class TestDemoTournament:
    def test_generates_8_teams(self):
        tournament = generate_demo_tournament(num_teams=8, seed=42)
        assert len(tournament.teams) == 8
        assert len({t.id for t in tournament.teams}) == 8

    def test_deterministic(self):
        t1 = generate_demo_tournament(seed=42)
        t2 = generate_demo_tournament(seed=42)
        assert t1 == t2

    def test_seed_changes_ids(self):
        t1 = generate_demo_tournament(seed=1)
        t2 = generate_demo_tournament(seed=2)
        assert t1.teams[0].id != t2.teams[0].id
        assert t1.teams[0].name == t2.teams[0].name

    def test_teams_have_counties(self):
        tournament = generate_demo_tournament(num_teams=12)
        assert all(t.county and t.sub_county for t in tournament.teams)

    def test_default_start_is_a_saturday(self):
        tournament = generate_demo_tournament()
        assert tournament.fixtures.start_date.weekday() == 5

    def test_custom_start(self):
        tournament = generate_demo_tournament(start_date=date(2026, 5, 2))
        assert tournament.fixtures.start_date == date(2026, 5, 2)

    def test_groups(self):
        tournament = generate_demo_tournament(num_teams=12, num_groups=3)
        groups = {t.group for t in tournament.teams}
        assert groups == {"Group A", "Group B", "Group C"}

    def test_demo_schedules(self):
        tournament = generate_demo_tournament()
        schedule = generate_fixtures(tournament.teams, tournament.fixtures)
        # double leg by default: 8 teams -> 14 rounds of 4
        assert len(schedule.rounds) == 14
        assert len(schedule.matches) == 56

    def test_grouped_demo_schedules(self):
        tournament = generate_demo_tournament(num_teams=12, num_groups=2)
        grouped = generate_group_fixtures(tournament.teams, tournament.fixtures)
        assert set(grouped.groups) == {"Group A", "Group B"}
        assert grouped.errors == {}


class TestTournamentYaml:
    def test_round_trip(self, tmp_path: Path):
        tournament = generate_demo_tournament(num_teams=6, num_groups=2)
        path = tmp_path / "tournament.yaml"
        save_tournament_yaml(tournament, path)
        loaded = load_tournament_yaml(path)
        assert loaded == tournament

    def test_hand_written_file(self, tmp_path: Path):
        path = tmp_path / "cup.yaml"
        path.write_text(
            """
name: Lakeside Cup
teams:
  - {id: kis, name: Kisumu Hotstars, county: Kisumu}
  - {id: hb, name: Homa Bay Pirates, county: Homa Bay}
  - {id: sia, name: Siaya Eagles, county: Siaya}
fixtures:
  start_date: 2026-04-04
  double_leg: false
  kickoff_time: "15:30"
standings:
  points_win: 2
  tiebreakers: [POINTS, GA]
"""
        )
        loaded = load_tournament_yaml(path)
        assert isinstance(loaded, Tournament)
        assert loaded.name == "Lakeside Cup"
        assert [t.id for t in loaded.teams] == ["kis", "hb", "sia"]
        assert loaded.fixtures.start_date == date(2026, 4, 4)
        assert loaded.fixtures.weekends_only is True
        assert loaded.standings.points_win == 2
        assert loaded.standings.tiebreakers == [Tiebreaker.POINTS, Tiebreaker.GA]

        schedule = generate_fixtures(loaded.teams, loaded.fixtures)
        assert len(schedule.matches) == 3
        assert schedule.matches[0].kickoff.hour == 15
