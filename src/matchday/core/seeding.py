"""Tournament files — YAML loading and demo tournament generation.

Supports two flows:
1. Load from YAML (hand-authored or exported from the admin UI)
2. Generate a demo tournament programmatically (for scripts and tests)
"""

from __future__ import annotations

import uuid
from datetime import date
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from matchday.core.groups import distribute_into_groups
from matchday.models.fixture import FixtureConfig
from matchday.models.standings import StandingsOptions
from matchday.models.team import Team


class Tournament(BaseModel):
    """Everything needed to schedule and rank one tournament."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = "Jamii Cup"
    teams: list[Team] = Field(default_factory=list)
    fixtures: FixtureConfig
    standings: StandingsOptions = Field(default_factory=StandingsOptions)


_DEMO_TEAMS = [
    ("Kibera Stars", "Nairobi", "Langata"),
    ("Mathare Lions", "Nairobi", "Mathare"),
    ("Kisumu Hotstars", "Kisumu", "Kisumu Central"),
    ("Nakuru Rangers", "Nakuru", "Nakuru Town East"),
    ("Mombasa Sharks", "Mombasa", "Mvita"),
    ("Eldoret Falcons", "Uasin Gishu", "Kapseret"),
    ("Thika United Youth", "Kiambu", "Thika Town"),
    ("Machakos Comets", "Machakos", "Machakos Town"),
    ("Nyeri Highlanders", "Nyeri", "Nyeri Town"),
    ("Kakamega Homeboyz", "Kakamega", "Lurambi"),
    ("Malindi Mariners", "Kilifi", "Malindi"),
    ("Garissa Camels", "Garissa", "Garissa Township"),
]


def generate_demo_tournament(
    num_teams: int = 8,
    num_groups: int = 0,
    seed: int = 42,
    start_date: date | None = None,
) -> Tournament:
    """Generate a tournament from the built-in team list.

    Ids are derived from *seed*, so the same arguments always produce the
    same tournament.  With ``num_groups`` > 0 the teams are snake-drafted
    into groups.
    """
    teams = [
        Team(
            id=str(uuid.uuid5(uuid.NAMESPACE_DNS, f"team-{seed}-{idx}")),
            name=name,
            county=county,
            sub_county=sub_county,
        )
        for idx, (name, county, sub_county) in enumerate(_DEMO_TEAMS[:num_teams])
    ]
    if num_groups > 0:
        teams = distribute_into_groups(teams, num_groups)

    return Tournament(
        id=str(uuid.uuid5(uuid.NAMESPACE_DNS, f"tournament-{seed}")),
        teams=teams,
        fixtures=FixtureConfig(start_date=start_date or date(2026, 3, 7)),
    )


def save_tournament_yaml(tournament: Tournament, path: Path) -> None:
    """Save a tournament to YAML."""
    data = tournament.model_dump(mode="json")
    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


def load_tournament_yaml(path: Path) -> Tournament:
    """Load a tournament from YAML."""
    with open(path) as f:
        data = yaml.safe_load(f)
    return Tournament.model_validate(data)
