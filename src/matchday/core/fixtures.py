"""Fixture generation — teams and a FixtureConfig in, rounds and matches out.

Both entry points are pure: they never mutate their inputs, and the same
teams in the same order with the same config always produce the same
schedule, match ids included.
"""

from __future__ import annotations

import logging
import uuid
from collections import defaultdict

from matchday.core.errors import InsufficientTeamsError
from matchday.core.groups import partition_by_group
from matchday.core.schedule_times import (
    assign_round_days,
    kickoff_at,
    parse_kickoff_time,
    resolve_timezone,
)
from matchday.core.scheduler import Matchup, bye_team_ids, generate_round_robin, rounds_per_leg
from matchday.models.fixture import (
    FixtureConfig,
    FixtureSchedule,
    GroupedSchedule,
    Match,
    Round,
)
from matchday.models.team import Team

logger = logging.getLogger(__name__)

_MATCH_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_DNS, "fixtures.matchday")


def round_name(round_number: int, leg: int, per_leg: int) -> str:
    """``"Round 3"`` in the first leg, ``"Round 3 (Return)"`` in the second."""
    if leg == 1:
        return f"Round {round_number}"
    return f"Round {round_number - per_leg} (Return)"


def match_id(group: str | None, m: Matchup) -> str:
    """Deterministic id so regenerating a schedule yields the same ids."""
    key = f"{group or ''}:{m.round_number}:{m.home_team_id}:{m.away_team_id}"
    return str(uuid.uuid5(_MATCH_NAMESPACE, key))


def generate_fixtures(
    teams: list[Team],
    config: FixtureConfig,
    group: str | None = None,
) -> FixtureSchedule:
    """Generate a round-robin schedule for one set of teams.

    Args:
        teams: The teams to schedule, in seeding order.
        config: Dates, kickoff time, legs and venue.
        group: Group label stamped on rounds and matches, if any.

    Returns:
        FixtureSchedule with rounds and matches in chronological order.

    Raises:
        InsufficientTeamsError: Fewer than two teams.
        DuplicateTeamError: A team id appears twice.
        SchedulingConfigError: Bad kickoff time, timezone or date window.
    """
    if len(teams) < 2:
        raise InsufficientTeamsError(len(teams), group)

    kickoff = parse_kickoff_time(config.kickoff_time)
    tz = resolve_timezone(config.timezone)
    team_ids = [t.id for t in teams]
    matchups = generate_round_robin(team_ids, double_leg=config.double_leg)

    by_round: dict[int, list[Matchup]] = defaultdict(list)
    for m in matchups:
        by_round[m.round_number].append(m)
    round_numbers = sorted(by_round)
    days = assign_round_days([len(by_round[r]) for r in round_numbers], config)
    byes = bye_team_ids(team_ids, matchups)

    per_leg = rounds_per_leg(len(teams))
    rounds: list[Round] = []
    matches: list[Match] = []
    for number, round_days in zip(round_numbers, days, strict=True):
        round_matchups = by_round[number]
        leg = round_matchups[0].leg
        round_matches = [
            Match(
                id=match_id(group, m),
                round_number=number,
                leg=leg,
                group=group,
                home_team_id=m.home_team_id,
                away_team_id=m.away_team_id,
                kickoff=kickoff_at(day, kickoff, tz),
                venue=config.venue,
            )
            for m, day in zip(round_matchups, round_days, strict=True)
        ]
        rounds.append(
            Round(
                number=number,
                leg=leg,
                name=round_name(number, leg, per_leg),
                group=group,
                match_ids=[m.id for m in round_matches],
                bye_team_ids=byes.get(number, []),
            )
        )
        matches.extend(round_matches)

    warnings: list[str] = []
    if len(teams) % 2:
        warnings.append(
            f"odd number of teams ({len(teams)}): every team has one bye round per leg"
        )

    logger.info(
        "fixtures_generated group=%s teams=%d rounds=%d matches=%d double_leg=%s",
        group,
        len(teams),
        len(rounds),
        len(matches),
        config.double_leg,
    )
    return FixtureSchedule(rounds=rounds, matches=matches, warnings=warnings)


def generate_group_fixtures(teams: list[Team], config: FixtureConfig) -> GroupedSchedule:
    """Generate an independent schedule for every group.

    Round numbers are local to each group and every group starts on
    ``config.start_date``; aligning groups against each other is up to the
    caller.  A group with fewer than two teams is reported in ``errors``
    without affecting the others.

    Raises:
        InsufficientTeamsError: No teams at all.
        SchedulingConfigError: A team has no group, or the shared date
            configuration is invalid.
    """
    if not teams:
        raise InsufficientTeamsError(0)

    result = GroupedSchedule()
    for name, members in partition_by_group(teams).items():
        try:
            result.groups[name] = generate_fixtures(members, config, group=name)
        except InsufficientTeamsError as exc:
            logger.warning("group_not_scheduled group=%s reason=%s", name, exc)
            result.errors[name] = str(exc)
    return result
