"""Group partitioning for group-stage tournaments."""

from __future__ import annotations

import string

from matchday.core.errors import SchedulingConfigError
from matchday.models.team import Team


def group_name(index: int) -> str:
    """``0 -> "Group A"``, ``25 -> "Group Z"``, ``26 -> "Group 27"``."""
    if index < len(string.ascii_uppercase):
        return f"Group {string.ascii_uppercase[index]}"
    return f"Group {index + 1}"


def partition_by_group(teams: list[Team]) -> dict[str, list[Team]]:
    """Split teams by their ``group`` attribute.

    Groups keep the order in which they first appear, and teams keep their
    input order within a group.

    Raises:
        SchedulingConfigError: A team has no group assignment.
    """
    groups: dict[str, list[Team]] = {}
    for team in teams:
        if not team.group:
            raise SchedulingConfigError(f"team {team.id} has no group assignment")
        groups.setdefault(team.group, []).append(team)
    return groups


def distribute_into_groups(
    teams: list[Team],
    group_count: int,
    names: list[str] | None = None,
    by_county: bool = False,
) -> list[Team]:
    """Snake-draft teams into *group_count* groups.

    Teams are dealt A, B, C, C, B, A, A, B, ... so that when the input is in
    seeding order each group gets a comparable spread of seeds.  With
    *by_county* the teams are first stably sorted by county (teams without
    one first), so the draft walks region by region instead of by seed.
    Returns new Team objects with ``group`` set, in draft order; the inputs
    are left alone.
    """
    if group_count < 1:
        raise SchedulingConfigError(f"group count must be at least 1, got {group_count}")
    if group_count > len(teams):
        raise SchedulingConfigError(
            f"cannot split {len(teams)} teams into {group_count} groups"
        )
    if names is not None and len(names) != group_count:
        raise SchedulingConfigError(f"expected {group_count} group names, got {len(names)}")
    labels = names or [group_name(i) for i in range(group_count)]
    if by_county:
        teams = sorted(teams, key=lambda t: (t.county or "").casefold())

    assigned: list[Team] = []
    index, direction = 0, 1
    for team in teams:
        assigned.append(team.model_copy(update={"group": labels[index]}))
        index += direction
        if index >= group_count:
            index, direction = group_count - 1, -1
        elif index < 0:
            index, direction = 0, 1
    return assigned
