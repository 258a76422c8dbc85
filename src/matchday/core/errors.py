"""Errors raised by fixture generation and standings.

All subclass ``ValueError`` so callers that only care about bad input can
catch that.
"""

from __future__ import annotations


class TournamentError(ValueError):
    """Base class for structural or configuration problems in the input."""


class InsufficientTeamsError(TournamentError):
    """Fewer than two teams in a schedulable unit."""

    def __init__(self, count: int, group: str | None = None) -> None:
        self.count = count
        self.group = group
        where = f" in group {group}" if group is not None else ""
        super().__init__(f"at least 2 teams are required{where}, got {count}")


class SchedulingConfigError(TournamentError):
    """Invalid date, time or grouping configuration."""


class DuplicateTeamError(TournamentError):
    """The same team id appears more than once in a team list."""

    def __init__(self, team_id: str) -> None:
        self.team_id = team_id
        super().__init__(f"team {team_id} is listed more than once")


class InvalidMatchError(TournamentError):
    """A match record that cannot be valid, e.g. a team playing itself."""
