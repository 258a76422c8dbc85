"""Optional enrichment pass: venue assignment and conflict detection.

The fixture generator stamps one venue string on every match and checks
nothing.  Callers with a pool of grounds can run ``assign_venues`` over the
generated matches, then ``detect_conflicts`` to list double bookings and
short rest periods.  Nothing here moves a match; conflicts are reported for
a human to resolve.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Sequence
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field

from matchday.core.schedule_times import comparable_kickoff
from matchday.models.fixture import Match
from matchday.models.team import Team, Venue

logger = logging.getLogger(__name__)


class ConflictType(StrEnum):
    VENUE_CONFLICT = "VENUE_CONFLICT"
    TEAM_DOUBLE_BOOKED = "TEAM_DOUBLE_BOOKED"
    REST_PERIOD_VIOLATION = "REST_PERIOD_VIOLATION"


class Conflict(BaseModel):
    """A scheduling problem found by detect_conflicts()."""

    type: ConflictType
    severity: str  # HIGH, MEDIUM
    message: str
    match_ids: list[str] = Field(default_factory=list)
    team_id: str | None = None
    venue: str | None = None


def pick_venue(home: Team | None, venues: Sequence[Venue], index: int) -> Venue:
    """Choose a ground for a match hosted by *home*.

    Prefers a venue in the home team's county, then its sub-county, then
    cycles through the pool by match index.
    """
    if home is not None:
        if home.county:
            for v in venues:
                if v.county == home.county:
                    return v
        if home.sub_county:
            for v in venues:
                if v.sub_county == home.sub_county:
                    return v
    return venues[index % len(venues)]


def assign_venues(
    matches: Sequence[Match],
    teams: Sequence[Team],
    venues: Sequence[Venue],
) -> list[Match]:
    """Return copies of *matches* with ``venue`` set from the pool."""
    if not venues:
        return list(matches)
    by_id = {t.id: t for t in teams}
    return [
        m.model_copy(update={"venue": pick_venue(by_id.get(m.home_team_id), venues, i).name})
        for i, m in enumerate(matches)
    ]


def detect_conflicts(matches: Sequence[Match], min_rest_days: int = 2) -> list[Conflict]:
    """List venue double bookings, team double bookings and short rests.

    Matches without a kickoff are ignored.  Rest is measured in whole days
    between consecutive kickoffs of the same team.  Naive kickoffs are read
    as UTC when compared against aware ones.
    """
    timed = sorted(
        ((comparable_kickoff(m.kickoff), m) for m in matches if m.kickoff is not None),
        key=lambda pair: pair[0],
    )
    conflicts: list[Conflict] = []

    at_venue: dict[tuple[str, datetime], list[Match]] = defaultdict(list)
    for kickoff, m in timed:
        if m.venue:
            at_venue[(m.venue, kickoff)].append(m)
    for (venue, kickoff), booked in at_venue.items():
        if len(booked) > 1:
            conflicts.append(
                Conflict(
                    type=ConflictType.VENUE_CONFLICT,
                    severity="HIGH",
                    message=f"{venue} has {len(booked)} matches at {kickoff.isoformat()}",
                    match_ids=[m.id for m in booked],
                    venue=venue,
                )
            )

    last_seen: dict[str, tuple[datetime, Match]] = {}
    for kickoff, m in timed:
        for team_id in (m.home_team_id, m.away_team_id):
            seen = last_seen.get(team_id)
            last_seen[team_id] = (kickoff, m)
            if seen is None:
                continue
            previous_kickoff, previous = seen
            if previous_kickoff == kickoff:
                conflicts.append(
                    Conflict(
                        type=ConflictType.TEAM_DOUBLE_BOOKED,
                        severity="HIGH",
                        message=f"{team_id} is in two matches at {kickoff.isoformat()}",
                        match_ids=[previous.id, m.id],
                        team_id=team_id,
                    )
                )
                continue
            rest = (kickoff - previous_kickoff).days
            if rest < min_rest_days:
                conflicts.append(
                    Conflict(
                        type=ConflictType.REST_PERIOD_VIOLATION,
                        severity="MEDIUM",
                        message=f"{team_id} has only {rest} days of rest",
                        match_ids=[previous.id, m.id],
                        team_id=team_id,
                    )
                )

    if conflicts:
        logger.info("fixture_conflicts_detected count=%d", len(conflicts))
    return conflicts
