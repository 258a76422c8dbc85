"""League standings from match results.

Pure: operates on Team and Match models, owns no state, and returns fresh
StandingRow objects on every call.  Only ``COMPLETED`` matches with both
scores count.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Sequence
from datetime import datetime
from typing import cast

from matchday.core.errors import DuplicateTeamError, InvalidMatchError
from matchday.core.schedule_times import comparable_kickoff
from matchday.models.fixture import Match
from matchday.models.standings import (
    FORM_LENGTH,
    StandingRow,
    StandingsOptions,
    Tiebreaker,
)
from matchday.models.team import Team

logger = logging.getLogger(__name__)

# Head-to-head always uses the standard scheme, whatever the league table uses.
H2H_WIN, H2H_DRAW = 3, 1


class HeadToHead:
    """Pairwise results index, built once per standings computation.

    ``points[(a, b)]`` is what team *a* earned against team *b* across their
    completed meetings.
    """

    def __init__(self) -> None:
        self.points: dict[tuple[str, str], int] = defaultdict(int)

    def record(self, home_id: str, away_id: str, home_score: int, away_score: int) -> None:
        if home_score > away_score:
            self.points[(home_id, away_id)] += H2H_WIN
        elif home_score < away_score:
            self.points[(away_id, home_id)] += H2H_WIN
        else:
            self.points[(home_id, away_id)] += H2H_DRAW
            self.points[(away_id, home_id)] += H2H_DRAW

    def points_against(self, team_id: str, opponents: Sequence[str]) -> int:
        """Head-to-head points *team_id* took from the given opponents."""
        return sum(self.points.get((team_id, opp), 0) for opp in opponents if opp != team_id)


def _completed_in_order(matches: Sequence[Match]) -> list[Match]:
    """Completed matches, oldest first.

    Kickoff order is used when every completed match has a kickoff, with
    naive kickoffs read as UTC; otherwise the caller's order is taken as
    chronological.
    """
    completed = [m for m in matches if m.has_result]
    if completed and all(m.kickoff is not None for m in completed):
        completed.sort(key=lambda m: comparable_kickoff(cast(datetime, m.kickoff)))
    return completed


def _apply_result(
    home: StandingRow,
    away: StandingRow,
    home_score: int,
    away_score: int,
    options: StandingsOptions,
) -> None:
    for row, record, scored, conceded in (
        (home, home.home, home_score, away_score),
        (away, away.away, away_score, home_score),
    ):
        row.played += 1
        row.goals_for += scored
        row.goals_against += conceded
        record.played += 1
        record.goals_for += scored
        record.goals_against += conceded

        if scored > conceded:
            row.won += 1
            record.won += 1
            row.points += options.points_win
            letter = "W"
        elif scored < conceded:
            row.lost += 1
            record.lost += 1
            row.points += options.points_loss
            letter = "L"
        else:
            row.drawn += 1
            record.drawn += 1
            row.points += options.points_draw
            letter = "D"

        row.form.insert(0, letter)  # type: ignore[arg-type]
        del row.form[FORM_LENGTH:]


def _criterion_values(
    criterion: Tiebreaker,
    rows: list[StandingRow],
    h2h: HeadToHead,
) -> dict[str, int]:
    """Score every row on one criterion; higher always ranks first."""
    if criterion == Tiebreaker.H2H:
        ids = [r.team_id for r in rows]
        return {r.team_id: h2h.points_against(r.team_id, ids) for r in rows}
    if criterion == Tiebreaker.POINTS:
        return {r.team_id: r.points for r in rows}
    if criterion == Tiebreaker.GD:
        return {r.team_id: r.goal_difference for r in rows}
    if criterion == Tiebreaker.GF:
        return {r.team_id: r.goals_for for r in rows}
    if criterion == Tiebreaker.GA:
        return {r.team_id: -r.goals_against for r in rows}
    if criterion == Tiebreaker.AWAY_GF:
        return {r.team_id: r.away.goals_for for r in rows}
    raise ValueError(f"unknown tiebreaker {criterion!r}")


def _fallback_key(row: StandingRow) -> tuple[str, str]:
    return (row.team_name.casefold(), row.team_id)


def rank_rows(
    rows: list[StandingRow],
    tiebreakers: Sequence[Tiebreaker],
    h2h: HeadToHead,
) -> list[StandingRow]:
    """Order rows by successive refinement over *tiebreakers*.

    Rows are split into tiers by the first criterion, each tier with more
    than one row is ordered by the remaining criteria, and so on.  H2H is
    evaluated inside the current tier only, so for two tied teams it is
    exactly their direct meetings.  When H2H splits a tier, every smaller
    tier still level gets its own H2H pass before the later criteria, so a
    pair left over from a larger mini-league is decided by its direct
    meetings.  Rows still level after every criterion fall back to team
    name, then team id.
    """
    if len(rows) <= 1 or not tiebreakers:
        return sorted(rows, key=_fallback_key)

    criterion, rest = tiebreakers[0], tiebreakers[1:]
    values = _criterion_values(criterion, rows, h2h)
    tiers: dict[int, list[StandingRow]] = defaultdict(list)
    for row in rows:
        tiers[values[row.team_id]].append(row)

    ranked: list[StandingRow] = []
    for value in sorted(tiers, reverse=True):
        tier = tiers[value]
        if criterion == Tiebreaker.H2H and len(tier) < len(rows):
            ranked.extend(rank_rows(tier, tiebreakers, h2h))
        else:
            ranked.extend(rank_rows(tier, rest, h2h))
    return ranked


def calculate_standings(
    teams: Sequence[Team],
    matches: Sequence[Match],
    options: StandingsOptions | None = None,
) -> list[StandingRow]:
    """Compute the ranked league table.

    Every team in *teams* gets a row, played or not.  Matches naming a team
    that is not in *teams* are skipped with a warning; the team list is the
    authoritative membership.

    Args:
        teams: League members.
        matches: Any mix of statuses; only completed results are read.
        options: Points scheme and tiebreakers (defaults: 3/1/0,
            POINTS, GD, GF, H2H).

    Returns:
        StandingRows sorted best first with unique 1-based positions.

    Raises:
        DuplicateTeamError: A team id is listed twice.
        InvalidMatchError: A match has the same team at home and away.
    """
    opts = options or StandingsOptions()

    rows: dict[str, StandingRow] = {}
    for team in teams:
        if team.id in rows:
            raise DuplicateTeamError(team.id)
        rows[team.id] = StandingRow(team_id=team.id, team_name=team.name, group=team.group)

    for m in matches:
        if m.home_team_id == m.away_team_id:
            raise InvalidMatchError(
                f"match {m.id} has {m.home_team_id} as both home and away team"
            )

    h2h = HeadToHead()
    skipped = 0
    for m in _completed_in_order(matches):
        home = rows.get(m.home_team_id)
        away = rows.get(m.away_team_id)
        if home is None or away is None:
            logger.warning(
                "standings_orphan_match match=%s home=%s away=%s",
                m.id,
                m.home_team_id,
                m.away_team_id,
            )
            skipped += 1
            continue
        # has_result guarantees both scores
        home_score, away_score = cast(int, m.home_score), cast(int, m.away_score)
        _apply_result(home, away, home_score, away_score, opts)
        h2h.record(m.home_team_id, m.away_team_id, home_score, away_score)

    ranked = rank_rows(list(rows.values()), opts.tiebreakers, h2h)
    for position, row in enumerate(ranked, start=1):
        row.position = position

    logger.debug(
        "standings_calculated teams=%d matches=%d skipped=%d",
        len(rows),
        len(matches),
        skipped,
    )
    return ranked
