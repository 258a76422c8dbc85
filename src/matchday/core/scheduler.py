"""Round-robin pairing.

Generates a valid schedule where every team plays every other team once per
leg.  Uses the circle method (polygon scheduling) for balanced scheduling.

Terminology:
  - **round**: one set of matches where no team appears twice.  With 4 teams
    a round has 2 matches; a complete leg takes 3 rounds.
  - **leg**: every team plays every other team once.  A double round-robin
    has a second leg with home and away reversed.
  - **bye**: placeholder opponent added when the team count is odd.  A team
    drawn against the bye sits the round out.

This module only deals in team ids.  Dates, venues and round names are
layered on by ``matchday.core.fixtures``.
"""

from __future__ import annotations

from dataclasses import dataclass

from matchday.core.errors import DuplicateTeamError, InsufficientTeamsError

BYE = object()


@dataclass(frozen=True)
class Matchup:
    """A single pairing between two teams."""

    round_number: int
    matchup_index: int
    home_team_id: str
    away_team_id: str
    leg: int = 1


def rounds_per_leg(team_count: int) -> int:
    """Number of rounds one leg takes for *team_count* real teams."""
    if team_count < 2:
        return 0
    return team_count - 1 if team_count % 2 == 0 else team_count


def generate_round_robin(
    team_ids: list[str],
    double_leg: bool = False,
) -> list[Matchup]:
    """Generate a round-robin schedule using the circle method.

    With N teams (even), each round has N/2 matches and a leg takes N-1
    rounds.  With an odd N a bye is added, so a leg takes N rounds of
    (N-1)/2 matches and every team sits out exactly once.

    The anchor (first team, or the bye when N is odd) stays fixed while the
    others rotate one position per round.  The team in circle position
    ``i`` hosts the team in position ``n-1-i``; as every team passes
    through every position once per leg, each gets the same number of home
    and away symmetric pairings.  The anchor alternates, home in odd
    rounds and away in even ones, so no team's home and away counts differ
    by more than one.  Putting the bye in the anchor seat means odd-sized
    leagues come out exactly even.

    Args:
        team_ids: Team IDs in seeding order.  The order determines the
            pairings; the same order always gives the same schedule.
        double_leg: Append a second leg with home and away swapped.

    Returns:
        Matchups sorted by round_number, then matchup_index.
    """
    n = len(team_ids)
    if n < 2:
        raise InsufficientTeamsError(n)
    seen: set[str] = set()
    for tid in team_ids:
        if tid in seen:
            raise DuplicateTeamError(tid)
        seen.add(tid)

    # For odd number of teams, the bye takes the anchor seat
    ids: list[object] = [BYE, *team_ids] if n % 2 else list(team_ids)
    n = len(ids)
    anchor = ids[0]

    first_leg: list[Matchup] = []
    rotating = list(ids[1:])

    for slot in range(n - 1):
        round_number = slot + 1
        match_idx = 0  # reset per round

        for i in range(n // 2):
            if i == 0:
                home, away = anchor, rotating[0]
                if round_number % 2 == 0:
                    home, away = away, home
            else:
                home, away = rotating[i], rotating[n - 1 - i]

            # Skip bye games
            if home is BYE or away is BYE:
                continue

            first_leg.append(
                Matchup(
                    round_number=round_number,
                    matchup_index=match_idx,
                    home_team_id=home,  # type: ignore[arg-type]
                    away_team_id=away,  # type: ignore[arg-type]
                )
            )
            match_idx += 1

        # Rotate: move last element to front
        rotating = [rotating[-1], *rotating[:-1]]

    if not double_leg:
        return first_leg

    offset = n - 1
    second_leg = [
        Matchup(
            round_number=m.round_number + offset,
            matchup_index=m.matchup_index,
            home_team_id=m.away_team_id,
            away_team_id=m.home_team_id,
            leg=2,
        )
        for m in first_leg
    ]
    return first_leg + second_leg


def bye_team_ids(team_ids: list[str], matchups: list[Matchup]) -> dict[int, list[str]]:
    """Return ``{round_number: [team_id, ...]}`` for teams idle in each round."""
    playing: dict[int, set[str]] = {}
    for m in matchups:
        playing.setdefault(m.round_number, set()).update((m.home_team_id, m.away_team_id))
    return {
        rnd: [tid for tid in team_ids if tid not in teams]
        for rnd, teams in sorted(playing.items())
        if len(teams) < len(team_ids)
    }
