"""Print a generated schedule and a sample table for demo purposes.

Usage:
    python scripts/demo_fixtures.py demo [GROUPS]   # Built-in demo tournament
    python scripts/demo_fixtures.py file PATH       # Tournament YAML file
    python scripts/demo_fixtures.py export PATH     # Write the demo tournament to YAML

Nothing is stored; results are made up from the fixture order so the table
has something to show.
"""

from __future__ import annotations

import sys
from pathlib import Path

from matchday.core.fixtures import generate_fixtures, generate_group_fixtures
from matchday.core.schedule_times import format_kickoff
from matchday.core.seeding import (
    Tournament,
    generate_demo_tournament,
    load_tournament_yaml,
    save_tournament_yaml,
)
from matchday.core.standings import calculate_standings
from matchday.models.fixture import FixtureSchedule, MatchStatus


def print_schedule(tournament: Tournament, schedule: FixtureSchedule) -> None:
    names = {t.id: t.name for t in tournament.teams}
    for rnd in schedule.rounds:
        print(f"\n{rnd.name}" + (f" [{rnd.group}]" if rnd.group else ""))
        for m in schedule.matches_in_round(rnd.number):
            when = format_kickoff(m.kickoff) if m.kickoff else "TBD"
            print(f"  {names[m.home_team_id]:>22} v {names[m.away_team_id]:<22} {when}")
        for tid in rnd.bye_team_ids:
            print(f"  {names[tid]:>22} (bye)")


def print_table(tournament: Tournament, schedule: FixtureSchedule) -> None:
    # Fake results: score by match order so the table is not all zeros
    played = [
        m.model_copy(
            update={
                "status": MatchStatus.COMPLETED,
                "home_score": i % 4,
                "away_score": (i * 3) % 5 % 3,
            }
        )
        for i, m in enumerate(schedule.matches)
    ]
    members = [t for t in tournament.teams if t.group == schedule.rounds[0].group]
    table = calculate_standings(members, played, tournament.standings)
    print(f"\n{'#':>2} {'Team':<22} {'P':>2} {'W':>2} {'D':>2} {'L':>2} {'GD':>4} {'Pts':>4}  Form")
    for row in table:
        print(
            f"{row.position:>2} {row.team_name:<22} {row.played:>2} {row.won:>2} "
            f"{row.drawn:>2} {row.lost:>2} {row.goal_difference:>4} {row.points:>4}  "
            f"{row.form_string}"
        )


def show(tournament: Tournament) -> None:
    print(f"{tournament.name} — {len(tournament.teams)} teams")
    if any(t.group for t in tournament.teams):
        grouped = generate_group_fixtures(tournament.teams, tournament.fixtures)
        for name, error in grouped.errors.items():
            print(f"\n{name}: not scheduled ({error})")
        for schedule in grouped.groups.values():
            print_schedule(tournament, schedule)
            print_table(tournament, schedule)
    else:
        schedule = generate_fixtures(tournament.teams, tournament.fixtures)
        print_schedule(tournament, schedule)
        print_table(tournament, schedule)


def main():
    if len(sys.argv) < 2:
        print(__doc__)
        return

    cmd = sys.argv[1]
    if cmd == "demo":
        groups = int(sys.argv[2]) if len(sys.argv) > 2 else 0
        show(generate_demo_tournament(num_groups=groups))
    elif cmd == "file":
        if len(sys.argv) < 3:
            print("Usage: demo_fixtures.py file PATH")
            return
        show(load_tournament_yaml(Path(sys.argv[2])))
    elif cmd == "export":
        if len(sys.argv) < 3:
            print("Usage: demo_fixtures.py export PATH")
            return
        save_tournament_yaml(generate_demo_tournament(), Path(sys.argv[2]))
        print(f"Wrote {sys.argv[2]}")
    else:
        print(f"Unknown command: {cmd}")
        print(__doc__)


if __name__ == "__main__":
    main()
