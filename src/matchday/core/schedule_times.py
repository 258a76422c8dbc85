"""Compute and format kickoff times for generated rounds.

A round is nominally played on one calendar day at the configured kickoff
time.  The walk starts at ``start_date`` and only lands on qualifying days
(any day, or Saturday/Sunday when ``weekends_only`` is set, never a blackout
date).  When ``max_matches_per_day`` caps a day, the rest of the round spills
onto the following qualifying days.
"""

from __future__ import annotations

import re
from collections.abc import Collection
from datetime import UTC, date, datetime, time, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from matchday.core.errors import SchedulingConfigError
from matchday.models.fixture import FixtureConfig

# Give up looking for a qualifying day after a year of blackouts.
MAX_DAY_SEARCH = 366

_KICKOFF_RE = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")


def parse_kickoff_time(value: str) -> time:
    """Parse ``"HH:MM"`` (24-hour) into a ``time``."""
    match = _KICKOFF_RE.match(value.strip())
    if match is None:
        raise SchedulingConfigError(f"kickoff time must be HH:MM, got {value!r}")
    return time(int(match.group(1)), int(match.group(2)))


def resolve_timezone(name: str | None) -> ZoneInfo | None:
    """Look up an IANA zone name; ``None`` means naive kickoffs."""
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise SchedulingConfigError(f"unknown timezone {name!r}") from exc


def is_qualifying_day(
    day: date,
    weekends_only: bool = False,
    blackout_dates: Collection[date] = (),
) -> bool:
    """Whether matches may be played on *day*."""
    if day in blackout_dates:
        return False
    if weekends_only:
        return day.weekday() >= 5  # Saturday=5, Sunday=6
    return True


def next_qualifying_day(
    day: date,
    weekends_only: bool = False,
    blackout_dates: Collection[date] = (),
    until: date | None = None,
) -> date:
    """Return *day* if it qualifies, otherwise the first qualifying day after it.

    Raises:
        SchedulingConfigError: No qualifying day before *until* (or within
            ``MAX_DAY_SEARCH`` days when *until* is not given).
    """
    blackout = set(blackout_dates)
    for offset in range(MAX_DAY_SEARCH):
        candidate = day + timedelta(days=offset)
        if until is not None and candidate > until:
            break
        if is_qualifying_day(candidate, weekends_only, blackout):
            return candidate
    limit = until.isoformat() if until is not None else f"{MAX_DAY_SEARCH} days"
    raise SchedulingConfigError(f"no qualifying match day between {day.isoformat()} and {limit}")


def assign_round_days(round_sizes: list[int], config: FixtureConfig) -> list[list[date]]:
    """Pick a calendar day for every match of every round.

    Args:
        round_sizes: Number of matches in each round, in round order.
        config: Fixture configuration supplying the date rules.

    Returns:
        One list per round, holding the day of each match in that round.
    """
    if config.end_date is not None and config.end_date < config.start_date:
        raise SchedulingConfigError(
            f"end date {config.end_date.isoformat()} is before start date "
            f"{config.start_date.isoformat()}"
        )

    blackout = set(config.blackout_dates)
    cap = config.max_matches_per_day

    def _next(day: date) -> date:
        return next_qualifying_day(day, config.weekends_only, blackout, until=config.end_date)

    days: list[list[date]] = []
    cursor = config.start_date
    for size in round_sizes:
        day = _next(cursor)
        round_days: list[date] = []
        for idx in range(size):
            if cap is not None and idx > 0 and idx % cap == 0:
                day = _next(day + timedelta(days=1))
            round_days.append(day)
        days.append(round_days)
        cursor = day + timedelta(days=config.round_interval_days)
    return days


def kickoff_at(day: date, kickoff: time, tz: ZoneInfo | None = None) -> datetime:
    """Combine a match day and kickoff time into a datetime."""
    return datetime.combine(day, kickoff, tzinfo=tz)


def comparable_kickoff(dt: datetime) -> datetime:
    """Aware form of a kickoff for sorting and arithmetic; naive values are read as UTC."""
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=UTC)


def format_kickoff(dt: datetime) -> str:
    """Format a kickoff as ``"Sat 7 Mar 2026, 1:00 PM"``.

    Builds the day and hour without ``%-d``/``%-I``, which Windows lacks.
    """
    clock = dt.strftime("%I:%M %p").lstrip("0")
    return f"{dt.strftime('%a')} {dt.day} {dt.strftime('%b %Y')}, {clock}"
