"""Tests for the circle-method pairing."""

from collections import Counter
from itertools import combinations

import pytest

from matchday.core.errors import DuplicateTeamError, InsufficientTeamsError
from matchday.core.scheduler import bye_team_ids, generate_round_robin, rounds_per_leg


def _ids(n: int) -> list[str]:
    return [f"t-{i}" for i in range(n)]


def _by_round(matchups):
    rounds: dict[int, list] = {}
    for m in matchups:
        rounds.setdefault(m.round_number, []).append(m)
    return rounds


class TestEvenTeamCounts:
    @pytest.mark.parametrize("n", [2, 4, 6, 8, 10, 12])
    def test_n_minus_one_rounds_of_half_n(self, n):
        rounds = _by_round(generate_round_robin(_ids(n)))
        assert sorted(rounds) == list(range(1, n))
        for games in rounds.values():
            assert len(games) == n // 2

    @pytest.mark.parametrize("n", [2, 4, 6, 8, 10, 12])
    def test_every_pair_meets_once(self, n):
        matchups = generate_round_robin(_ids(n))
        pairs = Counter(frozenset((m.home_team_id, m.away_team_id)) for m in matchups)
        assert set(pairs) == {frozenset(p) for p in combinations(_ids(n), 2)}
        assert set(pairs.values()) == {1}

    @pytest.mark.parametrize("n", [4, 7, 8])
    def test_no_team_twice_in_a_round(self, n):
        for games in _by_round(generate_round_robin(_ids(n))).values():
            teams = [t for m in games for t in (m.home_team_id, m.away_team_id)]
            assert len(teams) == len(set(teams))

    def test_four_teams_example(self):
        matchups = generate_round_robin(["A", "B", "C", "D"])
        assert len(matchups) == 6
        assert len(_by_round(matchups)) == 3

    def test_two_teams_single_match(self):
        matchups = generate_round_robin(["A", "B"])
        assert len(matchups) == 1
        assert matchups[0].home_team_id == "A"
        assert matchups[0].away_team_id == "B"


class TestOddTeamCounts:
    @pytest.mark.parametrize("n", [3, 5, 7, 9, 11])
    def test_behaves_like_n_plus_one(self, n):
        rounds = _by_round(generate_round_robin(_ids(n)))
        assert len(rounds) == n
        for games in rounds.values():
            assert len(games) == (n - 1) // 2

    @pytest.mark.parametrize("n", [3, 5, 7, 9])
    def test_each_team_has_exactly_one_bye(self, n):
        ids = _ids(n)
        byes = bye_team_ids(ids, generate_round_robin(ids))
        idle = Counter(t for teams in byes.values() for t in teams)
        assert idle == Counter(ids)
        assert all(len(teams) == 1 for teams in byes.values())

    def test_every_pair_meets_once(self):
        matchups = generate_round_robin(_ids(7))
        pairs = Counter(frozenset((m.home_team_id, m.away_team_id)) for m in matchups)
        assert len(pairs) == 21
        assert set(pairs.values()) == {1}


class TestHomeAwayBalance:
    @pytest.mark.parametrize("n", range(2, 15))
    def test_home_and_away_differ_by_at_most_one(self, n):
        home: Counter[str] = Counter()
        away: Counter[str] = Counter()
        for m in generate_round_robin(_ids(n)):
            home[m.home_team_id] += 1
            away[m.away_team_id] += 1
        for tid in _ids(n):
            assert abs(home[tid] - away[tid]) <= 1, f"{tid}: {home[tid]}H {away[tid]}A"

    @pytest.mark.parametrize("n", [3, 5, 7, 9])
    def test_odd_counts_are_exactly_even(self, n):
        home = Counter(m.home_team_id for m in generate_round_robin(_ids(n)))
        assert set(home.values()) == {(n - 1) // 2}

    def test_first_team_is_not_always_home(self):
        matchups = generate_round_robin(_ids(6))
        anchor_games = [m for m in matchups if "t-0" in (m.home_team_id, m.away_team_id)]
        assert any(m.away_team_id == "t-0" for m in anchor_games)


class TestDoubleLeg:
    @pytest.mark.parametrize("n", [2, 4, 5, 8])
    def test_twice_the_matches(self, n):
        single = generate_round_robin(_ids(n))
        double = generate_round_robin(_ids(n), double_leg=True)
        assert len(double) == 2 * len(single)

    def test_second_leg_reverses_every_fixture(self):
        double = generate_round_robin(_ids(6), double_leg=True)
        first = {(m.home_team_id, m.away_team_id) for m in double if m.leg == 1}
        second = [(m.home_team_id, m.away_team_id) for m in double if m.leg == 2]
        assert len(second) == len(first)
        assert {(a, h) for h, a in second} == first

    def test_round_numbers_continue(self):
        double = generate_round_robin(_ids(4), double_leg=True)
        assert sorted({m.round_number for m in double if m.leg == 2}) == [4, 5, 6]


class TestValidation:
    @pytest.mark.parametrize("ids", [[], ["solo"]])
    def test_fewer_than_two_teams(self, ids):
        with pytest.raises(InsufficientTeamsError):
            generate_round_robin(ids)

    def test_duplicate_ids(self):
        with pytest.raises(DuplicateTeamError):
            generate_round_robin(["a", "b", "a"])

    def test_deterministic(self):
        assert generate_round_robin(_ids(9), True) == generate_round_robin(_ids(9), True)

    def test_input_not_mutated(self):
        ids = _ids(5)
        generate_round_robin(ids, double_leg=True)
        assert ids == _ids(5)


class TestRoundsPerLeg:
    def test_values(self):
        assert rounds_per_leg(1) == 0
        assert rounds_per_leg(2) == 1
        assert rounds_per_leg(4) == 3
        assert rounds_per_leg(5) == 5
