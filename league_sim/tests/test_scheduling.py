"""
Tests for double round-robin fixture generation.
Deterministic; every pair meets twice with home/away swapped; one game per team per week.
"""
from __future__ import annotations

from collections import Counter

import pytest

from league_sim.errors import InsufficientTeamsError, LeagueErrorCode, UnevenTeamCountError
from league_sim.models import Team
from league_sim.services.scheduling import (
    generate_fixtures,
    single_round_robin,
    total_weeks_for,
)


def _teams(n: int) -> list[Team]:
    return [Team(id=f"t{i}", name=f"Team {i}", strength=50 + i) for i in range(n)]


def test_single_round_robin_four_teams_exact_order():
    """Circle method: slot 0 fixed, others rotate; odd rounds swap home/away."""
    pairings = single_round_robin(["A", "B", "C", "D"])
    assert pairings == [
        (1, "A", "D"),
        (1, "B", "C"),
        (2, "C", "A"),
        (2, "B", "D"),
        (3, "A", "B"),
        (3, "C", "D"),
    ]


def test_second_half_mirrors_first_half(four_teams):
    fixtures = generate_fixtures(four_teams)
    first, second = fixtures[:6], fixtures[6:]
    for m1, m2 in zip(first, second):
        assert m2.week == m1.week + 3
        assert (m2.home_team_id, m2.away_team_id) == (m1.away_team_id, m1.home_team_id)


def test_two_teams():
    fixtures = generate_fixtures(_teams(2))
    assert [(m.week, m.home_team_id, m.away_team_id) for m in fixtures] == [
        (1, "t0", "t1"),
        (2, "t1", "t0"),
    ]


@pytest.mark.parametrize("n", [2, 4, 6, 8, 10, 20])
def test_schedule_shape(n):
    fixtures = generate_fixtures(_teams(n))
    assert len(fixtures) == n * (n - 1)
    weeks = Counter(m.week for m in fixtures)
    assert sorted(weeks) == list(range(1, 2 * (n - 1) + 1))
    assert all(count == n // 2 for count in weeks.values())
    assert total_weeks_for(n) == 2 * (n - 1)

    appearances = Counter()
    home_counts = Counter()
    for m in fixtures:
        assert m.home_team_id != m.away_team_id
        appearances[m.home_team_id] += 1
        appearances[m.away_team_id] += 1
        home_counts[m.home_team_id] += 1
    assert all(appearances[t.id] == 2 * (n - 1) for t in _teams(n))
    assert all(home_counts[t.id] == n - 1 for t in _teams(n))


@pytest.mark.parametrize("n", [4, 6, 8])
def test_each_pair_twice_with_swapped_venue(n):
    fixtures = generate_fixtures(_teams(n))
    ordered = Counter((m.home_team_id, m.away_team_id) for m in fixtures)
    assert all(count == 1 for count in ordered.values())
    unordered = Counter(frozenset((m.home_team_id, m.away_team_id)) for m in fixtures)
    assert len(unordered) == n * (n - 1) // 2
    assert all(count == 2 for count in unordered.values())


@pytest.mark.parametrize("n", [4, 6])
def test_one_match_per_team_per_week(n):
    fixtures = generate_fixtures(_teams(n))
    for week in range(1, 2 * (n - 1) + 1):
        ids = [tid for m in fixtures if m.week == week for tid in (m.home_team_id, m.away_team_id)]
        assert len(ids) == len(set(ids)) == n


def test_deterministic(four_teams):
    a = generate_fixtures(four_teams)
    b = generate_fixtures(four_teams)
    assert [(m.week, m.home_team_id, m.away_team_id) for m in a] == [
        (m.week, m.home_team_id, m.away_team_id) for m in b
    ]


def test_fixtures_start_unplayed(four_teams):
    for m in generate_fixtures(four_teams):
        assert m.result is None
        assert m.played is False


@pytest.mark.parametrize("n", [0, 1])
def test_insufficient_teams(n):
    with pytest.raises(InsufficientTeamsError) as exc_info:
        generate_fixtures(_teams(n))
    assert exc_info.value.code == LeagueErrorCode.INSUFFICIENT_TEAMS


def test_odd_team_count_rejected():
    with pytest.raises(UnevenTeamCountError):
        generate_fixtures(_teams(3))
