"""
Deterministic double round-robin schedule generation.

Every pair of teams meets twice, once at each ground. For N teams the season
is 2*(N-1) weeks with N/2 matches per week.

Uses the circle method: fix the first slot, rotate the others each week.
Home/away alternates by round parity; the second half mirrors the first with
home and away swapped. Same team ordering yields the same schedule.
"""
from __future__ import annotations

import logging
from typing import Sequence

from league_sim.errors import InsufficientTeamsError, UnevenTeamCountError
from league_sim.models import Match, Team

logger = logging.getLogger(__name__)


def total_weeks_for(n_teams: int) -> int:
    """Season length for a double round-robin of n_teams."""
    return 2 * (n_teams - 1) if n_teams >= 2 else 0


def single_round_robin(team_ids: Sequence[str]) -> list[tuple[int, str, str]]:
    """
    First-half pairings: (week_number, home_team_id, away_team_id).
    Week 1: pair slot 0 with N-1, 1 with N-2, ...; odd rounds swap home/away.
    """
    ids = list(team_ids)
    n = len(ids)
    result: list[tuple[int, str, str]] = []
    for rnd in range(n - 1):
        week = rnd + 1
        for i in range(n // 2):
            home_id, away_id = ids[i], ids[n - 1 - i]
            if rnd % 2 == 1:
                home_id, away_id = away_id, home_id
            result.append((week, home_id, away_id))
        # Rotate: keep 0, then ids[N-1], ids[1], ..., ids[N-2]
        ids = [ids[0]] + [ids[n - 1]] + ids[1 : n - 1]
    return result


def generate_fixtures(teams: Sequence[Team]) -> list[Match]:
    """
    Full double round-robin as unplayed Match objects (ids unassigned).
    Raises InsufficientTeamsError for fewer than 2 teams and
    UnevenTeamCountError for an odd count.
    """
    n = len(teams)
    if n < 2:
        raise InsufficientTeamsError(f"need at least 2 teams to generate fixtures, got {n}")
    if n % 2 == 1:
        raise UnevenTeamCountError(f"need an even number of teams to generate fixtures, got {n}")

    first_half = [
        Match(week=w, home_team_id=h, away_team_id=a)
        for w, h, a in single_round_robin([t.id for t in teams])
    ]
    second_half = [
        Match(week=m.week + (n - 1), home_team_id=m.away_team_id, away_team_id=m.home_team_id)
        for m in first_half
    ]
    fixtures = first_half + second_half
    logger.info(
        "generated %d fixtures for %d teams over %d weeks",
        len(fixtures), n, total_weeks_for(n),
    )
    return fixtures
