"""
Standings aggregation: a pure function from (teams, matches) to the table.
Recomputed on every read; never stored.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from league_sim.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from league_sim.errors import UnknownTeamError
from league_sim.models import Match, Standing, Team


@dataclass
class _Row:
    """Mutable accumulator used during a single aggregation pass."""
    team_id: str
    team_name: str
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = 0
    goals_against: int = 0
    points: int = 0

    def add(self, scored: int, conceded: int, config: EngineConfig) -> None:
        self.played += 1
        self.goals_for += scored
        self.goals_against += conceded
        if scored > conceded:
            self.won += 1
            self.points += config.points_per_win
        elif scored < conceded:
            self.lost += 1
        else:
            self.drawn += 1
            self.points += config.points_per_draw

    def freeze(self) -> Standing:
        return Standing(
            team_id=self.team_id,
            team_name=self.team_name,
            played=self.played,
            won=self.won,
            drawn=self.drawn,
            lost=self.lost,
            goals_for=self.goals_for,
            goals_against=self.goals_against,
            goal_difference=self.goals_for - self.goals_against,
            points=self.points,
        )


def sort_key(standing: Standing) -> tuple[int, int, int]:
    """Ranking key: points, then goal difference, then goals for (all descending)."""
    return (-standing.points, -standing.goal_difference, -standing.goals_for)


def compute_standings(
    teams: Sequence[Team],
    matches: Iterable[Match],
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> list[Standing]:
    """
    One row per team, including teams with nothing played. Only matches with
    a result count. Ties beyond goals for keep team registration order.
    """
    rows: dict[str, _Row] = {t.id: _Row(team_id=t.id, team_name=t.name) for t in teams}
    for m in matches:
        result = m.result
        if result is None:
            continue
        home = rows.get(m.home_team_id)
        away = rows.get(m.away_team_id)
        if home is None or away is None:
            missing = m.home_team_id if home is None else m.away_team_id
            raise UnknownTeamError(f"match {m.id or '?'} references unknown team {missing}")
        home_goals, away_goals = result
        home.add(home_goals, away_goals, config)
        away.add(away_goals, home_goals, config)
    # sorted() is stable, so equal keys stay in registration order
    return sorted((row.freeze() for row in rows.values()), key=sort_key)
