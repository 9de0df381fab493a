"""
Data models for the league simulator.
Domain objects only: no persistence or orchestration logic.

A season is one double round-robin: teams are registered, fixtures are generated
once, weeks are played in order, standings and predictions are derived on read.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


# ---------- Team ----------
@dataclass(frozen=True)
class Team:
    """A competing team. strength is a 1-100 rating fed to the match simulator."""
    id: str
    name: str
    strength: int

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "strength": self.strength}


def default_teams() -> list[tuple[str, int]]:
    """The four seeded teams as (name, strength)."""
    return [
        ("Chelsea", 85),
        ("Arsenal", 80),
        ("Manchester City", 90),
        ("Liverpool", 82),
    ]


# ---------- Match (fixture) ----------
@dataclass
class Match:
    """
    One fixture. Unplayed while both scores are None and played is False.
    Once played the result is final for the simulator; only an explicit
    override rewrites it.
    """
    week: int  # 1-based
    home_team_id: str
    away_team_id: str
    id: str | None = None
    home_score: int | None = None
    away_score: int | None = None
    played: bool = False

    @property
    def result(self) -> tuple[int, int] | None:
        if self.home_score is None or self.away_score is None:
            return None
        return self.home_score, self.away_score

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "week": self.week,
            "home_team_id": self.home_team_id,
            "away_team_id": self.away_team_id,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "played": self.played,
        }


@dataclass(frozen=True)
class MatchResult:
    """Name-level view of a fixture for snapshots. Scores are 0 until played."""
    home_team_name: str
    away_team_name: str
    home_score: int = 0
    away_score: int = 0
    played: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "home_team_name": self.home_team_name,
            "away_team_name": self.away_team_name,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "played": self.played,
        }


# ---------- Season state ----------
@dataclass
class SeasonState:
    """
    Single source of truth for how far the season has progressed.
    current_week 0 means not started; total_weeks is fixed at 2*(N-1) when
    fixtures are generated.
    """
    current_week: int = 0
    total_weeks: int = 0
    fixtures_generated: bool = False
    started: bool = False
    completed: bool = False

    @property
    def remaining_weeks(self) -> int:
        return max(self.total_weeks - self.current_week, 0)

    def to_dict(self) -> dict[str, Any]:
        return {
            "current_week": self.current_week,
            "total_weeks": self.total_weeks,
            "fixtures_generated": self.fixtures_generated,
            "started": self.started,
            "completed": self.completed,
        }


# ---------- Standings & predictions (derived, never stored) ----------
@dataclass(frozen=True)
class Standing:
    team_id: str
    team_name: str
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_difference: int = 0
    points: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "team_id": self.team_id,
            "team_name": self.team_name,
            "played": self.played,
            "won": self.won,
            "drawn": self.drawn,
            "lost": self.lost,
            "goals_for": self.goals_for,
            "goals_against": self.goals_against,
            "goal_difference": self.goal_difference,
            "points": self.points,
        }


@dataclass(frozen=True)
class Prediction:
    """Championship probability for one team, as a whole percentage."""
    team_id: str
    team_name: str
    percentage: int

    def to_dict(self) -> dict[str, Any]:
        return {"team_id": self.team_id, "team_name": self.team_name, "percentage": self.percentage}


@dataclass
class SimulationState:
    """Full read model: season state, table, latest week, every week's fixtures, predictions."""
    season: SeasonState
    standings: list[Standing] = field(default_factory=list)
    current_week_results: list[MatchResult] = field(default_factory=list)
    all_matches: dict[int, list[MatchResult]] = field(default_factory=dict)
    predictions: list[Prediction] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "league_state": self.season.to_dict(),
            "standings": [s.to_dict() for s in self.standings],
            "current_week_results": [r.to_dict() for r in self.current_week_results],
            "all_matches": {
                week: [r.to_dict() for r in results]
                for week, results in sorted(self.all_matches.items())
            },
            "predictions": [p.to_dict() for p in self.predictions],
        }
