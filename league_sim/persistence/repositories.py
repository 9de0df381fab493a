"""
In-memory repositories for teams, fixtures and season state.
No business logic: only read/write operations. Callers own locking.
Matches are mutable, so reads hand out copies; only update_result changes
a stored fixture.
"""
from __future__ import annotations

import uuid
from dataclasses import replace
from typing import Iterable

from league_sim.errors import MatchNotFoundError, TeamNotFoundError
from league_sim.models import Match, SeasonState, Team


# ---------- TeamRepository ----------


class TeamRepository:
    """Ordered team registry. Registration order is the scheduling order."""

    def __init__(self) -> None:
        self._teams: dict[str, Team] = {}

    def create(self, name: str, strength: int, id: str | None = None) -> Team:
        tid = id or str(uuid.uuid4())
        team = Team(id=tid, name=name, strength=strength)
        self._teams[tid] = team
        return team

    def get(self, team_id: str) -> Team | None:
        return self._teams.get(team_id)

    def get_by_name(self, name: str) -> Team | None:
        for t in self._teams.values():
            if t.name == name:
                return t
        return None

    def list_all(self) -> list[Team]:
        return list(self._teams.values())

    def delete(self, team_id: str) -> None:
        if team_id not in self._teams:
            raise TeamNotFoundError(f"Team not found: {team_id}")
        del self._teams[team_id]

    def count(self) -> int:
        return len(self._teams)


# ---------- MatchRepository ----------


class MatchRepository:
    """Fixtures keyed by id, kept in schedule order."""

    def __init__(self) -> None:
        self._matches: dict[str, Match] = {}

    def create_batch(self, matches: Iterable[Match]) -> list[Match]:
        created: list[Match] = []
        for m in matches:
            stored = replace(m, id=m.id or str(uuid.uuid4()))
            self._matches[stored.id] = stored
            created.append(replace(stored))
        return created

    def get(self, match_id: str) -> Match | None:
        m = self._matches.get(match_id)
        return replace(m) if m is not None else None

    def list_all(self) -> list[Match]:
        return [replace(m) for m in sorted(self._matches.values(), key=lambda m: m.week)]

    def list_by_week(self, week: int) -> list[Match]:
        return [replace(m) for m in self._matches.values() if m.week == week]

    def list_played(self) -> list[Match]:
        return [replace(m) for m in self._matches.values() if m.played]

    def update_result(self, match_id: str, home_score: int, away_score: int) -> Match:
        m = self._matches.get(match_id)
        if m is None:
            raise MatchNotFoundError(f"Match not found: {match_id}")
        m.home_score = home_score
        m.away_score = away_score
        m.played = True
        return replace(m)

    def delete_all(self) -> None:
        self._matches.clear()


# ---------- SeasonStateRepository ----------


class SeasonStateRepository:
    """Holds the single SeasonState; get() creates the default on first use."""

    def __init__(self) -> None:
        self._state: SeasonState | None = None

    def get(self) -> SeasonState:
        if self._state is None:
            self._state = SeasonState()
        return self._state

    def update(self, state: SeasonState) -> None:
        self._state = state

    def reset(self) -> None:
        self._state = None
