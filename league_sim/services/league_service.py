"""
League-centric service: team registry, fixtures, week sequencing, overrides.
Generate fixtures: double round-robin, once per season. Play next week: simulate
every unplayed match of the next week, then advance current_week.

One LeagueService owns one season. Mutating calls are serialized by a lock so
at most one week advance is in flight at a time.
"""
from __future__ import annotations

import logging
import threading
from collections import defaultdict

from league_sim.config import DEFAULT_ENGINE_CONFIG, EngineConfig, Settings
from league_sim.errors import (
    DuplicateTeamError,
    FixturesNotGeneratedError,
    NoMatchesForWeekError,
    SeasonCompletedError,
    TeamChangeNotAllowedError,
    TeamNotFoundError,
)
from league_sim.models import (
    Match,
    MatchResult,
    Prediction,
    SeasonState,
    SimulationState,
    Standing,
    Team,
    default_teams,
)
from league_sim.persistence.repositories import (
    MatchRepository,
    SeasonStateRepository,
    TeamRepository,
)
from league_sim.schemas import parse_create_team, parse_match_result
from league_sim.services.prediction_service import predict
from league_sim.services.scheduling import generate_fixtures
from league_sim.services.standings_service import compute_standings
from league_sim.simulation.match_simulator import simulate_match
from league_sim.simulation.rng import SeededRNG

logger = logging.getLogger(__name__)


class LeagueService:
    """
    Domain logic for one season: guards, week sequencing, derived reads.
    Storage is delegated to repositories.
    """

    def __init__(
        self,
        team_repo: TeamRepository | None = None,
        match_repo: MatchRepository | None = None,
        state_repo: SeasonStateRepository | None = None,
        rng: SeededRNG | None = None,
        config: EngineConfig = DEFAULT_ENGINE_CONFIG,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._team_repo = team_repo or TeamRepository()
        self._match_repo = match_repo or MatchRepository()
        self._state_repo = state_repo or SeasonStateRepository()
        self._rng = rng or SeededRNG(self._settings.seed)
        # Restored on reset so a replayed season draws the same goals
        self._rng_start = self._rng.snapshot()
        self._config = config
        self._lock = threading.Lock()

    # ---------- Teams ----------

    def seed_default_teams(self) -> list[Team]:
        """Register the default teams if the registry is empty."""
        with self._lock:
            return self._seed_default_teams_locked()

    def _seed_default_teams_locked(self) -> list[Team]:
        if self._team_repo.count() == 0:
            for name, strength in default_teams():
                self._team_repo.create(name, strength)
            logger.info("seeded %d default teams", self._team_repo.count())
        return self._team_repo.list_all()

    def list_teams(self) -> list[Team]:
        with self._lock:
            return self._list_teams_locked()

    def _list_teams_locked(self) -> list[Team]:
        if self._settings.seed_default_teams:
            return self._seed_default_teams_locked()
        return self._team_repo.list_all()

    def create_team(self, name: str, strength: int) -> Team:
        req = parse_create_team({"name": name, "strength": strength})
        with self._lock:
            self.assert_can_modify_teams()
            if self._team_repo.get_by_name(req.name) is not None:
                raise DuplicateTeamError(f"Team already exists: {req.name}")
            team = self._team_repo.create(req.name, req.strength)
        logger.info("created team %s (strength %d)", team.name, team.strength)
        return team

    def delete_team(self, team_id: str) -> None:
        with self._lock:
            self.assert_can_modify_teams()
            if self._team_repo.get(team_id) is None:
                raise TeamNotFoundError(f"Team not found: {team_id}")
            self._team_repo.delete(team_id)
        logger.info("deleted team %s", team_id)

    def can_modify_teams(self) -> bool:
        """Teams are frozen once fixtures exist."""
        return not self._state_repo.get().fixtures_generated

    def assert_can_modify_teams(self) -> None:
        if not self.can_modify_teams():
            raise TeamChangeNotAllowedError(
                "Cannot modify teams: fixtures already generated; reset the simulation first"
            )

    # ---------- Fixtures ----------

    def generate_fixtures(self) -> list[Match]:
        """
        Generate and store the schedule. If fixtures already exist, return them
        unchanged; a season is never reshuffled mid-way.
        """
        with self._lock:
            state = self._state_repo.get()
            if state.fixtures_generated:
                return self._match_repo.list_all()
            teams = self._list_teams_locked()
            matches = self._match_repo.create_batch(generate_fixtures(teams))
            state.fixtures_generated = True
            state.total_weeks = len(matches) // (len(teams) // 2)
            self._state_repo.update(state)
            return self._match_repo.list_all()

    def get_fixtures(self, week: int | None = None) -> list[Match]:
        if week is None:
            return self._match_repo.list_all()
        return self._match_repo.list_by_week(week)

    # ---------- Week sequencing ----------

    def assert_can_play(self) -> SeasonState:
        state = self._state_repo.get()
        if not state.fixtures_generated:
            raise FixturesNotGeneratedError("Cannot play: fixtures not generated yet")
        if state.completed:
            raise SeasonCompletedError("Cannot play: league already completed")
        return state

    def play_next_week(self) -> list[Match]:
        """
        Simulate every unplayed match of week current_week + 1, advance the
        week, and mark the season completed after the last week.
        """
        with self._lock:
            return self._play_next_week_locked()

    def _play_next_week_locked(self) -> list[Match]:
        state = self.assert_can_play()
        next_week = state.current_week + 1
        matches = self._match_repo.list_by_week(next_week)
        if not matches:
            raise NoMatchesForWeekError(f"No matches found for week {next_week}")
        week_rng = self._rng.spawn(next_week)
        results: list[Match] = []
        for m in matches:
            if m.played:
                results.append(m)
                continue
            home = self._team_repo.get(m.home_team_id)
            away = self._team_repo.get(m.away_team_id)
            if home is None or away is None:
                missing = m.home_team_id if home is None else m.away_team_id
                raise TeamNotFoundError(f"Team not found: {missing}")
            home_score, away_score = simulate_match(home.strength, away.strength, week_rng, self._config)
            results.append(self._match_repo.update_result(m.id, home_score, away_score))
        state.current_week = next_week
        state.started = True
        if next_week >= state.total_weeks:
            state.completed = True
        self._state_repo.update(state)
        logger.info(
            "played week %d/%d%s",
            next_week, state.total_weeks, " (season complete)" if state.completed else "",
        )
        return results

    def play_all_weeks(self) -> dict[int, list[Match]]:
        """Play every remaining week; returns matches keyed by week number."""
        results: dict[int, list[Match]] = {}
        with self._lock:
            state = self._state_repo.get()
            if not state.fixtures_generated:
                raise FixturesNotGeneratedError("Cannot play: fixtures not generated yet")
            while not state.completed:
                matches = self._play_next_week_locked()
                state = self._state_repo.get()
                results[state.current_week] = matches
        return results

    # ---------- Overrides & reset ----------

    def update_match_result(self, match_id: str, home_score: int, away_score: int) -> Match:
        """Administrative override: set a final score and mark the match played."""
        req = parse_match_result({"home_score": home_score, "away_score": away_score})
        with self._lock:
            match = self._match_repo.update_result(match_id, req.home_score, req.away_score)
        logger.info("result override for match %s: %d-%d", match_id, req.home_score, req.away_score)
        return match

    def reset_simulation(self) -> None:
        """Drop all fixtures and results and return the season to its initial state."""
        with self._lock:
            self._match_repo.delete_all()
            self._state_repo.reset()
            self._rng.restore(self._rng_start)
        logger.info("simulation reset")

    # ---------- Reads ----------

    def get_state(self) -> SeasonState:
        return self._state_repo.get()

    def get_standings(self) -> list[Standing]:
        return compute_standings(self.list_teams(), self._match_repo.list_played(), self._config)

    def get_predictions(self) -> list[Prediction]:
        state = self._state_repo.get()
        standings = self.get_standings()
        if not state.fixtures_generated:
            return [Prediction(s.team_id, s.team_name, 0) for s in standings]
        return predict(standings, state.remaining_weeks, self._config)

    def get_full_state(self) -> SimulationState:
        """Season state, table, latest week's results, every week's fixtures, predictions."""
        state = self._state_repo.get()
        names = {t.id: t.name for t in self.list_teams()}

        def _view(m: Match) -> MatchResult:
            result = m.result if m.played else None
            return MatchResult(
                home_team_name=names.get(m.home_team_id, m.home_team_id),
                away_team_name=names.get(m.away_team_id, m.away_team_id),
                home_score=result[0] if result else 0,
                away_score=result[1] if result else 0,
                played=result is not None,
            )

        current: list[MatchResult] = []
        if state.current_week > 0:
            current = [
                _view(m) for m in self._match_repo.list_by_week(state.current_week)
                if m.played and m.result is not None
            ]
        all_matches: dict[int, list[MatchResult]] = defaultdict(list)
        for m in self._match_repo.list_all():
            all_matches[m.week].append(_view(m))

        return SimulationState(
            season=state,
            standings=self.get_standings(),
            current_week_results=current,
            all_matches=dict(all_matches),
            predictions=self.get_predictions(),
        )
