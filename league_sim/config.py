"""
Model constants and runtime settings.

EngineConfig holds the fixed parameters of the match and prediction models.
Settings holds the knobs a runner may override from the environment.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

SEED_ENV_VAR = "LEAGUE_SIM_SEED"
LOG_LEVEL_ENV_VAR = "LEAGUE_SIM_LOG_LEVEL"
SEED_DEFAULT_TEAMS_ENV_VAR = "LEAGUE_SIM_SEED_DEFAULT_TEAMS"

MIN_STRENGTH = 1
MAX_STRENGTH = 100


@dataclass(frozen=True)
class EngineConfig:
    """Parameters of the goal model and the championship estimator."""
    home_advantage: float = 1.10
    base_expected_goals: float = 1.5
    max_goals_per_team: int = 7
    points_per_win: int = 3
    points_per_draw: int = 1
    # Predictions are all zero while more than this many weeks remain
    prediction_window_weeks: int = 3
    gap_decay: float = 0.7
    goal_difference_bonus: float = 1.1


DEFAULT_ENGINE_CONFIG = EngineConfig()


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    seed: int | None = None
    log_level: str = "WARNING"
    seed_default_teams: bool = True

    @classmethod
    def from_env(cls) -> Settings:
        raw_seed = os.environ.get(SEED_ENV_VAR, "").strip()
        return cls(
            seed=int(raw_seed) if raw_seed else None,
            log_level=os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").strip().upper() or "WARNING",
            seed_default_teams=_env_bool(os.environ.get(SEED_DEFAULT_TEAMS_ENV_VAR), True),
        )
