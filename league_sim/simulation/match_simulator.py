"""
Match Simulator: turns two strength ratings into a final score.

Expected goals are a zero-sum split of a fixed goal budget, proportional to
effective strength (home side boosted by the home-advantage multiplier). Each
side's goals are an independent Poisson draw, capped per team.
"""
from __future__ import annotations

import logging
import math

from league_sim.config import DEFAULT_ENGINE_CONFIG, MAX_STRENGTH, MIN_STRENGTH, EngineConfig
from league_sim.errors import InvalidStrengthError
from .rng import SeededRNG

logger = logging.getLogger(__name__)


def _check_strength(value: int, side: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidStrengthError(f"{side} strength must be an integer, got {value!r}")
    if not MIN_STRENGTH <= value <= MAX_STRENGTH:
        raise InvalidStrengthError(
            f"{side} strength must be in [{MIN_STRENGTH}, {MAX_STRENGTH}], got {value}"
        )


def expected_goals(
    home_strength: int,
    away_strength: int,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> tuple[float, float]:
    """(expected_home, expected_away); always sums to 2 * base_expected_goals."""
    effective_home = home_strength * config.home_advantage
    effective_away = float(away_strength)
    total = effective_home + effective_away
    if total <= 0:
        return 0.0, 0.0
    budget = config.base_expected_goals * 2
    return budget * effective_home / total, budget * effective_away / total


def sample_poisson(mean: float, rng: SeededRNG) -> int:
    """
    Inverse-transform Poisson sample: multiply uniforms until the running
    product drops below e^-mean; the number of factors minus one is the draw.
    Non-positive mean returns 0 without touching the RNG.
    """
    if mean <= 0:
        return 0
    threshold = math.exp(-mean)
    k = 0
    product = 1.0
    while product > threshold:
        k += 1
        product *= rng.random()
    return k - 1


def simulate_match(
    home_strength: int,
    away_strength: int,
    rng: SeededRNG,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> tuple[int, int]:
    """Final score (home_goals, away_goals), each in [0, max_goals_per_team]."""
    _check_strength(home_strength, "home")
    _check_strength(away_strength, "away")
    exp_home, exp_away = expected_goals(home_strength, away_strength, config)
    cap = config.max_goals_per_team
    home_goals = min(sample_poisson(exp_home, rng), cap)
    away_goals = min(sample_poisson(exp_away, rng), cap)
    logger.debug(
        "simulated %d v %d (xg %.2f-%.2f): %d-%d",
        home_strength, away_strength, exp_home, exp_away, home_goals, away_goals,
    )
    return home_goals, away_goals
