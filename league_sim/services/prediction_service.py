"""
Championship-probability estimator.

Only the run-in is forecast: while more than `prediction_window_weeks` remain,
every team gets 0. Inside the window each team still in contention gets a
weight that decays with its points gap to the leader; weights are normalized
to whole percentages that sum to exactly 100.

Rounding remainder goes entirely to the leader. With many teams the leader's
value can drift by up to N-1 points from its unrounded share; this is a known
approximation kept for compatibility.
"""
from __future__ import annotations

import math
from typing import Sequence

from league_sim.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from league_sim.errors import InvalidRemainingWeeksError
from league_sim.models import Prediction, Standing


def round_half_up(value: float) -> int:
    """0.5 rounds away from zero (built-in round() would round half to even)."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def title_weights(
    standings: Sequence[Standing],
    remaining_weeks: int,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> list[float]:
    """Unnormalized weight per team; 0 for teams that can no longer catch the leader."""
    if not standings:
        return []
    max_remaining_points = remaining_weeks * config.points_per_win
    leader_points = standings[0].points
    weights: list[float] = []
    for s in standings:
        gap = leader_points - s.points
        if gap > max_remaining_points:
            weights.append(0.0)
            continue
        weight = (s.points + 1) * config.gap_decay ** gap
        if s.goal_difference > 0:
            weight *= config.goal_difference_bonus
        weights.append(weight)
    return weights


def predict(
    standings: Sequence[Standing],
    remaining_weeks: int,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> list[Prediction]:
    """
    One Prediction per standing, same order. standings must already be ranked
    (see compute_standings); index 0 is treated as the leader.
    """
    if remaining_weeks < 0:
        raise InvalidRemainingWeeksError(f"remaining_weeks must be >= 0, got {remaining_weeks}")
    if not standings:
        return []

    if remaining_weeks > config.prediction_window_weeks:
        return [Prediction(s.team_id, s.team_name, 0) for s in standings]

    weights = title_weights(standings, remaining_weeks, config)
    total = sum(weights)
    if total > 0:
        percentages = [round_half_up(w / total * 100) for w in weights]
    else:
        equal = round_half_up(100 / len(standings))
        percentages = [equal] * len(standings)

    diff = 100 - sum(percentages)
    if diff:
        percentages[0] += diff

    return [
        Prediction(s.team_id, s.team_name, pct)
        for s, pct in zip(standings, percentages)
    ]
