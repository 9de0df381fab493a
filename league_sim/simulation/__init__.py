"""
Match simulation: seeded randomness and the Poisson goal model.
"""
from .rng import SeededRNG
from .match_simulator import expected_goals, sample_poisson, simulate_match

__all__ = [
    "SeededRNG",
    "expected_goals",
    "sample_poisson",
    "simulate_match",
]
