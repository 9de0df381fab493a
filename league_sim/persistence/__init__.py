"""
Storage for the league simulator.
In-memory only; no business logic, no simulation.
"""
from .repositories import (
    TeamRepository,
    MatchRepository,
    SeasonStateRepository,
)

__all__ = [
    "TeamRepository",
    "MatchRepository",
    "SeasonStateRepository",
]
