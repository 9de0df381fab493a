"""
Double round-robin football league simulator.

Core operations, all in-process and storage-agnostic:
generate_fixtures, simulate_match, compute_standings, predict.
LeagueService wires them into a playable season.
"""
from .errors import (
    LeagueError,
    LeagueErrorCode,
    InsufficientTeamsError,
    InvalidScoreError,
)
from .models import Match, Prediction, SeasonState, SimulationState, Standing, Team
from .simulation import SeededRNG, simulate_match
from .services import LeagueService, compute_standings, generate_fixtures, predict

__version__ = "0.1.0"

__all__ = [
    "LeagueError",
    "LeagueErrorCode",
    "InsufficientTeamsError",
    "InvalidScoreError",
    "Match",
    "Prediction",
    "SeasonState",
    "SimulationState",
    "Standing",
    "Team",
    "SeededRNG",
    "simulate_match",
    "LeagueService",
    "compute_standings",
    "generate_fixtures",
    "predict",
]
