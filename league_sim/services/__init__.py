"""
Service layer: scheduling, standings, predictions, season orchestration.
scheduling/standings/prediction are pure; league_service owns state via repositories.
"""
from .scheduling import generate_fixtures, single_round_robin, total_weeks_for
from .standings_service import compute_standings
from .prediction_service import predict
from .league_service import LeagueService

__all__ = [
    "generate_fixtures",
    "single_round_robin",
    "total_weeks_for",
    "compute_standings",
    "predict",
    "LeagueService",
]
