from __future__ import annotations

import pytest

from league_sim.config import Settings
from league_sim.models import Team
from league_sim.services.league_service import LeagueService
from league_sim.simulation.rng import SeededRNG


@pytest.fixture
def four_teams() -> list[Team]:
    return [
        Team(id="a", name="A", strength=85),
        Team(id="b", name="B", strength=80),
        Team(id="c", name="C", strength=90),
        Team(id="d", name="D", strength=82),
    ]


@pytest.fixture
def service() -> LeagueService:
    """Seeded service over the four default teams."""
    return LeagueService(rng=SeededRNG(2024), settings=Settings(seed=2024))


@pytest.fixture
def empty_service() -> LeagueService:
    """Service that never auto-seeds teams."""
    return LeagueService(rng=SeededRNG(7), settings=Settings(seed=7, seed_default_teams=False))
