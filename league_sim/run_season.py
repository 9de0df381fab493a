"""
Play a season between the default teams and print the table as it unfolds.
After every week: that week's results, the standings, and title odds once the
run-in starts.
"""
from __future__ import annotations

import argparse
import logging
from typing import Sequence

from league_sim.config import Settings
from league_sim.models import Match, Prediction, Standing
from league_sim.services.league_service import LeagueService
from league_sim.simulation.rng import SeededRNG

logger = logging.getLogger(__name__)


def _print_week(week: int, matches: list[Match], names: dict[str, str]) -> None:
    print(f"\n  Week {week}")
    print("  " + "-" * 56)
    for m in matches:
        print(f"  {names[m.home_team_id]:>20} {m.home_score} - {m.away_score} {names[m.away_team_id]}")


def _print_table(standings: list[Standing]) -> None:
    print()
    print(f"  {'#':>2} {'Team':<20} {'P':>3} {'W':>3} {'D':>3} {'L':>3} {'GF':>4} {'GA':>4} {'GD':>4} {'Pts':>4}")
    for pos, s in enumerate(standings, start=1):
        print(
            f"  {pos:>2} {s.team_name:<20} {s.played:>3} {s.won:>3} {s.drawn:>3} {s.lost:>3} "
            f"{s.goals_for:>4} {s.goals_against:>4} {s.goal_difference:>+4} {s.points:>4}"
        )


def _print_predictions(predictions: list[Prediction]) -> None:
    if not any(p.percentage for p in predictions):
        return
    print("\n  Championship odds: " + ", ".join(f"{p.team_name} {p.percentage}%" for p in predictions))


def run(seed: int | None = None, weeks: int | None = None) -> LeagueService:
    """Play `weeks` weeks (all remaining if None); returns the service for inspection."""
    if seed is None:
        seed = SeededRNG().spawn(0).seed
    logger.info("starting season run with seed %d", seed)
    service = LeagueService(rng=SeededRNG(seed), settings=Settings(seed=seed))
    service.generate_fixtures()
    names = {t.id: t.name for t in service.list_teams()}
    state = service.get_state()
    to_play = state.remaining_weeks if weeks is None else min(weeks, state.remaining_weeks)
    print(f"\n  {len(names)} teams, {state.total_weeks} weeks  [seed={seed}]")
    for _ in range(to_play):
        matches = service.play_next_week()
        _print_week(service.get_state().current_week, matches, names)
        _print_table(service.get_standings())
        _print_predictions(service.get_predictions())
    if service.get_state().completed:
        champion = service.get_standings()[0]
        print()
        print("=" * 60)
        print(f"  CHAMPIONS: {champion.team_name} with {champion.points} points")
        print("=" * 60)
    return service


def main(argv: Sequence[str] | None = None) -> None:
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description="Simulate a double round-robin league season.")
    parser.add_argument("--seed", type=int, default=settings.seed, help="RNG seed for reproducibility")
    parser.add_argument("--weeks", type=int, default=None, help="Weeks to play (default: all)")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default: WARNING)")
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(levelname)s - %(name)s - %(message)s",
    )
    run(seed=args.seed, weeks=args.weeks)


if __name__ == "__main__":
    main()
