"""
Tests for the Poisson match simulator.
Exact scores are random; tests check bounds, determinism under a seed, and
statistical shape over many trials.
"""
from __future__ import annotations

import pytest

from league_sim.config import EngineConfig
from league_sim.errors import InvalidStrengthError
from league_sim.simulation.match_simulator import expected_goals, sample_poisson, simulate_match
from league_sim.simulation.rng import SeededRNG

TRIALS = 10_000


# ---- RNG ----
class TestSeededRNG:
    def test_determinism(self):
        rng1 = SeededRNG(12345)
        rng2 = SeededRNG(12345)
        for _ in range(100):
            assert rng1.random() == rng2.random()

    def test_spawn_is_reproducible(self):
        a = SeededRNG(9).spawn(3)
        b = SeededRNG(9).spawn(3)
        assert [a.random() for _ in range(10)] == [b.random() for _ in range(10)]

    def test_spawn_offsets_differ(self):
        parent = SeededRNG(9)
        assert parent.spawn(1).random() != parent.spawn(2).random()

    def test_unseeded_spawn_works(self):
        child = SeededRNG().spawn(1)
        assert 0.0 <= child.random() < 1.0


# ---- Expected goals ----
class TestExpectedGoals:
    def test_budget_is_zero_sum(self):
        for home, away in [(1, 100), (50, 50), (95, 50), (100, 1)]:
            h, a = expected_goals(home, away)
            assert h + a == pytest.approx(3.0)

    def test_home_advantage_on_equal_strength(self):
        h, a = expected_goals(60, 60)
        assert h == pytest.approx(3.0 * 1.1 / 2.1)
        assert a == pytest.approx(3.0 * 1.0 / 2.1)
        assert h > a

    def test_stronger_side_gets_more(self):
        h, a = expected_goals(40, 90)
        assert a > h


# ---- Poisson sampling ----
class TestSamplePoisson:
    @pytest.mark.parametrize("mean", [0.0, -1.0, -0.001])
    def test_non_positive_mean_is_zero(self, mean):
        rng = SeededRNG(1)
        before = rng.snapshot()
        for _ in range(100):
            assert sample_poisson(mean, rng) == 0
        assert rng.snapshot() == before

    def test_sample_mean_close_to_lambda(self):
        rng = SeededRNG(42)
        n = 20_000
        total = sum(sample_poisson(1.5, rng) for _ in range(n))
        assert total / n == pytest.approx(1.5, abs=0.05)

    def test_non_negative(self):
        rng = SeededRNG(3)
        assert all(sample_poisson(2.0, rng) >= 0 for _ in range(1000))


# ---- simulate_match ----
class TestSimulateMatch:
    @pytest.mark.parametrize("home,away", [(1, 1), (1, 100), (100, 1), (50, 50), (100, 100)])
    def test_goals_within_bounds(self, home, away):
        rng = SeededRNG(home * 1000 + away)
        for _ in range(2000):
            h, a = simulate_match(home, away, rng)
            assert 0 <= h <= 7
            assert 0 <= a <= 7

    def test_cap_respected(self):
        rng = SeededRNG(5)
        config = EngineConfig(base_expected_goals=10.0, max_goals_per_team=7)
        scores = [simulate_match(100, 1, rng, config) for _ in range(500)]
        assert max(h for h, _ in scores) == 7
        assert all(h <= 7 and a <= 7 for h, a in scores)

    def test_zero_expected_goals_always_scores_zero(self):
        rng = SeededRNG(8)
        config = EngineConfig(base_expected_goals=0.0)
        for _ in range(200):
            assert simulate_match(90, 10, rng, config) == (0, 0)

    def test_same_seed_same_scores(self):
        rng1 = SeededRNG(77)
        rng2 = SeededRNG(77)
        a = [simulate_match(70, 65, rng1) for _ in range(50)]
        b = [simulate_match(70, 65, rng2) for _ in range(50)]
        assert a == b

    @pytest.mark.parametrize("home,away", [(0, 50), (50, 0), (101, 50), (50, 101)])
    def test_out_of_range_strength(self, home, away):
        with pytest.raises(InvalidStrengthError):
            simulate_match(home, away, SeededRNG(1))

    def test_non_integer_strength(self):
        with pytest.raises(InvalidStrengthError):
            simulate_match(50.5, 50, SeededRNG(1))

    def test_stronger_home_side_outscores(self):
        rng = SeededRNG(42)
        home_total = 0
        away_total = 0
        for _ in range(TRIALS):
            h, a = simulate_match(95, 50, rng)
            home_total += h
            away_total += a
        assert home_total / TRIALS > away_total / TRIALS

    def test_equal_strength_home_win_rate_bounded(self):
        rng = SeededRNG(4242)
        home_wins = 0
        for _ in range(TRIALS):
            h, a = simulate_match(70, 70, rng)
            if h > a:
                home_wins += 1
        rate = home_wins / TRIALS
        assert 0.30 < rate < 0.70
