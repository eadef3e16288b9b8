"""Tests for RunState: construction per difficulty, stepping, and effects."""

import random

from lane_racer.clock import Clock
from lane_racer.config import Difficulty, FIXED_DT
from lane_racer.entities import Obstacle
from lane_racer.run import RunState
from lane_racer.signals import SignalBus


def contexts(n: int, seed: int = 0):
    clock = Clock(FIXED_DT)
    rng = random.Random(seed)
    for _ in range(n):
        clock.advance()
        yield clock.context(rng)


def test_profile_sets_health_and_spawn_factor():
    easy = RunState(difficulty=Difficulty.EASY)
    hard = RunState(difficulty=Difficulty.HARD)
    assert easy.player.health == 5
    assert hard.player.health == 2
    assert easy.spawner.spawn_factor == 1.2
    assert hard.profile.multiplier_cap == 15


def test_start_derives_fx_stream_from_gameplay_rng():
    a = RunState.start(Difficulty.NORMAL, random.Random(4))
    b = RunState.start(Difficulty.NORMAL, random.Random(4))
    assert a.fx_random.random() == b.fx_random.random()


def test_step_advances_everything():
    run = RunState()
    bus = SignalBus()
    for ctx in contexts(120):
        assert run.step(ctx, bus) is False
    assert run.ticks == 120
    assert run.distance > 0
    assert run.score > 0
    # 2000 ms of play has passed one 1800 ms obstacle interval.
    assert len(run.obstacles) == 1


def test_braking_slows_the_player():
    run = RunState()
    ctx = next(contexts(1))
    run.step(ctx, SignalBus(), braking=True)
    assert run.player.speed < run.player.base_speed


def test_fatal_step_skips_pickups():
    run = RunState()
    run.player.health = 1
    run.obstacles.add(Obstacle(lane=2, y=run.player.y))
    ctx = next(contexts(1))
    assert run.step(ctx, SignalBus()) is True
    assert run.cause == "crash"


class TestEffects:
    def test_burst_and_aging(self):
        run = RunState()
        run.burst(0, 0, "coin")
        run.float_text(0, 0, "+100", "coin")
        assert len(run.particles) == 10
        run.age_effects(1000)
        assert len(run.particles) == 0
        assert len(run.texts) == 0

    def test_shake_decays_to_rest(self):
        run = RunState()
        run.add_shake(100)
        run.age_effects(50)
        assert run.shake_time == 50
        run.age_effects(50)
        assert run.shake_time == 0
        assert (run.shake_x, run.shake_y) == (0.0, 0.0)

    def test_reduced_motion_turned_on_mid_shake(self):
        run = RunState()
        run.add_shake()
        run.age_effects(FIXED_DT, reduced_motion=True)
        assert run.shake_time == 0
        assert (run.shake_x, run.shake_y) == (0.0, 0.0)
        run.add_shake()
        assert run.shake_time == 0
