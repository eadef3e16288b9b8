"""Tests for distance accrual, the multiplier, and pickup rewards."""

import pytest

from lane_racer.config import Difficulty
from lane_racer.entities import Pickup, PickupKind
from lane_racer.run import RunState
from lane_racer.scoring import (
    accrue_distance,
    award,
    bump_multiplier,
    collect_pickup,
    decay_multiplier,
)
from lane_racer.signals import SOUND, SignalBus


def sounds(bus: SignalBus) -> list[str]:
    return [data["event"] for name, data in bus.pending() if name == SOUND]


def test_distance_and_score_accrue_with_speed():
    run = RunState()
    accrue_distance(run, 100)
    assert run.distance == pytest.approx(2.0)
    assert run.score == pytest.approx(0.2)


def test_distance_score_uses_multiplier():
    run = RunState()
    run.multiplier = 3.0
    accrue_distance(run, 100)
    assert run.score == pytest.approx(0.6)


class TestMultiplier:
    def test_award_scores_before_bumping(self):
        run = RunState()
        run.multiplier = 2.0
        assert award(run, 100) == 200
        assert run.multiplier == 2.5

    def test_bump_capped(self):
        run = RunState()
        run.multiplier = 9.8
        bump_multiplier(run)
        assert run.multiplier == 10.0

    def test_hard_cap_is_higher(self):
        run = RunState(difficulty=Difficulty.HARD)
        run.multiplier = 14.9
        bump_multiplier(run)
        assert run.multiplier == 15.0

    def test_bump_resets_decay(self):
        run = RunState()
        run.multiplier_decay = 2500
        bump_multiplier(run)
        assert run.multiplier_decay == 0

    def test_decay_step(self):
        run = RunState()
        run.multiplier = 2.0
        decay_multiplier(run, 2999)
        assert run.multiplier == 2.0
        decay_multiplier(run, 1)
        assert run.multiplier == pytest.approx(1.9)
        assert run.multiplier_decay == 0

    def test_decay_floor(self):
        run = RunState()
        run.multiplier = 1.05
        decay_multiplier(run, 3000)
        assert run.multiplier == 1.0
        decay_multiplier(run, 3000)
        assert run.multiplier == 1.0


class TestPickups:
    def test_coin_at_double_multiplier(self):
        run = RunState()
        run.multiplier = 2.0
        bus = SignalBus()
        collect_pickup(run, Pickup(lane=2, kind=PickupKind.COIN), bus)
        assert run.score == 200.0
        assert run.multiplier == 2.5
        assert sounds(bus) == ["coin"]
        assert [t.text for t in run.texts] == ["+200"]

    def test_heal_restores_health_without_scoring(self):
        run = RunState()
        run.player.take_damage()
        bus = SignalBus()
        collect_pickup(run, Pickup(lane=2, kind=PickupKind.HEAL), bus)
        assert run.player.health == 3
        assert run.score == 0
        assert run.multiplier == 1.0
        assert sounds(bus) == ["repair"]

    def test_heal_at_full_health_shows_nothing(self):
        run = RunState()
        collect_pickup(run, Pickup(lane=2, kind=PickupKind.HEAL), SignalBus())
        assert len(run.texts) == 0

    def test_boost(self):
        run = RunState()
        bus = SignalBus()
        collect_pickup(run, Pickup(lane=2, kind=PickupKind.BOOST), bus)
        assert run.player.boost_active
        assert run.score == 200
        assert run.multiplier == 1.5
        assert sounds(bus) == ["boost"]
