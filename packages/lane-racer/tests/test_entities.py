"""Tests for the player's car, obstacles, pickups, and cosmetic effects."""

import math

import pytest

from lane_racer.config import (
    BOOST_MULTIPLIER,
    BRAKE_MULTIPLIER,
    FIXED_DT,
    INVULNERABILITY_TIME,
    LANE_CHANGE_DURATION,
    LANES,
    PLAYER_SPEED_INC,
    PLAYER_SPEED_INIT,
    PLAYER_SPEED_MAX,
    WEAVE_AMPLITUDE,
    lane_center,
)
from lane_racer.entities import (
    FloatingText,
    Obstacle,
    ObstacleKind,
    Particle,
    Pickup,
    PickupKind,
    Player,
)


def settle(player: Player, ms: float) -> None:
    for _ in range(math.ceil(ms / FIXED_DT)):
        player.update(FIXED_DT)


class TestPlayerLanes:
    def test_starts_in_middle_lane(self):
        p = Player()
        assert p.lane == p.target_lane == LANES // 2
        assert p.x == lane_center(2) == 300

    def test_second_request_inside_cooldown_rejected(self):
        p = Player()
        assert p.try_change_lane(1) is True
        assert p.try_change_lane(1) is False
        assert p.target_lane == 3

    def test_change_completes_after_duration(self):
        p = Player()
        p.try_change_lane(1)
        settle(p, LANE_CHANGE_DURATION)
        assert p.lane == 3
        assert p.x == lane_center(3)
        assert not p.changing_lane

    def test_x_eases_between_lanes(self):
        p = Player()
        p.try_change_lane(-1)
        p.update(LANE_CHANGE_DURATION / 2)
        assert lane_center(1) < p.x < lane_center(2)
        # Ease-out covers more than half the distance by the midpoint.
        assert p.x < (lane_center(1) + lane_center(2)) / 2

    def test_can_change_again_once_settled(self):
        p = Player()
        p.try_change_lane(1)
        settle(p, LANE_CHANGE_DURATION)
        assert p.try_change_lane(1) is True
        assert p.target_lane == 4

    def test_cannot_leave_road(self):
        p = Player(lane=LANES - 1, target_lane=LANES - 1)
        assert p.try_change_lane(1) is False
        q = Player(lane=0, target_lane=0)
        assert q.try_change_lane(-1) is False


class TestPlayerSpeed:
    def test_base_speed_ramps_per_tick(self):
        p = Player()
        p.update(FIXED_DT)
        assert p.base_speed == pytest.approx(PLAYER_SPEED_INIT + PLAYER_SPEED_INC)
        assert p.speed == p.base_speed

    def test_speed_capped(self):
        p = Player(base_speed=PLAYER_SPEED_MAX)
        p.update(FIXED_DT)
        assert p.base_speed == PLAYER_SPEED_MAX

    def test_brake(self):
        p = Player()
        p.update(FIXED_DT, braking=True)
        assert p.speed == pytest.approx(p.base_speed * BRAKE_MULTIPLIER)

    def test_boost_beats_brake(self):
        p = Player()
        p.activate_boost(1000)
        p.update(FIXED_DT, braking=True)
        assert p.speed == pytest.approx(p.base_speed * BOOST_MULTIPLIER)

    def test_boost_expires(self):
        p = Player()
        p.activate_boost(100)
        p.update(100)
        assert not p.boost_active
        p.update(FIXED_DT)
        assert p.speed == p.base_speed


class TestPlayerHealth:
    def test_damage_grants_invulnerability(self):
        p = Player()
        assert p.take_damage() is False
        assert p.health == 2
        assert p.invulnerable

    def test_invulnerable_hit_is_noop(self):
        p = Player()
        p.take_damage()
        assert p.take_damage() is False
        assert p.health == 2

    def test_invulnerability_wears_off(self):
        p = Player()
        p.take_damage()
        p.update(INVULNERABILITY_TIME)
        assert not p.invulnerable
        p.take_damage()
        assert p.health == 1

    def test_last_point_is_fatal(self):
        p = Player(max_health=1)
        assert p.take_damage() is True
        assert p.health == 0

    def test_heal_capped_at_max(self):
        p = Player()
        assert p.heal() is False
        assert p.health == 3
        p.take_damage()
        assert p.heal() is True
        assert p.health == 3


class TestObstacle:
    def test_plain_moves_with_player(self):
        o = Obstacle(lane=1)
        o.update(FIXED_DT, 4.0)
        assert o.y == pytest.approx(-96.0)
        assert o.x == lane_center(1)

    def test_slow_is_bigger_and_slower(self):
        o = Obstacle(lane=0, kind=ObstacleKind.SLOW)
        assert (o.width, o.height) == (85, 120)
        o.update(FIXED_DT, 4.0)
        assert o.speed == pytest.approx(2.8)

    def test_burst_warns_then_accelerates(self):
        o = Obstacle(lane=0, kind=ObstacleKind.BURST)
        assert o.warning
        o.update(100, 3.0)
        assert o.warning
        assert o.speed == 3.0
        o.update(500, 3.0)
        assert not o.warning
        assert o.speed == pytest.approx(3.9)

    def test_burst_keeps_multiplier_after_warning(self):
        o = Obstacle(lane=0, kind=ObstacleKind.BURST)
        o.update(600, 3.0)
        o.update(FIXED_DT, 3.0)
        assert o.speed == pytest.approx(3.9)

    def test_weaving_stays_near_lane(self):
        o = Obstacle(lane=3, kind=ObstacleKind.WEAVING)
        offsets = []
        for _ in range(200):
            o.update(FIXED_DT, 2.0)
            offsets.append(o.x - lane_center(3))
        assert max(abs(d) for d in offsets) <= WEAVE_AMPLITUDE
        assert max(offsets) > 10
        assert min(offsets) < -10

    def test_off_screen(self):
        o = Obstacle(lane=0, y=650)
        assert not o.is_off_screen()
        o.y = 671
        assert o.is_off_screen()


class TestPickup:
    def test_moves_and_spins(self):
        p = Pickup(lane=2, kind=PickupKind.HEAL)
        p.update(FIXED_DT, 3.0)
        assert p.y == pytest.approx(-47.0)
        assert 0 < p.rotation < math.tau

    def test_rotation_wraps(self):
        p = Pickup(lane=2)
        for _ in range(100):
            p.update(100, 0.0)
        assert 0 <= p.rotation < math.tau


class TestEffects:
    def test_particle_fades_and_dies(self):
        part = Particle(0, 0, vx=10, vy=0, life=500, color="crash")
        part.update(100)
        assert part.x == pytest.approx(100)
        assert part.alpha == pytest.approx(0.8)
        part.update(400)
        assert part.is_dead()

    def test_floating_text_opaque_until_late(self):
        text = FloatingText(0, 100, "+100")
        text.update(500)
        assert text.alpha == 1.0
        assert text.y < 100
        text.update(350)
        assert text.alpha == pytest.approx(0.5)
        text.update(150)
        assert text.is_dead()
