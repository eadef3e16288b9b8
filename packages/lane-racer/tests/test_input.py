"""Tests for InputActions: edges, keymap overrides, touch gestures, clearing."""

import pytest

from lane_racer.input import ACTIONS, InputActions, RawInputSample, TouchGesture


def sample(*codes, buttons=(), gestures=()):
    return RawInputSample(
        held=frozenset(codes), touch_buttons=frozenset(buttons), gestures=tuple(gestures)
    )


def tap(at=0.0):
    return TouchGesture(100, 100, at, 104, 102, at + 100)


def swipe(dx, at=0.0, dy=0.0, duration=100.0):
    return TouchGesture(200, 300, at, 200 + dx, 300 + dy, at + duration)


class TestEdges:
    def test_press_gives_one_edge(self):
        inp = InputActions()
        inp.feed(sample("ArrowLeft"))
        inp.update(0)
        assert inp.held("left")
        assert inp.just_pressed("left")
        inp.update(16)
        assert inp.held("left")
        assert not inp.just_pressed("left")

    def test_one_edge_per_press_release_cycle(self):
        inp = InputActions()
        edges = 0
        trace = [True, True, False, True, False, False, True, True, True]
        for i, down in enumerate(trace):
            inp.feed(sample("Enter") if down else sample())
            inp.update(i * 16.0)
            edges += inp.just_pressed("confirm")
        assert edges == 3

    def test_aliases(self):
        inp = InputActions()
        inp.feed(sample("KeyD", "KeyS"))
        inp.update(0)
        assert inp.held("right")
        assert inp.held("brake")

    def test_unmapped_code_ignored(self):
        inp = InputActions()
        inp.feed(sample("KeyZ"))
        inp.update(0)
        assert not any(inp.held(a) for a in ACTIONS)

    def test_snapshot(self):
        inp = InputActions()
        inp.feed(sample("Escape"))
        inp.update(0)
        snap = inp.snapshot()
        assert set(snap) == set(ACTIONS)
        assert snap["pause"].just_pressed


class TestKeymap:
    def test_override_wins(self):
        inp = InputActions(overrides={"ArrowLeft": "right"})
        inp.feed(sample("ArrowLeft"))
        inp.update(0)
        assert inp.held("right")
        assert not inp.held("left")

    def test_rebind_replaces_previous_override(self):
        inp = InputActions()
        inp.rebind("left", "KeyQ")
        inp.rebind("left", "KeyZ")
        assert inp.overrides == {"KeyZ": "left"}
        assert inp.binding_for("left") == "KeyZ"

    def test_rebind_unknown_action(self):
        with pytest.raises(ValueError):
            InputActions().rebind("jump", "KeyJ")

    def test_binding_for_default(self):
        assert InputActions().binding_for("pause") == "Escape"

    def test_rebound_key_does_not_fire_while_held(self):
        inp = InputActions()
        inp.feed(sample("KeyQ"))
        inp.update(0)
        inp.rebind("pause", "KeyQ")
        inp.update(16)
        assert not inp.held("pause")
        inp.feed(sample())
        inp.update(32)
        inp.feed(sample("KeyQ"))
        inp.update(48)
        assert inp.just_pressed("pause")


class TestTouch:
    def test_buttons(self):
        inp = InputActions()
        inp.feed(sample(buttons=["left", "brake", "bogus"]))
        inp.update(0)
        assert inp.held("left")
        assert inp.held("brake")

    def test_tap_is_single_tick_confirm(self):
        inp = InputActions()
        inp.feed(sample(gestures=[tap()]))
        inp.update(0)
        assert inp.just_pressed("confirm")
        inp.update(16)
        assert not inp.held("confirm")

    def test_tap_ignored_while_button_held(self):
        inp = InputActions()
        inp.feed(sample(buttons=["brake"], gestures=[tap()]))
        inp.update(0)
        assert not inp.held("confirm")

    def test_slow_or_long_touch_is_not_a_tap(self):
        inp = InputActions()
        inp.feed(sample(gestures=[TouchGesture(0, 0, 0, 0, 0, 400)]))
        inp.update(0)
        assert not inp.held("confirm")

    def test_off_surface_touch_ignored(self):
        inp = InputActions()
        inp.feed(sample(gestures=[TouchGesture(0, 0, 0, 1, 1, 50, on_surface=False)]))
        inp.update(0)
        assert not inp.held("confirm")

    def test_swipe_right_pulses(self):
        inp = InputActions()
        inp.feed(sample(gestures=[swipe(120)]))
        inp.update(1000)
        assert inp.just_pressed("right")
        inp.update(1150)
        assert inp.held("right")
        inp.update(1200)
        assert not inp.held("right")

    def test_swipe_left(self):
        inp = InputActions()
        inp.feed(sample(gestures=[swipe(-80)]))
        inp.update(0)
        assert inp.held("left")

    def test_vertical_drag_is_not_a_swipe(self):
        inp = InputActions()
        inp.feed(sample(gestures=[swipe(60, dy=100)]))
        inp.update(0)
        assert not inp.held("right")

    def test_slow_drag_is_not_a_swipe(self):
        inp = InputActions()
        inp.feed(sample(gestures=[swipe(60, duration=290)]))
        inp.update(0)
        assert not inp.held("right")


class TestClear:
    def test_held_key_suppressed_until_released(self):
        inp = InputActions()
        inp.feed(sample("Enter"))
        inp.update(0)
        inp.clear()
        inp.feed(sample("Enter"))
        inp.update(16)
        assert not inp.held("confirm")
        inp.feed(sample())
        inp.update(32)
        inp.feed(sample("Enter"))
        inp.update(48)
        assert inp.just_pressed("confirm")

    def test_clear_drops_pending_gestures(self):
        inp = InputActions()
        inp.feed(sample(gestures=[tap(), swipe(120)]))
        inp.clear()
        inp.update(0)
        assert not inp.held("confirm")
        assert not inp.held("right")

    def test_activity(self):
        inp = InputActions()
        assert not inp.any_activity
        inp.feed(sample("KeyZ"))
        assert inp.any_activity
        inp.clear()
        assert not inp.any_activity
        inp.feed(sample("KeyZ"))
        assert not inp.any_activity
        inp.feed(sample("KeyZ", "KeyX"))
        assert inp.any_activity
