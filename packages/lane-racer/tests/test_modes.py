"""Tests for menus, mode payloads, the transition table, and guards."""

import pytest

from lane_racer.modes import (
    SETTINGS_ITEMS,
    TRANSITIONS,
    GameOverMenu,
    Menu,
    Mode,
    ModeGuards,
    SettingsMenu,
    default_guards,
    enter_payload,
)


class TestMenu:
    def test_wraps(self):
        menu = Menu(("a", "b", "c"))
        assert menu.move(-1, 0)
        assert menu.item == "c"
        assert menu.move(1, 500)
        assert menu.item == "a"

    def test_clamps_without_wrap(self):
        menu = Menu(("a", "b"), wrap=False)
        menu.move(-1, 0)
        assert menu.selected == 0
        menu.move(5, 1000)
        assert menu.selected == 1

    def test_debounce(self):
        menu = Menu(("a", "b", "c"))
        assert menu.move(1, 1000)
        assert not menu.move(1, 1199)
        assert menu.selected == 1
        assert menu.move(1, 1200)
        assert menu.selected == 2


class TestPayloads:
    def test_fresh_payload_per_entry(self):
        first = enter_payload(Mode.TITLE)
        second = enter_payload(Mode.TITLE)
        assert first is not second
        assert isinstance(first, Menu)
        assert first.selected == 0

    def test_payload_kinds(self):
        assert enter_payload(Mode.BOOT) is None
        assert enter_payload(Mode.PLAYING) is None
        assert enter_payload(Mode.HOWTO) is None
        assert isinstance(enter_payload(Mode.SETTINGS), SettingsMenu)
        assert isinstance(enter_payload(Mode.GAMEOVER), GameOverMenu)
        assert enter_payload(Mode.PAUSED).items == ("resume", "restart", "title")

    def test_settings_menu(self):
        menu = SettingsMenu()
        assert menu.items == SETTINGS_ITEMS
        assert len(menu.items) == 9
        assert not menu.wrap
        assert menu.capturing is None


class TestTransitionTable:
    def test_every_mode_has_a_way_out(self):
        for mode in Mode:
            assert TRANSITIONS.get(mode), mode

    def test_every_guard_is_registered(self):
        guards = default_guards()
        for edges in TRANSITIONS.values():
            for edge in edges:
                assert guards.has(edge.guard), edge.guard

    def test_playing_only_leaves_through_pause(self):
        # GAMEOVER is entered from gameplay itself, not from the table.
        assert [e.target for e in TRANSITIONS[Mode.PLAYING]] == [Mode.PAUSED]


class TestModeGuards:
    def test_register_and_check(self):
        guards = ModeGuards()
        guards.register("always", lambda g: True)
        assert guards.check("always", None)
        assert guards.names() == ["always"]

    def test_unknown_guard(self):
        with pytest.raises(KeyError):
            ModeGuards().check("missing", None)

    def test_overwrite(self):
        guards = ModeGuards()
        guards.register("g", lambda g: True)
        guards.register("g", lambda g: False)
        assert guards.check("g", None) is False
