"""Turns pygame events into the raw samples the input layer consumes."""
from __future__ import annotations

import pygame

from lane_racer import RawInputSample, TouchGesture
from lane_racer.input import TOUCH_BUTTONS
from ui.constants import BUTTON_H, SCREEN_H, SCREEN_W

KEY_CODES: dict[int, str] = {
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
    pygame.K_UP: "ArrowUp",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_ESCAPE: "Escape",
    pygame.K_RETURN: "Enter",
    pygame.K_KP_ENTER: "Enter",
    pygame.K_SPACE: "Space",
    pygame.K_BACKQUOTE: "Backquote",
    pygame.K_TAB: "Tab",
}
KEY_CODES.update({getattr(pygame, f"K_{c}"): f"Key{c.upper()}" for c in "abcdefghijklmnopqrstuvwxyz"})
KEY_CODES.update({getattr(pygame, f"K_{d}"): f"Digit{d}" for d in "0123456789"})


def button_rects(layout: str) -> dict[str, pygame.Rect]:
    """Virtual touch buttons along the bottom edge for the given layout."""
    names = ["left", "brake", "right"] if layout == "with_brake" else ["left", "right"]
    w = SCREEN_W // len(names)
    return {
        name: pygame.Rect(i * w, SCREEN_H - BUTTON_H, w, BUTTON_H)
        for i, name in enumerate(names)
        if name in TOUCH_BUTTONS
    }


class PygameInput:
    """Collects held keys, mouse-as-touch gestures, and virtual buttons."""

    def __init__(self) -> None:
        self.held: set[str] = set()
        self.layout = "standard"
        self.buttons_visible = False
        self._buttons: set[str] = set()
        self._gestures: list[TouchGesture] = []
        self._touch_start: tuple[float, float, float] | None = None

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            code = KEY_CODES.get(event.key)
            if code is not None:
                self.held.add(code)
        elif event.type == pygame.KEYUP:
            code = KEY_CODES.get(event.key)
            if code is not None:
                self.held.discard(code)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            button = self._button_at(event.pos)
            if button is not None:
                self._buttons.add(button)
            else:
                self._touch_start = (event.pos[0], event.pos[1], pygame.time.get_ticks())
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._buttons.clear()
            if self._touch_start is not None:
                sx, sy, st = self._touch_start
                self._gestures.append(TouchGesture(
                    sx, sy, st, event.pos[0], event.pos[1], pygame.time.get_ticks(),
                ))
                self._touch_start = None
        elif event.type == pygame.WINDOWFOCUSLOST:
            self.held.clear()
            self._buttons.clear()

    def _button_at(self, pos: tuple[int, int]) -> str | None:
        if not self.buttons_visible:
            return None
        for name, rect in button_rects(self.layout).items():
            if rect.collidepoint(pos):
                return name
        return None

    def sample(self) -> RawInputSample:
        gestures = tuple(self._gestures)
        self._gestures.clear()
        return RawInputSample(
            held=frozenset(self.held),
            touch_buttons=frozenset(self._buttons),
            gestures=gestures,
        )
