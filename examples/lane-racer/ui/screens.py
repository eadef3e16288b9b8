"""Full-screen and overlay pages for every non-gameplay mode."""
from __future__ import annotations

import pygame

from lane_racer import Difficulty, Game, Mode
from lane_racer.modes import GameOverMenu, Menu, SettingsMenu
from ui.constants import HIGHLIGHT, OVERLAY, SCREEN_H, SCREEN_W, TEXT_COLOR, TEXT_DIM

MENU_LABELS = {
    "play": "Play",
    "howto": "How to play",
    "settings": "Settings",
    "resume": "Resume",
    "restart": "Restart",
    "title": "Quit to title",
    "retry": "Retry",
}

HOWTO_LINES = [
    "Left / Right or A / D: change lane",
    "Down or S: brake",
    "Esc or P: pause",
    "Swipe to steer, tap to confirm",
    "",
    "Coins score, wrenches heal, arrows boost.",
    "Pass close to traffic for a near miss.",
    "Every bonus raises the multiplier.",
    "",
    "Enter or Down to go back",
]


def _center(surface: pygame.Surface, font: pygame.font.Font, text: str, y: int, color=TEXT_COLOR) -> None:
    label = font.render(text, True, color)
    surface.blit(label, label.get_rect(center=(SCREEN_W // 2, y)))


def _dim(surface: pygame.Surface) -> None:
    overlay = pygame.Surface((SCREEN_W, SCREEN_H), pygame.SRCALPHA)
    overlay.fill(OVERLAY)
    surface.blit(overlay, (0, 0))


def _menu(surface: pygame.Surface, menu: Menu, font: pygame.font.Font, top: int) -> None:
    for i, item in enumerate(menu.items):
        selected = i == menu.selected
        text = MENU_LABELS.get(item, item)
        _center(surface, font, f"> {text} <" if selected else text, top + i * 40,
                HIGHLIGHT if selected else TEXT_COLOR)


def draw_boot(surface: pygame.Surface, big: pygame.font.Font, font: pygame.font.Font) -> None:
    _dim(surface)
    _center(surface, big, "LANE RACER", SCREEN_H // 2 - 30)
    _center(surface, font, "Press any key", SCREEN_H // 2 + 20, TEXT_DIM)


def draw_title(surface: pygame.Surface, game: Game, big: pygame.font.Font, font: pygame.font.Font) -> None:
    _dim(surface)
    _center(surface, big, "LANE RACER", 140)
    if game.menu is not None:
        _menu(surface, game.menu, font, 260)
    difficulty = game.settings.difficulty
    best = game.high_scores[difficulty]
    _center(surface, font, f"Best ({difficulty.value}): {int(best.score)} pts, {int(best.distance)} m",
            SCREEN_H - 60, TEXT_DIM)


def draw_howto(surface: pygame.Surface, big: pygame.font.Font, font: pygame.font.Font) -> None:
    _dim(surface)
    _center(surface, big, "HOW TO PLAY", 100)
    for i, line in enumerate(HOWTO_LINES):
        _center(surface, font, line, 180 + i * 30)


def _settings_value(game: Game, item: str) -> str:
    if item.startswith("bind_"):
        code = game.input.binding_for(item[len("bind_"):])
        return code or "-"
    value = getattr(game.settings, item)
    if isinstance(value, Difficulty):
        return value.value.upper()
    return "ON" if value else "OFF"


def draw_settings(surface: pygame.Surface, game: Game, big: pygame.font.Font, font: pygame.font.Font) -> None:
    _dim(surface)
    _center(surface, big, "SETTINGS", 80)
    menu = game.menu
    if not isinstance(menu, SettingsMenu):
        return
    for i, item in enumerate(menu.items):
        selected = i == menu.selected
        color = HIGHLIGHT if selected else TEXT_COLOR
        name = item.replace("bind_", "key: ").replace("_", " ")
        if selected and menu.capturing is not None:
            value = "press a key..."
        else:
            value = _settings_value(game, item)
        surface.blit(font.render(name, True, color), (120, 150 + i * 38))
        label = font.render(value, True, color)
        surface.blit(label, label.get_rect(topright=(SCREEN_W - 120, 150 + i * 38)))
    _center(surface, font, "Enter: change   Left / Esc: save and back", SCREEN_H - 50, TEXT_DIM)


def draw_paused(surface: pygame.Surface, game: Game, big: pygame.font.Font, font: pygame.font.Font) -> None:
    _dim(surface)
    _center(surface, big, "PAUSED", 180)
    if game.menu is not None:
        _menu(surface, game.menu, font, 280)


def draw_gameover(surface: pygame.Surface, game: Game, big: pygame.font.Font, font: pygame.font.Font) -> None:
    _dim(surface)
    _center(surface, big, "GAME OVER", 150)
    menu = game.menu
    run = game.run
    if run is not None:
        _center(surface, font, f"Score {int(run.score)}   Distance {int(run.distance)} m", 220)
    if isinstance(menu, GameOverMenu):
        if menu.new_record:
            _center(surface, font, "NEW RECORD!", 260, HIGHLIGHT)
        _menu(surface, menu, font, 330)


def draw_mode(surface: pygame.Surface, game: Game, big: pygame.font.Font, font: pygame.font.Font) -> None:
    if game.mode is Mode.BOOT:
        draw_boot(surface, big, font)
    elif game.mode is Mode.TITLE:
        draw_title(surface, game, big, font)
    elif game.mode is Mode.HOWTO:
        draw_howto(surface, big, font)
    elif game.mode is Mode.SETTINGS:
        draw_settings(surface, game, big, font)
    elif game.mode is Mode.PAUSED:
        draw_paused(surface, game, big, font)
    elif game.mode is Mode.GAMEOVER:
        draw_gameover(surface, game, big, font)
