"""HUD overlays: score strip, health, debug readout, touch buttons."""
from __future__ import annotations

import pygame

from lane_racer import Game
from ui.constants import BUTTON_COLOR, SCREEN_W, TEXT_COLOR, TEXT_DIM
from ui.input_source import button_rects


def draw_hud(surface: pygame.Surface, game: Game, colors: dict, font: pygame.font.Font) -> None:
    run = game.run
    if run is None:
        return
    strip = pygame.Surface((SCREEN_W, 32), pygame.SRCALPHA)
    strip.fill((0, 0, 0, 140))
    surface.blit(strip, (0, 0))

    surface.blit(font.render(f"SCORE {int(run.score)}", True, TEXT_COLOR), (10, 8))
    surface.blit(font.render(f"{int(run.distance)} m", True, TEXT_DIM), (170, 8))
    mult = font.render(f"x{run.multiplier:.1f}", True, colors["coin"])
    surface.blit(mult, (280, 8))

    for i in range(run.player.max_health):
        color = colors["heal"] if i < run.player.health else (70, 70, 80)
        pygame.draw.rect(surface, color, (SCREEN_W - 24 - i * 22, 9, 16, 14), border_radius=3)


def draw_debug(surface: pygame.Surface, game: Game, alpha: float, font: pygame.font.Font) -> None:
    run = game.run
    if run is None:
        return
    p = run.player
    lines = [
        f"tick {run.ticks}  alpha {alpha:.2f}",
        f"speed {p.speed:.2f} base {p.base_speed:.2f}",
        f"lane {p.lane}->{p.target_lane} cd {p.lane_cooldown:.0f}",
        f"obstacles {len(run.obstacles)} pickups {len(run.pickups)}",
        f"next spawn {run.spawner.obstacle_interval(run.distance) - run.spawner.obstacle_timer.elapsed:.0f} ms",
        f"skipped {run.spawner.skipped}",
    ]
    for i, line in enumerate(lines):
        surface.blit(font.render(line, True, (120, 255, 120)), (10, 40 + i * 16))


def draw_touch_buttons(surface: pygame.Surface, layout: str, font: pygame.font.Font) -> None:
    for name, rect in button_rects(layout).items():
        overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        overlay.fill(BUTTON_COLOR)
        surface.blit(overlay, rect.topleft)
        label = font.render(name.upper(), True, TEXT_COLOR)
        surface.blit(label, label.get_rect(center=rect.center))
