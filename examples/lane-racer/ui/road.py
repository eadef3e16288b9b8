"""Road, cars, pickups, and transient effects."""
from __future__ import annotations

import math

import pygame

from lane_racer import Obstacle, Pickup, PickupKind, Player, RunState
from lane_racer.config import LANE_WIDTH, LANES
from ui.constants import (
    DASH_GAP,
    DASH_LEN,
    LANE_LINE,
    ROAD_COLOR,
    ROAD_LEFT,
    ROAD_W,
    SCREEN_H,
    SHOULDER,
)


def draw_road(surface: pygame.Surface, offset: float, ox: float = 0, oy: float = 0) -> None:
    pygame.draw.rect(surface, ROAD_COLOR, (ROAD_LEFT + ox, oy, ROAD_W, SCREEN_H))
    pygame.draw.line(surface, SHOULDER, (ROAD_LEFT + ox, 0), (ROAD_LEFT + ox, SCREEN_H), 4)
    right = ROAD_LEFT + ROAD_W + ox
    pygame.draw.line(surface, SHOULDER, (right, 0), (right, SCREEN_H), 4)

    period = DASH_LEN + DASH_GAP
    for lane in range(1, LANES):
        x = ROAD_LEFT + lane * LANE_WIDTH + ox
        y = -period + offset + oy
        while y < SCREEN_H:
            pygame.draw.line(surface, LANE_LINE, (x, y), (x, y + DASH_LEN), 2)
            y += period


def _centered(x: float, y: float, w: float, h: float) -> pygame.Rect:
    rect = pygame.Rect(0, 0, int(w), int(h))
    rect.center = (int(x), int(y))
    return rect


def draw_player(surface: pygame.Surface, player: Player, colors: dict, ox: float, oy: float) -> None:
    # Blink while invulnerable.
    if player.invulnerable and (pygame.time.get_ticks() // 100) % 2 == 0:
        return
    rect = _centered(player.x + ox, player.y + oy, player.width, player.height)
    pygame.draw.rect(surface, colors["player"], rect, border_radius=10)
    windshield = rect.inflate(-20, -int(rect.height * 0.6)).move(0, -int(rect.height * 0.2))
    pygame.draw.rect(surface, (20, 30, 40), windshield, border_radius=4)
    if player.boost_active:
        flame = _centered(player.x + ox, rect.bottom + 12, 20, 20)
        pygame.draw.ellipse(surface, colors["boost"], flame)


def draw_obstacle(surface: pygame.Surface, obstacle: Obstacle, colors: dict, ox: float, oy: float) -> None:
    rect = _centered(obstacle.x + ox, obstacle.y + oy, obstacle.width, obstacle.height)
    color = colors[obstacle.kind.value]
    if obstacle.warning and (pygame.time.get_ticks() // 80) % 2 == 0:
        color = colors["warning"]
    pygame.draw.rect(surface, color, rect, border_radius=8)
    pygame.draw.rect(surface, (0, 0, 0), rect, 2, border_radius=8)


def draw_pickup(surface: pygame.Surface, pickup: Pickup, colors: dict, ox: float, oy: float) -> None:
    cx, cy = pickup.x + ox, pickup.y + oy
    r = pickup.width / 2
    color = colors[pickup.kind.value]
    if pickup.kind is PickupKind.COIN:
        # Fake a spinning coin by squashing its width.
        w = max(2.0, abs(math.cos(pickup.rotation)) * pickup.width)
        pygame.draw.ellipse(surface, color, _centered(cx, cy, w, pickup.height))
    elif pickup.kind is PickupKind.HEAL:
        pygame.draw.rect(surface, color, _centered(cx, cy, r * 0.6, r * 1.8))
        pygame.draw.rect(surface, color, _centered(cx, cy, r * 1.8, r * 0.6))
    else:
        points = [
            (cx + math.cos(pickup.rotation + i * math.tau / 3) * r,
             cy + math.sin(pickup.rotation + i * math.tau / 3) * r)
            for i in range(3)
        ]
        pygame.draw.polygon(surface, color, points)


def draw_effects(surface: pygame.Surface, run: RunState, colors: dict, font: pygame.font.Font) -> None:
    for particle in run.particles:
        size = max(1, int(particle.size * particle.alpha))
        pygame.draw.circle(surface, colors[particle.color], (int(particle.x), int(particle.y)), size)
    for text in run.texts:
        label = font.render(text.text, True, colors[text.color])
        label.set_alpha(int(255 * text.alpha))
        surface.blit(label, label.get_rect(center=(int(text.x), int(text.y))))


def draw_run(surface: pygame.Surface, run: RunState, offset: float, colors: dict, font: pygame.font.Font) -> None:
    ox, oy = run.shake_x, run.shake_y
    draw_road(surface, offset, ox, oy)
    for pickup in run.pickups:
        draw_pickup(surface, pickup, colors, ox, oy)
    for obstacle in run.obstacles:
        draw_obstacle(surface, obstacle, colors, ox, oy)
    draw_player(surface, run.player, colors, ox, oy)
    draw_effects(surface, run, colors, font)
