"""Lane Racer - endless five-lane arcade driving on the lane_racer core.

Controls:
  Left / A, Right / D   Change lane
  Down / S              Brake (and move down in menus)
  Up / W                Move up in menus
  Enter / Space         Confirm
  Esc / P               Pause, or save and leave settings
  `                     Toggle debug overlay
  Mouse drag            Swipe left/right; click to confirm
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pygame

from lane_racer import Engine, Game, JsonStorage, Mode, build_engine
from ui.constants import BG_COLOR, FPS, SCREEN_H, SCREEN_W, palette
from ui.hud import draw_debug, draw_hud, draw_touch_buttons
from ui.input_source import PygameInput
from ui.road import draw_road, draw_run
from ui.screens import draw_mode
from ui.sound import MixerAudio

logger = logging.getLogger("lane_racer.client")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Lane Racer - lane_racer visual demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--data-dir", type=Path, default=Path.home() / ".lane-racer",
                   help="Where settings and high scores are kept")
    p.add_argument("--no-sound", action="store_true", help="Run without the audio backend")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p.parse_args()


def open_audio(disabled: bool) -> MixerAudio | None:
    if disabled:
        return None
    try:
        return MixerAudio()
    except pygame.error as exc:
        logger.warning("no audio device, continuing silently: %s", exc)
        return None


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Lane Racer")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 16, bold=True)
    small = pygame.font.SysFont("monospace", 13)
    big = pygame.font.SysFont("monospace", 40, bold=True)

    game = Game(storage=JsonStorage(args.data_dir), audio=open_audio(args.no_sound))
    engine: Engine[Game] = build_engine(game, seed=args.seed)
    logger.info("seed %d, data in %s", engine.seed, args.data_dir)
    source = PygameInput()

    def render(state: Game, alpha: float) -> None:
        colors = palette(state.settings.colorblind_mode)
        screen.fill(BG_COLOR)
        if state.run is not None and state.mode is not Mode.TITLE:
            draw_run(screen, state.run, state.road_offset, colors, font)
            draw_hud(screen, state, colors, font)
            if state.debug:
                draw_debug(screen, state, alpha, small)
        else:
            draw_road(screen, state.road_offset)
        if source.buttons_visible:
            draw_touch_buttons(screen, source.layout, small)
        draw_mode(screen, state, big, font)
        pygame.display.flip()

    engine.on_render(render)

    running = True
    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            else:
                source.handle_event(event)

        # --- Tick + render ---
        source.layout = game.settings.touch_layout
        source.buttons_visible = game.mode is Mode.PLAYING
        game.feed(source.sample())
        engine.frame(pygame.time.get_ticks())

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
