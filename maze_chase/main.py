#!/usr/bin/env python3
"""
Maze Chase - Main Entry Point

Collect every pickup in the maze before the chasers catch you.
Chasers move at half your speed but never stop coming.

Usage:
    python -m maze_chase.main

Controls:
    Arrow keys / WASD / ZQSD: Steer (turns can be queued before a corner)
    R: Restart
    Escape / X: Quit

Configuration comes from MAZE_CHASE_* environment variables
(see maze_chase/config.py).
"""
import logging
import sys
import time

import pygame

from maze_chase.config import Settings, get_settings
from maze_chase.gameplay.errors import LayoutError
from maze_chase.gameplay.game import Game
from maze_chase.gameplay.level import Level, load_layout, create_default_level
from maze_chase.gameplay.view import buffer_width
from maze_chase.ui.display import display_session
from maze_chase.ui.renderer import Renderer, HUD_LINES
from maze_chase.ui.input_handler import InputHandler

logger = logging.getLogger(__name__)


def load_level(settings: Settings) -> Level:
    """The configured layout, or the built-in maze."""
    if settings.layout_path:
        return load_layout(settings.layout_path)
    return create_default_level()


def run(game: Game, settings: Settings) -> None:
    """
    The real-time loop.

    Waits for input until the next tick is due, folds every pending key
    press into the game, then runs exactly one simulation step.
    """
    tick_seconds = settings.tick_ms / 1000.0
    cols = buffer_width(game)
    rows = game.grid.height + HUD_LINES

    with display_session(settings.window_title, cols, rows, settings.cell_px) as screen:
        renderer = Renderer(game, screen, settings.cell_px, settings.font_name)
        input_handler = InputHandler(game)
        renderer.render()

        next_tick = time.monotonic() + tick_seconds
        should_quit = False

        while not should_quit:
            timeout_ms = int((next_tick - time.monotonic()) * 1000)
            # wait(0) blocks forever, so poll when the tick is already due
            if timeout_ms > 0:
                event = pygame.event.wait(timeout_ms)
            else:
                event = pygame.event.poll()

            # Drain everything queued since the last tick
            pending = [] if event.type == pygame.NOEVENT else [event]
            pending.extend(pygame.event.get())
            for event in pending:
                if input_handler.handle_event(event):
                    should_quit = True
                    break

            if should_quit:
                break

            now = time.monotonic()
            if now >= next_tick:
                game.step()
                renderer.render()
                next_tick += tick_seconds
                # Don't try to catch up after a long stall
                if next_tick < now:
                    next_tick = now + tick_seconds

    logger.info(f"Quit with score {game.score}")


def main() -> int:
    """Main entry point."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        level = load_level(settings)
    except LayoutError as e:
        logger.error(f"Invalid layout: {e}")
        return 1

    game = Game(level=level, chaser_cadence=settings.chaser_cadence)
    run(game, settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
