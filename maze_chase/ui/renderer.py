"""
Renderer - Paints the game's character buffer into a pygame window.
This is a THIN ADAPTER - no game logic here.
"""
from typing import Dict, Tuple

import pygame

from maze_chase.gameplay.game import Game
from maze_chase.gameplay.view import render_lines
from maze_chase.gameplay.constants import (
    WALL_GLYPH, PICKUP_GLYPH, HUNTER_GLYPH, CHASER_GLYPH,
)


# Colors
COLOR_BG = (15, 15, 20)
COLOR_WALL = (60, 80, 200)
COLOR_PICKUP = (230, 200, 150)
COLOR_HUNTER = (255, 230, 60)
COLOR_CHASER = (255, 80, 80)
COLOR_HUD = (200, 200, 200)
COLOR_WIN = (100, 255, 100)
COLOR_LOSE = (255, 100, 100)

GLYPH_COLORS = {
    WALL_GLYPH: COLOR_WALL,
    PICKUP_GLYPH: COLOR_PICKUP,
    HUNTER_GLYPH: COLOR_HUNTER,
    CHASER_GLYPH: COLOR_CHASER,
}

# Lines below the maze: status line and game-over banner
HUD_LINES = 2


class Renderer:
    """
    Renders game state to a pygame surface.

    This class reads from Game but never modifies it.
    """

    def __init__(self, game: Game, screen: pygame.Surface, cell_px: int, font_name: str = "monospace"):
        self.game = game
        self.screen = screen
        self.cell_px = cell_px
        self.font = pygame.font.SysFont(font_name, cell_px)
        self._glyph_cache: Dict[Tuple[str, Tuple[int, int, int]], pygame.Surface] = {}

    def render(self):
        """Render entire game state and flip the display."""
        self.screen.fill(COLOR_BG)

        lines = render_lines(self.game)
        maze_height = self.game.grid.height

        for y, line in enumerate(lines[:maze_height]):
            for x, char in enumerate(line):
                color = GLYPH_COLORS.get(char)
                if color is not None:
                    self._put(x, y, char, color)

        # HUD: status line, then the banner if the game is over
        for i, line in enumerate(lines[maze_height:]):
            color = COLOR_HUD
            if i == 1:
                color = COLOR_WIN if self.game.won else COLOR_LOSE
            self._put_string(0, maze_height + i, line, color)

        pygame.display.flip()

    def _put(self, x: int, y: int, char: str, color):
        """Draw a single glyph centered in its cell."""
        key = (char, color)
        surface = self._glyph_cache.get(key)
        if surface is None:
            surface = self.font.render(char, True, color)
            self._glyph_cache[key] = surface
        rect = surface.get_rect(
            center=(x * self.cell_px + self.cell_px // 2, y * self.cell_px + self.cell_px // 2)
        )
        self.screen.blit(surface, rect)

    def _put_string(self, x: int, y: int, text: str, color):
        surface = self.font.render(text, True, color)
        self.screen.blit(surface, (x * self.cell_px, y * self.cell_px))
