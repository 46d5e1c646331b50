"""
Character view of the game state.
NO UI DEPENDENCIES.

Pure function of state -> lines of glyphs. Knows nothing about windows,
fonts or colors; the pygame renderer just paints what this returns.
"""
from typing import List

from .grid import CellKind
from .game import Game
from .constants import (
    WALL_GLYPH, PICKUP_GLYPH, EMPTY_GLYPH, HUNTER_GLYPH, CHASER_GLYPH,
    WIN_BANNER, LOSE_BANNER,
)

CELL_GLYPHS = {
    CellKind.WALL: WALL_GLYPH,
    CellKind.PICKUP: PICKUP_GLYPH,
    CellKind.EMPTY: EMPTY_GLYPH,
}


def render_maze(game: Game) -> List[str]:
    """The board rows, with the hunter drawn over chasers over cells."""
    rows = [
        [EMPTY_GLYPH] * game.grid.width for _ in range(game.grid.height)
    ]
    for pos, kind in game.grid.iter_cells():
        rows[pos.y][pos.x] = CELL_GLYPHS[kind]
    for chaser in game.chasers:
        rows[chaser.position.y][chaser.position.x] = CHASER_GLYPH
    hunter = game.hunter.position
    rows[hunter.y][hunter.x] = HUNTER_GLYPH
    return [''.join(row) for row in rows]


def format_status(score: int, remaining: int) -> str:
    return f"Score: {score}  Pickups left: {remaining}"


def status_line(game: Game) -> str:
    return format_status(game.score, game.pickups_remaining)


def buffer_width(game: Game) -> int:
    """
    Columns needed to show any frame of this session: the maze, the
    widest status line it can reach, and either banner.
    """
    total = game.level.pickups
    return max(
        game.grid.width,
        len(format_status(total, total)),
        len(WIN_BANNER),
        len(LOSE_BANNER),
    )


def render_lines(game: Game) -> List[str]:
    """
    Full screen buffer: maze rows, a status line, and a banner when
    the game is over.
    """
    lines = render_maze(game)
    lines.append(status_line(game))
    if game.game_over:
        lines.append(WIN_BANNER if game.won else LOSE_BANNER)
    return lines
