"""
Level definitions - maze layouts and the parser that turns them into a board.
NO UI DEPENDENCIES.
"""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from .grid import Grid, CellKind, Position
from .errors import LayoutError
from .constants import WALL_SYMBOL, PICKUP_SYMBOL, HUNTER_SYMBOL, CHASER_SYMBOL

logger = logging.getLogger(__name__)


DEFAULT_LAYOUT: Tuple[str, ...] = (
    "###################",
    "#........#........#",
    "#.##.###.#.###.##.#",
    "#.................#",
    "#.##.#.#####.#.##.#",
    "#....#...#...#....#",
    "####.### # ###.####",
    "   #.#   G   #.#   ",
    "####.# ##### #.####",
    "#......G...G......#",
    "####.# ##### #.####",
    "   #.#       #.#   ",
    "####.# ##### #.####",
    "#........#........#",
    "#.##.###.#.###.##.#",
    "#..#.....P.....#..#",
    "##.#.#.#####.#.#.##",
    "#....#...#...#....#",
    "#.######.#.######.#",
    "#.................#",
    "###################",
)


@dataclass
class Level:
    """
    A parsed maze layout.

    `grid` is a fresh board; `rows` keeps the source text so the
    level can be rebuilt on restart.
    """
    rows: Tuple[str, ...]
    grid: Grid
    hunter_spawn: Position
    chaser_spawns: List[Position] = field(default_factory=list)
    pickups: int = 0


def parse_layout(rows: Sequence[str]) -> Level:
    """
    Build a Level from equal-width text rows.

    '#' is a wall, '.' a pickup, 'P' the hunter spawn, 'G' a chaser spawn;
    anything else is open floor. Exactly one 'P' is required.

    Raises LayoutError on an empty or ragged layout, or a missing or
    duplicate hunter spawn.
    """
    rows = tuple(rows)
    if not rows:
        raise LayoutError("Layout has no rows")

    width = len(rows[0])
    if width == 0:
        raise LayoutError("Layout rows are empty")

    for y, row in enumerate(rows):
        if len(row) != width:
            raise LayoutError(
                f"Layout row {y} is {len(row)} wide, expected {width}"
            )

    grid = Grid(width, len(rows))
    hunter_spawns: List[Position] = []
    chaser_spawns: List[Position] = []
    pickups = 0

    for y, row in enumerate(rows):
        for x, symbol in enumerate(row):
            pos = Position(x, y)
            if symbol == WALL_SYMBOL:
                grid.set_cell(pos, CellKind.WALL)
            elif symbol == PICKUP_SYMBOL:
                grid.set_cell(pos, CellKind.PICKUP)
                pickups += 1
            elif symbol == HUNTER_SYMBOL:
                hunter_spawns.append(pos)
            elif symbol == CHASER_SYMBOL:
                chaser_spawns.append(pos)
            # Everything else stays EMPTY

    if not hunter_spawns:
        raise LayoutError(f"Layout has no hunter spawn '{HUNTER_SYMBOL}'")
    if len(hunter_spawns) > 1:
        raise LayoutError(
            f"Layout has {len(hunter_spawns)} hunter spawns, expected exactly one"
        )

    return Level(
        rows=rows,
        grid=grid,
        hunter_spawn=hunter_spawns[0],
        chaser_spawns=chaser_spawns,
        pickups=pickups,
    )


def load_layout(path: Union[str, Path]) -> Level:
    """Read a layout file (one maze row per line) and parse it."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise LayoutError(f"Cannot read layout {path}: {e}") from e

    rows = text.splitlines()
    # Tolerate trailing blank lines at the end of the file
    while rows and not rows[-1]:
        rows.pop()

    level = parse_layout(rows)
    logger.info(
        f"Loaded layout {path} ({level.grid.width}x{level.grid.height}, "
        f"{len(level.chaser_spawns)} chasers, {level.pickups} pickups)"
    )
    return level


def create_default_level() -> Level:
    """The built-in maze."""
    return parse_layout(DEFAULT_LAYOUT)
