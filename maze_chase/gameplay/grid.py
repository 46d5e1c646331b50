"""
Maze grid system.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass
from typing import List, Tuple, Iterator, Union
from enum import Enum, auto

from .errors import OutOfBoundsError


class CellKind(Enum):
    """What occupies a maze cell. A PICKUP may become EMPTY, nothing else changes."""
    WALL = auto()
    PICKUP = auto()
    EMPTY = auto()


class Direction(Enum):
    """Cardinal directions, plus NONE for standing still."""
    NONE = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    def opposite(self) -> 'Direction':
        """Return the opposite direction."""
        opposites = {
            Direction.NONE: Direction.NONE,
            Direction.UP: Direction.DOWN,
            Direction.DOWN: Direction.UP,
            Direction.LEFT: Direction.RIGHT,
            Direction.RIGHT: Direction.LEFT,
        }
        return opposites[self]

    def delta(self) -> Tuple[int, int]:
        """Return (dx, dy) for this direction."""
        deltas = {
            Direction.NONE: (0, 0),
            Direction.UP: (0, -1),
            Direction.DOWN: (0, 1),
            Direction.LEFT: (-1, 0),
            Direction.RIGHT: (1, 0),
        }
        return deltas[self]


@dataclass(frozen=True)
class Position:
    """An integer grid coordinate."""
    x: int
    y: int

    def __add__(self, other: Union['Position', Direction]) -> 'Position':
        if isinstance(other, Direction):
            dx, dy = other.delta()
        elif isinstance(other, Position):
            dx, dy = other.x, other.y
        else:
            return NotImplemented
        return Position(self.x + dx, self.y + dy)

    def manhattan(self, other: 'Position') -> int:
        """|dx| + |dy| between two coordinates."""
        return abs(self.x - other.x) + abs(self.y - other.y)


class Grid:
    """
    The maze board: a fixed-size rectangle of cell kinds.

    Coordinate system:
    - (0, 0) is top-left
    - x increases to the right
    - y increases downward
    """

    def __init__(self, width: int, height: int, fill: CellKind = CellKind.EMPTY):
        if width < 1 or height < 1:
            raise ValueError(f"Grid must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        self._cells: List[List[CellKind]] = [[fill] * width for _ in range(height)]

    def in_bounds(self, pos: Position) -> bool:
        """Check if a position is within grid bounds."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def cell_at(self, pos: Position) -> CellKind:
        """Get the cell kind at an in-bounds position."""
        self._check_bounds(pos)
        return self._cells[pos.y][pos.x]

    def set_cell(self, pos: Position, kind: CellKind) -> None:
        """Set the cell kind at an in-bounds position."""
        self._check_bounds(pos)
        self._cells[pos.y][pos.x] = kind

    def count(self, kind: CellKind) -> int:
        """Number of cells of the given kind."""
        return sum(row.count(kind) for row in self._cells)

    def iter_cells(self) -> Iterator[Tuple[Position, CellKind]]:
        """Iterate over (position, kind) in row-major order."""
        for y, row in enumerate(self._cells):
            for x, kind in enumerate(row):
                yield Position(x, y), kind

    def _check_bounds(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise OutOfBoundsError(
                f"{pos} is outside the {self.width}x{self.height} grid"
            )

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"
