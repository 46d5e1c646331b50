"""
Movement and collision rules shared by the hunter and every chaser.
NO UI DEPENDENCIES.
"""
from typing import Iterable

from .grid import Grid, CellKind, Direction, Position
from .entities import Hunter


def can_move(grid: Grid, pos: Position, direction: Direction) -> bool:
    """
    True if one step from `pos` in `direction` is legal.

    Standing still is never a move. The target must be on the board
    and not a wall; pickups and empty floor are both walkable.
    """
    if direction == Direction.NONE:
        return False
    target = pos + direction
    return grid.in_bounds(target) and grid.cell_at(target) != CellKind.WALL


def next_position(pos: Position, direction: Direction) -> Position:
    """Where one step leads. Callers must have checked can_move first."""
    return pos + direction


def resolve_intent(grid: Grid, hunter: Hunter) -> None:
    """
    Commit the hunter's wanted direction once it becomes legal.

    Until then the previous direction is kept, so a turn pressed
    before an intersection is taken as soon as the corridor opens.
    """
    if can_move(grid, hunter.position, hunter.wanted_direction):
        hunter.direction = hunter.wanted_direction


def advance_hunter(grid: Grid, hunter: Hunter) -> bool:
    """
    Step the hunter along its committed direction.
    Returns True if it moved, False if it stalled against a wall.
    """
    if not can_move(grid, hunter.position, hunter.direction):
        return False
    hunter.position = next_position(hunter.position, hunter.direction)
    return True


def caught(hunter_pos: Position, chaser_positions: Iterable[Position]) -> bool:
    """True if the hunter shares a cell with any chaser."""
    return any(pos == hunter_pos for pos in chaser_positions)


def crossed(
    hunter_before: Position,
    hunter_after: Position,
    chaser_before: Position,
    chaser_after: Position,
) -> bool:
    """
    True if the hunter and a chaser swapped cells this tick.

    They never share a cell at any instant, but they passed through
    each other, which counts as a catch.
    """
    if hunter_before == hunter_after and chaser_before == chaser_after:
        return False
    return chaser_after == hunter_before and hunter_after == chaser_before
