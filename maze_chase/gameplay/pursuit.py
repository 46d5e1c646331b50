"""
Chaser pursuit heuristic.
NO UI DEPENDENCIES.

Greedy one-step lookahead: each tick a chaser takes the legal step that
lands closest (Manhattan distance) to the hunter, without reversing its
previous step unless it is stuck in a dead end. This is not a path
search; chasers can get hung up on walls and that is part of the game.
"""
from typing import List, Tuple

from .grid import Grid, Direction, Position
from .entities import Chaser
from .movement import can_move, next_position


# Enumeration order doubles as the tie-break order
PURSUIT_ORDER: Tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


def candidate_directions(grid: Grid, chaser: Chaser) -> List[Direction]:
    """
    Legal directions for a chaser, in PURSUIT_ORDER.

    The reverse of its last step is dropped, unless that would leave
    nothing to choose from.
    """
    legal = [d for d in PURSUIT_ORDER if can_move(grid, chaser.position, d)]

    if chaser.last_direction == Direction.NONE:
        return legal

    reverse = chaser.last_direction.opposite()
    forward = [d for d in legal if d != reverse]
    return forward if forward else legal


def choose_direction(grid: Grid, chaser: Chaser, target: Position) -> Direction:
    """
    Pick the chaser's next step toward `target`.
    Returns Direction.NONE if the chaser is boxed in.
    """
    best = Direction.NONE
    best_distance = None

    for direction in candidate_directions(grid, chaser):
        distance = next_position(chaser.position, direction).manhattan(target)
        # Strictly smaller only: earlier directions win ties
        if best_distance is None or distance < best_distance:
            best = direction
            best_distance = distance

    return best


def advance_chaser(grid: Grid, chaser: Chaser, target: Position) -> bool:
    """
    Move a chaser one step toward `target`.
    Returns True if it moved. A boxed-in chaser keeps its last direction.
    """
    direction = choose_direction(grid, chaser, target)
    if direction == Direction.NONE:
        return False

    chaser.position = next_position(chaser.position, direction)
    chaser.last_direction = direction
    return True
