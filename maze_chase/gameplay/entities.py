"""
Maze entities: the Hunter and its Chasers.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass

from .grid import Direction, Position


@dataclass
class Hunter:
    """
    The player-controlled entity.

    `direction` is where the hunter is actually heading; `wanted_direction`
    is the last steering input, kept until it becomes legal to take.
    """
    position: Position
    direction: Direction = Direction.NONE
    wanted_direction: Direction = Direction.NONE

    def want(self, direction: Direction) -> None:
        """Record a steering input. Never rejected, even if not yet actable."""
        self.wanted_direction = direction


@dataclass
class Chaser:
    """A pursuing entity. Remembers its last step to avoid reversing."""
    position: Position
    last_direction: Direction = Direction.NONE
