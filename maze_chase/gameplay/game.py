"""
Main Game class - the tick-based simulation.
NO UI DEPENDENCIES.

This is the central gameplay module. It can be fully tested
without any UI framework.
"""
import logging
from dataclasses import dataclass
from typing import Optional, List
from enum import Enum, auto

from .grid import Grid, CellKind, Direction, Position
from .entities import Hunter, Chaser
from .level import Level, parse_layout, create_default_level
from .movement import resolve_intent, advance_hunter, caught, crossed
from .pursuit import advance_chaser
from .constants import CHASER_CADENCE, TICK_MODULUS

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Current phase of the game."""
    RUNNING = auto()    # Hunter is collecting, chasers are chasing
    WON = auto()        # Every pickup collected
    LOST = auto()       # A chaser caught the hunter


@dataclass
class GameEvent:
    """An event that occurred during gameplay (for UI to react to)."""
    pass


@dataclass
class PickupCollectedEvent(GameEvent):
    """The hunter consumed a pickup."""
    position: Position
    score: int


@dataclass
class HunterCaughtEvent(GameEvent):
    """A chaser caught the hunter."""
    position: Position
    swapped: bool = False  # True if they passed through each other


@dataclass
class PhaseChangedEvent(GameEvent):
    """Game phase changed."""
    old_phase: GamePhase
    new_phase: GamePhase


class Game:
    """
    The main game class that orchestrates all gameplay.

    This class is COMPLETELY DECOUPLED from UI.
    It exposes state as plain data and accepts commands as method calls.

    Usage:
        game = Game()
        game.steer(Direction.LEFT)
        while not game.game_over:
            events = game.step()
            # UI reads game state and renders
    """

    def __init__(self, level: Optional[Level] = None, chaser_cadence: int = CHASER_CADENCE):
        if chaser_cadence < 1:
            raise ValueError(f"chaser_cadence must be >= 1, got {chaser_cadence}")
        self.chaser_cadence = chaser_cadence
        self._load(level if level is not None else create_default_level())

    def _load(self, level: Level) -> None:
        """(Re)build all session state from a freshly parsed level."""
        self.level = level
        self.grid: Grid = level.grid
        self.hunter = Hunter(level.hunter_spawn)
        self.chasers: List[Chaser] = [Chaser(pos) for pos in level.chaser_spawns]

        self.score = 0
        self.pickups_remaining = level.pickups
        self.tick = 0

        # A maze with nothing to collect is already won
        self.phase = GamePhase.RUNNING if self.pickups_remaining > 0 else GamePhase.WON

        # Event queue for UI notifications
        self._events: List[GameEvent] = []

        logger.info(
            f"Session started: {self.grid.width}x{self.grid.height}, "
            f"{len(self.chasers)} chasers, {self.pickups_remaining} pickups"
        )

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def steer(self, direction: Direction) -> None:
        """Set the hunter's wanted direction. Ignored once the game is over."""
        if self.game_over:
            return
        self.hunter.want(direction)

    def restart(self) -> None:
        """Start a fresh session from the same layout."""
        logger.info("Restarting session")
        self._load(parse_layout(self.level.rows))

    # =========================================================================
    # UPDATE LOOP
    # =========================================================================

    def step(self) -> List[GameEvent]:
        """
        Advance the simulation by one tick.
        Returns list of events that occurred. No-op once the game is over.
        """
        self._events = []
        if self.game_over:
            return self._events

        # Hunter first
        resolve_intent(self.grid, self.hunter)
        hunter_before = self.hunter.position
        moved = advance_hunter(self.grid, self.hunter)
        hunter_after = self.hunter.position

        if caught(hunter_after, (c.position for c in self.chasers)):
            self._catch(hunter_after, swapped=False)
            return self._events

        # Chasers on their slower cadence, all aiming at where the hunter started
        self.tick = (self.tick + 1) % TICK_MODULUS
        chasers_before = [c.position for c in self.chasers]
        if self.tick % self.chaser_cadence == 0:
            for chaser in self.chasers:
                advance_chaser(self.grid, chaser, hunter_before)

        if caught(hunter_after, (c.position for c in self.chasers)):
            self._catch(hunter_after, swapped=False)
            return self._events

        # Swaps land the hunter on a chaser's old cell, which the first
        # check already catches; this covers any pass-through it misses
        for before, chaser in zip(chasers_before, self.chasers):
            if crossed(hunter_before, hunter_after, before, chaser.position):
                self._catch(hunter_after, swapped=True)
                return self._events

        # Pickups only count if the hunter survived the tick
        if moved and self.grid.cell_at(hunter_after) == CellKind.PICKUP:
            self._collect(hunter_after)

        logger.debug(
            f"Tick {self.tick}: hunter {hunter_after}, score {self.score}, "
            f"{self.pickups_remaining} pickups left"
        )
        return self._events

    def _collect(self, pos: Position) -> None:
        """Consume the pickup at pos."""
        self.grid.set_cell(pos, CellKind.EMPTY)
        self.score += 1
        self.pickups_remaining = max(0, self.pickups_remaining - 1)
        self._events.append(PickupCollectedEvent(pos, self.score))

        if self.pickups_remaining == 0:
            self._change_phase(GamePhase.WON)

    def _catch(self, pos: Position, swapped: bool) -> None:
        """The hunter has been caught at pos."""
        self._events.append(HunterCaughtEvent(pos, swapped))
        self._change_phase(GamePhase.LOST)

    def _change_phase(self, new_phase: GamePhase) -> None:
        old_phase = self.phase
        self.phase = new_phase
        self._events.append(PhaseChangedEvent(old_phase, new_phase))
        logger.info(
            f"Game {new_phase.name} at tick {self.tick} with score {self.score}"
        )

    # =========================================================================
    # STATE QUERIES (for UI to read)
    # =========================================================================

    @property
    def game_over(self) -> bool:
        """True once the game has been won or lost."""
        return self.phase != GamePhase.RUNNING

    @property
    def won(self) -> bool:
        return self.phase == GamePhase.WON

    def chaser_positions(self) -> List[Position]:
        """Current chaser positions, in spawn order."""
        return [c.position for c in self.chasers]

    # =========================================================================
    # CONVENIENCE METHODS FOR TESTING
    # =========================================================================

    def simulate(self, ticks: int) -> List[GameEvent]:
        """
        Run up to `ticks` steps, stopping early if the game ends.
        Returns all events that occurred.
        """
        all_events = []
        for _ in range(ticks):
            if self.game_over:
                break
            all_events.extend(self.step())
        return all_events
