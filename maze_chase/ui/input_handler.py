"""
Input Handler - Translates key presses to gameplay commands.
This is a THIN ADAPTER - no game logic here.
"""
import pygame

from maze_chase.gameplay.game import Game
from maze_chase.gameplay.grid import Direction


# Arrow keys plus letter bindings (WASD and AZERTY ZQSD)
DIRECTION_KEYS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_z: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_q: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}

QUIT_KEYS = {pygame.K_ESCAPE, pygame.K_x}
RESTART_KEY = pygame.K_r


class InputHandler:
    """
    Handles keyboard input and translates to game commands.

    The input handler:
    - Reads key presses
    - Calls game methods to steer or restart
    - Reports when the player wants to quit
    """

    def __init__(self, game: Game):
        self.game = game

    def handle_key(self, key: int) -> bool:
        """
        Handle a single key press.
        Returns True if the game should quit.
        """
        if key in QUIT_KEYS:
            return True

        if key == RESTART_KEY:
            self.game.restart()
        elif key in DIRECTION_KEYS:
            self.game.steer(DIRECTION_KEYS[key])

        return False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a pygame event.
        Returns True if the game should quit.
        """
        if event.type == pygame.QUIT:
            return True
        if event.type == pygame.KEYDOWN:
            return self.handle_key(event.key)
        return False
