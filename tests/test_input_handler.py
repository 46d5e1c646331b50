"""
Tests for the keyboard adapter.
"""
import pygame

from maze_chase.gameplay.game import Game, GamePhase
from maze_chase.gameplay.grid import Direction, Position
from maze_chase.gameplay.level import parse_layout
from maze_chase.ui.input_handler import InputHandler, DIRECTION_KEYS


def make_handler(*rows):
    game = Game(level=parse_layout(rows))
    return game, InputHandler(game)


class TestInputHandler:
    """Tests for InputHandler."""

    def test_arrow_keys_steer(self):
        game, handler = make_handler("P..")
        assert not handler.handle_key(pygame.K_LEFT)
        assert game.hunter.wanted_direction == Direction.LEFT
        handler.handle_key(pygame.K_DOWN)
        assert game.hunter.wanted_direction == Direction.DOWN

    def test_letter_bindings(self):
        """WASD and ZQSD steer like the arrows."""
        assert DIRECTION_KEYS[pygame.K_w] == Direction.UP
        assert DIRECTION_KEYS[pygame.K_z] == Direction.UP
        assert DIRECTION_KEYS[pygame.K_q] == Direction.LEFT
        assert DIRECTION_KEYS[pygame.K_a] == Direction.LEFT
        assert DIRECTION_KEYS[pygame.K_s] == Direction.DOWN
        assert DIRECTION_KEYS[pygame.K_d] == Direction.RIGHT

    def test_unbound_key_keeps_wanted_direction(self):
        game, handler = make_handler("P..")
        handler.handle_key(pygame.K_RIGHT)
        handler.handle_key(pygame.K_SPACE)
        assert game.hunter.wanted_direction == Direction.RIGHT

    def test_quit_keys(self):
        _, handler = make_handler("P..")
        assert handler.handle_key(pygame.K_ESCAPE)
        assert handler.handle_key(pygame.K_x)

    def test_restart_key(self):
        game, handler = make_handler("P.G.")
        handler.handle_key(pygame.K_RIGHT)
        game.simulate(2)
        assert game.phase == GamePhase.LOST

        assert not handler.handle_key(pygame.K_r)
        assert game.phase == GamePhase.RUNNING
        assert game.hunter.position == Position(0, 0)

    def test_window_close_quits(self):
        _, handler = make_handler("P..")
        assert handler.handle_event(pygame.event.Event(pygame.QUIT))

    def test_keydown_event(self):
        game, handler = make_handler("P..")
        event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP)
        assert not handler.handle_event(event)
        assert game.hunter.wanted_direction == Direction.UP

    def test_other_events_ignored(self):
        _, handler = make_handler("P..")
        event = pygame.event.Event(pygame.KEYUP, key=pygame.K_ESCAPE)
        assert not handler.handle_event(event)
