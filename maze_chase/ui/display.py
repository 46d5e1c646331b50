"""
Display session - owns pygame's global state for the lifetime of a game.
This is a THIN ADAPTER - no game logic here.
"""
from contextlib import contextmanager
from typing import Iterator

import pygame


@contextmanager
def display_session(title: str, cols: int, rows: int, cell_px: int) -> Iterator[pygame.Surface]:
    """
    Open a window sized for a `cols` x `rows` character buffer.

    pygame is shut down on every exit path, including exceptions
    and the quit key.
    """
    pygame.init()
    try:
        screen = pygame.display.set_mode((cols * cell_px, rows * cell_px))
        pygame.display.set_caption(title)
        yield screen
    finally:
        pygame.quit()
