"""
Exceptions raised by the gameplay core.
NO UI DEPENDENCIES.
"""


class MazeChaseError(Exception):
    """Base class for all maze chase errors."""


class LayoutError(MazeChaseError, ValueError):
    """
    The maze layout is malformed.

    Raised while building a session (empty layout, ragged rows,
    missing or duplicate hunter spawn). Recoverable: the caller can
    fall back to another layout.
    """


class OutOfBoundsError(MazeChaseError, IndexError):
    """
    A grid coordinate outside the board was indexed.

    Movement rules check bounds before indexing, so this signals a
    broken invariant rather than bad input.
    """
