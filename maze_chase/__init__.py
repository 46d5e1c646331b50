"""
Maze Chase - a tick-based grid chase game.

The hunter collects every pickup in the maze while the chasers close in.
"""

__version__ = "0.1.0"
