"""Maze navigation: laser-scan wall and corridor following, and A* planning on map images."""

__version__ = "0.1.0"