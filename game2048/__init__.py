# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 sliding-tile game.

This package provides the grid and move engine, game sessions wired to a renderer and a storage,
and a manager routing one input stream to several sessions.
"""

from .config import GameConfig
from .core import Direction, Grid, Position, Tile
from .session import Command, Game, GameManager

__all__ = ["Command", "Direction", "Game", "GameConfig", "GameManager", "Grid", "Position", "Tile"]
