# -*- coding: utf-8 -*-
"""
Game sessions of the 2048 game.

This module provides the `Game` class, which plays one board against a renderer and a storage, and
the `GameManager` class, which routes one input stream to several sessions.
"""

from .game import Game
from .manager import Command, GameManager

__all__ = ["Game", "GameManager", "Command"]
