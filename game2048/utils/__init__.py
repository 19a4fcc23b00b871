# -*- coding: utf-8 -*-
"""
This module provides renderers and input sources for playing the 2048 game.

It includes a plain-text `ConsoleRenderer`, a Matplotlib `WindowBoard` and a `KeyboardInput` event
emitter.
"""

from .console import ConsoleRenderer
from .keyboard import KeyboardInput
from .windows import WindowBoard

__all__ = ["ConsoleRenderer", "KeyboardInput", "WindowBoard"]
