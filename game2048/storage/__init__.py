# -*- coding: utf-8 -*-
"""
Storages for saved games and best scores.
"""

from .local import FileStorage
from .memory import MemoryStorage

__all__ = ["FileStorage", "MemoryStorage"]
