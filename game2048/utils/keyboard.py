"""
Keyboard input source translating key names into game events.
"""

from collections import defaultdict
from typing import Any, Callable

from game2048.core.gamemove import Direction

# ##: Key names, as reported by Matplotlib, mapped to directions.
KEY_DIRECTIONS: dict[str, Direction] = {
    'up': Direction.UP,
    'right': Direction.RIGHT,
    'down': Direction.DOWN,
    'left': Direction.LEFT,
    'w': Direction.UP,
    'd': Direction.RIGHT,
    's': Direction.DOWN,
    'a': Direction.LEFT,
}
RESTART_KEYS = {'r', 'backspace'}
KEEP_PLAYING_KEYS = {'k', 'enter'}


class KeyboardInput:
    """
    Event emitter for ``move``, ``restart`` and ``keepPlaying``.

    Handlers subscribe with ``on()``; ``handle_key()`` turns a key name into the matching event.
    """

    def __init__(self):
        self._handlers: dict[str, list[Callable[..., Any]]] = defaultdict(list)

    def on(self, event: str, handler: Callable[..., Any]) -> None:
        self._handlers[event].append(handler)

    def emit(self, event: str, *args: Any) -> None:
        for handler in self._handlers[event]:
            handler(*args)

    def handle_key(self, key: str | None) -> bool:
        """
        Emit the event bound to ``key``.

        Returns
        -------
        bool
            True if the key is bound, False otherwise.
        """
        if key in KEY_DIRECTIONS:
            self.emit('move', int(KEY_DIRECTIONS[key]))
        elif key in RESTART_KEYS:
            self.emit('restart')
        elif key in KEEP_PLAYING_KEYS:
            self.emit('keepPlaying')
        else:
            return False
        return True
