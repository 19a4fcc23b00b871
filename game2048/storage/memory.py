"""In-memory storage, lost when the process exits."""

from copy import deepcopy


class MemoryStorage:
    """Storage keeping the saved game and best score in memory."""

    def __init__(self, key: str = 'game1'):
        self.key = key
        self._game_state: dict | None = None
        self._best_score = 0

    def get_game_state(self) -> dict | None:
        return deepcopy(self._game_state)

    def set_game_state(self, state: dict) -> None:
        self._game_state = deepcopy(state)

    def clear_game_state(self) -> None:
        self._game_state = None

    def get_best_score(self) -> int:
        return self._best_score

    def set_best_score(self, score: int) -> None:
        self._best_score = int(score)
