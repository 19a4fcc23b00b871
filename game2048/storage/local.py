"""
File-backed storage that keeps saved games and best scores across process restarts.
"""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FileStorage:
    """
    Storage persisting one session in ``<directory>/<key>.json``.

    The file holds ``{"bestScore": int, "gameState": dict | null}``. Keys keep several sessions from
    sharing one file.
    """

    def __init__(self, directory: str | Path, key: str = 'game1'):
        """
        Initialize the storage.

        Parameters
        ----------
        directory : str | Path
            Directory holding the storage files. Created on first write.
        key : str, optional
            Name of this session's file (default is ``game1``).
        """
        self.key = key
        self.path = Path(directory) / f'{key}.json'

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with self.path.open('r', encoding='utf-8') as file_h:
                data = json.load(file_h)
        except (OSError, json.JSONDecodeError) as error:
            logger.warning('Ignoring unreadable storage file %s: %s', self.path, error)
            return {}
        if not isinstance(data, dict):
            logger.warning('Ignoring storage file %s without an object at its root', self.path)
            return {}
        return data

    def _write(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix('.json.tmp')
        with tmp_path.open('w', encoding='utf-8') as file_h:
            json.dump(data, file_h)
        tmp_path.replace(self.path)

    def get_game_state(self) -> dict | None:
        return self._read().get('gameState')

    def set_game_state(self, state: dict) -> None:
        data = self._read()
        data['gameState'] = state
        self._write(data)

    def clear_game_state(self) -> None:
        data = self._read()
        if data.get('gameState') is not None:
            data['gameState'] = None
            self._write(data)

    def get_best_score(self) -> int:
        try:
            return int(self._read().get('bestScore', 0))
        except (TypeError, ValueError, OverflowError):
            logger.warning('Ignoring invalid best score in %s', self.path)
            return 0

    def set_best_score(self, score: int) -> None:
        data = self._read()
        data['bestScore'] = int(score)
        self._write(data)
