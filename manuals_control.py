# -*- coding: utf-8 -*-
"""
Play 2048 Game
"""
import argparse
import logging
from functools import partial
from typing import Any

from game2048 import GameConfig, GameManager
from game2048.storage import FileStorage, MemoryStorage
from game2048.utils import KeyboardInput, WindowBoard


def key_handler(keyboard: KeyboardInput, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    keyboard: KeyboardInput
        Input source emitting game events

    window: WindowBoard
        Window that received the key press

    event: Any
        event to handle
    """
    if event.key == "escape":
        window.close()
        return None

    if not keyboard.handle_key(event.key):
        logging.getLogger(__name__).debug("Unbound key %s", event.key)
    return None


def parse_args() -> GameConfig:
    parser = argparse.ArgumentParser(description="Play 2048 in a Matplotlib window.")
    parser.add_argument("--size", type=int, default=4, help="Board size")
    parser.add_argument("--start-tiles", type=int, default=2, help="Tiles on a fresh board")
    parser.add_argument("--games", type=int, default=1, help="Number of side-by-side boards")
    parser.add_argument("--control-index", type=int, default=0, help="Board receiving moves")
    parser.add_argument("--storage-dir", default=None, help="Directory for saved games and best scores")
    parser.add_argument("--seed", type=int, default=None, help="Seed for tile spawning")
    parser.add_argument("--verbose", action="store_true", help="Log every move")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    return GameConfig(
        size=args.size,
        start_tiles=args.start_tiles,
        games=args.games,
        control_index=args.control_index,
        storage_dir=args.storage_dir,
        seed=args.seed,
    )


if __name__ == "__main__":
    config = parse_args()

    if config.storage_dir is not None:
        storage_factory = partial(FileStorage, config.storage_dir)
    else:
        storage_factory = MemoryStorage

    games = GameManager.create_games(
        renderer_factory=lambda size: WindowBoard(size=size, title="2048 Game"),
        storage_factory=storage_factory,
        count=config.games,
        size=config.size,
        start_tiles=config.start_tiles,
        win_value=config.win_value,
        seed=config.seed,
    )

    keyboard_input = KeyboardInput()
    manager = GameManager(games, keyboard_input, control_index=config.control_index)

    for game in games:
        game.renderer.register_key_handler(partial(key_handler, keyboard_input, game.renderer))

    # Blocking event loop
    WindowBoard.show(block=True)
