# -*- coding: utf-8 -*-
"""
Graphical renderer for 2048 game sessions.

This module draws a session's board in a Matplotlib window, one coloured subplot per cell, with the
score in the window heading and a banner when the game is won or lost. Key presses in the window
can be forwarded to an input source.
"""
from typing import Callable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event
from numpy import ndarray

from game2048.core.grid import Grid
from game2048.interfaces import GameStatus


class WindowBoard:
    """
    Renderer drawing the game board with Matplotlib.

    Methods
    -------
    draw(grid: Grid, status: GameStatus)
        Show the grid, the score and the win/loss banner.
    continue_game()
        Remove the win/loss banner.
    show_image(board: np.ndarray)
        Update the cells from a board of values.
    register_key_handler(key_handler: Callable)
        Register a function to handle keyboard events.
    show(block: bool = True)
        Display the game window.
    close()
        Close the game window.
    """

    # ##: Colors mapping for different tile values.
    COLORS = {
        0: "#CCC0B3",
        2: "#EEE4DA",
        4: "#ECE0C8",
        8: "#ECB280",
        16: "#EC8D53",
        32: "#F57C5F",
        64: "#E95937",
        128: "#F3D96B",
        256: "#F2D04A",
        512: "#E5BF2E",
        1024: "#E2B814",
        2048: "#EBC502",
        4096: "#00A2D8",
        8192: "#9ED682",
    }

    def __init__(self, size: int, title: str = "2048"):
        """
        Initialize the game board window.

        Parameters
        ----------
        size : int
            The size of the game board (e.g., 4 for a 4x4 board).
        title : str, optional
            The title of the window.
        """
        self.size = size
        self.fig, self.axe = plt.subplots()
        self.fig.canvas.manager.set_window_title(title)
        self._setup_axes(size)
        self.banner = self.fig.text(0.5, 0.5, "", ha="center", va="center", fontsize="xx-large", fontweight="bold")
        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _setup_axes(self, size: int):
        """
        Set up one subplot per cell.

        Parameters
        ----------
        size : int
            The size of the game board.
        """
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=0.9, wspace=0.05, hspace=0.05)
        self.axe.set_facecolor("#BBADA0")
        self.axe.set_xticks([])
        self.axe.set_yticks([])

        self.texts = []
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        for ax in self.axes:
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="demibold")
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

    def _close_handler(self, event: Optional[Event] = None):
        self.closed = True

    def draw(self, grid: Grid, status: GameStatus):
        """
        Show a session's grid and status.

        Parameters
        ----------
        grid : Grid
            The grid to display.
        status : GameStatus
            Score, best score and flags of the session.
        """
        self.fig.suptitle(f"Score: {status.score}    Best: {status.best_score}")
        if status.over:
            self.banner.set_text("Game over!")
        elif status.won and status.terminated:
            self.banner.set_text("You win!")
        self.show_image(grid.to_array())

    def continue_game(self):
        """Remove the win/loss banner."""
        self.banner.set_text("")
        self.fig.canvas.draw_idle()

    def show_image(self, board: ndarray):
        """
        Show or update the game board.

        Parameters
        ----------
        board : ndarray
            Board values indexed ``[row, col]``, 0 for empty cells.
        """
        for ax, text, value in zip(self.axes, self.texts, board.flat):
            value = int(value)
            text.set_text(str(value) if value != 0 else "")
            ax.set_facecolor(self.COLORS.get(value, "#3C3A32"))

        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()
        plt.pause(0.001)

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            Called with the Matplotlib key event whenever a key is pressed in the window.
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        plt.close(self.fig)
        self.closed = True
