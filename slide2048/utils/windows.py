# -*- coding: utf-8 -*-
"""
Graphical User Interface for the sliding-tile game

This module provides functionality to create and manage a graphical window for displaying the
game board. It utilizes Matplotlib for rendering and handling user interactions, offering a visual
representation of the board, the score and the win or game over messages.
"""
import logging
from typing import Callable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event
from numpy import ndarray

logger = logging.getLogger(__name__)


class WindowBoard:
    """
    A class for rendering and managing the game board using Matplotlib.

    Methods
    -------
    show_image(board: np.ndarray)
        Update the display with the current game board state.
    show_scores(score: int, best_score: int)
        Update the score line above the board.
    show_message(text: str)
        Display a message over the board.
    clear_message()
        Hide the message.
    resize(size: int)
        Rebuild the grid for another board size.
    register_key_handler(key_handler: Callable)
        Register a function to handle keyboard events.
    show(block: bool = True)
        Display the game window.
    close()
        Close the game window.
    """

    # ##: Colors mapping for different tile values.
    COLORS = {
        0: "#FDE68A",
        2: "#FEF3C7",
        4: "#FDE68A",
        8: "#FDBA74",
        16: "#FB923C",
        32: "#F97316",
        64: "#EF4444",
        128: "#FACC15",
        256: "#EAB308",
        512: "#CA8A04",
        1024: "#A16207",
        2048: "#854D0E",
    }
    BACKGROUND = "#FCD34D"
    DEFAULT_COLOR = "#1F2937"
    DARK_TEXT = "#1F2937"
    LIGHT_TEXT = "#FFFFFF"

    def __init__(self, title: str, size: int):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            The size of the game board (e.g., 4 for a 4x4 board).
        """
        self.fig, self.axe = plt.subplots()
        self.fig.canvas.manager.set_window_title(title)
        self.fig.subplots_adjust(left=0.02, bottom=0.02, right=0.98, top=0.9, wspace=0.05, hspace=0.05)
        self.fig.patch.set_facecolor(self.BACKGROUND)
        self.axe.set_axis_off()

        self.scores = self.fig.suptitle("", fontsize="large", fontweight="bold")
        self.message = self.fig.text(
            0.5,
            0.5,
            "",
            ha="center",
            va="center",
            wrap=True,
            zorder=10,
            fontsize="large",
            fontweight="bold",
            bbox={"boxstyle": "round", "facecolor": "white", "alpha": 0.9},
        )
        self.message.set_visible(False)

        self.size = 0
        self.axes = []
        self.texts = []
        self._setup_axes(size)

        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _setup_axes(self, size: int):
        """
        Set up the axes for the game board, one per cell.

        Parameters
        ----------
        size : int
            The size of the game board.
        """
        for ax in self.axes:
            ax.remove()

        self.size = size
        self.texts = []
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        for ax in self.axes:
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="demibold")
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])
            ax.set_xticklabels([])
            ax.set_yticklabels([])

    def _close_handler(self, event: Optional[Event] = None):
        """
        Handle the window close event.

        Parameters
        ----------
        event : Optional[Event]
            The close event (not used but required for event handling).
        """
        self.closed = True

    def _refresh(self):
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

    def resize(self, size: int):
        """
        Rebuild the cells for another board size.

        Parameters
        ----------
        size : int
            The new size of the game board.
        """
        logger.debug("Rebuilding window for a %dx%d board", size, size)
        self._setup_axes(size)
        self._refresh()

    def show_image(self, board: ndarray):
        """
        Show or update the game board.

        Parameters
        ----------
        board : ndarray
            The current state of the game board to be displayed.

        Notes
        -----
        - Tiles above 2048 share a dark color.
        - Large values are drawn with a smaller font.
        """
        for ax, text, value in zip(self.axes, self.texts, board.flat):
            value = int(value)
            text.set_text(str(value) if value != 0 else "")
            text.set_color(self.DARK_TEXT if value <= 4 else self.LIGHT_TEXT)
            text.set_fontsize("medium" if value >= 1000 else "large" if value >= 100 else "x-large")
            ax.set_facecolor(self.COLORS.get(value, self.DEFAULT_COLOR))

        self._refresh()
        plt.pause(0.001)

    def show_scores(self, score: int, best_score: int):
        """
        Update the score line.

        Parameters
        ----------
        score : int
            Score of the current game.
        best_score : int
            Best score seen so far.
        """
        self.scores.set_text(f"SCORE {score}    BEST {best_score}")

    def show_message(self, text: str):
        """
        Display a message over the board.

        Parameters
        ----------
        text : str
            Message to display.
        """
        self.message.set_text(text)
        self.message.set_visible(True)
        self._refresh()

    def clear_message(self):
        """
        Hide the message.
        """
        self.message.set_visible(False)
        self._refresh()

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            A function to handle keyboard events.
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
        """
        Close the window.
        """
        plt.close(self.fig)
        self.closed = True
