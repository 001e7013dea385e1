# -*- coding: utf-8 -*-
"""
Keyboard control of a game session drawn in a window.
"""
import logging
from typing import Any

from slide2048.game.keys import direction_for_key
from slide2048.game.session import GameSession
from slide2048.utils.windows import WindowBoard

logger = logging.getLogger(__name__)

WIN_MESSAGE = 'You win! Press c to keep playing or n for a new game.'
GAME_OVER_MESSAGE = 'Game over! Score: {score}. Press n to try again.'


class GameController:
    """
    Bridge between key events, a game session and its window.

    Arrow keys move the tiles, ``n`` or ``backspace`` restart, digit keys change the board size,
    ``c`` dismisses the win message and ``escape`` closes the window.
    """

    def __init__(self, session: GameSession, window: WindowBoard):
        """
        Wire the session events to the window.

        Parameters
        ----------
        session : GameSession
            The game to control.
        window : WindowBoard
            Window drawing the game board.
        """
        self.session = session
        self.window = window
        self.awaiting_continue = False

        session.subscribe('change', lambda _: self.redraw())
        session.subscribe('win', lambda _: self._on_win())
        session.subscribe('game_over', lambda _: self._on_game_over())

    def redraw(self):
        """
        Redraw the game board, score and best score.
        """
        if self.window.size != self.session.size:
            self.window.resize(self.session.size)
        self.window.show_scores(self.session.score, self.session.best_score)
        self.window.show_image(self.session.board)

    def _on_win(self):
        self.awaiting_continue = True
        self.window.show_message(WIN_MESSAGE)

    def _on_game_over(self):
        self.awaiting_continue = False
        self.window.show_message(GAME_OVER_MESSAGE.format(score=self.session.score))

    def restart(self, size: int | None = None):
        """
        Start a new game, optionally with another board size.

        Parameters
        ----------
        size : int, optional
            New side of the grid.
        """
        self.awaiting_continue = False
        self.window.clear_message()
        if size is None:
            self.session.restart()
        else:
            self.session.resize(size)

    def continue_game(self):
        """
        Dismiss the win message and keep playing.
        """
        self.awaiting_continue = False
        self.window.clear_message()

    def key_handler(self, event: Any):
        """
        Handle the keyboard.

        Parameters
        ----------
        event: Any
            Event to handle, with a ``key`` attribute.
        """
        key = event.key
        logger.debug('Pressed %s', key)

        if key == 'escape':
            self.window.close()
            return None

        if key in ('backspace', 'n'):
            self.restart()
            return None

        if key in {str(size) for size in self.session.config.board_sizes}:
            self.restart(size=int(key))
            return None

        if key == 'c' and self.awaiting_continue:
            self.continue_game()
            return None

        direction = direction_for_key(key)
        if direction is None:
            return None

        if self.awaiting_continue or self.session.over:
            logger.debug('Ignoring %s while a message is shown', key)
            return None

        self.session.move(direction)
        return None
