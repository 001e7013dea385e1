"""Game session for the sliding-tile game: board, score and won/over state between moves."""

import logging
from collections.abc import Callable
from enum import Enum

from numpy import ndarray
from numpy.random import Generator

from slide2048.config import GameConfig
from slide2048.core.gameboard import as_generator, create_initial_board, is_game_over, is_won
from slide2048.core.gamemove import Direction, MoveResult, next_state

logger = logging.getLogger(__name__)


class GameStatus(str, Enum):
    """State of a session."""

    PLAYING = 'playing'
    WON = 'won'
    OVER = 'over'


class GameSession:
    """
    A single player's game.

    The session owns the current board, the running and best scores and the won/over flags. It calls
    into the board engine for every move and notifies subscribers when something changes.

    Events
    ------
    change
        After every accepted move, restart and resize. Callback receives the session.
    win
        The first time the target tile appears. Callback receives the session.
    game_over
        When no move is left. Callback receives the session.
    """

    EVENTS = ('change', 'win', 'game_over')

    def __init__(self, config: GameConfig | None = None, rng: Generator | int | None = None):
        """
        Initialize a session and deal the first board.

        Parameters
        ----------
        config : GameConfig, optional
            Game settings (default is ``GameConfig()``).
        rng : Generator | int, optional
            Source of randomness for the tiles, or a seed for a new one. Built from ``config.seed`` when
            omitted.
        """
        self.config = config or GameConfig()
        self._rng = as_generator(rng if rng is not None else self.config.seed)
        self._listeners: dict[str, list[Callable[['GameSession'], None]]] = {event: [] for event in self.EVENTS}

        self.size = self.config.size
        self.best_score = 0
        self.board: ndarray
        self.score = 0
        self.won = False
        self.over = False

        self.restart()

    @property
    def target(self) -> int:
        """Tile value that wins the game."""
        return self.config.target

    @property
    def status(self) -> GameStatus:
        """Current state of the session."""
        if self.over:
            return GameStatus.OVER
        if self.won:
            return GameStatus.WON
        return GameStatus.PLAYING

    def subscribe(self, event: str, callback: Callable[['GameSession'], None]) -> None:
        """
        Register a callback for an event.

        Parameters
        ----------
        event : str
            One of ``'change'``, ``'win'`` or ``'game_over'``.
        callback : Callable
            Called with the session when the event fires.

        Raises
        ------
        ValueError
            If the event is unknown.
        """
        if event not in self._listeners:
            raise ValueError(f'unknown event {event!r}, expected one of {self.EVENTS}')
        self._listeners[event].append(callback)

    def _notify(self, event: str) -> None:
        for callback in self._listeners[event]:
            callback(self)

    def restart(self) -> ndarray:
        """
        Start a new game with the current size.

        The best score is kept; everything else is reset.

        Returns
        -------
        ndarray
            The new board.
        """
        self.board = create_initial_board(self.size, self._rng)
        self.score = 0
        self.won = False
        self.over = False
        logger.info('New %dx%d game', self.size, self.size)

        self._notify('change')
        return self.board

    def resize(self, size: int) -> ndarray:
        """
        Switch to another board size and start a new game.

        Parameters
        ----------
        size : int
            New side of the grid; must be one of ``config.board_sizes``.

        Returns
        -------
        ndarray
            The new board.

        Raises
        ------
        ValueError
            If the size is not allowed.
        """
        self.size = self.config.check_size(size)
        return self.restart()

    def move(self, direction: Direction | str | int) -> MoveResult:
        """
        Play one move.

        Parameters
        ----------
        direction : Direction | str | int
            The direction to move towards.

        Returns
        -------
        MoveResult
            The new board (with the spawned tile), the score gained and whether the move was accepted.

        Raises
        ------
        ValueError
            If the direction is unknown.

        Notes
        -----
        - Once the game is over, moves are ignored.
        - A move that changes nothing spawns no tile and scores nothing.
        """
        direction = Direction.parse(direction)
        if self.over:
            logger.debug('Ignoring %s: game is over', direction.name.lower())
            return MoveResult(self.board, 0, False)

        result = next_state(self.board, direction, self._rng)
        if not result.moved:
            logger.debug('Ignoring %s: nothing moves', direction.name.lower())
            return result

        self.board = result.board
        self.score += result.score
        self.best_score = max(self.best_score, self.score)
        logger.debug('Moved %s, gained %d, score %d', direction.name.lower(), result.score, self.score)

        self._notify('change')

        if not self.won and is_won(self.board, self.target):
            self.won = True
            logger.info('Reached %d with score %d', self.target, self.score)
            self._notify('win')

        if is_game_over(self.board):
            self.over = True
            logger.info('Game over with score %d', self.score)
            self._notify('game_over')

        return result

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        print(f'score={self.score} best={self.best_score}')
        for row in self.board.tolist():
            print(' \t'.join(map(str, row)))
