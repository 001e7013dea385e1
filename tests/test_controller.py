"""
Tests for keyboard handling: key mapping and the window controller.
"""

from types import SimpleNamespace
from unittest import TestCase, main

import numpy as np

from slide2048.config import GameConfig
from slide2048.core.gamemove import Direction
from slide2048.game.controller import GAME_OVER_MESSAGE, WIN_MESSAGE, GameController
from slide2048.game.keys import direction_for_key
from slide2048.game.session import GameSession


class FakeWindow:
    """Records what the controller asks the window to draw."""

    def __init__(self, size: int):
        self.size = size
        self.boards = []
        self.scores = []
        self.message = None
        self.closed = False

    def resize(self, size: int):
        self.size = size

    def show_image(self, board):
        self.boards.append(np.array(board))

    def show_scores(self, score: int, best_score: int):
        self.scores.append((score, best_score))

    def show_message(self, text: str):
        self.message = text

    def clear_message(self):
        self.message = None

    def close(self):
        self.closed = True


def press(controller: GameController, key: str | None):
    controller.key_handler(SimpleNamespace(key=key))


class TestKeyMapping(TestCase):
    """Test key name translation."""

    def test_arrow_keys(self):
        """Browser and matplotlib arrow names map to directions."""
        self.assertEqual(direction_for_key('ArrowUp'), Direction.UP)
        self.assertEqual(direction_for_key('ArrowDown'), Direction.DOWN)
        self.assertEqual(direction_for_key('ArrowLeft'), Direction.LEFT)
        self.assertEqual(direction_for_key('ArrowRight'), Direction.RIGHT)
        self.assertEqual(direction_for_key('up'), Direction.UP)
        self.assertEqual(direction_for_key('right'), Direction.RIGHT)

    def test_other_keys_are_ignored(self):
        """Every other key maps to nothing."""
        for key in ('a', 'Enter', ' ', 'shift', '', None):
            with self.subTest(key=key):
                self.assertIsNone(direction_for_key(key))


class TestGameController(TestCase):
    """Test the controller between keys, session and window."""

    def setUp(self):
        """Initialize a seeded session drawn in a fake window."""
        self.session = GameSession(GameConfig(seed=3))
        self.window = FakeWindow(self.session.size)
        self.controller = GameController(self.session, self.window)

    def test_arrow_moves_and_redraws(self):
        """Arrow key plays a move and redraws board and scores."""
        self.session.board = np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        press(self.controller, 'left')

        self.assertEqual(self.session.score, 4)
        self.assertEqual(self.window.scores[-1], (4, 4))
        np.testing.assert_array_equal(self.window.boards[-1], self.session.board)

    def test_unmapped_key_does_nothing(self):
        """Keys other than the controls are ignored."""
        board = self.session.board
        press(self.controller, 'x')
        press(self.controller, None)

        self.assertIs(self.session.board, board)
        self.assertEqual(self.window.boards, [])

    def test_win_message_blocks_moves_until_continue(self):
        """After a win, arrows wait for the player to keep playing."""
        self.session.board = np.array([[1024, 1024, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        press(self.controller, 'left')
        self.assertEqual(self.window.message, WIN_MESSAGE)

        board = self.session.board
        press(self.controller, 'right')
        self.assertIs(self.session.board, board)

        press(self.controller, 'c')
        self.assertIsNone(self.window.message)
        press(self.controller, 'right')
        self.assertIsNot(self.session.board, board)

    def test_game_over_message(self):
        """Game over shows the final score."""
        session = GameSession(GameConfig(size=2, board_sizes=(2, 3), seed=0))
        window = FakeWindow(2)
        controller = GameController(session, window)
        session.board = np.array([[4, 8], [0, 16]])

        press(controller, 'ArrowLeft')

        self.assertEqual(window.message, GAME_OVER_MESSAGE.format(score=0))

    def test_restart(self):
        """Restart key deals a new game and clears messages."""
        self.window.message = WIN_MESSAGE
        self.controller.awaiting_continue = True
        self.session.score = 40

        press(self.controller, 'n')

        self.assertEqual(self.session.score, 0)
        self.assertIsNone(self.window.message)
        self.assertFalse(self.controller.awaiting_continue)

    def test_digit_resizes(self):
        """Digit keys switch to an allowed board size."""
        press(self.controller, '5')
        self.assertEqual(self.session.size, 5)
        self.assertEqual(self.window.size, 5)
        self.assertEqual(self.window.boards[-1].shape, (5, 5))

        press(self.controller, '9')
        self.assertEqual(self.session.size, 5)

    def test_non_ascii_digit_is_ignored(self):
        """Superscript digits are not board sizes and change nothing."""
        board = self.session.board
        press(self.controller, '²')

        self.assertEqual(self.session.size, 4)
        self.assertIs(self.session.board, board)
        self.assertEqual(self.window.boards, [])

    def test_escape_closes(self):
        """Escape closes the window."""
        press(self.controller, 'escape')
        self.assertTrue(self.window.closed)


if __name__ == '__main__':
    main()
