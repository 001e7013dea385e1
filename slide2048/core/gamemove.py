"""
Move utilities for the sliding-tile game: the leftward row mover, direction dispatch and legal
direction detection.
"""

from enum import IntEnum
from numbers import Integral
from typing import NamedTuple

from numpy import array_equal, asarray, int64, ndarray, zeros, zeros_like
from numpy.random import Generator

from slide2048.core.gameboard import check_square, rotate, spawn_tile


class Direction(IntEnum):
    """
    Move direction.

    The value of each member is the number of quarter turns that reduces the move to a leftward one.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @property
    def rotations(self) -> int:
        """Quarter turns applied before sliding left."""
        return int(self.value)

    @classmethod
    def parse(cls, direction: 'Direction | str | int') -> 'Direction':
        """
        Resolve a direction given as a member, a name or a rotation count.

        Parameters
        ----------
        direction : Direction | str | int
            ``Direction.UP``, ``'up'`` (case insensitive) or ``1``.

        Returns
        -------
        Direction
            The matching member.

        Raises
        ------
        ValueError
            If the value does not name one of the four directions.
        """
        if isinstance(direction, cls):
            return direction
        if isinstance(direction, str):
            try:
                return cls[direction.strip().upper()]
            except KeyError:
                raise ValueError(f'unknown direction: {direction!r}') from None
        if isinstance(direction, bool) or not isinstance(direction, Integral):
            raise ValueError(f'unknown direction: {direction!r}')
        try:
            return cls(int(direction))
        except ValueError:
            raise ValueError(f'unknown direction: {direction!r}') from None


class MoveResult(NamedTuple):
    """
    Outcome of a single move.

    Attributes
    ----------
    board : ndarray
        The board after the move.
    score : int
        Sum of the tiles created by merges during the move.
    moved : bool
        Whether any cell changed.
    """

    board: ndarray
    score: int
    moved: bool


def merge_row(row: ndarray) -> tuple[int, ndarray, bool]:
    """
    Slide one row to the left, merging adjacent equal values.

    Parameters
    ----------
    row : ndarray
        A 1D array holding one row of the game board.

    Returns
    -------
    score : int
        The total score obtained from merging.
    merged_row : ndarray
        The new row, padded with zeros on the right to the input length.
    moved : bool
        Whether the new row differs from the input.

    Notes
    -----
    - Zeros (empty cells) are removed before merging.
    - Merging occurs from left to right in a single pass.
    - A tile created by a merge is never merged again in the same call.
    """
    row = asarray(row, dtype=int64)
    non_zero = row[row != 0]

    # ##: Initialize the score.
    result = []
    score = 0

    # ##: Iterate over the row and merge values.
    i = 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            merged = int(non_zero[i]) * 2
            result.append(merged)
            score += merged
            i += 2
        else:
            result.append(int(non_zero[i]))
            i += 1

    merged_row = zeros(len(row), dtype=int64)
    merged_row[: len(result)] = result
    return score, merged_row, not array_equal(merged_row, row)


def slide_and_merge(board: ndarray) -> tuple[int, ndarray, bool]:
    """
    Slide the game board to the left, merge adjacent cells, and compute the score.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array. Not modified.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_board : ndarray
        A new board after sliding and merging.
    moved : bool
        Whether any row changed.

    Notes
    -----
    - The function operates on rows, effectively sliding left.
    - For other directions, rotate the board before calling this function.
    """
    board = asarray(board, dtype=int64)
    result = zeros_like(board)
    score = 0
    moved = False

    for i, row in enumerate(board):
        row_score, merged_row, row_moved = merge_row(row)
        score += row_score
        moved = moved or row_moved
        result[i] = merged_row

    return score, result, moved


def apply_move(board: ndarray, direction: Direction | str | int) -> MoveResult:
    """
    Apply a move to the board without adding a new tile.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.
    direction : Direction | str | int
        The direction to move towards.

    Returns
    -------
    MoveResult
        The moved board, the merge score and whether anything changed.

    Raises
    ------
    ValueError
        If the direction is unknown or the board is not a non-empty square grid.

    Notes
    -----
    When nothing moves, the input board is returned as is with a score of 0. Callers must not spawn
    a tile in that case.
    """
    direction = Direction.parse(direction)
    board = check_square(board)

    rotated = rotate(board, direction.rotations)
    score, updated, moved = slide_and_merge(rotated)
    if not moved:
        return MoveResult(board, 0, False)

    return MoveResult(rotate(updated, 4 - direction.rotations), score, True)


def next_state(board: ndarray, direction: Direction | str | int, rng: Generator | int | None = None) -> MoveResult:
    """
    Apply a move and, if the board changed, spawn one new tile.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.
    direction : Direction | str | int
        The direction to move towards.
    rng : Generator | int | None, optional
        Source of randomness for the new tile, or a seed for a new one.

    Returns
    -------
    MoveResult
        The board after the move and the spawn, the merge score and whether the move was accepted.
    """
    result = apply_move(board, direction)
    if not result.moved:
        return result
    return result._replace(board=spawn_tile(result.board, rng))


def legal_directions_mask(board: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move changes the board.
    """
    state = asarray(board)

    # ##>: Horizontal and vertical merges are shared by opposite directions.
    left_cols, right_cols = state[:, :-1], state[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)

    top_rows, bottom_rows = state[:-1, :], state[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows)

    # ##>: A tile can slide when the cell next to it, towards the move, is empty.
    left = (left_cols == 0) & (right_cols != 0)
    right = (right_cols == 0) & (left_cols != 0)
    up = (top_rows == 0) & (bottom_rows != 0)
    down = (bottom_rows == 0) & (top_rows != 0)

    return (
        bool(left.any() or h_can_merge.any()),
        bool(up.any() or v_can_merge.any()),
        bool(right.any() or h_can_merge.any()),
        bool(down.any() or v_can_merge.any()),
    )


def legal_directions(board: ndarray) -> list[Direction]:
    """
    Determine the directions that would change the board.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Directions in (left, up, right, down) order.
    """
    mask = legal_directions_mask(board)
    return [direction for direction in Direction if mask[direction.value]]
