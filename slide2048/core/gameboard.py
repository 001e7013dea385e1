"""
Board construction, tile spawning, rotation and terminal checks for the sliding-tile game.

Every function here treats the board as an immutable value: inputs are never written to and
boards handed back to the caller are fresh read-only arrays.
"""

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, asarray, int64, ndarray, rot90, zeros
from numpy.random import Generator, default_rng

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Tile value reached to win a standard game.
DEFAULT_TARGET = 2048

# ##>: Number of tiles placed on a fresh board.
INITIAL_TILES = 2


def freeze(board: ndarray) -> ndarray:
    """
    Mark a board as read-only and return it.

    Parameters
    ----------
    board : ndarray
        A board owned by the caller (usually a fresh copy).

    Returns
    -------
    ndarray
        The same array, with its ``writeable`` flag cleared.
    """
    board.setflags(write=False)
    return board


def as_generator(rng: Generator | int | None = None) -> Generator:
    """
    Normalize a random source into a numpy ``Generator``.

    Parameters
    ----------
    rng : Generator | int | None
        An existing generator (returned unchanged), a seed, or None for fresh OS entropy.

    Returns
    -------
    Generator
        The generator to draw from.
    """
    if isinstance(rng, Generator):
        return rng
    return default_rng(rng)


def check_square(board: ndarray) -> ndarray:
    """
    Validate that a board is a non-empty square grid.

    Parameters
    ----------
    board : ndarray
        Board to check.

    Returns
    -------
    ndarray
        The board as an ndarray.

    Raises
    ------
    ValueError
        If the board is not two-dimensional, is empty or is not square.
    """
    board = asarray(board)
    if board.ndim != 2:
        raise ValueError(f'board must be two-dimensional, got {board.ndim} dimension(s)')
    rows, cols = board.shape
    if rows == 0 or rows != cols:
        raise ValueError(f'board must be a non-empty square grid, got shape {board.shape}')
    return board


def empty_cells(board: ndarray) -> list[tuple[int, int]]:
    """
    List the positions of all empty cells, in row-major order.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    list[tuple[int, int]]
        ``(row, col)`` of every cell holding zero.
    """
    return [(int(row), int(col)) for row, col in argwhere(asarray(board) == 0)]


def spawn_tile(board: ndarray, rng: Generator | int | None = None) -> ndarray:
    """
    Place one new tile (2 or 4) on a uniformly chosen empty cell.

    Parameters
    ----------
    board : ndarray
        The current game board. Not modified.
    rng : Generator | int | None, optional
        Source of randomness, or a seed for a new one.

    Returns
    -------
    ndarray
        A new read-only board with the tile added, or the input board itself when no cell is empty.

    Notes
    -----
    - Two independent draws are consumed: one integer for the cell, one float for the value.
    - A full board is not an error; callers that need to know must look for empty cells first.
    """
    cells = empty_cells(board)
    if not cells:
        return board

    rng = as_generator(rng)
    cell = cells[int(rng.integers(len(cells)))]
    value = 2 if rng.random() < TILE_SPAWN_PROBS[2] else 4

    new_board = asarray(board, dtype=int64).copy()
    new_board[cell] = value
    return freeze(new_board)


def create_initial_board(size: int, rng: Generator | int | None = None) -> ndarray:
    """
    Build an empty ``size`` x ``size`` board seeded with two random tiles.

    Parameters
    ----------
    size : int
        Side length of the square grid. Trusted to be at least 2.
    rng : Generator | int | None, optional
        Source of randomness, or a seed for a new one.

    Returns
    -------
    ndarray
        A new read-only board with exactly two tiles.
    """
    rng = as_generator(rng)
    board = freeze(zeros((size, size), dtype=int64))
    for _ in range(INITIAL_TILES):
        board = spawn_tile(board, rng)
    return board


def rotate(board: ndarray, turns: int = 1) -> ndarray:
    """
    Rotate the board by quarter turns.

    One turn sends the input cell ``(col, N - 1 - row)`` to the output cell ``(row, col)``, so
    the top row becomes the left column. Four turns give back the original board.

    Parameters
    ----------
    board : ndarray
        A non-empty square board.
    turns : int, optional
        Number of quarter turns (taken modulo 4), by default 1.

    Returns
    -------
    ndarray
        A new read-only rotated board.

    Raises
    ------
    ValueError
        If the board is not a non-empty square grid.
    """
    board = check_square(board)
    return freeze(rot90(board, k=turns % 4).copy())


def is_won(board: ndarray, target: int = DEFAULT_TARGET) -> bool:
    """
    Check whether any tile has reached the target value.

    Parameters
    ----------
    board : ndarray
        The game board.
    target : int, optional
        Tile value that wins the game, by default 2048.

    Returns
    -------
    bool
        True if at least one cell equals ``target``.
    """
    return bool(np_any(asarray(board) == target))


def is_game_over(board: ndarray) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    bool
        True if the game is over (no moves possible), False otherwise.

    Notes
    -----
    The game is over when there are no empty cells AND no adjacent cells have the same value.
    """
    state = asarray(board)
    return bool(
        np_all(state != 0) and not np_any(state[:-1] == state[1:]) and not np_any(state[:, :-1] == state[:, 1:])
    )
