# -*- coding: utf-8 -*-
"""
Game configuration.
"""
from dataclasses import dataclass

from slide2048.core.gameboard import DEFAULT_TARGET


@dataclass
class GameConfig:
    """
    Settings for a game session.

    Raises
    ------
    ValueError
        If ``size`` is not one of ``board_sizes`` or ``target`` is not a power of two of at least 4.
    """

    size: int = 4  # Side of the square grid
    target: int = DEFAULT_TARGET  # Tile value that wins the game
    board_sizes: tuple[int, ...] = (3, 4, 5, 6)  # Sizes the player can switch to
    seed: int | None = None  # Seed of the tile spawner, None for OS entropy

    def __post_init__(self):
        if any(size < 2 for size in self.board_sizes):
            raise ValueError(f'board sizes must be at least 2, got {self.board_sizes}')
        self.check_size(self.size)
        if self.target < 4 or self.target & (self.target - 1):
            raise ValueError(f'target must be a power of two of at least 4, got {self.target}')

    def check_size(self, size: int) -> int:
        """
        Validate a board size against the allowed sizes.

        Parameters
        ----------
        size : int
            Requested side of the grid.

        Returns
        -------
        int
            The size, unchanged.

        Raises
        ------
        ValueError
            If the size is not allowed.
        """
        if size not in self.board_sizes:
            raise ValueError(f'board size must be one of {self.board_sizes}, got {size}')
        return size
