# -*- coding: utf-8 -*-
"""
Board engine for the sliding-tile game.

It includes functions for building and seeding boards, spawning tiles, sliding and merging rows,
rotating boards, applying moves in any direction and detecting won or finished games.
"""

from .gameboard import (
    DEFAULT_TARGET,
    TILE_SPAWN_PROBS,
    create_initial_board,
    empty_cells,
    is_game_over,
    is_won,
    rotate,
    spawn_tile,
)
from .gamemove import (
    Direction,
    MoveResult,
    apply_move,
    legal_directions,
    merge_row,
    next_state,
    slide_and_merge,
)

__all__ = [
    "DEFAULT_TARGET",
    "TILE_SPAWN_PROBS",
    "Direction",
    "MoveResult",
    "create_initial_board",
    "empty_cells",
    "spawn_tile",
    "merge_row",
    "slide_and_merge",
    "rotate",
    "apply_move",
    "next_state",
    "legal_directions",
    "is_won",
    "is_game_over",
]
