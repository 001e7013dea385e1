"""Sliding-tile puzzle game (2048-style) on a square grid of any size."""

from .config import GameConfig
from .core import Direction, MoveResult, apply_move, create_initial_board, is_game_over, is_won

__all__ = ["GameConfig", "Direction", "MoveResult", "apply_move", "create_initial_board", "is_won", "is_game_over"]
