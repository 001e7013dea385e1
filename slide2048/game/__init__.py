# -*- coding: utf-8 -*-
"""
Game session, keyboard mapping and window control built on top of the board engine.
"""

from .controller import GameController
from .keys import direction_for_key
from .session import GameSession, GameStatus

__all__ = ["GameSession", "GameStatus", "GameController", "direction_for_key"]
