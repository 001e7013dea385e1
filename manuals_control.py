# -*- coding: utf-8 -*-
"""
Play the sliding-tile game with the keyboard.
"""
import argparse
import logging

from slide2048.config import GameConfig
from slide2048.game import GameController, GameSession
from slide2048.utils import WindowBoard


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Parameters
    ----------
    argv: list[str], optional
        Arguments to parse, defaults to ``sys.argv[1:]``.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(description="Play 2048 with the arrow keys")
    parser.add_argument("--size", type=int, default=4, help="Side of the square board")
    parser.add_argument("--target", type=int, default=2048, help="Tile value that wins the game")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the tile spawner")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    config = GameConfig(size=args.size, target=args.target, seed=args.seed)
    session = GameSession(config)

    window_board = WindowBoard(title="2048 Game", size=session.size)
    controller = GameController(session, window_board)
    window_board.register_key_handler(controller.key_handler)

    controller.redraw()

    # Blocking event loop
    window_board.show(block=True)
