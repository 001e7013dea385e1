"""Keyboard key names to move directions."""

from slide2048.core.gamemove import Direction

# ##: Browser key names and matplotlib key names.
KEY_DIRECTIONS: dict[str, Direction] = {
    'ArrowUp': Direction.UP,
    'ArrowDown': Direction.DOWN,
    'ArrowLeft': Direction.LEFT,
    'ArrowRight': Direction.RIGHT,
    'up': Direction.UP,
    'down': Direction.DOWN,
    'left': Direction.LEFT,
    'right': Direction.RIGHT,
}


def direction_for_key(key: str | None) -> Direction | None:
    """
    Translate a key name into a direction.

    Parameters
    ----------
    key : str | None
        Key name as reported by the event source.

    Returns
    -------
    Direction | None
        The direction for arrow keys, None for every other key.
    """
    if key is None:
        return None
    return KEY_DIRECTIONS.get(key)
