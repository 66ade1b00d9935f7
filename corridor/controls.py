"""Key normalisation and player movement."""

from enum import Enum


class Key(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"
    OTHER = "other"


KEY_NAMES = {
    "w": Key.UP,
    "s": Key.DOWN,
    "a": Key.LEFT,
    "d": Key.RIGHT,
    "q": Key.QUIT,
    "KEY_UP": Key.UP,
    "KEY_DOWN": Key.DOWN,
    "KEY_LEFT": Key.LEFT,
    "KEY_RIGHT": Key.RIGHT,
}

# (dcol, drow) per movement key
MOVES = {
    Key.UP: (0, -1),
    Key.DOWN: (0, 1),
    Key.LEFT: (-1, 0),
    Key.RIGHT: (1, 0),
}


def key_from_name(name):
    """Map a character or terminal key name to a Key."""
    if not name:
        return Key.OTHER
    if len(name) == 1:
        name = name.lower()
    return KEY_NAMES.get(name, Key.OTHER)


def apply_input(world, key):
    """Move the player at most one cell, clamped to the playfield.

    QUIT, OTHER and None leave the world as is; quitting is the loop's job.
    """
    if not world.alive or key not in MOVES:
        return

    dcol, drow = MOVES[key]
    world.player_col = min(max(world.player_col + dcol, 1), world.maxc - 1)
    world.player_row = min(max(world.player_row + drow, 1), world.maxl - 1)
