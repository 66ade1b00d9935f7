"""World holds everything the game mutates during a run."""

import random

from core.errors import TerminalTooSmallError

# Starting corridor is 10 columns wide, drifting toward 20.
START_HALF_WIDTH = 5
START_TARGET_HALF_WIDTH = 10
MIN_COLUMNS = 12
MIN_ROWS = 3


class World:
    """Player position, corridor rows and drift targets for one run.

    Rows are (left_wall, right_wall) tuples, index 0 is the top of the
    screen. Only corridor.controls moves the player and only
    corridor.physics touches the rest.
    """

    def __init__(self, maxc, maxl, player_col, player_row, corridor,
                 drift_target_left, drift_target_right, rng=None):
        self.maxc = maxc
        self.maxl = maxl
        self.player_col = player_col
        self.player_row = player_row
        self.corridor = list(corridor)
        self.drift_target_left = drift_target_left
        self.drift_target_right = drift_target_right
        self.alive = True
        self.ticks = 0
        self.rng = rng or random.Random()

    def player_row_walls(self):
        return self.corridor[self.player_row]


def create_world(maxc, maxl, seed=None, rng=None):
    """Centered corridor, player in the middle of the bottom row."""
    if maxc < MIN_COLUMNS or maxl < MIN_ROWS:
        raise TerminalTooSmallError(maxc, maxl, MIN_COLUMNS, MIN_ROWS)

    center = maxc // 2
    row = (center - START_HALF_WIDTH, center + START_HALF_WIDTH)
    return World(
        maxc=maxc,
        maxl=maxl,
        player_col=center,
        player_row=maxl - 1,
        corridor=[row] * maxl,
        drift_target_left=max(0, center - START_TARGET_HALF_WIDTH),
        drift_target_right=min(maxc, center + START_TARGET_HALF_WIDTH),
        rng=rng or random.Random(seed),
    )
