"""Pytest fixtures for all tests."""

import random
from contextlib import contextmanager

import pytest

from config import GameConfig
from corridor.world import World
from display.renderer import GridSurface
from utils.clock import Pacer


class ScriptedInput:
    """Input source fed one batch of queued keys per tick.

    A poll with a positive timeout marks the start of a tick and loads the
    next batch; zero-timeout polls only look at what is still queued.
    """

    def __init__(self, batches=()):
        self.batches = [list(batch) for batch in batches]
        self.queue = []
        self.polls = 0

    def poll(self, timeout):
        self.polls += 1
        if timeout > 0:
            self.queue = self.batches.pop(0) if self.batches else []
        return bool(self.queue)

    def read(self):
        return self.queue.pop(0)


def make_world(maxc=80, maxl=24, col=40, row=23, walls=(35, 45), targets=None, seed=7):
    targets = targets or walls
    return World(
        maxc=maxc,
        maxl=maxl,
        player_col=col,
        player_row=row,
        corridor=[walls] * maxl,
        drift_target_left=targets[0],
        drift_target_right=targets[1],
        rng=random.Random(seed),
    )


@pytest.fixture
def world():
    """80x24 world, every row (35, 45), player bottom centre."""
    return make_world()


@pytest.fixture
def surface():
    """Grid surface matching the default world."""
    return GridSurface(80, 24)


@pytest.fixture
def game_config():
    """Fast game config for loop tests."""
    return GameConfig(tick_interval=0.1, poll_timeout=0.01, seed=7)


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def pacer(sleeps):
    """Pacer on a frozen clock that records instead of sleeping."""
    return Pacer(0.1, clock=lambda: 0.0, sleep=sleeps.append)


class StubKeystroke(str):
    def __new__(cls, text, name=None):
        keystroke = super().__new__(cls, text)
        keystroke.name = name
        keystroke.is_sequence = name is not None
        return keystroke


class StubTerminal:
    """Just enough of blessed.Terminal for the adapter."""

    home = "<home>"
    clear = "<clear>"
    hide_cursor = "<hide>"
    normal_cursor = "<show>"

    def __init__(self, keys=(), width=80, height=24, tty=True):
        self.keys = list(keys)
        self.width = width
        self.height = height
        self.is_a_tty = tty
        self.modes = []

    def move_xy(self, x, y):
        return f"<{x},{y}>"

    def inkey(self, timeout=None):
        return self.keys.pop(0) if self.keys else StubKeystroke("")

    @contextmanager
    def cbreak(self):
        self.modes.append("cbreak")
        try:
            yield
        finally:
            self.modes.append("-cbreak")

    @contextmanager
    def hidden_cursor(self):
        self.modes.append("hidden")
        try:
            yield
        finally:
            self.modes.append("-hidden")
