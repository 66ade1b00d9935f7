from config import GameConfig
from core.errors import InputError
from corridor.controls import Key, apply_input
from corridor.physics import advance
from corridor.state import WorldSnapshot
from display.renderer import draw, draw_farewell
from internal.logging import get_logger
from utils.clock import Pacer


class GameState:
    RUNNING = "running"
    DEAD = "dead"
    QUIT = "quit"
    TERMINATED = "terminated"


def poll_latest(source, timeout):
    """Most recent key queued on `source`, or None.

    Waits up to `timeout` for the first event, then drains whatever else is
    already buffered so a backlog never turns into input lag. QUIT anywhere
    in the backlog wins over movement. A failed read counts as no event.
    """
    try:
        if not source.poll(timeout):
            return None
        key = source.read()
        while source.poll(0):
            latest = source.read()
            if key is not Key.QUIT:
                key = latest
    except InputError as exc:
        get_logger().warn("input read failed", error=exc, error_id=exc.error_id)
        return None
    return key


class Game:
    """Drives one run: input, physics, render, pace, until dead or quit."""

    def __init__(self, world, surface, source, config=None, pacer=None):
        self.world = world
        self.surface = surface
        self.source = source
        self.config = config or GameConfig()
        self.pacer = pacer or Pacer(self.config.tick_interval)
        self._state = GameState.RUNNING
        self._log = get_logger()

    @property
    def state(self):
        return self._state

    @property
    def running(self):
        return self._state == GameState.RUNNING

    def _transition(self, state):
        self._log.info(f"game {self._state} -> {state}", tick=self.world.ticks)
        self._state = state

    def render(self):
        draw(self.surface, self.world, self.config.wall_glyph, self.config.player_glyph)

    def tick(self, key=None):
        """One tick with an already polled key. Returns the new state."""
        if not self.running:
            return self._state

        if key is Key.QUIT:
            self._transition(GameState.QUIT)
            return self._state

        apply_input(self.world, key)
        advance(self.world)
        self.render()

        if not self.world.alive:
            world = self.world
            self._log.info("player hit the wall", tick=world.ticks, col=world.player_col,
                           row=world.player_row, walls=list(world.player_row_walls()))
            self._transition(GameState.DEAD)
        return self._state

    def run(self):
        world = self.world
        self._log.info("game start", columns=world.maxc, rows=world.maxl,
                       tick_interval=self.config.tick_interval, seed=self.config.seed)
        self.surface.hide_cursor()
        self.render()

        while self.running:
            key = poll_latest(self.source, self.config.poll_timeout)
            if self.tick(key) != GameState.RUNNING:
                break
            self.pacer.wait()

        return self.finish()

    def finish(self):
        """Farewell render and TERMINATED, exactly once."""
        if self._state == GameState.TERMINATED:
            return self._state
        died = self._state == GameState.DEAD
        draw_farewell(self.surface, self.world, died)
        self._transition(GameState.TERMINATED)
        self._log.info("game over", died=died, snapshot=WorldSnapshot.of(self.world).to_dict(rows=False))
        return self._state
