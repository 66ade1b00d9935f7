"""Wall-clock timestamps and fixed-rate tick pacing."""

import time
from datetime import datetime, timezone


def now_micros():
    """Current time in microseconds since Unix epoch."""
    return int(time.time() * 1_000_000)


def format_timestamp(epoch_us=None):
    """Format timestamp as ISO 8601 with microseconds."""
    if epoch_us is None:
        epoch_us = now_micros()

    dt = datetime.fromtimestamp(epoch_us / 1_000_000, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"


class Pacer:
    """Sleeps until the next slot of a fixed tick schedule.

    A slow tick eats into the following sleep instead of pushing the whole
    schedule back. If the loop falls more than one interval behind, the
    schedule is reset rather than bursting to catch up.
    """

    def __init__(self, interval, clock=time.perf_counter, sleep=time.sleep):
        self.interval = interval
        self._clock = clock
        self._sleep = sleep
        self._next = None

    def wait(self):
        now = self._clock()
        if self._next is None:
            self._next = now
        self._next += self.interval

        wait_time = self._next - now
        if wait_time > 0:
            self._sleep(wait_time)
        elif wait_time < -self.interval:
            self._next = now
        return wait_time
