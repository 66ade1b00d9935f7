from utils.ksuid import generate_ksuid
from utils.clock import format_timestamp


class WorldSnapshot:
    """Immutable copy of a World, safe to log after the run ends."""

    __slots__ = ("id", "timestamp", "tick", "alive", "player", "size", "targets", "corridor")

    def __init__(self, tick, alive, player, size, targets, corridor, id=None, timestamp=None):
        self.id = id or generate_ksuid()
        self.timestamp = timestamp or format_timestamp()
        self.tick = tick
        self.alive = alive
        self.player = player
        self.size = size
        self.targets = targets
        self.corridor = corridor

    @classmethod
    def of(cls, world):
        return cls(
            tick=world.ticks,
            alive=world.alive,
            player=(world.player_col, world.player_row),
            size=(world.maxc, world.maxl),
            targets=(world.drift_target_left, world.drift_target_right),
            corridor=tuple(world.corridor),
        )

    def to_dict(self, rows=True):
        data = {
            "id": self.id,
            "timestamp": self.timestamp,
            "tick": self.tick,
            "alive": self.alive,
            "player": list(self.player),
            "size": list(self.size),
            "targets": list(self.targets),
        }
        if rows:
            data["corridor"] = [list(row) for row in self.corridor]
        return data
