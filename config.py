import json
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class GameConfig:
    __slots__ = ("tick_interval", "poll_timeout", "seed", "wall_glyph", "player_glyph")

    def __init__(self, tick_interval=0.1, poll_timeout=0.01, seed=None, wall_glyph="+", player_glyph="P"):
        self.tick_interval = tick_interval
        self.poll_timeout = poll_timeout
        self.seed = seed
        self.wall_glyph = wall_glyph
        self.player_glyph = player_glyph


class LoggingConfig:
    __slots__ = ("level", "file", "crash_file")

    def __init__(self, level="INFO", file="logs/corridor.log", crash_file="logs/crash.log"):
        self.level = level
        self.file = file
        self.crash_file = crash_file


class Config:
    __slots__ = ("game", "logging")

    def __init__(self, game=None, logging=None):
        self.game = game or GameConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            GameConfig(**d.get("game", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
