import json
import os
import sys
import threading
from enum import IntEnum
from utils.clock import format_timestamp

class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

_logger = None
_logger_lock = threading.Lock()

class StructuredLogger:
    """JSON-lines logger. One record per call, written to `stream`."""

    def __init__(self, level=LogLevel.INFO, stream=None, session=None):
        self.level = level
        self.stream = stream
        self.session = session

    def _emit(self, level, message, error=None, **kwargs):
        if level < self.level:
            return
        try:
            record = {"timestamp": format_timestamp(), "level": level.name, "msg": message, **kwargs}
            if self.session:
                record["session"] = self.session
            if error:
                record["err"] = str(error)
            # Resolved per call so a test harness swapping sys.stderr is honoured.
            stream = self.stream if self.stream is not None else sys.stderr
            print(json.dumps(record, default=str), file=stream, flush=True)
        except Exception:
            pass

    def debug(self, message, **kwargs):
        self._emit(LogLevel.DEBUG, message, **kwargs)

    def info(self, message, **kwargs):
        self._emit(LogLevel.INFO, message, **kwargs)

    def warn(self, message, error=None, **kwargs):
        self._emit(LogLevel.WARN, message, error, **kwargs)

    def error(self, message, error=None, **kwargs):
        self._emit(LogLevel.ERROR, message, error, **kwargs)

    @classmethod
    def configure(cls, min_level=LogLevel.INFO, stream=None, session=None):
        global _logger
        with _logger_lock:
            _logger = cls(min_level, stream, session)
        return _logger

def get_logger():
    global _logger
    if _logger is None:
        with _logger_lock:
            if _logger is None:
                _logger = StructuredLogger()
    return _logger


def parse_level(name, default=LogLevel.INFO):
    """Map a config level name ("debug", "WARNING", ...) to a LogLevel."""
    if not name:
        return default
    name = name.upper()
    if name == "WARNING":
        name = "WARN"
    try:
        return LogLevel[name]
    except KeyError:
        return default


def open_log_file(path):
    """Open the log file for appending, creating its directory."""
    dir_path = os.path.dirname(path)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)
    return open(path, "a", encoding="utf-8")
