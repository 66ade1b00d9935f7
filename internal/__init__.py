from internal.logging import LogLevel, StructuredLogger, get_logger, parse_level
from core.errors import BaseGameError, TerminalError, TerminalTooSmallError, InputError

__all__ = [
    "LogLevel",
    "StructuredLogger",
    "get_logger",
    "parse_level",
    "BaseGameError",
    "TerminalError",
    "TerminalTooSmallError",
    "InputError",
]
