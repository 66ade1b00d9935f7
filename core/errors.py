"""Game errors with tracking IDs."""

from utils.clock import format_timestamp
from utils.ksuid import generate_ksuid


class BaseGameError(Exception):
    """Base error with unique ID and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.error_id = generate_ksuid()
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"


class TerminalError(BaseGameError):
    """Terminal capability failures (not a tty, size query, write). Fatal."""

    def __init__(self, message, operation=None, **kwargs):
        context = kwargs.pop("context", {})
        if operation:
            context["operation"] = operation
        super().__init__(message, context=context, **kwargs)


class TerminalTooSmallError(TerminalError):
    """Screen cannot hold the starting corridor."""

    def __init__(self, columns, rows, min_columns, min_rows, **kwargs):
        context = kwargs.pop("context", {})
        context.update(columns=columns, rows=rows, min_columns=min_columns, min_rows=min_rows)
        super().__init__(
            f"terminal is {columns}x{rows}, need at least {min_columns}x{min_rows}",
            operation="size",
            context=context,
            **kwargs,
        )


class InputError(BaseGameError):
    """A key read failed. Treated as no event for the tick."""
