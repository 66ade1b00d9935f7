"""Crash handling utilities."""

import json
import os
import sys
import traceback

from utils.ksuid import generate_ksuid
from utils.clock import format_timestamp

# Default crash log path, can be overridden by configure()
_crash_log = "logs/crash.log"
_session_id = None


def configure(crash_file, session_id=None):
    """Set crash log file path and the session id stamped on crash records."""
    global _crash_log, _session_id
    _crash_log = crash_file
    _session_id = session_id


def _write_crash(record):
    """Append a crash record to the crash file. Never raises."""
    try:
        log_dir = os.path.dirname(_crash_log)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        with open(_crash_log, "a") as f:
            f.write(json.dumps(record, default=str) + "\n")
    except Exception:
        pass


def crash_record(exc_type, exc_value, exc_tb):
    exc_name = exc_type.__name__ if exc_type else "Unknown"
    record = {
        "id": generate_ksuid(),
        "timestamp": format_timestamp(),
        "type": exc_name,
        "msg": str(exc_value) if exc_value else "",
        "traceback": "".join(traceback.format_exception(exc_type, exc_value, exc_tb)),
    }
    if _session_id:
        record["session"] = _session_id
    # Game errors carry their own tracking id and context.
    error_id = getattr(exc_value, "error_id", None)
    if error_id:
        record["error_id"] = error_id
        record["context"] = getattr(exc_value, "context", {})
    return record


def log_crash(exc_type, exc_value, exc_tb):
    """Log an uncaught exception to stderr and the crash file. Never raises."""
    # Ctrl-C is a way out, not a crash.
    if exc_type is not None and issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_tb)
        return
    record = crash_record(exc_type, exc_value, exc_tb)

    sys.stderr.write(f"\n{'=' * 60}\nCRASH [{record['id']}] {record['timestamp']}\n{'=' * 60}\n")
    sys.stderr.write(f"{record['type']}: {record['msg']}\n{'-' * 60}\n{record['traceback']}{'=' * 60}\n\n")
    _write_crash(record)


def install_crash_handler():
    """Install global sync exception handler."""
    sys.excepthook = log_crash
