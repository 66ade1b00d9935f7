"""
Terminal adapter - blessed-backed display surface and input source.
This is a THIN ADAPTER - no game logic here.
"""
import sys
from contextlib import contextmanager

from blessed import Terminal

from core.errors import InputError, TerminalError
from corridor.controls import key_from_name


class TerminalSurface:
    """Display surface that batches escape sequences until flush()."""

    def __init__(self, term, stream=None):
        self.term = term
        self.stream = stream or sys.stdout
        self._buffer = []

    def clear(self):
        self._buffer.append(self.term.home + self.term.clear)

    def move_to(self, col, row):
        self._buffer.append(self.term.move_xy(col, row))

    def write(self, text):
        self._buffer.append(text)

    def hide_cursor(self):
        self._buffer.append(self.term.hide_cursor)

    def show_cursor(self):
        self._buffer.append(self.term.normal_cursor)

    def flush(self):
        data = "".join(self._buffer)
        self._buffer = []
        try:
            self.stream.write(data)
            self.stream.flush()
        except OSError as exc:
            raise TerminalError("terminal write failed", operation="write", cause=exc) from exc


class TerminalInput:
    """Input source over blessed keystrokes, normalised to controls.Key.

    Everything goes through inkey(): blessed keeps already decoded bytes in
    its own buffer, which the file descriptor cannot see. poll() holds the
    keystroke it found until read() hands it out.
    """

    def __init__(self, term):
        self.term = term
        self._pending = None

    def _inkey(self, timeout):
        try:
            return self.term.inkey(timeout=timeout)
        except OSError as exc:
            raise InputError("key read failed", cause=exc) from exc

    def poll(self, timeout):
        if self._pending is None:
            keystroke = self._inkey(timeout)
            if not keystroke:
                return False
            self._pending = keystroke
        return True

    def read(self):
        keystroke, self._pending = self._pending, None
        if keystroke is None:
            keystroke = self._inkey(0)
        if keystroke.is_sequence:
            return key_from_name(keystroke.name)
        return key_from_name(str(keystroke))


def screen_size(term):
    """(columns, rows) of the terminal, queried once per session."""
    try:
        columns, rows = term.width, term.height
    except OSError as exc:
        raise TerminalError("cannot query terminal size", operation="size", cause=exc) from exc
    if not columns or not rows:
        raise TerminalError("terminal reported no size", operation="size")
    return columns, rows


@contextmanager
def terminal_session(term=None):
    """Raw-ish keyboard and hidden cursor for the duration of the block.

    Both modes are restored on every exit path, exceptions included.
    """
    term = term or Terminal()
    if not term.is_a_tty:
        raise TerminalError("stdout is not a terminal", operation="open")
    with term.cbreak(), term.hidden_cursor():
        yield term
