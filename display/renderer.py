"""
Renderer - paints a World onto a text-grid surface.
Reads the world, never modifies it.
"""

WALL_GLYPH = "+"
PLAYER_GLYPH = "P"
FAREWELL = "Thanks for playing"


class GridSurface:
    """In-memory display surface: a grid of characters plus a cursor.

    Writes are staged and only land in `rows` on flush, mirroring a
    terminal that shows one batch per tick.
    """

    def __init__(self, width, height, blank=" "):
        self.width = width
        self.height = height
        self.blank = blank
        self.cursor_visible = True
        self.flushes = 0
        self.rows = [[blank] * width for _ in range(height)]
        self._pending = []
        self._col = 0
        self._row = 0

    def clear(self):
        self._pending.append(("clear",))

    def move_to(self, col, row):
        self._pending.append(("move", col, row))

    def write(self, text):
        self._pending.append(("write", text))

    def hide_cursor(self):
        self.cursor_visible = False

    def show_cursor(self):
        self.cursor_visible = True

    def flush(self):
        for op in self._pending:
            if op[0] == "clear":
                self.rows = [[self.blank] * self.width for _ in range(self.height)]
                self._col = self._row = 0
            elif op[0] == "move":
                self._col, self._row = op[1], op[2]
            else:
                self._put(op[1])
        self._pending = []
        self.flushes += 1

    def _put(self, text):
        for char in text:
            if 0 <= self._row < self.height and 0 <= self._col < self.width:
                self.rows[self._row][self._col] = char
            self._col += 1

    def lines(self):
        return ["".join(row) for row in self.rows]


def draw(surface, world, wall_glyph=WALL_GLYPH, player_glyph=PLAYER_GLYPH):
    """Paint walls for every corridor row, then the player, in one flush."""
    surface.clear()

    for line, (left, right) in enumerate(world.corridor):
        if left > 0:
            surface.move_to(0, line)
            surface.write(wall_glyph * left)
        if right < world.maxc:
            surface.move_to(right, line)
            surface.write(wall_glyph * (world.maxc - right))

    surface.move_to(world.player_col, world.player_row)
    surface.write(player_glyph)

    surface.flush()


def farewell_lines(world, died):
    lines = []
    if died:
        lines.append(f"You hit the wall after {world.ticks} rows.")
    lines.append(FAREWELL)
    return lines


def draw_farewell(surface, world, died):
    """Clear the screen and leave the closing message, cursor below it."""
    lines = farewell_lines(world, died)
    surface.clear()
    for line, text in enumerate(lines):
        surface.move_to(0, line)
        surface.write(text)
    surface.move_to(0, len(lines))
    surface.show_cursor()
    surface.flush()
