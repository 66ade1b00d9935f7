from corridor.terrain import next_top_row


def collides(world):
    """True when the player stands on or outside a wall of their row."""
    left, right = world.player_row_walls()
    return world.player_col <= left or world.player_col >= right


def scroll(corridor, top_row):
    """Rows move one step down; the bottom row falls off."""
    return [top_row] + corridor[:-1]


def advance(world):
    """Run one physics tick on `world` and return it.

    Collision is judged on the layout the player was standing in, before the
    scroll. A dead world is left untouched.
    """
    if not world.alive:
        return world

    if collides(world):
        world.alive = False

    top_row = next_top_row(world, world.corridor[0])
    world.corridor = scroll(world.corridor, top_row)
    world.ticks += 1
    return world
