"""Top-row generation: walls creep toward wandering drift targets.

Each tick the new top row differs from the old one by at most one column per
wall, so the corridor can bend and breathe but never jumps. Targets are only
re-rolled once the top row has reached them, and every rolled pair is clamped
to the screen and widened to MIN_WIDTH before it is committed.
"""

MIN_WIDTH = 3
DRIFT_RADIUS = 5
RETARGET_CHANCE = 0.2


def step_toward(value, target):
    """Move one unit toward target, or hold if already there."""
    if target > value:
        return value + 1
    if target < value:
        return value - 1
    return value


def drift_row(row, target_left, target_right):
    left, right = row
    return step_toward(left, target_left), step_toward(right, target_right)


def sample_between(rng, a, b):
    """Uniform pick from the half-open range spanned by a and b.

    The bounds may come in either order; an empty span yields `a`'s lower end.
    """
    lower = min(a, b)
    upper = max(a, b)
    width = max(upper - lower, 1)
    return rng.randrange(lower, lower + width)


def clamp(value, lower, upper):
    return max(lower, min(value, upper))


def repair_targets(left, right, maxc, min_width=MIN_WIDTH):
    """Clamp a target pair to [0, maxc] and widen it to min_width.

    The left bound is pushed outward by the shortfall. When that would cross
    column 0 the pair is pinned to [0, min_width].
    """
    left = clamp(left, 0, maxc)
    right = clamp(right, 0, maxc)
    if right - left < min_width:
        left = right - min_width
        if left < 0:
            left, right = 0, min_width
    return left, right


def pick_targets(rng, row, maxc, radius=DRIFT_RADIUS):
    """New drift targets in a neighbourhood of the current row."""
    left, right = row
    target_left = sample_between(rng, left - radius, right - radius)
    target_right = sample_between(rng, left + radius, right + radius)
    return repair_targets(target_left, target_right, maxc)


def next_top_row(world, row):
    """Drift `row` one step and maybe re-roll the world's targets.

    Returns the new top row; drift targets are updated on the world in place.
    """
    new_row = drift_row(row, world.drift_target_left, world.drift_target_right)

    caught_up = new_row == (world.drift_target_left, world.drift_target_right)
    if caught_up and world.rng.random() < RETARGET_CHANCE:
        world.drift_target_left, world.drift_target_right = pick_targets(world.rng, new_row, world.maxc)

    return new_row
