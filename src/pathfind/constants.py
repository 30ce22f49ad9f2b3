"""Tolerances and fixed offsets shared across the package."""

# per-coordinate tolerance for approximate point equality
EPSILON = 1e-6

# 8-connected lattice offsets, probed in this order when a clamped
# destination has to be moved off the boundary into the walkable area
NEIGHBOUR_OFFSETS = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)
