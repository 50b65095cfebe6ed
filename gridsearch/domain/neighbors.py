"""Neighbor generation and movement rules for grid search."""

from typing import List, Tuple

from .grid import Grid
from .heuristics import DIAGONAL_COST, ORTHOGONAL_COST
from .types import Cell, SearchConfig

Direction = Tuple[int, int]

# Expansion order: orthogonal first, then diagonals, each clockwise.
ORTHOGONAL_DIRECTIONS: Tuple[Direction, ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))
DIAGONAL_DIRECTIONS: Tuple[Direction, ...] = ((1, 1), (1, -1), (-1, -1), (-1, 1))


def is_diagonal(direction: Direction) -> bool:
    dx, dy = direction
    return abs(dx) + abs(dy) == 2


def step_cost(direction: Direction) -> int:
    """10 for an orthogonal move, 14 for a diagonal one."""
    return DIAGONAL_COST if is_diagonal(direction) else ORTHOGONAL_COST


def directions_for(config: SearchConfig) -> Tuple[Direction, ...]:
    """Movement directions permitted by the configuration."""
    if config.allow_diagonal:
        return ORTHOGONAL_DIRECTIONS + DIAGONAL_DIRECTIONS
    return ORTHOGONAL_DIRECTIONS


def is_traversable(current: Cell, neighbor: Cell, direction: Direction,
                   grid: Grid, config: SearchConfig) -> bool:
    """
    Whether neighbor may be discovered/relaxed from current.

    Blocked and settled cells never qualify. A diagonal move additionally
    needs at least one of its two corner cells to be open unless corner
    cutting is allowed.
    """
    if neighbor.is_blocked() or neighbor.settled:
        return False
    if is_diagonal(direction) and not config.cuts_corners:
        if _is_corner_blocked(current, direction, grid):
            return False
    return True


def _is_corner_blocked(current: Cell, direction: Direction, grid: Grid) -> bool:
    """
    Check if a diagonal move squeezes between two blocked corner cells.
    Returns True if the diagonal move should be rejected.
    """
    x, y = current.coord
    dx, dy = direction

    # The corners of an in-bounds diagonal are always in bounds.
    side1 = grid.cell((x + dx, y))
    side2 = grid.cell((x, y + dy))

    return side1.is_blocked() and side2.is_blocked()


def get_neighbors(current: Cell, grid: Grid, config: SearchConfig) -> List[Tuple[Cell, int]]:
    """
    Traversable neighbors of current with the cost of moving to each.
    Returns list of (neighbor_cell, step_cost) tuples in expansion order.
    """
    x, y = current.coord
    neighbors = []

    for direction in directions_for(config):
        dx, dy = direction
        neighbor = grid.get_cell((x + dx, y + dy))
        if neighbor is None:
            continue
        if not is_traversable(current, neighbor, direction, grid, config):
            continue
        neighbors.append((neighbor, step_cost(direction)))

    return neighbors


def get_direction_vector(from_coord: Tuple[int, int], to_coord: Tuple[int, int]) -> Direction:
    """Get the unit direction vector between two adjacent coordinates."""
    dx = to_coord[0] - from_coord[0]
    dy = to_coord[1] - from_coord[1]

    # Normalize to -1, 0, or 1
    if dx != 0:
        dx = 1 if dx > 0 else -1
    if dy != 0:
        dy = 1 if dy > 0 else -1

    return (dx, dy)
