"""Path reconstruction and path utilities."""

from typing import List

from .grid import Grid
from .neighbors import get_direction_vector, step_cost
from .state import SearchState
from .types import Cell, Coord, SearchInvariantError


def reconstruct_path(state: SearchState) -> List[Cell]:
    """
    Walk parent links from the settled goal back to the source.

    Every cell on the way except the source gets on_path set. Returns the
    cells ordered from source to goal.
    """
    goal = state.goal
    if goal is None or not goal.settled:
        raise SearchInvariantError("Path requested before the goal was settled")

    chain = [goal]
    current = goal
    while current.g_cost != 0:
        current.on_path = True
        parent = current.parent
        if parent is None:
            raise SearchInvariantError(f"Parent chain broken at {current.coord}")
        if len(chain) > len(state.grid):
            raise SearchInvariantError(f"Parent chain loops through {current.coord}")
        chain.append(parent)
        current = parent

    chain.reverse()
    return chain


def path_coords(path: List[Cell]) -> List[Coord]:
    return [cell.coord for cell in path]


def calculate_path_cost(path: List[Coord]) -> int:
    """Calculate the total cost of a path in 10/14 step units."""
    total_cost = 0
    for i in range(1, len(path)):
        total_cost += step_cost(get_direction_vector(path[i - 1], path[i]))
    return total_cost


def validate_path(path: List[Coord], grid: Grid) -> bool:
    """
    Validate that a path is walkable and connected.
    Returns True if path is valid.
    """
    if not path:
        return False

    # Check that all cells in path exist and are not blocked
    for coord in path:
        cell = grid.get_cell(coord)
        if cell is None or cell.is_blocked():
            return False

    # Check that path segments are valid moves (adjacent cells)
    for i in range(1, len(path)):
        from_coord = path[i - 1]
        to_coord = path[i]

        dx = abs(to_coord[0] - from_coord[0])
        dy = abs(to_coord[1] - from_coord[1])

        # Valid moves: orthogonal (dx=1,dy=0 or dx=0,dy=1) or diagonal (dx=1,dy=1)
        if not ((dx == 1 and dy == 0) or (dx == 0 and dy == 1) or (dx == 1 and dy == 1)):
            return False

    return True
