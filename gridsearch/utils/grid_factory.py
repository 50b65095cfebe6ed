"""Grid factory for creating, populating and rendering grids."""

from typing import Iterable, List, Optional, Tuple

from ..domain.grid import Grid
from ..domain.types import CellKind, Coord
from .rng import SeededRNG, default_rng

# Distance of the default endpoints from the grid centre.
ENDPOINT_OFFSET = 5

LAYOUT_CHARS = {
    ".": CellKind.CLEAR,
    "#": CellKind.BLOCKED,
    "S": CellKind.SOURCE,
    "G": CellKind.GOAL,
}
KIND_CHARS = {kind: char for char, kind in LAYOUT_CHARS.items()}


def create_empty_grid(width: int, height: int) -> Grid:
    """
    Create a new grid with every cell clear.

    Raises:
        ValueError: If width or height <= 0
    """
    return Grid(width, height)


def create_grid(count: int) -> Grid:
    """Create a count x count grid with the default source and goal placed."""
    grid = create_empty_grid(count, count)
    place_default_endpoints(grid)
    return grid


def default_endpoints(width: int, height: int) -> Tuple[Coord, Coord]:
    """
    Source left of centre and goal right of centre on the middle row,
    clamped into the grid.
    """
    row = height // 2
    source_x = max(0, width // 2 - ENDPOINT_OFFSET)
    goal_x = min(width - 1, width // 2 + ENDPOINT_OFFSET)
    source, goal = (source_x, row), (goal_x, row)
    if goal == source:
        goal = (0, 0) if source != (0, 0) else (width - 1, height - 1)
    return source, goal


def place_default_endpoints(grid: Grid) -> Tuple[Coord, Coord]:
    """Put a source and goal at their default positions."""
    if len(grid) < 2:
        raise ValueError("Grid needs at least two cells for a source and a goal")
    source, goal = default_endpoints(grid.width, grid.height)
    grid.set_kind(source, CellKind.SOURCE)
    grid.set_kind(goal, CellKind.GOAL)
    return source, goal


def add_walls(grid: Grid, coords: Iterable[Coord]) -> int:
    """Block the given clear cells. Returns how many were blocked."""
    placed = 0
    for coord in coords:
        cell = grid.cell(coord)
        if cell.kind is CellKind.CLEAR:
            cell.kind = CellKind.BLOCKED
            placed += 1
    return placed


def add_random_walls(grid: Grid, density: float, rng: Optional[SeededRNG] = None) -> int:
    """
    Block a random share of the clear cells.

    Args:
        grid: Grid to modify
        density: Share of clear cells to block (0.0 to 1.0)
        rng: Random number generator to use (uses default if None)
    """
    if not (0.0 <= density <= 1.0):
        raise ValueError(f"Density must be between 0.0 and 1.0, got {density}")

    if rng is None:
        rng = default_rng

    clear = [cell.coord for cell in grid if cell.kind is CellKind.CLEAR]
    count = int(len(clear) * density)
    return add_walls(grid, rng.sample(clear, count))


def parse_layout(text: str) -> Grid:
    """
    Build a grid from rows of layout characters.

    The first text row is y = 0. Blank lines are ignored; every row must
    have the same width.
    """
    rows = [line.strip() for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError("Layout is empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("Layout rows must all have the same width")

    grid = create_empty_grid(width, len(rows))
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char not in LAYOUT_CHARS:
                raise ValueError(f"Unknown layout character {char!r} at ({x}, {y})")
            grid.set_kind((x, y), LAYOUT_CHARS[char])
    return grid


def render_layout(grid: Grid, show_search: bool = True) -> str:
    """
    Render the grid as text, one row per line.

    With show_search, clear cells show '*' on the path, 'o' when settled
    and '+' while on the frontier.
    """
    lines: List[str] = []
    for y in range(grid.height):
        chars = []
        for x in range(grid.width):
            cell = grid.cell((x, y))
            char = KIND_CHARS[cell.kind]
            if show_search and cell.kind is CellKind.CLEAR:
                if cell.on_path:
                    char = "*"
                elif cell.settled:
                    char = "o"
                elif cell.in_open:
                    char = "+"
            chars.append(char)
        lines.append("".join(chars))
    return "\n".join(lines)
