"""Fixed-size 2D grid of cells."""

from typing import Iterator, List, Optional

import numpy as np

from .types import Cell, CellKind, Coord


class Grid:
    """
    Owns a width x height array of cells.

    Cells are created once and reused across runs; only their kind and
    per-run search fields ever change. Enumeration is row-major (y outer,
    x inner), which is also the order used to find the Source and Goal.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._rows: List[List[Cell]] = [
            [Cell(coord=(x, y)) for x in range(width)] for y in range(height)
        ]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __len__(self) -> int:
        return self._width * self._height

    def __iter__(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in self._rows:
            yield from row

    def is_valid_coord(self, coord: Coord) -> bool:
        """Check if coordinate is within grid bounds."""
        x, y = coord
        return 0 <= x < self._width and 0 <= y < self._height

    def get_cell(self, coord: Coord) -> Optional[Cell]:
        """Get cell at coordinate, returns None if out of bounds."""
        if not self.is_valid_coord(coord):
            return None
        x, y = coord
        return self._rows[y][x]

    def cell(self, coord: Coord) -> Cell:
        """Get cell at coordinate, raising ValueError if out of bounds."""
        found = self.get_cell(coord)
        if found is None:
            raise ValueError(f"Coordinate {coord} is outside the {self._width}x{self._height} grid")
        return found

    def set_kind(self, coord: Coord, kind: CellKind):
        """Change what occupies a single position."""
        self.cell(coord).kind = kind

    def find_first(self, kind: CellKind) -> Optional[Cell]:
        """First cell of the given kind in row-major order."""
        for cell in self:
            if cell.kind is kind:
                return cell
        return None

    def cells_of_kind(self, kind: CellKind) -> List[Cell]:
        return [cell for cell in self if cell.kind is kind]

    def clear_blocked(self) -> int:
        """Turn every blocked cell back to clear. Returns how many changed."""
        changed = 0
        for cell in self:
            if cell.kind is CellKind.BLOCKED:
                cell.kind = CellKind.CLEAR
                changed += 1
        return changed

    def reset_search(self):
        """Reset per-run fields on every cell."""
        for cell in self:
            cell.reset_search()

    def g_cost_field(self) -> np.ndarray:
        """gCost of every cell as a (height, width) array, inf where unreached."""
        field = np.full((self._height, self._width), np.inf)
        for cell in self:
            field[cell.y, cell.x] = cell.g_cost
        return field
