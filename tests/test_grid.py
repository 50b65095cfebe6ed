"""Tests for the Grid container."""

import math

import numpy as np
import pytest

from gridsearch.domain.grid import Grid
from gridsearch.domain.types import CellKind


def test_grid_rejects_non_positive_dimensions():
    with pytest.raises(ValueError):
        Grid(0, 3)
    with pytest.raises(ValueError):
        Grid(3, -1)


def test_iteration_is_row_major():
    grid = Grid(3, 2)
    coords = [cell.coord for cell in grid]
    assert coords == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]
    assert len(grid) == 6


def test_lookup_and_bounds():
    grid = Grid(4, 3)
    assert grid.get_cell((3, 2)).coord == (3, 2)
    assert grid.get_cell((4, 0)) is None
    assert grid.get_cell((0, -1)) is None
    with pytest.raises(ValueError):
        grid.cell((10, 10))


def test_cells_keep_identity_across_lookups():
    grid = Grid(2, 2)
    assert grid.cell((1, 1)) is grid.cell((1, 1))


def test_find_first_prefers_row_major_order():
    grid = Grid(3, 3)
    grid.set_kind((2, 0), CellKind.SOURCE)
    grid.set_kind((0, 1), CellKind.SOURCE)
    assert grid.find_first(CellKind.SOURCE).coord == (2, 0)
    assert grid.find_first(CellKind.GOAL) is None


def test_clear_blocked_only_touches_walls():
    grid = Grid(3, 1)
    grid.set_kind((0, 0), CellKind.SOURCE)
    grid.set_kind((1, 0), CellKind.BLOCKED)
    grid.set_kind((2, 0), CellKind.BLOCKED)

    assert grid.clear_blocked() == 2
    assert [cell.kind for cell in grid] == [CellKind.SOURCE, CellKind.CLEAR, CellKind.CLEAR]


def test_reset_search_keeps_kind_and_coordinate():
    grid = Grid(2, 1)
    grid.set_kind((1, 0), CellKind.BLOCKED)
    cell = grid.cell((0, 0))
    cell.g_cost = 10
    cell.f_cost = 12
    cell.parent = grid.cell((1, 0))
    cell.settled = True
    cell.on_path = True

    grid.reset_search()

    assert math.isinf(cell.g_cost) and math.isinf(cell.f_cost)
    assert cell.parent is None
    assert not cell.settled and not cell.on_path and not cell.in_open
    assert grid.cell((1, 0)).kind is CellKind.BLOCKED
    assert cell.coord == (0, 0)


def test_g_cost_field_shape_and_values():
    grid = Grid(3, 2)
    grid.cell((2, 1)).g_cost = 24
    field = grid.g_cost_field()

    assert field.shape == (2, 3)
    assert field[1, 2] == 24
    assert np.isinf(field[0, 0])
