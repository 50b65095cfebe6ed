# tests/conftest.py

import pytest
from PySide6.QtCore import QCoreApplication

from gridsearch.domain.engine import StepEngine
from gridsearch.domain.state import SearchState
from gridsearch.domain.types import SearchConfig
from gridsearch.utils.grid_factory import parse_layout


@pytest.fixture(scope="session")
def qapp():
    """Single QCoreApplication shared by every Qt-dependent test."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def make_search():
    """Factory: parse a layout, seed a search over it and return (grid, state, engine)."""
    def _make(layout: str, config: SearchConfig = None):
        grid = parse_layout(layout)
        state = SearchState(grid, config or SearchConfig())
        assert state.seed().ok
        return grid, state, StepEngine(state)
    return _make


@pytest.fixture
def open_5x5():
    return "\n".join([
        "S....",
        ".....",
        ".....",
        ".....",
        "....G",
    ])


@pytest.fixture
def wall_5x5():
    # Wall at x=2 for y=0..3, gap at y=4.
    return "\n".join([
        "S.#..",
        "..#..",
        "..#..",
        "..#..",
        "....G",
    ])
