"""Main application controller connecting the input/render layer and the search core."""

import logging
from typing import Iterator, List, Optional

import numpy as np
from PySide6.QtCore import QObject, Signal

from ..domain.engine import StepEngine
from ..domain.grid import Grid
from ..domain.path import calculate_path_cost, path_coords, reconstruct_path
from ..domain.state import SearchState
from ..domain.types import (
    CellKind, CellSnapshot, Coord, SearchConfig, SearchInvariantError,
    SearchOutcome, UniformCost, WeightedAStar,
)
from ..utils.grid_factory import create_grid, render_layout
from .fsm import RunState, RunStateMachine
from .settings import AppSettings

logger = logging.getLogger(__name__)

ALGORITHMS = ("dijkstra", "astar")
FRONTIERS = ("linear", "heap")


class SearchController(QObject):
    """
    Controller that owns the grid and run state and drives the step engine.

    The outside world edits and queries the grid only through this object.
    Ticks are supplied externally (see TickDriver); each tick advances the
    search by at most one settled cell.

    Signals:
        state_changed: Emitted when the run state changes
        step_completed: Emitted after each engine step with its StepReport
        search_finished: Emitted with the SearchOutcome when a run ends
        grid_updated: Emitted when cells need to be redrawn
        error_occurred: Emitted with a user-facing message
    """

    # Qt Signals
    state_changed = Signal(object)  # RunState
    step_completed = Signal(object)  # StepReport
    search_finished = Signal(object)  # SearchOutcome
    grid_updated = Signal()
    error_occurred = Signal(str)  # Error message

    def __init__(self, grid: Optional[Grid] = None, settings: Optional[AppSettings] = None):
        super().__init__()

        self._settings = settings or AppSettings()
        self._grid = grid if grid is not None else create_grid(self._settings.grid_count)
        self._config = SearchConfig()
        self._state_machine = RunStateMachine()
        self._search: Optional[SearchState] = None
        self._engine: Optional[StepEngine] = None
        self._outcome: Optional[SearchOutcome] = None

        self._setup_state_callbacks()

    def _setup_state_callbacks(self):
        """Setup callbacks for state machine transitions."""
        for state in RunState:
            self._state_machine.on_state_enter(state, self._make_enter_callback(state))

    def _make_enter_callback(self, state: RunState):
        def on_enter(context):
            logger.info("Search state -> %s", state.value)
            self.state_changed.emit(state)
        return on_enter

    # Properties

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def config(self) -> SearchConfig:
        """Get the search configuration used by the next run."""
        return self._config

    @property
    def current_state(self) -> RunState:
        """Get the current run state."""
        return self._state_machine.current_state

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def outcome(self) -> Optional[SearchOutcome]:
        """Result of the last finished run, None while idle or running."""
        return self._outcome

    # Queries

    def cell(self, coord: Coord) -> CellSnapshot:
        """Read-only view of a single cell."""
        return self._grid.cell(coord).snapshot()

    def cells(self) -> Iterator[CellSnapshot]:
        """Read-only views of all cells in row-major order."""
        for cell in self._grid:
            yield cell.snapshot()

    def g_cost_field(self) -> np.ndarray:
        return self._grid.g_cost_field()

    def statistics(self) -> dict:
        """Get current run statistics."""
        search = self._search
        return {
            "steps_taken": search.steps_taken if search else 0,
            "cells_settled": search.settled_count if search else 0,
            "open_set_size": len(search.open) if search else 0,
            "current_state": self.current_state.value,
            "state_description": self._state_machine.get_state_description(),
        }

    # Grid editing

    def set_cell_kind(self, coord: Coord, kind: CellKind) -> bool:
        """Edit a single cell. Only allowed while idle."""
        if not self._state_machine.is_idle():
            logger.warning("Rejected edit of %s: run is %s", coord, self.current_state.value)
            return False
        if not self._grid.is_valid_coord(coord):
            self.error_occurred.emit(f"Coordinate {coord} is outside the grid")
            return False

        self._grid.set_kind(coord, kind)
        self.grid_updated.emit()
        return True

    def clear_walls(self) -> bool:
        """Turn every blocked cell back to clear. Only allowed while idle."""
        if not self._state_machine.is_idle():
            logger.warning("Rejected clear walls: run is %s", self.current_state.value)
            return False
        removed = self._grid.clear_blocked()
        self._grid.reset_search()
        logger.info("Cleared %d walls", removed)
        self.grid_updated.emit()
        return True

    # Configuration

    def configure(self, algorithm: str = "dijkstra", heuristic_weight: float = 1.0,
                  allow_diagonal: bool = False, allow_corner_cutting: bool = False,
                  frontier: Optional[str] = None) -> bool:
        """Set the search configuration. Rejected while a run is active."""
        if self._state_machine.is_active():
            logger.warning("Rejected configuration change: run active")
            self.error_occurred.emit("run active")
            return False
        if algorithm not in ALGORITHMS:
            self.error_occurred.emit(f"Unknown algorithm: {algorithm}")
            return False
        if not self._settings.weight_in_range(heuristic_weight):
            self.error_occurred.emit(
                f"Heuristic weight {heuristic_weight} outside "
                f"[{self._settings.weight_min}, {self._settings.weight_max}]"
            )
            return False
        if frontier is not None and frontier not in FRONTIERS:
            self.error_occurred.emit(f"Unknown frontier: {frontier}")
            return False

        if algorithm == "astar":
            chosen = WeightedAStar(weight=heuristic_weight)
        else:
            chosen = UniformCost()
        self._config = SearchConfig(
            algorithm=chosen,
            allow_diagonal=allow_diagonal,
            allow_corner_cutting=allow_corner_cutting,
            frontier=frontier or self._config.frontier,
        )
        logger.info("Configured %s", self._config)
        return True

    # Run control

    def start(self) -> bool:
        """Reset, seed and start a run. Allowed from idle or a finished run."""
        if not self._state_machine.can_start():
            logger.warning("Rejected start: run is %s", self.current_state.value)
            return False

        self._reset_run()
        self._search = SearchState(self._grid, self._config)
        seeded = self._search.seed()
        if not seeded.ok:
            self._reset_run()
            if not self._state_machine.is_idle():
                self._state_machine.reset_to_idle()
            self.error_occurred.emit(f"Cannot start search: {seeded.error.value}")
            self.grid_updated.emit()
            return False

        self._engine = StepEngine(self._search)
        self._state_machine.start()
        self.grid_updated.emit()
        return True

    def pause_toggle(self) -> bool:
        """Pause a running search or resume a paused one."""
        return self._state_machine.toggle_pause()

    def cancel(self) -> bool:
        """Abandon the current run and return to idle."""
        if self._state_machine.is_idle():
            return False
        self._reset_run()
        self._state_machine.reset_to_idle()
        self.grid_updated.emit()
        return True

    def tick(self) -> bool:
        """
        Advance the run by one scheduled tick.
        Returns True if the tick did any work.
        """
        if not self._state_machine.is_running():
            return False

        search = self._search
        try:
            if not search.goal_settled and not search.open.is_empty():
                report = self._engine.step()
                self.step_completed.emit(report)
            elif search.goal_settled:
                self._finish_with_path()
            else:
                self._finish_without_path()
        except SearchInvariantError as e:
            logger.exception("Search invariant violated")
            self._reset_run()
            self._state_machine.fail_error({"error": str(e)})
            self.error_occurred.emit(f"Search error: {e}")

        self.grid_updated.emit()
        return True

    def run_to_end(self) -> Optional[SearchOutcome]:
        """Tick until the run finishes. Returns the outcome, if any."""
        limit = len(self._grid) + 2
        while self._state_machine.is_running() and limit > 0:
            self.tick()
            limit -= 1
        return self._outcome

    def _finish_with_path(self):
        path = path_coords(reconstruct_path(self._search))
        self._outcome = SearchOutcome(
            found=True,
            path=path,
            path_cost=calculate_path_cost(path),
            cells_settled=self._search.settled_count,
        )
        logger.info("Path found: %d cells, cost %s", len(path), self._outcome.path_cost)
        self._state_machine.path_found({"outcome": self._outcome})
        self.search_finished.emit(self._outcome)

    def _finish_without_path(self):
        self._outcome = SearchOutcome(found=False, cells_settled=self._search.settled_count)
        logger.info("No path exists after settling %d cells", self._search.settled_count)
        self._state_machine.no_path({"outcome": self._outcome})
        self.search_finished.emit(self._outcome)

    def _reset_run(self):
        if self._search is not None:
            self._search.reset()
        else:
            self._grid.reset_search()
        self._search = None
        self._engine = None
        self._outcome = None

    def render_text(self, show_search: bool = True) -> str:
        """Text rendering of the grid for headless front ends."""
        return render_layout(self._grid, show_search)

    def endpoint(self, kind: CellKind) -> Optional[Coord]:
        """Coordinate of the first cell of kind, in row-major order."""
        found = self._grid.find_first(kind)
        return found.coord if found else None

    def blocked_coords(self) -> List[Coord]:
        return [cell.coord for cell in self._grid.cells_of_kind(CellKind.BLOCKED)]
