"""Per-run search state: frontier, endpoints and configuration."""

import logging
from typing import Optional

from .grid import Grid
from .open_set import make_open_set
from .types import Cell, CellKind, SearchConfig, SeedError, SeedResult

logger = logging.getLogger(__name__)


class SearchState:
    """
    Mutable data for one run over a shared grid.

    A fresh state is built for every run; reset() returns both the state
    and the grid's per-run cell fields to their initial values.
    """

    def __init__(self, grid: Grid, config: Optional[SearchConfig] = None):
        self.grid = grid
        self.config = config or SearchConfig()
        self.open = make_open_set(self.config.frontier, self.config.algorithm.priority)
        self.source: Optional[Cell] = None
        self.goal: Optional[Cell] = None
        self.steps_taken = 0
        self.settled_count = 0

    @property
    def algorithm(self):
        return self.config.algorithm

    @property
    def seeded(self) -> bool:
        return self.source is not None and self.goal is not None

    def reset(self):
        """Clear all per-run fields. Idempotent."""
        self.open.clear()
        self.grid.reset_search()
        self.source = None
        self.goal = None
        self.steps_taken = 0
        self.settled_count = 0

    def seed(self) -> SeedResult:
        """
        Locate the first Source and Goal in row-major order and put the
        Source on the frontier with zero cost.

        Nothing is inserted unless both endpoints exist.
        """
        source = self.grid.find_first(CellKind.SOURCE)
        if source is None:
            logger.warning("Cannot seed search: grid has no source cell")
            return SeedResult(error=SeedError.NO_SOURCE)
        goal = self.grid.find_first(CellKind.GOAL)
        if goal is None:
            logger.warning("Cannot seed search: grid has no goal cell")
            return SeedResult(error=SeedError.NO_GOAL)

        source.g_cost = 0.0
        source.f_cost = 0.0
        self.open.add(source)
        self.source = source
        self.goal = goal
        logger.debug("Seeded search from %s to %s", source.coord, goal.coord)
        return SeedResult()

    @property
    def goal_settled(self) -> bool:
        return self.goal is not None and self.goal.settled

    @property
    def exhausted(self) -> bool:
        """Frontier ran dry before the goal was settled."""
        return self.open.is_empty() and not self.goal_settled
