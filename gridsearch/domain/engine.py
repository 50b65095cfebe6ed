"""Single-step search engine for uniform-cost and weighted A* search."""

import logging

from .neighbors import get_neighbors
from .state import SearchState
from .types import SearchInvariantError, StepReport

logger = logging.getLogger(__name__)


class StepEngine:
    """
    Advances a SearchState by exactly one settled cell per call.
    Framework-agnostic pure Python implementation.
    """

    def __init__(self, state: SearchState):
        self.state = state

    def step(self) -> StepReport:
        """
        Select the cheapest frontier cell, settle it and relax its neighbors.

        Returns an exhausted report without touching the grid when the
        frontier is already empty.
        """
        state = self.state
        if not state.seeded:
            raise SearchInvariantError("step() called before the search was seeded")
        if state.open.is_empty():
            return StepReport(exhausted=True)

        current = state.open.pop_best()
        if current.settled:
            raise SearchInvariantError(f"Cell {current.coord} settled twice")
        current.settled = True
        state.settled_count += 1
        state.steps_taken += 1

        discovered = []
        relaxed = []
        algorithm = state.algorithm
        for neighbor, move_cost in get_neighbors(current, state.grid, state.config):
            if neighbor not in state.open:
                state.open.add(neighbor)
                discovered.append(neighbor.coord)

            tentative_g = current.g_cost + move_cost
            if tentative_g < neighbor.g_cost:
                neighbor.parent = current
                neighbor.g_cost = tentative_g
                algorithm.update_estimate(neighbor, state.goal)
                state.open.update(neighbor)
                relaxed.append(neighbor.coord)

        logger.debug(
            "Settled %s (g=%s), discovered %d, relaxed %d, frontier %d",
            current.coord, current.g_cost, len(discovered), len(relaxed), len(state.open),
        )
        return StepReport(
            settled=current.coord,
            discovered=tuple(discovered),
            relaxed=tuple(relaxed),
            goal_settled=current is state.goal,
            exhausted=state.exhausted,
        )

    def run_to_completion(self, max_steps: int = 0) -> bool:
        """
        Step until the goal is settled or the frontier is exhausted.
        Returns True if the goal was settled.
        """
        limit = max_steps or len(self.state.grid)
        for _ in range(limit):
            if self.state.goal_settled or self.state.open.is_empty():
                break
            self.step()
        return self.state.goal_settled
