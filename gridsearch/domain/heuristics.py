"""Heuristic functions for weighted A* search."""

from typing import Tuple

# Cost of one orthogonal move; the heuristic is scaled to the same units.
ORTHOGONAL_COST = 10
DIAGONAL_COST = 14


def manhattan_distance(start: Tuple[int, int], target: Tuple[int, int]) -> int:
    """
    Manhattan (L1) distance in cells.
    Admissible for 4-directional movement.
    """
    return abs(start[0] - target[0]) + abs(start[1] - target[1])


def weighted_manhattan(start: Tuple[int, int], target: Tuple[int, int], weight: float) -> float:
    """
    Manhattan distance scaled to step-cost units and multiplied by weight.

    weight == 0 turns A* into uniform-cost search, weight == 1 is exact on
    4-connected open grids, and weight > 1 trades optimality for fewer
    expansions.
    """
    return weight * ORTHOGONAL_COST * manhattan_distance(start, target)
