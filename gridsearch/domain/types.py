"""Core type definitions for the grid search engine."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Literal, Optional, Tuple, Union

from .heuristics import weighted_manhattan

# Coordinate type for grid positions (x, y)
Coord = Tuple[int, int]

# Frontier container identifiers
FrontierKind = Literal["linear", "heap"]

INF = math.inf


class CellKind(Enum):
    """What occupies a grid position."""
    CLEAR = "clear"
    BLOCKED = "blocked"
    SOURCE = "source"
    GOAL = "goal"


class GridSearchError(Exception):
    """Base class for grid search errors."""


class SearchInvariantError(GridSearchError):
    """Raised when the settle/relax discipline has been broken."""


class SeedError(Enum):
    """Reasons a run cannot be seeded."""
    NO_SOURCE = "no source"
    NO_GOAL = "no goal"


@dataclass(eq=False)
class Cell:
    """A single grid position and its per-run search fields."""
    coord: Coord
    kind: CellKind = CellKind.CLEAR
    g_cost: float = INF
    h_cost: float = INF
    f_cost: float = INF
    parent: Optional["Cell"] = field(default=None, repr=False)
    settled: bool = False
    in_open: bool = False
    on_path: bool = False

    @property
    def x(self) -> int:
        return self.coord[0]

    @property
    def y(self) -> int:
        return self.coord[1]

    def is_blocked(self) -> bool:
        return self.kind is CellKind.BLOCKED

    def reset_search(self):
        """Clear every per-run field; kind and coordinate are kept."""
        self.g_cost = INF
        self.h_cost = INF
        self.f_cost = INF
        self.parent = None
        self.settled = False
        self.in_open = False
        self.on_path = False

    def snapshot(self) -> "CellSnapshot":
        return CellSnapshot(
            coord=self.coord,
            kind=self.kind,
            g_cost=self.g_cost,
            h_cost=self.h_cost,
            f_cost=self.f_cost,
            settled=self.settled,
            in_open=self.in_open,
            on_path=self.on_path,
        )


@dataclass(frozen=True)
class CellSnapshot:
    """Read-only view of a cell handed to rendering and input layers."""
    coord: Coord
    kind: CellKind
    g_cost: float
    h_cost: float
    f_cost: float
    settled: bool
    in_open: bool
    on_path: bool


@dataclass(frozen=True)
class UniformCost:
    """Dijkstra: frontier ordered by accumulated cost alone."""

    def priority(self, cell: Cell) -> float:
        return cell.g_cost

    def update_estimate(self, cell: Cell, goal: Cell) -> None:
        """Uniform cost keeps no estimate."""


@dataclass(frozen=True)
class WeightedAStar:
    """A* ordered by g + weight * Manhattan estimate."""
    weight: float = 1.0

    def __post_init__(self):
        if self.weight < 0 or math.isnan(self.weight):
            raise ValueError(f"Heuristic weight must be non-negative, got {self.weight}")

    def priority(self, cell: Cell) -> float:
        return cell.f_cost

    def update_estimate(self, cell: Cell, goal: Cell) -> None:
        cell.h_cost = weighted_manhattan(cell.coord, goal.coord, self.weight)
        cell.f_cost = cell.g_cost + cell.h_cost


Algorithm = Union[UniformCost, WeightedAStar]


@dataclass(frozen=True)
class SearchConfig:
    """Configuration for one search run."""
    algorithm: Algorithm = field(default_factory=UniformCost)
    allow_diagonal: bool = False
    allow_corner_cutting: bool = False
    frontier: FrontierKind = "linear"

    def __post_init__(self):
        if self.frontier not in ("linear", "heap"):
            raise ValueError(f"Unknown frontier kind: {self.frontier}")

    @property
    def cuts_corners(self) -> bool:
        """Corner cutting only matters when diagonal moves are allowed."""
        return self.allow_diagonal and self.allow_corner_cutting


@dataclass(frozen=True)
class SeedResult:
    """Outcome of seeding a run."""
    error: Optional[SeedError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class StepReport:
    """What one call to the step engine did."""
    settled: Optional[Coord] = None
    discovered: Tuple[Coord, ...] = ()
    relaxed: Tuple[Coord, ...] = ()
    goal_settled: bool = False
    exhausted: bool = False


@dataclass
class SearchOutcome:
    """Final result of a run."""
    found: bool = False
    path: List[Coord] = field(default_factory=list)
    path_cost: float = 0.0
    cells_settled: int = 0

    @property
    def success(self) -> bool:
        """Whether a path was found."""
        return self.found and len(self.path) > 0
