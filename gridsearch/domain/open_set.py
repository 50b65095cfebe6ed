"""Frontier containers for the step engine with first-inserted tie-breaking."""

import heapq
import itertools
from typing import Callable, Iterator, List, Tuple

from .types import Cell, FrontierKind, SearchInvariantError

Priority = Callable[[Cell], float]


class OpenSet:
    """
    Insertion-ordered frontier scanned linearly for the cheapest cell.

    The scan keeps the first cell with the strictly lowest priority, so on
    exact ties the earliest-inserted cell wins.
    """

    def __init__(self, priority: Priority):
        self._priority = priority
        self._cells: List[Cell] = []

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __contains__(self, cell: Cell) -> bool:
        return cell.in_open

    def is_empty(self) -> bool:
        """Check if the frontier is empty."""
        return not self._cells

    def add(self, cell: Cell):
        """Insert a newly discovered cell."""
        _check_insertable(cell)
        cell.in_open = True
        self._cells.append(cell)

    def update(self, cell: Cell):
        """Priority of cell has dropped; the linear scan needs no bookkeeping."""

    def pop_best(self) -> Cell:
        """Remove and return the cell with the lowest priority."""
        if not self._cells:
            raise IndexError("pop from an empty open set")
        best_index = 0
        best_priority = self._priority(self._cells[0])
        for index in range(1, len(self._cells)):
            priority = self._priority(self._cells[index])
            if priority < best_priority:
                best_index = index
                best_priority = priority
        cell = self._cells.pop(best_index)
        cell.in_open = False
        return cell

    def clear(self):
        """Remove all cells from the frontier."""
        for cell in self._cells:
            cell.in_open = False
        self._cells.clear()


class HeapOpenSet:
    """
    Binary-heap frontier keyed by (priority, insertion sequence).

    A cell keeps the sequence number it was inserted with, so it produces
    the same selection order as OpenSet. Superseded heap entries are
    skipped lazily when popped.
    """

    def __init__(self, priority: Priority):
        self._priority = priority
        self._heap: List[Tuple[float, int, int, Cell]] = []
        self._sequence: dict = {}
        self._insertions = itertools.count()
        self._pushes = itertools.count()

    def __len__(self) -> int:
        return len(self._sequence)

    def __iter__(self) -> Iterator[Cell]:
        """Cells in insertion order."""
        return iter(sorted(self._sequence, key=self._sequence.__getitem__))

    def __contains__(self, cell: Cell) -> bool:
        return cell.in_open

    def is_empty(self) -> bool:
        return not self._sequence

    def add(self, cell: Cell):
        _check_insertable(cell)
        cell.in_open = True
        self._sequence[cell] = next(self._insertions)
        self._push(cell)

    def update(self, cell: Cell):
        if cell in self._sequence:
            self._push(cell)

    def pop_best(self) -> Cell:
        while self._heap:
            priority, _, _, cell = heapq.heappop(self._heap)
            if cell.in_open and cell in self._sequence and priority == self._priority(cell):
                del self._sequence[cell]
                cell.in_open = False
                return cell
        raise IndexError("pop from an empty open set")

    def clear(self):
        for cell in self._sequence:
            cell.in_open = False
        self._sequence.clear()
        self._heap.clear()

    def _push(self, cell: Cell):
        entry = (self._priority(cell), self._sequence[cell], next(self._pushes), cell)
        heapq.heappush(self._heap, entry)


def make_open_set(kind: FrontierKind, priority: Priority):
    """Build the frontier container named by kind."""
    if kind == "heap":
        return HeapOpenSet(priority)
    return OpenSet(priority)


def _check_insertable(cell: Cell):
    if cell.settled:
        raise SearchInvariantError(f"Settled cell {cell.coord} cannot re-enter the open set")
    if cell.in_open:
        raise SearchInvariantError(f"Cell {cell.coord} is already in the open set")
