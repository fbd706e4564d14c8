"""A spatial hash grid grouping elements by the cell that contains them."""

from __future__ import annotations

import itertools
import math
from typing import Generic, Iterator, Optional, Sequence, TypeVar

T = TypeVar("T")

Cell = tuple[int, ...]


def cell_range(start: Sequence[int], end: Sequence[int]) -> Iterator[Cell]:
    """Yield every cell between ``start`` and ``end`` inclusive, first axis fastest.

    Nothing is yielded when ``start`` exceeds ``end`` on some axis.
    """
    if len(start) != len(end):
        raise ValueError(f"dimension mismatch: {len(start)} and {len(end)}")
    ranges = [range(lo, hi + 1) for lo, hi in zip(start, end)]
    for reversed_cell in itertools.product(*reversed(ranges)):
        yield tuple(reversed(reversed_cell))


def cell_range_around(center: Sequence[int], radius: int) -> Iterator[Cell]:
    """Yield the cells within ``radius`` cells of ``center`` on every axis."""
    start = tuple(c - radius for c in center)
    end = tuple(c + radius for c in center)
    return cell_range(start, end)


class HGrid(Generic[T]):
    """A grid based on spatial hashing with square (or cubic) cells."""

    def __init__(self, cell_width: float) -> None:
        if not cell_width > 0.0:
            raise ValueError(f"cell width must be positive, got {cell_width}")
        self._cells: dict[Cell, list[T]] = {}
        self._cell_width = float(cell_width)

    @property
    def cell_width(self) -> float:
        """The width of one cell."""
        return self._cell_width

    def __len__(self) -> int:
        return len(self._cells)

    def key(self, point: Sequence[float]) -> Cell:
        """The logical cell containing ``point``."""
        return tuple(math.floor(x / self._cell_width) for x in point)

    def clear(self) -> None:
        """Remove every element from the grid."""
        self._cells.clear()

    def insert(self, point: Sequence[float], element: T) -> None:
        """Add ``element`` to the cell containing ``point``."""
        self._cells.setdefault(self.key(point), []).append(element)

    def cell_containing_point(self, point: Sequence[float]) -> Optional[list[T]]:
        """The elements of the cell containing ``point``, or None if it is empty."""
        return self._cells.get(self.key(point))

    def cells(self) -> Iterator[tuple[Cell, list[T]]]:
        """Iterate over the non-empty cells and their elements."""
        return iter(self._cells.items())

    def cell(self, key: Sequence[int]) -> Optional[list[T]]:
        """The elements of the cell identified by ``key``, or None if it is empty."""
        return self._cells.get(tuple(key))

    def neighbor_cells(
        self, cell: Sequence[int], radius: float
    ) -> Iterator[tuple[Cell, list[T]]]:
        """Iterate over non-empty cells within ``radius`` of ``cell``, itself included."""
        quantified = math.ceil(radius / self._cell_width)
        for candidate in cell_range_around(cell, quantified):
            elements = self._cells.get(candidate)
            if elements is not None:
                yield candidate, elements

    def cells_intersecting_aabb(
        self, mins: Sequence[float], maxs: Sequence[float]
    ) -> Iterator[tuple[Cell, list[T]]]:
        """Iterate over non-empty cells overlapping the box from ``mins`` to ``maxs``."""
        for candidate in cell_range(self.key(mins), self.key(maxs)):
            elements = self._cells.get(candidate)
            if elements is not None:
                yield candidate, elements