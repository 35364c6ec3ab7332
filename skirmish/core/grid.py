"""Dense 2D container addressed by (x, y).

Cells live in a numpy object array in row-major order, so ``get(x, y)`` reads
``cells[y, x]``. Dimensions are fixed at construction.
"""

from typing import Generic, Iterator, Optional, TypeVar

import numpy as np

from .data.data_structures import Position

T = TypeVar("T")


class Grid(Generic[T]):
    """Fixed cols x rows grid of arbitrary values."""

    def __init__(self, cols: int, rows: int, fill: Optional[T] = None):
        if cols < 0 or rows < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {cols}x{rows}")
        self.cells = np.empty((rows, cols), dtype=object)
        self.cells.fill(fill)

    @property
    def width(self) -> int:
        return self.cells.shape[1]

    @property
    def height(self) -> int:
        return self.cells.shape[0]

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Optional[T]:
        """Get the value at column x, row y. Coordinates must be in range."""
        assert self.contains(x, y), f"Grid access out of range: ({x}, {y})"
        return self.cells[y, x]

    def set(self, x: int, y: int, value: Optional[T]) -> None:
        assert self.contains(x, y), f"Grid access out of range: ({x}, {y})"
        self.cells[y, x] = value

    def all_positions(self) -> list[Position]:
        """Every coordinate of the grid, row by row (y outer, x inner)."""
        return [Position(x, y) for y in range(self.height) for x in range(self.width)]

    def __iter__(self) -> Iterator[Optional[T]]:
        """Iterate over cell values in the same order as all_positions()."""
        return iter(self.cells.ravel().tolist())

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"
