"""Spatial value types shared by every layer of the engine.

Positions are addressed as (x, y): x is the column, y is the row. Grids store
their cells row-major, so a Position maps to ``array[y][x]``.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Position:
    """Immutable 0-indexed board coordinate."""
    x: int
    y: int

    def __iter__(self):
        """Make Position iterable for unpacking (x, y order)."""
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Position({self.x}, {self.y})"

    def manhattan_distance_to(self, other: "Position") -> int:
        """Calculate Manhattan distance to another position."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    @classmethod
    def from_list(cls, coords: list[int]) -> "Position":
        """Create Position from an [x, y] list, as found in YAML files."""
        if len(coords) != 2:
            raise ValueError(f"Position needs exactly 2 coordinates, got {coords!r}")
        return cls(int(coords[0]), int(coords[1]))

    def to_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


def positions_from_mask(mask: NDArray[np.bool_]) -> list[Position]:
    """Convert a row-major boolean mask to positions in row-major order."""
    y_coords, x_coords = np.nonzero(mask)
    return [Position(int(x), int(y)) for y, x in zip(y_coords, x_coords)]
