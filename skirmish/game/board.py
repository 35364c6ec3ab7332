from typing import TYPE_CHECKING, Optional

import numpy as np
from numpy.typing import NDArray

from ..core.data.data_structures import Position, positions_from_mask
from ..core.data.game_info import TerrainKind
from ..core.grid import Grid
from ..core.palette_loader import TerrainPalette

if TYPE_CHECKING:
    from .entities.unit import Unit


class OccupiedError(ValueError):
    """Raised when placing or moving a unit onto a cell that holds one."""

    def __init__(self, position: Position, occupant: "Unit"):
        super().__init__(f"Position ({position.x}, {position.y}) is occupied by {occupant.name}")
        self.position = position
        self.occupant = occupant


class Board:
    """Terrain grid paired with a same-sized occupancy grid.

    Terrain is fixed after construction. Occupancy holds at most one unit per
    cell and every placed unit's stored position matches its cell.
    """

    def __init__(self, terrain: Grid[TerrainKind]):
        for cell in terrain:
            if cell is None:
                raise ValueError("Every board cell needs a terrain kind")
        self.terrain = terrain
        self.occupancy: Grid["Unit"] = Grid(terrain.width, terrain.height)

    @classmethod
    def filled(cls, cols: int, rows: int, terrain: TerrainKind) -> "Board":
        """Create a board with the same terrain everywhere."""
        return cls(Grid(cols, rows, fill=terrain))

    @classmethod
    def from_glyphs(cls, rows: list[str], palette: TerrainPalette) -> "Board":
        """Build a board from text rows, one glyph per cell.

        Expected format:
            - "..T~"
            - ".^^~"
        """
        if not rows:
            raise ValueError("Map has no rows")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Map row {y} has {len(row)} cells, expected {width}")

        terrain: Grid[TerrainKind] = Grid(width, len(rows))
        for y, row in enumerate(rows):
            for x, glyph in enumerate(row):
                kind = palette.get_terrain(glyph)
                if kind is None:
                    raise ValueError(f"Unknown terrain glyph {glyph!r} at ({x}, {y})")
                terrain.set(x, y, kind)
        return cls(terrain)

    @property
    def width(self) -> int:
        return self.terrain.width

    @property
    def height(self) -> int:
        return self.terrain.height

    # ============== Occupancy ==============

    def unit_at(self, position: Position) -> Optional["Unit"]:
        return self.occupancy.get(position.x, position.y)

    def terrain_at(self, position: Position) -> TerrainKind:
        return self.terrain.get(position.x, position.y)

    def is_occupied(self, position: Position) -> bool:
        return self.unit_at(position) is not None

    def place(self, position: Position, unit: "Unit") -> None:
        """Put a unit into play at ``position`` and stamp its position."""
        occupant = self.unit_at(position)
        if occupant is not None:
            raise OccupiedError(position, occupant)
        self.occupancy.set(position.x, position.y, unit)
        unit.position = position

    def move(self, src: Position, dst: Position) -> None:
        """Transfer whatever occupies ``src`` to ``dst``.

        Range is not checked here; callers only offer reachable destinations.
        """
        occupant = self.unit_at(dst)
        if occupant is not None:
            raise OccupiedError(dst, occupant)
        unit = self.unit_at(src)
        self.occupancy.set(src.x, src.y, None)
        self.occupancy.set(dst.x, dst.y, unit)
        if unit is not None:
            unit.position = dst

    def remove(self, position: Position) -> Optional["Unit"]:
        """Clear a cell and return its former occupant."""
        unit = self.unit_at(position)
        self.occupancy.set(position.x, position.y, None)
        return unit

    def units(self) -> list["Unit"]:
        """All units on the board in row-major order."""
        return [unit for unit in self.occupancy if unit is not None]

    def occupied_mask(self) -> NDArray[np.bool_]:
        """Row-major boolean mask of occupied cells."""
        is_occupied = np.vectorize(lambda cell: cell is not None, otypes=[np.bool_])
        return is_occupied(self.occupancy.cells)

    # ============== Distance queries ==============

    def all_positions(self) -> list[Position]:
        return self.terrain.all_positions()

    @staticmethod
    def is_within(distance: int, a: Position, b: Position) -> bool:
        """Manhattan distance check, the only metric the engine uses."""
        return abs(a.x - b.x) + abs(a.y - b.y) <= distance

    def distance_mask(self, distance: int, center: Position) -> NDArray[np.bool_]:
        """Row-major mask of cells within ``distance`` of ``center``."""
        y_coords, x_coords = np.mgrid[0:self.height, 0:self.width]
        distances = np.abs(x_coords - center.x) + np.abs(y_coords - center.y)
        return distances <= distance

    def near_positions(self, distance: int, center: Position) -> list[Position]:
        """Positions within ``distance`` of ``center``, including the center.

        Same inclusion and order as filtering all_positions() with is_within.
        """
        return positions_from_mask(self.distance_mask(distance, center))

    def free_positions_near(self, distance: int, center: Position) -> list[Position]:
        """Unoccupied positions within ``distance`` of ``center``."""
        return positions_from_mask(self.distance_mask(distance, center) & ~self.occupied_mask())

    # ============== Text output ==============

    def to_glyphs(self) -> list[str]:
        """Board as text rows: unit symbols drawn over terrain symbols."""
        rows = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                unit = self.occupancy.get(x, y)
                row.append(unit.symbol if unit is not None else self.terrain.get(x, y).symbol)
            rows.append("".join(row))
        return rows

    def __repr__(self) -> str:
        return f"Board({self.width}x{self.height}, units={len(self.units())})"
