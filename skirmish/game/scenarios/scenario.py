"""Scenario definitions.

A Scenario is plain data read from a scenario file: who plays, what the
levels look like and which units start where. ``build_game`` turns it into a
fresh Game each time it is called, so one loaded scenario can be replayed.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Sequence, TextIO

from ...core.data import PlayerKind, Position, UnitClass
from ...core.palette_loader import TerrainPalette, get_terrain_palette
from ..board import Board
from ..entities.unit_templates import create_unit
from ..game import Game, GameSettings, Level
from ..players import create_player

if TYPE_CHECKING:
    from ..players.player import Player


@dataclass
class PlayerData:
    name: str
    kind: PlayerKind = PlayerKind.SCRIPTED


@dataclass
class UnitData:
    """A unit to create when its level starts."""
    unit_class: UnitClass
    owner: str
    x: int
    y: int
    name: Optional[str] = None

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)


@dataclass
class LevelData:
    name: str
    map_rows: list[str] = field(default_factory=list)
    size: Optional[tuple[int, int]] = None  # (cols, rows) when no map is drawn
    units: list[UnitData] = field(default_factory=list)

    def build_board(self, palette: TerrainPalette) -> Board:
        if self.map_rows:
            return Board.from_glyphs(self.map_rows, palette)
        if self.size is None:
            raise ValueError(f"Level '{self.name}' needs either a map or a size")
        cols, rows = self.size
        return Board.filled(cols, rows, palette.default)


@dataclass
class Scenario:
    """Container for all scenario data."""

    name: str
    description: str = ""
    settings: GameSettings = field(default_factory=GameSettings)
    players: list[PlayerData] = field(default_factory=list)
    levels: list[LevelData] = field(default_factory=list)

    def create_players(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> list["Player"]:
        return [create_player(data.kind, data.name, stdin=stdin, stdout=stdout) for data in self.players]

    def build_game(
        self,
        players: Optional[Sequence["Player"]] = None,
        palette: Optional[TerrainPalette] = None,
    ) -> Game:
        """Create a ready-to-run Game.

        Args:
            players: Players to seat instead of the ones the scenario
                declares; matched to the declared players by position
            palette: Terrain palette for the level maps (default palette
                when omitted)
        """
        seated = list(players) if players is not None else self.create_players()
        if len(seated) != len(self.players):
            raise ValueError(
                f"Scenario '{self.name}' seats {len(self.players)} players, got {len(seated)}"
            )
        owners = {data.name: player for data, player in zip(self.players, seated)}
        palette = palette or get_terrain_palette()

        levels = [
            Level(level_data.build_board(palette), level_data.name, self._placement(level_data, owners))
            for level_data in self.levels
        ]
        game = Game(levels, seated, settings=self.settings)
        game.log_manager.scenario(
            f"Loaded scenario '{self.name}' with {len(levels)} level(s) and {len(seated)} players"
        )
        return game

    @staticmethod
    def _placement(level_data: LevelData, owners: dict[str, "Player"]):
        def place_units(game: Game, level: Level) -> None:
            for unit_data in level_data.units:
                unit = create_unit(unit_data.unit_class, owners[unit_data.owner], name=unit_data.name)
                game.place_unit(unit_data.position, unit)

        return place_units
