from pathlib import Path
from typing import Any, Optional

import yaml

from ...core.data import PlayerKind, Position
from ...core.palette_loader import TerrainPalette, get_terrain_palette
from ..entities.unit_templates import parse_unit_class
from ..game import GameSettings
from .scenario import LevelData, PlayerData, Scenario, UnitData


class ScenarioLoader:
    """Handles loading scenarios from YAML files."""

    @staticmethod
    def load_from_file(file_path: str, palette: Optional[TerrainPalette] = None) -> Scenario:
        """Load and validate a scenario from a YAML file."""
        path_obj = Path(file_path)
        if not path_obj.exists():
            raise FileNotFoundError(f"Scenario file not found: {file_path}")

        try:
            with open(path_obj, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML scenario: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Scenario file {path_obj.name} must contain a mapping")

        return ScenarioLoader.parse_scenario(data, palette)

    @staticmethod
    def parse_scenario(data: dict[str, Any], palette: Optional[TerrainPalette] = None) -> Scenario:
        """Parse scenario data from a dictionary."""
        scenario = Scenario(
            name=data.get("name", "Unnamed Scenario"),
            description=data.get("description", ""),
        )

        if "settings" in data:
            scenario.settings = ScenarioLoader._parse_settings(data["settings"] or {})

        for player_data in data.get("players") or []:
            scenario.players.append(ScenarioLoader._parse_player(player_data))
        if not scenario.players:
            raise ValueError("Scenario must declare at least one player")
        names = [player.name for player in scenario.players]
        if len(set(names)) != len(names):
            raise ValueError(f"Player names must be unique, got {names}")

        for level_data in data.get("levels") or []:
            scenario.levels.append(ScenarioLoader._parse_level(level_data, set(names)))
        if not scenario.levels:
            raise ValueError("Scenario must declare at least one level")

        ScenarioLoader._validate_levels(scenario, palette or get_terrain_palette())
        return scenario

    @staticmethod
    def _parse_settings(settings_data: dict[str, Any]) -> GameSettings:
        settings = GameSettings()
        if "welcome" in settings_data:
            settings.welcome = str(settings_data["welcome"])
        turn_limit = settings_data.get("turn_limit")
        if turn_limit is not None:
            if not isinstance(turn_limit, int) or turn_limit < 1:
                raise ValueError(f"turn_limit must be a positive integer, got {turn_limit!r}")
            settings.turn_limit = turn_limit
        settings.debug_events = bool(settings_data.get("debug_events", False))
        return settings

    @staticmethod
    def _parse_player(player_data: dict[str, Any]) -> PlayerData:
        if "name" not in player_data:
            raise ValueError(f"Player entry needs a name: {player_data}")
        kind_name = str(player_data.get("kind", PlayerKind.SCRIPTED.value))
        try:
            kind = PlayerKind(kind_name.lower())
        except ValueError:
            raise ValueError(f"Unknown player kind: {kind_name}") from None
        return PlayerData(name=str(player_data["name"]), kind=kind)

    @staticmethod
    def _parse_level(level_data: dict[str, Any], owners: set[str]) -> LevelData:
        level = LevelData(name=str(level_data.get("name", "Unnamed Level")))

        map_rows = level_data.get("map")
        if map_rows:
            level.map_rows = [str(row) for row in map_rows]
        elif "size" in level_data:
            size = level_data["size"]
            if not isinstance(size, list) or len(size) != 2:
                raise ValueError(f"Size must be a [cols, rows] list in level '{level.name}', got {size!r}")
            cols, rows = size
            level.size = (int(cols), int(rows))
        else:
            raise ValueError(f"Level '{level.name}' needs either a map or a size")

        for unit_data in level_data.get("units") or []:
            if not isinstance(unit_data, dict):
                raise ValueError(f"Unit entry must be a mapping in level '{level.name}', got {unit_data!r}")
            owner = unit_data.get("owner")
            if owner not in owners:
                raise ValueError(f"Unit in level '{level.name}' has unknown owner: {owner}")
            for key in ("at", "class"):
                if key not in unit_data:
                    raise ValueError(f"Unit entry is missing '{key}' in level '{level.name}'")
            if not isinstance(unit_data["at"], list):
                raise ValueError(f"Unit 'at' must be an [x, y] list in level '{level.name}'")
            x, y = Position.from_list(unit_data["at"])
            level.units.append(UnitData(
                unit_class=parse_unit_class(str(unit_data["class"])),
                owner=owner,
                x=x,
                y=y,
                name=unit_data.get("name"),
            ))
        return level

    @staticmethod
    def _validate_levels(scenario: Scenario, palette: TerrainPalette) -> None:
        """Build each board once so bad glyphs and placements fail at load time."""
        for level in scenario.levels:
            board = level.build_board(palette)
            taken: set[Position] = set()
            for unit in level.units:
                position = unit.position
                if not (0 <= position.x < board.width and 0 <= position.y < board.height):
                    raise ValueError(f"Unit at {position.to_tuple()} is outside level '{level.name}'")
                if position in taken:
                    raise ValueError(f"Two units start at {position.to_tuple()} in level '{level.name}'")
                taken.add(position)
