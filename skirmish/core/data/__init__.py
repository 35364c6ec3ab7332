"""Core data structures and definitions.

This package contains fundamental data types and game definitions:
- data_structures.py: Position and mask helpers for spatial operations
- game_enums.py: Centralized enums for unit classes, targeting and effects
- game_info.py: Static terrain, action kind and unit class tables
"""

from .data_structures import Position, positions_from_mask
from .game_enums import EffectType, PlayerKind, TargetRule, UnitClass, UNIT_CLASS_NAMES
from .game_info import (
    ACTION,
    ACTION_DATA,
    FOREST,
    GRASS,
    MOUNTAINS,
    PLAINS,
    TERRAIN_DATA,
    UNIT_CLASS_DATA,
    WATER,
    ActionKind,
    TerrainKind,
    UnitClassInfo,
    UnitStats,
)

__all__ = [
    "Position",
    "positions_from_mask",
    "EffectType",
    "PlayerKind",
    "TargetRule",
    "UnitClass",
    "UNIT_CLASS_NAMES",
    "ACTION",
    "ACTION_DATA",
    "FOREST",
    "GRASS",
    "MOUNTAINS",
    "PLAINS",
    "TERRAIN_DATA",
    "UNIT_CLASS_DATA",
    "WATER",
    "ActionKind",
    "TerrainKind",
    "UnitClassInfo",
    "UnitStats",
]
