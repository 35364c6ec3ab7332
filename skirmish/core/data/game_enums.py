"""Centralized game enums.

Single source of truth for the closed sets of kinds used by the engine.
"""

from enum import Enum, auto


class UnitClass(Enum):
    """Unit classes with distinct stats and action sets."""
    WARRIOR = auto()
    ARCHER = auto()
    PRIEST = auto()
    WOLF = auto()


class TargetRule(Enum):
    """Which occupants an action kind may target."""
    ENEMY = auto()
    FRIEND = auto()


class EffectType(Enum):
    """What resolving an action does to its target."""
    DAMAGE = auto()
    HEAL = auto()


class PlayerKind(Enum):
    """Player variants a scenario may declare."""
    SCRIPTED = "scripted"
    CONSOLE = "console"
    AGGRESSIVE = "aggressive"


UNIT_CLASS_NAMES = {
    UnitClass.WARRIOR: "Warrior",
    UnitClass.ARCHER: "Archer",
    UnitClass.PRIEST: "Priest",
    UnitClass.WOLF: "Wolf",
}
