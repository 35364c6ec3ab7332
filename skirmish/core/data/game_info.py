"""Static information about terrain, action kinds and unit classes.

Every kind here is plain data. Behavior that depends on a kind is selected by
reading these fields, never by subclassing.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from .game_enums import EffectType, TargetRule, UnitClass, UNIT_CLASS_NAMES


@dataclass(frozen=True)
class TerrainKind:
    """A terrain type, distinguished only by its display name."""
    name: str
    symbol: str = "?"

    def rep(self) -> tuple[str]:
        return (self.name,)


@dataclass(frozen=True)
class ActionKind:
    """Per-kind configuration for actions a unit can take.

    Kinds differ only in their targeting range, which occupants they accept
    and what resolving them does. A kind without an effect is abstract and
    cannot be resolved.
    """
    name: str
    range: int = 1
    target: TargetRule = TargetRule.ENEMY
    effect: Optional[EffectType] = None
    verb: str = ""
    bonus: int = 0

    def rep(self) -> tuple[str, str]:
        return ("Action", self.name)

    def accepts(self, unit: Any, occupant: Any) -> bool:
        """Check whether ``occupant`` is a legal target for ``unit``."""
        if self.target == TargetRule.FRIEND:
            return unit.is_friend(occupant)
        return unit.is_enemy(occupant)

    def magnitude(self, unit: Any) -> int:
        """Amount applied to the target when ``unit`` resolves this kind."""
        return unit.power + self.bonus


@dataclass
class UnitStats:
    """Base statistics for a unit class."""
    health: int = 10
    movement: int = 3
    power: int = 4


@dataclass
class UnitClassInfo:
    """Static information about a unit class."""
    name: str
    symbol: str
    base_stats: UnitStats
    actions: tuple[str, ...] = field(default_factory=tuple)


# Abstract kind; resolving it is a configuration fault.
ACTION = ActionKind("Action")

ACTION_DATA: dict[str, ActionKind] = {
    kind.name: kind
    for kind in (
        ActionKind("Slash", effect=EffectType.DAMAGE, verb="slashes"),
        ActionKind("Bite", effect=EffectType.DAMAGE, verb="bites"),
        ActionKind("Shoot", range=3, effect=EffectType.DAMAGE, verb="shoots", bonus=-1),
        ActionKind("Mend", target=TargetRule.FRIEND, effect=EffectType.HEAL, verb="mends"),
    )
}

UNIT_CLASS_DATA: dict[UnitClass, UnitClassInfo] = {
    UnitClass.WARRIOR: UnitClassInfo(
        name=UNIT_CLASS_NAMES[UnitClass.WARRIOR],
        symbol="W",
        base_stats=UnitStats(health=12, movement=3, power=4),
        actions=("Slash",),
    ),
    UnitClass.ARCHER: UnitClassInfo(
        name=UNIT_CLASS_NAMES[UnitClass.ARCHER],
        symbol="A",
        base_stats=UnitStats(health=8, movement=3, power=4),
        actions=("Shoot",),
    ),
    UnitClass.PRIEST: UnitClassInfo(
        name=UNIT_CLASS_NAMES[UnitClass.PRIEST],
        symbol="P",
        base_stats=UnitStats(health=8, movement=2, power=3),
        actions=("Mend", "Slash"),
    ),
    UnitClass.WOLF: UnitClassInfo(
        name=UNIT_CLASS_NAMES[UnitClass.WOLF],
        symbol="w",
        base_stats=UnitStats(health=10, movement=4, power=4),
        actions=("Bite",),
    ),
}

FOREST = TerrainKind("Forest", "T")
GRASS = TerrainKind("Grass", ".")
MOUNTAINS = TerrainKind("Mountains", "^")
PLAINS = TerrainKind("Plains", "_")
WATER = TerrainKind("Water", "~")

TERRAIN_DATA: dict[str, TerrainKind] = {
    terrain.name: terrain for terrain in (FOREST, GRASS, MOUNTAINS, PLAINS, WATER)
}
