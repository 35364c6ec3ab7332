"""Unit class templates.

Builds units from the static UNIT_CLASS_DATA table so scenarios only need to
name a class and an owner.
"""

from typing import TYPE_CHECKING, Optional

from ...core.data import ACTION_DATA, UNIT_CLASS_DATA, UnitClass
from .unit import Unit

if TYPE_CHECKING:
    from ..players.player import Player


def parse_unit_class(name: str) -> UnitClass:
    """Convert a class name such as "archer" to its enum value."""
    try:
        return UnitClass[name.upper()]
    except KeyError:
        raise ValueError(f"Unknown unit class: {name}") from None


def create_unit(
    unit_class: UnitClass,
    owner: "Player",
    name: Optional[str] = None,
    unit_id: Optional[str] = None,
) -> Unit:
    """Create a detached unit with the base stats of its class."""
    info = UNIT_CLASS_DATA[unit_class]
    stats = info.base_stats
    return Unit(
        name=name or info.name,
        owner=owner,
        health=stats.health,
        movement=stats.movement,
        power=stats.power,
        actions=[ACTION_DATA[action_name] for action_name in info.actions],
        unit_class=unit_class,
        symbol=info.symbol,
        unit_id=unit_id,
    )
