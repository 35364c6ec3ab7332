"""Player abstraction.

A player owns a roster of units and answers the engine's questions. The
engine only ever calls three things on a player:

- ``select_one(choices, can_decline)`` must return one of the offered choices
- ``notify(message)`` receives a broadcast notice
- ``render(board)`` receives a full board redraw

Players never mutate the game themselves; everything they do happens through
the choices they return.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..board import Board
    from ..choices import Choice
    from ..entities.unit import Unit


class Player:
    """Base player. Subclasses provide the selection capability."""

    def __init__(self, name: str):
        self.name = name
        self.units: list["Unit"] = []

    # ============== Roster ==============

    def add_unit(self, unit: "Unit") -> None:
        """Add a unit this player owns to the roster."""
        if unit.owner is not self:
            raise ValueError(f"{unit.name} belongs to {unit.owner.name}, not {self.name}")
        if any(existing is unit for existing in self.units):
            raise ValueError(f"{unit.name} is already in {self.name}'s roster")
        self.units.append(unit)

    def disband(self) -> None:
        """Drop every unit from the roster, e.g. before a new level."""
        self.units.clear()

    def living_units(self) -> list["Unit"]:
        return [unit for unit in self.units if unit.is_alive]

    def ready_units(self) -> list["Unit"]:
        """Living units that have not acted this round."""
        return [unit for unit in self.units if unit.can_act]

    def has_living_units(self) -> bool:
        return any(unit.is_alive for unit in self.units)

    # ============== Engine capability ==============

    def select_one(self, choices: list["Choice"], can_decline: bool) -> "Choice":
        """Return exactly one element of ``choices``.

        Args:
            choices: Non-empty list of options; DONE is among them when
                ``can_decline`` is True
            can_decline: Whether the player may opt out of this decision
        """
        raise NotImplementedError(f"{type(self).__name__} cannot select choices")

    def notify(self, message: str) -> None:
        pass

    def render(self, board: "Board") -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, units={len(self.units)})"
