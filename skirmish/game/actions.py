"""Action instances generated from a unit's action kinds.

An Action is not stored anywhere: it is produced fresh whenever the engine
asks what a unit can do, as (actor, kind, target position). Resolution reads
the kind's effect and re-fetches the occupant of the target cell, since the
board may have changed since generation.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ..core.data import ActionKind, EffectType, Position
from ..core.events.events import UnitDamaged, UnitHealed
from .choices import Choice, ResolveAction

if TYPE_CHECKING:
    from .board import Board
    from .entities.unit import Unit
    from .game import Game


@dataclass(frozen=True, eq=False)
class Action:
    actor: "Unit"
    kind: ActionKind
    position: Position

    def rep(self) -> tuple[str, int, int]:
        return (self.kind.name, self.position.x, self.position.y)

    def target(self, board: "Board") -> Optional["Unit"]:
        """Whatever occupies the target cell right now."""
        return board.unit_at(self.position)

    def resolve(self, game: "Game") -> None:
        """Apply the kind's effect to the current occupant of the target cell."""
        if self.kind.effect is None:
            raise NotImplementedError(f"Action kind '{self.kind.name}' has no resolution")

        target = self.target(game.board)
        if target is None:
            return

        amount = self.kind.magnitude(self.actor)
        if self.kind.effect == EffectType.HEAL:
            game.publish(UnitHealed(healer=self.actor, target=target, amount=amount, verb=self.kind.verb))
            target.hurt(-amount, game.publish)
        else:
            game.publish(UnitDamaged(attacker=self.actor, target=target, amount=amount, verb=self.kind.verb))
            target.hurt(amount, game.publish)

    def to_choice(self) -> Choice:
        return Choice(self.rep(), ResolveAction(self))


def generate(kind: ActionKind, unit: "Unit", board: "Board") -> list[Action]:
    """One Action per cell in range whose occupant the kind accepts."""
    if unit.position is None:
        raise RuntimeError(f"Unit '{unit.name}' has not been placed on a board")
    return [
        Action(unit, kind, position)
        for position in board.near_positions(kind.range, unit.position)
        if kind.accepts(unit, board.unit_at(position))
    ]


def target_choices(kind: ActionKind, unit: "Unit", board: "Board") -> list[Choice]:
    return [action.to_choice() for action in generate(kind, unit, board)]
