"""Computer-controlled player.

AggressivePlayer seeks the closest enemy and attacks. It only ever sees the
reps of the choices it is offered plus the board handed to ``render``, so it
keeps track of which unit it is steering from its own earlier answers.
"""

from typing import TYPE_CHECKING, Optional

from ...core.data import EffectType, Position
from ..choices import DONE
from .player import Player

if TYPE_CHECKING:
    from ..board import Board
    from ..choices import Choice
    from ..entities.unit import Unit


class AggressivePlayer(Player):
    """Moves each unit toward the closest enemy and strikes when it can."""

    def __init__(self, name: str):
        super().__init__(name)
        self.board: Optional["Board"] = None
        self.acting: Optional[Position] = None

    def render(self, board: "Board") -> None:
        self.board = board

    # ============== Board reading ==============

    def _unit_at(self, position: Optional[Position]) -> Optional["Unit"]:
        if self.board is None or position is None:
            return None
        return self.board.unit_at(position)

    def _enemies(self) -> list["Unit"]:
        if self.board is None:
            return []
        return [unit for unit in self.board.units() if unit.owner is not self and unit.is_alive]

    def _closest_enemy(self, position: Position) -> Optional["Unit"]:
        closest_enemy = None
        closest_distance = float("inf")
        for enemy in self._enemies():
            distance = position.manhattan_distance_to(enemy.position)
            if distance < closest_distance:
                closest_distance = distance
                closest_enemy = enemy
        return closest_enemy

    @staticmethod
    def _reach(unit: "Unit") -> int:
        ranges = [kind.range for kind in unit.actions if kind.effect == EffectType.DAMAGE]
        return max(ranges, default=1)

    # ============== Decisions ==============

    def select_one(self, choices: list["Choice"], can_decline: bool) -> "Choice":
        options = [choice for choice in choices if choice is not DONE]
        if not options:
            return choices[0]

        tag = options[0].tag
        if tag == "Unit":
            picked = options[0]
            self.acting = Position(picked.rep[1], picked.rep[2])
            return picked
        if tag == "Move":
            return self._pick_move(options)
        if tag == "Action":
            picked = self._pick_action(options)
            return picked if picked is not None or not can_decline else DONE
        return self._pick_target(options)

    def _pick_move(self, options: list["Choice"]) -> "Choice":
        unit = self._unit_at(self.acting)
        picked = options[0]
        if unit is not None:
            enemy = self._closest_enemy(unit.position)
            if enemy is not None:
                reach = self._reach(unit)
                best_score = None
                for choice in options:
                    cell = Position(choice.rep[1], choice.rep[2])
                    score = max(cell.manhattan_distance_to(enemy.position) - reach, 0)
                    if best_score is None or score < best_score:
                        best_score = score
                        picked = choice
        self.acting = Position(picked.rep[1], picked.rep[2])
        return picked

    def _pick_action(self, options: list["Choice"]) -> Optional["Choice"]:
        """First action kind with something to hit from where the unit stands."""
        unit = self._unit_at(self.acting)
        if unit is None or self.board is None:
            return options[0]
        by_name = {kind.name: kind for kind in unit.actions}
        for choice in options:
            kind = by_name.get(choice.rep[1])
            if kind is None:
                continue
            for position in self.board.near_positions(kind.range, unit.position):
                occupant = self.board.unit_at(position)
                if not kind.accepts(unit, occupant):
                    continue
                # healing a unit at full strength is wasted
                if kind.effect == EffectType.HEAL and occupant.health >= occupant.max_health:
                    continue
                return choice
        return None

    def _pick_target(self, options: list["Choice"]) -> "Choice":
        """Weakest occupant among the offered targets."""
        picked = options[0]
        weakest = None
        for choice in options:
            occupant = self._unit_at(Position(choice.rep[1], choice.rep[2]))
            if occupant is None:
                continue
            if weakest is None or occupant.health < weakest:
                weakest = occupant.health
                picked = choice
        return picked
