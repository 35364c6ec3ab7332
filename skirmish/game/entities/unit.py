"""Units: the pieces players move around the board.

A unit belongs to one player for its whole life. It is created detached,
placed on a board exactly once, and stays selectable until its health drops
to zero.
"""

import uuid
from typing import TYPE_CHECKING, Callable, Optional, Sequence

from ...core.data import ActionKind, Position, UnitClass
from ...core.events.events import GameEvent, UnitDefeated
from ..choices import Choice, MoveUnit, SelectAction

if TYPE_CHECKING:
    from ..board import Board
    from ..players.player import Player


class Unit:
    """A unit with health, movement range and a list of action kinds.

    Examples:
        unit = Unit("Fang", owner, health=10, movement=4, actions=(BITE,))
        board.place(Position(0, 0), unit)
        unit.move_choices(board)    # [Choice('Move', 1, 0), ...]
        unit.action_choices()       # [Choice('Action', 'Bite')]
    """

    def __init__(
        self,
        name: str,
        owner: "Player",
        health: int = 10,
        movement: int = 3,
        power: int = 4,
        actions: Sequence[ActionKind] = (),
        unit_class: Optional[UnitClass] = None,
        symbol: Optional[str] = None,
        unit_id: Optional[str] = None,
    ):
        if health <= 0:
            raise ValueError(f"Unit '{name}' must start with positive health, got {health}")
        if movement < 0:
            raise ValueError(f"Unit '{name}' movement cannot be negative, got {movement}")

        self.unit_id = unit_id or uuid.uuid4().hex[:8]
        self.name = name
        self._owner = owner
        self.unit_class = unit_class
        self.symbol = symbol or name[:1].upper()
        self.health = health
        self.max_health = health
        self.movement = movement
        self.power = power
        self.actions: tuple[ActionKind, ...] = tuple(actions)
        self.position: Optional[Position] = None
        self.has_acted = False

    @property
    def owner(self) -> "Player":
        """Owning player; fixed at creation."""
        return self._owner

    # ============== Health ==============

    @property
    def is_dead(self) -> bool:
        return self.health <= 0

    @property
    def is_alive(self) -> bool:
        return not self.is_dead

    def hurt(self, amount: int, emit: Optional[Callable[[GameEvent], None]] = None) -> None:
        """Apply damage, or healing when ``amount`` is negative.

        Dead units ignore further calls. The transition into death publishes
        UnitDefeated through ``emit``, so it happens at most once.
        """
        if self.is_dead:
            return
        self.health -= amount
        if self.is_dead and emit is not None:
            emit(UnitDefeated(unit=self))

    # ============== Allegiance ==============

    def is_enemy(self, other: Optional["Unit"]) -> bool:
        return other is not None and other.owner is not self.owner

    def is_friend(self, other: Optional["Unit"]) -> bool:
        return other is not None and other.owner is self.owner

    # ============== Turn bookkeeping ==============

    @property
    def can_act(self) -> bool:
        return self.is_alive and not self.has_acted

    def mark_done(self) -> None:
        self.has_acted = True

    def new_turn(self) -> None:
        self.has_acted = False

    # ============== Choices ==============

    def _require_position(self) -> Position:
        if self.position is None:
            raise RuntimeError(f"Unit '{self.name}' has not been placed on a board")
        return self.position

    def move_choices(self, board: "Board") -> list[Choice]:
        """One Move choice per free cell within movement range.

        The unit's own cell is occupied by itself, so it is never offered.
        """
        here = self._require_position()
        return [
            Choice(("Move", dst.x, dst.y), MoveUnit(here, dst))
            for dst in board.free_positions_near(self.movement, here)
        ]

    def action_choices(self) -> list[Choice]:
        """One choice per distinct action kind, in capability order."""
        kinds: list[ActionKind] = []
        for kind in self.actions:
            if kind not in kinds:
                kinds.append(kind)
        return [Choice(kind.rep(), SelectAction(kind)) for kind in kinds]

    def __repr__(self) -> str:
        return f"Unit({self.name!r}, owner={self.owner.name!r}, health={self.health}, position={self.position})"
