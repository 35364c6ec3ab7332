"""Engine events and their player-facing descriptions.

Event Design Principles:
- Events are immutable dataclasses with rich object payloads
- Each event class is bound to one EventType
- ``describe()`` returns the free-text broadcast for players, or None when
  the event is only of interest to the log
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, ClassVar, Optional

if TYPE_CHECKING:
    from ..data.data_structures import Position
    from ...game.entities.unit import Unit


class EventType(Enum):
    """Types of engine events that subscribers can listen to."""
    # Game and level flow
    GAME_STARTED = auto()
    GAME_ENDED = auto()
    LEVEL_STARTED = auto()
    LEVEL_FINISHED = auto()

    # Turn flow
    TURN_STARTED = auto()
    TURN_ENDED = auto()

    # Unit events
    UNIT_PLACED = auto()
    UNIT_MOVED = auto()
    UNIT_DAMAGED = auto()
    UNIT_HEALED = auto()
    UNIT_DEFEATED = auto()

    # Presentation requests
    BOARD_REDRAW = auto()
    MESSAGE = auto()


@dataclass(frozen=True)
class GameEvent:
    """Base class for all engine events."""
    event_type: ClassVar[EventType]

    def describe(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class GameStarted(GameEvent):
    """Emitted once when a game begins running."""
    event_type = EventType.GAME_STARTED
    welcome: str

    def describe(self) -> Optional[str]:
        return self.welcome


@dataclass(frozen=True)
class GameEnded(GameEvent):
    event_type = EventType.GAME_ENDED
    winner: Optional[str] = None

    def describe(self) -> Optional[str]:
        if self.winner is None:
            return "Game over."
        return f"Game over. {self.winner} wins!"


@dataclass(frozen=True)
class LevelStarted(GameEvent):
    event_type = EventType.LEVEL_STARTED
    level: str


@dataclass(frozen=True)
class LevelFinished(GameEvent):
    """Emitted when at most one player still has living units on a level."""
    event_type = EventType.LEVEL_FINISHED
    level: str
    winner: Optional[str] = None

    def describe(self) -> Optional[str]:
        if self.winner is None:
            return f"Level {self.level} finished."
        return f"Level {self.level} finished. {self.winner} holds the field."


@dataclass(frozen=True)
class TurnStarted(GameEvent):
    event_type = EventType.TURN_STARTED
    player: str
    round: int


@dataclass(frozen=True)
class TurnEnded(GameEvent):
    event_type = EventType.TURN_ENDED
    player: str
    round: int

    def describe(self) -> Optional[str]:
        return f"{self.player}'s turn is over."


@dataclass(frozen=True)
class UnitPlaced(GameEvent):
    event_type = EventType.UNIT_PLACED
    unit: "Unit"
    position: "Position"


@dataclass(frozen=True)
class UnitMoved(GameEvent):
    event_type = EventType.UNIT_MOVED
    unit: "Unit"
    from_position: "Position"
    to_position: "Position"


@dataclass(frozen=True)
class UnitDamaged(GameEvent):
    """Emitted when an action deals damage, before the damage lands."""
    event_type = EventType.UNIT_DAMAGED
    attacker: "Unit"
    target: "Unit"
    amount: int
    verb: str

    def describe(self) -> Optional[str]:
        return (
            f"{self.attacker.name} {self.verb} {self.target.name} "
            f"for {self.amount} damage."
        )


@dataclass(frozen=True)
class UnitHealed(GameEvent):
    event_type = EventType.UNIT_HEALED
    healer: "Unit"
    target: "Unit"
    amount: int
    verb: str

    def describe(self) -> Optional[str]:
        return (
            f"{self.healer.name} {self.verb} {self.target.name}, "
            f"restoring {self.amount} health."
        )


@dataclass(frozen=True)
class UnitDefeated(GameEvent):
    """Emitted exactly once, when a unit's health first drops to zero or below."""
    event_type = EventType.UNIT_DEFEATED
    unit: "Unit"

    def describe(self) -> Optional[str]:
        return f"{self.unit.name} has died."


@dataclass(frozen=True)
class BoardRedraw(GameEvent):
    """Request for every player to redraw the full board."""
    event_type = EventType.BOARD_REDRAW


@dataclass(frozen=True)
class Message(GameEvent):
    """Free-text notice for every player."""
    event_type = EventType.MESSAGE
    text: str

    def describe(self) -> Optional[str]:
        return self.text
