"""
Game state machine.

A Game owns an ordered list of levels and players. Each level is played as a
sequence of turns, one player at a time in registration order, until at most
one player still has living units. What a single turn looks like is decided
by the game's RuleSet.

Everything that happens is published on the game's EventManager. The game
itself subscribes a fan-out that forwards event text to every player's
``notify`` and board redraws to every player's ``render``.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional, Sequence

from ..core.data import Position
from ..core.events import (
    BoardRedraw,
    EventManager,
    EventType,
    GameEnded,
    GameEvent,
    GameStarted,
    LevelFinished,
    LevelStarted,
    Message,
    TurnEnded,
    TurnStarted,
    UnitDefeated,
    UnitMoved,
    UnitPlaced,
)
from .choices import Choice, SelectUnit
from .managers.log_manager import LogManager
from .rules import RuleSet, Skirmish

if TYPE_CHECKING:
    from .board import Board
    from .entities.unit import Unit
    from .players.player import Player


@dataclass
class GameSettings:
    """Tunable game options, usually read from a scenario file."""
    welcome: str = "Welcome to Skirmish!"
    turn_limit: Optional[int] = None  # rounds per level; None plays until one side remains
    debug_events: bool = False


class Level:
    """A board plus the setup that populates it when the level begins."""

    def __init__(
        self,
        board: "Board",
        name: str = "Level",
        on_start: Optional[Callable[["Game", "Level"], None]] = None,
    ):
        self.board = board
        self.name = name
        self.on_start = on_start

    def start(self, game: "Game") -> None:
        if self.on_start is not None:
            self.on_start(game, self)

    def __repr__(self) -> str:
        return f"Level({self.name!r}, {self.board.width}x{self.board.height})"


class Game:
    """Runs levels turn by turn and routes events to players."""

    def __init__(
        self,
        levels: Sequence[Level],
        players: Sequence["Player"],
        rules: Optional[RuleSet] = None,
        settings: Optional[GameSettings] = None,
    ):
        if not levels:
            raise ValueError("A game needs at least one level")
        if not players:
            raise ValueError("A game needs at least one player")

        self.levels = list(levels)
        self.players = list(players)
        self.rules = rules or Skirmish()
        self.settings = settings or GameSettings()

        self.level_index = 0
        self.player_index = 0
        self.round = 1
        self.done = False

        self.event_manager = EventManager(enable_debug_logging=self.settings.debug_events)
        self.event_manager.subscribe(
            EventType.UNIT_DEFEATED, self._on_unit_defeated, subscriber_name="Game.unit_defeated"
        )
        self.event_manager.subscribe_all(self._fan_out, subscriber_name="Game.players")
        self.log_manager = LogManager(self.event_manager, trace_events=self.settings.debug_events)

    # ============== Events ==============

    def publish(self, event: GameEvent) -> None:
        self.event_manager.publish(event, source="Game")

    def broadcast(self, message: str) -> None:
        """Send a free-text notice to every player."""
        self.publish(Message(text=message))

    def redraw(self) -> None:
        """Have every player render the current board."""
        self.publish(BoardRedraw())

    def _fan_out(self, event: GameEvent) -> None:
        if isinstance(event, BoardRedraw):
            for player in self.players:
                player.render(self.board)
            return
        text = event.describe()
        if text:
            for player in self.players:
                player.notify(text)

    def _on_unit_defeated(self, event: GameEvent) -> None:
        assert isinstance(event, UnitDefeated)
        unit = event.unit
        if unit.position is not None and self.board.unit_at(unit.position) is unit:
            self.board.remove(unit.position)

    # ============== Current state ==============

    @property
    def level(self) -> Level:
        return self.levels[self.level_index]

    @property
    def board(self) -> "Board":
        return self.level.board

    @property
    def current_player(self) -> "Player":
        return self.players[self.player_index]

    def advance_player(self) -> None:
        """Move to the next player, wrapping around into a new round."""
        self.player_index = (self.player_index + 1) % len(self.players)
        if self.player_index == 0:
            self.round += 1

    # ============== Board mutation ==============

    def place_unit(self, position: Position, unit: "Unit") -> None:
        """Put a unit into play and add it to its owner's roster."""
        self.board.place(position, unit)
        unit.owner.add_unit(unit)
        self.publish(UnitPlaced(unit=unit, position=position))

    def move_unit(self, src: Position, dst: Position) -> None:
        unit = self.board.unit_at(src)
        self.board.move(src, dst)
        if unit is not None:
            self.publish(UnitMoved(unit=unit, from_position=src, to_position=dst))

    # ============== Turns ==============

    def unit_choices(self, player: "Player") -> list[Choice]:
        """One choice per unit of ``player`` that may still act this turn."""
        return [
            Choice(("Unit", unit.position.x, unit.position.y), SelectUnit(unit))
            for unit in player.ready_units()
            if unit.position is not None
        ]

    def start_turn(self, player: "Player") -> None:
        for unit in player.units:
            unit.new_turn()
        self.publish(TurnStarted(player=player.name, round=self.round))

    def end_turn(self, player: "Player") -> None:
        self.publish(TurnEnded(player=player.name, round=self.round))

    def turn(self, player: "Player") -> None:
        self.rules.turn(self, player)

    def players_with_living_units(self) -> list["Player"]:
        return [player for player in self.players if player.has_living_units()]

    def level_finished(self) -> bool:
        if len(self.players_with_living_units()) <= 1:
            return True
        limit = self.settings.turn_limit
        return limit is not None and self.round > limit

    def winner(self) -> Optional["Player"]:
        """The only player left standing, if there is exactly one."""
        standing = self.players_with_living_units()
        return standing[0] if len(standing) == 1 else None

    # ============== Main loop ==============

    def play_level(self) -> None:
        """Set up the current level and take turns until it is finished."""
        level = self.level
        for player in self.players:
            player.disband()
        self.player_index = 0
        self.round = 1

        level.start(self)
        self.publish(LevelStarted(level=level.name))
        self.redraw()

        while not self.level_finished():
            player = self.current_player
            if player.has_living_units():
                self.turn(player)
            self.advance_player()

        winner = self.winner()
        self.publish(LevelFinished(level=level.name, winner=winner.name if winner else None))

    def run(self) -> Optional["Player"]:
        """Play every level in order and return the last level's winner."""
        self.publish(GameStarted(welcome=self.settings.welcome))

        winner = None
        for index in range(len(self.levels)):
            self.level_index = index
            self.play_level()
            winner = self.winner()

        self.done = True
        self.publish(GameEnded(winner=winner.name if winner else None))
        return winner
