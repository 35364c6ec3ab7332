"""Rule sets deciding what a single player turn consists of."""

from typing import TYPE_CHECKING

from .actions import target_choices
from .choices import choose, choose_all_or_done, choose_or_done

if TYPE_CHECKING:
    from ..core.data import ActionKind
    from .entities.unit import Unit
    from .game import Game
    from .players.player import Player


class RuleSet:
    """Base strategy for running a turn."""

    @property
    def name(self) -> str:
        raise NotImplementedError(f"{type(self).__name__} does not define a name")

    def turn(self, game: "Game", player: "Player") -> None:
        raise NotImplementedError(f"{type(self).__name__} does not define a turn")


class Skirmish(RuleSet):
    """Standard turn: each ready unit may move once, then use one action.

    The player picks units one at a time until they decline or every unit has
    acted. For each unit, moving is mandatory whenever a free cell is in
    reach; choosing an action kind is optional; a chosen kind must be aimed
    at one of its valid targets, if there are any.
    """

    @property
    def name(self) -> str:
        return "Skirmish"

    def turn(self, game: "Game", player: "Player") -> None:
        game.start_turn(player)
        choose_all_or_done(
            game.unit_choices(player),
            player,
            game,
            lambda unit: self.unit_turn(game, player, unit),
        )
        game.end_turn(player)

    def unit_turn(self, game: "Game", player: "Player", unit: "Unit") -> None:
        moves = unit.move_choices(game.board)
        if moves:
            choose(moves, player, game)
            game.redraw()

        choose_or_done(
            unit.action_choices(),
            player,
            game,
            lambda kind: self.use_action(game, player, unit, kind),
        )
        unit.mark_done()

    def use_action(self, game: "Game", player: "Player", unit: "Unit", kind: "ActionKind") -> None:
        targets = target_choices(kind, unit, game.board)
        if targets:
            choose(targets, player, game)
            game.redraw()
