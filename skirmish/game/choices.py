"""Choice protocol between the engine and its players.

Every decision the engine needs is offered as a list of Choices. A Choice
pairs a primitive-only representation, the only thing a player ever looks
at, with an effect descriptor that the engine interprets once the player has
picked it. Effects carry their parameters explicitly and never capture engine
state, so a Choice can be inspected, serialized and compared safely.

Representations always start with a tag naming the decision kind:
    ("Unit", 2, 0)      pick the unit standing at (2, 0)
    ("Move", 3, 2)      move the selected unit to (3, 2)
    ("Action", "Bite")  pick an action kind
    ("Bite", 4, 1)      resolve that action against (4, 1)
    ("Done",)           decline the remaining options
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Sequence, Union

from ..core.data.data_structures import Position

if TYPE_CHECKING:
    from ..core.data.game_info import ActionKind
    from .actions import Action
    from .entities.unit import Unit
    from .game import Game
    from .players.player import Player

RepValue = Union[str, int]
Rep = tuple[RepValue, ...]


class ChoiceError(AssertionError):
    """A player broke the selection contract or echoed an unknown rep."""


# ============== Effect descriptors ==============


@dataclass(frozen=True)
class Pass:
    """No mutation; used by DONE."""

    def apply(self, game: "Game") -> None:
        return None


@dataclass(frozen=True)
class SelectUnit:
    unit: "Unit"

    def apply(self, game: "Game") -> "Unit":
        return self.unit


@dataclass(frozen=True)
class MoveUnit:
    src: Position
    dst: Position

    def apply(self, game: "Game") -> None:
        game.move_unit(self.src, self.dst)


@dataclass(frozen=True)
class SelectAction:
    kind: "ActionKind"

    def apply(self, game: "Game") -> "ActionKind":
        return self.kind


@dataclass(frozen=True)
class ResolveAction:
    action: "Action"

    def apply(self, game: "Game") -> "Action":
        self.action.resolve(game)
        return self.action


Effect = Union[Pass, SelectUnit, MoveUnit, SelectAction, ResolveAction]


# ============== Choice ==============


@dataclass(frozen=True, eq=False)
class Choice:
    """An opaque option offered to a player.

    Choices compare by identity: the player must hand back the very instance
    it was offered.
    """
    rep: Rep
    effect: Effect

    def __post_init__(self):
        rep = tuple(self.rep)
        if not rep or not isinstance(rep[0], str):
            raise ValueError(f"Choice rep must start with a string tag, got {rep!r}")
        for value in rep:
            if isinstance(value, bool) or not isinstance(value, (str, int)):
                raise ValueError(f"Choice rep may only hold strings and integers, got {value!r}")
        object.__setattr__(self, "rep", rep)

    @property
    def tag(self) -> str:
        return str(self.rep[0])

    def to_json(self) -> str:
        return json.dumps(list(self.rep))

    def __repr__(self) -> str:
        return f"Choice{self.rep!r}"


DONE = Choice(("Done",), Pass())


def rep_from_json(text: str) -> Rep:
    """Parse a rep echoed back by a presentation layer."""
    value = json.loads(text)
    if not isinstance(value, list):
        raise ValueError(f"Expected a JSON list, got {text!r}")
    return tuple(value)


def find_choice(choices: Sequence[Choice], rep: Sequence[RepValue]) -> Choice:
    """Resolve an echoed rep to the Choice instance it was taken from."""
    wanted = tuple(rep)
    for choice in choices:
        if choice.rep == wanted:
            return choice
    raise ChoiceError(f"No choice matches {wanted!r}")


def apply_choice(choice: Choice, game: "Game") -> Any:
    """Run a choice's effect against the game and return its result."""
    return choice.effect.apply(game)


# ============== Decision helpers ==============


def _nothing_to_decide(choices: Sequence[Choice]) -> bool:
    return len(choices) == 0 or (len(choices) == 1 and choices[0] is DONE)


def _select(player: "Player", choices: list[Choice], can_decline: bool) -> Choice:
    picked = player.select_one(list(choices), can_decline)
    if not any(picked is choice for choice in choices):
        raise ChoiceError(f"{player.name} returned {picked!r}, which was not offered")
    return picked


def choose(choices: Sequence[Choice], player: "Player", game: "Game") -> Any:
    """Have ``player`` pick one choice and apply it.

    Returns the effect's result, or None when there was nothing to decide.
    """
    if _nothing_to_decide(choices):
        return None
    picked = _select(player, list(choices), can_decline=False)
    return apply_choice(picked, game)


def choose_all_or_done(
    choices: Sequence[Choice],
    player: "Player",
    game: "Game",
    per_choice: Callable[[Any], None],
) -> None:
    """Let ``player`` pick choices one at a time until DONE or none are left.

    Each pick is applied, handed to ``per_choice`` and removed from the
    options offered next.
    """
    working = [choice for choice in choices if choice is not DONE] + [DONE]
    while not _nothing_to_decide(working):
        picked = _select(player, working, can_decline=True)
        if picked is DONE:
            return
        working = [choice for choice in working if choice is not picked]
        per_choice(apply_choice(picked, game))


def choose_or_done(
    choices: Sequence[Choice],
    player: "Player",
    game: "Game",
    per_choice: Callable[[Any], None],
) -> None:
    """Offer a single optional pick; ``per_choice`` runs unless DONE is chosen."""
    working = [choice for choice in choices if choice is not DONE] + [DONE]
    if _nothing_to_decide(working):
        return
    picked = _select(player, working, can_decline=True)
    if picked is DONE:
        return
    per_choice(apply_choice(picked, game))
