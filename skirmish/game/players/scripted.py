from collections import deque
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from ..choices import RepValue, find_choice
from .player import Player

if TYPE_CHECKING:
    from ..board import Board
    from ..choices import Choice


class ScriptedPlayer(Player):
    """Automatic player that answers from a script, then a fixed index.

    Script entries are reps, consumed in order; once the script runs out the
    player always picks ``choices[pick]`` (clamped to the list).
    """

    def __init__(
        self,
        name: str,
        pick: int = 0,
        script: Optional[Iterable[Sequence[RepValue]]] = None,
    ):
        super().__init__(name)
        self.pick = pick
        self.script: deque[tuple[RepValue, ...]] = deque(tuple(rep) for rep in (script or ()))
        self.messages: list[str] = []
        self.renders = 0
        self.decisions: list[tuple[RepValue, ...]] = []

    def select_one(self, choices: list["Choice"], can_decline: bool) -> "Choice":
        if self.script:
            picked = find_choice(choices, self.script.popleft())
        else:
            index = max(-len(choices), min(self.pick, len(choices) - 1))
            picked = choices[index]
        self.decisions.append(picked.rep)
        return picked

    def notify(self, message: str) -> None:
        self.messages.append(message)

    def render(self, board: "Board") -> None:
        self.renders += 1
