import json
import sys
from typing import TYPE_CHECKING, Optional, TextIO

from ..choices import ChoiceError, find_choice, rep_from_json
from .player import Player

if TYPE_CHECKING:
    from ..board import Board
    from ..choices import Choice


class ConsolePlayer(Player):
    """Interactive player reading answers from a text stream.

    Options are listed by number. The answer may be the number or the
    option's rep as JSON, e.g. ``["Move", 3, 2]``. Malformed answers are
    reported and the question is asked again.
    """

    def __init__(self, name: str, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        super().__init__(name)
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def _write(self, text: str) -> None:
        self.stdout.write(text + "\n")
        self.stdout.flush()

    @staticmethod
    def format_choice(choice: "Choice") -> str:
        return " ".join(str(value) for value in choice.rep)

    def select_one(self, choices: list["Choice"], can_decline: bool) -> "Choice":
        self._write(f"{self.name}, choose{' (or Done)' if can_decline else ''}:")
        for index, choice in enumerate(choices):
            self._write(f"  [{index}] {self.format_choice(choice)}")

        while True:
            self.stdout.write("> ")
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                raise EOFError(f"Input closed while {self.name} was choosing")
            answer = line.strip()

            picked = self._parse_answer(answer, choices)
            if picked is not None:
                return picked
            self._write(f"Invalid choice: {answer!r}")

    def _parse_answer(self, answer: str, choices: list["Choice"]) -> Optional["Choice"]:
        if answer.isdecimal():
            index = int(answer)
            return choices[index] if index < len(choices) else None
        try:
            return find_choice(choices, rep_from_json(answer))
        except (json.JSONDecodeError, ValueError, ChoiceError):
            return None

    def notify(self, message: str) -> None:
        self._write(message)

    def render(self, board: "Board") -> None:
        self._write("")
        for row in board.to_glyphs():
            self._write(row)
        self._write("")
