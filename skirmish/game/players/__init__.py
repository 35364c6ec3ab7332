from typing import Optional, TextIO

from ...core.data import PlayerKind
from .ai_player import AggressivePlayer
from .console import ConsolePlayer
from .player import Player
from .scripted import ScriptedPlayer


def create_player(
    kind: PlayerKind,
    name: str,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> Player:
    """Build a player of the given kind; streams only matter for console players."""
    if kind == PlayerKind.CONSOLE:
        return ConsolePlayer(name, stdin=stdin, stdout=stdout)
    if kind == PlayerKind.AGGRESSIVE:
        return AggressivePlayer(name)
    return ScriptedPlayer(name)


__all__ = [
    "AggressivePlayer",
    "ConsolePlayer",
    "Player",
    "ScriptedPlayer",
    "create_player",
]
