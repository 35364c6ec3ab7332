"""Skirmish: a turn-based tactical rules engine."""

from .game.board import Board, OccupiedError
from .game.choices import DONE, Choice, ChoiceError, find_choice
from .game.game import Game, GameSettings, Level
from .game.rules import RuleSet, Skirmish
from .game.scenarios import Scenario, ScenarioLoader

__version__ = "0.1.0"

__all__ = [
    "Board",
    "Choice",
    "ChoiceError",
    "DONE",
    "Game",
    "GameSettings",
    "Level",
    "OccupiedError",
    "RuleSet",
    "Scenario",
    "ScenarioLoader",
    "Skirmish",
    "find_choice",
]
