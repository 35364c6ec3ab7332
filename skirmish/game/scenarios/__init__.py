from .scenario import LevelData, PlayerData, Scenario, UnitData
from .scenario_loader import ScenarioLoader
from ..game import GameSettings

__all__ = [
    "GameSettings",
    "LevelData",
    "PlayerData",
    "Scenario",
    "ScenarioLoader",
    "UnitData",
]
