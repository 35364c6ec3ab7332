"""Event system for publisher-subscriber communication.

This package contains the complete event-driven architecture:
- event_manager.py: Synchronous event routing to subscribers
- events.py: Event definitions and their player-facing descriptions
"""

from .event_manager import EventManager, PublishedEvent
from .events import (
    BoardRedraw,
    EventType,
    GameEnded,
    GameEvent,
    GameStarted,
    LevelFinished,
    LevelStarted,
    Message,
    TurnEnded,
    TurnStarted,
    UnitDamaged,
    UnitDefeated,
    UnitHealed,
    UnitMoved,
    UnitPlaced,
)

__all__ = [
    "EventManager",
    "PublishedEvent",
    "BoardRedraw",
    "EventType",
    "GameEnded",
    "GameEvent",
    "GameStarted",
    "LevelFinished",
    "LevelStarted",
    "Message",
    "TurnEnded",
    "TurnStarted",
    "UnitDamaged",
    "UnitDefeated",
    "UnitHealed",
    "UnitMoved",
    "UnitPlaced",
]
