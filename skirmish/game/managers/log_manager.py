"""
Log management for engine messages and debugging.

The log listens to the event bus and keeps a bounded, categorized record of
what happened during a game, independent of what players are shown.
"""
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from ...core.events.events import (
    EventType,
    GameEvent,
    LevelStarted,
    TurnStarted,
    UnitMoved,
    UnitPlaced,
)

if TYPE_CHECKING:
    from ...core.events.event_manager import EventManager


class LogCategory(Enum):
    """Categories for log messages."""
    SYSTEM = auto()     # Game and level lifecycle
    BATTLE = auto()     # Damage, healing and deaths
    MOVEMENT = auto()   # Placement and movement
    TURN = auto()       # Turn boundaries
    DEBUG = auto()      # Event bus tracing
    WARNING = auto()
    ERROR = auto()
    SCENARIO = auto()   # Scenario loading messages


CATEGORY_TAGS = {
    LogCategory.SYSTEM: "SYS",
    LogCategory.BATTLE: "BTL",
    LogCategory.MOVEMENT: "MOV",
    LogCategory.TURN: "TRN",
    LogCategory.DEBUG: "DBG",
    LogCategory.WARNING: "WRN",
    LogCategory.ERROR: "ERR",
    LogCategory.SCENARIO: "SCN",
}

EVENT_CATEGORIES = {
    EventType.GAME_STARTED: LogCategory.SYSTEM,
    EventType.GAME_ENDED: LogCategory.SYSTEM,
    EventType.LEVEL_STARTED: LogCategory.SYSTEM,
    EventType.LEVEL_FINISHED: LogCategory.SYSTEM,
    EventType.MESSAGE: LogCategory.SYSTEM,
    EventType.TURN_STARTED: LogCategory.TURN,
    EventType.TURN_ENDED: LogCategory.TURN,
    EventType.UNIT_PLACED: LogCategory.MOVEMENT,
    EventType.UNIT_MOVED: LogCategory.MOVEMENT,
    EventType.UNIT_DAMAGED: LogCategory.BATTLE,
    EventType.UNIT_HEALED: LogCategory.BATTLE,
    EventType.UNIT_DEFEATED: LogCategory.BATTLE,
}


@dataclass
class LogMessage:
    """A single log message with metadata."""
    text: str
    category: LogCategory
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self, include_timestamp: bool = False, include_category: bool = True) -> str:
        """Format the message for display."""
        parts = []

        if include_timestamp:
            parts.append(f"[{self.timestamp.strftime('%H:%M:%S')}]")

        if include_category:
            parts.append(f"[{CATEGORY_TAGS.get(self.category, '???')}]")

        parts.append(self.text)
        return " ".join(parts)


class LogLevel(Enum):
    """Log levels for filtering."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


class LogManager:
    """Records engine events with categorization and filtering."""

    def __init__(
        self,
        event_manager: "EventManager",
        max_messages: int = 1000,
        default_level: LogLevel = LogLevel.INFO,
        trace_events: bool = False,
    ):
        """Initialize the log manager.

        Args:
            event_manager: Event bus to record from
            max_messages: Maximum number of messages to store in the buffer
            default_level: Default log level for filtering
            trace_events: Also record the event bus's debug trace
        """
        self.messages: deque[LogMessage] = deque(maxlen=max_messages)
        self.log_level = default_level
        self.enabled_categories = set(LogCategory)
        self.event_manager = event_manager

        self.category_levels = {
            LogCategory.DEBUG: LogLevel.DEBUG,
            LogCategory.WARNING: LogLevel.WARNING,
            LogCategory.ERROR: LogLevel.ERROR,
        }

        self.event_manager.subscribe_all(self._handle_event, subscriber_name="LogManager")
        if trace_events:
            self.event_manager.enable_debug_logging = True
            self.event_manager.set_debug_callback(self.debug)

    def _handle_event(self, event: GameEvent) -> None:
        text = self.describe_event(event)
        if text:
            self.log(text, EVENT_CATEGORIES.get(event.event_type, LogCategory.SYSTEM))

    @staticmethod
    def describe_event(event: GameEvent) -> Optional[str]:
        """Log text for an event; quieter events get a terse line of their own."""
        text = event.describe()
        if text:
            return text
        if isinstance(event, LevelStarted):
            return f"Level {event.level} started."
        if isinstance(event, TurnStarted):
            return f"Round {event.round}: {event.player}'s turn."
        if isinstance(event, UnitPlaced):
            return f"{event.unit.name} enters at {event.position.to_tuple()}."
        if isinstance(event, UnitMoved):
            return (
                f"{event.unit.name} moves from {event.from_position.to_tuple()} "
                f"to {event.to_position.to_tuple()}."
            )
        return None

    def log(self, text: str, category: LogCategory = LogCategory.SYSTEM) -> None:
        """Add a message to the log."""
        self.messages.append(LogMessage(text=text, category=category))

    # Convenience methods for common categories
    def system(self, text: str) -> None:
        self.log(text, LogCategory.SYSTEM)

    def debug(self, text: str) -> None:
        self.log(text, LogCategory.DEBUG)

    def warning(self, text: str) -> None:
        self.log(text, LogCategory.WARNING)

    def error(self, text: str) -> None:
        self.log(text, LogCategory.ERROR)

    def scenario(self, text: str) -> None:
        self.log(text, LogCategory.SCENARIO)

    def get_messages(self, count: Optional[int] = None,
                     categories: Optional[set[LogCategory]] = None) -> list[LogMessage]:
        """Get recent messages, optionally filtered by category.

        Args:
            count: Maximum number of messages to return (None for all)
            categories: Set of categories to include (None for all enabled)

        Returns:
            List of recent messages
        """
        if categories:
            filtered = [msg for msg in self.messages
                        if msg.category in categories and msg.category in self.enabled_categories]
        else:
            filtered = []
            for msg in self.messages:
                if msg.category not in self.enabled_categories:
                    continue
                message_level = self.category_levels.get(msg.category, LogLevel.INFO)
                if message_level.value < self.log_level.value:
                    continue
                filtered.append(msg)

        if count is not None and count < len(filtered):
            return filtered[-count:]
        return filtered

    def clear(self) -> None:
        self.messages.clear()

    def enable_category(self, category: LogCategory) -> None:
        self.enabled_categories.add(category)

    def disable_category(self, category: LogCategory) -> None:
        self.enabled_categories.discard(category)

    def set_log_level(self, level: LogLevel) -> None:
        self.log_level = level

    def is_debug_enabled(self) -> bool:
        return (LogCategory.DEBUG in self.enabled_categories and
                self.log_level == LogLevel.DEBUG)

    def save_log_to_file(self, log_dir: str = "logs") -> Path:
        """Write every buffered message, ignoring filters, to a timestamped file.

        Returns:
            Path of the written file
        """
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        filepath = directory / f"log_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"

        with open(filepath, 'w', encoding='utf-8') as f:
            f.write("Skirmish - Game Log\n")
            f.write(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
            f.write("=" * 60 + "\n\n")

            if not self.messages:
                f.write("No messages to save.\n")
            for msg in self.messages:
                timestamp_str = msg.timestamp.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
                f.write(f"[{timestamp_str}] [{msg.category.name}] {msg.text}\n")

        self.system(f"Game log saved to {filepath}")
        return filepath
