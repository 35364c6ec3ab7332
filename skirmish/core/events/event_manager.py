"""
Event management system for decoupled engine communication.

This module provides a central event bus so the turn engine, the log and the
player fan-out can react to the same events without depending on each other.
Dispatch is synchronous: ``publish`` returns only after every subscriber has
run, so notifications reach players in the order the engine produced them.
"""

from collections import defaultdict, deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Optional

from .events import EventType, GameEvent


@dataclass
class PublishedEvent:
    """An event in the history with metadata."""
    event: GameEvent
    timestamp: datetime = field(default_factory=datetime.now)
    source: Optional[str] = None  # For debugging


EventSubscriber = Callable[[GameEvent], None]


class EventManager:
    """Central event bus for engine notifications."""

    def __init__(self, enable_debug_logging: bool = False, history_size: int = 1000):
        """Initialize the event manager.

        Args:
            enable_debug_logging: Whether to report subscriptions and dispatches
                to the debug callback
            history_size: Number of published events kept for inspection
        """
        self.enable_debug_logging = enable_debug_logging

        self._subscribers: dict[EventType, list[EventSubscriber]] = defaultdict(list)
        self._universal_subscribers: list[EventSubscriber] = []

        self._events_published = 0
        self._event_history: deque[PublishedEvent] = deque(maxlen=history_size)

        self._debug_callback: Optional[Callable[[str], None]] = None

    def set_debug_callback(self, callback: Optional[Callable[[str], None]]) -> None:
        """Set a callback function for debug logging."""
        self._debug_callback = callback

    def _debug_log(self, message: str) -> None:
        if self.enable_debug_logging and self._debug_callback:
            self._debug_callback(f"[EVENT] {message}")

    def subscribe(
        self,
        event_type: EventType,
        subscriber: EventSubscriber,
        subscriber_name: Optional[str] = None
    ) -> None:
        """Subscribe to events of a specific type.

        Args:
            event_type: The type of events to subscribe to
            subscriber: Callback function to handle events
            subscriber_name: Optional name for debugging
        """
        self._subscribers[event_type].append(subscriber)

        subscriber_display = subscriber_name or getattr(subscriber, '__name__', 'anonymous')
        self._debug_log(f"Subscribed {subscriber_display} to {event_type.name} events")

    def subscribe_all(
        self,
        subscriber: EventSubscriber,
        subscriber_name: Optional[str] = None
    ) -> None:
        """Subscribe to all events (universal subscriber)."""
        self._universal_subscribers.append(subscriber)

        subscriber_display = subscriber_name or getattr(subscriber, '__name__', 'anonymous')
        self._debug_log(f"Subscribed {subscriber_display} to ALL events")

    def unsubscribe(self, event_type: EventType, subscriber: EventSubscriber) -> bool:
        """Unsubscribe from events of a specific type.

        Returns:
            True if subscriber was found and removed
        """
        try:
            self._subscribers[event_type].remove(subscriber)
        except ValueError:
            return False
        self._debug_log(f"Unsubscribed from {event_type.name} events")
        return True

    def unsubscribe_all(self, subscriber: EventSubscriber) -> bool:
        """Remove a universal subscriber."""
        try:
            self._universal_subscribers.remove(subscriber)
        except ValueError:
            return False
        self._debug_log("Unsubscribed from ALL events")
        return True

    def publish(self, event: GameEvent, source: Optional[str] = None) -> None:
        """Dispatch an event to its type subscribers, then to universal ones.

        Subscriber exceptions propagate to the publisher.
        """
        published = PublishedEvent(event=event, source=source or "unknown")
        self._event_history.append(published)
        self._events_published += 1

        self._debug_log(f"Publishing {event.__class__.__name__} from {published.source}")

        # Copy so a subscriber may unsubscribe while being notified
        for subscriber in list(self._subscribers.get(event.event_type, [])):
            subscriber(event)

        for subscriber in list(self._universal_subscribers):
            subscriber(event)

    def get_statistics(self) -> dict[str, Any]:
        """Get event processing statistics."""
        return {
            'events_published': self._events_published,
            'subscribers_count': sum(len(subs) for subs in self._subscribers.values()),
            'universal_subscribers_count': len(self._universal_subscribers),
            'event_history_size': len(self._event_history),
        }

    def get_recent_events(self, count: int = 10) -> list[dict[str, Any]]:
        """Get recent events for debugging."""
        recent = list(self._event_history)[-count:]
        return [
            {
                'event_type': published.event.__class__.__name__,
                'source': published.source,
                'timestamp': published.timestamp.isoformat(),
            }
            for published in recent
        ]

    def shutdown(self) -> None:
        """Drop all subscribers and history."""
        self._subscribers.clear()
        self._universal_subscribers.clear()
        self._event_history.clear()
