"""Game events for the event system."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    """Types of game events."""

    # Game flow events
    GAME_STARTED = auto()
    GAME_OVER = auto()
    DECK_SHUFFLED = auto()

    # Card events
    CARD_FLIPPED = auto()
    CARDS_HIDDEN = auto()

    # Turn outcome events
    PAIR_MATCHED = auto()
    PAIR_MISMATCHED = auto()

    # Ignored input
    SELECTION_IGNORED = auto()


@dataclass(frozen=True)
class GameEvent:
    """
    Immutable game event.

    Events are the primary communication mechanism between the core engine
    and the presentation layer.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


EventHandler = Callable[[GameEvent], None]


class EventEmitter:
    """
    Synchronous dispatcher for game events.

    Handlers registered under an ``EventType`` only receive that type; handlers
    registered under ``None`` receive everything, after the typed ones.
    """

    def __init__(self) -> None:
        self._handlers: dict[EventType | None, list[EventHandler]] = {}

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """Register ``handler`` for ``event_type``, or for every event if None."""
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> bool:
        """
        Remove a handler registered with the same ``event_type``.

        Returns:
            False if the handler was not registered
        """
        handlers = self._handlers.get(event_type, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def emit(self, event: GameEvent) -> None:
        """Call every handler interested in ``event`` on the caller's thread."""
        # Copies, so a handler may unsubscribe itself while being called
        targets = list(self._handlers.get(event.event_type, ()))
        targets += self._handlers.get(None, ())
        for handler in targets:
            handler(event)

    def emit_new(self, event_type: EventType, **data: Any) -> GameEvent:
        """Build a ``GameEvent`` from keyword data, emit it and return it."""
        event = GameEvent(event_type=event_type, data=data)
        self.emit(event)
        return event
