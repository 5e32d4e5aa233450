"""Game engine and state management."""

from core.game.events import EventEmitter, GameEvent, EventType
from core.game.scheduler import DeferredAction, Scheduler
from core.game.state import CardSnapshot, GameSnapshot, GameState, TurnState
from core.game.engine import MatchGame

__all__ = [
    "EventEmitter",
    "GameEvent",
    "EventType",
    "DeferredAction",
    "Scheduler",
    "CardSnapshot",
    "GameSnapshot",
    "GameState",
    "TurnState",
    "MatchGame",
]
