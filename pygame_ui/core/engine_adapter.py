"""Adapter connecting the core match engine to the PyGame UI."""

from dataclasses import dataclass
from random import Random
from typing import Callable, Hashable, Iterable, Optional

from core.game.engine import MatchGame
from core.game.events import EventType, GameEvent
from core.game.state import CardSnapshot, GameSnapshot, TurnState


# Map default symbols to short card labels
SYMBOL_LABELS = {
    "apple": "Apple",
    "banana": "Banana",
    "cherry": "Cherry",
    "pineapple": "Pine",
    "grape": "Grape",
    "watermelon": "Melon",
    "strawberry": "Berry",
    "peach": "Peach",
}


@dataclass
class UICardInfo:
    """Card information for the UI layer."""

    card_id: str
    label: str
    symbol: Hashable
    face_up: bool = False
    matched: bool = False

    @classmethod
    def from_snapshot(cls, card: CardSnapshot) -> "UICardInfo":
        """Create UICardInfo from a core card snapshot."""
        return cls(
            card_id=card.id,
            label=SYMBOL_LABELS.get(card.symbol, str(card.symbol)),
            symbol=card.symbol,
            face_up=card.face_up or card.matched,
            matched=card.matched,
        )


class EngineAdapter:
    """Adapter between the core MatchGame and PyGame UI.

    Subscribes to engine events and translates them to UI callbacks.
    Provides a clean interface for UI code to interact with the engine.
    """

    def __init__(
        self,
        symbols: Optional[Iterable[Hashable]] = None,
        rng: Optional[Random] = None,
    ):
        """Initialize the adapter.

        Args:
            symbols: Card alphabet (defaults to the configured one)
            rng: Random number generator for reproducible decks
        """
        self.game = MatchGame(symbols=symbols, rng=rng)
        self.game.subscribe(self._handle_event)

        # UI callbacks
        self._on_board_changed: Optional[Callable[[], None]] = None
        self._on_pair_result: Optional[Callable[[bool, int], None]] = None
        self._on_game_over: Optional[Callable[[int, int], None]] = None

    def _handle_event(self, event: GameEvent) -> None:
        """Handle events from the core engine."""
        etype = event.event_type
        data = event.data

        if etype in (
            EventType.GAME_STARTED,
            EventType.DECK_SHUFFLED,
            EventType.CARD_FLIPPED,
            EventType.CARDS_HIDDEN,
        ):
            if self._on_board_changed:
                self._on_board_changed()
        elif etype == EventType.PAIR_MATCHED:
            if self._on_pair_result:
                self._on_pair_result(True, data.get("score", 0))
        elif etype == EventType.PAIR_MISMATCHED:
            if self._on_pair_result:
                self._on_pair_result(False, data.get("score", 0))
        elif etype == EventType.GAME_OVER:
            if self._on_game_over:
                self._on_game_over(data.get("score", 0), data.get("moves", 0))

    # Public API for UI

    def set_callbacks(
        self,
        on_board_changed: Callable[[], None] = None,
        on_pair_result: Callable[[bool, int], None] = None,
        on_game_over: Callable[[int, int], None] = None,
    ) -> None:
        """Set UI callback functions.

        Args:
            on_board_changed: Called whenever cards need to be re-read
            on_pair_result: Called when a pair resolves (matched, score)
            on_game_over: Called when the last pair is matched (score, moves)
        """
        self._on_board_changed = on_board_changed
        self._on_pair_result = on_pair_result
        self._on_game_over = on_game_over

    @property
    def state(self) -> TurnState:
        """Get current turn state."""
        return self.game.turn_state

    @property
    def score(self) -> int:
        return self.game.score

    @property
    def moves(self) -> int:
        return self.game.moves

    @property
    def is_over(self) -> bool:
        return self.game.is_over

    def get_cards(self) -> list[UICardInfo]:
        """Get the cards in display order."""
        return [UICardInfo.from_snapshot(card) for card in self.game.cards]

    def get_snapshot(self) -> GameSnapshot:
        """Get a snapshot of the current game state."""
        return self.game.snapshot()

    # Game actions

    def select_card(self, card_id: str) -> bool:
        """Forward a tap on a card."""
        return self.game.select_card(card_id)

    def shuffle(self) -> None:
        """Shuffle the cards on the board."""
        self.game.shuffle()

    def new_game(self) -> None:
        """Start a completely new game."""
        self.game.new_game()

    def update(self, dt: float) -> None:
        """Run deferred engine actions that are due.

        Args:
            dt: Delta time in seconds
        """
        self.game.advance(dt)
