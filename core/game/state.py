"""Turn states and the mutable per-game state record."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Hashable

from core.cards import Card


class TurnState(Enum):
    """
    Turn state machine states.

    Flow: IDLE → AWAITING_SECOND → IDLE ... → OVER
    """

    # No card selected in the current turn
    IDLE = auto()

    # One card face-up, waiting for its partner
    AWAITING_SECOND = auto()

    # Every card matched
    OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass
class GameState:
    """Everything that belongs to one game; replaced wholesale by a new game."""

    cards: list[Card] = field(default_factory=list)
    score: int = 0
    moves: int = 0
    pending_selection: str | None = None
    is_over: bool = False
    generation: int = 0
    # Card id -> the move whose mismatch last scheduled it to flip back
    flip_back_owner: dict[str, int] = field(default_factory=dict)

    def find(self, card_id: str) -> Card | None:
        """Look up a card by id."""
        for card in self.cards:
            if card.id == card_id:
                return card
        return None

    @property
    def all_matched(self) -> bool:
        return all(card.matched for card in self.cards)

    @property
    def pairs_matched(self) -> int:
        return sum(1 for card in self.cards if card.matched) // 2

    @property
    def total_pairs(self) -> int:
        return len(self.cards) // 2


@dataclass(frozen=True)
class CardSnapshot:
    """Read-only view of a card."""

    id: str
    symbol: Hashable
    face_up: bool
    matched: bool

    @classmethod
    def from_card(cls, card: Card) -> "CardSnapshot":
        return cls(
            id=card.id,
            symbol=card.symbol,
            face_up=card.face_up,
            matched=card.matched,
        )


@dataclass(frozen=True)
class GameSnapshot:
    """Snapshot of game state for the presentation layer."""

    turn_state: TurnState
    cards: tuple[CardSnapshot, ...]
    score: int
    moves: int
    pending_selection: str | None
    is_over: bool
    pairs_matched: int
    total_pairs: int
