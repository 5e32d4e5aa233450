"""Card records and deck construction for the matching game."""

from dataclasses import dataclass, field
from random import Random
from typing import Hashable, Iterable
from uuid import uuid4


def _new_card_id() -> str:
    return uuid4().hex


@dataclass(slots=True)
class Card:
    """A single card on the board.

    ``id`` and ``symbol`` never change after creation. ``face_up`` toggles
    during play, ``matched`` only ever goes from False to True.
    """

    symbol: Hashable
    id: str = field(default_factory=_new_card_id)
    face_up: bool = False
    matched: bool = False

    def __str__(self) -> str:
        if self.matched:
            return f"[{self.symbol}]"
        return str(self.symbol) if self.face_up else "##"

    def __repr__(self) -> str:
        return f"Card({self.symbol!r}, id={self.id[:8]})"


def unique_symbols(symbols: Iterable[Hashable]) -> list[Hashable]:
    """Collapse repeated symbols, keeping first-seen order."""
    return list(dict.fromkeys(symbols))


def build_deck(symbols: Iterable[Hashable], rng: Random | None = None) -> list[Card]:
    """
    Build a shuffled deck holding exactly one pair per symbol.

    Args:
        symbols: Alphabet of symbols; duplicates are ignored
        rng: Random number generator for shuffling

    Returns:
        Face-down, unmatched cards in shuffled order
    """
    rng = rng or Random()
    cards = [Card(symbol) for symbol in unique_symbols(symbols) for _ in range(2)]
    rng.shuffle(cards)
    return cards
