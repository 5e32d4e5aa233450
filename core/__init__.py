"""Core memory match engine - 100% UI-agnostic."""

from core.cards import Card, build_deck

__all__ = [
    "Card",
    "build_deck",
]
