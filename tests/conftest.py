"""Pytest fixtures for memory match tests."""

import pytest
from random import Random

from core.game import MatchGame, Scheduler


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def scheduler():
    """A fresh scheduler with its clock at zero."""
    return Scheduler()


@pytest.fixture
def game(rng):
    """A new game with the default eight-symbol alphabet."""
    return MatchGame(rng=rng)


@pytest.fixture
def one_pair_game(rng):
    """A game with a single pair of 'A' cards."""
    return MatchGame(symbols=["A"], rng=rng)


@pytest.fixture
def two_pair_game(rng):
    """A game with pairs of 'A' and 'B' cards."""
    return MatchGame(symbols=["A", "B"], rng=rng)


@pytest.fixture
def ids_by_symbol():
    """Lookup helper: symbol -> the two card ids holding it."""

    def _lookup(game: MatchGame) -> dict:
        ids: dict = {}
        for card in game.cards:
            ids.setdefault(card.symbol, []).append(card.id)
        return ids

    return _lookup
