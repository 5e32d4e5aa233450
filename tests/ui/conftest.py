"""Pytest fixtures for UI tests (no window is opened)."""

from random import Random

import pytest

from pygame_ui.core.engine_adapter import EngineAdapter
from pygame_ui.scenes.game_scene import GameScene


@pytest.fixture
def adapter():
    """An adapter over a seeded two-pair game."""
    return EngineAdapter(symbols=["apple", "banana"], rng=Random(42))


@pytest.fixture
def scene(adapter):
    """An entered game scene driving the adapter."""
    scene = GameScene(engine=adapter)
    scene.on_enter()
    yield scene
    scene.on_exit()
