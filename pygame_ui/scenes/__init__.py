"""Scene classes for the memory match game."""

from pygame_ui.scenes.game_scene import GameScene

__all__ = ["GameScene"]
