"""UI components for the memory match board."""

from pygame_ui.components.card import CardSprite, CardGrid
from pygame_ui.components.panel import Panel, ControlPanel
from pygame_ui.components.button import Button, ButtonState

__all__ = [
    "CardSprite",
    "CardGrid",
    "Panel",
    "ControlPanel",
    "Button",
    "ButtonState",
]
