"""Core systems for the memory match UI."""

from pygame_ui.core.engine_adapter import EngineAdapter, UICardInfo

__all__ = [
    "EngineAdapter",
    "UICardInfo",
]
