"""Configuration constants for the PyGame memory match UI."""

from dataclasses import dataclass, field
from typing import Dict, Tuple


def _symbol_colors() -> Dict[str, Tuple[int, int, int]]:
    return {
        "apple": (200, 60, 60),
        "banana": (225, 190, 60),
        "cherry": (170, 30, 70),
        "pineapple": (205, 150, 50),
        "grape": (120, 70, 160),
        "watermelon": (70, 160, 90),
        "strawberry": (225, 80, 100),
        "peach": (240, 150, 110),
    }


@dataclass(frozen=True)
class Colors:
    """Color palette for the memory match UI."""

    # Background
    BACKGROUND: Tuple[int, int, int] = (222, 232, 248)

    # Card colors
    CARD_WHITE: Tuple[int, int, int] = (255, 255, 255)
    CARD_BLACK: Tuple[int, int, int] = (28, 28, 32)
    CARD_BACK: Tuple[int, int, int] = (45, 110, 220)
    CARD_BACK_PATTERN: Tuple[int, int, int] = (245, 245, 250)
    CARD_MATCHED_BORDER: Tuple[int, int, int] = (60, 170, 90)
    SYMBOL_DEFAULT: Tuple[int, int, int] = (28, 28, 32)
    SYMBOLS: Dict[str, Tuple[int, int, int]] = field(default_factory=_symbol_colors)

    # Effects
    SHADOW: Tuple[int, int, int, int] = (0, 0, 0, 70)

    # Text
    TEXT_DARK: Tuple[int, int, int] = (30, 30, 40)
    TEXT_WHITE: Tuple[int, int, int] = (240, 240, 240)
    TEXT_MUTED: Tuple[int, int, int] = (150, 150, 160)
    GAME_OVER: Tuple[int, int, int] = (40, 160, 70)

    # Buttons
    BUTTON_NEW_GAME: Tuple[int, int, int] = (45, 110, 220)
    BUTTON_NEW_GAME_HOVER: Tuple[int, int, int] = (70, 135, 240)
    BUTTON_SHUFFLE: Tuple[int, int, int] = (240, 140, 30)
    BUTTON_SHUFFLE_HOVER: Tuple[int, int, int] = (250, 165, 70)
    BUTTON_PRESSED: Tuple[int, int, int] = (45, 55, 70)
    BUTTON_DISABLED: Tuple[int, int, int] = (170, 170, 175)

    # Panels
    PANEL_BG: Tuple[int, int, int] = (255, 255, 255)
    PANEL_BORDER: Tuple[int, int, int] = (200, 205, 215)


@dataclass(frozen=True)
class Dimensions:
    """Dimension constants for layout and sizing."""

    # Screen
    SCREEN_WIDTH: int = 960
    SCREEN_HEIGHT: int = 720
    TARGET_FPS: int = 60

    # Cards
    CARD_WIDTH: int = 100
    CARD_HEIGHT: int = 150
    CARD_CORNER_RADIUS: int = 10
    CARD_SHADOW_OFFSET: int = 4

    # Grid
    GRID_COLUMNS: int = 4
    GRID_SPACING: int = 10
    GRID_TOP: int = 20
    GRID_LEFT: int = 40

    # Control panel
    PANEL_X: int = 520
    PANEL_Y: int = 220
    PANEL_WIDTH: int = 400
    PANEL_HEIGHT: int = 240
    PANEL_PADDING: int = 16
    PANEL_CORNER_RADIUS: int = 10

    # UI Elements
    BUTTON_WIDTH: int = 150
    BUTTON_HEIGHT: int = 50
    BUTTON_CORNER_RADIUS: int = 10


# Global instances for easy import
COLORS = Colors()
DIMENSIONS = Dimensions()
