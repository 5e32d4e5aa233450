"""Interactive button component with hover and press states."""

from enum import Enum, auto
from typing import Callable, Optional, Tuple

import pygame

from pygame_ui.config import COLORS, DIMENSIONS


class ButtonState(Enum):
    """Visual state of a button."""

    NORMAL = auto()
    HOVERED = auto()
    PRESSED = auto()
    DISABLED = auto()


class Button:
    """A clickable rounded button.

    The click fires on mouse release inside the button, after a press that
    also started inside it.
    """

    def __init__(
        self,
        x: float,
        y: float,
        width: float = None,
        height: float = None,
        text: str = "Button",
        font_size: int = 30,
        on_click: Optional[Callable[[], None]] = None,
        bg_color: Tuple[int, int, int] = None,
        hover_color: Tuple[int, int, int] = None,
        pressed_color: Tuple[int, int, int] = None,
        text_color: Tuple[int, int, int] = COLORS.TEXT_WHITE,
        corner_radius: int = None,
        enabled: bool = True,
    ):
        """Initialize a button.

        Args:
            x: X position of the center
            y: Y position of the center
            width: Button width
            height: Button height
            text: Button text
            font_size: Text font size
            on_click: Callback function when clicked
            bg_color: Normal background color
            hover_color: Hovered background color
            pressed_color: Pressed background color
            text_color: Text color
            corner_radius: Corner radius (default if None)
            enabled: Whether button is interactive
        """
        self.text = text
        self.font_size = font_size
        self.on_click = on_click
        self.enabled = enabled

        # Colors
        self.bg_color = bg_color or COLORS.BUTTON_NEW_GAME
        self.hover_color = hover_color or self.bg_color
        self.pressed_color = pressed_color or COLORS.BUTTON_PRESSED
        self.disabled_color = COLORS.BUTTON_DISABLED
        self.text_color = text_color
        self.corner_radius = corner_radius or DIMENSIONS.BUTTON_CORNER_RADIUS

        self._font: Optional[pygame.font.Font] = None

        self.width = width if width is not None else DIMENSIONS.BUTTON_WIDTH
        self.height = height if height is not None else DIMENSIONS.BUTTON_HEIGHT
        self.x = x - self.width / 2
        self.y = y - self.height / 2

        # State
        self.state = ButtonState.NORMAL if enabled else ButtonState.DISABLED
        self._is_pressed = False

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, self.font_size)
        return self._font

    @property
    def rect(self) -> pygame.Rect:
        """Get the button's rectangle."""
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))

    def set_enabled(self, enabled: bool) -> None:
        """Enable or disable the button.

        Args:
            enabled: Whether button should be enabled
        """
        self.enabled = enabled
        self._is_pressed = False
        self.state = ButtonState.NORMAL if enabled else ButtonState.DISABLED

    def contains_point(self, point: Tuple[float, float]) -> bool:
        """Check if a point is inside the button."""
        return self.rect.collidepoint(point)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle a pygame event.

        Args:
            event: The pygame event

        Returns:
            True if event was consumed (clicked)
        """
        if not self.enabled:
            return False

        if event.type == pygame.MOUSEMOTION:
            if not self._is_pressed:
                if self.contains_point(event.pos):
                    self.state = ButtonState.HOVERED
                else:
                    self.state = ButtonState.NORMAL

        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1 and self.contains_point(event.pos):
                self.state = ButtonState.PRESSED
                self._is_pressed = True
                return False  # Don't consume yet, wait for release

        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == 1 and self._is_pressed:
                self._is_pressed = False

                if self.contains_point(event.pos):
                    self.state = ButtonState.HOVERED
                    if self.on_click:
                        self.on_click()
                    return True
                self.state = ButtonState.NORMAL

        return False

    def update(self, dt: float) -> None:
        """Keep the hover state in line with a mouse that stopped moving."""
        if self.enabled and not self._is_pressed and pygame.mouse.get_focused():
            hovered = self.contains_point(pygame.mouse.get_pos())
            self.state = ButtonState.HOVERED if hovered else ButtonState.NORMAL

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the button.

        Args:
            surface: Pygame surface to draw on
        """
        if not self.enabled:
            bg_color = self.disabled_color
            text_color = COLORS.TEXT_MUTED
        elif self.state == ButtonState.PRESSED:
            bg_color = self.pressed_color
            text_color = self.text_color
        elif self.state == ButtonState.HOVERED:
            bg_color = self.hover_color
            text_color = self.text_color
        else:
            bg_color = self.bg_color
            text_color = self.text_color

        pygame.draw.rect(surface, bg_color, self.rect, border_radius=self.corner_radius)

        text_surface = self.font.render(self.text, True, text_color)
        text_rect = text_surface.get_rect(center=self.rect.center)
        surface.blit(text_surface, text_rect)
