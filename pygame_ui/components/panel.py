"""Panel components with rounded borders."""

from typing import Callable, List, Optional, Tuple

import pygame

from pygame_ui.components.button import Button
from pygame_ui.config import COLORS, DIMENSIONS


class Panel:
    """A rounded rectangle panel with border and optional transparency.

    Use for containing UI elements, info displays, etc.
    """

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        bg_color: Tuple[int, int, int] = COLORS.PANEL_BG,
        bg_alpha: int = 255,
        border_color: Tuple[int, int, int] = COLORS.PANEL_BORDER,
        border_width: int = 2,
        corner_radius: int = None,
    ):
        """Initialize a panel.

        Args:
            x: Left edge
            y: Top edge
            width: Panel width
            height: Panel height
            bg_color: Background color (RGB)
            bg_alpha: Background transparency (0-255)
            border_color: Border color (RGB)
            border_width: Border thickness (0 for no border)
            corner_radius: Rounded corner radius (None for default)
        """
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.bg_color = bg_color
        self.bg_alpha = bg_alpha
        self.border_color = border_color
        self.border_width = border_width
        self.corner_radius = corner_radius or DIMENSIONS.PANEL_CORNER_RADIUS

        # Cached surface
        self._surface: Optional[pygame.Surface] = None

    @property
    def rect(self) -> pygame.Rect:
        """Get the panel's rectangle."""
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    def _render(self) -> pygame.Surface:
        """Render the panel surface."""
        surface = pygame.Surface((int(self.width), int(self.height)), pygame.SRCALPHA)

        bg_rect = pygame.Rect(0, 0, int(self.width), int(self.height))
        pygame.draw.rect(
            surface, (*self.bg_color, self.bg_alpha), bg_rect, border_radius=self.corner_radius
        )

        if self.border_width > 0:
            pygame.draw.rect(
                surface,
                self.border_color,
                bg_rect,
                width=self.border_width,
                border_radius=self.corner_radius,
            )

        return surface

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the panel.

        Args:
            surface: Pygame surface to draw on
        """
        if self._surface is None:
            self._surface = self._render()

        surface.blit(self._surface, (int(self.x), int(self.y)))


class ControlPanel(Panel):
    """Score and moves read-out with the New Game and Shuffle buttons."""

    def __init__(
        self,
        on_new_game: Callable[[], None],
        on_shuffle: Callable[[], None],
        x: float = DIMENSIONS.PANEL_X,
        y: float = DIMENSIONS.PANEL_Y,
    ):
        super().__init__(x, y, DIMENSIONS.PANEL_WIDTH, DIMENSIONS.PANEL_HEIGHT)

        self.score = 0
        self.moves = 0
        self.game_over = False

        button_y = self.y + 130
        self.new_game_button = Button(
            x=self.center_x - 85,
            y=button_y,
            width=DIMENSIONS.BUTTON_WIDTH,
            height=DIMENSIONS.BUTTON_HEIGHT,
            text="New Game",
            on_click=on_new_game,
            bg_color=COLORS.BUTTON_NEW_GAME,
            hover_color=COLORS.BUTTON_NEW_GAME_HOVER,
        )
        self.shuffle_button = Button(
            x=self.center_x + 85,
            y=button_y,
            width=DIMENSIONS.BUTTON_WIDTH,
            height=DIMENSIONS.BUTTON_HEIGHT,
            text="Shuffle",
            on_click=on_shuffle,
            bg_color=COLORS.BUTTON_SHUFFLE,
            hover_color=COLORS.BUTTON_SHUFFLE_HOVER,
        )

        self._font: Optional[pygame.font.Font] = None
        self._banner_font: Optional[pygame.font.Font] = None

    @property
    def buttons(self) -> List[Button]:
        return [self.new_game_button, self.shuffle_button]

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, 32)
        return self._font

    @property
    def banner_font(self) -> pygame.font.Font:
        if self._banner_font is None:
            self._banner_font = pygame.font.Font(None, 56)
        return self._banner_font

    def set_values(self, score: int, moves: int, game_over: bool) -> None:
        """Update the displayed numbers."""
        self.score = score
        self.moves = moves
        self.game_over = game_over

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Forward an event to every button."""
        handled = False
        for button in self.buttons:
            handled = button.handle_event(event) or handled
        return handled

    def update(self, dt: float) -> None:
        for button in self.buttons:
            button.update(dt)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the panel, read-outs, buttons and game-over banner."""
        super().draw(surface)

        padding = DIMENSIONS.PANEL_PADDING
        top = int(self.y) + padding + 10

        score_text = self.font.render(f"Score: {self.score}", True, COLORS.TEXT_DARK)
        surface.blit(score_text, (int(self.x) + padding, top))

        moves_text = self.font.render(f"Moves: {self.moves}", True, COLORS.TEXT_DARK)
        moves_rect = moves_text.get_rect(right=int(self.x + self.width) - padding, top=top)
        surface.blit(moves_text, moves_rect)

        for button in self.buttons:
            button.draw(surface)

        if self.game_over:
            banner = self.banner_font.render("Game Over!", True, COLORS.GAME_OVER)
            banner_rect = banner.get_rect(
                centerx=int(self.center_x), top=int(self.y + self.height) - padding - 40
            )
            surface.blit(banner, banner_rect)
