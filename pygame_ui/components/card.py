"""Card sprite and grid for the memory board."""

from typing import Dict, List, Optional, Tuple

import pygame

from pygame_ui.config import COLORS, DIMENSIONS
from pygame_ui.core.engine_adapter import UICardInfo


class CardSprite:
    """A card drawn as a rounded rectangle.

    The sprite holds no game state of its own; ``sync`` copies the face-up
    and matched flags from the engine every time the board changes.
    """

    def __init__(self, info: UICardInfo, x: float = 0, y: float = 0):
        self.card_id = info.card_id
        self.label = info.label
        self.symbol = info.symbol
        self.face_up = info.face_up
        self.matched = info.matched

        self.x = x
        self.y = y
        self.hovered = False

        # Cached surfaces
        self._face_surface: Optional[pygame.Surface] = None
        self._back_surface: Optional[pygame.Surface] = None
        self._shadow_surface: Optional[pygame.Surface] = None

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(
            int(self.x), int(self.y), DIMENSIONS.CARD_WIDTH, DIMENSIONS.CARD_HEIGHT
        )

    def sync(self, info: UICardInfo) -> None:
        """Copy visible state from the engine."""
        self.face_up = info.face_up
        self.matched = info.matched

    def _symbol_color(self) -> Tuple[int, int, int]:
        return COLORS.SYMBOLS.get(self.symbol, COLORS.SYMBOL_DEFAULT)

    def _render_card_face(self, width: int, height: int) -> pygame.Surface:
        """Render the face-up side of the card."""
        surface = pygame.Surface((width, height), pygame.SRCALPHA)
        radius = DIMENSIONS.CARD_CORNER_RADIUS

        rect = pygame.Rect(0, 0, width, height)
        pygame.draw.rect(surface, COLORS.CARD_WHITE, rect, border_radius=radius)

        color = self._symbol_color()
        pygame.draw.circle(surface, color, (width // 2, height // 2 - 12), width // 4)

        font = pygame.font.Font(None, max(18, int(height * 0.16)))
        text = font.render(self.label, True, COLORS.CARD_BLACK)
        text_rect = text.get_rect(center=(width // 2, height - 28))
        surface.blit(text, text_rect)

        return surface

    def _render_card_back(self, width: int, height: int) -> pygame.Surface:
        """Render the face-down (back) side of the card."""
        surface = pygame.Surface((width, height), pygame.SRCALPHA)
        radius = DIMENSIONS.CARD_CORNER_RADIUS

        rect = pygame.Rect(0, 0, width, height)
        pygame.draw.rect(surface, COLORS.CARD_BACK, rect, border_radius=radius)

        # Square emblem in the middle
        emblem = pygame.Rect(0, 0, 40, 40)
        emblem.center = (width // 2, height // 2)
        pygame.draw.rect(surface, COLORS.CARD_BACK_PATTERN, emblem, border_radius=6)

        return surface

    def _render_shadow(self, width: int, height: int) -> pygame.Surface:
        """Render the card's drop shadow."""
        shadow_surface = pygame.Surface((width, height), pygame.SRCALPHA)
        pygame.draw.rect(
            shadow_surface,
            COLORS.SHADOW,
            pygame.Rect(0, 0, width, height),
            border_radius=DIMENSIONS.CARD_CORNER_RADIUS,
        )
        return shadow_surface

    def contains_point(self, point: Tuple[float, float]) -> bool:
        """Check if a point is inside the card."""
        return self.rect.collidepoint(point)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the card, its shadow and any highlight."""
        width, height = DIMENSIONS.CARD_WIDTH, DIMENSIONS.CARD_HEIGHT
        offset = DIMENSIONS.CARD_SHADOW_OFFSET

        if self._shadow_surface is None:
            self._shadow_surface = self._render_shadow(width, height)
        surface.blit(self._shadow_surface, (int(self.x) + offset, int(self.y) + offset))

        if self.face_up:
            if self._face_surface is None:
                self._face_surface = self._render_card_face(width, height)
            surface.blit(self._face_surface, self.rect.topleft)
        else:
            if self._back_surface is None:
                self._back_surface = self._render_card_back(width, height)
            surface.blit(self._back_surface, self.rect.topleft)

        if self.matched:
            pygame.draw.rect(
                surface,
                COLORS.CARD_MATCHED_BORDER,
                self.rect,
                width=3,
                border_radius=DIMENSIONS.CARD_CORNER_RADIUS,
            )
        elif self.hovered:
            pygame.draw.rect(
                surface,
                COLORS.CARD_BLACK,
                self.rect,
                width=2,
                border_radius=DIMENSIONS.CARD_CORNER_RADIUS,
            )


class CardGrid:
    """The board: card sprites laid out in a fixed number of columns."""

    def __init__(self, columns: int = DIMENSIONS.GRID_COLUMNS):
        self.columns = columns
        self.cards: List[CardSprite] = []

    def rebuild(self, infos: List[UICardInfo]) -> None:
        """Match the sprites to the engine's cards and display order."""
        existing: Dict[str, CardSprite] = {card.card_id: card for card in self.cards}
        cards = []
        for info in infos:
            sprite = existing.get(info.card_id)
            if sprite is None:
                sprite = CardSprite(info)
            else:
                sprite.sync(info)
            cards.append(sprite)
        self.cards = cards
        self.arrange()

    def arrange(self) -> None:
        """Place cards row by row."""
        step_x = DIMENSIONS.CARD_WIDTH + DIMENSIONS.GRID_SPACING
        step_y = DIMENSIONS.CARD_HEIGHT + DIMENSIONS.GRID_SPACING
        for index, card in enumerate(self.cards):
            row, col = divmod(index, self.columns)
            card.x = DIMENSIONS.GRID_LEFT + col * step_x
            card.y = DIMENSIONS.GRID_TOP + row * step_y

    @property
    def rows(self) -> int:
        return (len(self.cards) + self.columns - 1) // self.columns

    def clear(self) -> None:
        """Remove all cards."""
        self.cards.clear()

    def draw(self, surface: pygame.Surface) -> None:
        """Draw all cards."""
        for card in self.cards:
            card.draw(surface)

    def get_card_at(self, point: Tuple[float, float]) -> Optional[CardSprite]:
        """Get the card under a point."""
        for card in self.cards:
            if card.contains_point(point):
                return card
        return None

    def set_hover(self, point: Tuple[float, float]) -> None:
        """Highlight the card under the mouse."""
        hovered = self.get_card_at(point)
        for card in self.cards:
            card.hovered = card is hovered
