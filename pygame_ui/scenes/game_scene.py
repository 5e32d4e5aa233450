"""Main game scene with the card board - integrated with core engine."""

import logging
from typing import Optional

import pygame

from pygame_ui.config import COLORS
from pygame_ui.core.engine_adapter import EngineAdapter
from pygame_ui.components.card import CardGrid
from pygame_ui.components.panel import ControlPanel

logger = logging.getLogger(__name__)


class GameScene:
    """Memory match board integrated with the core engine.

    ``on_enter`` wires the engine callbacks and ``on_exit`` detaches them;
    in between the owner feeds it events, ``update(dt)`` and ``draw``.
    """

    def __init__(self, engine: Optional[EngineAdapter] = None):
        # Engine adapter (created on enter if not injected)
        self.engine: Optional[EngineAdapter] = engine

        self.grid = CardGrid()
        self.control_panel: Optional[ControlPanel] = None

    def on_enter(self) -> None:
        """Initialize the game scene."""
        if self.engine is None:
            self.engine = EngineAdapter()
        self.engine.set_callbacks(
            on_board_changed=self._on_board_changed,
            on_pair_result=self._on_pair_result,
            on_game_over=self._on_game_over,
        )

        self.control_panel = ControlPanel(
            on_new_game=self._on_new_game,
            on_shuffle=self._on_shuffle,
        )
        self._refresh()

    def on_exit(self) -> None:
        """Detach from the engine."""
        if self.engine:
            self.engine.set_callbacks()
        self.grid.clear()

    def _refresh(self) -> None:
        """Re-read cards and counters from the engine."""
        if not self.engine:
            return
        self.grid.rebuild(self.engine.get_cards())
        if self.control_panel:
            self.control_panel.set_values(
                self.engine.score, self.engine.moves, self.engine.is_over
            )

    # Engine callbacks

    def _on_board_changed(self) -> None:
        self._refresh()

    def _on_pair_result(self, matched: bool, score: int) -> None:
        logger.debug("Pair %s, score %d", "matched" if matched else "missed", score)
        self._refresh()

    def _on_game_over(self, score: int, moves: int) -> None:
        logger.info("Board cleared with score %d in %d moves", score, moves)
        self._refresh()

    # User intents

    def _on_new_game(self) -> None:
        if self.engine:
            self.engine.new_game()

    def _on_shuffle(self) -> None:
        if self.engine:
            self.engine.shuffle()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle input events."""
        if self.control_panel and self.control_panel.handle_event(event):
            return True

        if event.type == pygame.MOUSEMOTION:
            self.grid.set_hover(event.pos)
            return False

        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            card = self.grid.get_card_at(event.pos)
            if card and self.engine:
                self.engine.select_card(card.card_id)
                return True

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_n:
                self._on_new_game()
                return True
            if event.key == pygame.K_s:
                self._on_shuffle()
                return True

        return False

    def update(self, dt: float) -> None:
        """Run due engine actions and button state updates."""
        if self.engine:
            self.engine.update(dt)
        if self.control_panel:
            self.control_panel.update(dt)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the board and control panel."""
        surface.fill(COLORS.BACKGROUND)
        self.grid.draw(surface)
        if self.control_panel:
            self.control_panel.draw(surface)
