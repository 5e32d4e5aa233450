"""Tests for the control panel."""

import pygame

from pygame_ui.components.button import ButtonState
from pygame_ui.components.panel import ControlPanel


def _mouse(event_type, pos) -> pygame.event.Event:
    return pygame.event.Event(event_type, pos=pos, button=1)


class TestControlPanel:
    """Tests for ControlPanel input handling."""

    def test_buttons_fire_callbacks(self):
        clicks = []
        panel = ControlPanel(
            on_new_game=lambda: clicks.append("new"),
            on_shuffle=lambda: clicks.append("shuffle"),
        )
        center = panel.shuffle_button.rect.center

        assert not panel.handle_event(_mouse(pygame.MOUSEBUTTONDOWN, center))
        assert panel.handle_event(_mouse(pygame.MOUSEBUTTONUP, center))
        assert clicks == ["shuffle"]

    def test_release_reaches_every_button(self):
        """Test that a click on one button still resets another pressed one."""
        panel = ControlPanel(on_new_game=lambda: None, on_shuffle=lambda: None)
        new_game = panel.new_game_button.rect.center
        shuffle = panel.shuffle_button.rect.center

        panel.handle_event(_mouse(pygame.MOUSEBUTTONDOWN, new_game))
        panel.handle_event(_mouse(pygame.MOUSEBUTTONDOWN, shuffle))
        assert panel.handle_event(_mouse(pygame.MOUSEBUTTONUP, new_game))

        assert panel.shuffle_button.state == ButtonState.NORMAL

    def test_set_values(self):
        panel = ControlPanel(on_new_game=lambda: None, on_shuffle=lambda: None)
        panel.set_values(6, 4, True)
        assert (panel.score, panel.moves, panel.game_over) == (6, 4, True)
