"""Tests for the card grid and game scene input handling."""

import pygame

from pygame_ui.components.card import CardGrid
from pygame_ui.config import DIMENSIONS


def _click(pos) -> pygame.event.Event:
    return pygame.event.Event(pygame.MOUSEBUTTONUP, pos=pos, button=1)


def _center(sprite):
    return sprite.rect.center


class TestCardGrid:
    """Tests for grid layout and hit-testing."""

    def test_layout(self, adapter):
        """Test that cards are placed row by row in fixed columns."""
        grid = CardGrid(columns=3)
        grid.rebuild(adapter.get_cards())

        assert grid.rows == 2
        first, second, third, fourth = grid.cards
        assert first.y == second.y == third.y
        assert fourth.x == first.x
        assert fourth.y == first.y + DIMENSIONS.CARD_HEIGHT + DIMENSIONS.GRID_SPACING

    def test_card_at_point(self, adapter):
        grid = CardGrid()
        grid.rebuild(adapter.get_cards())

        sprite = grid.cards[2]
        assert grid.get_card_at(_center(sprite)) is sprite
        assert grid.get_card_at((-50, -50)) is None

    def test_rebuild_follows_order(self, adapter):
        """Test that a shuffle re-orders the sprites, reusing them."""
        grid = CardGrid()
        grid.rebuild(adapter.get_cards())
        sprites = {sprite.card_id: sprite for sprite in grid.cards}

        adapter.shuffle()
        grid.rebuild(adapter.get_cards())

        assert [s.card_id for s in grid.cards] == [c.card_id for c in adapter.get_cards()]
        assert all(sprites[s.card_id] is s for s in grid.cards)

    def test_hover(self, adapter):
        grid = CardGrid()
        grid.rebuild(adapter.get_cards())

        grid.set_hover(_center(grid.cards[1]))
        assert [s.hovered for s in grid.cards] == [False, True, False, False]


class TestCardSprite:
    """Tests for card sprite rendering."""

    def test_surfaces_cached(self, adapter):
        """Test that repeated draws reuse the rendered shadow and back."""
        grid = CardGrid()
        grid.rebuild(adapter.get_cards())
        sprite = grid.cards[0]
        target = pygame.Surface((DIMENSIONS.SCREEN_WIDTH, DIMENSIONS.SCREEN_HEIGHT))

        sprite.draw(target)
        shadow, back = sprite._shadow_surface, sprite._back_surface
        sprite.draw(target)

        assert shadow is not None
        assert sprite._shadow_surface is shadow
        assert sprite._back_surface is back


class TestGameScene:
    """Tests for the scene forwarding intents to the engine."""

    def test_click_selects_card(self, scene, adapter):
        sprite = scene.grid.cards[0]
        assert scene.handle_event(_click(_center(sprite)))

        assert adapter.get_snapshot().pending_selection == sprite.card_id
        assert scene.grid.cards[0].face_up

    def test_click_outside_cards(self, scene, adapter):
        assert not scene.handle_event(_click((-10, -10)))
        assert adapter.get_snapshot().pending_selection is None

    def test_panel_tracks_counters(self, scene, adapter):
        """Test that a resolved pair updates the score and moves read-out."""
        by_symbol = {}
        for sprite in scene.grid.cards:
            by_symbol.setdefault(sprite.symbol, []).append(sprite)

        for sprite in by_symbol["apple"]:
            scene.handle_event(_click(_center(sprite)))

        assert scene.control_panel.score == 2
        assert scene.control_panel.moves == 1
        assert not scene.control_panel.game_over

    def test_new_game_key(self, scene, adapter):
        scene.handle_event(_click(_center(scene.grid.cards[0])))
        old_ids = {sprite.card_id for sprite in scene.grid.cards}

        assert scene.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_n))

        assert old_ids.isdisjoint(sprite.card_id for sprite in scene.grid.cards)
        assert not any(sprite.face_up for sprite in scene.grid.cards)

    def test_shuffle_key(self, scene, adapter):
        before = sorted(sprite.card_id for sprite in scene.grid.cards)
        assert scene.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_s))
        assert sorted(sprite.card_id for sprite in scene.grid.cards) == before
