"""Tests for the engine adapter."""

from core.game.state import TurnState
from pygame_ui.core.engine_adapter import EngineAdapter, UICardInfo


def _ids(adapter: EngineAdapter) -> dict:
    ids: dict = {}
    for card in adapter.get_cards():
        ids.setdefault(card.symbol, []).append(card.card_id)
    return ids


class TestEngineAdapter:
    """Tests for EngineAdapter."""

    def test_cards_have_labels(self, adapter):
        """Test that known symbols get display labels."""
        labels = {card.label for card in adapter.get_cards()}
        assert labels == {"Apple", "Banana"}

    def test_unknown_symbol_label(self):
        adapter = EngineAdapter(symbols=["kiwi"])
        assert {card.label for card in adapter.get_cards()} == {"kiwi"}

    def test_pair_result_callback(self, adapter):
        """Test that resolved pairs reach the UI."""
        results = []
        adapter.set_callbacks(on_pair_result=lambda matched, score: results.append((matched, score)))
        ids = _ids(adapter)

        adapter.select_card(ids["apple"][0])
        adapter.select_card(ids["banana"][0])
        adapter.update(1.0)
        adapter.select_card(ids["apple"][0])
        adapter.select_card(ids["apple"][1])

        assert results == [(False, 0), (True, 2)]

    def test_board_changed_on_flip_back(self, adapter):
        """Test that the delayed flip-back notifies the UI."""
        changes = []
        adapter.set_callbacks(on_board_changed=lambda: changes.append(True))
        ids = _ids(adapter)

        adapter.select_card(ids["apple"][0])
        adapter.select_card(ids["banana"][0])
        changes.clear()

        adapter.update(1.0)
        assert changes == [True]
        assert not any(card.face_up for card in adapter.get_cards())

    def test_game_over_callback(self, adapter):
        over = []
        adapter.set_callbacks(on_game_over=lambda score, moves: over.append((score, moves)))
        ids = _ids(adapter)

        for symbol in ("apple", "banana"):
            adapter.select_card(ids[symbol][0])
            adapter.select_card(ids[symbol][1])

        assert over == [(4, 2)]
        assert adapter.is_over
        assert adapter.state == TurnState.OVER

    def test_new_game(self, adapter):
        ids = _ids(adapter)
        adapter.select_card(ids["apple"][0])
        adapter.new_game()

        assert adapter.moves == 0
        assert adapter.score == 0
        assert adapter.state == TurnState.IDLE
        assert adapter.get_snapshot().pending_selection is None

    def test_matched_cards_shown_face_up(self, adapter):
        ids = _ids(adapter)
        adapter.select_card(ids["apple"][0])
        adapter.select_card(ids["apple"][1])

        matched = [card for card in adapter.get_cards() if card.matched]
        assert len(matched) == 2
        assert all(card.face_up for card in matched)


class TestUICardInfo:
    """Tests for UICardInfo conversion."""

    def test_from_snapshot(self, adapter):
        snapshot = adapter.get_snapshot().cards[0]
        info = UICardInfo.from_snapshot(snapshot)
        assert info.card_id == snapshot.id
        assert info.symbol == snapshot.symbol
        assert not info.face_up
