"""Tests for configuration classes."""

import pytest

from config import AppConfig, DEFAULT_SYMBOLS, MatchConfig, config


class TestMatchConfig:
    """Tests for MatchConfig defaults."""

    def test_default_alphabet(self):
        """Test that the default alphabet has eight distinct symbols."""
        match = MatchConfig()
        assert match.symbols == DEFAULT_SYMBOLS
        assert len(set(match.symbols)) == 8

    def test_default_rules(self):
        match = MatchConfig()
        assert match.mismatch_delay == 1.0
        assert match.match_points == 2
        assert match.mismatch_penalty == 1
        assert match.seed is None

    def test_frozen(self):
        with pytest.raises(AttributeError):
            MatchConfig().mismatch_delay = 0.5


class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults(self):
        app = AppConfig()
        assert not app.debug
        assert app.log_level == "INFO"
        assert isinstance(app.match, MatchConfig)

    def test_global_instance(self):
        assert isinstance(config, AppConfig)
